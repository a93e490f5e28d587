import pytest

from food_review.application import ReviewService
from food_review.infrastructure.persistence import SQLiteDictionaryStore, SQLiteReviewStore

SEED_REVIEWS = [
    (555, "This restaurant is overrated"),
    (666, "That restaurant is underrated"),
    (8888, "the foie gras was sublime"),
]

SEED_KEYWORDS = ["foie gras", "tiramisu", "restaurant", "Restaurant"]


@pytest.fixture
def review_store(tmp_path):
    return SQLiteReviewStore(str(tmp_path / "review.db")).init()


@pytest.fixture
def dictionary_store(tmp_path):
    return SQLiteDictionaryStore(str(tmp_path / "dictionary.db")).init()


@pytest.fixture
def seeded_stores(review_store, dictionary_store):
    review_store.add_reviews(SEED_REVIEWS)
    dictionary_store.add_keywords(SEED_KEYWORDS)
    return review_store, dictionary_store


@pytest.fixture
def service(seeded_stores):
    review_store, dictionary_store = seeded_stores
    return ReviewService(review_store, dictionary_store)
