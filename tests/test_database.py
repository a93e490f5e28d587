import sqlite3

import pytest

from food_review.domain import Review, StoreError
from food_review.infrastructure.persistence import SQLiteDictionaryStore, SQLiteReviewStore


# ── Init ─────────────────────────────────────────────────────────────────


def test_init_creates_directory_and_table(tmp_path):
    path = tmp_path / "nested" / "review.db"
    store = SQLiteReviewStore(str(path)).init()

    assert path.exists()
    assert store.list_all() == []


def test_init_is_idempotent(tmp_path):
    path = str(tmp_path / "review.db")
    SQLiteReviewStore(path).init().add_reviews([(1, "kept")])
    store = SQLiteReviewStore(path).init()

    assert store.get_by_id(1).content == "kept"


def test_init_invalid_statement():
    store = SQLiteReviewStore(
        ":memory:",
        init_statement="""
            CREATE TABLE IF NOT EXIT
            review (
                review_id INTEGER PRIMARY KEY,
                review TEXT
            )
        """,
    )
    with pytest.raises(StoreError, match="syntax error"):
        store.init()


def test_init_unusable_path(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    store = SQLiteReviewStore(str(blocker / "review.db"))

    with pytest.raises(StoreError):
        store.init()


def test_store_error_keeps_sqlite_cause(tmp_path):
    # Table was never created
    store = SQLiteDictionaryStore(str(tmp_path / "dictionary.db"))

    with pytest.raises(StoreError, match="no such table") as exc_info:
        store.exists("tiramisu")
    assert isinstance(exc_info.value.__cause__, sqlite3.Error)


# ── Review reads ─────────────────────────────────────────────────────────


def test_list_all_empty_is_success(review_store):
    assert review_store.list_all() == []


def test_list_all(seeded_stores):
    review_store, _ = seeded_stores
    reviews = review_store.list_all()

    assert len(reviews) == 3
    assert reviews[0] == Review(id=555, content="This restaurant is overrated")
    assert reviews[1].content == "That restaurant is underrated"
    assert all(r.keyword is None for r in reviews)


def test_get_by_id(seeded_stores):
    review_store, _ = seeded_stores

    review = review_store.get_by_id(8888)
    assert review.id == 8888
    assert review.content == "the foie gras was sublime"


def test_get_by_id_missing(seeded_stores):
    review_store, _ = seeded_stores
    assert review_store.get_by_id(9999999) is None


def test_null_content_reads_as_empty(review_store):
    conn = sqlite3.connect(review_store.db_path)
    conn.execute("INSERT INTO review (review_id, review) VALUES (7, NULL)")
    conn.commit()
    conn.close()

    assert review_store.get_by_id(7).content == ""


# ── Search ───────────────────────────────────────────────────────────────


def test_search_annotates_matches(seeded_stores):
    review_store, _ = seeded_stores
    reviews = review_store.search_by_keyword("restaurant")

    assert [r.id for r in reviews] == [555, 666]
    assert all(r.keyword == "restaurant" for r in reviews)
    assert all("restaurant" in r.content for r in reviews)


def test_search_no_match_is_empty(seeded_stores):
    review_store, _ = seeded_stores
    assert review_store.search_by_keyword("cockroach") == []


def test_search_is_case_sensitive(seeded_stores):
    review_store, _ = seeded_stores
    assert review_store.search_by_keyword("Restaurant") == []
    assert len(review_store.search_by_keyword("This")) == 1


def test_search_matches_anywhere_in_text(review_store):
    review_store.add_reviews([(1, "tiramisu"), (2, "best tiramisu ever"), (3, "TIRAMISU")])
    assert [r.id for r in review_store.search_by_keyword("tiramisu")] == [1, 2]


@pytest.mark.parametrize("keyword", ["'", "x' OR '1'='1", "%", "_", "'; DROP TABLE review; --"])
def test_search_keyword_is_bound_not_interpolated(seeded_stores, keyword):
    review_store, _ = seeded_stores

    assert review_store.search_by_keyword(keyword) == []
    assert len(review_store.list_all()) == 3


def test_search_literal_wildcard_characters(review_store):
    review_store.add_reviews([(1, "100% worth it"), (2, "100 percent")])
    assert [r.id for r in review_store.search_by_keyword("100%")] == [1]


# ── Update ───────────────────────────────────────────────────────────────


def test_update(seeded_stores):
    review_store, _ = seeded_stores

    assert review_store.update(555, "Actually underrated") == 1
    assert review_store.get_by_id(555).content == "Actually underrated"
    assert review_store.get_by_id(666).content == "That restaurant is underrated"


def test_update_missing_id_affects_nothing(seeded_stores):
    review_store, _ = seeded_stores

    assert review_store.update(1234, "ghost") == 0
    assert review_store.get_by_id(1234) is None


class BrokenUpdateStore(SQLiteReviewStore):
    UPDATE_STATEMENT = "UPDATE review SET no_such_column = ? WHERE review_id = ?"


def test_update_failure_leaves_no_partial_effect(seeded_stores):
    review_store, _ = seeded_stores
    broken = BrokenUpdateStore(review_store.db_path)

    with pytest.raises(StoreError):
        broken.update(555, "never written")

    assert review_store.get_by_id(555).content == "This restaurant is overrated"
    # Lock released: a normal write still goes through
    assert review_store.update(555, "written") == 1


# ── Seeding ──────────────────────────────────────────────────────────────


def test_add_reviews_skips_existing_ids(review_store):
    assert review_store.add_reviews([(1, "first"), (2, "second")]) == 2
    assert review_store.add_reviews([(1, "duplicate"), (3, "third")]) == 1

    assert review_store.get_by_id(1).content == "first"
    assert review_store.count() == 3


def test_add_reviews_assigns_ids(review_store):
    review_store.add_reviews([(None, "auto one"), (None, "auto two")])
    ids = [r.id for r in review_store.list_all()]

    assert len(ids) == 2
    assert ids[0] != ids[1]


# ── Dictionary ───────────────────────────────────────────────────────────


def test_dictionary_exists(seeded_stores):
    _, dictionary_store = seeded_stores

    assert dictionary_store.exists("foie gras") is True
    assert dictionary_store.exists("foie") is False
    assert dictionary_store.exists("FOIE GRAS") is False


def test_dictionary_empty(dictionary_store):
    assert dictionary_store.exists("anything") is False
    assert dictionary_store.count() == 0


def test_add_keywords_deduplicates(dictionary_store):
    assert dictionary_store.add_keywords(["tiramisu", "ramen", "tiramisu"]) == 2
    assert dictionary_store.add_keywords(["ramen", "pho"]) == 1
    assert dictionary_store.count() == 3
