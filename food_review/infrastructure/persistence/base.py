"""
Store Interfaces - Abstraction Layer for Review Persistence
============================================================

The service layer only talks to these interfaces. SQLite is the current
backend; tests plug in in-memory doubles.

USAGE:
    review_store: ReviewStore = SQLiteReviewStore("./db/review.db")
    dictionary_store: DictionaryStore = SQLiteDictionaryStore("./db/dictionary.db")
    service = ReviewService(review_store, dictionary_store)
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ...domain import Review


class ReviewStore(ABC):
    """
    Abstract base class for review persistence.
    Implementations raise StoreError for any backing failure.
    """

    @abstractmethod
    def list_all(self) -> List[Review]:
        """Return every review. An empty list means zero reviews, not an error."""
        ...

    @abstractmethod
    def get_by_id(self, review_id: int) -> Optional[Review]:
        """Return the review with this id, or None if there is no such row."""
        ...

    @abstractmethod
    def search_by_keyword(self, keyword: str) -> List[Review]:
        """Return reviews whose content contains keyword (case-sensitive), annotated with it."""
        ...

    @abstractmethod
    def update(self, review_id: int, content: str) -> int:
        """Replace content atomically. Returns the number of rows affected."""
        ...


class DictionaryStore(ABC):
    """Abstract base class for the controlled search vocabulary."""

    @abstractmethod
    def exists(self, keyword: str) -> bool:
        """True if keyword is in the dictionary. A missing row is False, not an error."""
        ...
