from .base import DictionaryStore, ReviewStore
from .database import (
    DICTIONARY_INIT_STATEMENT,
    REVIEW_INIT_STATEMENT,
    SQLiteDatabase,
    SQLiteDictionaryStore,
    SQLiteReviewStore,
)

__all__ = [
    "ReviewStore",
    "DictionaryStore",
    "SQLiteDatabase",
    "SQLiteReviewStore",
    "SQLiteDictionaryStore",
    "REVIEW_INIT_STATEMENT",
    "DICTIONARY_INIT_STATEMENT",
]
