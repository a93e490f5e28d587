# Domain Layer
# ============
# Pure data and error types. No I/O, no framework imports.

from .errors import (
    InvalidIdError,
    KeywordRejectedError,
    MalformedPayloadError,
    ReviewNotFoundError,
    ReviewServiceError,
    StoreError,
)
from .review import MAX_REVIEW_ID, Review

__all__ = [
    "Review",
    "MAX_REVIEW_ID",
    "ReviewServiceError",
    "InvalidIdError",
    "KeywordRejectedError",
    "MalformedPayloadError",
    "ReviewNotFoundError",
    "StoreError",
]
