"""
Domain Errors - Failure Taxonomy for the Review Service
========================================================

Every failure the service can report is one of these classes. The web
layer maps them to HTTP status codes; nothing below the web layer knows
about HTTP.

    InvalidIdError          client sent an id that is not a uint32
    MalformedPayloadError   write body is not {"review": "<text>"}
    KeywordRejectedError    search term is not in the dictionary
    ReviewNotFoundError     no review with this id / no search match
    StoreError              any failure of the backing store
"""


class ReviewServiceError(Exception):
    """Base exception for review service errors."""
    pass


class InvalidIdError(ReviewServiceError):
    """Review id failed to parse as a non-negative 32-bit integer."""

    def __init__(self, raw_id):
        self.raw_id = raw_id
        super().__init__("Invalid ID")


class MalformedPayloadError(ReviewServiceError):
    """Edit payload could not be parsed into review content."""
    pass


class KeywordRejectedError(ReviewServiceError):
    """Search keyword is not present in the dictionary."""

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__("Keyword not in dictionary")


class ReviewNotFoundError(ReviewServiceError):
    """No review matched the requested id or keyword."""
    pass


class StoreError(ReviewServiceError):
    """Backing store failure (connection, SQL, transaction)."""
    pass
