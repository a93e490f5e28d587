# Application Layer
# =================
# Use cases and validation ordering. Depends on domain types and store
# interfaces only, never on a concrete backend.

from .review_service import (
    MAX_REVIEW_ID,
    ReviewEdit,
    ReviewService,
    parse_edit_payload,
    parse_review_id,
)

__all__ = [
    "ReviewService",
    "ReviewEdit",
    "MAX_REVIEW_ID",
    "parse_review_id",
    "parse_edit_payload",
]
