"""
Review Model - Core Domain Record
=================================

A review is an identifier plus free text. The identifier is assigned by
storage and never changes; only the content is editable.
"""

from dataclasses import dataclass
from typing import Optional

# Review ids are unsigned 32-bit integers
MAX_REVIEW_ID = 2**32 - 1


@dataclass
class Review:
    """Review record from database."""
    id: int
    content: str
    # Set only on search results, never persisted
    keyword: Optional[str] = None
