"""
Review Service - Use Case Orchestration
========================================

Composes the dictionary and review stores into the four use cases the web
layer exposes. All input validation happens here, before any store is
touched:

    fetch_all()                    every review
    fetch_by_id(raw_id)            one review
    search_by_keyword(keyword)     dictionary-gated substring search
    edit_content(raw_id, payload)  transactional content update

The stores report "no row" as None / [] / 0; this is the only layer that
turns those into ReviewNotFoundError.
"""

import re
import logging
from typing import List, Union

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from ..domain import (
    InvalidIdError,
    KeywordRejectedError,
    MAX_REVIEW_ID,
    MalformedPayloadError,
    Review,
    ReviewNotFoundError,
)
from ..infrastructure.persistence import DictionaryStore, ReviewStore

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"[0-9]+")


class ReviewEdit(BaseModel):
    """Body of an edit request. Only the content field is read."""
    model_config = ConfigDict(extra="ignore")

    review: StrictStr


def parse_review_id(raw_id: Union[str, int]) -> int:
    """
    Parse a review id from request input.

    Only plain ASCII digits are accepted: no sign, no whitespace, no
    decimal point, no path separators. Values above MAX_REVIEW_ID are
    rejected as well.

    Raises:
        InvalidIdError: if raw_id is not a valid id.
    """
    if isinstance(raw_id, bool):
        raise InvalidIdError(raw_id)

    if isinstance(raw_id, int):
        review_id = raw_id
    elif isinstance(raw_id, str) and _ID_PATTERN.fullmatch(raw_id):
        review_id = int(raw_id)
    else:
        raise InvalidIdError(raw_id)

    if not 0 <= review_id <= MAX_REVIEW_ID:
        raise InvalidIdError(raw_id)
    return review_id


def parse_edit_payload(raw_payload: Union[bytes, str, dict]) -> ReviewEdit:
    """
    Parse an edit request body into a ReviewEdit.

    Raises:
        MalformedPayloadError: body is not JSON, not an object, or has no
            text-typed "review" field.
    """
    try:
        if isinstance(raw_payload, dict):
            return ReviewEdit.model_validate(raw_payload)
        return ReviewEdit.model_validate_json(raw_payload)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}"
            for err in e.errors()
        )
        raise MalformedPayloadError(f"Malformed review payload: {errors}") from e


class ReviewService:
    """
    Review use cases over a review store and a dictionary store.

    USAGE:
        service = ReviewService(review_store, dictionary_store)
        reviews = service.search_by_keyword("foie gras")
        service.edit_content("8888", b'{"review": "the foie gras was sublime"}')

    ERRORS:
    - InvalidIdError: id is malformed (no store access happened)
    - KeywordRejectedError: keyword not in dictionary (review store not queried)
    - ReviewNotFoundError: no review for the id, or no search match
    - MalformedPayloadError: edit body could not be parsed
    - StoreError: any backing store failure, propagated untouched
    """

    def __init__(self, review_store: ReviewStore, dictionary_store: DictionaryStore):
        self._reviews = review_store
        self._dictionary = dictionary_store

    def fetch_all(self) -> List[Review]:
        return self._reviews.list_all()

    def fetch_by_id(self, raw_id: Union[str, int]) -> Review:
        review_id = parse_review_id(raw_id)

        review = self._reviews.get_by_id(review_id)
        if review is None:
            raise ReviewNotFoundError("No Review with this ID")
        return review

    def search_by_keyword(self, keyword: str) -> List[Review]:
        """
        Dictionary-gated search.

        The dictionary is consulted first; an unknown keyword never reaches
        the review store.
        """
        if not self._dictionary.exists(keyword):
            logger.info(f"Rejected search keyword: {keyword!r}")
            raise KeywordRejectedError(keyword)

        reviews = self._reviews.search_by_keyword(keyword)
        if not reviews:
            raise ReviewNotFoundError("No review you are looking for")
        return reviews

    def edit_content(self, raw_id: Union[str, int], raw_payload: Union[bytes, str, dict]) -> None:
        review_id = parse_review_id(raw_id)
        edit = parse_edit_payload(raw_payload)

        affected = self._reviews.update(review_id, edit.review)
        if affected == 0:
            logger.warning(f"Edit for missing review {review_id} changed nothing")
            raise ReviewNotFoundError("No Review with this ID")
