"""
FastAPI Web Application - Food Review Server
=============================================

HTTP surface over the review service:

    GET /                      fixed greeting
    GET /reviews               all reviews            (reviews.html)
    GET /reviews?query=<kw>    dictionary-gated search (reviews_keyword.html)
    GET /reviews/{id}          one review             (review.html)
    GET /reviews/{id}/edit     edit form              (edit.html)
    PUT /reviews/{id}          replace review text, body {"review": "..."}

Status mapping: bad id or bad body 400, unknown keyword / no match /
no such review 422, store or renderer failure 500. Error bodies carry the
error text as plain text.
"""

import logging
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool

from ..application import ReviewService
from ..domain import (
    InvalidIdError,
    KeywordRejectedError,
    MalformedPayloadError,
    ReviewNotFoundError,
    ReviewServiceError,
    StoreError,
)
from ..infrastructure.config import Settings, get_settings
from ..infrastructure.persistence import SQLiteDictionaryStore, SQLiteReviewStore
from .templates import TemplateError, TemplateRenderer

logging.basicConfig(level=get_settings().logging_level)
logger = logging.getLogger(__name__)

ERROR_STATUS = (
    (InvalidIdError, 400),
    (MalformedPayloadError, 400),
    (KeywordRejectedError, 422),
    (ReviewNotFoundError, 422),
    (StoreError, 500),
    (TemplateError, 500),
)


def build_review_service(settings: Settings) -> ReviewService:
    """Open (and create if needed) both SQLite stores and wire the service."""
    db_settings = settings.database
    review_store = SQLiteReviewStore(
        db_settings.review_db_path, timeout=db_settings.timeout_seconds
    ).init()
    dictionary_store = SQLiteDictionaryStore(
        db_settings.dictionary_db_path, timeout=db_settings.timeout_seconds
    ).init()
    return ReviewService(review_store, dictionary_store)


def _error_response(error: Exception) -> PlainTextResponse:
    """Translate a service or renderer error into a plain-text response."""
    status = 500
    for error_type, error_status in ERROR_STATUS:
        if isinstance(error, error_type):
            status = error_status
            break

    if status >= 500:
        logger.exception(f"Request failed: {error}")
    else:
        logger.info(f"Request rejected ({status}): {error}")
    return PlainTextResponse(str(error), status_code=status)


# ── Dependencies ───────────────────────────────────────────────

def get_service(request: Request) -> ReviewService:
    return request.app.state.service


def get_renderer(request: Request) -> TemplateRenderer:
    return request.app.state.renderer


# ══════════════════════════════════════════════════════════════════
#  ROUTES
# ══════════════════════════════════════════════════════════════════

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def index():
    return "hello world"


@router.get("/reviews", response_class=HTMLResponse)
def list_reviews(
    query: Optional[str] = None,
    service: ReviewService = Depends(get_service),
    renderer: TemplateRenderer = Depends(get_renderer),
):
    try:
        if query is None:
            reviews = service.fetch_all()
            return HTMLResponse(renderer.render("reviews.html", reviews))

        reviews = service.search_by_keyword(query)
        return HTMLResponse(renderer.render("reviews_keyword.html", reviews))
    except (ReviewServiceError, TemplateError) as e:
        return _error_response(e)


@router.get("/reviews/{review_id}", response_class=HTMLResponse)
def get_review(
    review_id: str,
    service: ReviewService = Depends(get_service),
    renderer: TemplateRenderer = Depends(get_renderer),
):
    try:
        review = service.fetch_by_id(review_id)
        return HTMLResponse(renderer.render("review.html", review))
    except (ReviewServiceError, TemplateError) as e:
        return _error_response(e)


@router.get("/reviews/{review_id}/edit", response_class=HTMLResponse)
def edit_review_page(
    review_id: str,
    service: ReviewService = Depends(get_service),
    renderer: TemplateRenderer = Depends(get_renderer),
):
    try:
        review = service.fetch_by_id(review_id)
        return HTMLResponse(renderer.render("edit.html", review))
    except (ReviewServiceError, TemplateError) as e:
        return _error_response(e)


@router.put("/reviews/{review_id}")
async def edit_review(
    review_id: str,
    request: Request,
    service: ReviewService = Depends(get_service),
):
    body = await request.body()
    try:
        # Store calls block; keep them off the event loop
        await run_in_threadpool(service.edit_content, review_id, body)
    except ReviewServiceError as e:
        return _error_response(e)
    return Response(status_code=200)


# ── App factory ────────────────────────────────────────────────

def create_app(
    service: Optional[ReviewService] = None,
    renderer: Optional[TemplateRenderer] = None,
) -> FastAPI:
    """
    Build the application with explicit dependencies.

    Without a service, the SQLite stores named in settings are opened
    during startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.service is None:
            settings = get_settings()
            for issue in settings.validate():
                logger.warning(issue)
            app.state.service = build_review_service(settings)
            logger.info("Review and dictionary stores ready")
        yield

    app = FastAPI(title="Food Review", description="Dictionary-gated restaurant reviews", lifespan=lifespan)
    app.state.service = service
    app.state.renderer = renderer if renderer is not None else TemplateRenderer()
    app.include_router(router)
    return app


app = create_app()
