"""
Bookmarks API - Bookmark Route Handlers
=======================================

What:  The five bookmark operations: list, get, create, delete, update.
How:   Each handler runs validate → gateway call → serialize → respond.
       Validation and not-found conditions are raised as ValidationError /
       NotFoundError and turned into JSON by the global handlers in main.py.
Who:   Any API client holding the bearer token.

Route Inventory:
    GET    /bookmarks          200 list
    GET    /bookmarks/{id}     200 record | 404
    POST   /bookmarks          201 + Location | 400
    DELETE /bookmarks/{id}     204 | 404
    PATCH  /bookmarks/{id}     204 | 400 | 404
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks_api.config import settings
from bookmarks_api.database import get_db_session
from bookmarks_api.exceptions import NotFoundError
from bookmarks_api.schemas.bookmark import (
    BookmarkResponse,
    ErrorResponse,
    UnauthorizedResponse,
)
from bookmarks_api.services.bookmark_service import bookmark_service
from bookmarks_api.services.sanitizer import serialize_bookmark
from bookmarks_api.services.validation import (
    validate_bookmark_update,
    validate_new_bookmark,
)

logger = logging.getLogger(__name__)

RESOURCE = "Bookmark"

# Largest value the integer primary key column can hold
INT4_MAX = 2_147_483_647

router = APIRouter(
    prefix=settings.api_prefix,
    tags=["Bookmarks"],
    responses={
        401: {"description": "Missing or invalid bearer token", "model": UnauthorizedResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
)

# Bodies are taken as raw JSON so the validator owns the error messages.
RawBody = Any


def ensure_addressable(bookmark_id: int) -> None:
    """Raises NotFoundError for ids no stored row can have."""
    if not 1 <= bookmark_id <= INT4_MAX:
        logger.warning("Bookmark with id %s not found.", bookmark_id)
        raise NotFoundError(resource=RESOURCE, resource_id=bookmark_id)


@router.get(
    "/bookmarks",
    response_model=List[BookmarkResponse],
    summary="List all bookmarks",
)
async def list_bookmarks(
    db: AsyncSession = Depends(get_db_session),
) -> List[BookmarkResponse]:
    bookmarks = await bookmark_service.list_all(db)
    return [serialize_bookmark(bookmark) for bookmark in bookmarks]


@router.get(
    "/bookmarks/{bookmark_id}",
    response_model=BookmarkResponse,
    responses={404: {"description": "Bookmark not found", "model": ErrorResponse}},
    summary="Get a single bookmark by id",
)
async def get_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> BookmarkResponse:
    ensure_addressable(bookmark_id)
    bookmark = await bookmark_service.get_by_id(db, bookmark_id)
    if bookmark is None:
        logger.warning("Bookmark with id %s not found.", bookmark_id)
        raise NotFoundError(resource=RESOURCE, resource_id=bookmark_id)
    return serialize_bookmark(bookmark)


@router.post(
    "/bookmarks",
    status_code=status.HTTP_201_CREATED,
    response_model=BookmarkResponse,
    responses={400: {"description": "Invalid bookmark fields", "model": ErrorResponse}},
    summary="Create a bookmark",
)
async def create_bookmark(
    request: Request,
    response: Response,
    payload: RawBody = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> BookmarkResponse:
    """
    Creates a bookmark from `{title, url, rating, description?}`.

    The Location header is the request path joined with the new id, so it
    follows whatever prefix the router is mounted under.
    """
    fields = validate_new_bookmark(payload)
    bookmark = await bookmark_service.insert(db, fields)

    logger.info("Bookmark with id %s created.", bookmark.id)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{bookmark.id}"
    return serialize_bookmark(bookmark)


@router.delete(
    "/bookmarks/{bookmark_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Bookmark not found", "model": ErrorResponse}},
    summary="Delete a bookmark",
)
async def delete_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    ensure_addressable(bookmark_id)
    deleted = await bookmark_service.delete_by_id(db, bookmark_id)
    if not deleted:
        logger.warning("Bookmark with id %s not found.", bookmark_id)
        raise NotFoundError(resource=RESOURCE, resource_id=bookmark_id)

    logger.info("Bookmark with id %s deleted.", bookmark_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/bookmarks/{bookmark_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Empty or invalid update", "model": ErrorResponse},
        404: {"description": "Bookmark not found", "model": ErrorResponse},
    },
    summary="Update some fields of a bookmark",
)
async def update_bookmark(
    bookmark_id: int,
    payload: RawBody = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """
    Merges the supplied fields into the stored bookmark.

    Existence is checked before the body, so an unknown id is always 404.
    """
    ensure_addressable(bookmark_id)
    if await bookmark_service.get_by_id(db, bookmark_id) is None:
        logger.warning("Bookmark with id %s not found.", bookmark_id)
        raise NotFoundError(resource=RESOURCE, resource_id=bookmark_id)

    changes = validate_bookmark_update(payload)
    updated = await bookmark_service.update_by_id(
        db, bookmark_id, changes.model_dump(exclude_unset=True)
    )
    if not updated:
        # Deleted between the lookup and the update
        raise NotFoundError(resource=RESOURCE, resource_id=bookmark_id)

    logger.info("Bookmark with id %s updated.", bookmark_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
