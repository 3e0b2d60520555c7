"""
Bookmarks API - Bookmark Validator
==================================

What:  Field rules for bookmark request bodies.
How:   Each public function takes the decoded JSON body, raises
       ValidationError naming the first offending field, and otherwise
       returns a typed, validated model.
Who:   Called by the bookmark route handlers before any database work.

Rules:
    Create:
        - title, url, rating are required (checked in that order)
        - url must be an absolute http(s) URL with a host
        - rating must be an integer between 0 and 5 inclusive
    Update:
        - at least one of title, url, rating, description must be present
        - each supplied field follows the create rules
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from bookmarks_api.exceptions import ValidationError
from bookmarks_api.schemas.bookmark import BookmarkCreate, BookmarkUpdate

REQUIRED_FIELDS = ("title", "url", "rating")
UPDATABLE_FIELDS = ("title", "url", "rating", "description")

MIN_RATING = 0
MAX_RATING = 5

URL_INVALID = "url must be valid"
RATING_INVALID = f"rating must be a number between {MIN_RATING} and {MAX_RATING}"
UPDATE_EMPTY = (
    "Request body must contain either 'title', 'url', 'rating' or 'description'"
)

_http_url = TypeAdapter(HttpUrl)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _fail(message: str, field: Optional[str] = None) -> ValidationError:
    return ValidationError(message=message, field=field)


def check_url(url: Any) -> str:
    """Returns `url` unchanged if it is an absolute http(s) URL with a host."""
    if not isinstance(url, str):
        raise _fail(URL_INVALID, field="url")
    try:
        parsed = _http_url.validate_python(url)
    except PydanticValidationError:
        raise _fail(URL_INVALID, field="url") from None
    if not parsed.host:
        raise _fail(URL_INVALID, field="url")
    return url


def check_rating(rating: Any) -> int:
    """
    Returns the rating as an int.

    Integral floats (3.0) are accepted; booleans, strings and fractional
    numbers are not.
    """
    if isinstance(rating, bool):
        raise _fail(RATING_INVALID, field="rating")
    if isinstance(rating, float):
        if not rating.is_integer():
            raise _fail(RATING_INVALID, field="rating")
        rating = int(rating)
    if not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
        raise _fail(RATING_INVALID, field="rating")
    return rating


def _check_text(field: str, value: Any) -> Any:
    if value is not None and not isinstance(value, str):
        raise _fail(f"{field} must be a string", field=field)
    return value


def _as_mapping(payload: Any) -> Mapping[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise _fail("Request body must be a JSON object")
    return payload


def validate_new_bookmark(payload: Any) -> BookmarkCreate:
    """
    Validates a POST body.

    Raises:
        ValidationError: "<field> is required", "url must be valid" or
            "rating must be a number between 0 and 5".
    """
    body = _as_mapping(payload)

    for field in REQUIRED_FIELDS:
        if _is_missing(body.get(field)):
            raise _fail(f"{field} is required", field=field)

    title = _check_text("title", body["title"])
    url = check_url(body["url"])
    rating = check_rating(body["rating"])
    description = _check_text("description", body.get("description"))

    return BookmarkCreate(title=title, url=url, rating=rating, description=description)


def validate_bookmark_update(payload: Any) -> BookmarkUpdate:
    """
    Validates a PATCH body.

    Unknown keys (including `id`) are dropped. The returned model has
    exactly the supplied fields set.
    """
    body = _as_mapping(payload)
    supplied: Dict[str, Any] = {
        field: body[field] for field in UPDATABLE_FIELDS if field in body
    }
    if not supplied:
        raise _fail(UPDATE_EMPTY)

    if "title" in supplied:
        title = _check_text("title", supplied["title"])
        if _is_missing(title):
            raise _fail("title must not be empty", field="title")
    if "url" in supplied:
        check_url(supplied["url"])
    if "rating" in supplied:
        supplied["rating"] = check_rating(supplied["rating"])
    if "description" in supplied:
        _check_text("description", supplied["description"])

    return BookmarkUpdate(**supplied)
