"""
Bookmarks API - Output Sanitizer
================================

What:  Cleans free-text bookmark fields before they leave the API.
How:   A bleach Cleaner with a small allow-list. Tags outside the list are
       escaped (`<script>` → `&lt;script&gt;`), attributes outside the list
       (event handlers such as `onerror`) are dropped. Bare ampersands in
       plain text are left as typed.
Who:   Every route that returns a bookmark goes through serialize_bookmark().

Stored values are never rewritten; cleaning happens on every read.
"""

from typing import Optional

from bleach.sanitizer import ALLOWED_ATTRIBUTES, ALLOWED_TAGS, Cleaner

from bookmarks_api.models.bookmark import Bookmark
from bookmarks_api.schemas.bookmark import BookmarkResponse

_ALLOWED_TAGS = sorted(set(ALLOWED_TAGS) | {"img"})

_ALLOWED_ATTRS = {
    **ALLOWED_ATTRIBUTES,
    "img": ["src", "alt", "title"],
}

_ALLOWED_PROTOCOLS = ["http", "https", "mailto"]

_TEXT_CLEANER = Cleaner(
    tags=_ALLOWED_TAGS,
    attributes=_ALLOWED_ATTRS,
    protocols=_ALLOWED_PROTOCOLS,
    strip=False,
    strip_comments=True,
)


def clean_text(value: Optional[str]) -> Optional[str]:
    """Returns `value` with unsafe markup neutralised; None passes through."""
    if value is None:
        return None
    # bleach entity-encodes every bare "&"; only markup should change
    return _TEXT_CLEANER.clean(value).replace("&amp;", "&")


def serialize_bookmark(bookmark: Bookmark) -> BookmarkResponse:
    """Builds the outbound record: cleaned title/description, integer rating."""
    return BookmarkResponse(
        id=bookmark.id,
        title=clean_text(bookmark.title),
        url=bookmark.url,
        rating=int(bookmark.rating),
        description=clean_text(bookmark.description),
    )
