"""
Bookmarks API - Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the API contract.
How:   The validator builds BookmarkCreate / BookmarkUpdate from raw request
       bodies; the sanitizer builds BookmarkResponse from ORM rows. FastAPI
       uses the response models for serialization and OpenAPI docs.

Request bodies are NOT bound to these models directly: the field rules and
their exact error messages live in `services/validation.py`, which returns
these typed results.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Validated Input Models
# ══════════════════════════════════════════════════════════════════════════


class BookmarkCreate(BaseModel):
    """Fields of a new bookmark after validation."""
    title: str = Field(min_length=1)
    url: str
    rating: int = Field(ge=0, le=5)
    description: Optional[str] = None


class BookmarkUpdate(BaseModel):
    """
    Partial update after validation.

    Only the fields the client supplied are "set"; use
    `model_dump(exclude_unset=True)` to get the columns to write.
    """
    title: Optional[str] = Field(default=None, min_length=1)
    url: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=0, le=5)
    description: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BookmarkResponse(BaseModel):
    """
    Outbound representation of a bookmark.

    `title` and `description` are sanitized before this model is built.
    """
    id: int = Field(description="Server-assigned bookmark identifier")
    title: str = Field(description="Bookmark title (markup escaped)")
    url: str = Field(description="Absolute http(s) URL")
    rating: int = Field(description="Rating between 0 and 5")
    description: Optional[str] = Field(
        default=None,
        description="Optional description (markup escaped)",
    )

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    Error body for 400, 404 and 500 responses.

    Example:
        {"error": {"message": "Bookmark with id 42 not found"}}
    """
    error: ErrorDetail


class UnauthorizedResponse(BaseModel):
    """Body of 401 responses: {"error": "Unauthorized request"}."""
    error: str


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
