"""
Bookmarks API - Bookmark SQLAlchemy Model
=========================================

What:  ORM model representing the `bookmarks` table.
Who:   Used by BookmarkService for table access and by `create_tables()`.

Table Design:
    - id: Integer primary key assigned by the database (SERIAL / rowid)
    - title, url: required text
    - rating: 0-5, guarded by a CHECK constraint as well as the validator
    - description: optional free text
"""

from typing import Optional

from sqlalchemy import CheckConstraint, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookmarks_api.database import Base


class Bookmark(Base):
    """
    A saved link with a rating and an optional description.

    Lifecycle:
        1. Inserted by POST /bookmarks (id assigned on flush)
        2. Updated in place by PATCH /bookmarks/{id}
        3. Removed by DELETE /bookmarks/{id} (hard delete)
    """

    __tablename__ = "bookmarks"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    url: Mapped[str] = mapped_column(Text, nullable=False)

    rating: Mapped[int] = mapped_column(Integer, nullable=False)

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_bookmarks_rating_range"),
    )

    def __repr__(self) -> str:
        return f"<Bookmark(id={self.id}, title='{self.title}', rating={self.rating})>"
