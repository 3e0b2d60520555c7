"""
Bookmarks API - Bookmark Service (Storage Gateway)
==================================================

What:  Single-statement operations against the `bookmarks` table.
How:   Each method receives the request's AsyncSession, runs one SQL
       statement, and flushes writes. The transaction is committed by the
       `get_db_session` dependency.
Who:   Called by the bookmark route handlers.

Not-found is signalled by return value (None / False), never by raising;
route handlers decide what that means for HTTP. Driver failures are logged
and re-raised as DatabaseError so no SQL details reach the client.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookmarks_api.exceptions import DatabaseError
from bookmarks_api.models.bookmark import Bookmark
from bookmarks_api.schemas.bookmark import BookmarkCreate

logger = logging.getLogger(__name__)


class BookmarkService:
    """
    Stateless gateway over the bookmarks table.

    Operations:
        - list_all():      SELECT * ORDER BY id
        - get_by_id():     SELECT ... WHERE id = :id
        - insert():        INSERT, returns the row with its generated id
        - delete_by_id():  DELETE ... WHERE id = :id
        - update_by_id():  UPDATE ... SET <supplied fields> WHERE id = :id
    """

    async def list_all(self, db: AsyncSession) -> List[Bookmark]:
        try:
            result = await db.execute(select(Bookmark).order_by(Bookmark.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing bookmarks: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve bookmarks.",
                context={"error_type": type(e).__name__},
            ) from e

    async def get_by_id(self, db: AsyncSession, bookmark_id: int) -> Optional[Bookmark]:
        """Returns the bookmark, or None when no row has this id."""
        try:
            result = await db.execute(
                select(Bookmark).where(Bookmark.id == bookmark_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching bookmark %s: %s", bookmark_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the bookmark.",
                context={"bookmark_id": bookmark_id, "error_type": type(e).__name__},
            ) from e

    async def insert(self, db: AsyncSession, fields: BookmarkCreate) -> Bookmark:
        """
        Persists a new bookmark.

        The flush assigns the primary key, so the returned object already
        carries its `id`.
        """
        bookmark = Bookmark(**fields.model_dump())
        try:
            db.add(bookmark)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error inserting bookmark: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the bookmark.",
                context={"error_type": type(e).__name__},
            ) from e
        return bookmark

    async def delete_by_id(self, db: AsyncSession, bookmark_id: int) -> bool:
        """Deletes the row; returns False if there was nothing to delete."""
        try:
            result = await db.execute(
                delete(Bookmark).where(Bookmark.id == bookmark_id)
            )
        except SQLAlchemyError as e:
            logger.error("Database error deleting bookmark %s: %s", bookmark_id, str(e))
            raise DatabaseError(
                message="Could not delete the bookmark.",
                context={"bookmark_id": bookmark_id, "error_type": type(e).__name__},
            ) from e
        return result.rowcount > 0

    async def update_by_id(
        self,
        db: AsyncSession,
        bookmark_id: int,
        fields: Dict[str, Any],
    ) -> bool:
        """
        Writes the supplied columns; columns not in `fields` keep their value.

        Returns False if no row has this id.
        """
        if not fields:
            return await self.get_by_id(db, bookmark_id) is not None
        try:
            result = await db.execute(
                update(Bookmark)
                .where(Bookmark.id == bookmark_id)
                .values(**fields)
                .execution_options(synchronize_session="fetch")
            )
        except SQLAlchemyError as e:
            logger.error("Database error updating bookmark %s: %s", bookmark_id, str(e))
            raise DatabaseError(
                message="Could not update the bookmark.",
                context={"bookmark_id": bookmark_id, "error_type": type(e).__name__},
            ) from e
        return result.rowcount > 0


bookmark_service = BookmarkService()
