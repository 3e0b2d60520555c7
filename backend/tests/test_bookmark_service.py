"""
Bookmarks API - Bookmark Service Unit Tests
===========================================

What:  Tests for the storage gateway (list, get, insert, delete, update).
How:   Uses mock DB sessions; no real database.

What we test:
    ✅ Not-found is signalled by None / False, never by raising
    ✅ Insert flushes so the generated id is available
    ✅ Driver errors become DatabaseError without leaking SQL
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from bookmarks_api.exceptions import DatabaseError
from bookmarks_api.models.bookmark import Bookmark
from bookmarks_api.schemas.bookmark import BookmarkCreate
from bookmarks_api.services.bookmark_service import BookmarkService


def driver_error():
    return OperationalError("SELECT * FROM bookmarks", {}, Exception("connection lost"))


class TestBookmarkServiceRead:

    def setup_method(self):
        self.service = BookmarkService()

    @pytest.mark.asyncio
    async def test_list_all_returns_rows(self, mock_db_session):
        rows = [MagicMock(id=1), MagicMock(id=2)]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = rows
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_all(mock_db_session)

        assert result == rows

    @pytest.mark.asyncio
    async def test_list_all_empty(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        assert await self.service.list_all(mock_db_session) == []

    @pytest.mark.asyncio
    async def test_get_by_id_found(self, mock_db_session):
        row = MagicMock(id=2)
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = row
        mock_db_session.execute.return_value = mock_result

        assert await self.service.get_by_id(mock_db_session, 2) is row

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_db_session.execute.return_value = mock_result

        assert await self.service.get_by_id(mock_db_session, 404) is None

    @pytest.mark.asyncio
    async def test_driver_error_becomes_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=driver_error())

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_all(mock_db_session)

        assert "SELECT" not in exc_info.value.message
        assert exc_info.value.context["error_type"] == "OperationalError"


class TestBookmarkServiceWrite:

    def setup_method(self):
        self.service = BookmarkService()

    @pytest.mark.asyncio
    async def test_insert_adds_and_flushes(self, mock_db_session):
        fields = BookmarkCreate(title="t", url="https://example.com", rating=2)

        bookmark = await self.service.insert(mock_db_session, fields)

        assert isinstance(bookmark, Bookmark)
        assert bookmark.title == "t"
        assert bookmark.rating == 2
        assert bookmark.description is None
        mock_db_session.add.assert_called_once_with(bookmark)
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_insert_flush_error_becomes_database_error(self, mock_db_session):
        mock_db_session.flush = AsyncMock(side_effect=driver_error())
        fields = BookmarkCreate(title="t", url="https://example.com", rating=2)

        with pytest.raises(DatabaseError):
            await self.service.insert(mock_db_session, fields)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rowcount, expected", [(1, True), (0, False)])
    async def test_delete_by_id_reports_rowcount(self, mock_db_session, rowcount, expected):
        mock_db_session.execute.return_value = MagicMock(rowcount=rowcount)

        assert await self.service.delete_by_id(mock_db_session, 2) is expected

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rowcount, expected", [(1, True), (0, False)])
    async def test_update_by_id_reports_rowcount(self, mock_db_session, rowcount, expected):
        mock_db_session.execute.return_value = MagicMock(rowcount=rowcount)

        result = await self.service.update_by_id(mock_db_session, 2, {"title": "new"})

        assert result is expected
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_error_becomes_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=driver_error())

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.update_by_id(mock_db_session, 2, {"rating": 1})

        assert exc_info.value.context["bookmark_id"] == 2
