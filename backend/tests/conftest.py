"""
Bookmarks API - Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment variables are set BEFORE the application is imported, so
       the module-level settings and engine point at a throwaway SQLite file
       (driven through aiosqlite) and a known API token.

Fixture Hierarchy:
    ├── mock_db_session:  AsyncMock session for gateway unit tests
    ├── db_tables:        creates / drops the bookmarks table around a test
    ├── test_bookmarks:   four well-formed bookmark rows
    ├── seeded_bookmarks: test_bookmarks inserted into the table
    ├── auth_headers:     Authorization header with the test token
    └── test_client:      HTTPX AsyncClient talking to the ASGI app
"""

import os
import tempfile
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock

# Settings and engine are built at import time
_TEST_DIR = tempfile.mkdtemp(prefix="bookmarks_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TEST_DIR, 'test.db')}"
os.environ["API_TOKEN"] = "test-api-token"
os.environ["API_PREFIX"] = ""
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from bookmarks_api.database import Base, async_session_factory, engine  # noqa: E402
from bookmarks_api.models.bookmark import Bookmark  # noqa: E402

TEST_API_TOKEN = "test-api-token"


def make_bookmarks_array() -> List[Dict[str, Any]]:
    """Rows as they are stored and as the API returns them (no markup)."""
    return [
        {
            "id": 1,
            "title": "Thinkful",
            "url": "https://www.thinkful.com",
            "rating": 5,
            "description": "Think outside the classroom",
        },
        {
            "id": 2,
            "title": "Google",
            "url": "https://www.google.com",
            "rating": 4,
            "description": "Where we find everything else",
        },
        {
            "id": 3,
            "title": "MDN",
            "url": "https://developer.mozilla.org",
            "rating": 5,
            "description": "The only place to find web documentation",
        },
        {
            "id": 4,
            "title": "Python docs",
            "url": "https://docs.python.org/3/",
            "rating": 3,
            "description": None,
        },
    ]


def make_malicious_bookmark() -> Dict[str, Any]:
    """A stored row carrying markup, and what the API must return for it."""
    stored = {
        "id": 911,
        "title": 'Naughty naughty very naughty <script>alert("xss");</script>',
        "url": "https://www.hackers.com",
        "rating": 1,
        "description": (
            'Bad image <img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
        ),
    }
    expected = {
        **stored,
        "title": 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
        "description": (
            'Bad image <img src="https://url.to.file.which/does-not.exist">. '
            "But not <strong>all</strong> bad."
        ),
    }
    return {"stored": stored, "expected": expected}


@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession for gateway unit tests.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def test_bookmarks() -> List[Dict[str, Any]]:
    return make_bookmarks_array()


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {TEST_API_TOKEN}"}


@pytest_asyncio.fixture
async def db_tables():
    """Creates the schema before a test and drops it afterwards."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


async def insert_rows(rows: List[Dict[str, Any]]) -> None:
    async with async_session_factory() as session:
        session.add_all([Bookmark(**row) for row in rows])
        await session.commit()


@pytest_asyncio.fixture
async def seeded_bookmarks(db_tables, test_bookmarks):
    await insert_rows(test_bookmarks)
    return test_bookmarks


@pytest_asyncio.fixture
async def test_client(db_tables):
    """
    HTTPX AsyncClient routed straight into the FastAPI app.

    Usage:
        async def test_list(test_client, auth_headers):
            response = await test_client.get("/bookmarks", headers=auth_headers)
    """
    from bookmarks_api.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
