import pytest

from til_bookmarks import create_app
from til_bookmarks.config import TestConfig
from til_bookmarks.models.bookmark import Bookmark
from til_bookmarks.services.bookmark_service import BookmarkService
from til_bookmarks.services.draft_service import DraftService
from til_bookmarks.services.storage_service import StorageService
from til_bookmarks.utils.database import BookmarkDatabase


@pytest.fixture
def database(tmp_path):
    """A fresh key-value store in a temporary directory"""
    return BookmarkDatabase(str(tmp_path / "bookmarks.db"))


@pytest.fixture
def storage(database):
    return StorageService(database)


@pytest.fixture
def drafts(database):
    return DraftService(database)


@pytest.fixture
def seed():
    return (
        Bookmark(id="seed-a", title="Seed A", url="https://a.example.com/", tags=["css"],
                 saved_at="2024-07-02T10:15:00.000Z"),
        Bookmark(id="seed-b", title="Seed B", url="https://github.com/pmndrs/zustand", url_type="GitHub",
                 tags=["react"], saved_at="2024-09-04T14:45:00.000Z"),
    )


@pytest.fixture
def service(storage, drafts, seed):
    return BookmarkService(storage, drafts, seed=seed)


@pytest.fixture
def app(tmp_path):
    app = create_app(TestConfig, {"DATABASE_PATH": str(tmp_path / "api.db")})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
