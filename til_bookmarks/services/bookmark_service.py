from typing import List, Dict, Any, BinaryIO, Optional, Sequence
from datetime import datetime
import asyncio
import logging
import threading
import uuid

from ..errors import BookmarkValidationError
from ..models.bookmark import Bookmark
from ..utils.timestamps import utc_now_iso
from ..utils.url_type import classify
from ..utils.urls import has_http_scheme, is_absolute_url
from .collection import combine, derive_tags, filter_bookmarks
from .draft_service import DraftService
from .interchange import ImportResult, export_snapshot, import_batch, merge_imported
from .storage_service import StorageService

logger = logging.getLogger(__name__)


def split_tags(value: str) -> List[str]:
    return [tag.strip() for tag in (value or '').split(',') if tag.strip()]


class BookmarkService:
    """Owns the user collection for one session.

    The collection is read from storage once, on first use, and written back
    after every change. Seed bookmarks are only ever merged into reads.
    Every read-modify-save of the collection holds the session lock, so
    concurrent requests cannot overwrite each other's changes.
    """

    def __init__(self, storage: StorageService, drafts: DraftService, seed: Sequence[Bookmark] = ()):
        self.storage = storage
        self.drafts = drafts
        self.seed = tuple(seed)
        self._user_bookmarks: Optional[List[Bookmark]] = None
        self._lock = threading.RLock()

    @property
    def user_bookmarks(self) -> List[Bookmark]:
        with self._lock:
            if self._user_bookmarks is None:
                self._user_bookmarks = self.storage.load()
                logger.info(f"Loaded {len(self._user_bookmarks)} user bookmarks")
            return list(self._user_bookmarks)

    def _replace_user_bookmarks(self, bookmarks: List[Bookmark]):
        self._user_bookmarks = bookmarks
        self.storage.save(bookmarks)

    def get_bookmarks(self) -> List[Bookmark]:
        return combine(self.seed, self.user_bookmarks)

    def get_tags(self) -> List[str]:
        return derive_tags(self.get_bookmarks())

    def search_bookmarks(self, search: str = '', tag: str = '') -> List[Bookmark]:
        return filter_bookmarks(self.get_bookmarks(), search=search, tag=tag)

    def add_bookmark(self, fields: Dict[str, Any], now: Optional[datetime] = None) -> Bookmark:
        title = str(fields.get('title') or '').strip()
        url = str(fields.get('url') or '').strip()
        note = str(fields.get('note') or '').strip()
        tags = split_tags(str(fields.get('tags') or ''))

        if not title:
            raise BookmarkValidationError("Please provide a title.")
        if not url:
            raise BookmarkValidationError("Please provide a URL.")
        if not has_http_scheme(url):
            url = f"https://{url}"
        if not is_absolute_url(url):
            raise BookmarkValidationError("That URL looks invalid. Double-check and try again.")

        bookmark = Bookmark(
            id=str(uuid.uuid4()),
            title=title,
            url=url,
            url_type=classify(url),
            tags=tags,
            note=note,
            saved_at=utc_now_iso(now),
        )
        with self._lock:
            self._replace_user_bookmarks([bookmark] + self.user_bookmarks)
            self.drafts.clear_draft()
        return bookmark

    def import_bookmarks(self, raw_text: str, now: Optional[datetime] = None) -> ImportResult:
        result = import_batch(raw_text, now=now)
        if result.rejected_count:
            logger.debug(f"Skipped {result.rejected_count} invalid entries during import")
        if not result.is_empty:
            with self._lock:
                self._replace_user_bookmarks(merge_imported(self.user_bookmarks, result.accepted))
        return result

    async def import_file(self, source: BinaryIO, now: Optional[datetime] = None) -> ImportResult:
        """Import from an uploaded file, reading it off the event loop."""
        data = await asyncio.to_thread(source.read)
        raw_text = data.decode('utf-8', errors='replace') if isinstance(data, bytes) else data
        return self.import_bookmarks(raw_text, now=now)

    def export_bookmarks(self) -> str:
        return export_snapshot(self.user_bookmarks)
