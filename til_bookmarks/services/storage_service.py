import json
import logging
import uuid
from datetime import datetime
from typing import Any, List, Optional

from ..models.bookmark import Bookmark
from ..utils.database import BookmarkDatabase
from ..utils.timestamps import parse_timestamp, utc_now_iso
from ..utils.url_type import URL_TYPES, classify
from ..utils.urls import is_absolute_url

logger = logging.getLogger(__name__)

STORAGE_KEY = 'til-bookmarks'


def normalize_tags(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [tag.strip() for tag in value if isinstance(tag, str) and tag.strip()]


def normalize_record(raw: Any, now: Optional[datetime] = None, untitled: Optional[str] = None) -> Optional[Bookmark]:
    """Validate one untrusted bookmark record.

    Returns the normalized Bookmark, or None when the record must be dropped.
    When ``untitled`` is given (stored records), a non-string title is kept
    as its text and a blank title is replaced with ``untitled``. Without it
    (imports), a record whose title is not a non-blank string is dropped.
    Records written before link types existed get their ``urlType`` computed
    here.
    """
    if not isinstance(raw, dict):
        return None
    if 'title' not in raw or 'url' not in raw:
        return None

    title = raw['title']
    if not isinstance(title, str):
        title = str(title) if untitled is not None and title is not None else ''
    title = title.strip()
    if not title:
        if untitled is None:
            return None
        title = untitled

    url = raw['url'].strip() if isinstance(raw['url'], str) else ''
    if not url or not is_absolute_url(url):
        return None

    saved_at = raw.get('savedAt')
    if parse_timestamp(saved_at) is None:
        saved_at = utc_now_iso(now)

    bookmark_id = raw.get('id')
    if not isinstance(bookmark_id, str):
        bookmark_id = str(uuid.uuid4())

    url_type = raw.get('urlType')
    if url_type not in URL_TYPES:
        url_type = classify(url)

    note = raw.get('note')
    return Bookmark(
        id=bookmark_id,
        title=title,
        url=url,
        url_type=url_type,
        tags=normalize_tags(raw.get('tags')),
        note=note if isinstance(note, str) else '',
        saved_at=saved_at,
    )


class StorageService:
    def __init__(self, database: BookmarkDatabase, key: str = STORAGE_KEY):
        self.database = database
        self.key = key

    def load(self, now: Optional[datetime] = None) -> List[Bookmark]:
        raw = self.database.get_item(self.key)
        if not raw:
            return []

        try:
            parsed = json.loads(raw)
        except (ValueError, RecursionError) as e:
            logger.warning(f"Failed to parse stored bookmarks: {str(e)}")
            return []
        if not isinstance(parsed, list):
            logger.warning(f"Stored bookmarks are not a list (got {type(parsed).__name__}); ignoring them")
            return []

        bookmarks = []
        for item in parsed:
            bookmark = normalize_record(item, now=now, untitled='Untitled')
            if bookmark is None:
                logger.debug(f"Dropping malformed stored bookmark: {item!r}")
                continue
            bookmarks.append(bookmark)
        return bookmarks

    def save(self, bookmarks: List[Bookmark]):
        self.database.set_item(self.key, json.dumps([b.to_dict() for b in bookmarks]))
