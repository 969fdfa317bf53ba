import json
import logging
from typing import Dict, Optional

from ..errors import DraftCorruptedError
from ..utils.database import BookmarkDatabase
from .storage_service import STORAGE_KEY

logger = logging.getLogger(__name__)

DRAFT_KEY = f'{STORAGE_KEY}-draft'
FORM_FIELDS = ('title', 'url', 'tags', 'note')
DEFAULT_FORM_FIELDS = {name: '' for name in FORM_FIELDS}


class DraftService:
    """Caches one unsaved bookmark form, separately from saved bookmarks."""

    def __init__(self, database: BookmarkDatabase, key: str = DRAFT_KEY):
        self.database = database
        self.key = key

    def has_draft(self) -> bool:
        return self.database.get_item(self.key) is not None

    def save_draft(self, fields: Dict[str, str]):
        snapshot = {name: fields[name] for name in FORM_FIELDS if isinstance(fields.get(name), str)}
        self.database.set_item(self.key, json.dumps(snapshot))

    def load_draft(self, baseline: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        fields = dict(DEFAULT_FORM_FIELDS if baseline is None else baseline)
        raw = self.database.get_item(self.key)
        if raw is None:
            return fields

        try:
            stored = json.loads(raw)
        except ValueError as e:
            logger.error(f"Failed to parse bookmark draft: {str(e)}")
            raise DraftCorruptedError("Draft was corrupted; please save again.") from e
        if not isinstance(stored, dict):
            logger.error(f"Bookmark draft is not an object: {raw[:200]}")
            raise DraftCorruptedError("Draft was corrupted; please save again.")

        for name in FORM_FIELDS:
            if isinstance(stored.get(name), str):
                fields[name] = stored[name]
        return fields

    def clear_draft(self):
        self.database.remove_item(self.key)
