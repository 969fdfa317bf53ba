from typing import Any, Dict, List, Optional

from ..utils.timestamps import utc_now_iso
from ..utils.url_type import GENERIC


class Bookmark:
    def __init__(self, id: str, title: str, url: str, url_type: str = GENERIC,
                 tags: Optional[List[str]] = None, note: str = "", saved_at: Optional[str] = None):
        self.id = id
        self.title = title
        self.url = url
        self.url_type = url_type
        self.tags = list(tags or [])
        self.note = note
        self.saved_at = saved_at or utc_now_iso()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'url': self.url,
            'urlType': self.url_type,
            'tags': list(self.tags),
            'note': self.note,
            'savedAt': self.saved_at,
        }

    def __eq__(self, other):
        if not isinstance(other, Bookmark):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f'<Bookmark {self.id}: {self.title}>'
