"""Bulk import and export of the user collection as JSON."""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from ..errors import ImportRejectedError
from ..models.bookmark import Bookmark
from .collection import dedupe_by_id, sort_newest_first
from .storage_service import STORAGE_KEY, normalize_record


@dataclass
class ImportResult:
    accepted: List[Bookmark] = field(default_factory=list)
    rejected_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.accepted


def import_batch(raw_text: str, now: Optional[datetime] = None) -> ImportResult:
    try:
        parsed = json.loads(raw_text)
    except (TypeError, ValueError, RecursionError) as exc:
        raise ImportRejectedError("Import failed. Ensure the JSON is valid.") from exc
    if not isinstance(parsed, list):
        raise ImportRejectedError("Import failed: expected an array of bookmarks.")

    result = ImportResult()
    for entry in parsed:
        bookmark = normalize_record(entry, now=now)
        if bookmark is None:
            result.rejected_count += 1
            continue
        result.accepted.append(bookmark)
    return result


def merge_imported(user: List[Bookmark], imported: List[Bookmark]) -> List[Bookmark]:
    # Imported entries come first so they replace existing bookmarks with the same id.
    return sort_newest_first(dedupe_by_id(list(imported) + list(user)))


def export_snapshot(user: List[Bookmark]) -> str:
    return json.dumps([b.to_dict() for b in user], indent=2, ensure_ascii=False)


def export_filename(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"{STORAGE_KEY}-{now.strftime('%Y-%m-%d')}.json"
