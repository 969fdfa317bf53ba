"""Reconciliation of the seed and user collections, tags and search."""

from typing import Iterable, List

from ..models.bookmark import Bookmark
from ..utils.timestamps import EPOCH, parse_timestamp
from ..utils.urls import display_hostname


def dedupe_by_id(bookmarks: Iterable[Bookmark]) -> List[Bookmark]:
    seen = set()
    deduped = []
    for bookmark in bookmarks:
        if bookmark.id in seen:
            continue
        seen.add(bookmark.id)
        deduped.append(bookmark)
    return deduped


def sort_newest_first(bookmarks: Iterable[Bookmark]) -> List[Bookmark]:
    # sorted() is stable with reverse=True, so equal timestamps keep input order.
    return sorted(bookmarks, key=lambda b: parse_timestamp(b.saved_at) or EPOCH, reverse=True)


def combine(seed: Iterable[Bookmark], user: Iterable[Bookmark]) -> List[Bookmark]:
    """Merge seed and user bookmarks into the view that is listed and searched.

    Seed bookmarks win over user bookmarks with the same id.
    """
    seed = list(seed)
    seed_ids = {b.id for b in seed}
    filtered_user = [b for b in user if b.id not in seed_ids]
    return sort_newest_first(dedupe_by_id(seed + filtered_user))


def derive_tags(bookmarks: Iterable[Bookmark]) -> List[str]:
    tags = set()
    for bookmark in bookmarks:
        tags.update(bookmark.tags)
    return sorted(tags)


def search_text(bookmark: Bookmark) -> str:
    return ' '.join([
        bookmark.title,
        bookmark.note,
        ' '.join(bookmark.tags),
        display_hostname(bookmark.url),
    ]).lower()


def filter_bookmarks(bookmarks: Iterable[Bookmark], search: str = '', tag: str = '') -> List[Bookmark]:
    query = (search or '').strip().lower()
    results = []
    for bookmark in bookmarks:
        if tag and tag not in bookmark.tags:
            continue
        if query and query not in search_text(bookmark):
            continue
        results.append(bookmark)
    return results
