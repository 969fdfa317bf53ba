import json
from datetime import datetime, timezone

from til_bookmarks.models.bookmark import Bookmark
from til_bookmarks.services.storage_service import STORAGE_KEY, normalize_record, normalize_tags

NOW = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


def _store(database, payload):
    database.set_item(STORAGE_KEY, payload if isinstance(payload, str) else json.dumps(payload))


def test_load_without_stored_value_is_empty(storage):
    assert storage.load() == []


def test_load_ignores_invalid_json_and_non_array(storage, database):
    _store(database, "{not json")
    assert storage.load() == []

    _store(database, {"title": "x", "url": "https://example.com"})
    assert storage.load() == []


def test_load_normalizes_each_record(storage, database):
    _store(database, [
        {
            "id": "keep",
            "title": "  Clamp  ",
            "url": " https://web.dev/min-max-clamp/ ",
            "urlType": "Generic",
            "tags": ["css", " ", 3, " design ", "css"],
            "note": 42,
            "savedAt": "sometime",
        },
    ])

    [bookmark] = storage.load(now=NOW)

    assert bookmark.id == "keep"
    assert bookmark.title == "Clamp"
    assert bookmark.url == "https://web.dev/min-max-clamp/"
    assert bookmark.tags == ["css", "design", "css"]
    assert bookmark.note == ""
    assert bookmark.saved_at == "2025-01-02T03:04:05.678Z"


def test_load_backfills_missing_url_type(storage, database):
    _store(database, [{"id": "legacy", "title": "Doc", "url": "https://docs.google.com/document/d/abc",
                       "savedAt": "2024-01-01T00:00:00.000Z"}])

    [bookmark] = storage.load()

    assert bookmark.url_type == "Google Doc"
    assert bookmark.saved_at == "2024-01-01T00:00:00.000Z"


def test_load_drops_malformed_records_silently(storage, database):
    _store(database, [
        "just a string",
        None,
        {"title": "no url"},
        {"url": "https://example.com"},
        {"title": "bad url", "url": "example.com/relative"},
        {"id": "ok", "title": "Fine", "url": "https://example.com"},
    ])

    bookmarks = storage.load()

    assert [b.id for b in bookmarks] == ["ok"]


def test_load_generates_id_when_not_a_string(storage, database):
    _store(database, [{"id": 7, "title": "Numbered", "url": "https://example.com"}])

    [bookmark] = storage.load()

    assert isinstance(bookmark.id, str)
    assert bookmark.id != "7"


def test_load_uses_untitled_for_blank_titles(storage, database):
    _store(database, [{"id": "blank", "title": "   ", "url": "https://example.com"}])

    [bookmark] = storage.load()

    assert bookmark.title == "Untitled"


def test_save_then_load_round_trip(storage):
    bookmarks = [
        Bookmark(id="one", title="One", url="https://github.com/a/b", url_type="GitHub",
                 tags=["x", "x"], note="note", saved_at="2024-06-11T12:10:00.000Z"),
        Bookmark(id="two", title="Two", url="https://example.com", saved_at="2024-05-28T21:30:00.000Z"),
    ]

    storage.save(bookmarks)

    assert storage.load() == bookmarks


def test_save_overwrites_previous_value(storage, database):
    storage.save([Bookmark(id="one", title="One", url="https://example.com")])
    storage.save([])

    assert json.loads(database.get_item(STORAGE_KEY)) == []


def test_normalize_record_without_untitled_drops_blank_title():
    assert normalize_record({"title": " ", "url": "https://example.com"}) is None


def test_normalize_record_recomputes_unknown_url_type():
    record = normalize_record({"title": "t", "url": "https://github.com/x", "urlType": "Bogus"})
    assert record.url_type == "GitHub"


def test_normalize_tags_requires_a_list():
    assert normalize_tags("css, design") == []
    assert normalize_tags(None) == []
    assert normalize_tags([" a ", ""]) == ["a"]


def test_load_keeps_non_string_titles_as_text(storage, database):
    _store(database, [
        {"id": "numbered", "title": 123, "url": "https://example.com/1"},
        {"id": "null", "title": None, "url": "https://example.com/2"},
    ])

    assert [b.title for b in storage.load()] == ["123", "Untitled"]


def test_load_keeps_free_form_dates(storage, database):
    _store(database, [{"id": "rfc", "title": "Dated", "url": "https://example.com",
                       "savedAt": "Tue, 02 Jul 2024 10:15:00 GMT"}])

    [bookmark] = storage.load(now=NOW)

    assert bookmark.saved_at == "Tue, 02 Jul 2024 10:15:00 GMT"


def test_load_treats_deeply_nested_json_as_unreadable(storage, database):
    _store(database, "[" * 100000 + "]" * 100000)

    assert storage.load() == []
