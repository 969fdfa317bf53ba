import json

import pytest

from til_bookmarks.errors import DraftCorruptedError
from til_bookmarks.services.draft_service import DEFAULT_FORM_FIELDS, DRAFT_KEY


def test_load_draft_without_slot_returns_baseline(drafts):
    baseline = {"title": "x", "url": "", "tags": "", "note": ""}

    assert drafts.load_draft(baseline) == baseline
    assert not drafts.has_draft()


def test_load_draft_overlays_only_stored_string_fields(drafts, database):
    database.set_item(DRAFT_KEY, json.dumps({"url": "https://a.com"}))

    fields = drafts.load_draft({"title": "x", "url": "", "tags": "", "note": ""})

    assert fields == {"title": "x", "url": "https://a.com", "tags": "", "note": ""}


def test_load_draft_skips_values_of_the_wrong_type(drafts, database):
    database.set_item(DRAFT_KEY, json.dumps({"title": 5, "tags": ["a"], "note": "kept", "extra": "ignored"}))

    fields = drafts.load_draft()

    assert fields == dict(DEFAULT_FORM_FIELDS, note="kept")


def test_load_draft_does_not_mutate_baseline(drafts):
    drafts.save_draft({"title": "draft title"})
    baseline = dict(DEFAULT_FORM_FIELDS)

    drafts.load_draft(baseline)

    assert baseline == DEFAULT_FORM_FIELDS


def test_save_draft_overwrites_previous_snapshot(drafts):
    drafts.save_draft({"title": "first", "url": "https://one.example"})
    drafts.save_draft({"title": "second"})

    assert drafts.load_draft() == dict(DEFAULT_FORM_FIELDS, title="second")


def test_clear_draft_removes_slot(drafts):
    drafts.save_draft(dict(DEFAULT_FORM_FIELDS, title="t"))
    drafts.clear_draft()

    assert not drafts.has_draft()
    assert drafts.load_draft() == DEFAULT_FORM_FIELDS


@pytest.mark.parametrize("raw", ["{broken", "[1, 2]", "\"text\""])
def test_corrupted_draft_is_reported(drafts, database, raw):
    database.set_item(DRAFT_KEY, raw)

    with pytest.raises(DraftCorruptedError):
        drafts.load_draft()
