"""Site schema — wire names, strict field types, and timestamp encoding.

Invariants:
    - Keys match case-insensitively; later duplicates win
    - null fields keep their zero value; unknown keys are ignored
    - created encodes as RFC 3339 UTC with a Z suffix
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.schemas.site import Site, normalize_keys


def test_defaults_describe_a_new_site():
    site = Site()
    assert site.id == 0
    assert site.name == ""
    assert site.url == ""
    assert site.category_id == []
    assert site.created is None


def test_from_document_reads_wire_names():
    site = Site.from_document({
        "id": 4, "name": "Docs", "url": "https://docs.example",
        "categoryid": ["1", "3"], "created": "2026-01-02T03:04:05Z",
    })
    assert site.id == 4
    assert site.name == "Docs"
    assert site.url == "https://docs.example"
    assert site.category_id == ["1", "3"]
    assert site.created == datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_keys_match_case_insensitively():
    site = Site.from_document({"Name": "A", "URL": "u", "categoryID": ["2"]})
    assert site.name == "A"
    assert site.url == "u"
    assert site.category_id == ["2"]


def test_later_duplicate_key_wins():
    assert normalize_keys({"name": "first", "NAME": "second"}) == {"name": "second"}


def test_nulls_and_unknown_keys_are_dropped():
    assert normalize_keys({"id": None, "done": True, "name": "x"}) == {"name": "x"}
    site = Site.from_document({"id": None, "categoryid": None, "extra": 1})
    assert site.id == 0
    assert site.category_id == []


@pytest.mark.parametrize("doc", [
    {"id": "1"},
    {"id": 1.5},
    {"id": 1.0},
    {"id": True},
    {"name": 3},
    {"url": ["x"]},
    {"categoryid": [1, 2]},
    {"categoryid": "1"},
    {"created": "yesterday"},
    {"created": 0},
    {"created": "2026-01-02"},
    {"id": 2 ** 63},
])
def test_wrongly_typed_fields_are_rejected(doc):
    with pytest.raises(ValidationError):
        Site.from_document(doc)


def test_document_uses_wire_names_and_utc_z():
    created = datetime(2026, 3, 1, 10, 0, 0, 250000, tzinfo=timezone.utc)
    doc = Site(id=1, name="n", url="u", category_id=["1"], created=created).to_document()
    assert doc == {
        "id": 1, "name": "n", "url": "u", "categoryid": ["1"],
        "created": "2026-03-01T10:00:00.250000Z",
    }


def test_document_converts_offsets_to_utc():
    created = datetime(2026, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    assert Site(created=created).to_document()["created"] == "2026-03-01T10:00:00Z"


def test_document_treats_naive_created_as_utc():
    assert Site(created=datetime(2026, 3, 1, 10, 0)).to_document()["created"] == (
        "2026-03-01T10:00:00Z"
    )


def test_unsaved_site_encodes_created_as_null():
    assert Site().to_document()["created"] is None
