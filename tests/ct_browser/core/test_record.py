from __future__ import annotations

import pytest

from ct_browser.core.record import Location, Record


def test_record_from_api_payload():
    raw = {
        "id": 1,
        "name": "Rick Sanchez",
        "status": "Alive",
        "species": "Human",
        "type": "",
        "gender": "Male",
        "location": {"name": "Citadel of Ricks", "url": "https://rickandmortyapi.com/api/location/3"},
        "episode": ["https://rickandmortyapi.com/api/episode/1"],
    }

    rec = Record.from_dict(raw)

    assert rec.id == 1
    assert rec.name == "Rick Sanchez"
    assert rec.species == "Human"
    assert rec.status == "Alive"
    assert rec.gender == "Male"
    assert rec.location == Location(name="Citadel of Ricks", url="https://rickandmortyapi.com/api/location/3")


def test_record_missing_text_fields_default_to_empty():
    rec = Record.from_dict({"id": "7", "name": None})

    assert rec.id == 7
    assert rec.name == ""
    assert rec.species == ""
    assert rec.location.name == ""


def test_record_without_id_is_rejected():
    with pytest.raises(KeyError):
        Record.from_dict({"name": "Nobody"})


def test_record_is_immutable():
    rec = Record(id=1, name="Rick")
    with pytest.raises(AttributeError):
        rec.name = "Morty"  # type: ignore[misc]


def test_field_rejects_unknown_names():
    rec = Record(id=1, name="Rick", species="Human")
    assert rec.field("species") == "Human"
    with pytest.raises(KeyError):
        rec.field("location")
