from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Location:
    name: str = ""
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Location:
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            raise TypeError(f"location must be an object, got {type(data).__name__}")
        return cls(
            name=str(data.get("name") or ""),
            url=data.get("url") or None,
        )


@dataclass(frozen=True)
class Record:
    """
    One character as returned by the listing endpoint.

    Fields:

    - id: Unique identifier assigned by the API.
    - name, species, status, gender: Display strings ("" when missing).
    - location: Last known location; only `name` is shown in the UI.

    Records are immutable once parsed and shared read-only between callbacks.
    """

    id: int
    name: str
    species: str = ""
    status: str = ""
    gender: str = ""
    location: Location = Location()

    # Fields that can be filtered / shown as table columns
    TEXT_FIELDS = ("name", "species", "status", "gender")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Record:
        if not isinstance(data, Mapping):
            raise TypeError(f"record must be an object, got {type(data).__name__}")
        if "id" not in data:
            raise KeyError("record is missing 'id'")

        def text(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value)

        return cls(
            id=int(data["id"]),
            name=text("name"),
            species=text("species"),
            status=text("status"),
            gender=text("gender"),
            location=Location.from_dict(data.get("location")),
        )

    def field(self, name: str) -> str:
        if name not in self.TEXT_FIELDS:
            raise KeyError(f"Unknown record field '{name}'")
        return getattr(self, name)
