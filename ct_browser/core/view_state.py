from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

FILTER_FIELDS: Tuple[str, ...] = ("name", "species", "status")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC

    @classmethod
    def parse(cls, value: Any, default: Optional[SortDirection] = None) -> Optional[SortDirection]:
        try:
            return cls(value)
        except ValueError:
            return default


@dataclass(frozen=True)
class FilterCriteria:
    """
    Substring constraints per filterable field.

    An empty pattern means "no constraint". Instances are never edited in
    place; `with_pattern` returns a replacement.
    """

    name: str = ""
    species: str = ""
    status: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> FilterCriteria:
        data = data or {}
        return cls(**{f: str(data.get(f) or "") for f in FILTER_FIELDS})

    def to_dict(self) -> Dict[str, str]:
        return {f: getattr(self, f) for f in FILTER_FIELDS}

    def with_pattern(self, field_name: str, pattern: str | None) -> FilterCriteria:
        if field_name not in FILTER_FIELDS:
            raise KeyError(f"Unknown filter field '{field_name}'")
        values = self.to_dict()
        values[field_name] = pattern or ""
        return FilterCriteria(**values)

    def active(self) -> Iterator[Tuple[str, str]]:
        """Yield (field, pattern) pairs for non-empty criteria."""
        for f in FILTER_FIELDS:
            pattern = getattr(self, f)
            if pattern:
                yield f, pattern

    def is_empty(self) -> bool:
        return not any(True for _ in self.active())

    def cache_key(self) -> Tuple[str, ...]:
        return tuple(getattr(self, f).lower() for f in FILTER_FIELDS)


@dataclass
class ViewState:
    """
    Transient table state for one browser tab.

    Fields:

    - criteria: Filter criteria currently applied to the table.
    - sort_direction: Direction the next sort toggle will apply.
    - applied_sort: Ordering currently applied to the filtered rows
      (None keeps dataset order).
    - selected_id: Record shown in the detail panel, if any.
    - current_page: 1-based page index; not clamped to the page count.
    """

    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    sort_direction: SortDirection = SortDirection.ASC
    applied_sort: Optional[SortDirection] = None
    selected_id: Optional[int] = None
    current_page: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criteria": self.criteria.to_dict(),
            "sort_direction": self.sort_direction.value,
            "applied_sort": self.applied_sort.value if self.applied_sort else None,
            "selected_id": self.selected_id,
            "current_page": self.current_page,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ViewState:
        data = data or {}

        selected_id = data.get("selected_id")
        try:
            selected_id = int(selected_id) if selected_id is not None else None
        except (TypeError, ValueError):
            selected_id = None

        try:
            current_page = int(data.get("current_page", 1))
        except (TypeError, ValueError):
            current_page = 1

        return cls(
            criteria=FilterCriteria.from_dict(data.get("criteria")),
            sort_direction=SortDirection.parse(data.get("sort_direction"), SortDirection.ASC),
            applied_sort=SortDirection.parse(data.get("applied_sort")),
            selected_id=selected_id,
            current_page=current_page,
        )
