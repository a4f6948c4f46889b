"""
Pure derivations of the displayed table from the dataset and view state.

Nothing here keeps state: callers pass the inputs and get a new list back.
"""
from __future__ import annotations

import locale
import math
import unicodedata
from typing import List, Optional, Sequence, Tuple

from ct_browser.core.dataset import CharacterDataset
from ct_browser.core.record import Record
from ct_browser.core.view_state import FilterCriteria, SortDirection, ViewState

PAGE_SIZE = 10


def filter_records(dataset: CharacterDataset, criteria: FilterCriteria) -> List[Record]:
    return dataset.subset(criteria)


def name_sort_key(name: str) -> Tuple[str, str]:
    """
    Collation key for names.

    Primary key ignores case and accents; the raw collation of the name
    breaks ties so "rick" and "Rick" still order deterministically.
    """
    folded = unicodedata.normalize("NFKD", name)
    folded = "".join(ch for ch in folded if not unicodedata.combining(ch)).casefold()
    return locale.strxfrm(folded), locale.strxfrm(name)


def sort_records(records: Sequence[Record], direction: Optional[SortDirection]) -> List[Record]:
    """Order records by name; `None` keeps the given order."""
    if direction is None:
        return list(records)
    return sorted(
        records,
        key=lambda r: name_sort_key(r.name),
        reverse=direction is SortDirection.DESC,
    )


def page_count(n_records: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(n_records / page_size)


def paginate(records: Sequence[Record], page: int, page_size: int = PAGE_SIZE) -> List[Record]:
    start = (page - 1) * page_size
    if start < 0:
        return []
    return list(records[start:start + page_size])


def derive_rows(dataset: CharacterDataset, state: ViewState) -> List[Record]:
    """Filtered and sorted rows, before pagination."""
    return sort_records(filter_records(dataset, state.criteria), state.applied_sort)
