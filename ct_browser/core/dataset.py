from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import pandas as pd

from ct_browser.core.record import Record
from ct_browser.core.view_state import FilterCriteria

logger = logging.getLogger(__name__)

COLUMNS = ["id", "name", "species", "status", "gender", "location"]


class CharacterDataset:
    """
    Read-only collection of every record returned by the listing endpoint.

    Includes:
    - Id lookup for the detail panel
    - A pandas frame of the text columns used for matching
    - Cached filtered subsets, keyed by the lower-cased criteria
    """

    MAX_SUBSET_CACHE = 128

    def __init__(self, records: Iterable[Record]) -> None:
        self._records: Tuple[Record, ...] = tuple(records)
        self._by_id: Dict[int, Record] = {r.id: r for r in self._records}
        self._frame: Optional[pd.DataFrame] = None
        self._subset_cache: Dict[Tuple[str, ...], List[Record]] = {}

    @classmethod
    def empty(cls) -> CharacterDataset:
        return cls(())

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    @property
    def records(self) -> List[Record]:
        return list(self._records)

    def get(self, record_id: Optional[int]) -> Optional[Record]:
        if record_id is None:
            return None
        return self._by_id.get(record_id)

    # -------------------------------------------------------------------------
    # Tabular view
    # -------------------------------------------------------------------------
    @property
    def frame(self) -> pd.DataFrame:
        """One row per record, in load order, with location flattened to its name."""
        if self._frame is None:
            rows = [
                {
                    "id": r.id,
                    "name": r.name,
                    "species": r.species,
                    "status": r.status,
                    "gender": r.gender,
                    "location": r.location.name,
                }
                for r in self._records
            ]
            self._frame = pd.DataFrame(rows, columns=COLUMNS)
        return self._frame

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------
    def subset(self, criteria: FilterCriteria) -> List[Record]:
        """
        Records matching every non-empty criterion, in dataset order.

        Matching is a literal substring test on lower-cased text.
        """
        if criteria.is_empty():
            return self.records

        key = criteria.cache_key()
        cached = self._subset_cache.get(key)
        if cached is not None:
            return list(cached)

        frame = self.frame
        mask = pd.Series(True, index=frame.index)
        for field_name, pattern in criteria.active():
            mask &= frame[field_name].str.lower().str.contains(pattern.lower(), regex=False, na=False)

        subset = [self._records[i] for i in frame.index[mask]]

        if len(self._subset_cache) >= self.MAX_SUBSET_CACHE:
            self._subset_cache.clear()
        self._subset_cache[key] = subset

        logger.debug(
            "Filtered dataset",
            extra={"criteria": criteria.to_dict(), "n_matches": len(subset)},
        )
        return list(subset)
