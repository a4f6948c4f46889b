from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from ct_browser.core.dataset import CharacterDataset
from ct_browser.core.record import Record
from ct_browser.core.view import derive_rows, page_count, paginate
from ct_browser.core.view_state import FilterCriteria, ViewState

logger = logging.getLogger(__name__)


class ViewController:
    """
    Applies user operations to a ViewState and re-derives the table.

    Holds two sets of criteria: `draft` (what the inputs currently say) and
    `state.criteria` (what the table is filtered by). Only `apply_filters`
    moves the draft into the state. Every mutating operation recomputes
    `rows` from the dataset, so the rows never drift from the state.
    """

    def __init__(
        self,
        dataset: CharacterDataset,
        state: Optional[ViewState] = None,
        draft: Optional[FilterCriteria] = None,
    ) -> None:
        self.dataset = dataset
        self.state = replace(state) if state is not None else ViewState()
        self.draft = draft if draft is not None else self.state.criteria
        self.rows: List[Record] = []
        self._refresh()

    def _refresh(self) -> None:
        self.rows = derive_rows(self.dataset, self.state)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    def update_filter(self, field_name: str, pattern: str | None) -> None:
        self.draft = self.draft.with_pattern(field_name, pattern)

    def apply_filters(self) -> None:
        self.state.criteria = self.draft
        self.state.applied_sort = None
        self.state.current_page = 1
        self._refresh()
        logger.info(
            "Filters applied",
            extra={"criteria": self.draft.to_dict(), "n_rows": len(self.rows)},
        )

    def reset_filters(self) -> None:
        self.draft = FilterCriteria()
        self.state.criteria = self.draft
        self.state.applied_sort = None
        self.state.current_page = 1
        self._refresh()

    def toggle_sort(self) -> None:
        self.state.applied_sort = self.state.sort_direction
        self.state.sort_direction = self.state.sort_direction.flipped()
        self._refresh()

    def set_page(self, page: int) -> None:
        self.state.current_page = page

    def select_record(self, record: Optional[Record]) -> None:
        self.state.selected_id = record.id if record is not None else None

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------
    @property
    def page_rows(self) -> List[Record]:
        return paginate(self.rows, self.state.current_page)

    @property
    def page_count(self) -> int:
        return page_count(len(self.rows))

    @property
    def selected(self) -> Optional[Record]:
        return self.dataset.get(self.state.selected_id)
