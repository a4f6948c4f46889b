from __future__ import annotations

__all__ = ["IDs", "character_row_id"]


class IDs:
    class Store:
        VIEW_STATE = "view-state"

    class Control:
        # Load status
        LOAD_ERROR = "load-error"

        # Filter inputs
        NAME_FILTER = "name-filter"
        SPECIES_FILTER = "species-filter"
        STATUS_FILTER = "status-filter"
        APPLY_FILTERS_BTN = "apply-filters-btn"
        RESET_FILTERS_BTN = "reset-filters-btn"

        # Table
        SORT_HEADER = "sort-header"
        CHARACTER_TABLE = "character-table"
        TABLE_BODY = "character-table-body"
        EMPTY_MESSAGE = "empty-message"
        PAGE_SELECT = "page-select"

        # Status bar
        STATUS_BAR = "status-bar"

        # Detail panel
        DETAIL_PANEL = "detail-panel"
        DETAIL_BODY = "detail-body"
        DETAIL_CLOSE_BTN = "detail-close-btn"

    class Pattern:
        # pattern-matching "type" strings
        CHARACTER_ROW = "character-row"


# Filter field -> input component id
FILTER_INPUTS = {
    "name": IDs.Control.NAME_FILTER,
    "species": IDs.Control.SPECIES_FILTER,
    "status": IDs.Control.STATUS_FILTER,
}


def character_row_id(record_id: int) -> dict:
    return {"type": IDs.Pattern.CHARACTER_ROW, "index": record_id}
