from __future__ import annotations

from typing import List, Optional, Sequence

from dash import html

from ct_browser.core.record import Record
from ct_browser.core.view_state import SortDirection
from ct_browser.ui.ids import character_row_id

HIDDEN = {"display": "none"}
VISIBLE: dict = {}

TABLE_COLUMNS = ("name", "species", "status")


def sort_header_label(next_direction: SortDirection) -> str:
    """The arrow shows the direction the next click will sort in."""
    arrow = "▲" if next_direction is SortDirection.ASC else "▼"
    return f"Name {arrow}"


def page_options(n_pages: int) -> List[dict]:
    return [{"label": str(p), "value": p} for p in range(1, n_pages + 1)]


def status_text(n_rows: int, page: int, n_pages: int) -> str:
    noun = "character" if n_rows == 1 else "characters"
    if n_pages == 0:
        return f"{n_rows} {noun}"
    return f"{n_rows} {noun} · page {page} of {n_pages}"


def table_rows(records: Sequence[Record], selected_id: Optional[int] = None) -> List[html.Tr]:
    rows = []
    for record in records:
        rows.append(
            html.Tr(
                [html.Td(record.field(col)) for col in TABLE_COLUMNS],
                id=character_row_id(record.id),
                n_clicks=0,
                className="ctb-row table-active" if record.id == selected_id else "ctb-row",
                style={"cursor": "pointer"},
            )
        )
    return rows


def detail_body(record: Record) -> List[html.P]:
    return [
        html.P(f"Name: {record.name}", className="card-text"),
        html.P(f"Species: {record.species}", className="card-text"),
        html.P(f"Status: {record.status}", className="card-text"),
        html.P(f"Gender: {record.gender}", className="card-text"),
        html.P(f"Location: {record.location.name}", className="card-text"),
    ]
