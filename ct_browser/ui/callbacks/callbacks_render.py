from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from ct_browser.core.controller import ViewController
from ct_browser.core.view_state import ViewState
from ct_browser.ui.helpers import (
    HIDDEN,
    VISIBLE,
    detail_body,
    page_options,
    sort_header_label,
    status_text,
    table_rows,
)
from ct_browser.ui.ids import IDs

if TYPE_CHECKING:
    from ct_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

DETAIL_STYLE = {"maxWidth": "500px"}


def _render_view(ctx: AppConfig, state_data: dict[str, Any] | None) -> dict[str, Any]:
    """
    Pure helper: map the stored view state onto component properties.
    """
    controller = ViewController(ctx.dataset, ViewState.from_dict(state_data))
    state = controller.state
    has_rows = bool(controller.rows)

    selected = controller.selected
    if selected is None:
        detail_style = {**HIDDEN, **DETAIL_STYLE}
        detail_children: list = []
    else:
        detail_style = dict(DETAIL_STYLE)
        detail_children = detail_body(selected)

    return {
        "rows": table_rows(controller.page_rows, state.selected_id),
        "table_style": VISIBLE if has_rows else HIDDEN,
        "empty_style": HIDDEN if has_rows else VISIBLE,
        "sort_label": sort_header_label(state.sort_direction),
        "page_options": page_options(controller.page_count),
        "status": status_text(len(controller.rows), state.current_page, controller.page_count),
        "detail_style": detail_style,
        "detail_children": detail_children,
    }


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # ViewState -> table, pagination, detail panel
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_BODY, "children"),
        Output(IDs.Control.CHARACTER_TABLE, "style"),
        Output(IDs.Control.EMPTY_MESSAGE, "style"),
        Output(IDs.Control.SORT_HEADER, "children"),
        Output(IDs.Control.PAGE_SELECT, "options"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Output(IDs.Control.DETAIL_PANEL, "style"),
        Output(IDs.Control.DETAIL_BODY, "children"),
        Input(IDs.Store.VIEW_STATE, "data"),
    )
    def update_table_from_state(state_data: dict[str, Any] | None):
        view = _render_view(ctx, state_data)
        logger.debug(
            "render_table",
            extra={"n_rows": len(view["rows"]), "status": view["status"]},
        )
        return (
            view["rows"],
            view["table_style"],
            view["empty_style"],
            view["sort_label"],
            view["page_options"],
            view["status"],
            view["detail_style"],
            view["detail_children"],
        )
