from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from ct_browser.core.view import page_count
from ct_browser.core.view_state import ViewState
from ct_browser.ui.ids import IDs
from ct_browser.ui.layout.build_detail_panel import build_detail_panel
from ct_browser.ui.layout.build_filter_panel import build_filter_panel
from ct_browser.ui.layout.build_navbar import build_navbar
from ct_browser.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from ct_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    error_alert = dbc.Alert(
        ctx.load_error or "",
        id=IDs.Control.LOAD_ERROR,
        color="danger",
        is_open=ctx.load_error is not None,
        className="mt-3",
    )

    return dbc.Container(
        fluid=True,
        className="ctb-root",
        children=[
            build_navbar(ctx.global_config),
            error_alert,

            # Per-tab view state; memory storage so nothing survives a reload
            dcc.Store(
                id=IDs.Store.VIEW_STATE,
                storage_type="memory",
                data=ViewState().to_dict(),
            ),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(), md=3, className="mt-3"),
                    dbc.Col(
                        [
                            build_table_panel(page_count(len(ctx.dataset))),
                            build_detail_panel(),
                        ],
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
