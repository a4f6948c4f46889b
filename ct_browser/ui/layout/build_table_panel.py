from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from ct_browser.core.view_state import SortDirection
from ct_browser.ui.helpers import HIDDEN, page_options, sort_header_label
from ct_browser.ui.ids import IDs


def build_table_panel(n_pages: int = 0) -> dbc.Card:
    table = dbc.Table(
        [
            html.Thead(
                html.Tr(
                    [
                        html.Th(
                            sort_header_label(SortDirection.ASC),
                            id=IDs.Control.SORT_HEADER,
                            n_clicks=0,
                            style={"cursor": "pointer"},
                        ),
                        html.Th("Species"),
                        html.Th("Status"),
                    ]
                )
            ),
            html.Tbody(id=IDs.Control.TABLE_BODY),
        ],
        id=IDs.Control.CHARACTER_TABLE,
        hover=True,
        className="mb-0",
    )

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Characters"),
                        html.Small(id=IDs.Control.STATUS_BAR, className="text-muted ms-auto"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    table,
                    html.P(
                        "No characters found matching the filters.",
                        id=IDs.Control.EMPTY_MESSAGE,
                        className="text-center",
                        style=HIDDEN,
                    ),
                    html.Div(
                        html.Label(
                            [
                                "Page: ",
                                dcc.Dropdown(
                                    id=IDs.Control.PAGE_SELECT,
                                    options=page_options(n_pages),
                                    value=1,
                                    clearable=False,
                                    searchable=False,
                                    style={"width": "6rem"},
                                ),
                            ],
                            className="d-flex align-items-center gap-2",
                        ),
                        className="d-flex justify-content-center my-3",
                    ),
                ],
                className="ctb-main-body",
            ),
        ],
        className="ctb-maincard",
    )
