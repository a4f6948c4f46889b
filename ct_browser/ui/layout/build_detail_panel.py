from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from ct_browser.ui.helpers import HIDDEN
from ct_browser.ui.ids import IDs


def build_detail_panel() -> dbc.Card:
    """
    Detail card for the selected character; hidden until a row is clicked.
    """
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.H5("Character Details", className="card-title mb-0"),
                        dbc.Button(
                            "Close",
                            id=IDs.Control.DETAIL_CLOSE_BTN,
                            color="link",
                            size="sm",
                            className="ms-auto",
                            n_clicks=0,
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
            ),
            dbc.CardBody(id=IDs.Control.DETAIL_BODY),
        ],
        id=IDs.Control.DETAIL_PANEL,
        className="mx-auto mt-4",
        style={**HIDDEN, "maxWidth": "500px"},
    )
