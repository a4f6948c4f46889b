from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from ct_browser.ui.ids import IDs


def _filter_input(component_id: str, label: str, placeholder: str) -> html.Div:
    return html.Div(
        [
            html.Label(label, className="form-label", htmlFor=component_id),
            dbc.Input(
                id=component_id,
                type="text",
                value="",
                placeholder=placeholder,
                className="mb-3",
            ),
        ]
    )


def build_filter_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    _filter_input(IDs.Control.NAME_FILTER, "Name", "Filter by name"),
                    _filter_input(IDs.Control.SPECIES_FILTER, "Species", "Filter by species"),
                    _filter_input(IDs.Control.STATUS_FILTER, "Status", "Filter by status"),
                    html.Div(
                        [
                            dbc.Button(
                                "Apply Filters",
                                id=IDs.Control.APPLY_FILTERS_BTN,
                                color="primary",
                                className="w-50",
                                n_clicks=0,
                            ),
                            dbc.Button(
                                "Reset Filters",
                                id=IDs.Control.RESET_FILTERS_BTN,
                                color="secondary",
                                className="w-50",
                                n_clicks=0,
                            ),
                        ],
                        className="d-flex gap-2",
                    ),
                ]
            ),
        ],
        className="ctb-sidebar",
    )
