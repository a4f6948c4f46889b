from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import ALL, Input, Output, State, exceptions, no_update

from ct_browser.core.controller import ViewController
from ct_browser.core.view_state import FILTER_FIELDS, ViewState
from ct_browser.ui.ids import FILTER_INPUTS, IDs

if TYPE_CHECKING:
    from ct_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _apply_view_event(ctx: AppConfig, inputs: dict[str, Any]) -> Optional[ViewController]:
    """
    Pure helper: rebuild a controller from the stored view state, apply the
    operation matching the trigger and return it. Returns None when the event
    does not change anything.
    """
    triggered_id = inputs.get("triggered_id")
    if triggered_id is None:
        return None

    controller = ViewController(ctx.dataset, ViewState.from_dict(inputs.get("state")))

    # The text inputs are the draft criteria
    filters = inputs.get("filters") or {}
    for field_name in FILTER_FIELDS:
        controller.update_filter(field_name, filters.get(field_name))

    if triggered_id == IDs.Control.APPLY_FILTERS_BTN:
        controller.apply_filters()

    elif triggered_id == IDs.Control.RESET_FILTERS_BTN:
        controller.reset_filters()

    elif triggered_id == IDs.Control.SORT_HEADER:
        controller.toggle_sort()

    elif triggered_id == IDs.Control.PAGE_SELECT:
        page = inputs.get("page")
        if page is None or page == controller.state.current_page:
            return None
        controller.set_page(int(page))

    elif triggered_id == IDs.Control.DETAIL_CLOSE_BTN:
        if controller.state.selected_id is None:
            return None
        controller.select_record(None)

    elif isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.CHARACTER_ROW:
        # Freshly rendered rows report n_clicks=0; only real clicks select
        if not inputs.get("triggered_value"):
            return None
        record = ctx.dataset.get(triggered_id.get("index"))
        if record is None:
            return None
        controller.select_record(record)

    else:
        logger.warning("Unhandled view event", extra={"triggered_id": str(triggered_id)})
        return None

    return controller


def register_view_state_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # User events -> ViewState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Output(IDs.Control.PAGE_SELECT, "value"),
        Output(IDs.Control.NAME_FILTER, "value"),
        Output(IDs.Control.SPECIES_FILTER, "value"),
        Output(IDs.Control.STATUS_FILTER, "value"),
        Input(IDs.Control.APPLY_FILTERS_BTN, "n_clicks"),
        Input(IDs.Control.RESET_FILTERS_BTN, "n_clicks"),
        Input(IDs.Control.SORT_HEADER, "n_clicks"),
        Input(IDs.Control.PAGE_SELECT, "value"),
        Input(IDs.Control.DETAIL_CLOSE_BTN, "n_clicks"),
        Input({"type": IDs.Pattern.CHARACTER_ROW, "index": ALL}, "n_clicks"),
        State(IDs.Control.NAME_FILTER, "value"),
        State(IDs.Control.SPECIES_FILTER, "value"),
        State(IDs.Control.STATUS_FILTER, "value"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def sync_view_state_from_ui(
            _apply, _reset, _sort, page_val, _close, _rows,
            name_val, species_val, status_val, state_data,
    ):
        triggered = dash.ctx.triggered
        inputs = {
            "triggered_id": dash.ctx.triggered_id,
            "triggered_value": triggered[0].get("value") if triggered else None,
            "page": page_val,
            "filters": {"name": name_val, "species": species_val, "status": status_val},
            "state": state_data,
        }

        controller = _apply_view_event(ctx, inputs)
        if controller is None:
            raise exceptions.PreventUpdate

        if dash.ctx.triggered_id == IDs.Control.RESET_FILTERS_BTN:
            draft = controller.draft.to_dict()
            filter_values = tuple(draft[f] for f in FILTER_INPUTS)
        else:
            filter_values = (no_update,) * len(FILTER_INPUTS)

        return (controller.state.to_dict(), controller.state.current_page, *filter_values)
