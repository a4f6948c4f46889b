from __future__ import annotations

from pathlib import Path

from ct_browser.config.model import GlobalConfig
from ct_browser.core.dataset import CharacterDataset
from ct_browser.core.record import Record
from ct_browser.core.view_state import FilterCriteria, SortDirection, ViewState
from ct_browser.ui.callbacks.callbacks_view_state import _apply_view_event
from ct_browser.ui.config import AppConfig
from ct_browser.ui.ids import IDs, character_row_id


def _ctx() -> AppConfig:
    records = [Record(id=i, name=f"Character {i:02d}", species="Human" if i % 2 else "Alien")
               for i in range(1, 26)]
    return AppConfig(
        config_root=Path("config"),
        global_config=GlobalConfig(),
        dataset=CharacterDataset(records),
    )


def _inputs(triggered_id, state=None, filters=None, **extra):
    inputs = {
        "triggered_id": triggered_id,
        "triggered_value": 1,
        "page": None,
        "filters": filters or {"name": "", "species": "", "status": ""},
        "state": (state or ViewState()).to_dict(),
    }
    inputs.update(extra)
    return inputs


def test_apply_uses_input_values_as_criteria():
    ctx = _ctx()
    controller = _apply_view_event(
        ctx,
        _inputs(
            IDs.Control.APPLY_FILTERS_BTN,
            state=ViewState(current_page=3),
            filters={"name": "", "species": "alien", "status": None},
        ),
    )

    assert controller.state.criteria == FilterCriteria(species="alien")
    assert controller.state.current_page == 1
    assert len(controller.rows) == 12


def test_reset_clears_state_and_draft():
    ctx = _ctx()
    state = ViewState(criteria=FilterCriteria(species="alien"), current_page=2)
    controller = _apply_view_event(
        ctx,
        _inputs(IDs.Control.RESET_FILTERS_BTN, state=state, filters={"species": "alien"}),
    )

    assert controller.state.criteria == FilterCriteria()
    assert controller.draft == FilterCriteria()
    assert len(controller.rows) == 25


def test_sort_header_toggles():
    ctx = _ctx()
    controller = _apply_view_event(ctx, _inputs(IDs.Control.SORT_HEADER))

    assert controller.state.applied_sort is SortDirection.ASC
    assert controller.state.sort_direction is SortDirection.DESC


def test_sort_does_not_apply_pending_filter_edits():
    ctx = _ctx()
    controller = _apply_view_event(
        ctx,
        _inputs(IDs.Control.SORT_HEADER, filters={"name": "Character 01"}),
    )

    assert controller.state.criteria == FilterCriteria()
    assert len(controller.rows) == 25


def test_page_select_sets_page():
    ctx = _ctx()
    controller = _apply_view_event(ctx, _inputs(IDs.Control.PAGE_SELECT, page=3))

    assert controller.state.current_page == 3
    assert [r.id for r in controller.page_rows] == [21, 22, 23, 24, 25]


def test_page_select_same_page_is_noop():
    ctx = _ctx()
    assert _apply_view_event(ctx, _inputs(IDs.Control.PAGE_SELECT, page=1)) is None
    assert _apply_view_event(ctx, _inputs(IDs.Control.PAGE_SELECT, page=None)) is None


def test_row_click_selects_record():
    ctx = _ctx()
    controller = _apply_view_event(ctx, _inputs(character_row_id(7)))

    assert controller.selected.name == "Character 07"


def test_freshly_rendered_rows_do_not_select():
    ctx = _ctx()
    assert _apply_view_event(ctx, _inputs(character_row_id(7), triggered_value=0)) is None


def test_row_click_for_unknown_record_is_noop():
    ctx = _ctx()
    assert _apply_view_event(ctx, _inputs(character_row_id(999))) is None


def test_close_clears_selection():
    ctx = _ctx()
    controller = _apply_view_event(
        ctx, _inputs(IDs.Control.DETAIL_CLOSE_BTN, state=ViewState(selected_id=4))
    )
    assert controller.selected is None
    assert _apply_view_event(ctx, _inputs(IDs.Control.DETAIL_CLOSE_BTN)) is None


def test_no_trigger_is_noop():
    assert _apply_view_event(_ctx(), _inputs(None)) is None
