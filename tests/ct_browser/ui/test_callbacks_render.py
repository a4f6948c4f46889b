from __future__ import annotations

from pathlib import Path

from ct_browser.config.model import GlobalConfig
from ct_browser.core.dataset import CharacterDataset
from ct_browser.core.record import Location, Record
from ct_browser.core.view_state import FilterCriteria, SortDirection, ViewState
from ct_browser.ui.callbacks.callbacks_render import _render_view
from ct_browser.ui.config import AppConfig
from ct_browser.ui.helpers import HIDDEN, VISIBLE
from ct_browser.ui.ids import character_row_id


def _ctx(n: int = 23) -> AppConfig:
    records = [
        Record(
            id=i,
            name=f"Character {i:02d}",
            species="Human",
            status="Alive",
            gender="Genderless",
            location=Location(name=f"Dimension {i}"),
        )
        for i in range(1, n + 1)
    ]
    return AppConfig(
        config_root=Path("config"),
        global_config=GlobalConfig(),
        dataset=CharacterDataset(records),
    )


def test_initial_render_shows_first_page():
    view = _render_view(_ctx(), ViewState().to_dict())

    assert len(view["rows"]) == 10
    assert view["rows"][0].id == character_row_id(1)
    assert view["table_style"] == VISIBLE
    assert view["empty_style"] == HIDDEN
    assert view["sort_label"] == "Name ▲"
    assert [o["value"] for o in view["page_options"]] == [1, 2, 3]
    assert view["status"] == "23 characters · page 1 of 3"
    assert view["detail_style"]["display"] == "none"


def test_render_none_state_uses_defaults():
    view = _render_view(_ctx(), None)
    assert len(view["rows"]) == 10


def test_no_matches_shows_empty_message():
    state = ViewState(criteria=FilterCriteria(name="Zeep"))
    view = _render_view(_ctx(), state.to_dict())

    assert view["rows"] == []
    assert view["table_style"] == HIDDEN
    assert view["empty_style"] == VISIBLE
    assert view["page_options"] == []
    assert view["status"] == "0 characters"


def test_descending_sort_label_and_last_page():
    state = ViewState(
        sort_direction=SortDirection.DESC,
        applied_sort=SortDirection.ASC,
        current_page=3,
    )
    view = _render_view(_ctx(), state.to_dict())

    assert view["sort_label"] == "Name ▼"
    assert [row.id for row in view["rows"]] == [character_row_id(i) for i in (21, 22, 23)]


def test_selected_record_fills_detail_panel():
    state = ViewState(selected_id=5)
    view = _render_view(_ctx(), state.to_dict())

    assert "display" not in view["detail_style"]
    texts = [p.children for p in view["detail_children"]]
    assert texts == [
        "Name: Character 05",
        "Species: Human",
        "Status: Alive",
        "Gender: Genderless",
        "Location: Dimension 5",
    ]
    assert "table-active" in view["rows"][4].className


def test_row_cells_are_name_species_status():
    view = _render_view(_ctx(), ViewState().to_dict())

    cells = [td.children for td in view["rows"][0].children]
    assert cells == ["Character 01", "Human", "Alive"]
