from __future__ import annotations

import json

import pytest

from ct_browser.config.config_loader import load_global_config
from ct_browser.config.model import DEFAULT_API_URL, GlobalConfig
from ct_browser.core.exceptions import ConfigError


def _write_global(tmp_path, raw) -> None:
    (tmp_path / "global.json").write_text(json.dumps(raw))


def test_load_global_config_reads_values(tmp_path):
    _write_global(
        tmp_path,
        {
            "ui_title": "Characters",
            "subtitle": "All of them",
            "api_url": "https://example.test/api/character",
            "request_timeout": 3,
        },
    )

    cfg = load_global_config(tmp_path)

    assert cfg == GlobalConfig(
        ui_title="Characters",
        subtitle="All of them",
        api_url="https://example.test/api/character",
        request_timeout=3.0,
    )


def test_load_global_config_defaults(tmp_path):
    _write_global(tmp_path, {})

    cfg = load_global_config(tmp_path)

    assert cfg.api_url == DEFAULT_API_URL
    assert cfg.request_timeout == 10.0


def test_missing_global_json(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


@pytest.mark.parametrize(
    "raw",
    [
        ["not", "an", "object"],
        {"request_timeout": "soon"},
        {"request_timeout": 0},
    ],
)
def test_invalid_global_json(tmp_path, raw):
    _write_global(tmp_path, raw)
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_global_json_syntax_error(tmp_path):
    (tmp_path / "global.json").write_text("{ui_title: ")
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)
