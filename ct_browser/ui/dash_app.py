from __future__ import annotations

import logging
import socket
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
import httpx
from dash import Dash

from .config import AppConfig
from ct_browser.config.config_loader import load_global_config
from ct_browser.services.dataset_service import load_dataset
from ct_browser.ui.layout.build_layout import build_layout
from ct_browser.ui.callbacks.callbacks_render import register_render_callbacks
from ct_browser.ui.callbacks.callbacks_view_state import register_view_state_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load the full character listing once; failures leave an empty table
    result = load_dataset(global_config, transport=transport)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset=result.dataset,
        load_error=result.error,
    )

    logger.info(
        "App context ready",
        extra={"n_records": len(ctx.dataset), "load_ok": result.ok},
    )

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_view_state_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    return app


def find_free_port(start_port: int, attempts: int = 100) -> int:
    """
    First port at or after start_port with nothing listening on localhost.
    Falls back to start_port when the whole range is taken.
    """
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                if port != start_port:
                    logger.warning(
                        "Preferred port taken; using next free port",
                        extra={"preferred_port": start_port, "port": port},
                    )
                return port
    return start_port
