from __future__ import annotations

import json
import logging
from pathlib import Path

from ct_browser.config.model import GlobalConfig
from ct_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load global.json from a config directory. Missing keys fall back to the
    GlobalConfig defaults.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{global_path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    defaults = GlobalConfig()

    timeout_raw = raw.get("request_timeout", defaults.request_timeout)
    try:
        request_timeout = float(timeout_raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"request_timeout must be a number, got {timeout_raw!r}") from e
    if request_timeout <= 0:
        raise ConfigError(f"request_timeout must be positive, got {request_timeout}")

    return GlobalConfig(
        ui_title=raw.get("ui_title", defaults.ui_title),
        subtitle=raw.get("subtitle", defaults.subtitle),
        api_url=raw.get("api_url", defaults.api_url),
        request_timeout=request_timeout,
    )
