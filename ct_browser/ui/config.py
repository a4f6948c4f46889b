from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ct_browser.config.model import GlobalConfig
from ct_browser.core.dataset import CharacterDataset


@dataclass
class AppConfig:
    """
    Shared state for the Dash app, passed into layout + callback registration
    functions instead of using module-level globals.

    `dataset` is loaded once at start-up and never mutated afterwards.
    """
    config_root: Path
    global_config: GlobalConfig
    dataset: CharacterDataset = field(default_factory=CharacterDataset.empty)
    load_error: Optional[str] = None
