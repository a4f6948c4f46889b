"""
Domain layer: records, the in-memory dataset and the derived table view.
"""

from .controller import ViewController
from .dataset import CharacterDataset
from .exceptions import ConfigError, CtBrowserError, FetchFailure
from .record import Location, Record
from .view_state import FilterCriteria, SortDirection, ViewState

__all__ = [
    "CharacterDataset",
    "ConfigError",
    "CtBrowserError",
    "FetchFailure",
    "FilterCriteria",
    "Location",
    "Record",
    "SortDirection",
    "ViewController",
    "ViewState",
]
