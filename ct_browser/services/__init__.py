from .dataset_loader import DatasetLoader, Page, parse_page
from .dataset_service import DatasetLoadResult, load_dataset

__all__ = ["DatasetLoader", "DatasetLoadResult", "Page", "load_dataset", "parse_page"]
