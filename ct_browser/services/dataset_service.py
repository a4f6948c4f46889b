from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from ct_browser.config.model import GlobalConfig
from ct_browser.core.dataset import CharacterDataset
from ct_browser.core.exceptions import FetchFailure
from ct_browser.services.dataset_loader import DatasetLoader

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to fetch characters. Please try again later."


@dataclass
class DatasetLoadResult:
    """
    Outcome of the startup load.

    On failure `dataset` is empty and `error` holds the message shown to the user.
    """
    dataset: CharacterDataset
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_dataset(
    config: GlobalConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> DatasetLoadResult:
    """
    Run the loader to completion from synchronous code (app start-up).
    """
    loader = DatasetLoader(
        start_url=config.api_url,
        timeout=config.request_timeout,
        transport=transport,
    )
    try:
        records = asyncio.run(loader.load_all())
    except FetchFailure:
        logger.exception("Dataset load failed", extra={"api_url": config.api_url})
        return DatasetLoadResult(dataset=CharacterDataset.empty(), error=LOAD_ERROR_MESSAGE)

    return DatasetLoadResult(dataset=CharacterDataset(records))
