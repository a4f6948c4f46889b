"""Full-listing download from the paginated character endpoint."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, List, Optional

import httpx

from ct_browser.config.model import DEFAULT_API_URL
from ct_browser.core.exceptions import FetchFailure
from ct_browser.core.record import Record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    """One batch of records plus the URL of the next batch (None on the last page)."""

    results: List[Record]
    next_url: Optional[str]


def parse_page(payload: Any) -> Page:
    """Parse one listing response.

    Raises:
        ValueError: payload does not have the `{results, info: {next}}` shape
    """
    if not isinstance(payload, dict):
        raise ValueError("page payload must be a JSON object")

    results = payload.get("results")
    if not isinstance(results, list):
        raise ValueError("page payload is missing a 'results' list")

    info = payload.get("info") or {}
    if not isinstance(info, dict):
        raise ValueError("page 'info' must be an object")

    try:
        records = [Record.from_dict(item) for item in results]
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"malformed record in page: {e}") from e

    next_url = info.get("next") or None
    if next_url is not None and not isinstance(next_url, str):
        raise ValueError(f"page 'info.next' must be a URL string, got {type(next_url).__name__}")

    return Page(results=records, next_url=next_url)


class DatasetLoader:
    """Follow `info.next` from the start URL until the listing is exhausted."""

    def __init__(
        self,
        start_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.start_url = start_url
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def iter_pages(self, client: httpx.AsyncClient) -> AsyncIterator[Page]:
        """Yield pages one at a time; each request waits for the previous page.

        Errors propagate unchanged; `load_all` maps them to FetchFailure.
        """
        url: Optional[str] = self.start_url
        while url:
            response = await client.get(url)
            response.raise_for_status()
            page = parse_page(response.json())
            logger.debug(
                "Fetched page",
                extra={"url": url, "n_records": len(page.results)},
            )
            yield page
            url = page.next_url

    async def load_all(self) -> List[Record]:
        """Fetch every page and return all records in page order.

        Raises:
            FetchFailure: any page failed; nothing fetched so far is returned
        """
        records: List[Record] = []
        n_pages = 0
        try:
            async with self._client() as client:
                async for page in self.iter_pages(client):
                    records.extend(page.results)
                    n_pages += 1
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.error(
                "Character listing failed to load",
                extra={"start_url": self.start_url, "pages_fetched": n_pages, "error": str(e)},
            )
            raise FetchFailure(f"Failed to load {self.start_url}: {e}") from e

        logger.info(
            "Character listing loaded",
            extra={"start_url": self.start_url, "n_pages": n_pages, "n_records": len(records)},
        )
        return records
