"""
Paged client for the Ergast-compatible results API (Jolpica).

- One GET per offset, strictly sequential
- Fixed pause after every request to stay under the public rate limit
- A failed page is logged and skipped, never retried
"""
import time
from typing import Any, Iterable, Optional

import requests
from tqdm import tqdm

from f1_wins.config import cfg
from f1_wins.utils.logger import logger


class ResultsClient:
    """
    HTTP client that walks the `/results.json` endpoint page by page.
    """

    def __init__(
        self,
        base_url: str | None = None,
        page_limit: int | None = None,
        rate_limit_delay: float | None = None,
        timeout: int | None = None,
    ) -> None:
        self.base_url = (base_url or cfg.api.base_url).rstrip("/")
        self.page_limit = page_limit or cfg.api.page_limit
        self.rate_limit_delay = cfg.api.rate_limit_delay if rate_limit_delay is None else rate_limit_delay
        self.timeout = timeout or cfg.api.timeout

        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": cfg.api.user_agent,
        })

    @property
    def results_url(self) -> str:
        return f"{self.base_url}/results.json"

    def _pause(self) -> None:
        if self.rate_limit_delay > 0:
            time.sleep(self.rate_limit_delay)

    def get_page(self, offset: int) -> Optional[dict[str, Any]]:
        """
        Fetch a single results page.

        Args:
            offset: Row offset passed to the API.

        Returns:
            Decoded JSON payload, or None if the request failed.
        """
        params = {"limit": self.page_limit, "offset": offset}
        logger.debug(f"Fetching: {self.results_url} params={params}")

        try:
            response = self.session.get(self.results_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed for offset={offset}: {e}")
            return None
        finally:
            self._pause()

        if response.status_code != 200:
            logger.warning(f"Skipping offset={offset}: HTTP {response.status_code}")
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON at offset={offset}: {e}")
            return None

    def fetch_pages(self, offsets: Iterable[int] | None = None) -> list[dict[str, Any]]:
        """
        Fetch every page in the offset range, in order.

        Args:
            offsets: Offsets to request. Defaults to the configured range.

        Returns:
            Successfully decoded pages in fetch order (possibly empty).
        """
        offsets = list(cfg.api.offsets() if offsets is None else offsets)
        logger.info(f"Fetching {len(offsets)} result pages (limit={self.page_limit})...")

        pages: list[dict[str, Any]] = []
        for offset in tqdm(offsets, desc="Result pages", unit="page"):
            page = self.get_page(offset)
            if page is not None:
                pages.append(page)

        skipped = len(offsets) - len(pages)
        if skipped:
            logger.warning(f"{skipped} of {len(offsets)} pages failed and were skipped.")
        logger.info(f"Fetched {len(pages)} pages.")
        return pages
