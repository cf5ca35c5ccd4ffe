"""
QuantHockey season stats scraper.

Fetches the paginated skater and goalie tables from QuantHockey's
AjaxPaginate endpoint and collects every player row of a category.

Usage:
    # Pages come from the network
    fetcher = QuantHockeyFetcher(season='2017-18')
    skaters = collect(Category.SKATER, fetcher)

    # Pages come from HTML saved by an earlier run
    fetcher = LocalPageFetcher(Path('html_pages'))
"""

import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol
from bs4 import BeautifulSoup
import requests

from ..parsers.stats_parser import extract_last_page, parse_page
from ..utils.categories import Category
from ..utils.constants import (
    STATS_URL,
    STATS_CATEGORY,
    DEFAULT_SEASON,
    DEFAULT_SEASON_TYPE,
    DEFAULT_LANGUAGE,
    DEFAULT_LEAGUE,
    REQUEST_DELAY,
    REQUEST_TIMEOUT,
    USER_AGENT,
)
from ..utils.helpers import AttributeValue, page_file_name
from ..utils.log import debug, info


class FetchError(Exception):
    """Raised when a stats page can't be retrieved."""
    pass


class PageFetcher(Protocol):
    """Anything that can hand back one rendered stats page."""

    def fetch(self, category: Category, page: int) -> BeautifulSoup:
        ...


def build_request_params(
    category: Category,
    page: int,
    season: str = DEFAULT_SEASON,
    season_type: str = DEFAULT_SEASON_TYPE,
) -> Dict[str, Any]:
    """Query parameters for one AjaxPaginate request."""
    return {
        'cat': STATS_CATEGORY,
        'pos': category.describe().request_selector,
        'SS': season,
        'st': season_type,
        'lang': DEFAULT_LANGUAGE,
        'page': page,
        'league': DEFAULT_LEAGUE,
    }


class QuantHockeyFetcher:
    """Fetch stats pages over HTTP, pausing between consecutive requests."""

    def __init__(
        self,
        season: str = DEFAULT_SEASON,
        season_type: str = DEFAULT_SEASON_TYPE,
        session: Optional[requests.Session] = None,
        delay: float = REQUEST_DELAY,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.season = season
        self.season_type = season_type
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': USER_AGENT})
        self.delay = delay
        self.timeout = timeout
        self._last_request: Optional[float] = None

    def _wait(self) -> None:
        if self._last_request is not None and self.delay > 0:
            elapsed = time.monotonic() - self._last_request
            if elapsed < self.delay:
                time.sleep(self.delay - elapsed)
        self._last_request = time.monotonic()

    def fetch(self, category: Category, page: int) -> BeautifulSoup:
        """
        Fetch one page of a category's stats table.

        Raises:
            FetchError: On connection problems or a non-2xx response
        """
        params = build_request_params(category, page, self.season, self.season_type)
        self._wait()
        try:
            response = self.session.get(STATS_URL, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Could not fetch {category.value} page {page}: {e}") from e
        return BeautifulSoup(response.text, 'html.parser')


class LocalPageFetcher:
    """Read stats pages from a directory of saved HTML files."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def fetch(self, category: Category, page: int) -> BeautifulSoup:
        filepath = self.directory / page_file_name(category.value, page)
        if not filepath.exists():
            raise FetchError(f"Saved page not found: {filepath}")
        with open(filepath, 'r', encoding='utf-8') as f:
            return BeautifulSoup(f.read(), 'html.parser')


class SavingFetcher:
    """Wrap another fetcher and keep a copy of every page it returns."""

    def __init__(self, fetcher: PageFetcher, directory: Path):
        self.fetcher = fetcher
        self.directory = Path(directory)

    def fetch(self, category: Category, page: int) -> BeautifulSoup:
        soup = self.fetcher.fetch(category, page)
        self.directory.mkdir(parents=True, exist_ok=True)
        filepath = self.directory / page_file_name(category.value, page)
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(str(soup))
        debug(f"Saved {filepath}")
        return soup


def collect(category: Category, fetcher: PageFetcher) -> List[Dict[str, AttributeValue]]:
    """
    Collect every player of a category across all pages.

    The page count comes from the pagination control on page 1; without
    one, the table is a single page. Pages are fetched in order and rows
    keep their page-then-row order.

    Args:
        category: Category to collect
        fetcher: Source of rendered pages

    Returns:
        List of unscored player attribute maps

    Raises:
        FetchError: If any page can't be fetched
        StatsParsingError: If any row doesn't match the column layout
    """
    first_page = fetcher.fetch(category, 1)
    total_pages = extract_last_page(first_page) or 1

    players = parse_page(category, first_page)
    debug(f"{category.value} page 1/{total_pages}: {len(players)} rows")

    for page in range(2, total_pages + 1):
        rows = parse_page(category, fetcher.fetch(category, page))
        debug(f"{category.value} page {page}/{total_pages}: {len(rows)} rows")
        players.extend(rows)

    info(f"Collected {len(players)} {category.value}s from {total_pages} page(s)")
    return players
