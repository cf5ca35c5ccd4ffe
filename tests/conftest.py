"""Shared builders for stats pages used across the test suite."""

from typing import Dict, List, Optional

import pytest
from bs4 import BeautifulSoup

from hockey_picks.utils.categories import Category


def build_cells(category: Category, values: Dict[str, object]) -> List[str]:
    """Build a full-width row with the given stats placed in their columns."""
    profile = category.describe()
    cells = [''] * max(profile.columns.values())
    for attribute, value in values.items():
        cells[profile.columns[attribute] - 1] = str(value)
    return cells


def build_page_html(rows: List[List[str]], last_page: Optional[int] = None) -> str:
    """Render rows as a stats table, with a pagination control when last_page is set."""
    header = ''.join(f'<th>C{i}</th>' for i in range(1, len(rows[0]) + 1)) if rows else ''
    body = ''.join(
        '<tr>' + ''.join(f'<td>{cell}</td>' for cell in row) + '</tr>'
        for row in rows
    )
    html = f'<table><thead><tr>{header}</tr></thead><tbody>{body}</tbody></table>'
    if last_page:
        links = ''.join(f'<li><a href="#">{n}</a></li>' for n in range(1, last_page + 1))
        html += f'<ul class="pagination">{links}<li><a href="#">Next</a></li></ul>'
    return f'<html><body>{html}</body></html>'


class FakeFetcher:
    """Serve pages from a dict keyed by (category, page) and record every request."""

    def __init__(self, pages: Dict[tuple, str]):
        self.pages = pages
        self.calls = []

    def fetch(self, category: Category, page: int) -> BeautifulSoup:
        self.calls.append((category, page))
        return BeautifulSoup(self.pages[(category, page)], 'html.parser')


@pytest.fixture
def skater_cells():
    """Builder for skater rows."""
    return lambda **values: build_cells(Category.SKATER, values)


@pytest.fixture
def goalie_cells():
    """Builder for goalie rows."""
    return lambda **values: build_cells(Category.GOALIE, values)


@pytest.fixture
def page_html():
    return build_page_html


@pytest.fixture
def fake_fetcher():
    return FakeFetcher
