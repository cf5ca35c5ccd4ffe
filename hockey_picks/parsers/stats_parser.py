"""
Stats parser for extracting player rows and pagination from QuantHockey pages.
"""

from typing import Dict, List, Optional
from bs4 import BeautifulSoup

from ..utils.categories import Category
from ..utils.constants import ROWS_SELECTOR, PAGINATION_SELECTOR
from ..utils.helpers import AttributeValue, coerce_cell


class StatsParsingError(Exception):
    """Raised when a stats page can't be turned into player rows."""
    pass


class ShapeMismatchError(StatsParsingError):
    """Raised when a row has fewer cells than the category's column layout needs."""

    def __init__(self, category: Category, attribute: str, column: int, row_width: int):
        self.category = category
        self.attribute = attribute
        self.column = column
        self.row_width = row_width
        super().__init__(
            f"{category.value} row has {row_width} cells, "
            f"but '{attribute}' is read from column {column}"
        )


def extract_entity(category: Category, cells: List[str]) -> Dict[str, AttributeValue]:
    """
    Turn one table row into a player's attribute map.

    Every column in the category's layout is read by position and coerced
    to a float where possible. Text that isn't numeric (names, positions)
    is kept as-is.

    Args:
        category: Category whose column layout applies
        cells: Cell texts of the row, in page order

    Returns:
        Dictionary with one entry per column in the layout

    Raises:
        ShapeMismatchError: If the row is too short for the layout
    """
    entity = {}
    for attribute, column in category.describe().columns.items():
        if column > len(cells):
            raise ShapeMismatchError(category, attribute, column, len(cells))
        entity[attribute] = coerce_cell(cells[column - 1])
    return entity


def extract_rows(soup: BeautifulSoup) -> List[List[str]]:
    """
    Extract the data rows of the stats table.

    Rows without any data cells (repeated header rows) are skipped.

    Returns:
        List of rows, each a list of stripped cell texts
    """
    rows = []
    for row in soup.select(ROWS_SELECTOR):
        if not row.find('td'):
            continue
        rows.append([cell.get_text(strip=True) for cell in row.find_all(['th', 'td'])])
    return rows


def extract_last_page(soup: BeautifulSoup) -> Optional[int]:
    """
    Read the last page number from the pagination control.

    Links that aren't page numbers ("Next", "»") are ignored.

    Returns:
        Last page number, or None if the page has no pagination control
    """
    last_page = None
    for link in soup.select(PAGINATION_SELECTOR):
        text = link.get_text(strip=True)
        if text.isdecimal():
            last_page = int(text)
    return last_page


def parse_page(category: Category, soup: BeautifulSoup) -> List[Dict[str, AttributeValue]]:
    """Extract every player on one stats page, in table order."""
    return [extract_entity(category, cells) for cells in extract_rows(soup)]
