"""
Helper utility functions for the hockey picks scraper.
"""

import re
from typing import Any, Union

from .constants import PAGE_FILE_TEMPLATE

AttributeValue = Union[float, str]

# Plain decimal numbers only: no "nan", "inf", exponents or underscores
_NUMBER_RE = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)')


def coerce_cell(text: str) -> AttributeValue:
    """
    Coerce a table cell's text to a float, keeping the text when it isn't numeric.

    Thousands separators are ignored ("1,024" -> 1024.0). Names, positions
    and blank cells come back unchanged, including names float() would
    otherwise read as numbers ("Nan").

    Args:
        text: Cell text as rendered in the page

    Returns:
        float value, or the original text verbatim
    """
    if not isinstance(text, str):
        return text
    candidate = text.strip().replace(',', '')
    if _NUMBER_RE.fullmatch(candidate):
        return float(candidate)
    return text


def as_number(value: Any) -> float:
    """Numeric view of an attribute value; anything non-numeric counts as 0.0."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    return 0.0


def as_text(value: Any) -> str:
    """Text view of an attribute value."""
    if isinstance(value, str):
        return value
    return format_score(value)


def format_score(value: float) -> str:
    """
    Format a number the way the report prints it.

    Integral values drop the decimal part (17.0 -> "17"), everything
    else uses the shortest general form (17.5 -> "17.5").
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:g}"


def page_file_name(category_label: str, page: int) -> str:
    """File name used when saving or loading a fetched page."""
    return PAGE_FILE_TEMPLATE.format(category=category_label, page=page)
