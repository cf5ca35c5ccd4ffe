"""HTML parsing modules for QuantHockey stats pages."""

from .stats_parser import (
    extract_entity,
    extract_rows,
    extract_last_page,
    parse_page,
    StatsParsingError,
    ShapeMismatchError,
)

__all__ = [
    'extract_entity',
    'extract_rows',
    'extract_last_page',
    'parse_page',
    'StatsParsingError',
    'ShapeMismatchError',
]
