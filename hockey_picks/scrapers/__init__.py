"""Scrapers for QuantHockey stats pages."""

from .stats_scraper import (
    collect,
    build_request_params,
    QuantHockeyFetcher,
    LocalPageFetcher,
    SavingFetcher,
    PageFetcher,
    FetchError,
)

__all__ = [
    'collect',
    'build_request_params',
    'QuantHockeyFetcher',
    'LocalPageFetcher',
    'SavingFetcher',
    'PageFetcher',
    'FetchError',
]
