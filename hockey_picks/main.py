"""
Main entry point for the Hockey Picks scraper.
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from .parsers.stats_parser import StatsParsingError
from .processors.rankings_processor import aggregate_and_render, write_report
from .processors.scoring_processor import ScoringProcessor
from .scrapers.stats_scraper import (
    collect,
    FetchError,
    LocalPageFetcher,
    PageFetcher,
    QuantHockeyFetcher,
    SavingFetcher,
)
from .utils.categories import Category
from .utils.constants import DEFAULT_SEASON, DEFAULT_SEASON_TYPE, default_output_path
from .utils.log import info, warn, error, success, set_verbosity, set_use_emoji


def build_report(fetcher: PageFetcher) -> List[str]:
    """
    Collect, score and rank skaters and goalies.

    Args:
        fetcher: Source of rendered stats pages

    Returns:
        Report lines, highest score first

    Raises:
        FetchError: If any page can't be fetched
        StatsParsingError: If any row doesn't match its column layout
    """
    scored = {}
    for category in (Category.SKATER, Category.GOALIE):
        info(f"Collecting {category.value}s...")
        players = collect(category, fetcher)
        scored[category] = ScoringProcessor(players, category).process_scores()

    return aggregate_and_render(scored[Category.SKATER], scored[Category.GOALIE])


def run(fetcher: PageFetcher, output_path: Path) -> Path:
    """Build the full report and write it once every category succeeded."""
    lines = build_report(fetcher)
    if not lines:
        warn("No players found, writing an empty report")
    return write_report(lines, output_path)


def create_fetcher(args: argparse.Namespace) -> PageFetcher:
    """Pick the page source from command-line options."""
    if args.local:
        info(f"Reading saved pages from {args.local}")
        fetcher = LocalPageFetcher(args.local)
    else:
        info(f"Fetching {args.season} ({args.season_type}) stats from QuantHockey")
        fetcher = QuantHockeyFetcher(season=args.season, season_type=args.season_type)

    if args.save_html:
        fetcher = SavingFetcher(fetcher, args.save_html)
    return fetcher


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Hockey Picks - Rank NHL skaters and goalies by weighted season stats"
    )
    parser.add_argument(
        '--output',
        type=Path,
        help='Report output filename (default: scores.txt in the working directory)'
    )
    parser.add_argument(
        '--season',
        default=DEFAULT_SEASON,
        help='Season to scrape (e.g., 2017-18)'
    )
    parser.add_argument(
        '--season-type',
        default=DEFAULT_SEASON_TYPE,
        help="Season type: 'reg' for regular season"
    )
    parser.add_argument(
        '--local',
        type=Path,
        help='Read pages from a directory of saved HTML instead of fetching'
    )
    parser.add_argument(
        '--save-html',
        type=Path,
        help='Save every fetched page to this directory'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable extra debug output'
    )
    parser.add_argument(
        '--no-emoji',
        action='store_true',
        help='Disable emoji in console output'
    )

    args = parser.parse_args(argv)

    set_verbosity(args.verbose)
    set_use_emoji(not args.no_emoji)

    if args.local and not args.local.is_dir():
        error(f"Saved pages directory does not exist: {args.local}")
        return 1

    output_path = args.output or default_output_path()

    info("Starting Hockey Picks...")

    try:
        report_path = run(create_fetcher(args), output_path)
    except FetchError as e:
        error(f"Fetch failed, no report written: {e}")
        return 1
    except StatsParsingError as e:
        error(f"Stats table layout changed, no report written: {e}")
        return 1
    except OSError as e:
        error(f"File error, no report written to {output_path}: {e}")
        return 1

    success("\n✅ Rankings complete!")
    info(f"Report: {report_path.resolve()}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
