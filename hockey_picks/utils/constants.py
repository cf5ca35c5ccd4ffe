"""
Scraper configuration, request parameters, and report layout.
"""

from pathlib import Path
import os


# === Output Configuration ===
OUTPUT_FILENAME = "scores.txt"


def default_output_path() -> Path:
    """Where the report goes when no --output is given.

    Uses the HOCKEY_PICKS_DIR env var when it points at an existing
    directory, otherwise the current working directory.
    """
    env_base = os.environ.get("HOCKEY_PICKS_DIR")
    if env_base:
        path = Path(env_base).expanduser()
        if path.is_dir():
            return path / OUTPUT_FILENAME

    return Path.cwd() / OUTPUT_FILENAME


# === QuantHockey Request Configuration ===
STATS_URL = "https://www.quanthockey.com/scripts/AjaxPaginate.php"
STATS_CATEGORY = "Season"
DEFAULT_SEASON = "2017-18"
DEFAULT_SEASON_TYPE = "reg"   # 'reg' = regular season, 'playoffs' = postseason
DEFAULT_LANGUAGE = "en"
DEFAULT_LEAGUE = "NHL"

REQUEST_DELAY = 1.0    # seconds between consecutive page requests
REQUEST_TIMEOUT = 30   # seconds
USER_AGENT = "Mozilla/5.0 (compatible; HockeyPicks/1.0)"

# === Page Structure ===
# Data rows of the stats table
ROWS_SELECTOR = "table tbody tr"
# Page-number links of the pagination control below the table
PAGINATION_SELECTOR = "ul.pagination li a"

# Saved pages are named '<category>_page<n>.html'
PAGE_FILE_TEMPLATE = "{category}_page{page}.html"

# === Report Layout ===
RANK_WIDTH = 4
NAME_WIDTH = 30
POSITION_WIDTH = 3
SCORE_WIDTH = 5
GOALIE_POSITION = "G"
