"""
Player categories with their column layouts and scoring weights.

Each category describes one QuantHockey stats table: which cell holds which
stat (1-based column positions) and how much each stat counts toward the
player's score. Name and position are descriptive only and carry no weight.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .constants import GOALIE_POSITION


# === SKATERS ===
SKATER_COLUMNS: Dict[str, int] = {
    'name': 2,
    'position': 5,
    'goals': 7,
    'assists': 8,
    'penalty_mins': 10,
    'plus_minus': 11,
    'game_winning_goals': 19,
    'powerplay_pts': 27,
    'shorthanded_pts': 28,
    'shots': 42,
    'hits': 50,
}

SKATER_WEIGHTS: Dict[str, float] = {
    'goals': 5.0,
    'assists': 3.0,
    'plus_minus': 1.0,
    'penalty_mins': 1.0,
    'powerplay_pts': 2.0,
    'shorthanded_pts': 1.0,
    'game_winning_goals': 2.0,
    'shots': 1.0,
    'hits': 1.0,
}

# === GOALIES ===
GOALIE_COLUMNS: Dict[str, int] = {
    'name': 2,
    'wins': 8,
    'shutouts': 12,
}

GOALIE_WEIGHTS: Dict[str, float] = {
    'wins': 5.0,
    'shutouts': 3.0,
}


@dataclass(frozen=True)
class CategoryProfile:
    """Static description of one category's stats table."""
    request_selector: str
    columns: Dict[str, int]
    weights: Dict[str, float]
    position_placeholder: Optional[str] = None


class Category(Enum):
    """Player categories scraped from QuantHockey."""
    SKATER = 'skater'
    GOALIE = 'goalie'

    def describe(self) -> CategoryProfile:
        return _PROFILES[self]


_PROFILES = {
    Category.SKATER: CategoryProfile(
        request_selector='Player',
        columns=SKATER_COLUMNS,
        weights=SKATER_WEIGHTS,
    ),
    Category.GOALIE: CategoryProfile(
        request_selector='Goalie',
        columns=GOALIE_COLUMNS,
        weights=GOALIE_WEIGHTS,
        position_placeholder=GOALIE_POSITION,
    ),
}


def describe(category: Category) -> CategoryProfile:
    """Get the column layout and weights for a category."""
    return category.describe()


def _check_profiles() -> None:
    for category, profile in _PROFILES.items():
        unknown = set(profile.weights) - set(profile.columns)
        if unknown:
            raise ValueError(
                f"{category.value} weights reference columns that aren't extracted: "
                f"{', '.join(sorted(unknown))}"
            )
        if min(profile.columns.values()) < 1:
            raise ValueError(f"{category.value} column positions are 1-based")


_check_profiles()
