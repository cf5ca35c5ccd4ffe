"""
Rankings processor: merge scored skaters and goalies into one ranked report.
"""

from pathlib import Path
from typing import Dict, List, Any, Mapping, Union

from .base_processor import BaseProcessor
from ..utils.constants import (
    RANK_WIDTH,
    NAME_WIDTH,
    POSITION_WIDTH,
    SCORE_WIDTH,
)
from ..utils.categories import Category
from ..utils.helpers import as_text, format_score


def render_line(rank: int, player: Mapping[str, Any]) -> str:
    """
    Render one report line.

    Columns are left-aligned: rank (4), name (30), position (3), score (5).
    Goalies have no position column and show the goalie placeholder
    ('G') instead.

    Args:
        rank: 1-based rank
        player: Scored player attribute map

    Returns:
        Fixed-width report line
    """
    position = player.get('position')
    if position is None:
        position = Category.GOALIE.describe().position_placeholder
    return (
        f"{rank:<{RANK_WIDTH}}"
        f"{as_text(player['name']):<{NAME_WIDTH}}"
        f"{as_text(position):<{POSITION_WIDTH}}"
        f"{format_score(player['score']):<{SCORE_WIDTH}}"
    )


class RankingsProcessor(BaseProcessor):
    """Rank scored players of every category together."""

    def __init__(self, scored_skaters: List[Dict[str, Any]], scored_goalies: List[Dict[str, Any]]):
        super().__init__(list(scored_skaters) + list(scored_goalies))

    def process_rankings(self) -> List[Dict[str, Any]]:
        """
        Sort players by score, highest first.

        Players with equal scores keep their collection order (skaters
        before goalies, then page, then row).

        Returns:
            Players in rank order
        """
        df = self.create_dataframe(self.players)
        if df.empty:
            return []

        order = df['score'].sort_values(ascending=False, kind='stable').index
        return [self.players[i] for i in order]

    def render(self) -> List[str]:
        """Render the ranked players as report lines."""
        return [render_line(rank, player) for rank, player in enumerate(self.process_rankings(), start=1)]


def rank_entities(scored_skaters: List[Dict[str, Any]], scored_goalies: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Merge both categories and sort by score, highest first."""
    return RankingsProcessor(scored_skaters, scored_goalies).process_rankings()


def aggregate_and_render(scored_skaters: List[Dict[str, Any]], scored_goalies: List[Dict[str, Any]]) -> List[str]:
    """Merge, rank and render both categories as report lines."""
    return RankingsProcessor(scored_skaters, scored_goalies).render()


def write_report(lines: List[str], output_path: Union[str, Path]) -> Path:
    """
    Write report lines to a text file.

    Args:
        lines: Rendered report lines
        output_path: Destination file

    Returns:
        Path of the written file
    """
    path = Path(output_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        for line in lines:
            f.write(line + '\n')
    return path
