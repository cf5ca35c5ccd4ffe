"""
Weighted scoring of player stat lines.
"""

from typing import Dict, List, Any, Mapping

from .base_processor import BaseProcessor
from ..utils.categories import Category
from ..utils.helpers import as_number


def score_entity(entity: Mapping[str, Any], weights: Mapping[str, float]) -> float:
    """
    Weighted sum of a player's stats.

    Stats that didn't parse as numbers count as zero.

    Args:
        entity: Player attribute map
        weights: Stat name -> multiplier

    Returns:
        Score value
    """
    return sum(as_number(entity[stat]) * weight for stat, weight in weights.items())


def score_entities(
    entities: List[Mapping[str, Any]],
    weights: Mapping[str, float],
) -> List[Dict[str, Any]]:
    """Score every player, returning new maps with a 'score' entry added."""
    return [{**entity, 'score': score_entity(entity, weights)} for entity in entities]


class ScoringProcessor(BaseProcessor):
    """Score all players of one category with that category's weights."""

    def __init__(self, players: List[Dict[str, Any]], category: Category):
        super().__init__(players)
        self.category = category
        self.weights = category.describe().weights

    def process_scores(self) -> List[Dict[str, Any]]:
        """
        Score every player of the category.

        Returns:
            Scored players, in collection order
        """
        return score_entities(self.players, self.weights)
