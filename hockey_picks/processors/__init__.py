"""Processors for scoring and ranking player stat lines."""

from .base_processor import BaseProcessor
from .scoring_processor import ScoringProcessor, score_entity, score_entities
from .rankings_processor import (
    RankingsProcessor,
    rank_entities,
    render_line,
    aggregate_and_render,
    write_report,
)

__all__ = [
    'BaseProcessor',
    'ScoringProcessor',
    'RankingsProcessor',
    'score_entity',
    'score_entities',
    'rank_entities',
    'render_line',
    'aggregate_and_render',
    'write_report',
]
