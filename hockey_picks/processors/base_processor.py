"""
Base processor class for player data processing.
"""

from typing import Dict, List, Any
import pandas as pd


class BaseProcessor:
    """Base class for processors working on player attribute maps."""

    def __init__(self, players: List[Dict[str, Any]]):
        """
        Initialize processor with players data.

        Args:
            players: List of player attribute dictionaries
        """
        self.players = list(players)
        self.player_count = len(self.players)

    def create_dataframe(self, rows: List[Dict]) -> pd.DataFrame:
        """
        Create a DataFrame from rows.

        The index is the row's position in the input list.

        Args:
            rows: List of row dictionaries

        Returns:
            pandas DataFrame
        """
        if not rows:
            return pd.DataFrame()

        return pd.DataFrame(rows)
