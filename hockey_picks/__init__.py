"""
Hockey Picks

Scrape QuantHockey season stats for skaters and goalies, score every player
with a weighted stat line, and write one ranked fixed-width report.
"""

__version__ = "1.0.0"
