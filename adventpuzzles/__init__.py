"""Solutions to seasonal programming puzzles, one module per day, grouped by year."""

__version__ = "0.1.0"