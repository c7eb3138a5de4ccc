"""A two-player console game of dominoes: tiles and table, players, and the game loop."""

__version__ = "0.1.0"
__all__ = ["game", "player", "table"]