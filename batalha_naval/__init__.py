"""Battleship board with linear and diagonal ships, area abilities and preset levels."""

__version__ = "1.0.0"
__all__ = ["abilities", "board", "levels"]