"""
Fox Catcher - a two-player board game engine

One fox against four dogs on an 8x8 board. The package provides:
- The rules engine (board state, legal moves, end of game)
- A game loop turning square selections into moves
- Persistent results of finished games
- A terminal front end and a read-only results API
"""

__version__ = "0.1.0"
