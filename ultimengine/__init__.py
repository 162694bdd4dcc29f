"""An ultimate tic-tac-toe engine with alpha-beta search and a terminal game."""

__version__ = "0.1.0"