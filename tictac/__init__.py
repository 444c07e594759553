"""Exact N×N tic-tac-toe solver."""

from tictac.core import (
    Board, Cell, IllegalMoveError, SearchEngine, SearchResult,
    is_terminal, replay, search,
)
