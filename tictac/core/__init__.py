"""Core solver components: board, evaluator, search, and transposition table."""

from .board import Board, Cell, IllegalMoveError, Move, replay
from .evaluator import LineResult, evaluate_line, is_terminal
from .search import Bound, SearchEngine, SearchResult, search
from .transposition import TranspositionTable
