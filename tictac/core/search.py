import logging
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from tictac.config import CONFIG
from tictac.core.board import Board, Cell, Move
from tictac.core.evaluator import is_terminal
from tictac.core.transposition import TranspositionTable
from tictac.core.utils import format_info

logger = logging.getLogger(__name__)

INF = 1000000


class Bound(IntEnum):
    EXACT = 0
    UPPER = 1  # failed low: true value <= reported value
    LOWER = 2  # failed high: true value >= reported value


@dataclass(frozen=True)
class SearchResult:
    line: Tuple[Move, ...]
    value: int
    bound: Bound = Bound.EXACT

    def __iter__(self):
        return iter((self.line, self.value))

    @property
    def best_move(self) -> Optional[Move]:
        return self.line[0] if self.line else None


@dataclass
class SearchStats:
    nodes: int = 0
    cache_hits: int = 0
    cutoffs: int = 0
    stores: int = 0


class SearchEngine:
    """Exhaustive minimax with alpha-beta pruning and a transposition table.

    X maximizes and O minimizes. The table is owned by the engine and is
    cleared at the start of every ``search`` call, so cached values always
    belong to a single root and side to move.
    """

    def __init__(self, tt: Optional[TranspositionTable] = None,
                 pruning: Optional[bool] = None,
                 cache_enabled: Optional[bool] = None,
                 cache_leaves: Optional[bool] = None):
        cfg = CONFIG.search
        self.tt = tt if tt is not None else TranspositionTable()
        self.pruning = cfg.pruning if pruning is None else pruning
        self.cache_enabled = cfg.cache_enabled if cache_enabled is None else cache_enabled
        self.cache_leaves = cfg.cache_leaves if cache_leaves is None else cache_leaves
        self.stats = SearchStats()

    def search(self, board: Board, player: Cell = Cell.X) -> SearchResult:
        """Solve ``board`` with ``player`` to move.

        The caller's board is not modified. The returned line is in game
        order starting with ``player``'s move.
        """
        if player is Cell.EMPTY:
            raise ValueError("Side to move must be X or O")
        self.tt.clear()
        self.stats = SearchStats()
        start_time = time.time()

        result = self._minimax(board.copy(), player, -INF, INF)

        elapsed = time.time() - start_time
        logger.info(format_info(result.value, self.stats.nodes, self.stats.cache_hits,
                                self.stats.cutoffs, elapsed, result.line))
        return result

    def _minimax(self, board: Board, player: Cell, alpha: int, beta: int) -> SearchResult:
        self.stats.nodes += 1

        if self.cache_enabled:
            entry = self.tt.get(board)
            if entry is not None:
                self.stats.cache_hits += 1
                return SearchResult(entry.line, entry.value)

        terminal, value = is_terminal(board)
        if terminal:
            if self.cache_enabled and self.cache_leaves:
                self._store(board, (), value)
            return SearchResult((), value)

        maximizing = player is Cell.X
        alpha_orig, beta_orig = alpha, beta
        best_score = -INF if maximizing else INF
        best_line: Tuple[Move, ...] = ()

        for move in board.legal_moves():
            with board.placed(move, player):
                child = self._minimax(board, player.opponent, alpha, beta)

                if maximizing:
                    improved = child.value > best_score
                else:
                    improved = child.value < best_score
                if not improved:
                    continue

                best_score = child.value
                best_line = (move,) + child.line
                if not self.pruning:
                    continue

                if maximizing:
                    alpha = max(alpha, best_score)
                else:
                    beta = min(beta, best_score)
                if alpha >= beta:
                    self.stats.cutoffs += 1
                    return SearchResult(best_line, best_score,
                                        Bound.LOWER if maximizing else Bound.UPPER)

        if best_score <= alpha_orig:
            bound = Bound.UPPER
        elif best_score >= beta_orig:
            bound = Bound.LOWER
        else:
            bound = Bound.EXACT

        # Only proven values go in the table; bounds depend on the window.
        if bound is Bound.EXACT and self.cache_enabled:
            self._store(board, best_line, best_score)
        return SearchResult(best_line, best_score, bound)

    def _store(self, board: Board, line: Tuple[Move, ...], value: int):
        if self.tt.store(board, line, value):
            self.stats.stores += 1


def search(board: Board, player: Cell = Cell.X) -> Tuple[Tuple[Move, ...], int]:
    """Solve ``board`` with a fresh engine and return ``(line, value)``."""
    line, value = SearchEngine().search(board, player)
    return line, value
