"""Line and terminal-position evaluation.

Values are exact game outcomes from X's point of view: +1 X has a full
line, -1 O has a full line, 0 for a draw or an undecided position.
"""

from enum import IntEnum
from typing import Sequence, Tuple

from tictac.core.board import Board, Cell

WIN_VALUE = 1
LOSS_VALUE = -1
DRAW_VALUE = 0


class LineResult(IntEnum):
    WIN_O = LOSS_VALUE
    NO_DECISION = DRAW_VALUE
    WIN_X = WIN_VALUE


def evaluate_line(cells: Sequence[Cell]) -> LineResult:
    """Decide a single row, column or diagonal."""
    first = cells[0]
    if first is Cell.EMPTY:
        return LineResult.NO_DECISION
    for cell in cells[1:]:
        if cell is not first:
            return LineResult.NO_DECISION
    return LineResult.WIN_X if first is Cell.X else LineResult.WIN_O


def _too_early(board: Board, blanks: int) -> bool:
    """True when no full line can exist yet.

    With alternating play the side owning a full line has N marks and the
    other side at least N-1, so fewer than 2N-1 marks means no line. Boards
    whose mark counts differ by more than one were not reached that way and
    always get the full scan.
    """
    n = board.size
    if blanks <= n * n - 2 * n + 1:
        return False
    return abs(board.count(Cell.X) - board.count(Cell.O)) <= 1


def is_terminal(board: Board) -> Tuple[bool, int]:
    """Return ``(terminal, value)`` for ``board``."""
    blanks = board.blank_count()
    if _too_early(board, blanks):
        return False, DRAW_VALUE

    for line in board.lines():
        result = evaluate_line(line)
        if result is not LineResult.NO_DECISION:
            return True, int(result)

    if blanks == 0:
        return True, DRAW_VALUE
    return False, DRAW_VALUE
