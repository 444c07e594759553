"""N×N tic-tac-toe board with value semantics and scoped move placement."""

from contextlib import contextmanager
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

Move = Tuple[int, int]


class Cell(str, Enum):
    EMPTY = " "
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Cell":
        """The other mark. EMPTY has no opponent."""
        if self is Cell.X:
            return Cell.O
        if self is Cell.O:
            return Cell.X
        raise ValueError("EMPTY has no opponent")


_SYMBOLS = {
    "X": Cell.X, "x": Cell.X,
    "O": Cell.O, "o": Cell.O,
    " ": Cell.EMPTY, ".": Cell.EMPTY, "_": Cell.EMPTY,
}


class IllegalMoveError(ValueError):
    """Move outside the board or onto an occupied cell."""


class Board:
    def __init__(self, size: int = 3):
        """Empty size×size board. Size must be at least 1."""
        if size < 1:
            raise ValueError(f"Board size must be >= 1, got {size}")
        self.size = size
        self.cells: List[List[Cell]] = [[Cell.EMPTY] * size for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Board":
        """Build a board from rows such as ``["XO ", " XO", "X  "]``."""
        board = cls(len(rows))
        for r, row in enumerate(rows):
            if len(row) != board.size:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {board.size}")
            for c, sym in enumerate(row):
                if isinstance(sym, Cell):
                    board.cells[r][c] = sym
                elif sym in _SYMBOLS:
                    board.cells[r][c] = _SYMBOLS[sym]
                else:
                    raise ValueError(f"Unknown cell symbol {sym!r} at ({r}, {c})")
        return board

    def copy(self) -> "Board":
        other = Board(self.size)
        other.cells = [row[:] for row in self.cells]
        return other

    # Value semantics: the cache keys on exact contents.

    def key(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Immutable snapshot of the cells."""
        return tuple(tuple(row) for row in self.cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __hash__(self) -> int:
        return hash(self.key())

    def __getitem__(self, move: Move) -> Cell:
        r, c = move
        return self.cells[r][c]

    # Lines

    def row(self, r: int) -> List[Cell]:
        return list(self.cells[r])

    def column(self, c: int) -> List[Cell]:
        return [self.cells[r][c] for r in range(self.size)]

    def diagonal(self) -> List[Cell]:
        return [self.cells[i][i] for i in range(self.size)]

    def anti_diagonal(self) -> List[Cell]:
        n = self.size
        return [self.cells[n - 1 - i][i] for i in range(n)]

    def lines(self) -> Iterator[List[Cell]]:
        """All rows, then all columns, then both diagonals."""
        for r in range(self.size):
            yield self.row(r)
        for c in range(self.size):
            yield self.column(c)
        yield self.diagonal()
        yield self.anti_diagonal()

    # Moves

    def legal_moves(self) -> List[Move]:
        """Empty cells in row-major order."""
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.cells[r][c] is Cell.EMPTY
        ]

    def count(self, cell: Cell) -> int:
        return sum(row.count(cell) for row in self.cells)

    def blank_count(self) -> int:
        return self.count(Cell.EMPTY)

    def _check_move(self, move: Move):
        r, c = move
        if not (0 <= r < self.size and 0 <= c < self.size):
            raise IllegalMoveError(f"Move {move} is outside a {self.size}x{self.size} board")
        if self.cells[r][c] is not Cell.EMPTY:
            raise IllegalMoveError(f"Cell {move} is already taken by {self.cells[r][c].value}")

    def place(self, move: Move, mark: Cell):
        """Put ``mark`` on an empty in-bounds cell."""
        if mark is Cell.EMPTY:
            raise IllegalMoveError("Cannot place an EMPTY mark")
        self._check_move(move)
        r, c = move
        self.cells[r][c] = mark

    def clear(self, move: Move):
        r, c = move
        self.cells[r][c] = Cell.EMPTY

    @contextmanager
    def placed(self, move: Move, mark: Cell):
        """Place ``mark`` for the duration of the block, then restore the cell."""
        self.place(move, mark)
        try:
            yield self
        finally:
            self.clear(move)

    def reset(self):
        for row in self.cells:
            row[:] = [Cell.EMPTY] * self.size

    def to_move(self) -> Cell:
        """Side to move assuming X started: X when the mark counts are equal."""
        return Cell.X if self.count(Cell.X) <= self.count(Cell.O) else Cell.O

    # Display

    def render(self) -> str:
        lines = []
        divider = "-" * (self.size * 4 - 2)
        for r, row in enumerate(self.cells):
            if r != 0:
                lines.append(divider)
            lines.append(" | ".join(cell.value for cell in row))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        rows = ["".join(cell.value for cell in row) for row in self.cells]
        return f"Board.from_rows({rows!r})"

    def to_rows(self) -> List[str]:
        return ["".join(cell.value for cell in row) for row in self.cells]


def replay(
    moves: Iterable[Move],
    size: int = 3,
    board: Optional[Board] = None,
    first: Cell = Cell.X,
) -> Board:
    """Apply ``moves`` in order, alternating marks starting with ``first``.

    Starts from an empty ``size`` board, or from a copy of ``board`` when
    given. The input board is never modified.
    """
    result = board.copy() if board is not None else Board(size)
    mark = first
    for move in moves:
        result.place(tuple(move), mark)
        mark = mark.opponent
    return result
