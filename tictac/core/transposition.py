"""Transposition table for solved positions.

Entries map an exact board configuration (``Board.key()``) to the best line
found from that position and its exact value. The table never stores bounds
and never overwrites an entry: the first resolved value for a position is
final for the lifetime of the table.

Usage (example):

    from tictac.core.transposition import TranspositionTable

    tt = TranspositionTable()
    tt.store(board, line=((0, 0), (1, 1)), value=0)
    entry = tt.get(board)
    if entry is not None:
        line, value = entry

"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from tictac.core.board import Board, Cell, Move

BoardKey = Tuple[Tuple[Cell, ...], ...]


@dataclass(frozen=True)
class TTEntry:
    line: Tuple[Move, ...]
    value: int

    def __iter__(self):
        return iter((self.line, self.value))


class TranspositionTable:
    """Write-once map from board snapshots to solved entries.

    Methods:
      - get(board) -> Optional[TTEntry]
      - store(board, line, value) -> bool  (False when already present)
      - clear()
      - key(board) -> BoardKey
    """

    def __init__(self):
        self._table: Dict[BoardKey, TTEntry] = {}

    @staticmethod
    def key(board: Board) -> BoardKey:
        return board.key()

    def get(self, board: Board) -> Optional[TTEntry]:
        return self._table.get(self.key(board))

    def store(self, board: Board, line: Tuple[Move, ...], value: int) -> bool:
        k = self.key(board)
        if k in self._table:
            return False
        self._table[k] = TTEntry(tuple(line), value)
        return True

    def items(self):
        return self._table.items()

    def clear(self):
        self._table.clear()

    def __contains__(self, board: Board) -> bool:
        return self.key(board) in self._table

    def __len__(self) -> int:
        return len(self._table)
