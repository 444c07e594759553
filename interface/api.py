"""FastAPI REST interface for the solver."""

import threading
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from tictac.config import CONFIG
from tictac.core.board import Board, Cell, replay
from tictac.core.evaluator import is_terminal
from tictac.core.search import SearchEngine

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

engine = SearchEngine()
board = Board(CONFIG.search.board_size)
_board_lock = threading.Lock()
# The engine owns one table and one stats record, so searches run one at a time.
_search_lock = threading.Lock()


class PositionRequest(BaseModel):
    rows: List[str]  # e.g. ["XO ", " X ", "   "]


class MoveRequest(BaseModel):
    row: int
    col: int


class SearchRequest(BaseModel):
    player: Optional[str] = None  # "X" or "O"; defaults to the side to move


class ReplayRequest(BaseModel):
    moves: List[List[int]]
    size: Optional[int] = None
    first: str = "X"


def _parse_player(symbol: str) -> Cell:
    if symbol not in ("X", "O"):
        raise HTTPException(status_code=400, detail=f"Invalid player: {symbol}")
    return Cell(symbol)


def _board_state(b: Board):
    terminal, value = is_terminal(b)
    return {
        "rows": b.to_rows(),
        "size": b.size,
        "turn": b.to_move().value,
        "legal_moves": b.legal_moves(),
        "is_game_over": terminal,
        "value": value if terminal else None,
    }


@app.get("/board")
def get_board():
    with _board_lock:
        return _board_state(board)


@app.post("/position")
def set_position(req: PositionRequest):
    with _board_lock:
        try:
            new_board = Board.from_rows(req.rows)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid position: {e}")
        board.size = new_board.size
        board.cells = new_board.cells
        return _board_state(board)


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        if is_terminal(board)[0]:
            raise HTTPException(status_code=400, detail="Game is already over")
        try:
            board.place((req.row, req.col), board.to_move())
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _board_state(board)


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _board_lock:
        if is_terminal(board)[0]:
            raise HTTPException(status_code=400, detail="Game is already over")
        player = _parse_player(req.player) if req.player else board.to_move()
        search_board = board.copy()

    with _search_lock:
        result = engine.search(search_board, player)
        nodes = engine.stats.nodes
    return {
        "best_move": result.best_move,
        "line": [list(m) for m in result.line],
        "value": result.value,
        "player": player.value,
        "nodes": nodes,
    }


@app.post("/terminal")
def terminal(req: PositionRequest):
    try:
        b = Board.from_rows(req.rows)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid position: {e}")
    terminal, value = is_terminal(b)
    return {"terminal": terminal, "value": value}


@app.post("/replay")
def replay_line(req: ReplayRequest):
    first = _parse_player(req.first)
    try:
        b = replay([tuple(m) for m in req.moves],
                   size=CONFIG.search.board_size if req.size is None else req.size,
                   first=first)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _board_state(b)


@app.post("/reset")
def reset_board():
    with _board_lock:
        fresh = Board(CONFIG.search.board_size)
        board.size = fresh.size
        board.cells = fresh.cells
        state = _board_state(board)
    with _search_lock:
        engine.tt.clear()
    return state
