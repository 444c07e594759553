from tictac.config import CONFIG
from tictac.core.board import Board
from tictac.core.evaluator import is_terminal
from tictac.core.search import SearchEngine


class Engine:
    def __init__(self, size=None):
        self.board = Board(CONFIG.search.board_size if size is None else size)
        self.search = SearchEngine()
        self.history = []

    def best_move(self):
        """Best move and value for the side to move, or (None, value) if the game is over."""
        result = self.search.search(self.board, self.board.to_move())
        return result.best_move, result.value

    def make_move(self, move) -> bool:
        """Play ``move`` for the side to move. Returns False if illegal or the game is over."""
        if self.is_game_over():
            return False
        try:
            self.board.place(tuple(move), self.board.to_move())
        except (ValueError, TypeError):
            return False
        self.history.append(tuple(move))
        return True

    def undo_move(self):
        if self.history:
            self.board.clear(self.history.pop())

    def is_game_over(self):
        return is_terminal(self.board)[0]

    def reset(self):
        self.board.reset()
        self.history.clear()

    def print_board(self):
        print(self.board.render())
