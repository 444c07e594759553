import sys

from tictac.config import CONFIG, configure_logging
from tictac.core.board import Cell, replay
from tictac.core.evaluator import is_terminal
from tictac.main import Engine


def solve(size=None):
    """Solve the empty board and print the optimal line."""
    engine = Engine(size)
    result = engine.search.search(engine.board, Cell.X)
    final = replay(result.line, board=engine.board)
    print(final.render())
    print(f"Value: {result.value} | Line: {list(result.line)}")
    return result


def play(input_fn=input, size=None):
    """Human plays X, the engine plays O."""
    engine = Engine(size)

    while not engine.is_game_over():
        engine.print_board()
        print("----------------------------")

        if engine.board.to_move() is Cell.X:
            raw = input_fn("Enter your move (row col, e.g. 1 1): ")
            try:
                move = tuple(int(part) for part in raw.split())
            except ValueError:
                print("Illegal move, try again.")
                continue
            if len(move) != 2 or not engine.make_move(move):
                print("Illegal move, try again.")
                continue
        else:
            move, value = engine.best_move()
            print(f"Engine plays: {move} | Value: {value}")
            engine.make_move(move)

    engine.print_board()
    _, value = is_terminal(engine.board)
    print("Game Over")
    print(f"Result: {'X wins' if value > 0 else 'O wins' if value < 0 else 'Draw'}")
    return value


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    configure_logging()
    if argv and argv[0] == "solve":
        solve(int(argv[1]) if len(argv) > 1 else CONFIG.search.board_size)
    else:
        play()


if __name__ == "__main__":
    main()
