from reversi.othello.board import CORNERS, COLS, EDGES, ROWS, Move, opponent
from reversi.othello.game import GameEngine

WIN_SCORE = 10000

# Discs count ten times as much once the board is mostly full.
ENDGAME_DISC_THRESHOLD = 50
ENDGAME_DISC_WEIGHT = 10

MOBILITY_WEIGHT = 5
CORNER_WEIGHT = 50
EDGE_WEIGHT = 2

POSITION_WEIGHTS = [
    [100, -20, 10, 5, 5, 10, -20, 100],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [10, -2, 1, 1, 1, 1, -2, 10],
    [5, -2, 1, 0, 0, 1, -2, 5],
    [5, -2, 1, 0, 0, 1, -2, 5],
    [10, -2, 1, 1, 1, 1, -2, 10],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [100, -20, 10, 5, 5, 10, -20, 100],
]


def evaluate(engine: GameEngine, color: int) -> int:
    """
    Score a position from the point of view of `color`, higher is better.

    Finished games score +/-WIN_SCORE (0 for a tie). Otherwise the score is the
    sum of disc difference, positional weights, mobility, corners and edges.
    """

    opp = opponent(color)

    if engine.is_game_over():
        winner = engine.get_winner()
        if winner == color:
            return WIN_SCORE
        if winner == opp:
            return -WIN_SCORE
        return 0

    return (
        evaluate_discs(engine, color)
        + evaluate_positions(engine, color)
        + evaluate_mobility(engine, color)
        + evaluate_corners(engine, color)
        + evaluate_edges(engine, color)
    )


def evaluate_discs(engine: GameEngine, color: int) -> int:
    score = engine.get_score()

    if score.total() > ENDGAME_DISC_THRESHOLD:
        weight = ENDGAME_DISC_WEIGHT
    else:
        weight = 1

    return (score.of(color) - score.of(opponent(color))) * weight


def evaluate_positions(engine: GameEngine, color: int) -> int:
    squares = engine.get_board().squares
    opp = opponent(color)
    total = 0

    for row in range(ROWS):
        for col in range(COLS):
            if squares[row][col] == color:
                total += POSITION_WEIGHTS[row][col]
            elif squares[row][col] == opp:
                total -= POSITION_WEIGHTS[row][col]

    return total


def evaluate_mobility(engine: GameEngine, color: int) -> int:
    # Full scans: the cached valid moves only cover the side to move.
    my_moves = len(engine.find_valid_moves(color))
    opp_moves = len(engine.find_valid_moves(opponent(color)))
    return (my_moves - opp_moves) * MOBILITY_WEIGHT


def _count_owned(engine: GameEngine, squares: list[Move], color: int) -> int:
    board = engine.get_board()
    opp = opponent(color)
    total = 0

    for row, col in squares:
        square = board.squares[row][col]
        if square == color:
            total += 1
        elif square == opp:
            total -= 1

    return total


def evaluate_corners(engine: GameEngine, color: int) -> int:
    return _count_owned(engine, CORNERS, color) * CORNER_WEIGHT


def evaluate_edges(engine: GameEngine, color: int) -> int:
    return sum(_count_owned(engine, edge, color) for edge in EDGES) * EDGE_WEIGHT
