from __future__ import annotations

from copy import deepcopy
from typing import Iterable, Optional

ROWS = 8
COLS = 8

BLACK = -1
WHITE = 1
EMPTY = 0

# Shared by legality checks and flip computation.
DIRECTIONS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

Move = tuple[int, int]

CORNERS: list[Move] = [(0, 0), (0, 7), (7, 0), (7, 7)]

# Corners appear on two lines each.
EDGES: list[list[Move]] = [
    [(0, col) for col in range(COLS)],
    [(ROWS - 1, col) for col in range(COLS)],
    [(row, 0) for row in range(ROWS)],
    [(row, COLS - 1) for row in range(ROWS)],
]

SQUARE_CHARS = {"X": BLACK, "O": WHITE, "-": EMPTY, ".": EMPTY}


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


def is_on_board(row: int, col: int) -> bool:
    return row in range(ROWS) and col in range(COLS)


def color_name(color: Optional[int]) -> str:
    if color == BLACK:
        return "Black"
    if color == WHITE:
        return "White"
    return "Nobody"


class Board:
    """
    Board stores the 8x8 grid of squares, indexed as `squares[row][col]`.
    It does not know whose turn it is, that is tracked by the GameEngine.
    """

    def __init__(self, squares: list[list[int]]) -> None:
        if len(squares) != ROWS or any(len(row) != COLS for row in squares):
            raise ValueError(f"Board must have {ROWS} rows of {COLS} squares")

        for row in squares:
            for square in row:
                if square not in [BLACK, WHITE, EMPTY]:
                    raise ValueError(f'Invalid square "{square}"')

        self.squares = squares

    @classmethod
    def empty(cls) -> Board:
        return Board([[EMPTY] * COLS for _ in range(ROWS)])

    @classmethod
    def start(cls) -> Board:
        board = cls.empty()
        board.squares[3][3] = board.squares[4][4] = WHITE
        board.squares[3][4] = board.squares[4][3] = BLACK
        return board

    @classmethod
    def from_squares(cls, squares: list[int]) -> Board:
        if len(squares) != ROWS * COLS:
            raise ValueError(f"Expected {ROWS * COLS} squares, got {len(squares)}")

        return Board([squares[row * COLS : (row + 1) * COLS] for row in range(ROWS)])

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        """
        Build a board from eight strings such as "---OX---".
        X is black, O is white, "-" and "." are empty. Spaces are ignored.
        """

        squares: list[int] = []
        for line in rows:
            for char in line.replace(" ", ""):
                try:
                    squares.append(SQUARE_CHARS[char.upper()])
                except KeyError:
                    raise ValueError(f'Invalid square character "{char}"')

        return cls.from_squares(squares)

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def to_string(self) -> str:
        chars = {BLACK: "X", WHITE: "O", EMPTY: "-"}
        return "".join(chars[square] for row in self.squares for square in row)

    def get_square(self, row: int, col: int) -> int:
        if not is_on_board(row, col):
            raise ValueError(f"Square ({row}, {col}) is not on the board")
        return self.squares[row][col]

    def set_square(self, row: int, col: int, square: int) -> None:
        if not is_on_board(row, col):
            raise ValueError(f"Square ({row}, {col}) is not on the board")
        assert square in [BLACK, WHITE, EMPTY]
        self.squares[row][col] = square

    def count(self, color: int) -> int:
        assert color in [BLACK, WHITE, EMPTY]
        return sum(row.count(color) for row in self.squares)

    def count_discs(self) -> int:
        return self.count(BLACK) + self.count(WHITE)

    def count_empties(self) -> int:
        return self.count(EMPTY)

    def copy(self) -> Board:
        return Board(deepcopy(self.squares))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.squares == other.squares

    def show(self, moves: Iterable[Move] = ()) -> None:
        move_set = set(moves)

        print("+-a-b-c-d-e-f-g-h-+")
        for row in range(ROWS):
            print("{} ".format(row + 1), end="")

            for col in range(COLS):
                square = self.squares[row][col]

                if square == BLACK:
                    print("○ ", end="")
                elif square == WHITE:
                    print("● ", end="")
                elif (row, col) in move_set:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    @classmethod
    def move_to_field(cls, move: Move) -> str:
        row, col = move
        if not is_on_board(row, col):
            raise ValueError(f"Move ({row}, {col}) is not on the board")
        return "abcdefgh"[col] + "12345678"[row]

    @classmethod
    def moves_to_fields(cls, moves: Iterable[Move]) -> str:
        return " ".join(cls.move_to_field(move) for move in moves)

    @classmethod
    def field_to_move(cls, field: str) -> Move:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        col = ord(field[0]) - ord("a")
        row = ord(field[1]) - ord("1")
        return (row, col)

    @classmethod
    def fields_to_moves(cls, fields: list[str]) -> list[Move]:
        return [cls.field_to_move(field) for field in fields]
