import pytest
from typing import Iterable

from reversi.othello.board import (
    BLACK,
    CORNERS,
    DIRECTIONS,
    EDGES,
    EMPTY,
    WHITE,
    Board,
    Move,
    color_name,
    opponent,
)

START_ROWS = [
    "--------",
    "--------",
    "--------",
    "---OX---",
    "---XO---",
    "--------",
    "--------",
    "--------",
]


@pytest.mark.parametrize(
    ["move", "expected"],
    [
        pytest.param((0, 0), "a1", id="a1"),
        pytest.param((0, 7), "h1", id="h1"),
        pytest.param((7, 0), "a8", id="a8"),
        pytest.param((7, 7), "h8", id="h8"),
        pytest.param((2, 3), "d3", id="d3"),
    ],
)
def test_move_to_field_ok(move: Move, expected: str) -> None:
    assert Board.move_to_field(move) == expected


@pytest.mark.parametrize(
    ["move"],
    [
        pytest.param((-1, 0), id="row-too-small"),
        pytest.param((8, 0), id="row-too-big"),
        pytest.param((0, -1), id="col-too-small"),
        pytest.param((0, 8), id="col-too-big"),
    ],
)
def test_move_to_field_error(move: Move) -> None:
    with pytest.raises(ValueError):
        Board.move_to_field(move)


@pytest.mark.parametrize(
    ["moves", "expected"],
    [
        pytest.param([], "", id="0-moves"),
        pytest.param([(0, 0)], "a1", id="1-move"),
        pytest.param([(2, 3), (2, 2)], "d3 c3", id="2-moves"),
    ],
)
def test_moves_to_fields(moves: Iterable[Move], expected: str) -> None:
    assert Board.moves_to_fields(moves) == expected


@pytest.mark.parametrize(
    ["field", "expected"],
    [
        pytest.param("a1", (0, 0), id="field-a1"),
        pytest.param("h1", (0, 7), id="field-h1"),
        pytest.param("a8", (7, 0), id="field-a8"),
        pytest.param("h8", (7, 7), id="field-h8"),
        pytest.param("d3", (2, 3), id="field-d3"),
        pytest.param("D3", (2, 3), id="field-D3"),
        pytest.param("H8", (7, 7), id="field-H8"),
    ],
)
def test_field_to_move_ok(field: str, expected: Move) -> None:
    assert Board.field_to_move(field) == expected


@pytest.mark.parametrize(
    ["field"],
    [
        pytest.param("", id="empty"),
        pytest.param("a", id="too-short"),
        pytest.param("aaa", id="too-long"),
        pytest.param("a9", id="invalid-row"),
        pytest.param("i8", id="invalid-column"),
        pytest.param("--", id="pass"),
    ],
)
def test_field_to_move_error(field: str) -> None:
    with pytest.raises(ValueError):
        Board.field_to_move(field)


def test_fields_to_moves() -> None:
    assert Board.fields_to_moves(["d3", "c5"]) == [(2, 3), (4, 2)]


def test_start_board() -> None:
    board = Board.start()
    assert board.get_square(3, 3) == WHITE
    assert board.get_square(3, 4) == BLACK
    assert board.get_square(4, 3) == BLACK
    assert board.get_square(4, 4) == WHITE
    assert board.count(BLACK) == 2
    assert board.count(WHITE) == 2
    assert board.count_discs() == 4
    assert board.count_empties() == 60


def test_empty_board() -> None:
    board = Board.empty()
    assert board.count_discs() == 0
    assert board.count_empties() == 64


def test_from_rows() -> None:
    assert Board.from_rows(START_ROWS) == Board.start()


def test_from_rows_dots_and_spaces() -> None:
    rows = [row.replace("-", ". ") for row in START_ROWS]
    assert Board.from_rows(rows) == Board.start()


@pytest.mark.parametrize(
    ["rows"],
    [
        pytest.param(START_ROWS[:7], id="too-few-rows"),
        pytest.param(START_ROWS[:7] + ["-------Z"], id="invalid-char"),
        pytest.param(START_ROWS + ["-"], id="too-many-squares"),
    ],
)
def test_from_rows_error(rows: list[str]) -> None:
    with pytest.raises(ValueError):
        Board.from_rows(rows)


@pytest.mark.parametrize(
    ["squares", "expected_counts"],
    [
        pytest.param([EMPTY] * 64, {BLACK: 0, WHITE: 0, EMPTY: 64}, id="empty"),
        pytest.param([BLACK] * 64, {BLACK: 64, WHITE: 0, EMPTY: 0}, id="all-black"),
        pytest.param([WHITE] * 64, {BLACK: 0, WHITE: 64, EMPTY: 0}, id="all-white"),
    ],
)
def test_from_squares(squares: list[int], expected_counts: dict[int, int]) -> None:
    board = Board.from_squares(squares)
    for color, count in expected_counts.items():
        assert board.count(color) == count


def test_from_squares_wrong_length() -> None:
    with pytest.raises(ValueError):
        Board.from_squares([EMPTY] * 63)


def test_init_invalid_square() -> None:
    squares = [[EMPTY] * 8 for _ in range(8)]
    squares[0][0] = 2

    with pytest.raises(ValueError):
        Board(squares)


@pytest.mark.parametrize(
    ["row", "col"],
    [
        pytest.param(-1, 0, id="row-too-small"),
        pytest.param(8, 0, id="row-too-big"),
        pytest.param(0, -1, id="col-too-small"),
        pytest.param(0, 8, id="col-too-big"),
    ],
)
def test_square_out_of_bounds(row: int, col: int) -> None:
    board = Board.start()

    with pytest.raises(ValueError):
        board.get_square(row, col)

    with pytest.raises(ValueError):
        board.set_square(row, col, BLACK)


def test_copy_is_independent() -> None:
    board = Board.start()
    copied = board.copy()

    copied.set_square(0, 0, BLACK)

    assert board.get_square(0, 0) == EMPTY
    assert copied != board
    assert all(
        copied_row is not row for copied_row, row in zip(copied.squares, board.squares)
    )


def test_board_equality() -> None:
    assert Board.start() == Board.start()
    assert Board.start() != Board.empty()

    with pytest.raises(TypeError):
        Board.start() == "not a board"


def test_to_string() -> None:
    assert Board.start().to_string() == "".join(START_ROWS)


def test_show(capsys: pytest.CaptureFixture[str]) -> None:
    Board.start().show([(2, 3)])
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "+-a-b-c-d-e-f-g-h-+"
    assert lines[3] == "3       ·         |"
    assert lines[4] == "4       ● ○       |"
    assert len(lines) == 10


def test_opponent() -> None:
    assert opponent(BLACK) == WHITE
    assert opponent(WHITE) == BLACK

    with pytest.raises(AssertionError):
        opponent(EMPTY)


def test_color_name() -> None:
    assert color_name(BLACK) == "Black"
    assert color_name(WHITE) == "White"
    assert color_name(None) == "Nobody"


def test_directions() -> None:
    assert len(set(DIRECTIONS)) == 8
    assert (0, 0) not in DIRECTIONS


def test_edges_count_corners_twice() -> None:
    assert len(EDGES) == 4
    assert all(len(edge) == 8 for edge in EDGES)

    squares = [square for edge in EDGES for square in edge]
    for corner in CORNERS:
        assert squares.count(corner) == 2
