from __future__ import annotations

from copy import copy
from typing import Iterable, Optional

from reversi.othello.board import (
    BLACK,
    COLS,
    DIRECTIONS,
    EMPTY,
    ROWS,
    WHITE,
    Board,
    Move,
    is_on_board,
    opponent,
)


class InvalidMove(ValueError):
    pass


class Score:
    def __init__(self, black: int, white: int) -> None:
        self.black = black
        self.white = white

    def __repr__(self) -> str:
        return f"Score(black={self.black}, white={self.white})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Score):
            raise TypeError(f"Cannot compare Score with {type(other)}")

        return (self.black, self.white) == (other.black, other.white)

    def total(self) -> int:
        return self.black + self.white

    def of(self, color: int) -> int:
        assert color in [BLACK, WHITE]
        return self.black if color == BLACK else self.white


class MoveRecord:
    def __init__(self, move: Move, player: int, flipped: list[Move]) -> None:
        self.move = move
        self.player = player
        self.flipped = flipped

    def __repr__(self) -> str:
        field = Board.move_to_field(self.move)
        return f"MoveRecord({field}, {self.player}, flipped={len(self.flipped)})"


class GameEngine:
    """
    GameEngine owns a Board and everything needed to play on it: whose turn it
    is, whether the game ended and who won.

    The cached `valid_moves` always equals `find_valid_moves(current_player)`.
    It is recomputed after every mutation, and it is what drives passing: when
    the side to move has no moves, the turn stays with (or goes back to) the
    other side, and when neither side can move the game is over.
    """

    def __init__(self, board: Board, turn: int) -> None:
        assert turn in [BLACK, WHITE]
        self._load(board, turn)

    @classmethod
    def start(cls) -> GameEngine:
        return GameEngine(Board.start(), BLACK)

    @classmethod
    def from_moves(cls, moves: Iterable[Move]) -> GameEngine:
        engine = cls.start()

        for row, col in moves:
            if not engine.make_move(row, col):
                field = Board.move_to_field((row, col))
                played = engine.get_move_fields()
                raise InvalidMove(f'Move {field} is not valid after "{played}"')

        return engine

    @classmethod
    def from_fields(cls, fields: str) -> GameEngine:
        return cls.from_moves(Board.fields_to_moves(fields.split()))

    def _load(self, board: Board, turn: int) -> None:
        self.board = board
        self.current_player = turn
        self.game_over = False
        self.winner: Optional[int] = None
        self.last_move: Optional[Move] = None
        self.flipped_discs: list[Move] = []
        self.history: list[MoveRecord] = []
        self.valid_moves: list[Move] = []
        self._advance_turn(turn)

    def reset(self) -> None:
        self._load(Board.start(), BLACK)

    def __repr__(self) -> str:
        return f"GameEngine({self.board!r}, {self.current_player})"

    def get_board(self) -> Board:
        # Callers must treat the returned board as read-only.
        return self.board

    def get_valid_moves(self) -> list[Move]:
        return self.valid_moves

    def get_current_player(self) -> int:
        return self.current_player

    def is_game_over(self) -> bool:
        return self.game_over

    def get_winner(self) -> Optional[int]:
        return self.winner

    def get_score(self) -> Score:
        black = 0
        white = 0
        for row in self.board.squares:
            for square in row:
                if square == BLACK:
                    black += 1
                elif square == WHITE:
                    white += 1
        return Score(black, white)

    def get_move_fields(self) -> str:
        return Board.moves_to_fields(record.move for record in self.history)

    def is_valid_move(self, row: int, col: int, color: int) -> bool:
        if self.board.get_square(row, col) != EMPTY:
            return False

        opp = opponent(color)
        squares = self.board.squares

        for dy, dx in DIRECTIONS:
            y = row + dy
            x = col + dx
            found_opponent = False

            while is_on_board(y, x) and squares[y][x] == opp:
                found_opponent = True
                y += dy
                x += dx

            if found_opponent and is_on_board(y, x) and squares[y][x] == color:
                return True

        return False

    def find_valid_moves(self, color: int) -> list[Move]:
        # Row-major order, search relies on it for tie-breaking.
        return [
            (row, col)
            for row in range(ROWS)
            for col in range(COLS)
            if self.is_valid_move(row, col, color)
        ]

    def get_flipped_discs(self, row: int, col: int, color: int) -> list[Move]:
        if self.board.get_square(row, col) != EMPTY:
            return []

        opp = opponent(color)
        squares = self.board.squares
        flipped: list[Move] = []

        for dy, dx in DIRECTIONS:
            y = row + dy
            x = col + dx
            flipped_line: list[Move] = []

            while is_on_board(y, x) and squares[y][x] == opp:
                flipped_line.append((y, x))
                y += dy
                x += dx

            if flipped_line and is_on_board(y, x) and squares[y][x] == color:
                flipped += flipped_line

        return flipped

    def make_move(self, row: int, col: int) -> bool:
        if not is_on_board(row, col):
            raise ValueError(f"Move ({row}, {col}) is not on the board")

        if self.game_over:
            return False

        if not self.is_valid_move(row, col, self.current_player):
            return False

        mover = self.current_player
        flipped = self.get_flipped_discs(row, col, mover)

        self.board.set_square(row, col, mover)
        for y, x in flipped:
            self.board.set_square(y, x, mover)

        self.last_move = (row, col)
        self.flipped_discs = flipped
        self.history.append(MoveRecord((row, col), mover, copy(flipped)))

        self._advance_turn(opponent(mover))
        return True

    def _advance_turn(self, preferred: int) -> None:
        preferred_moves = self.find_valid_moves(preferred)
        if preferred_moves:
            self.current_player = preferred
            self.valid_moves = preferred_moves
            return

        # Forced pass for the preferred side.
        other = opponent(preferred)
        other_moves = self.find_valid_moves(other)
        if other_moves:
            self.current_player = other
            self.valid_moves = other_moves
            return

        self.game_over = True
        self.valid_moves = []

        score = self.get_score()
        if score.black > score.white:
            self.winner = BLACK
        elif score.white > score.black:
            self.winner = WHITE
        else:
            self.winner = None

    def clone(self) -> GameEngine:
        clone = copy(self)
        clone.board = self.board.copy()
        clone.valid_moves = copy(self.valid_moves)
        clone.flipped_discs = copy(self.flipped_discs)
        clone.history = []
        return clone
