import pygame
from pygame.event import Event
from typing import Optional

from reversi.arguments import Arguments
from reversi.mode.game import GameMode
from reversi.othello.board import BLACK, COLS, ROWS, WHITE, Move, color_name

BOARD_WIDTH_PX = 600
BOARD_HEIGHT_PX = 600

SQUARE_SIZE = BOARD_WIDTH_PX // COLS
DISC_RADIUS = SQUARE_SIZE // 2 - 5
MOVE_INDICATOR_RADIUS = SQUARE_SIZE // 8

COLOR_WHITE_DISC = (255, 255, 255)
COLOR_BLACK_DISC = (0, 0, 0)
COLOR_BACKGROUND = (0, 128, 0)
COLOR_GRID_LINE = (0, 96, 0)
COLOR_LAST_MOVE = (255, 0, 0)
COLOR_FLIPPED = (255, 200, 0)


FRAME_RATE = 60


class NonMoveEvent(Exception):
    pass


class Window:
    def __init__(self, args: Arguments) -> None:
        pygame.init()
        self.args = args
        self.mode = GameMode(args)

        self.screen = pygame.display.set_mode((BOARD_WIDTH_PX, BOARD_HEIGHT_PX))
        self.clock = pygame.time.Clock()
        self.caption = ""

    def run(self) -> None:
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                try:
                    move = self.get_move_from_event(event)
                except NonMoveEvent:
                    self.mode.on_event(event)
                else:
                    self.mode.on_move(move)

            self.mode.on_frame()
            self.draw()
            self.clock.tick(FRAME_RATE)

        pygame.quit()

    def get_square_center(self, move: Move) -> tuple[int, int]:
        row, col = move

        x = col * SQUARE_SIZE + SQUARE_SIZE // 2
        y = row * SQUARE_SIZE + SQUARE_SIZE // 2

        return (x, y)

    def draw_disc(self, move: Move, color: tuple[int, int, int]) -> None:
        center = self.get_square_center(move)
        pygame.draw.circle(self.screen, color, center, DISC_RADIUS)

    def draw_move_indicator(self, move: Move, color: tuple[int, int, int]) -> None:
        center = self.get_square_center(move)
        pygame.draw.circle(self.screen, color, center, MOVE_INDICATOR_RADIUS)

    def draw_marker(self, move: Move, color: tuple[int, int, int]) -> None:
        center = self.get_square_center(move)
        radius = (SQUARE_SIZE / 2) - 3
        pygame.draw.circle(self.screen, color, center, radius, 2)

    def draw_grid(self) -> None:
        for i in range(1, ROWS):
            offset = i * SQUARE_SIZE
            pygame.draw.line(
                self.screen, COLOR_GRID_LINE, (0, offset), (BOARD_WIDTH_PX, offset)
            )
            pygame.draw.line(
                self.screen, COLOR_GRID_LINE, (offset, 0), (offset, BOARD_HEIGHT_PX)
            )

    def draw(self) -> None:
        engine = self.mode.get_engine()
        board = engine.get_board()

        ui_details = self.mode.get_ui_details()
        flipped_discs: set[Move] = ui_details.pop("flipped_discs", set())
        last_move: Optional[Move] = ui_details.pop("last_move", None)
        thinking: bool = ui_details.pop("thinking", False)

        if ui_details:
            print(
                "WARNING: found unused ui details key(s): "
                + ", ".join(sorted(ui_details))
            )

        if engine.get_current_player() == WHITE:
            turn_color = COLOR_WHITE_DISC
        else:
            turn_color = COLOR_BLACK_DISC

        self.screen.fill(COLOR_BACKGROUND)
        self.draw_grid()

        valid_moves = set(engine.get_valid_moves())
        human_turn = engine.get_current_player() == self.args.human_color

        for row in range(ROWS):
            for col in range(COLS):
                move = (row, col)
                square = board.get_square(row, col)

                if square == WHITE:
                    self.draw_disc(move, COLOR_WHITE_DISC)
                elif square == BLACK:
                    self.draw_disc(move, COLOR_BLACK_DISC)
                elif human_turn and move in valid_moves:
                    self.draw_move_indicator(move, turn_color)

                if move in flipped_discs:
                    self.draw_marker(move, COLOR_FLIPPED)

                if move == last_move:
                    self.draw_marker(move, COLOR_LAST_MOVE)

        self.update_caption(thinking)
        pygame.display.flip()

    def update_caption(self, thinking: bool) -> None:
        engine = self.mode.get_engine()
        score = engine.get_score()
        caption = f"Reversi - black {score.black} : {score.white} white"

        if engine.is_game_over():
            winner = engine.get_winner()
            if winner is None:
                caption += " - tie"
            else:
                caption += f" - {color_name(winner)} wins"
        elif thinking:
            caption += " - thinking..."

        # Avoid resetting the caption every frame.
        if caption != self.caption:
            pygame.display.set_caption(caption)
            self.caption = caption

    def get_move_from_event(self, event: Event) -> Move:
        if event.type != pygame.MOUSEBUTTONDOWN:
            raise NonMoveEvent

        if event.button != pygame.BUTTON_LEFT:
            raise NonMoveEvent

        x, y = event.pos
        col: int = x // SQUARE_SIZE
        row: int = y // SQUARE_SIZE

        if not (row in range(ROWS) and col in range(COLS)):
            raise NonMoveEvent

        return (row, col)
