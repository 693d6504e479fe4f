import pygame
import queue
from pygame.event import Event
from queue import Queue
from typing import Any, Optional

from reversi.ai.search import SearchResult, search_non_blocking
from reversi.arguments import Arguments
from reversi.mode.base import BaseMode
from reversi.othello.board import Move, opponent
from reversi.othello.game import GameEngine


class GameMode(BaseMode):
    """
    A human plays one color by clicking squares, the computer plays the other.
    The computer searches in a background thread, results are collected once
    per frame.
    """

    def __init__(self, args: Arguments) -> None:
        self.human_color = args.human_color
        self.ai_color = opponent(args.human_color)
        self.depth = args.depth
        self.engine = GameEngine.start()
        self.recv_queue: Queue[SearchResult] = Queue()
        self.pending_searches = 0

        self.on_engine_change()

    def on_event(self, event: Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_RIGHT:
                self.on_mouse_right_click(event)

    def on_mouse_right_click(self, event: Event) -> None:
        # Start a new game, a pending search result will be discarded.
        self.engine.reset()
        self.on_engine_change()

    def on_move(self, move: Move) -> None:
        if self.engine.is_game_over():
            self.engine.reset()
            self.on_engine_change()
            return

        if self.engine.get_current_player() != self.human_color:
            return

        row, col = move
        if self.engine.make_move(row, col):
            self.on_engine_change()

    def on_frame(self) -> None:
        self._process_recv_messages()

    def on_engine_change(self) -> None:
        if self.engine.is_game_over():
            return

        if self.engine.get_current_player() != self.ai_color:
            return

        self.pending_searches += 1
        search_non_blocking(self.engine, self.ai_color, self.depth, self.recv_queue)

    def _process_recv_messages(self) -> None:
        while True:
            try:
                result = self.recv_queue.get_nowait()
            except queue.Empty:
                break

            self._process_search_result(result)

    def _process_search_result(self, result: SearchResult) -> None:
        self.pending_searches -= 1

        if result.source != self.engine.get_board():
            # Board changed while searching.
            return

        if self.engine.get_current_player() != result.player:
            return

        if result.move is None:
            return

        row, col = result.move
        self.engine.make_move(row, col)
        self.on_engine_change()

    def get_engine(self) -> GameEngine:
        return self.engine

    def get_ui_details(self) -> dict[str, Any]:
        last_move: Optional[Move] = self.engine.last_move
        details: dict[str, Any] = {
            "flipped_discs": set(self.engine.flipped_discs),
            "thinking": self.pending_searches > 0,
        }

        if last_move is not None:
            details["last_move"] = last_move

        return details
