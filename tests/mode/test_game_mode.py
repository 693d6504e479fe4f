import pygame

from reversi.arguments import Arguments
from reversi.mode.game import GameMode
from reversi.othello.board import BLACK, WHITE, Board
from reversi.othello.game import GameEngine

SEARCH_TIMEOUT = 60


def wait_for_search(mode: GameMode, count: int = 1) -> None:
    results = [mode.recv_queue.get(timeout=SEARCH_TIMEOUT) for _ in range(count)]

    for result in results:
        mode.recv_queue.put(result)

    mode.on_frame()


def test_human_move_then_computer_reply() -> None:
    mode = GameMode(Arguments(1, BLACK))
    engine = mode.get_engine()
    assert mode.pending_searches == 0

    mode.on_move((0, 0))
    assert engine.history == []

    mode.on_move((2, 3))
    assert engine.get_current_player() == WHITE
    assert mode.get_ui_details()["thinking"]

    wait_for_search(mode)

    assert mode.pending_searches == 0
    assert engine.get_current_player() == BLACK
    assert [record.player for record in engine.history] == [BLACK, WHITE]


def test_human_cannot_move_for_computer() -> None:
    mode = GameMode(Arguments(1, WHITE))

    # Black (the computer) is to move.
    mode.on_move((2, 3))
    assert mode.get_engine().history == []

    wait_for_search(mode)
    assert mode.get_engine().get_current_player() == WHITE


def test_new_game_discards_stale_result() -> None:
    mode = GameMode(Arguments(1, WHITE))

    event = pygame.event.Event(
        pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_RIGHT, pos=(0, 0)
    )
    mode.on_event(event)
    assert mode.pending_searches == 2

    wait_for_search(mode, 2)

    assert mode.pending_searches == 0
    assert len(mode.get_engine().history) == 1


def test_ui_details() -> None:
    mode = GameMode(Arguments(1, BLACK))

    details = mode.get_ui_details()
    assert details == {"flipped_discs": set(), "thinking": False}

    mode.on_move((2, 3))
    details = mode.get_ui_details()
    assert details["last_move"] == (2, 3)
    assert details["flipped_discs"] == {(3, 3)}

    wait_for_search(mode)


def test_move_after_game_over_starts_new_game() -> None:
    mode = GameMode(Arguments(1, BLACK))
    mode.engine = GameEngine(Board.empty(), BLACK)
    assert mode.get_engine().is_game_over()

    mode.on_move((2, 3))

    assert mode.get_engine().get_board() == Board.start()
    assert mode.get_engine().history == []
