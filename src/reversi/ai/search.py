from __future__ import annotations

import threading
from queue import Queue
from typing import Optional

from reversi.ai.evaluator import evaluate
from reversi.config import get_verbose
from reversi.othello.board import Board, Move, color_name
from reversi.othello.game import GameEngine

DEFAULT_SEARCH_DEPTH = 4

INFINITY = float("inf")


class SearchResult:
    def __init__(
        self,
        *,
        move: Optional[Move],
        player: int,
        source: Board,
        nodes_evaluated: int,
    ) -> None:
        self.move = move
        self.player = player

        # Snapshot of the board the search started from.
        self.source = source

        self.nodes_evaluated = nodes_evaluated


class Search:
    """
    Minimax search with alpha-beta pruning over cloned GameEngine states.

    Each instance keeps only its own statistics, so independent searches can
    run side by side.
    """

    def __init__(
        self, depth: int = DEFAULT_SEARCH_DEPTH, verbose: bool = False
    ) -> None:
        self.depth = depth
        self.verbose = verbose
        self.nodes_evaluated = 0

    def get_move(self, engine: GameEngine, ai_player: int) -> Optional[Move]:
        """
        Returns the move `ai_player` should play, or None if it has to pass.
        Equally scored moves are resolved in favour of the first one in
        row-major order.
        """

        if self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}")

        self.nodes_evaluated = 0
        moves = engine.find_valid_moves(engine.get_current_player())

        if not moves:
            return None

        assert ai_player == engine.get_current_player()

        if len(moves) == 1:
            return moves[0]

        best_move: Optional[Move] = None
        best_score = -INFINITY

        for row, col in moves:
            child = engine.clone()
            child.make_move(row, col)

            score = self.minimax(
                child, self.depth - 1, -INFINITY, INFINITY, False, ai_player
            )

            if score > best_score:
                best_score = score
                best_move = (row, col)

        assert best_move is not None

        if self.verbose:
            field = Board.move_to_field(best_move)
            print(
                f"{color_name(ai_player)} plays {field} (score {best_score}, "
                f"depth {self.depth}, {self.nodes_evaluated} nodes)"
            )

        return best_move

    def minimax(
        self,
        engine: GameEngine,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        ai_player: int,
    ) -> float:
        self.nodes_evaluated += 1

        if depth == 0 or engine.is_game_over():
            return evaluate(engine, ai_player)

        moves = engine.find_valid_moves(engine.get_current_player())

        if not moves:
            # Forced pass inside the tree: score the position as it stands
            # instead of searching the other side's reply.
            return evaluate(engine, ai_player)

        if maximizing:
            max_score = -INFINITY

            for row, col in moves:
                child = engine.clone()
                child.make_move(row, col)

                score = self.minimax(child, depth - 1, alpha, beta, False, ai_player)
                max_score = max(max_score, score)
                alpha = max(alpha, score)

                if beta <= alpha:
                    break

            return max_score

        min_score = INFINITY

        for row, col in moves:
            child = engine.clone()
            child.make_move(row, col)

            score = self.minimax(child, depth - 1, alpha, beta, True, ai_player)
            min_score = min(min_score, score)
            beta = min(beta, score)

            if beta <= alpha:
                break

        return min_score


def get_move(
    engine: GameEngine, ai_player: int, depth: int = DEFAULT_SEARCH_DEPTH
) -> Optional[Move]:
    return Search(depth, verbose=get_verbose()).get_move(engine, ai_player)


def search_non_blocking(
    engine: GameEngine,
    ai_player: int,
    depth: int,
    recv_queue: Queue[SearchResult],
) -> threading.Thread:
    # The worker only ever sees its own clone, callers may keep playing on `engine`.
    snapshot = engine.clone()
    source = engine.get_board().copy()

    def search() -> None:
        searcher = Search(depth, verbose=get_verbose())
        move = searcher.get_move(snapshot, ai_player)
        result = SearchResult(
            move=move,
            player=ai_player,
            source=source,
            nodes_evaluated=searcher.nodes_evaluated,
        )
        recv_queue.put(result)

    thread = threading.Thread(target=search, daemon=True)
    thread.start()
    return thread
