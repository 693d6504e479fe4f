import typer
from typing import Annotated, Optional

from reversi.ai.search import Search
from reversi.config import get_search_depth, get_verbose
from reversi.othello.board import BLACK, WHITE, Board, color_name
from reversi.othello.game import GameEngine


class SelfPlay:
    def __init__(self, black_depth: int, white_depth: int, quiet: bool) -> None:
        self.searchers = {
            BLACK: Search(black_depth, verbose=get_verbose()),
            WHITE: Search(white_depth, verbose=get_verbose()),
        }
        self.quiet = quiet

    def play(self) -> GameEngine:
        engine = GameEngine.start()

        if not self.quiet:
            engine.get_board().show(engine.get_valid_moves())

        while not engine.is_game_over():
            player = engine.get_current_player()
            move = self.searchers[player].get_move(engine, player)

            # The engine never hands the turn to a side without moves.
            assert move is not None

            row, col = move
            engine.make_move(row, col)

            if not self.quiet:
                field = Board.move_to_field(move)
                flipped = len(engine.flipped_discs)
                print(f"{color_name(player)} plays {field}, flipping {flipped}")
                engine.get_board().show(engine.get_valid_moves())

        return engine

    def __call__(self) -> None:
        engine = self.play()
        score = engine.get_score()

        print(f"Moves: {engine.get_move_fields()}")
        print(f"Score: black {score.black} - {score.white} white")

        winner = engine.get_winner()
        if winner is None:
            print("Result: tie")
        else:
            print(f"Result: {color_name(winner)} wins")


app = typer.Typer()


@app.command()
def main(
    depth: Annotated[
        Optional[int], typer.Option("-d", help="Depth for both sides")
    ] = None,
    black_depth: Annotated[Optional[int], typer.Option("-b")] = None,
    white_depth: Annotated[Optional[int], typer.Option("-w")] = None,
    quiet: Annotated[bool, typer.Option("-q", help="Only print the result")] = False,
) -> None:
    if depth is None:
        depth = get_search_depth()

    if black_depth is None:
        black_depth = depth

    if white_depth is None:
        white_depth = depth

    if min(black_depth, white_depth) < 1:
        raise typer.BadParameter("Search depth must be at least 1")

    SelfPlay(black_depth, white_depth, quiet)()


if __name__ == "__main__":
    app()
