import os
import typer
from typing import Annotated, Optional

from reversi.arguments import Arguments
from reversi.config import get_search_depth

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from reversi.window import Window  # noqa:E402

app = typer.Typer()


@app.command()
def main(
    depth: Annotated[
        Optional[int], typer.Option("-d", help="Search depth in plies")
    ] = None,
    color: Annotated[
        str, typer.Option("-c", help="Color you play: black or white")
    ] = "black",
) -> None:
    if depth is None:
        depth = get_search_depth()

    if depth < 1:
        raise typer.BadParameter("Search depth must be at least 1")

    try:
        human_color = Arguments.parse_color(color)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    Window(Arguments(depth, human_color)).run()


if __name__ == "__main__":
    app()
