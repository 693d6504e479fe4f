from __future__ import annotations

from reversi.config import get_search_depth
from reversi.othello.board import BLACK, WHITE


class Arguments:
    def __init__(self, depth: int, human_color: int) -> None:
        assert human_color in [BLACK, WHITE]

        self.depth = depth
        self.human_color = human_color

    @classmethod
    def default(cls) -> Arguments:
        return Arguments(get_search_depth(), BLACK)

    @classmethod
    def parse_color(cls, color: str) -> int:
        colors = {"black": BLACK, "b": BLACK, "white": WHITE, "w": WHITE}

        try:
            return colors[color.lower()]
        except KeyError:
            raise ValueError(f'Unknown color "{color}"')
