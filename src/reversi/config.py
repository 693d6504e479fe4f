import os
from dotenv import load_dotenv

load_dotenv()


def get_search_depth() -> int:
    depth = int(os.getenv("REVERSI_SEARCH_DEPTH", "4"))

    if depth < 1:
        raise ValueError(f"REVERSI_SEARCH_DEPTH must be at least 1, got {depth}")

    return depth


def get_verbose() -> bool:
    return os.getenv("REVERSI_VERBOSE", "0") != "0"
