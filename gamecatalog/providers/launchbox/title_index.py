"""Title lookup tables used to match asset files to games."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from gamecatalog.models.game import Game

# Characters LaunchBox replaces with '_' when naming image and music files
_INVALID_FILENAME_CHARS = re.compile(r"""[<>:"/\\|?*']""")


def escape_title(title: str) -> str:
    return _INVALID_FILENAME_CHARS.sub("_", title)


def build_escaped_title_map(
    collection_childs: Iterable[int],
    games: Mapping[int, Game],
) -> dict[str, int]:
    """Map the filename-safe title of every child game to its ID.

    If two games share a key, the one listed later wins.
    """
    return {escape_title(games[game_id].title): game_id for game_id in collection_childs}


def build_title_map(
    collection_childs: Iterable[int],
    games: Mapping[int, Game],
) -> dict[str, int]:
    """Map the raw title of every child game to its ID; later games win."""
    return {games[game_id].title: game_id for game_id in collection_childs}
