"""Attach LaunchBox media files to the games of a platform.

LaunchBox names media after the game title, not the game file:

- ``Images/<platform>/<category>/**/<escaped title>-NN.<ext>``
- ``Music/<platform>/**/<escaped title>.<ext>``
- ``Videos/<platform>/**/<title>[ (tag)].<ext>``

Images and music are looked up by their filename-safe title.  Video names
are looser (region tags, ``Title, The``), so they go through a short,
fixed chain of rewrites.  Files that still match nothing are skipped.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from pathlib import Path

from loguru import logger

from gamecatalog.core.path_resolver import is_readable_file
from gamecatalog.core.search_context import SearchContext
from gamecatalog.models.game import AssetType, Game
from gamecatalog.providers.launchbox.literals import (
    ASSET_DIRS,
    IMAGES_DIR,
    MSG_PREFIX,
    MUSIC_DIR,
    VIDEOS_DIR,
)
from gamecatalog.providers.launchbox.registry import Platform
from gamecatalog.providers.launchbox.title_index import build_escaped_title_map, build_title_map

_NUM_SUFFIX_RE = re.compile(r"-\d{2}$")


# ── Title heuristics ─────────────────────────────────────────────────────

def strip_num_suffix(basename: str) -> str:
    """``Contra III-01`` → ``Contra III``."""
    return _NUM_SUFFIX_RE.sub("", basename)


def strip_parenthetical(basename: str) -> str:
    """Drop a trailing ``(…)`` tag: ``Metroid Prime (USA)`` → ``Metroid Prime``.

    A name that is nothing but a parenthetical is kept as-is.
    """
    if basename.endswith(")"):
        idx = basename.rfind("(", 0, len(basename) - 1)
        if idx > 0:
            basename = basename[:idx]
    return basename.strip()


def dash_to_colon(title: str) -> str:
    """``Zelda - A Link to the Past`` → ``Zelda: A Link to the Past``."""
    return title.replace(" - ", ": ")


def move_leading_article(title: str) -> str:
    """``Metroid Prime, The`` → ``The Metroid Prime``."""
    if title.endswith(", The"):
        return "The " + title[: -len(", The")]
    return title


def video_title_candidates(basename: str) -> list[str]:
    """Titles to try, in order, for a video file named *basename*."""
    title = strip_parenthetical(basename)
    fallback = move_leading_article(dash_to_colon(title))
    if fallback == title:
        return [title]
    return [title, fallback]


# ── Directory walking ────────────────────────────────────────────────────

def iter_files(root: Path) -> Iterator[Path]:
    """Yield the readable files under *root*, recursively, in sorted order.

    A missing directory yields nothing.
    """
    if not root.is_dir():
        return
    for path in sorted(root.rglob("*")):
        if is_readable_file(path):
            yield path


def find_assets_in(
    asset_dir: Path,
    asset_type: AssetType,
    has_num_suffix: bool,
    title_to_gameid: Mapping[str, int],
    games: Mapping[int, Game],
) -> int:
    """Attach the files under *asset_dir* to the games whose title they carry.

    Returns the number of files attached.
    """
    attached = 0
    for path in iter_files(asset_dir):
        basename = path.stem
        title = strip_num_suffix(basename) if has_num_suffix else basename

        game_id = title_to_gameid.get(title)
        if game_id is None:
            continue
        if games[game_id].assets.add_file_maybe(asset_type, path):
            attached += 1
    return attached


def find_videos_in(
    asset_dir: Path,
    title_to_gameid: Mapping[str, int],
    games: Mapping[int, Game],
) -> int:
    attached = 0
    for path in iter_files(asset_dir):
        for title in video_title_candidates(path.stem):
            game_id = title_to_gameid.get(title)
            if game_id is None:
                continue
            if games[game_id].assets.add_file_maybe(AssetType.VIDEOS, path):
                attached += 1
            break
    return attached


def find_assets(lb_dir: str | Path, platform: Platform, sctx: SearchContext) -> int:
    """Attach the images, music and videos of *platform* to its games.

    Returns the number of files attached.
    """
    collection_childs = sctx.collection_childs.get(platform.name)
    if not collection_childs:
        return 0

    lb_dir = Path(lb_dir)
    attached = 0

    esctitle_to_gameid = build_escaped_title_map(collection_childs, sctx.games)
    images_root = lb_dir / IMAGES_DIR / platform.name
    for dir_name, asset_type in ASSET_DIRS:
        attached += find_assets_in(
            images_root / dir_name, asset_type, True, esctitle_to_gameid, sctx.games,
        )

    music_root = lb_dir / MUSIC_DIR / platform.name
    attached += find_assets_in(
        music_root, AssetType.MUSIC, False, esctitle_to_gameid, sctx.games,
    )

    title_to_gameid = build_title_map(collection_childs, sctx.games)
    video_root = lb_dir / VIDEOS_DIR / platform.name
    attached += find_videos_in(video_root, title_to_gameid, sctx.games)

    logger.debug("{} `{}`: {} asset file(s) attached", MSG_PREFIX, platform.name, attached)
    return attached
