"""Per-platform game list (``Data/Platforms/<platform>.xml``) parser.

Every ``<Game>`` entry names a game file relative to the LaunchBox
directory.  Games are keyed by the canonical path of that file, so the
same file listed twice (in one platform or several) is one game that
belongs to several collections.

``<AdditionalApplication>`` entries attach extra launchable files to a
game of the same document.  They may appear before the game they refer
to, so they are resolved only after the whole document has been read.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from loguru import logger

from gamecatalog.core.path_resolver import canonical_path, resolve_library_path
from gamecatalog.core.search_context import SearchContext
from gamecatalog.models.game import Game, GameFile
from gamecatalog.providers.launchbox.fields import store_game_fields
from gamecatalog.providers.launchbox.literals import (
    ADDIAPP_FIELD_TAGS,
    GAME_FIELD_TAGS,
    MSG_PREFIX,
    AdditionalAppField,
    GameField,
)
from gamecatalog.providers.launchbox.registry import Emulator, Platform
from gamecatalog.providers.launchbox.xml_reader import XML_ERRORS, iter_entries, read_fields


def store_game(
    game_path: Path,
    fields: Mapping[GameField, str],
    platform: Platform,
    emulators: Mapping[str, Emulator],
    sctx: SearchContext,
) -> int:
    """Return the game of *game_path*, creating it on first encounter.

    The game joins the platform's collection either way.
    """
    can_path = canonical_path(game_path)
    game_id = sctx.game_id_for_path(can_path)

    if game_id is None:
        game = Game.from_file(Path(can_path))
        store_game_fields(game, fields, platform, emulators)
        if not game.launch_cmd:
            logger.warning("{} game `{}` has no launch command", MSG_PREFIX, game.title)
        game_id = sctx.add_game(can_path, game)

    sctx.add_to_collection(platform.name, game_id)
    return game_id


def read_game(
    fields: Mapping[GameField, str],
    xml_path: str,
    lb_dir: Path,
    platform: Platform,
    emulators: Mapping[str, Emulator],
    sctx: SearchContext,
) -> tuple[str, int] | None:
    """Store one ``<Game>`` entry.

    Returns ``(LaunchBox game ID, catalog game ID)``, or ``None`` if the
    entry was skipped.
    """
    lb_game_id = fields.get(GameField.ID)
    if not lb_game_id:
        logger.warning("{} in `{}`, a game has no ID, entry ignored", MSG_PREFIX, xml_path)
        return None

    raw_path = fields.get(GameField.PATH)
    if not raw_path:
        logger.warning(
            "{} in `{}`, game `{}` has no path, entry ignored",
            MSG_PREFIX, xml_path, lb_game_id,
        )
        return None

    game_path = resolve_library_path(lb_dir, raw_path)
    if not game_path.exists():
        logger.warning(
            "{} in `{}`, game file `{}` doesn't seem to exist, entry ignored",
            MSG_PREFIX, xml_path, raw_path,
        )
        return None

    game_id = store_game(game_path, fields, platform, emulators, sctx)
    return lb_game_id, game_id


def store_addiapp(
    values: Mapping[AdditionalAppField, str],
    xml_path: str,
    lb_dir: Path,
    gameid_map: Mapping[str, int],
    sctx: SearchContext,
) -> bool:
    """Attach one ``<AdditionalApplication>`` entry to its game.

    Returns ``True`` if the entry was used.
    """
    app_id = values.get(AdditionalAppField.ID)
    if not app_id:
        logger.warning(
            "{} in `{}`, an additional application entry has no ID, entry ignored",
            MSG_PREFIX, xml_path,
        )
        return False

    lb_game_id = values.get(AdditionalAppField.GAME_ID)
    if not lb_game_id:
        logger.warning(
            "{} in `{}`, additional application entry `{}` has no GameID field, entry ignored",
            MSG_PREFIX, xml_path, app_id,
        )
        return False

    game_id = gameid_map.get(lb_game_id)
    if game_id is None:
        logger.warning(
            "{} in `{}`, additional application entry `{}` refers to nonexisting game `{}`, "
            "entry ignored",
            MSG_PREFIX, xml_path, app_id, lb_game_id,
        )
        return False

    raw_path = values.get(AdditionalAppField.PATH)
    if not raw_path:
        logger.warning(
            "{} in `{}`, additional application entry `{}` has no path, entry ignored",
            MSG_PREFIX, xml_path, app_id,
        )
        return False

    can_path = canonical_path(resolve_library_path(lb_dir, raw_path))
    if not can_path:
        logger.warning(
            "{} in `{}`, additional application entry `{}` refers to nonexisting file `{}`, "
            "entry ignored",
            MSG_PREFIX, xml_path, app_id, raw_path,
        )
        return False

    name = values.get(AdditionalAppField.NAME, "")
    game = sctx.games[game_id]

    # A file the game already has only gets a display name
    game_file = game.find_file(Path(can_path))
    if game_file is None:
        game.files.append(GameFile(Path(can_path), name))
    elif name:
        game_file.name = name

    sctx.register_path(can_path, game_id)
    return True


def process_platform_xml(
    lb_dir: str | Path,
    platform: Platform,
    emulators: Mapping[str, Emulator],
    sctx: SearchContext,
) -> None:
    """Read the game list of *platform* into *sctx*.

    Never raises: an unreadable or malformed document is reported and
    contributes only the entries read before the error.
    """
    lb_dir = Path(lb_dir)
    xml_path = platform.xml_path

    gameid_map: dict[str, int] = {}
    addiapps: list[dict[AdditionalAppField, str]] = []

    try:
        for elem in iter_entries(xml_path):
            if elem.tag == "Game":
                fields = read_fields(elem, GAME_FIELD_TAGS)
                stored = read_game(fields, xml_path, lb_dir, platform, emulators, sctx)
                if stored is not None:
                    lb_game_id, game_id = stored
                    gameid_map[lb_game_id] = game_id
            elif elem.tag == "AdditionalApplication":
                addiapps.append(read_fields(elem, ADDIAPP_FIELD_TAGS))
    except XML_ERRORS as e:
        logger.warning("{} {}: {}", MSG_PREFIX, xml_path, e)

    # Resolved last, games may be listed after their additional applications
    for values in addiapps:
        store_addiapp(values, xml_path, lb_dir, gameid_map, sctx)

    logger.debug(
        "{} `{}`: {} game(s), {} additional application(s)",
        MSG_PREFIX, platform.name, len(gameid_map), len(addiapps),
    )
