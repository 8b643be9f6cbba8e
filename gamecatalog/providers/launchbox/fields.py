"""Merging ``<Game>`` field values into catalog games.

Each field has a fixed merge policy, listed in :data:`MERGE_POLICIES`.
Fields are applied in the table's order, never in the order the XML
happened to list them, so the result of a merge only depends on the
values.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any

from gamecatalog.models.game import Game
from gamecatalog.providers.launchbox.literals import GameField
from gamecatalog.providers.launchbox.registry import Emulator, Platform


class MergePolicy(str, Enum):
    """How a new value combines with what a game already holds."""

    LAST_WINS = "last_wins"
    FIRST_WINS = "first_wins"                    # only fills an unset value
    APPEND_UNIQUE = "append_unique"              # list; duplicates removed
    SPLIT_APPEND_UNIQUE = "split_append_unique"  # ';'-separated list
    MAX_WINS = "max_wins"                        # numeric; keeps the largest
    LAUNCH = "launch"                            # used for the launch command
    IGNORED = "ignored"


MERGE_POLICIES: dict[GameField, MergePolicy] = {
    GameField.ID: MergePolicy.IGNORED,
    GameField.PATH: MergePolicy.IGNORED,
    GameField.TITLE: MergePolicy.LAST_WINS,
    GameField.RELEASE: MergePolicy.FIRST_WINS,
    GameField.DEVELOPER: MergePolicy.APPEND_UNIQUE,
    GameField.PUBLISHER: MergePolicy.APPEND_UNIQUE,
    GameField.NOTES: MergePolicy.FIRST_WINS,
    GameField.GENRE: MergePolicy.APPEND_UNIQUE,
    GameField.PLAYMODE: MergePolicy.SPLIT_APPEND_UNIQUE,
    GameField.STARS: MergePolicy.MAX_WINS,
    GameField.EMULATOR: MergePolicy.LAUNCH,
    GameField.EMULATOR_PARAMS: MergePolicy.LAUNCH,
}

# Game attribute written by each stored field. Play modes share the genre list.
FIELD_ATTRS: dict[GameField, str] = {
    GameField.TITLE: "title",
    GameField.RELEASE: "release_date",
    GameField.DEVELOPER: "developers",
    GameField.PUBLISHER: "publishers",
    GameField.NOTES: "description",
    GameField.PLAYMODE: "genres",
    GameField.GENRE: "genres",
    GameField.STARS: "rating",
}


# ── Value parsers ────────────────────────────────────────────────────────

def parse_release_date(text: str) -> date | None:
    """Parse the date part of an ISO timestamp (``1991-06-23T02:00:00-07:00``)."""
    try:
        return date.fromisoformat(text.strip()[:10])
    except ValueError:
        return None


def parse_rating(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def split_list(text: str, sep: str = ";") -> list[str]:
    return [part.strip() for part in text.split(sep) if part.strip()]


_PARSERS: dict[GameField, Callable[[str], Any]] = {
    GameField.RELEASE: parse_release_date,
    GameField.STARS: parse_rating,
}


# ── Merge functions ──────────────────────────────────────────────────────

def merge_last_wins(game: Game, attr: str, value: Any) -> None:
    setattr(game, attr, value)


def merge_first_wins(game: Game, attr: str, value: Any) -> None:
    if not getattr(game, attr):
        setattr(game, attr, value)


def merge_append_unique(game: Game, attr: str, value: Any) -> None:
    items: list[str] = getattr(game, attr)
    items.append(value)
    items[:] = list(dict.fromkeys(items))


def merge_split_append_unique(game: Game, attr: str, value: Any) -> None:
    items: list[str] = getattr(game, attr)
    items.extend(split_list(value))
    items[:] = list(dict.fromkeys(items))


def merge_max_wins(game: Game, attr: str, value: Any) -> None:
    if value > getattr(game, attr):
        setattr(game, attr, value)


MERGE_FUNCS: dict[MergePolicy, Callable[[Game, str, Any], None]] = {
    MergePolicy.LAST_WINS: merge_last_wins,
    MergePolicy.FIRST_WINS: merge_first_wins,
    MergePolicy.APPEND_UNIQUE: merge_append_unique,
    MergePolicy.SPLIT_APPEND_UNIQUE: merge_split_append_unique,
    MergePolicy.MAX_WINS: merge_max_wins,
}


def merge_fields(game: Game, fields: Mapping[GameField, str]) -> None:
    """Merge the descriptive *fields* of one ``<Game>`` entry into *game*.

    Launch-related fields are left to :func:`apply_launch`.
    """
    for game_field, policy in MERGE_POLICIES.items():
        merge = MERGE_FUNCS.get(policy)
        raw = fields.get(game_field)
        if merge is None or raw is None:
            continue

        parser = _PARSERS.get(game_field)
        value = parser(raw) if parser else raw
        if value is None:
            continue
        merge(game, FIELD_ATTRS[game_field], value)


# ── Launch command ───────────────────────────────────────────────────────

def resolve_launch(
    fields: Mapping[GameField, str],
    platform: Platform,
    emulators: Mapping[str, Emulator],
) -> tuple[str, str]:
    """Return ``(emulator path, parameters)`` for a game.

    The game's ``Emulator`` override replaces the platform default when it
    names a known emulator.  Parameters come from the game, else the
    platform, else the chosen emulator.
    """
    emulator = emulators[platform.default_emu_id]
    override = fields.get(GameField.EMULATOR)
    if override and override in emulators:
        emulator = emulators[override]

    params = (
        fields.get(GameField.EMULATOR_PARAMS)
        or platform.cmd_params
        or emulator.cmd_params
    )
    return emulator.app_path, params


def launch_command(app_path: str, params: str) -> str:
    if not app_path:
        return ""
    parts = [f'"{app_path}"']
    if params:
        parts.append(params)
    parts.append("{file.path}")
    return " ".join(parts)


def apply_launch(
    game: Game,
    fields: Mapping[GameField, str],
    platform: Platform,
    emulators: Mapping[str, Emulator],
) -> None:
    app_path, params = resolve_launch(fields, platform, emulators)
    game.launch_cmd = launch_command(app_path, params)
    game.launch_workdir = str(Path(app_path).parent) if app_path else ""


def store_game_fields(
    game: Game,
    fields: Mapping[GameField, str],
    platform: Platform,
    emulators: Mapping[str, Emulator],
) -> None:
    """Fill a freshly created *game* from its ``<Game>`` entry."""
    merge_fields(game, fields)
    apply_launch(game, fields, platform, emulators)
