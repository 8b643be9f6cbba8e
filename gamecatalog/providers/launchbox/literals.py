"""Fixed names of the LaunchBox library export."""

from __future__ import annotations

from enum import Enum

from gamecatalog.models.game import AssetType

MSG_PREFIX = "LaunchBox:"

ROOT_TAG = "LaunchBox"

# Relative to the LaunchBox installation directory
EMULATORS_XML = ("Data", "Emulators.xml")
PLATFORMS_DIR = ("Data", "Platforms")
IMAGES_DIR = "Images"
MUSIC_DIR = "Music"
VIDEOS_DIR = "Videos"


class GameField(str, Enum):
    """Recognised children of a ``<Game>`` element."""

    ID = "id"
    PATH = "path"
    TITLE = "title"
    RELEASE = "release"
    DEVELOPER = "developer"
    PUBLISHER = "publisher"
    NOTES = "notes"
    PLAYMODE = "playmode"
    GENRE = "genre"
    STARS = "stars"
    EMULATOR = "emulator"
    EMULATOR_PARAMS = "emulator_params"


class AdditionalAppField(str, Enum):
    """Recognised children of an ``<AdditionalApplication>`` element."""

    ID = "id"
    GAME_ID = "game_id"
    PATH = "path"
    NAME = "name"


GAME_FIELD_TAGS: dict[str, GameField] = {
    "ID": GameField.ID,
    "ApplicationPath": GameField.PATH,
    "Title": GameField.TITLE,
    "Developer": GameField.DEVELOPER,
    "Publisher": GameField.PUBLISHER,
    "ReleaseDate": GameField.RELEASE,
    "Notes": GameField.NOTES,
    "PlayMode": GameField.PLAYMODE,
    "Genre": GameField.GENRE,
    "CommunityStarRating": GameField.STARS,
    "Emulator": GameField.EMULATOR,
    "CommandLine": GameField.EMULATOR_PARAMS,
}

ADDIAPP_FIELD_TAGS: dict[str, AdditionalAppField] = {
    "Id": AdditionalAppField.ID,
    "ApplicationPath": AdditionalAppField.PATH,
    "GameID": AdditionalAppField.GAME_ID,
    "Name": AdditionalAppField.NAME,
}

# Image subdirectories, ordered by priority: for a given asset type the
# first directory holding a match wins.
ASSET_DIRS: list[tuple[str, AssetType]] = [
    ("Box - Front", AssetType.BOX_FRONT),
    ("Box - Front - Reconstructed", AssetType.BOX_FRONT),
    ("Fanart - Box - Front", AssetType.BOX_FRONT),

    ("Box - Back", AssetType.BOX_BACK),
    ("Box - Back - Reconstructed", AssetType.BOX_BACK),
    ("Fanart - Box - Back", AssetType.BOX_BACK),

    ("Arcade - Marquee", AssetType.ARCADE_MARQUEE),
    ("Banner", AssetType.ARCADE_MARQUEE),

    ("Cart - Front", AssetType.CARTRIDGE),
    ("Disc", AssetType.CARTRIDGE),
    ("Fanart - Cart - Front", AssetType.CARTRIDGE),
    ("Fanart - Disc", AssetType.CARTRIDGE),

    ("Screenshot - Gameplay", AssetType.SCREENSHOTS),
    ("Screenshot - Game Select", AssetType.SCREENSHOTS),
    ("Screenshot - Game Title", AssetType.SCREENSHOTS),
    ("Screenshot - Game Over", AssetType.SCREENSHOTS),
    ("Screenshot - High Scores", AssetType.SCREENSHOTS),

    ("Advertisement Flyer - Front", AssetType.POSTER),
    ("Arcade - Control Panel", AssetType.ARCADE_PANEL),
    ("Clear Logo", AssetType.LOGO),
    ("Fanart - Background", AssetType.BACKGROUND),
    ("Steam Banner", AssetType.UI_STEAMGRID),
]
