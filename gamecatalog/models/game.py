"""Data model for catalog games."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path


class AssetType(str, Enum):
    """Category of a media file attached to a game."""

    BOX_FRONT = "box_front"
    BOX_BACK = "box_back"
    ARCADE_MARQUEE = "arcade_marquee"
    CARTRIDGE = "cartridge"
    SCREENSHOTS = "screenshots"
    POSTER = "poster"
    ARCADE_PANEL = "arcade_panel"
    LOGO = "logo"
    BACKGROUND = "background"
    UI_STEAMGRID = "ui_steamgrid"
    MUSIC = "music"
    VIDEOS = "videos"


class Assets:
    """Media files of a game, at most one per asset type.

    The first file offered for a type is kept; later offers are ignored.
    """

    def __init__(self) -> None:
        self._files: dict[AssetType, Path] = {}

    def add_file_maybe(self, asset_type: AssetType, path: Path) -> bool:
        """Attach *path* under *asset_type* unless that type is already set.

        Returns ``True`` if the file was attached.
        """
        if asset_type in self._files:
            return False
        self._files[asset_type] = Path(path)
        return True

    def get(self, asset_type: AssetType) -> Path | None:
        return self._files.get(asset_type)

    def has(self, asset_type: AssetType) -> bool:
        return asset_type in self._files

    def __len__(self) -> int:
        return len(self._files)


@dataclass
class GameFile:
    """A launchable file of a game."""

    path: Path
    """Absolute path of the file."""

    name: str = ""
    """Optional display name (e.g. 'Disc 2', 'Level editor')."""


@dataclass
class Game:
    """A catalog game, progressively filled in by providers."""

    title: str
    """Display title."""

    description: str = ""
    developers: list[str] = field(default_factory=list)
    publishers: list[str] = field(default_factory=list)
    genres: list[str] = field(default_factory=list)
    release_date: date | None = None

    rating: float = 0.0
    """Rating as the provider reports it, unscaled (LaunchBox stars run 0-5).

    0.0 means unset.
    """

    launch_cmd: str = ""
    """Launch command template; ``{file.path}`` is substituted at launch time."""

    launch_workdir: str = ""
    files: list[GameFile] = field(default_factory=list)
    """Launchable files; the first entry is the file the game was created from."""

    assets: Assets = field(default_factory=Assets)

    @classmethod
    def from_file(cls, path: Path) -> Game:
        """Create a game for *path*, titled after the file name."""
        path = Path(path)
        return cls(title=path.stem, files=[GameFile(path)])

    def find_file(self, path: Path) -> GameFile | None:
        """Return the entry of :attr:`files` pointing at *path*, if any."""
        path = Path(path)
        for game_file in self.files:
            if game_file.path == path:
                return game_file
        return None
