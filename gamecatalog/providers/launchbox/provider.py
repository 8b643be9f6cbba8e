"""LaunchBox provider: imports games, launch commands and media from a LaunchBox library."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from gamecatalog.core.path_resolver import get_home_dir
from gamecatalog.core.search_context import SearchContext
from gamecatalog.providers.base import Provider
from gamecatalog.providers.launchbox.assets import find_assets
from gamecatalog.providers.launchbox.literals import MSG_PREFIX
from gamecatalog.providers.launchbox.platform_xml import process_platform_xml
from gamecatalog.providers.launchbox.registry import read_emulators_xml

INSTALLDIR_OPTION = "installdir"


def find_installation() -> Path | None:
    """Return ``~/LaunchBox`` if it exists."""
    possible_path = get_home_dir() / "LaunchBox"
    if possible_path.is_dir():
        logger.info("{} found directory: `{}`", MSG_PREFIX, possible_path)
        return possible_path
    return None


class LaunchboxProvider(Provider):
    """Provider for LaunchBox libraries."""

    @property
    def name(self) -> str:
        return "launchbox"

    @property
    def display_name(self) -> str:
        return "LaunchBox"

    def library_dir(self) -> Path | None:
        """The configured ``installdir`` if set, else the default location."""
        configured = self.option(INSTALLDIR_OPTION)
        if configured is not None:
            lb_dir = Path(configured).expanduser()
            return lb_dir if lb_dir.is_dir() else None
        return find_installation()

    def find_lists(self, sctx: SearchContext) -> None:
        lb_dir = self.library_dir()
        if lb_dir is None:
            logger.info("{} no installation found", MSG_PREFIX)
            return

        emu_data = read_emulators_xml(lb_dir)
        if not emu_data.emulators:
            logger.warning("{} no emulator settings found", MSG_PREFIX)
            return
        if not emu_data.platforms:
            logger.warning("{} no platforms found", MSG_PREFIX)
            return

        for platform in emu_data.platforms:
            try:
                process_platform_xml(lb_dir, platform, emu_data.emulators, sctx)
                find_assets(lb_dir, platform, sctx)
            except Exception:
                logger.exception("{} failed to import platform `{}`", MSG_PREFIX, platform.name)
