"""LaunchBox emulator registry (``Data/Emulators.xml``) parser.

The registry lists the configured emulators and, for every platform, the
emulator used to launch its games by default::

    <LaunchBox>
      <Emulator>
        <ID>2b0b9d3f-…</ID>
        <ApplicationPath>Emulators\\snes9x\\snes9x-x64.exe</ApplicationPath>
        <CommandLine>-fullscreen</CommandLine>
      </Emulator>
      <EmulatorPlatform>
        <Emulator>2b0b9d3f-…</Emulator>
        <Platform>Super Nintendo Entertainment System</Platform>
        <CommandLine></CommandLine>
      </EmulatorPlatform>
    </LaunchBox>

Only emulators whose executable exists and platforms whose game list
exists and whose default emulator is known are returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from xml.etree.ElementTree import Element

from loguru import logger

from gamecatalog.core.path_resolver import (
    canonical_path,
    is_readable_file,
    resolve_library_path,
)
from gamecatalog.providers.launchbox.literals import (
    EMULATORS_XML,
    MSG_PREFIX,
    PLATFORMS_DIR,
)
from gamecatalog.providers.launchbox.xml_reader import XML_ERRORS, child_text, iter_entries


@dataclass
class Emulator:
    """An emulator known to LaunchBox."""

    app_path: str = ""
    """Canonical path of the executable; empty if it could not be found."""

    cmd_params: str = ""
    """Default command-line parameters."""

    @property
    def incomplete(self) -> bool:
        return not self.app_path


@dataclass
class Platform:
    """A LaunchBox platform and its default emulator."""

    name: str = ""
    default_emu_id: str = ""
    cmd_params: str = ""
    """Platform-wide parameter override; empty to use the emulator's own."""

    xml_path: str = ""
    """Canonical path of the platform's game list."""

    @property
    def incomplete(self) -> bool:
        return not (self.name and self.default_emu_id and self.xml_path)


@dataclass
class RegistryData:
    emulators: dict[str, Emulator] = field(default_factory=dict)
    platforms: list[Platform] = field(default_factory=list)


def _read_emulator(elem: Element, lb_dir: Path) -> tuple[str, Emulator]:
    emu_id = ""
    emu = Emulator()
    for child in elem:
        if child.tag == "ID":
            emu_id = child_text(child)
        elif child.tag == "ApplicationPath":
            raw_path = child_text(child)
            app_path = resolve_library_path(lb_dir, raw_path)
            # only a file can be launched; an empty path would be the library root
            emu.app_path = (
                canonical_path(app_path) if raw_path and is_readable_file(app_path) else ""
            )
            if emu.incomplete:
                logger.warning(
                    "{} emulator `{}` doesn't seem to exist, entry ignored",
                    MSG_PREFIX, app_path,
                )
        elif child.tag == "CommandLine":
            emu.cmd_params = child_text(child)
    return emu_id, emu


def _read_platform(elem: Element, platforms_dir: Path) -> Platform:
    platform = Platform()
    for child in elem:
        if child.tag == "Emulator":
            platform.default_emu_id = child_text(child)
        elif child.tag == "Platform":
            platform.name = child_text(child)
        elif child.tag == "CommandLine":
            platform.cmd_params = child_text(child)
    if platform.name:
        platform.xml_path = canonical_path(platforms_dir / f"{platform.name}.xml")
    return platform


def prune_platforms(data: RegistryData) -> None:
    """Drop the platforms whose default emulator is not in the registry."""
    kept: list[Platform] = []
    for platform in data.platforms:
        if platform.default_emu_id in data.emulators:
            kept.append(platform)
            continue
        logger.warning(
            "{} emulator platform `{}` refers to a missing emulator id, entry ignored",
            MSG_PREFIX, platform.name,
        )
    data.platforms = kept


def read_emulators_xml(lb_dir: str | Path) -> RegistryData:
    """Parse ``Data/Emulators.xml`` under the LaunchBox directory *lb_dir*.

    Never raises: an unreadable or malformed registry is reported as a
    warning and yields whatever was read before the error.
    """
    lb_dir = Path(lb_dir)
    xml_path = lb_dir.joinpath(*EMULATORS_XML)
    platforms_dir = lb_dir.joinpath(*PLATFORMS_DIR)

    out = RegistryData()
    if not xml_path.is_file():
        logger.warning("{} could not open `{}`", MSG_PREFIX, xml_path)
        return out

    try:
        for elem in iter_entries(xml_path):
            if elem.tag == "Emulator":
                emu_id, emu = _read_emulator(elem, lb_dir)
                # first definition wins
                if emu_id and not emu.incomplete and emu_id not in out.emulators:
                    out.emulators[emu_id] = emu
            elif elem.tag == "EmulatorPlatform":
                platform = _read_platform(elem, platforms_dir)
                if not platform.incomplete:
                    out.platforms.append(platform)
    except XML_ERRORS as e:
        logger.warning("{} {}: {}", MSG_PREFIX, xml_path, e)

    prune_platforms(out)
    logger.debug(
        "{} {} emulator(s), {} platform(s) in registry",
        MSG_PREFIX, len(out.emulators), len(out.platforms),
    )
    return out
