"""Fixtures building throw-away LaunchBox libraries."""

from pathlib import Path
from xml.sax.saxutils import escape

import pytest


def _tags(**fields: str) -> str:
    return "".join(f"<{tag}>{escape(value)}</{tag}>" for tag, value in fields.items())


class LaunchboxLibrary:
    """A LaunchBox directory under ``tmp_path`` with helpers to fill it."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)

    # ── Files ──

    def add_file(self, rel_path: str, content: bytes = b"") -> Path:
        path = self.root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    def write_document(self, rel_path: str, body: str, root_tag: str = "LaunchBox") -> Path:
        path = self.root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            '<?xml version="1.0" standalone="yes"?>\n'
            f"<{root_tag}>\n{body}\n</{root_tag}>\n",
            encoding="utf-8",
        )
        return path

    def write_emulators(self, *entries: str) -> Path:
        return self.write_document("Data/Emulators.xml", "\n".join(entries))

    def write_platform(self, name: str, *entries: str) -> Path:
        return self.write_document(f"Data/Platforms/{name}.xml", "\n".join(entries))

    # ── XML snippets ──

    @staticmethod
    def emulator(emu_id: str, app_path: str, cmd: str = "") -> str:
        return f"<Emulator>{_tags(ID=emu_id, ApplicationPath=app_path, CommandLine=cmd)}</Emulator>"

    @staticmethod
    def emulator_platform(emu_id: str, name: str, cmd: str = "") -> str:
        return (
            "<EmulatorPlatform>"
            f"{_tags(Emulator=emu_id, Platform=name, CommandLine=cmd)}"
            "</EmulatorPlatform>"
        )

    @staticmethod
    def game(**fields: str) -> str:
        return f"<Game>{_tags(**fields)}</Game>"

    @staticmethod
    def addiapp(**fields: str) -> str:
        return f"<AdditionalApplication>{_tags(**fields)}</AdditionalApplication>"


@pytest.fixture
def library(tmp_path: Path) -> LaunchboxLibrary:
    return LaunchboxLibrary(tmp_path / "LaunchBox")


@pytest.fixture
def snes_library(library: LaunchboxLibrary) -> LaunchboxLibrary:
    """A library with one emulator and a valid, still empty, SNES platform."""
    library.add_file("Emulators/snes9x/snes9x.exe")
    library.write_emulators(
        library.emulator("emu-snes9x", r"Emulators\snes9x\snes9x.exe", "-fullscreen"),
        library.emulator_platform("emu-snes9x", "SNES"),
    )
    library.write_platform("SNES")
    return library
