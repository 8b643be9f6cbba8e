"""Streaming reader for LaunchBox XML documents.

``Emulators.xml`` and the per-platform files share one shape: a
``<LaunchBox>`` root holding a flat list of entries (``<Game>``,
``<Emulator>`` …), each made of simple text children.  Platform files can
be tens of megabytes, so entries are yielded one by one and dropped once
consumed.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from pathlib import Path
from typing import TypeVar
from xml.etree.ElementTree import Element

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, iterparse

from gamecatalog.providers.launchbox.literals import ROOT_TAG

F = TypeVar("F", bound=Enum)


class LaunchboxXmlError(ValueError):
    """The document is well-formed but is not a LaunchBox file."""


# Everything that can go wrong while reading one document.
XML_ERRORS = (OSError, ParseError, DefusedXmlException, LaunchboxXmlError)


def iter_entries(xml_path: str | Path) -> Iterator[Element]:
    """Yield the children of the ``<LaunchBox>`` root in document order.

    Each element is complete when yielded and is detached from the root
    afterwards, so memory does not grow with the document.
    Raises :class:`LaunchboxXmlError` if the root element is wrong; parse
    and I/O errors propagate to the caller.
    """
    depth = 0
    root: Element | None = None
    for event, elem in iterparse(str(xml_path), events=("start", "end")):
        if event == "start":
            if depth == 0:
                if elem.tag != ROOT_TAG:
                    raise LaunchboxXmlError(
                        f"`{xml_path}` does not have a `<{ROOT_TAG}>` root node!"
                    )
                root = elem
            depth += 1
            continue
        depth -= 1
        if depth == 1:
            yield elem
            elem.clear()
            root.remove(elem)


def child_text(elem: Element) -> str:
    return "".join(elem.itertext()).strip()


def read_fields(elem: Element, tag_map: Mapping[str, F]) -> dict[F, str]:
    """Collect the whitelisted children of *elem* into a field map.

    Unknown tags and empty values are skipped.  If a tag repeats, its first
    value is kept.
    """
    values: dict[F, str] = {}
    for child in elem:
        field = tag_map.get(child.tag)
        if field is None:
            continue
        text = child_text(child)
        if not text:
            continue
        values.setdefault(field, text)
    return values
