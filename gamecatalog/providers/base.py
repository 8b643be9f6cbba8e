"""Abstract base class for game providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from gamecatalog.core.search_context import SearchContext


class Provider(ABC):
    """Base class that every game provider must implement.

    A provider imports the games of one external launcher or frontend
    into the shared :class:`SearchContext`.  Providers are run one after
    the other against the same context, so a game found by several of
    them ends up as a single record.

    Options
    ~~~~~~~
    User-configured options are handed to the provider before a scan as
    a flat ``{name: value}`` mapping (see :meth:`set_options`).  What the
    keys mean is up to each provider; unknown keys are ignored.
    """

    def __init__(self) -> None:
        self._options: dict[str, Any] = {}

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name of the provider (e.g. 'launchbox')."""
        ...

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable display name."""
        ...

    @property
    def options(self) -> dict[str, Any]:
        return self._options

    def set_options(self, options: dict[str, Any] | None) -> None:
        self._options = dict(options or {})

    def option(self, key: str) -> str | None:
        """Return the option *key* as a string.

        List values, as written by some settings files, yield their first
        entry.  Missing or empty options yield ``None``.
        """
        value = self._options.get(key)
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        if value is None or value == "":
            return None
        return str(value)

    @abstractmethod
    def find_lists(self, sctx: SearchContext) -> None:
        """Add this provider's games and collections to *sctx*.

        Implementations report problems through the log and return; they
        should not raise for bad or missing input data.
        """
        ...
