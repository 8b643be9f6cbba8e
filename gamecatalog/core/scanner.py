"""Scan dispatcher: runs every enabled provider against one shared context."""

from __future__ import annotations

from loguru import logger

from gamecatalog.config import Config
from gamecatalog.core.search_context import SearchContext
from gamecatalog.providers.provider_manager import ProviderManager


class Scanner:
    """High-level scanner that collects games from all providers.

    Providers run one at a time, in registration order, and all write into
    the same :class:`SearchContext`.  The scanner owns the context; each
    provider only uses it for the duration of its own ``find_lists`` call.
    """

    def __init__(self, provider_manager: ProviderManager, config: Config) -> None:
        self._pm = provider_manager
        self._cfg = config

    def run(self, sctx: SearchContext | None = None) -> SearchContext:
        """Run all enabled providers and return the filled context."""
        sctx = sctx if sctx is not None else SearchContext()
        for provider in self._pm.get_all_providers():
            if not self._cfg.is_provider_enabled(provider.name):
                logger.info("Provider {} disabled, skipped", provider.display_name)
                continue
            try:
                logger.info("Scanning {}…", provider.display_name)
                provider.set_options(self._cfg.get_provider_options(provider.name))
                games_before = len(sctx.games)
                provider.find_lists(sctx)
                logger.info(
                    "{}: {} new game(s)", provider.display_name, len(sctx.games) - games_before
                )
            except Exception as e:
                logger.error("Error scanning {}: {}", provider.name, e)

        logger.info(
            "Total games found: {} in {} collection(s)",
            len(sctx.games), len(sctx.collections),
        )
        return sctx
