"""Provider discovery and management."""

from __future__ import annotations

import importlib
import importlib.util
import inspect
import pkgutil
from pathlib import Path
from types import ModuleType

from loguru import logger

from gamecatalog.providers.base import Provider

_PACKAGE = "gamecatalog.providers"


def _provider_classes(mod: ModuleType) -> list[type[Provider]]:
    """Concrete ``Provider`` subclasses defined in *mod* itself, not imported into it."""
    return [
        cls
        for _, cls in inspect.getmembers(mod, inspect.isclass)
        if issubclass(cls, Provider)
        and not inspect.isabstract(cls)
        and cls.__module__ == mod.__name__
    ]


class ProviderManager:
    """Discovers and manages game providers.

    Providers run in registration order, which for discovered providers is
    the alphabetical order of their packages.
    """

    def __init__(self) -> None:
        self._providers: dict[str, Provider] = {}

    def discover(self) -> None:
        """Register the providers shipped in the ``gamecatalog.providers`` package.

        Every sub-package with a ``provider`` module contributes the
        ``Provider`` subclasses defined there.  Sub-packages without one are
        skipped; a provider module that fails to import is logged.
        """
        providers_dir = Path(__file__).parent
        for module_info in pkgutil.iter_modules([str(providers_dir)]):
            if not module_info.ispkg:
                continue
            full_module = f"{_PACKAGE}.{module_info.name}.provider"
            if importlib.util.find_spec(full_module) is None:
                logger.debug("No provider module in {}, skipped", module_info.name)
                continue
            try:
                mod = importlib.import_module(full_module)
            except Exception as e:
                logger.warning("Failed to load provider {}: {}", full_module, e)
                continue

            for provider_cls in _provider_classes(mod):
                instance = provider_cls()
                if instance.name in self._providers:
                    logger.warning(
                        "Provider {} already registered, {} skipped", instance.name, full_module
                    )
                    continue
                self.register(instance)
                logger.info("Discovered provider: {} ({})", instance.name, full_module)

    def register(self, provider: Provider) -> None:
        """Register a provider instance, replacing one with the same name."""
        self._providers[provider.name] = provider

    def get_provider(self, name: str) -> Provider | None:
        return self._providers.get(name)

    def get_all_providers(self) -> list[Provider]:
        """Return all registered providers, in registration order."""
        return list(self._providers.values())

    def get_provider_names(self) -> list[str]:
        return list(self._providers)
