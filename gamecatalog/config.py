"""Application configuration management."""

import copy
import json
import platform
from pathlib import Path
from typing import Any, Optional

from loguru import logger


def _default_data_dir() -> Path:
    """Return the default data directory for the application."""
    if platform.system() == "Windows":
        return Path.home() / "Documents" / "GameCatalog"
    elif platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / "GameCatalog"
    else:
        return Path.home() / ".config" / "GameCatalog"


_DEFAULT_CONFIG: dict[str, Any] = {
    "silent": False,
    "log_level": "DEBUG",
    "providers": {
        "launchbox": {"enabled": True, "options": {}},
    },
}


class Config:
    """Singleton application configuration."""

    _instance: Optional["Config"] = None
    _data: dict[str, Any]
    _path: Path
    _data_dir: Path

    def __new__(cls, config_path: Optional[Path] = None) -> "Config":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if self._initialized:  # type: ignore[has-type]
            return
        self._initialized = True
        if config_path is not None:
            self._path = Path(config_path)
            self._data_dir = self._path.parent
        else:
            self._data_dir = _default_data_dir()
            self._path = self._data_dir / "config.json"
        self._data = copy.deepcopy(_DEFAULT_CONFIG)
        self._load()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def path(self) -> Path:
        return self._path

    @property
    def silent(self) -> bool:
        return bool(self._data.get("silent", False))

    @property
    def log_level(self) -> str:
        return str(self._data.get("log_level", "DEBUG")).upper()

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._save()

    def is_provider_enabled(self, provider_name: str) -> bool:
        """Providers are enabled unless the config says otherwise."""
        prov_cfg = self._data.get("providers", {})
        return bool(prov_cfg.get(provider_name, {}).get("enabled", True))

    def set_provider_enabled(self, provider_name: str, enabled: bool) -> None:
        self._provider_section(provider_name)["enabled"] = enabled
        self._save()

    def get_provider_options(self, provider_name: str) -> dict[str, Any]:
        """Get the user-configured options of a provider (e.g. ``installdir``)."""
        prov_cfg = self._data.get("providers", {})
        return dict(prov_cfg.get(provider_name, {}).get("options", {}))

    def set_provider_option(
        self, provider_name: str, key: str, value: Any, save: bool = True,
    ) -> None:
        """Set a provider option; with ``save=False`` it only lasts for this run."""
        section = self._provider_section(provider_name)
        section.setdefault("options", {})[key] = value
        if save:
            self._save()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _provider_section(self, provider_name: str) -> dict[str, Any]:
        providers = self._data.setdefault("providers", {})
        return providers.setdefault(provider_name, {})

    def _load(self) -> None:
        if self._path.exists():
            try:
                with open(self._path, "r", encoding="utf-8") as f:
                    saved = json.load(f)
                self._data.update(saved)
                logger.info("Configuration loaded from {}", self._path)
            except Exception as e:
                logger.warning("Failed to load config, using defaults: {}", e)

    def _save(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=4, ensure_ascii=False)
        except Exception as e:
            logger.error("Failed to save config: {}", e)

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton (for testing)."""
        cls._instance = None
