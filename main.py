"""Game Catalog importer entry point."""

import argparse
import sys
from pathlib import Path

from loguru import logger

from gamecatalog.config import Config
from gamecatalog.core.scanner import Scanner
from gamecatalog.logger import setup_logger
from gamecatalog.providers.provider_manager import ProviderManager


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Scan game libraries and build the game catalog",
    )
    parser.add_argument(
        "--installdir",
        type=Path,
        help="LaunchBox installation directory (default: ~/LaunchBox)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config.json (default: in the application data directory)",
    )
    parser.add_argument(
        "--silent",
        action="store_true",
        help="Do not log to the console",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    # ---- 1. Config ----
    config = Config(args.config)
    if args.installdir is not None:
        config.set_provider_option("launchbox", "installdir", str(args.installdir), save=False)

    # ---- 2. Logger ----
    setup_logger(
        config.data_dir / "logs",
        level=config.log_level,
        silent=args.silent or config.silent,
    )
    logger.info("Game Catalog starting…")

    # ---- 3. Provider discovery ----
    pm = ProviderManager()
    pm.discover()
    logger.info("Providers loaded: {}", pm.get_provider_names())

    # ---- 4. Scan ----
    scanner = Scanner(pm, config)
    sctx = scanner.run()

    for name, childs in sctx.collection_childs.items():
        logger.info("  {}: {} game(s)", name, len(childs))

    return 0


if __name__ == "__main__":
    sys.exit(main())
