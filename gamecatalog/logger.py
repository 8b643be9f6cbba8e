"""Loguru logger configuration for the application."""

import sys
from pathlib import Path

from loguru import logger


def setup_logger(
    log_dir: Path | None = None,
    level: str = "DEBUG",
    silent: bool = False,
) -> None:
    """Configure loguru with console and file sinks.

    Parameters
    ----------
    log_dir : Path, optional
        Directory for log files.  Defaults to ``<data dir>/logs``.
    level : str
        Minimum level for both sinks.
    silent : bool
        Do not log to the console, only to the file.
    """
    # Remove default handler
    logger.remove()

    # Console handler, coloured
    if not silent:
        logger.add(
            sys.stderr,
            level=level,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "<level>{message}</level>"
            ),
            colorize=True,
        )

    # File handler, rotating
    if log_dir is None:
        from gamecatalog.config import Config
        cfg = Config()
        log_dir = cfg.data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "scan.log"

    logger.add(
        str(log_file),
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {module}:{function}:{line} | {message}",
        rotation="10 MB",
        retention="7 days",
        encoding="utf-8",
    )

    logger.info("Logger initialized, file output: {}", log_file)
