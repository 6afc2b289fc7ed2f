"""Loguru sink configuration."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from termlex.utils.config import LoggingConfig


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Replace Loguru's default sink with the configured stderr/file sinks."""
    config = config or LoggingConfig()
    level = config.level.upper()
    serialize = config.format == "json"

    logger.remove()
    logger.add(sys.stderr, level=level, serialize=serialize)

    if config.file:
        target = Path(config.file)
        target.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(target),
            level=level,
            serialize=serialize,
            rotation=f"{config.max_size_mb} MB",
            retention=config.backup_count,
        )

    logger.debug("Logging configured", level=level, format=config.format, file=config.file)
