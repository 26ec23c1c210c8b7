"""Logging setup for the pathfinder package.

Library modules only create loggers; nothing is printed until the
application calls ``configure_logging``.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError
from .domain.models import SearchStats

logger = logging.getLogger("pathfinder")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stream handler to the ``pathfinder`` logger.

    Calling it again replaces the handler added by the previous call.

    Args:
        config: Logging settings; defaults to the global configuration.

    Returns:
        The configured package logger.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="level",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    for handler in list(logger.handlers):
        if getattr(handler, "_pathfinder_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    handler._pathfinder_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def describe_stats(stats: SearchStats) -> str:
    """One-line summary of an engine run, for log messages."""
    return (
        f"pushes={stats.pushes} pops={stats.pops} "
        f"stale_pops={stats.stale_pops} relaxations={stats.relaxations}"
    )
