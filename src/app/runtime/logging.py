"""Loguru sink configuration shared by the CLI and the module entry points."""

import sys

from loguru import logger

from src.app.runtime.config.config_data import LoggingConfig


def configure_logging(
    logging_config: LoggingConfig | None = None, level: str | None = None
) -> None:
    """Replace loguru's default sink with one on stderr at the given level.

    Args:
        logging_config: Logging section of the configuration; defaults apply when omitted
        level: Explicit level overriding the configured one
    """
    logging_config = logging_config or LoggingConfig()
    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=(level or logging_config.level).upper(),
        format=logging_config.format,
        colorize=logging_config.colorize,
    )
