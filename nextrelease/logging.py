"""Logging setup for the nextrelease CLI.

The configured level applies to the ``nextrelease`` loggers. HTTP transport
loggers (urllib3, used by requests) stay at WARNING unless the level is
DEBUG, so API connection chatter only shows up when debugging a resolution.

Configure via config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
"""

import logging

from nextrelease.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

TRANSPORT_LOGGERS = ("urllib3",)


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names give INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


def setup_logging(config: LoggingConfig) -> int:
    """Configure root handler and logger levels; return the resolved level."""
    level = _resolve_level(config.level)
    logging.basicConfig(level=level, format=config.format or DEFAULT_FORMAT, force=True)
    logging.getLogger("nextrelease").setLevel(level)
    transport_level = logging.DEBUG if level == logging.DEBUG else logging.WARNING
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    return level
