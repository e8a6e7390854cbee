from __future__ import annotations

"""Logging setup for applications built on config_file (the CLI uses it).

The library itself only creates loggers under ``config_file``; this module is
what turns a :class:`LoggingCfg` into handlers and levels.
"""

import logging
from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from config_file.schema import LoggingCfg

__all__ = ["LEVELS", "LIBRARY_LOGGER", "apply_logging_cfg", "parse_level"]

LIBRARY_LOGGER = "config_file"

LEVELS: Dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def parse_level(name: str) -> int:
    """Return the numeric level for *name*; unknown names are an error."""
    try:
        return LEVELS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown log level {name!r}, expected one of: {', '.join(LEVELS)}") from None


def apply_logging_cfg(cfg: LoggingCfg) -> None:
    """Route ``config_file`` records at ``cfg.level`` to stderr.

    Third-party loggers stay at the root's level; the ones named in
    ``cfg.suppress`` (and their children) are raised to ERROR.
    """
    level = parse_level(cfg.level)
    root = logging.getLogger()

    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        logging.basicConfig(
            level=logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )

    logging.getLogger(LIBRARY_LOGGER).setLevel(level)
    for name in cfg.suppress:
        logging.getLogger(name).setLevel(logging.ERROR)
