"""Logging helpers for applications embedding COFFEEMAKER.

The library itself only emits records through module-level loggers and never
configures logging on import. This module gives host applications and test
sessions a one-call setup: a Rich console handler on stderr, a filter that
tags third-party records with a short prefix, and a parser for ``NAME=LEVEL``
per-logger overrides.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from coffeemaker.config import PROJECT_PREFIX

# pylint: disable=too-few-public-methods

DEFAULT_LOGGER_LEVELS = {"asyncio": logging.WARNING}


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[urllib3]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode the handler is set to DEBUG
    and includes source file/line information; otherwise a short third-party
    prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, logger names).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """

    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def parse_logger_levels(value: str | Iterable[str]) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a name->level dict.

    Accepts a single string (comma/space separated) or an iterable of such
    strings. The result starts from DEFAULT_LOGGER_LEVELS; later items win.

    Args:
        value: Items such as ``"coffeemaker=DEBUG, asyncio=ERROR"``.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        ValueError: If an item is not NAME=LEVEL or LEVEL is not a level name.
    """
    chunks = [value] if isinstance(value, str) else list(value)
    items = [s for chunk in chunks for s in re.split(r"[,\s]+", chunk) if s]

    levels = dict(DEFAULT_LOGGER_LEVELS)
    for item in items:
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise ValueError(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels


def configure_logging(
    level: int = logging.WARNING,
    *,
    debug_mode: bool = False,
    color: bool = True,
    logger_levels: dict[str, int] | None = None,
) -> RichHandler:
    """Attach a Rich console handler to the root logger.

    Args:
        level: Console level (ignored in debug mode, which uses DEBUG).
        debug_mode: Enable debug formatting.
        color: Enable color output.
        logger_levels: Per-logger minimum levels, e.g. from
            `parse_logger_levels`. Defaults to DEFAULT_LOGGER_LEVELS.

    Returns:
        RichHandler: The handler that was installed.
    """
    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=[handler],
        force=True,
    )
    overrides = DEFAULT_LOGGER_LEVELS if logger_levels is None else logger_levels
    for name, lvl in overrides.items():
        logging.getLogger(name).setLevel(lvl)
    return handler
