"""Unit tests for coffeemaker.logging.

Covers the third-party prefix filter, the Rich console handler in normal and
debug modes, NAME=LEVEL parsing, and root-logger configuration.
"""

import logging

import pytest
from rich.logging import RichHandler

from coffeemaker.logging import (
    DEFAULT_LOGGER_LEVELS,
    ThirdPartyPrefixFilter,
    config_console_handler,
    configure_logging,
    parse_logger_levels,
)

# pylint: disable=magic-value-comparison


def make_record(name: str) -> logging.LogRecord:
    """Build a minimal INFO record for logger ``name``."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.fixture
def restore_root_logger():
    """Restore the root logger's handlers and level after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# ============================================================================
#                          ThirdPartyPrefixFilter
# ============================================================================


def test_prefix_filter_tags_third_party():
    """Third-party records get a short bracketed prefix."""
    record = make_record("urllib3.connectionpool")
    assert ThirdPartyPrefixFilter().filter(record)
    assert record.prefix == "[urllib3]"


def test_prefix_filter_leaves_project_records_bare():
    """Project records get an empty prefix."""
    record = make_record("coffeemaker.domain.recipe_book")
    assert ThirdPartyPrefixFilter().filter(record)
    assert record.prefix == ""


# ============================================================================
#                           config_console_handler
# ============================================================================


def test_console_handler_defaults():
    """A normal handler keeps the level and filters third-party records."""
    handler = config_console_handler(level=logging.WARNING)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)


def test_console_handler_debug_mode():
    """Debug mode forces DEBUG and drops the prefix filter."""
    handler = config_console_handler(level=logging.ERROR, debug_mode=True)
    assert handler.level == logging.DEBUG
    assert not handler.filters


def test_console_handler_without_color():
    """Color can be disabled."""
    handler = config_console_handler(color=False)
    assert handler.console.color_system is None


# ============================================================================
#                            parse_logger_levels
# ============================================================================


def test_parse_empty_uses_defaults():
    """No items gives the default overrides."""
    assert parse_logger_levels(()) == DEFAULT_LOGGER_LEVELS


def test_parse_comma_and_space_separated():
    """Items may be split by commas and/or whitespace, case-insensitively."""
    levels = parse_logger_levels("coffeemaker=debug, rich=ERROR  asyncio=info")
    assert levels == {
        "asyncio": logging.INFO,
        "coffeemaker": logging.DEBUG,
        "rich": logging.ERROR,
    }


def test_parse_later_items_win():
    """Repeated names keep the last level."""
    levels = parse_logger_levels(["coffeemaker=INFO", "coffeemaker=WARNING"])
    assert levels["coffeemaker"] == logging.WARNING


@pytest.mark.parametrize("item", ["coffeemaker", "=INFO", "coffeemaker=LOUD"])
def test_parse_rejects_malformed(item: str):
    """Items without NAME=LEVEL or with an unknown level raise."""
    with pytest.raises(ValueError):
        parse_logger_levels(item)


# ============================================================================
#                             configure_logging
# ============================================================================


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_installs_handler():
    """The Rich handler becomes the root's only handler."""
    handler = configure_logging(logging.INFO, logger_levels={"noisy.lib": logging.ERROR})
    root = logging.getLogger()
    assert root.handlers == [handler]
    assert root.level == logging.DEBUG
    assert logging.getLogger("noisy.lib").level == logging.ERROR


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_applies_defaults():
    """Without overrides the default per-logger levels apply."""
    configure_logging()
    for name, lvl in DEFAULT_LOGGER_LEVELS.items():
        assert logging.getLogger(name).level == lvl
