"""Helpers shared across domain models."""

import re

from coffeemaker.config import INT32_MAX, INT32_MIN

from .errors import RecipeValidationError

# Optional sign followed by ASCII digits; no whitespace, separators or decimals.
_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


def parse_non_negative_int(field: str, text: str) -> int:
    """Parse the textual form of a non-negative 32-bit integer.

    Args:
        field: Name of the field being set (for error messages).
        text: The candidate text, e.g. ``"20"``.

    Returns:
        The parsed integer.

    Raises:
        RecipeValidationError: If ``text`` is not an integer literal, does not
            fit a signed 32-bit integer, or is negative.
    """
    if not isinstance(text, str) or not _INTEGER_TEXT.fullmatch(text):
        raise RecipeValidationError(field, text, "must be a non-negative integer")
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise RecipeValidationError(field, text, "must fit a 32-bit integer")
    if value < 0:
        raise RecipeValidationError(field, text, "must be a non-negative integer")
    return value


def wrap_int32(value: int) -> int:
    """Reduce ``value`` to the signed 32-bit two's-complement range."""
    return (value - INT32_MIN) % 2**32 + INT32_MIN
