"""Configuration constants for COFFEEMAKER.

This module centralizes the small set of fixed values the domain and service
layers share. Nothing here is read from the environment.
"""

PROJECT_PREFIX = "coffeemaker"  # pragma: no mutate

# --- Recipe book ---

RECIPE_BOOK_CAPACITY = 4

# --- 32-bit signed integer arithmetic ---

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# --- Products ---

MAX_DISCOUNT_PERCENT = 50.0

# --- Users ---

ADMIN_USERNAME = "admin"  # pragma: no mutate
ADMIN_PASSWORD = "1234"  # pragma: no mutate
