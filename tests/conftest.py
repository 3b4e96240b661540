"""Global pytest fixtures for COFFEEMAKER."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from coffeemaker.domain.recipe import Recipe
from coffeemaker.domain.recipe_book import RecipeBook


@pytest.fixture
def make_recipe() -> Callable[..., Recipe]:
    """Factory for recipes with a name and optional textual field values.

    Example:
        ```py
        def test_something(make_recipe):
            mocha = make_recipe("Mocha", price="50", amt_chocolate="3")
        ```
    """

    def _make(name: str | None = None, **fields: str) -> Recipe:
        recipe = Recipe()
        recipe.name = name
        for field, text in fields.items():
            setattr(recipe, field, text)
        return recipe

    return _make


@pytest.fixture
def book() -> RecipeBook:
    """Return a fresh, empty recipe book per test (no cross-test state)."""
    return RecipeBook()
