"""Defines the fixed-capacity RecipeBook repository."""

from __future__ import annotations

import logging

from coffeemaker.config import RECIPE_BOOK_CAPACITY

from .errors import MissingRecipeError, RecipeIndexError
from .recipe import Recipe

logger = logging.getLogger(__name__)

# pylint: disable=consider-using-assignment-expr


class RecipeBook:
    """A bounded, name-unique store of recipes addressed by slot index.

    The book holds ``capacity`` slots (4 by default). Each slot is either empty
    (``None``) or holds one ``Recipe``. Slots keep their index for life:
    deleting a recipe leaves a hole rather than shifting later entries.

    Business-rule rejections (duplicate name, full book, empty slot) are
    reported through return values. Invalid calls (``None`` recipe, index out
    of range) raise.

    Note:
        Recipes are stored by reference. Renaming a stored recipe from outside
        the book can leave two slots with the same name; the book does not
        detect this.
    """

    def __init__(self, capacity: int = RECIPE_BOOK_CAPACITY) -> None:
        self._slots: list[Recipe | None] = [None] * capacity

    @property
    def capacity(self) -> int:
        """Number of slots in the book."""
        return len(self._slots)

    def __len__(self) -> int:
        return sum(1 for recipe in self._slots if recipe is not None)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise RecipeIndexError(index, len(self._slots))

    # --- Queries ---

    def get_recipes(self) -> list[Recipe | None]:
        """Return a snapshot of every slot in index order.

        Returns:
            A new list of length ``capacity``; empty slots are ``None``. The
            list is independent of the book, but its entries are the stored
            recipe objects themselves.
        """
        return list(self._slots)

    def find(self, name: str) -> int | None:
        """Return the slot index of the recipe called ``name``, or None."""
        for index, recipe in enumerate(self._slots):
            if recipe is not None and recipe.name == name:
                return index
        return None

    # --- Commands ---

    def add_recipe(self, recipe: Recipe) -> bool:
        """Store ``recipe`` in the lowest empty slot.

        Args:
            recipe: The recipe to add.

        Returns:
            True if the recipe was stored; False if an equal recipe is already
            stored or every slot is occupied.

        Raises:
            MissingRecipeError: If ``recipe`` is None.
        """
        if recipe is None:
            raise MissingRecipeError("add_recipe")

        if recipe in self._slots:
            logger.debug("add_recipe %s: already in book; rejected", recipe)
            return False

        for index, occupant in enumerate(self._slots):
            if occupant is None:
                self._slots[index] = recipe
                logger.debug("add_recipe %s: stored in slot %d", recipe, index)
                return True

        logger.debug("add_recipe %s: book is full; rejected", recipe)
        return False

    def delete_recipe(self, index: int) -> str | None:
        """Clear the slot at ``index``.

        Args:
            index: Slot to clear.

        Returns:
            The name of the recipe that was removed, or None if the slot was
            already empty.

        Raises:
            RecipeIndexError: If ``index`` is outside ``[0, capacity)``.
        """
        self._check_index(index)
        recipe = self._slots[index]
        if recipe is None:
            logger.debug("delete_recipe %d: slot empty; noop", index)
            return None
        self._slots[index] = None
        logger.debug("delete_recipe %d: removed %s", index, recipe)
        return str(recipe)

    def edit_recipe(self, index: int, new_recipe: Recipe) -> str | None:
        """Replace the recipe held in slot ``index``.

        Args:
            index: Slot to edit.
            new_recipe: Recipe that takes the slot over.

        Returns:
            The name of the recipe that was replaced, or None if the slot was
            empty (in which case nothing changes).

        Raises:
            RecipeIndexError: If ``index`` is outside ``[0, capacity)``.
            MissingRecipeError: If ``new_recipe`` is None.
        """
        self._check_index(index)
        if new_recipe is None:
            raise MissingRecipeError("edit_recipe")
        recipe = self._slots[index]
        if recipe is None:
            logger.debug("edit_recipe %d: slot empty; noop", index)
            return None
        self._slots[index] = new_recipe
        logger.debug("edit_recipe %d: replaced %s with %s", index, recipe, new_recipe)
        return str(recipe)
