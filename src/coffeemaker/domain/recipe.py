"""The Recipe entity."""

from __future__ import annotations

from .utils import parse_non_negative_int

# pylint: disable=too-many-instance-attributes


class Recipe:
    """A named drink recipe with a price and four ingredient amounts.

    All integer fields start at 0 and the name starts unset (``None``). Integer
    fields are assigned from their textual form and validated on every
    assignment; a rejected assignment leaves the previous value in place.

    Identity is by name only: two recipes with the same name are equal and
    hash alike regardless of their ingredients.

    Example:
        ```py
        latte = Recipe()
        latte.name = "Latte"
        latte.amt_milk = "3"
        latte.price = "60"
        ```
    """

    def __init__(self) -> None:
        self._name: str | None = None
        self._price: int = 0
        self._amt_coffee: int = 0
        self._amt_milk: int = 0
        self._amt_sugar: int = 0
        self._amt_chocolate: int = 0

    # --- Name ---

    @property
    def name(self) -> str | None:
        """The recipe name, or ``None`` if it was never set."""
        return self._name

    @name.setter
    def name(self, value: str | None) -> None:
        # None keeps the current name
        if value is not None:
            self._name = value

    # --- Validated integer fields ---

    @property
    def price(self) -> int:
        """Price of the drink."""
        return self._price

    @price.setter
    def price(self, text: str) -> None:
        self._price = parse_non_negative_int("price", text)

    @property
    def amt_coffee(self) -> int:
        """Units of coffee."""
        return self._amt_coffee

    @amt_coffee.setter
    def amt_coffee(self, text: str) -> None:
        self._amt_coffee = parse_non_negative_int("amt_coffee", text)

    @property
    def amt_milk(self) -> int:
        """Units of milk."""
        return self._amt_milk

    @amt_milk.setter
    def amt_milk(self, text: str) -> None:
        self._amt_milk = parse_non_negative_int("amt_milk", text)

    @property
    def amt_sugar(self) -> int:
        """Units of sugar."""
        return self._amt_sugar

    @amt_sugar.setter
    def amt_sugar(self, text: str) -> None:
        self._amt_sugar = parse_non_negative_int("amt_sugar", text)

    @property
    def amt_chocolate(self) -> int:
        """Units of chocolate."""
        return self._amt_chocolate

    @amt_chocolate.setter
    def amt_chocolate(self, text: str) -> None:
        self._amt_chocolate = parse_non_negative_int("amt_chocolate", text)

    # --- Identity ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return self._name if self._name is not None else ""

    def __repr__(self) -> str:
        return (
            f"Recipe(name={self._name!r}, price={self._price}, "
            f"amt_coffee={self._amt_coffee}, amt_milk={self._amt_milk}, "
            f"amt_sugar={self._amt_sugar}, amt_chocolate={self._amt_chocolate})"
        )
