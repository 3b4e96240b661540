"""Domain layer for COFFEEMAKER.

Contains the business rules: the `Recipe` entity, the bounded `RecipeBook`
repository, and the independent calculator and product models. This package
is technology-agnostic and performs no I/O.

Dependency rule: do not import from `coffeemaker.service_layer`.
"""

from .calculator import Calculator
from .product import Product
from .recipe import Recipe
from .recipe_book import RecipeBook

__all__ = ["Calculator", "Product", "Recipe", "RecipeBook"]
