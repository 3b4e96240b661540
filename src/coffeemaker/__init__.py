"""COFFEEMAKER

A small in-process recipe catalog for a coffee maker: validated recipes
stored in a fixed-capacity, name-unique recipe book, alongside a few
independent helpers (calculator, product pricing, user checks).
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
