"""A priced product with a bounded percentage discount."""

from coffeemaker.config import MAX_DISCOUNT_PERCENT

from .errors import InvalidDiscountError, InvalidPriceError


class Product:
    """A named product whose price can be reduced by a percentage discount.

    Conventions:
      - `price` is non-negative and fixed at construction.
      - `discount` is a percentage between 0 and 50 inclusive; 0 by default.
    """

    def __init__(self, name: str | None, price: float) -> None:
        if price < 0:
            raise InvalidPriceError(name, price)
        self.name = name
        self.price = price
        self.discount = 0.0

    def apply_discount(self, discount: float) -> None:
        """Set the discount percentage.

        Raises:
            InvalidDiscountError: If ``discount`` is outside ``[0, 50]``.
        """
        if not 0 <= discount <= MAX_DISCOUNT_PERCENT:
            raise InvalidDiscountError(self.name, discount, MAX_DISCOUNT_PERCENT)
        self.discount = discount

    @property
    def final_price(self) -> float:
        """Price after the current discount."""
        return self.price - self.price * self.discount / 100
