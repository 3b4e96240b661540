"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                        Recipe / RecipeBook errors
# ============================================================================


class RecipeError(DomainError):
    """Base class for errors raised by recipes and recipe books."""


class RecipeValidationError(RecipeError, ValueError):
    """Raised when a recipe field is given text that is not a non-negative integer."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid recipe {field} ({value!r}): {reason}")
        self.field = field
        self.value = value
        self.reason = reason


class MissingRecipeError(RecipeError, TypeError):
    """Raised when a recipe book is handed ``None`` instead of a recipe."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} requires a recipe, got None")
        self.operation = operation


class RecipeIndexError(RecipeError, IndexError):
    """Raised when a slot index falls outside a recipe book's capacity."""

    def __init__(self, index: int, capacity: int) -> None:
        super().__init__(
            f"Recipe slot index {index} out of range [0, {capacity})"
        )
        self.index = index
        self.capacity = capacity


# ============================================================================
#                            Calculator errors
# ============================================================================


class CalculatorError(DomainError):
    """Base class for calculator errors."""


class NegativeFactorialError(CalculatorError, ValueError):
    """Raised when a factorial is requested for a negative number."""

    def __init__(self, n: int) -> None:
        super().__init__(f"Factorial is undefined for negative input ({n})")
        self.n = n


# ============================================================================
#                             Product errors
# ============================================================================


class ProductError(DomainError, ValueError):
    """Base class for product pricing errors."""


class InvalidPriceError(ProductError):
    """Raised when a product is created with a negative price."""

    def __init__(self, name: str | None, price: float) -> None:
        super().__init__(f"Product ({name}) price must be >= 0, got {price}")
        self.name = name
        self.price = price


class InvalidDiscountError(ProductError):
    """Raised when a discount falls outside the allowed percentage range."""

    def __init__(self, name: str | None, discount: float, maximum: float) -> None:
        super().__init__(
            f"Product ({name}) discount must be between 0 and {maximum}, "
            f"got {discount}"
        )
        self.name = name
        self.discount = discount
        self.maximum = maximum
