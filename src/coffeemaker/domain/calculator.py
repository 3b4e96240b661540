"""32-bit integer calculator.

Results behave like a signed 32-bit machine integer: every operation wraps on
overflow (two's complement) and division truncates toward zero.
"""

from .errors import NegativeFactorialError
from .utils import wrap_int32


class Calculator:
    """Stateless integer arithmetic with 32-bit wraparound."""

    @staticmethod
    def add(*values: int) -> int:
        """Sum any number of integers; an empty sum is 0."""
        return wrap_int32(sum(values))

    @staticmethod
    def divide(a: int, b: int) -> int:
        """Divide ``a`` by ``b``, truncating toward zero.

        Raises:
            ZeroDivisionError: If ``b`` is 0.
        """
        if b == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        return wrap_int32(quotient)

    @staticmethod
    def factorial(n: int) -> int:
        """Return ``n!``, wrapping at every multiplication.

        Raises:
            NegativeFactorialError: If ``n`` is negative.
        """
        if n < 0:
            raise NegativeFactorialError(n)
        result = 1
        for i in range(2, n + 1):
            result = wrap_int32(result * i)
        return result
