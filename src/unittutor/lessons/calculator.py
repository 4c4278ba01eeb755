"""Calculator used throughout the AAA and TDD lessons.

Four arithmetic functions, a discount helper and a small ``Calculator`` class
that dispatches on an operation name and remembers what it computed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NamedTuple

from .errors import DivisionByZeroError, InvalidDiscountError, UnknownOperationError

logger = logging.getLogger(__name__)

Number = int | float


def add(a: Number, b: Number) -> Number:
    """Add two numbers together."""
    return a + b


def subtract(a: Number, b: Number) -> Number:
    """Subtract ``b`` from ``a``."""
    return a - b


def multiply(a: Number, b: Number) -> Number:
    """Multiply two numbers."""
    return a * b


def divide(a: Number, b: Number) -> float:
    """Divide ``a`` by ``b``.

    Raises:
        DivisionByZeroError: If ``b`` is zero.
    """
    if b == 0:
        raise DivisionByZeroError
    return a / b


def calculate_discount(price: Number, discount_percent: Number) -> float:
    """Return ``price`` after applying ``discount_percent``.

    Args:
        price: Original price.
        discount_percent: Percentage to take off, from 0 to 100 inclusive.

    Returns:
        float: The discounted price.

    Raises:
        InvalidDiscountError: If the percentage is outside 0..100.
    """
    if discount_percent < 0 or discount_percent > 100:
        raise InvalidDiscountError(discount_percent)
    return price - price * (discount_percent / 100)


class HistoryEntry(NamedTuple):
    """One successful calculation."""

    operation: str
    a: Number
    b: Number
    result: Number


class Calculator:
    """Arithmetic dispatcher keyed by operation name.

    Example:
        ```py
        >>> calc = Calculator()
        >>> calc.calculate("add", 2, 3)
        5
        ```
    """

    _OPERATIONS: dict[str, Callable[[Number, Number], Number]] = {
        "add": add,
        "subtract": subtract,
        "multiply": multiply,
        "divide": divide,
    }

    def __init__(self) -> None:
        self._history: list[HistoryEntry] = []

    @property
    def operations(self) -> tuple[str, ...]:
        """Names accepted by :meth:`calculate`."""
        return tuple(self._OPERATIONS)

    @property
    def history(self) -> list[HistoryEntry]:
        """Copy of the successful calculations, oldest first."""
        return list(self._history)

    def calculate(self, operation: str, a: Number, b: Number) -> Number:
        """Apply ``operation`` to ``a`` and ``b``.

        Failed calculations are not recorded in the history.

        Raises:
            UnknownOperationError: If ``operation`` is not one of :attr:`operations`.
            DivisionByZeroError: If dividing by zero.
        """
        try:
            func = self._OPERATIONS[operation]
        except KeyError as e:
            raise UnknownOperationError(operation) from e
        result = func(a, b)
        self._history.append(HistoryEntry(operation, a, b, result))
        logger.debug("%s(%r, %r) = %r", operation, a, b, result)
        return result

    def clear_history(self) -> None:
        """Forget all recorded calculations."""
        self._history.clear()
