"""Small numeric helpers from the TDD walkthrough and best-practices lessons."""

from __future__ import annotations

from collections.abc import Sequence


def factorial(n: int) -> int:
    """Return ``n!``.

    Args:
        n: A non-negative integer. ``bool`` is rejected even though it is an
            ``int`` subclass.

    Returns:
        int: The factorial of ``n``; ``factorial(0) == 1``.

    Raises:
        TypeError: If ``n`` is not an integer.
        ValueError: If ``n`` is negative.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"factorial() only accepts integers, got {type(n).__name__}")
    if n < 0:
        raise ValueError("factorial() not defined for negative values")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def is_even(n: int) -> bool:
    """Return True if ``n`` is even."""
    return n % 2 == 0


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of ``values``.

    Raises:
        ValueError: If ``values`` is empty.
    """
    if not values:
        raise ValueError("average() of an empty sequence")
    return sum(values) / len(values)
