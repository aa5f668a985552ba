"""Small integer helpers used as building blocks by the shape resolver.

All functions are pure. ``factorial`` is the only one the enumerator depends
on; the rest back the command-line front end.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from kcomb.config import CHOOSE_CONFIG, ChooseConfig

T = TypeVar("T")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def require_int(value: object, name: str) -> int:
    """Return ``value`` if it is a plain integer, else raise TypeError.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def square(x: int) -> int:
    """Return ``x * x``."""
    return x * x


def square_wide(x: int) -> int:
    """Square a signed 32-bit integer into an unsigned 64-bit result.

    The product of two i32 values always fits in 64 bits, so only the input
    range is checked.

    Raises:
        OverflowError: If ``x`` is outside the signed 32-bit range.
    """
    require_int(x, "x")
    if not INT32_MIN <= x <= INT32_MAX:
        raise OverflowError(f"{x} is outside the signed 32-bit range")
    return x * x


def minimum(a: T, b: T) -> T:
    """Return the smaller of two values; ``a`` wins ties."""
    return b if b < a else a


def factorial(n: int, config: Optional[ChooseConfig] = None) -> int:
    """Return ``n!`` by iterative product accumulation.

    Args:
        n: Non-negative size no larger than ``config.max_size``.
        config: Size bounds; defaults to the global ``CHOOSE_CONFIG``.

    Returns:
        ``n!``; ``factorial(0) == 1``.

    Raises:
        TypeError: If ``n`` is not an integer.
        ValueError: If ``n`` is negative or above the configured bound.
    """
    cfg = config or CHOOSE_CONFIG
    require_int(n, "n")
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n={n}")
    cfg.validate_size(n)

    result = 1
    for i in range(1, n + 1):
        result *= i
    return result
