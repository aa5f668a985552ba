"""Shape resolution for combination results.

The shape of a result (row count and row width) is a pure function of the
sequence length ``n`` and the combination size ``k``. It is resolved before a
result buffer exists so the buffer can be allocated at its final size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from kcomb.config import CHOOSE_CONFIG, ChooseConfig
from kcomb.numeric import factorial, require_int


@dataclass(frozen=True)
class ChosenShape:
    """Dimensions of a combination result.

    Attributes:
        rows: Number of combinations, C(n, k).
        width: Elements per combination, k.
    """

    rows: int
    width: int

    @property
    def cells(self) -> int:
        return self.rows * self.width

    def as_tuple(self) -> Tuple[int, int]:
        return (self.rows, self.width)


def validate_sizes(n: int, k: int, config: Optional[ChooseConfig] = None) -> None:
    """Check the ``n >= k >= 1`` contract and the configured size bound.

    Raises:
        TypeError: If ``n`` or ``k`` is not an integer.
        ValueError: If ``k`` is zero or negative, ``k`` exceeds ``n``, or
            ``n`` exceeds ``config.max_size``.
    """
    cfg = config or CHOOSE_CONFIG
    require_int(n, "n")
    require_int(k, "k")
    if k < 1:
        raise ValueError(f"invalid combination size k={k}; k must be at least 1")
    if k > n:
        raise ValueError(
            f"insufficient elements: cannot choose k={k} from n={n} elements"
        )
    cfg.validate_size(n)


def num_chosen(n: int, k: int, config: Optional[ChooseConfig] = None) -> int:
    """Return the binomial coefficient C(n, k) = n! / (k! (n - k)!)."""
    validate_sizes(n, k, config)
    return factorial(n, config) // (factorial(k, config) * factorial(n - k, config))


def chosen_shape(n: int, k: int, config: Optional[ChooseConfig] = None) -> ChosenShape:
    """Resolve the result shape for choosing ``k`` of ``n`` elements."""
    return ChosenShape(rows=num_chosen(n, k, config), width=k)
