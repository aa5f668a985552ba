"""kcomb: size-resolved enumeration of k-combinations.

Results are shaped before they are filled: the binomial coefficient C(n, k)
is computed from the two sizes alone, a buffer of exactly that many rows is
allocated, and the enumerator writes every row once.

Primary API:
    choose() - All k-combinations of a strictly increasing sequence
    choose_array() - The same, as a pre-sized numpy array
    choose_indices() - All k-combinations of range(n)
    chosen_shape() / num_chosen() - Result shape and row count
    factorial() - n! by iterative product

Example:
    from kcomb import choose

    choose([6, 7, 8, 9], 3)
    # ((6, 7, 8), (6, 7, 9), (6, 8, 9), (7, 8, 9))
"""

from __future__ import annotations

from kcomb import cli, logging
from kcomb._version import __version__
from kcomb.choose import (
    check_strictly_increasing,
    choose,
    choose_array,
    choose_indices,
)
from kcomb.config import CHOOSE_CONFIG, ChooseConfig
from kcomb.numeric import factorial, minimum, square, square_wide
from kcomb.shape import ChosenShape, chosen_shape, num_chosen, validate_sizes

__all__ = [
    # Version
    "__version__",
    # Enumeration
    "choose",
    "choose_array",
    "choose_indices",
    "check_strictly_increasing",
    # Shape
    "ChosenShape",
    "chosen_shape",
    "num_chosen",
    "validate_sizes",
    # Numeric helpers
    "factorial",
    "minimum",
    "square",
    "square_wide",
    # Configuration
    "ChooseConfig",
    "CHOOSE_CONFIG",
    # Utilities
    "cli",
    "logging",
]
