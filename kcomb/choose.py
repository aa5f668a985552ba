"""Enumeration of k-element combinations of a strictly increasing sequence.

Results are built in two phases. First the shape C(n, k) x k is resolved from
the sizes alone (see `kcomb.shape`). Then a buffer of exactly that many rows is
allocated once and filled front to back. Nothing is appended or resized.

The fill is a recursion on ``k``: all (k-1)-combinations of ``elements[1:]``
are enumerated first, then every element except the last is prepended to each
of them whenever it is smaller than the combination's first element. With a
strictly increasing input this produces each k-subset once, in lexicographic
order.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from kcomb.config import CHOOSE_CONFIG, ChooseConfig
from kcomb.logging import get_logger
from kcomb.shape import ChosenShape, chosen_shape, validate_sizes

logger = get_logger(__name__)

T = TypeVar("T")

Combination = Tuple[T, ...]


def check_strictly_increasing(elements: Sequence[Any]) -> None:
    """Raise ValueError unless every element is greater than its predecessor."""
    for pos in range(1, len(elements)):
        if not elements[pos - 1] < elements[pos]:
            raise ValueError(
                "elements must be strictly increasing; "
                f"{elements[pos - 1]!r} at index {pos - 1} is not less than "
                f"{elements[pos]!r} at index {pos}"
            )


def _fill(
    elements: Tuple[Any, ...],
    k: int,
    config: ChooseConfig,
    shape: Optional[ChosenShape] = None,
) -> List[Any]:
    """Allocate a list of C(len(elements), k) rows and fill it by index.

    ``shape`` is the already resolved shape for the outermost call; inner
    levels resolve their own.
    """
    if shape is None:
        shape = chosen_shape(len(elements), k, config)
    out: List[Any] = [None] * shape.rows

    if k == 1:
        for i, element in enumerate(elements):
            out[i] = (element,)
        return out

    tail = _fill(elements[1:], k - 1, config)

    i = 0
    for m in range(len(elements) - 1):
        head = elements[m]
        for combo in tail:
            if head < combo[0]:
                out[i] = (head, *combo)
                i += 1

    if i != shape.rows:
        raise AssertionError(
            f"filled {i} of {shape.rows} rows choosing k={k} from n={len(elements)}"
        )
    return out


def _prepare(
    elements: Sequence[T], k: int, config: ChooseConfig
) -> Tuple[T, ...]:
    items = tuple(elements)
    validate_sizes(len(items), k, config)
    if config.check_ordering:
        check_strictly_increasing(items)
    return items


def check_representable(elements: Sequence[Any], dtype: np.dtype) -> None:
    """Raise unless ``dtype`` holds every element exactly.

    Raises:
        OverflowError: If an element is outside the range of an integer dtype.
        ValueError: If an element would change when cast to ``dtype``.
    """
    if dtype.kind in "iu":
        bounds = np.iinfo(dtype)
        for element in elements:
            if not bounds.min <= element <= bounds.max:
                raise OverflowError(
                    f"element {element!r} does not fit dtype {dtype.name}"
                )
    for element in elements:
        if not dtype.type(element) == element:
            raise ValueError(
                f"element {element!r} is not exactly representable as {dtype.name}"
            )


def choose(
    elements: Sequence[T], k: int, config: Optional[ChooseConfig] = None
) -> Tuple[Combination, ...]:
    """Return every ``k``-combination of ``elements`` in lexicographic order.

    Args:
        elements: Strictly increasing sequence of mutually comparable values.
        k: Combination size, ``1 <= k <= len(elements)``.
        config: Size bounds and checks; defaults to ``CHOOSE_CONFIG``.

    Returns:
        A tuple of exactly C(n, k) tuples, each of length ``k``.

    Raises:
        TypeError: If ``k`` is not an integer.
        ValueError: If ``k`` is zero, ``k`` exceeds the number of elements,
            the input is longer than ``config.max_size``, or (when
            ``config.check_ordering`` is set) the input is not strictly
            increasing.

    Example:
        >>> choose([6, 7, 8, 9], 3)
        ((6, 7, 8), (6, 7, 9), (6, 8, 9), (7, 8, 9))
    """
    cfg = config or CHOOSE_CONFIG
    items = _prepare(elements, k, cfg)

    shape = chosen_shape(len(items), k, cfg)
    logger.debug(
        f"Choosing k={k} from n={len(items)}: {shape.rows} rows x {shape.width}"
    )

    return tuple(_fill(items, k, cfg, shape))


def choose_array(
    elements: Sequence[int],
    k: int,
    dtype: Any = None,
    config: Optional[ChooseConfig] = None,
) -> np.ndarray:
    """Return every ``k``-combination of ``elements`` as a 2-D numpy array.

    Combinations are enumerated over positions in ``elements`` so ordering
    comparisons never see dtype-cast values. The array of shape
    ``(C(n, k), k)`` is allocated once, zero-initialised, and each row is
    gathered from the source elements.

    Args:
        elements: Strictly increasing numeric sequence.
        k: Combination size, ``1 <= k <= len(elements)``.
        dtype: Element dtype; defaults to ``config.array_dtype``.
        config: Size bounds and checks; defaults to ``CHOOSE_CONFIG``.

    Raises:
        OverflowError: If an integer dtype cannot hold an element's value.
        ValueError: If an element is not exactly representable in the dtype,
            or as for `choose`.
        TypeError: As for `choose`.
    """
    cfg = config or CHOOSE_CONFIG
    items = _prepare(elements, k, cfg)
    np_dtype = np.dtype(dtype if dtype is not None else cfg.array_dtype)
    check_representable(items, np_dtype)

    shape = chosen_shape(len(items), k, cfg)
    logger.debug(
        f"Choosing k={k} from n={len(items)} into {np_dtype.name} array "
        f"of shape {shape.as_tuple()}"
    )

    positions = _fill(tuple(range(len(items))), k, cfg, shape)
    out = np.zeros(shape.as_tuple(), dtype=np_dtype)
    for i, combo in enumerate(positions):
        out[i] = [items[pos] for pos in combo]
    return out


def choose_indices(
    n: int, k: int, config: Optional[ChooseConfig] = None
) -> Tuple[Combination, ...]:
    """Return every ``k``-combination of the indices ``0..n-1``."""
    validate_sizes(n, k, config)
    return choose(range(n), k, config)
