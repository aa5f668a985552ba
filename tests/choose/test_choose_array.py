"""Tests for the numpy-backed enumerator `kcomb.choose.choose_array`."""

from __future__ import annotations

import numpy as np
import pytest

from kcomb.choose import choose, choose_array
from kcomb.config import ChooseConfig


def test_array_shape_and_dtype() -> None:
    arr = choose_array([6, 7, 8, 9], 3)
    assert isinstance(arr, np.ndarray)
    assert arr.shape == (4, 3)
    assert arr.dtype == np.uint8
    np.testing.assert_array_equal(
        arr,
        np.array([[6, 7, 8], [6, 7, 9], [6, 8, 9], [7, 8, 9]], dtype=np.uint8),
    )


def test_array_single_row() -> None:
    arr = choose_array([7, 8, 9], 3)
    assert arr.shape == (1, 3)
    assert arr[0].tolist() == [7, 8, 9]


def test_array_singletons() -> None:
    arr = choose_array([1, 2, 3], 1)
    assert arr.shape == (3, 1)
    assert arr[:, 0].tolist() == [1, 2, 3]


def test_array_matches_tuple_result() -> None:
    data = list(range(0, 30, 3))
    for k in range(1, len(data) + 1):
        arr = choose_array(data, k, dtype=np.int64)
        assert [tuple(row) for row in arr.tolist()] == list(choose(data, k))


def test_array_dtype_from_config() -> None:
    arr = choose_array([1, 2, 3], 2, config=ChooseConfig(array_dtype="int32"))
    assert arr.dtype == np.int32


def test_array_float_dtype() -> None:
    arr = choose_array([0.5, 1.5, 2.5], 2, dtype=np.float64)
    assert arr.tolist() == [[0.5, 1.5], [0.5, 2.5], [1.5, 2.5]]


def test_array_rejects_values_outside_dtype() -> None:
    with pytest.raises(OverflowError, match="uint8"):
        choose_array([1, 2, 256], 2)
    with pytest.raises(OverflowError):
        choose_array([-1, 2, 3], 2)


def test_array_preconditions() -> None:
    with pytest.raises(ValueError, match="invalid combination size"):
        choose_array([1, 2, 3], 0)
    with pytest.raises(ValueError, match="insufficient elements"):
        choose_array([1, 2, 3], 4)
    with pytest.raises(ValueError, match="strictly increasing"):
        choose_array([3, 2, 1], 2)


class TestArrayRepresentability:
    """Elements must survive the cast into the array dtype unchanged."""

    def test_fractional_values_rejected_for_integer_dtype(self) -> None:
        with pytest.raises(ValueError, match="not exactly representable as uint8"):
            choose_array([0.2, 0.7], 2)

    def test_fractional_singletons_not_truncated(self) -> None:
        with pytest.raises(ValueError, match="not exactly representable"):
            choose_array([0.5, 1.5], 1)

    def test_large_integers_rejected_for_float32(self) -> None:
        with pytest.raises(ValueError, match="float32"):
            choose_array([2**24, 2**24 + 1], 2, dtype=np.float32)

    def test_large_integers_exact_in_float64(self) -> None:
        arr = choose_array([2**24, 2**24 + 1], 2, dtype=np.float64)
        assert arr.tolist() == [[2.0**24, 2.0**24 + 1]]

    def test_integral_floats_accepted_for_integer_dtype(self) -> None:
        arr = choose_array([1.0, 2.0, 3.0], 2)
        assert arr.dtype == np.uint8
        assert arr.tolist() == [[1, 2], [1, 3], [2, 3]]
