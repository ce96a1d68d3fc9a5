import math
import unittest

import numpy as np

from ndlite.domain import ShapeMismatchError
from ndlite.infrastructure.ops.elementwise_cpu import (
    as_mask,
    map_binary,
    map_unary,
    truthy,
)


class TestMapUnary(unittest.TestCase):
    def setUp(self) -> None:
        self.rng = np.random.default_rng(0)

    def test_ufunc_matches_numpy(self) -> None:
        x = self.rng.standard_normal((3, 4))
        np.testing.assert_allclose(map_unary(x, np.sin), np.sin(x))

    def test_scalar_callable_is_applied_per_element(self) -> None:
        x = np.array([[1.0, 2.0], [3.0, 4.0]])
        out = map_unary(x, lambda v: math.sqrt(v) + 1.0)
        np.testing.assert_allclose(out, np.sqrt(x) + 1.0)
        self.assertEqual(out.dtype, np.float64)
        self.assertTrue(out.flags.c_contiguous)

    def test_source_is_not_modified(self) -> None:
        x = np.array([1.0, 2.0, 3.0])
        original = x.copy()
        map_unary(x, np.negative)
        np.testing.assert_array_equal(x, original)

    def test_out_buffer_is_written_and_returned(self) -> None:
        x = np.array([1.0, 4.0, 9.0])
        out = map_unary(x, lambda v: v * 2.0, out=x)
        self.assertIs(out, x)
        np.testing.assert_array_equal(x, [2.0, 8.0, 18.0])

    def test_constant_kernel_is_spread_over_shape(self) -> None:
        x = np.zeros((2, 2))
        out = map_unary(x, lambda a: 5.0, vectorized=True)
        np.testing.assert_array_equal(out, np.full((2, 2), 5.0))

    def test_ieee_results_without_warnings(self) -> None:
        x = np.array([0.0, -1.0])
        out = map_unary(x, np.log)
        self.assertEqual(out[0], -np.inf)
        self.assertTrue(np.isnan(out[1]))

    def test_out_shape_mismatch(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            map_unary(np.zeros(3), np.sin, out=np.zeros(4))


class TestMapBinary(unittest.TestCase):
    def test_elementwise_addition(self) -> None:
        a = np.array([1.0, 2.0, 3.0])
        b = np.array([4.0, 5.0, 6.0])
        np.testing.assert_array_equal(map_binary(a, b, np.add), [5.0, 7.0, 9.0])

    def test_scalar_binary_callable(self) -> None:
        a = np.array([[1.0, 2.0], [3.0, 4.0]])
        b = np.array([[10.0, 20.0], [30.0, 40.0]])
        out = map_binary(a, b, lambda x, y: max(x, y) - min(x, y))
        np.testing.assert_array_equal(out, b - a)

    def test_shape_mismatch_raises(self) -> None:
        with self.assertRaises(ShapeMismatchError) as ctx:
            map_binary(np.zeros(3), np.zeros(2), np.add)
        self.assertEqual(ctx.exception.shape_a, (3,))
        self.assertEqual(ctx.exception.shape_b, (2,))

    def test_same_size_different_shape_raises(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            map_binary(np.zeros((2, 3)), np.zeros((3, 2)), np.add)

    def test_out_may_alias_left_operand(self) -> None:
        a = np.array([1.0, 2.0])
        b = np.array([3.0, 4.0])
        out = map_binary(a, b, np.multiply, out=a)
        self.assertIs(out, a)
        np.testing.assert_array_equal(a, [3.0, 8.0])


class TestMasks(unittest.TestCase):
    def test_as_mask_yields_float_ones_and_zeros(self) -> None:
        kernel = as_mask(np.greater)
        out = kernel(np.array([1.0, 5.0]), np.array([2.0, 2.0]))
        self.assertEqual(out.dtype, np.float64)
        np.testing.assert_array_equal(out, [0.0, 1.0])

    def test_truthy_is_strictly_positive(self) -> None:
        np.testing.assert_array_equal(
            truthy(np.array([-1.0, 0.0, 0.5, np.nan])), [False, False, True, False]
        )


if __name__ == "__main__":
    unittest.main()
