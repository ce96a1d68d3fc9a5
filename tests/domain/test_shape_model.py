import unittest

from ndlite.domain import (
    MAX_RANK,
    Rank,
    ReductionStrategy,
    ShapeError,
    ShapeMismatchError,
    EmptyArrayError,
    ArrayConsumedError,
    NDArrayError,
    normalize_shape,
    size_of,
    validate,
    row_major_strides,
    flat_index,
)


class TestRank(unittest.TestCase):
    def test_of_accepts_one_through_four(self) -> None:
        self.assertEqual([Rank.of(n) for n in range(1, MAX_RANK + 1)], list(Rank))

    def test_of_rejects_out_of_range(self) -> None:
        for n in (0, 5, -1):
            with self.subTest(ndim=n):
                with self.assertRaises(ShapeError):
                    Rank.of(n)


class TestShapeModel(unittest.TestCase):
    def test_size_of_is_product_of_dims(self) -> None:
        self.assertEqual(size_of((3,)), 3)
        self.assertEqual(size_of((2, 5)), 10)
        self.assertEqual(size_of((2, 3, 4, 5)), 120)

    def test_size_of_accepts_bare_int(self) -> None:
        self.assertEqual(size_of(7), 7)

    def test_size_of_rejects_empty_shape(self) -> None:
        with self.assertRaises(ShapeError):
            size_of(())

    def test_size_of_rejects_rank_above_four(self) -> None:
        with self.assertRaises(ShapeError) as ctx:
            size_of((1, 1, 1, 1, 1))
        self.assertEqual(ctx.exception.shape, (1, 1, 1, 1, 1))

    def test_normalize_rejects_bad_dimensions(self) -> None:
        for bad in [(0, 3), (2, -1), (2.0, 3), (True, 2), "ab"]:
            with self.subTest(shape=bad):
                with self.assertRaises(ShapeError):
                    normalize_shape(bad)

    def test_normalize_returns_tuple_of_ints(self) -> None:
        self.assertEqual(normalize_shape([2, 3]), (2, 3))

    def test_validate_matching_size(self) -> None:
        self.assertEqual(validate([2, 5], 10), (2, 5))

    def test_validate_mismatched_size(self) -> None:
        with self.assertRaises(ShapeError):
            validate((2, 5), 9)

    def test_row_major_strides(self) -> None:
        self.assertEqual(row_major_strides((2, 3, 4)), (12, 4, 1))
        self.assertEqual(row_major_strides((5,)), (1,))

    def test_flat_index_formula(self) -> None:
        shape = (2, 3, 4)
        expected = 0
        for i in range(2):
            for j in range(3):
                for k in range(4):
                    self.assertEqual(flat_index((i, j, k), shape), expected)
                    expected += 1

    def test_flat_index_negative_components(self) -> None:
        self.assertEqual(flat_index((-1, -1), (2, 5)), 9)

    def test_flat_index_out_of_bounds(self) -> None:
        with self.assertRaises(IndexError):
            flat_index((2, 0), (2, 5))
        with self.assertRaises(IndexError):
            flat_index((0,), (2, 5))


class TestReductionStrategy(unittest.TestCase):
    def test_threshold_is_strictly_greater_than(self) -> None:
        self.assertIs(ReductionStrategy.for_size(10, 10), ReductionStrategy.SEQUENTIAL)
        self.assertIs(ReductionStrategy.for_size(11, 10), ReductionStrategy.PARALLEL)

    def test_str(self) -> None:
        self.assertEqual(str(ReductionStrategy.PARALLEL), "parallel")


class TestErrors(unittest.TestCase):
    def test_hierarchy(self) -> None:
        self.assertTrue(issubclass(ShapeError, ValueError))
        self.assertTrue(issubclass(ShapeMismatchError, ValueError))
        self.assertTrue(issubclass(EmptyArrayError, ValueError))
        self.assertTrue(issubclass(ArrayConsumedError, RuntimeError))
        for cls in (ShapeError, ShapeMismatchError, EmptyArrayError, ArrayConsumedError):
            self.assertTrue(issubclass(cls, NDArrayError))

    def test_shape_mismatch_carries_shapes(self) -> None:
        err = ShapeMismatchError([3], (2,))
        self.assertEqual(err.shape_a, (3,))
        self.assertEqual(err.shape_b, (2,))
        self.assertIn("(3,)", str(err))

    def test_empty_array_error_names_op(self) -> None:
        err = EmptyArrayError("sum")
        self.assertEqual(err.op, "sum")
        self.assertIn("sum", str(err))


if __name__ == "__main__":
    unittest.main()
