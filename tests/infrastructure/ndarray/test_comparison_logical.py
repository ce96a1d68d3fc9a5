import unittest

from ndlite import NDArray, ShapeMismatchError, from_rank1, from_rank2


class TestComparison(unittest.TestCase):
    def setUp(self) -> None:
        self.a = from_rank1([1.0, 2.0, 3.0, float("nan")])

    def test_against_scalar(self) -> None:
        self.assertEqual(self.a.gt(2).flatten(), [0.0, 0.0, 1.0, 0.0])
        self.assertEqual(self.a.ge(2).flatten(), [0.0, 1.0, 1.0, 0.0])
        self.assertEqual(self.a.lt(2).flatten(), [1.0, 0.0, 0.0, 0.0])
        self.assertEqual(self.a.le(2).flatten(), [1.0, 1.0, 0.0, 0.0])
        self.assertEqual(self.a.eq(2).flatten(), [0.0, 1.0, 0.0, 0.0])
        self.assertEqual(self.a.ne(2).flatten(), [1.0, 0.0, 1.0, 1.0])

    def test_operators_return_masks(self) -> None:
        a = from_rank2([[1.0, 5.0], [3.0, 0.0]])
        mask = a > 2
        self.assertIsInstance(mask, NDArray)
        self.assertEqual(mask.tolist(), [[0.0, 1.0], [1.0, 0.0]])
        self.assertEqual((a <= 1).tolist(), [[1.0, 0.0], [0.0, 1.0]])
        self.assertEqual((a >= 3).tolist(), [[0.0, 1.0], [1.0, 0.0]])
        self.assertEqual((a < 3).tolist(), [[1.0, 0.0], [0.0, 1.0]])

    def test_reflected_scalar_comparison(self) -> None:
        a = from_rank1([1.0, 3.0])
        self.assertEqual((2 < a).flatten(), [0.0, 1.0])

    def test_against_array(self) -> None:
        a = from_rank1([1.0, 5.0, 3.0])
        b = from_rank1([2.0, 2.0, 3.0])
        self.assertEqual(a.gt(b).flatten(), [0.0, 1.0, 0.0])
        self.assertEqual(a.eq(b).flatten(), [0.0, 0.0, 1.0])
        with self.assertRaises(ShapeMismatchError):
            a.lt(from_rank1([1.0]))

    def test_equality_operator_stays_structural(self) -> None:
        a = from_rank1([1.0, 2.0])
        self.assertIs(a == from_rank1([1.0, 2.0]), True)
        self.assertIs(a == 1.0, False)

    def test_mask_feeds_arithmetic(self) -> None:
        a = from_rank1([-1.0, 2.0, 3.0])
        self.assertEqual((a * (a > 0)).flatten(), [-0.0, 2.0, 3.0])


class TestClamp(unittest.TestCase):
    def test_clamp(self) -> None:
        a = from_rank1([-5.0, 0.5, 9.0])
        out = a.clamp(0, 1)
        self.assertEqual(out.flatten(), [0.0, 0.5, 1.0])
        self.assertEqual((out.min(), out.max()), (0.0, 1.0))

    def test_clamp_rejects_inverted_bounds(self) -> None:
        with self.assertRaises(ValueError):
            from_rank1([1.0]).clamp(2, 1)

    def test_clamp_rejects_non_scalars(self) -> None:
        with self.assertRaises(TypeError):
            from_rank1([1.0]).clamp([0], 1)


class TestLogical(unittest.TestCase):
    def setUp(self) -> None:
        self.a = from_rank1([1.0, 1.0, 0.0, -3.0])
        self.b = from_rank1([2.0, 0.0, 0.5, 4.0])

    def test_and_or_xor(self) -> None:
        self.assertEqual(self.a.logical_and(self.b).flatten(), [1.0, 0.0, 0.0, 0.0])
        self.assertEqual(self.a.logical_or(self.b).flatten(), [1.0, 1.0, 1.0, 1.0])
        self.assertEqual(self.a.logical_xor(self.b).flatten(), [0.0, 1.0, 1.0, 1.0])

    def test_operators(self) -> None:
        self.assertEqual(self.a & self.b, self.a.logical_and(self.b))
        self.assertEqual(self.a | self.b, self.a.logical_or(self.b))
        self.assertEqual(self.a ^ self.b, self.a.logical_xor(self.b))

    def test_scalar_operand(self) -> None:
        self.assertEqual((self.a & 1).flatten(), [1.0, 1.0, 0.0, 0.0])
        self.assertEqual((0 | self.a).flatten(), [1.0, 1.0, 0.0, 0.0])

    def test_combining_masks(self) -> None:
        x = from_rank1([0.0, 1.5, 3.0, 4.5])
        inside = (x > 1) & (x < 4)
        self.assertEqual(inside.flatten(), [0.0, 1.0, 1.0, 0.0])

    def test_shape_mismatch(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            self.a ^ from_rank1([1.0])


if __name__ == "__main__":
    unittest.main()
