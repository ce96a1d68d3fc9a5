import math
import unittest

import numpy as np

from ndlite import E, PI, from_numpy, from_rank1


class TestTrigonometric(unittest.TestCase):
    def setUp(self) -> None:
        self.x = np.array([[-0.9, -0.3], [0.2, 0.7]])
        self.a = from_numpy(self.x)

    def test_against_numpy(self) -> None:
        cases = {
            "sin": np.sin,
            "cos": np.cos,
            "tan": np.tan,
            "asin": np.arcsin,
            "acos": np.arccos,
            "atan": np.arctan,
            "sinh": np.sinh,
            "cosh": np.cosh,
            "tanh": np.tanh,
            "asinh": np.arcsinh,
            "atanh": np.arctanh,
            "to_degrees": np.degrees,
            "to_radians": np.radians,
        }
        for name, ref in cases.items():
            with self.subTest(op=name):
                out = getattr(self.a, name)()
                self.assertEqual(out.shape, self.a.shape)
                np.testing.assert_allclose(out.to_numpy(), ref(self.x))

    def test_acosh_domain(self) -> None:
        out = from_rank1([1.0, 2.0, 0.5]).acosh().to_numpy()
        np.testing.assert_allclose(out[:2], np.arccosh([1.0, 2.0]))
        self.assertTrue(np.isnan(out[2]))

    def test_out_of_domain_is_nan(self) -> None:
        self.assertTrue(math.isnan(from_rank1([2.0]).asin().item(0)))

    def test_degrees_round_trip(self) -> None:
        a = from_rank1([0.0, 90.0, 180.0])
        np.testing.assert_allclose(a.to_radians().flatten(), [0.0, PI / 2, PI])
        np.testing.assert_allclose(a.to_radians().to_degrees().flatten(), a.flatten())


class TestExponential(unittest.TestCase):
    def setUp(self) -> None:
        self.a = from_rank1([0.5, 1.0, 2.0, 8.0])
        self.x = self.a.to_numpy()

    def test_exponentials(self) -> None:
        np.testing.assert_allclose(self.a.exp().to_numpy(), np.exp(self.x))
        np.testing.assert_allclose(self.a.exp2().to_numpy(), 2.0 ** self.x)
        np.testing.assert_allclose(self.a.exp10().to_numpy(), 10.0 ** self.x)
        np.testing.assert_allclose(self.a.exp_pi().to_numpy(), PI ** self.x)

    def test_logarithms(self) -> None:
        np.testing.assert_allclose(self.a.ln().to_numpy(), np.log(self.x))
        np.testing.assert_allclose(self.a.log2().to_numpy(), np.log2(self.x))
        np.testing.assert_allclose(self.a.log10().to_numpy(), np.log10(self.x))
        np.testing.assert_allclose(
            self.a.log_pi().to_numpy(), np.log(self.x) / np.log(PI)
        )

    def test_log_with_fixed_bases(self) -> None:
        self.assertEqual(self.a.log(2), self.a.log2())
        self.assertEqual(self.a.log(10), self.a.log10())
        self.assertEqual(self.a.log(E), self.a.ln())
        self.assertEqual(self.a.log(PI), self.a.log_pi())
        self.assertEqual(self.a.log(), self.a.ln())

    def test_log_rejects_other_bases(self) -> None:
        with self.assertRaises(ValueError):
            self.a.log(3)

    def test_ieee_edge_cases(self) -> None:
        out = from_rank1([0.0, -1.0]).ln().to_numpy()
        self.assertEqual(out[0], -np.inf)
        self.assertTrue(np.isnan(out[1]))


class TestPower(unittest.TestCase):
    def test_scalar_pow_and_operator(self) -> None:
        a = from_rank1([1.0, 2.0, 3.0])
        self.assertEqual(a.pow(2).flatten(), [1.0, 4.0, 9.0])
        self.assertEqual((a ** 3).flatten(), [1.0, 8.0, 27.0])

    def test_array_exponent(self) -> None:
        a = from_rank1([2.0, 3.0])
        self.assertEqual(a.pow(from_rank1([3.0, 2.0])).flatten(), [8.0, 9.0])

    def test_square_sqrt_cbrt(self) -> None:
        a = from_rank1([-8.0, 4.0, 9.0])
        self.assertEqual(a.square().flatten(), [64.0, 16.0, 81.0])
        out = a.sqrt().to_numpy()
        self.assertTrue(np.isnan(out[0]))
        np.testing.assert_allclose(out[1:], [2.0, 3.0])
        np.testing.assert_allclose(a.cbrt().flatten(), [-2.0, np.cbrt(4.0), np.cbrt(9.0)])

    def test_root(self) -> None:
        np.testing.assert_allclose(from_rank1([-8.0, 27.0]).root(3).flatten(), [-2.0, 3.0])
        np.testing.assert_allclose(from_rank1([16.0]).root(4).flatten(), [2.0])
        self.assertTrue(math.isnan(from_rank1([-16.0]).root(4).item(0)))

    def test_root_zero_rejected(self) -> None:
        with self.assertRaises(ValueError):
            from_rank1([1.0]).root(0)


class TestRounding(unittest.TestCase):
    def setUp(self) -> None:
        self.a = from_rank1([-2.5, -1.2, 0.5, 1.5, 2.5, 3.7])

    def test_floor_ceil_trunc(self) -> None:
        self.assertEqual(self.a.floor().flatten(), [-3.0, -2.0, 0.0, 1.0, 2.0, 3.0])
        self.assertEqual(self.a.ceil().flatten(), [-2.0, -1.0, 1.0, 2.0, 3.0, 4.0])
        self.assertEqual(self.a.trunc().flatten(), [-2.0, -1.0, 0.0, 1.0, 2.0, 3.0])

    def test_round_half_away_from_zero(self) -> None:
        self.assertEqual(self.a.round().flatten(), [-3.0, -1.0, 1.0, 2.0, 3.0, 4.0])

    def test_fract_keeps_sign(self) -> None:
        np.testing.assert_allclose(
            self.a.fract().flatten(), [-0.5, -0.2, 0.5, 0.5, 0.5, 0.7], atol=1e-12
        )

    def test_signum(self) -> None:
        out = from_rank1([-3.0, -0.0, 0.0, 2.0, float("nan")]).signum().to_numpy()
        np.testing.assert_array_equal(out[:4], [-1.0, -1.0, 1.0, 1.0])
        self.assertTrue(np.isnan(out[4]))


class TestClassification(unittest.TestCase):
    def setUp(self) -> None:
        self.a = from_rank1([0.0, 1.0, -2.0, float("inf"), float("nan")])

    def test_predicates(self) -> None:
        cases = {
            "is_finite": [1, 1, 1, 0, 0],
            "is_nan": [0, 0, 0, 0, 1],
            "is_infinite": [0, 0, 0, 1, 0],
            "is_zero": [1, 0, 0, 0, 0],
            "is_one": [0, 1, 0, 0, 0],
            "is_positive": [0, 1, 0, 1, 0],
            "is_negative": [0, 0, 1, 0, 0],
        }
        for name, expected in cases.items():
            with self.subTest(op=name):
                out = getattr(self.a, name)()
                self.assertEqual(out.flatten(), [float(v) for v in expected])

    def test_mask_extrema(self) -> None:
        out = self.a.is_nan()
        self.assertEqual((out.min(), out.max()), (0.0, 1.0))


if __name__ == "__main__":
    unittest.main()
