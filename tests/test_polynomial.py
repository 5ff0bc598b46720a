import unittest

import numpy as np

from fit_test_util import polynomial_data
from polynomial import AffineModel, FittedCurve, PolynomialModel
from toy_data import Dataset, line_dataset


class TestModels(unittest.TestCase):
    def test_polynomial_matches_polyval(self):
        rng = np.random.default_rng(1)
        x = np.linspace(-3, 3, 25)
        for degree in range(6):
            coeffs = rng.normal(0, 2, degree + 1)
            model = PolynomialModel(degree)
            self.assertEqual(model.n_params, degree + 1)
            np.testing.assert_allclose(
                model.predict(coeffs, x), np.polyval(coeffs[::-1], x))

    def test_constant(self):
        np.testing.assert_array_equal(
            PolynomialModel(0).predict([7.0], [1, 2, 3]), [7, 7, 7])

    def test_affine(self):
        model = AffineModel()
        np.testing.assert_array_equal(model.predict((5, 3), [0, 1, 2]), [3, 8, 13])

    def test_bad_degree(self):
        for degree in [-1, 1.5]:
            with self.assertRaises(ValueError):
                PolynomialModel(degree)

    def test_check_params(self):
        with self.assertRaises(ValueError):
            AffineModel().check_params((1, 2, 3))
        np.testing.assert_array_equal(PolynomialModel(1).check_params([[1], [2]]), [1, 2])

    def test_params_are_copied(self):
        params = np.array([2.0, 1.0])
        curve = AffineModel()(params)
        self.assertIsNot(curve.params, params)
        params[0] = 100
        np.testing.assert_array_equal(curve.params, [2, 1])
        np.testing.assert_array_equal(curve.predict([1]), [3])

    def test_fitted_curve(self):
        curve = AffineModel()((2, 1))
        self.assertIsInstance(curve, FittedCurve)
        self.assertIsNone(curve.result)
        data = Dataset([0, 1, 2], [1, 4, 5])
        np.testing.assert_array_equal(curve.residuals(data), [0, 1, 0])
        np.testing.assert_array_equal(curve.error(Dataset([0], [-1])), [2])


class TestDataset(unittest.TestCase):
    def test_line_dataset(self):
        data = line_dataset()
        self.assertEqual(len(data), 13)
        self.assertEqual(data.pairs()[0], (0.0, 3.0))
        self.assertEqual(data.pairs()[-1], (6.0, 33.0))
        self.assertEqual(list(data), data.pairs())

    def test_immutable(self):
        data = line_dataset()
        with self.assertRaises(ValueError):
            data.y[0] = 0
        with self.assertRaises(AttributeError):
            data.x = np.zeros(13)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            Dataset([1, 2], [1])
        with self.assertRaises(ValueError):
            Dataset([1, 2], [1, np.inf])

    def test_from_pairs(self):
        data = Dataset.from_pairs([(0, 1), (2, 3)])
        np.testing.assert_array_equal(data.x, [0, 2])
        np.testing.assert_array_equal(data.y, [1, 3])
        self.assertEqual(len(Dataset.from_pairs([])), 0)

    def test_from_function(self):
        data = Dataset.from_function(lambda x: x ** 2, [1, 2, 3])
        self.assertEqual(data, polynomial_data((0, 0, 1), [1, 2, 3]))

    def test_noise(self):
        data = line_dataset()
        self.assertEqual(data.with_noise(0), data)
        self.assertEqual(data.with_noise(1.5, rng=42), data.with_noise(1.5, rng=42))
        noisy = data.with_noise(1.5, rng=42)
        self.assertNotEqual(noisy, data)
        np.testing.assert_array_equal(noisy.x, data.x)

        with self.assertRaises(ValueError):
            data.with_noise(-0.1)

    def test_noise_distribution(self):
        xs = np.zeros(20000)
        data = Dataset(xs, xs)
        noisy = data.with_noise(2.0, rng=np.random.default_rng(7))
        self.assertAlmostEqual(np.std(noisy.y), 2.0, delta=0.1)
        self.assertAlmostEqual(np.mean(noisy.y), 0.0, delta=0.1)


if __name__ == '__main__':
    unittest.main()
