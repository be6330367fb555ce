import math
import unittest
import numpy as np
from physics_utils import clamp, wrap_angle, normalize_vector, TWO_PI

class TestClamp(unittest.TestCase):

    def test_scalar_clamp(self):
        self.assertEqual(clamp(5.0, 0.0, 1.0), 1.0)
        self.assertEqual(clamp(-5.0, 0.0, 1.0), 0.0)
        self.assertAlmostEqual(clamp(0.25, 0.0, 1.0), 0.25)

    def test_scalar_clamp_returns_float(self):
        self.assertIsInstance(clamp(300, 0, 255), float)

    def test_array_clamp(self):
        values = np.array([-10.0, 0.0, 128.0, 300.0])
        np.testing.assert_array_equal(clamp(values, 0.0, 255.0), np.array([0.0, 0.0, 128.0, 255.0]))

class TestWrapAngle(unittest.TestCase):

    def test_angle_in_range_is_unchanged(self):
        self.assertAlmostEqual(wrap_angle(1.0), 1.0)
        self.assertEqual(wrap_angle(0.0), 0.0)

    def test_angle_above_two_pi(self):
        self.assertAlmostEqual(wrap_angle(TWO_PI + 0.5), 0.5)
        self.assertAlmostEqual(wrap_angle(5 * TWO_PI + 1.25), 1.25, places=9)

    def test_negative_angle(self):
        self.assertAlmostEqual(wrap_angle(-0.5), TWO_PI - 0.5)

    def test_tiny_negative_angle_never_returns_two_pi(self):
        wrapped = wrap_angle(-1e-20)
        self.assertGreaterEqual(wrapped, 0.0)
        self.assertLess(wrapped, TWO_PI)

    def test_exact_two_pi(self):
        self.assertEqual(wrap_angle(TWO_PI), 0.0)
        self.assertEqual(wrap_angle(2 * math.pi), 0.0)

class TestNormalizeVector(unittest.TestCase):

    def test_normalize_typical_vector(self):
        np.testing.assert_array_almost_equal(normalize_vector(np.array([3.0, 4.0])), np.array([0.6, 0.8]))

        norm = np.sqrt(3)
        np.testing.assert_array_almost_equal(normalize_vector([1.0, 1.0, 1.0]), np.array([1 / norm] * 3))

    def test_normalize_zero_vector(self):
        np.testing.assert_array_equal(normalize_vector(np.zeros(3)), np.zeros(3))

    def test_normalize_small_magnitude_vector(self):
        np.testing.assert_array_equal(normalize_vector(np.array([1e-15, 1e-15])), np.zeros(2))

    def test_normalize_stack_of_vectors(self):
        vectors = np.array([[3.0, 4.0, 0.0], [0.0, 0.0, 0.0], [0.0, -2.0, 0.0]])
        expected = np.array([[0.6, 0.8, 0.0], [0.0, 0.0, 0.0], [0.0, -1.0, 0.0]])
        np.testing.assert_array_almost_equal(normalize_vector(vectors), expected)

    def test_normalize_custom_epsilon(self):
        vector = np.array([1e-5, 1e-5])
        np.testing.assert_array_almost_equal(normalize_vector(vector), vector / np.linalg.norm(vector))
        np.testing.assert_array_equal(normalize_vector(vector, epsilon=1e-4), np.zeros(2))

if __name__ == '__main__':
    unittest.main()
