import math
import unittest
import numpy as np
from physics_utils import PhysicsError, TWO_PI
from orbital_mechanics import (OrbitalMechanics, OrbitalElements, solve_kepler_equation,
                               true_anomaly_from_eccentric)

class TestKeplerSolver(unittest.TestCase):

    def test_residual_small_across_eccentricities(self):
        for e, tolerance in [(0.0, 1e-12), (0.3, 1e-9), (0.6, 1e-9), (0.9, 1e-3)]:
            for m in np.linspace(0.0, TWO_PI, 97, endpoint=False):
                E = solve_kepler_equation(float(m), e)
                self.assertLess(abs(E - e * math.sin(E) - m), tolerance, msg=f"e={e}, M={m}")

    def test_circular_orbit_is_identity(self):
        for m in (0.0, 0.7, 2.5, 5.9):
            self.assertEqual(solve_kepler_equation(m, 0.0), m)

    def test_true_anomaly_at_apsides(self):
        self.assertEqual(true_anomaly_from_eccentric(0.0, 0.5), 0.0)
        self.assertAlmostEqual(true_anomaly_from_eccentric(math.pi, 0.5), math.pi)

class TestEnterOrbit(unittest.TestCase):

    def setUp(self):
        self.mechanics = OrbitalMechanics()

    def test_shape_invariants(self):
        state = self.mechanics.enter_orbit((10.0, -5.0), 100.0, 1000.0, 0.3, 0.5)
        self.assertAlmostEqual(state.semi_major_axis, 200.0)
        self.assertAlmostEqual(state.apoapsis, 300.0)
        self.assertGreaterEqual(state.apoapsis, state.periapsis)
        self.assertAlmostEqual(state.mean_motion, math.sqrt(0.0008 * 1000.0 / 200.0 ** 3))
        self.assertTrue(0.0 <= state.mean_anomaly < TWO_PI)

    def test_initial_position_at_periapsis(self):
        state = self.mechanics.enter_orbit((100.0, 50.0), 80.0, 500.0, 0.0, 0.2)
        np.testing.assert_allclose(state.position, [180.0, 50.0])
        self.assertAlmostEqual(state.radius, 80.0)

    def test_eccentricity_clamped_with_warning(self):
        with self.assertLogs(level='WARNING'):
            high = self.mechanics.enter_orbit((0.0, 0.0), 50.0, 100.0, 0.0, 0.99)
        self.assertEqual(high.eccentricity, 0.95)
        with self.assertLogs(level='WARNING'):
            negative = self.mechanics.enter_orbit((0.0, 0.0), 50.0, 100.0, 0.0, -0.2)
        self.assertEqual(negative.eccentricity, 0.0)

    def test_invalid_inputs_raise(self):
        with self.assertRaises(PhysicsError):
            self.mechanics.enter_orbit((0.0, 0.0), 0.0, 100.0)
        with self.assertRaises(PhysicsError):
            self.mechanics.enter_orbit((0.0, 0.0), -10.0, 100.0)
        with self.assertRaises(PhysicsError):
            self.mechanics.enter_orbit((0.0, 0.0), 10.0, -1.0)
        with self.assertRaises(PhysicsError):
            self.mechanics.enter_orbit((0.0, 0.0), 10.0, 100.0, float('nan'))
        with self.assertRaises(PhysicsError):
            self.mechanics.enter_orbit((0.0, 0.0), 10.0, 100.0, 0.0, float('inf'))

    def test_parent_position_is_copied(self):
        parent = np.array([1.0, 2.0])
        state = self.mechanics.enter_orbit(parent, 10.0, 100.0)
        parent[0] = 99.0
        self.assertEqual(state.parent_position[0], 1.0)

    def test_massless_parent_parks_body(self):
        state = self.mechanics.enter_orbit((0.0, 0.0), 30.0, 0.0, 1.0)
        before = state.position.copy()
        self.mechanics.advance(state, 5.0)
        np.testing.assert_array_equal(state.position, before)
        self.assertEqual(self.mechanics.orbital_period(state), math.inf)

class TestAdvance(unittest.TestCase):

    def setUp(self):
        self.mechanics = OrbitalMechanics()

    def test_radius_reaches_both_apsides(self):
        state = self.mechanics.enter_orbit((0.0, 0.0), 100.0, 1000.0, 0.0, 0.5)
        radii = []
        for m in np.linspace(0.0, TWO_PI, 360, endpoint=False):
            _, radius, _, _ = self.mechanics.position_at(state, float(m))
            radii.append(radius)
        self.assertAlmostEqual(min(radii), 100.0, delta=1e-3)
        self.assertAlmostEqual(max(radii), 300.0, delta=1e-3)

    def test_positions_lie_on_ellipse(self):
        parent = np.array([40.0, -20.0])
        state = self.mechanics.enter_orbit(parent, 100.0, 1000.0, 0.0, 0.6)
        a, e = state.semi_major_axis, state.eccentricity
        other_focus = parent - np.array([2.0 * a * e, 0.0])
        for _ in range(200):
            position = self.mechanics.advance(state, 0.05)
            distance = np.linalg.norm(position - parent)
            self.assertTrue(state.periapsis - 1e-9 <= distance <= state.apoapsis + 1e-9)
            self.assertAlmostEqual(distance, state.radius, places=9)
            total = distance + np.linalg.norm(position - other_focus)
            self.assertAlmostEqual(total, 2.0 * a, delta=1e-6 * a)

    def test_circular_orbit_constant_radius_and_rate(self):
        state = self.mechanics.enter_orbit((0.0, 0.0), 150.0, 800.0, 0.0, 0.0)
        angles = []
        for _ in range(20):
            position = self.mechanics.advance(state, 0.1)
            self.assertAlmostEqual(np.linalg.norm(position), 150.0, places=9)
            angles.append(math.atan2(position[1], position[0]) % TWO_PI)
        steps = np.diff(np.unwrap(angles))
        np.testing.assert_allclose(steps, steps[0], rtol=1e-9)
        self.assertAlmostEqual(steps[0], state.mean_motion * 0.1 * 60.0)

    def test_mean_anomaly_wraps(self):
        state = self.mechanics.enter_orbit((0.0, 0.0), 50.0, 1000.0, 6.0, 0.4)
        unwrapped = 6.0
        for _ in range(500):
            self.mechanics.advance(state, 0.1)
            unwrapped += state.mean_motion * 0.1 * 60.0
            self.assertTrue(0.0 <= state.mean_anomaly < TWO_PI)
        reference = self.mechanics.enter_orbit((0.0, 0.0), 50.0, 1000.0, unwrapped, 0.4)
        np.testing.assert_allclose(state.position, reference.position, atol=1e-6)

    def test_parent_position_reanchors(self):
        state = self.mechanics.enter_orbit((0.0, 0.0), 50.0, 1000.0, 0.0, 0.0)
        position = self.mechanics.advance(state, 0.0, parent_position=(500.0, 500.0))
        np.testing.assert_allclose(position, [550.0, 500.0])
        np.testing.assert_array_equal(state.parent_position, [500.0, 500.0])

    def test_zero_dt_is_stationary(self):
        state = self.mechanics.enter_orbit((0.0, 0.0), 75.0, 1000.0, 2.0, 0.3)
        before = state.position.copy()
        self.mechanics.advance(state, 0.0)
        np.testing.assert_array_equal(state.position, before)

class TestOrbitGeometry(unittest.TestCase):

    def setUp(self):
        self.mechanics = OrbitalMechanics()

    def test_period_matches_mean_motion(self):
        state = self.mechanics.enter_orbit((0.0, 0.0), 100.0, 1000.0, 0.0, 0.2)
        period = self.mechanics.orbital_period(state)
        start = state.position.copy()
        steps = 1000
        for _ in range(steps):
            self.mechanics.advance(state, period / steps)
        np.testing.assert_allclose(state.position, start, atol=1e-6)

    def test_orbit_path_shape(self):
        state = self.mechanics.enter_orbit((5.0, 5.0), 100.0, 1000.0, 0.0, 0.5)
        path = self.mechanics.orbit_path(state, 64)
        self.assertEqual(path.shape, (64, 2))
        np.testing.assert_allclose(path[0], [105.0, 5.0])
        distances = np.linalg.norm(path - state.parent_position, axis=1)
        self.assertAlmostEqual(distances.min(), 100.0)
        self.assertAlmostEqual(distances.max(), 300.0)

    def test_orbit_path_needs_points(self):
        state = self.mechanics.enter_orbit((0.0, 0.0), 10.0, 100.0)
        with self.assertRaises(ValueError):
            self.mechanics.orbit_path(state, 2)

class TestOrbitalElements(unittest.TestCase):

    def test_save_and_restore_reproduces_motion(self):
        mechanics = OrbitalMechanics()
        saved = mechanics.enter_orbit((10.0, 10.0), 120.0, 900.0, 1.1, 0.25)
        for _ in range(37):
            mechanics.advance(saved, 0.016)
        elements = OrbitalElements.from_dict(saved.to_elements('Sol').to_dict())
        self.assertEqual(elements.parent_name, 'Sol')
        restored = mechanics.from_elements(elements, saved.parent_position)
        np.testing.assert_allclose(restored.position, saved.position)
        for _ in range(10):
            np.testing.assert_allclose(mechanics.advance(restored, 0.016), mechanics.advance(saved, 0.016))

if __name__ == '__main__':
    unittest.main()
