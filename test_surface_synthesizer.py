import unittest
import numpy as np
from config import config
from seeded_random import DeterministicRandom
from surface_synthesizer import SurfaceSynthesizer, SurfaceFeature, sphere_mask, cell_offsets

def _uniform_canvas(resolution=32, value=128.0):
    on_sphere = sphere_mask(resolution)
    colors = np.zeros((resolution, resolution, 3))
    colors[on_sphere] = value
    elevation = np.zeros((resolution, resolution))
    return colors, elevation, on_sphere

class TestSphereMask(unittest.TestCase):

    def test_cell_offsets_are_centered(self):
        dx, dy = cell_offsets(4)
        np.testing.assert_array_equal(dx[:, 0], [-1.5, -0.5, 0.5, 1.5])
        np.testing.assert_array_equal(dy[0, :], [-1.5, -0.5, 0.5, 1.5])

    def test_corners_off_center_on(self):
        mask = sphere_mask(16)
        self.assertTrue(mask[8, 8])
        self.assertTrue(mask[0, 8])
        self.assertFalse(mask[0, 0])
        self.assertFalse(mask[15, 15])

class TestSynthesize(unittest.TestCase):

    def setUp(self):
        self.synth = SurfaceSynthesizer('planet', resolution=32)

    def test_same_seed_is_byte_identical(self):
        first = self.synth.synthesize(DeterministicRandom(99), 99)
        second = SurfaceSynthesizer('planet', resolution=32).synthesize(DeterministicRandom(99), 99)
        self.assertEqual(first.colors.tobytes(), second.colors.tobytes())
        self.assertEqual(first.elevation.tobytes(), second.elevation.tobytes())

    def test_different_seed_changes_surface(self):
        first = self.synth.synthesize(DeterministicRandom(1), 1)
        second = self.synth.synthesize(DeterministicRandom(2), 2)
        self.assertFalse(np.array_equal(first.colors, second.colors))

    def test_values_within_bounds(self):
        low, high = config.Surface.ELEVATION_RANGE
        for body_type in ('star', 'planet', 'moon', 'asteroid'):
            grid = SurfaceSynthesizer(body_type, resolution=32).synthesize(DeterministicRandom(5), 5)
            self.assertTrue(np.all(grid.colors >= 0.0) and np.all(grid.colors <= 255.0))
            self.assertTrue(np.all(grid.elevation >= low) and np.all(grid.elevation <= high))

    def test_cells_off_sphere_are_zero(self):
        grid = self.synth.synthesize(DeterministicRandom(3), 3)
        off = ~grid.on_sphere
        self.assertTrue(off.any())
        self.assertTrue(np.all(grid.colors[off] == 0.0))
        self.assertTrue(np.all(grid.elevation[off] == 0.0))

    def test_arrays_are_read_only(self):
        grid = self.synth.synthesize(DeterministicRandom(4), 4)
        with self.assertRaises(ValueError):
            grid.colors[0, 0, 0] = 1.0
        with self.assertRaises(ValueError):
            grid.elevation[0, 0] = 1.0

    def test_only_stars_keep_animated_features(self):
        planet = self.synth.synthesize(DeterministicRandom(8), 8)
        self.assertEqual(planet.animated_features, ())
        animated_kinds = set(config.Features.ANIMATED_KINDS['star'])
        star_synth = SurfaceSynthesizer('star', resolution=32)
        kept = []
        for seed in range(10):
            kept.extend(star_synth.synthesize(DeterministicRandom(seed), seed).animated_features)
        self.assertTrue(kept)
        self.assertTrue(all(f.kind in animated_kinds for f in kept))

    def test_resolution_too_small(self):
        with self.assertRaises(ValueError):
            SurfaceSynthesizer('moon', resolution=2)

    def test_unknown_body_type(self):
        with self.assertRaises(ValueError):
            SurfaceSynthesizer('comet')

class TestGenerateFeatures(unittest.TestCase):

    def test_count_size_and_kinds(self):
        synth = SurfaceSynthesizer('moon', resolution=32)
        low, high = config.Features.COUNT_RANGE
        for seed in range(40):
            features = synth.generate_features(DeterministicRandom(seed))
            self.assertTrue(low <= len(features) <= high)
            for feature in features:
                self.assertIn(feature.kind, config.Features.KINDS['moon'])
                self.assertGreaterEqual(feature.size, 3.0)
                self.assertGreaterEqual(feature.radius, 1.5)
                self.assertTrue(0.0 <= feature.center_x < 32.0)

class TestStampFeature(unittest.TestCase):

    def setUp(self):
        self.synth = SurfaceSynthesizer('planet', resolution=32)

    def test_crater_lowers_and_darkens(self):
        colors, elevation, on_sphere = _uniform_canvas()
        touched = self.synth.stamp_feature(colors, elevation, on_sphere, SurfaceFeature(16.0, 16.0, 10.0, 'crater', 1.0))
        self.assertGreater(touched, 0)
        self.assertLess(elevation[16, 16], 0.0)
        self.assertTrue(np.all(colors[16, 16] < 128.0))

    def test_cells_outside_radius_untouched(self):
        colors, elevation, on_sphere = _uniform_canvas()
        self.synth.stamp_feature(colors, elevation, on_sphere, SurfaceFeature(16.0, 16.0, 6.0, 'mountain', 1.0))
        self.assertEqual(elevation[16, 25], 0.0)
        np.testing.assert_array_equal(colors[5, 16], [128.0, 128.0, 128.0])

    def test_sunspot_never_brightens(self):
        colors, elevation, on_sphere = _uniform_canvas(value=200.0)
        before = colors.copy()
        star_synth = SurfaceSynthesizer('star', resolution=32)
        star_synth.stamp_feature(colors, elevation, on_sphere, SurfaceFeature(12.0, 20.0, 14.0, 'sunspot', 0.9))
        self.assertTrue(np.all(colors <= before))
        self.assertTrue(np.any(colors < before))

    def test_overlapping_stamps_stay_in_range(self):
        colors, elevation, on_sphere = _uniform_canvas(value=20.0)
        crater = SurfaceFeature(16.0, 16.0, 15.0, 'crater', 1.0)
        for _ in range(30):
            self.synth.stamp_feature(colors, elevation, on_sphere, crater)
        self.assertGreaterEqual(elevation.min(), config.Surface.ELEVATION_RANGE[0])
        self.assertGreaterEqual(colors.min(), 0.0)

    def test_off_sphere_feature_touches_nothing(self):
        colors, elevation, on_sphere = _uniform_canvas()
        touched = self.synth.stamp_feature(colors, elevation, on_sphere, SurfaceFeature(0.0, 0.0, 3.0, 'crater', 1.0))
        self.assertEqual(touched, 0)
        self.assertTrue(np.all(elevation == 0.0))

if __name__ == '__main__':
    unittest.main()
