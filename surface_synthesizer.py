# surface_synthesizer.py
import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from config import config, MAX_COLOR_CHANNEL
from celestial_types import CelestialBodyType
from noise_field import fractal
from seeded_random import DeterministicRandom


@dataclass(frozen=True)
class SurfaceFeature:
    """A write-once stamp applied during generation.

    Coordinates are continuous grid coordinates: cell (x, y) spans
    [x, x + 1) x [y, y + 1), so its center sits at (x + 0.5, y + 0.5).
    """
    center_x: float
    center_y: float
    size: float
    kind: str
    intensity: float

    @property
    def radius(self) -> float:
        return self.size / 2.0


@dataclass(frozen=True)
class SurfaceGrid:
    """Unlit output of the synthesizer. All arrays are indexed [x, y] and read-only.

    Attributes:
        colors: (R, R, 3) float colors in [0, 255]; zero outside the sphere.
        elevation: (R, R) terrain height within `config.Surface.ELEVATION_RANGE`.
        on_sphere: (R, R) mask of cells within R/2 of the grid center.
        animated_features: Features of animated kinds, kept for per-tick effects.
    """
    colors: np.ndarray
    elevation: np.ndarray
    on_sphere: np.ndarray
    animated_features: Tuple[SurfaceFeature, ...]

    @property
    def resolution(self) -> int:
        return self.elevation.shape[0]


def cell_offsets(resolution: int) -> Tuple[np.ndarray, np.ndarray]:
    """Offsets (dx, dy) of every cell center from the grid center, indexed [x, y]."""
    coords = np.arange(resolution, dtype=np.float64) + 0.5 - resolution / 2.0
    return np.meshgrid(coords, coords, indexing='ij')


def sphere_mask(resolution: int) -> np.ndarray:
    dx, dy = cell_offsets(resolution)
    return dx ** 2 + dy ** 2 <= (resolution / 2.0) ** 2


def _freeze(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


class SurfaceSynthesizer:
    """Builds the base color/elevation field of one body and stamps its features.

    The only randomness consumed is the `DeterministicRandom` handed to
    `synthesize` plus the integer noise seed, so equal inputs give
    byte-identical grids.
    """

    def __init__(self, body_type, resolution: int = None):
        self.body_type = CelestialBodyType(body_type)
        self.resolution = int(resolution if resolution is not None else config.Surface.RESOLUTION)
        if self.resolution < 3:
            raise ValueError(f"Surface resolution must be at least 3, got {self.resolution}.")

        self.palette = np.array(config.Surface.PALETTES[self.body_type.value], dtype=np.float64)
        self.feature_kinds = config.Features.KINDS[self.body_type.value]
        self.animated_kinds = config.Features.ANIMATED_KINDS.get(self.body_type.value, ())

        cell_centers = np.arange(self.resolution, dtype=np.float64) + 0.5
        self._grid_x, self._grid_y = np.meshgrid(cell_centers, cell_centers, indexing='ij')

    def synthesize(self, rng: DeterministicRandom, noise_seed: int) -> SurfaceGrid:
        on_sphere = sphere_mask(self.resolution)
        colors, elevation = self.generate_base_texture(rng, noise_seed, on_sphere)

        features = self.generate_features(rng)
        for feature in features:
            self.stamp_feature(colors, elevation, on_sphere, feature)

        if config.Debug.SURFACE_GENERATION:
            kinds = sorted({f.kind for f in features})
            logging.debug(f"Synthesized {self.resolution}x{self.resolution} {self.body_type.value} surface "
                          f"with {len(features)} features ({', '.join(kinds)}).")

        animated = tuple(f for f in features if f.kind in self.animated_kinds)
        return SurfaceGrid(
            colors=_freeze(colors),
            elevation=_freeze(elevation),
            on_sphere=_freeze(on_sphere),
            animated_features=animated,
        )

    def normalized_noise(self, noise_seed: int) -> np.ndarray:
        """Three-octave noise over the grid, renormalized from [-1, 1] to [0, 1]."""
        weights = config.Surface.OCTAVE_WEIGHTS
        raw = fractal(self._grid_x - 0.5, self._grid_y - 0.5, noise_seed,
                      config.Surface.OCTAVE_FREQUENCIES, weights)
        return np.clip((raw / sum(weights) + 1.0) / 2.0, 0.0, 1.0)

    def generate_base_texture(self, rng: DeterministicRandom, noise_seed: int,
                              on_sphere: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Palette colors with per-channel jitter, and the baseline elevation.

        Jitter is drawn for on-sphere cells in grid order (x major), three
        channels per cell, so the RNG stream position after this call depends
        only on the resolution.
        """
        noise = self.normalized_noise(noise_seed)
        last_index = len(self.palette) - 1
        palette_index = np.clip(np.floor(noise * last_index).astype(np.int64), 0, last_index)

        colors = np.zeros((self.resolution, self.resolution, 3), dtype=np.float64)
        cell_count = int(on_sphere.sum())
        jitter = config.Surface.COLOR_JITTER
        offsets = np.array([rng.next_float(-jitter, jitter) for _ in range(cell_count * 3)],
                           dtype=np.float64).reshape(cell_count, 3)
        colors[on_sphere] = np.clip(self.palette[palette_index[on_sphere]] + offsets, 0.0, MAX_COLOR_CHANNEL)

        elevation = np.where(on_sphere, config.Surface.BASE_ELEVATION_SCALE * noise, 0.0)
        return colors, elevation

    def generate_features(self, rng: DeterministicRandom) -> List[SurfaceFeature]:
        count = rng.next_int(*config.Features.COUNT_RANGE)
        features = []
        for _ in range(count):
            kind = rng.choose(self.feature_kinds)
            center_x = rng.next_float(0.0, self.resolution)
            center_y = rng.next_float(0.0, self.resolution)
            size = rng.next_float(*config.Features.SIZE_RANGE)
            intensity = rng.next_float(*config.Features.INTENSITY_RANGE)
            features.append(SurfaceFeature(center_x, center_y, size, kind, intensity))
        return features

    def stamp_feature(self, colors: np.ndarray, elevation: np.ndarray, on_sphere: np.ndarray,
                      feature: SurfaceFeature) -> int:
        """Applies one feature in place with linear radial falloff.

        Returns the number of cells touched. Colors and elevation are clamped
        right after the stamp, so overlapping features accumulate within range.
        """
        radius = feature.radius
        distance = np.hypot(self._grid_x - feature.center_x, self._grid_y - feature.center_y)
        affected = on_sphere & (distance <= radius)
        if not affected.any():
            return 0

        strength = (1.0 - distance[affected] / radius) * feature.intensity
        effect = config.Features.EFFECTS[feature.kind]
        color_delta = np.asarray(effect['color'], dtype=np.float64)

        colors[affected] = np.clip(colors[affected] + strength[:, np.newaxis] * color_delta,
                                   0.0, MAX_COLOR_CHANNEL)
        low, high = config.Surface.ELEVATION_RANGE
        elevation[affected] = np.clip(elevation[affected] + strength * effect['elevation'], low, high)
        return int(affected.sum())
