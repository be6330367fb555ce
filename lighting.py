# lighting.py
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from config import config, MAX_COLOR_CHANNEL
from physics_utils import normalize_vector
from surface_synthesizer import SurfaceFeature, SurfaceGrid, cell_offsets


@dataclass(frozen=True)
class LitSurface:
    """Final per-cell data handed to renderers. All arrays are indexed [x, y] and read-only.

    Attributes:
        albedo: (R, R, 3) unlit float colors from the synthesizer.
        colors: (R, R, 3) uint8 shaded colors.
        elevation: (R, R) terrain height.
        normals: (R, R, 3) surface normals; zero outside the sphere. z > 0 faces the viewer.
        shadow: (R, R) brightness factor in [0, 1] used to shade `colors`.
        on_sphere: (R, R) mask of meaningful cells.
        visible: (R, R) cells on the sphere whose normal z exceeds the visibility threshold.
        animated_features: Features the owning body animates per tick.
    """
    albedo: np.ndarray
    colors: np.ndarray
    elevation: np.ndarray
    normals: np.ndarray
    shadow: np.ndarray
    on_sphere: np.ndarray
    visible: np.ndarray
    animated_features: Tuple[SurfaceFeature, ...]

    @property
    def resolution(self) -> int:
        return self.elevation.shape[0]


class LightingEngine:
    """Directional light with terminator and limb darkening over a sphere of cells.

    A pure function of its input grid: no randomness, no state beyond the
    lighting constants captured at construction.
    """

    def __init__(self, light_direction=None, ambient: float = None, diffuse_strength: float = None,
                 bump_scale: float = None):
        lighting = config.Lighting
        direction = lighting.LIGHT_DIRECTION if light_direction is None else light_direction
        self.light_direction = normalize_vector(direction)
        if not np.any(self.light_direction):
            raise ValueError("Light direction must not be a zero vector.")
        self.ambient = lighting.AMBIENT if ambient is None else float(ambient)
        self.diffuse_strength = lighting.DIFFUSE_STRENGTH if diffuse_strength is None else float(diffuse_strength)
        self.bump_scale = lighting.BUMP_SCALE if bump_scale is None else float(bump_scale)

    @staticmethod
    def sphere_normals(resolution: int) -> np.ndarray:
        """Orthographic sphere normals: (dx, dy) over the radius, nz from the unit constraint."""
        dx, dy = cell_offsets(resolution)
        radius = resolution / 2.0
        nx = dx / radius
        ny = dy / radius
        nz = np.sqrt(np.maximum(0.0, 1.0 - nx ** 2 - ny ** 2))
        return np.stack([nx, ny, nz], axis=-1)

    def perturb_normals(self, normals: np.ndarray, elevation: np.ndarray) -> np.ndarray:
        """Adds a fraction of the central-difference elevation gradient to (nx, ny).

        Border cells have no neighbor on one side and keep the pure sphere normal.
        """
        perturbed = normals.copy()
        if elevation.shape[0] < 3 or elevation.shape[1] < 3:
            return perturbed
        grad_x = elevation[2:, 1:-1] - elevation[:-2, 1:-1]
        grad_y = elevation[1:-1, 2:] - elevation[1:-1, :-2]
        perturbed[1:-1, 1:-1, 0] += self.bump_scale * grad_x
        perturbed[1:-1, 1:-1, 1] += self.bump_scale * grad_y
        return perturbed

    def light_factors(self, normals: np.ndarray) -> np.ndarray:
        """(ambient + diffuse * strength) * terminator * edge, clipped to [0, 1]."""
        lighting = config.Lighting
        nx = normals[..., 0]
        nz = normals[..., 2]
        diffuse = np.maximum(0.0, normals @ self.light_direction)
        terminator = np.maximum(0.0, lighting.TERMINATOR_SLOPE * nx + lighting.TERMINATOR_OFFSET)
        edge = np.maximum(lighting.LIMB_FLOOR, nz)
        return np.clip((self.ambient + diffuse * self.diffuse_strength) * terminator * edge, 0.0, 1.0)

    def illuminate(self, grid: SurfaceGrid) -> LitSurface:
        on_sphere = grid.on_sphere
        normals = self.perturb_normals(self.sphere_normals(grid.resolution), grid.elevation)
        normals = np.where(on_sphere[..., np.newaxis], normals, 0.0)

        shadow = np.where(on_sphere, self.light_factors(normals), 0.0)
        shaded = np.clip(np.floor(grid.colors * shadow[..., np.newaxis]), 0.0, MAX_COLOR_CHANNEL).astype(np.uint8)
        visible = on_sphere & (normals[..., 2] > config.Lighting.VISIBILITY_NZ_THRESHOLD)

        for array in (normals, shadow, shaded, visible):
            array.setflags(write=False)

        return LitSurface(
            albedo=grid.colors,
            colors=shaded,
            elevation=grid.elevation,
            normals=normals,
            shadow=shadow,
            on_sphere=on_sphere,
            visible=visible,
            animated_features=grid.animated_features,
        )
