# solarsystem.py
import math
import random
import logging
from dataclasses import dataclass
from typing import Tuple, List, Dict, Optional

import numpy as np

from config import config
from physics_utils import clamp
from celestial_types import CelestialBodyType, Atmosphere
from lighting import LightingEngine, LitSurface
from orbital_mechanics import OrbitalMechanics, OrbitalState, OrbitalElements
from seeded_random import DeterministicRandom, seed_from_name
from surface_synthesizer import SurfaceSynthesizer

@dataclass
class AnimatedFeature:
    """Per-body copy of a feature that keeps changing after generation (e.g. a pulsing sunspot)."""
    kind: str
    center_x: float
    center_y: float
    base_size: float
    size: float

@dataclass(frozen=True)
class SurfaceCell:
    color: Tuple[int, int, int]
    elevation: float

class CelestialBody:
    """A star, planet, moon or asteroid with a generated surface and an optional orbit.

    The surface (colors, elevation, normals, shadow) is generated once in the
    constructor from `seed_from_name(name)` and never regenerated. Spin speed
    and atmosphere are cosmetic and come from `cosmetic_rng`, so they never
    influence the surface. `enter_orbit` and `update` are the only mutating
    entry points.

    Attributes:
        name (str): Body name, also the source of the surface seed.
        body_type (CelestialBodyType): Selects palette and feature kinds.
        radius (float): Display radius in world units.
        mass (float): Mass in game units; children orbit with this value.
        color (Tuple[int, int, int]): Base color for renderers.
        seed (int): Name-derived seed used for the surface.
        surface (LitSurface): Immutable generated grids.
        animated_features (List[AnimatedFeature]): Features pulsed every tick.
        rotation (float): Accumulated spin angle in radians.
        rotation_speed (float): Spin in radians per normalized frame.
        atmosphere (Optional[Atmosphere]): Cosmetic halo, planets only.
        orbit (Optional[OrbitalState]): None while the body is stationary.
        parent_name (Optional[str]): Name of the body orbited, if known.
    """

    def __init__(self, name: str, body_type, radius: float, mass: float, color: Tuple[int, int, int],
                 position=(0.0, 0.0), cosmetic_rng: random.Random = None, resolution: int = None,
                 mechanics: OrbitalMechanics = None):
        self.name = name
        self.body_type = CelestialBodyType(body_type)
        self.radius = float(radius)
        self.mass = float(mass)
        self.color = tuple(color)
        self._position = np.array(position, dtype=np.float64)
        self._mechanics = mechanics if mechanics is not None else OrbitalMechanics()

        self.seed = seed_from_name(name)
        grid = SurfaceSynthesizer(self.body_type, resolution).synthesize(DeterministicRandom(self.seed), self.seed)
        self.surface: LitSurface = LightingEngine().illuminate(grid)
        self.animated_features: List[AnimatedFeature] = [
            AnimatedFeature(f.kind, f.center_x, f.center_y, f.size, f.size) for f in self.surface.animated_features
        ]

        cosmetic = cosmetic_rng if cosmetic_rng is not None else random
        self.rotation = 0.0
        self.rotation_speed = cosmetic.uniform(*config.Rotation.SPEED_RANGE)
        self.atmosphere: Optional[Atmosphere] = None
        if self.body_type == CelestialBodyType.PLANET and cosmetic.random() < config.Atmosphere.PROBABILITY:
            factor = cosmetic.uniform(*config.Atmosphere.RADIUS_FACTOR_RANGE)
            self.atmosphere = Atmosphere(cosmetic.choice(config.Atmosphere.PLANET_COLORS), self.radius * factor)

        self.orbit: Optional[OrbitalState] = None
        self.parent_name: Optional[str] = None
        self.elapsed = 0.0

        if config.Debug.SURFACE_GENERATION:
            logging.debug(f"Created {self.body_type.value} '{name}' (seed {self.seed}, "
                          f"{len(self.animated_features)} animated features).")

    def __repr__(self):
        return f"CelestialBody(name={self.name!r}, type={self.body_type.value}, position={self._position.tolist()})"

    @property
    def position(self) -> np.ndarray:
        """Current world position (a copy)."""
        return self._position.copy()

    @property
    def in_orbit(self) -> bool:
        return self.orbit is not None

    def enter_orbit(self, parent_position, periapsis: float, parent_mass: float, start_angle: float = 0.0,
                    eccentricity: float = 0.0, parent_name: str = None) -> OrbitalState:
        """Puts the body on an orbit around `parent_position` and moves it there.

        Raises:
            PhysicsError: Propagated from `OrbitalMechanics.enter_orbit` for
                impossible orbits.
        """
        self.orbit = self._mechanics.enter_orbit(parent_position, periapsis, parent_mass, start_angle, eccentricity)
        self.parent_name = parent_name
        self._position = self.orbit.position.copy()
        return self.orbit

    def restore_orbit(self, elements: OrbitalElements, parent_position) -> OrbitalState:
        """Re-enters an orbit saved with `orbital_elements`."""
        return self.enter_orbit(parent_position, elements.periapsis, elements.parent_mass,
                                elements.mean_anomaly, elements.eccentricity, elements.parent_name)

    def orbital_elements(self) -> Optional[OrbitalElements]:
        if self.orbit is None:
            return None
        return self.orbit.to_elements(self.parent_name)

    def orbit_path(self, points: int = None) -> Optional[np.ndarray]:
        if self.orbit is None:
            return None
        return self._mechanics.orbit_path(self.orbit, points)

    def update(self, dt: float, parent_position=None):
        """Advances spin, orbit and animated features by `dt` seconds.

        Rotation always advances. Bodies without an orbit keep their position.
        `parent_position`, when given, is the parent's position already
        committed for this tick.
        """
        self.rotation += self.rotation_speed * dt * config.Orbit.TIME_SCALE
        if self.orbit is not None:
            self._position = self._mechanics.advance(self.orbit, dt, parent_position).copy()
        self.elapsed += dt
        self._animate_features()

    def _animate_features(self):
        features = config.Features
        for index in range(len(self.animated_features)):
            feature = self.animated_features[index]
            swing = math.sin(self.elapsed * features.PULSE_RATE + feature.center_x) * features.PULSE_AMPLITUDE
            feature.size = max(features.MIN_ANIMATED_SIZE, feature.base_size + swing)

    # --- Read-only grid access for renderers ---

    @property
    def resolution(self) -> int:
        return self.surface.resolution

    @property
    def colors(self) -> np.ndarray:
        return self.surface.colors

    @property
    def elevation(self) -> np.ndarray:
        return self.surface.elevation

    @property
    def normals(self) -> np.ndarray:
        return self.surface.normals

    @property
    def shadow(self) -> np.ndarray:
        return self.surface.shadow

    def _check_cell(self, x: int, y: int):
        if not (0 <= x < self.resolution and 0 <= y < self.resolution):
            raise IndexError(f"Cell ({x}, {y}) is outside the {self.resolution}x{self.resolution} grid of '{self.name}'.")

    def surface_cell(self, x: int, y: int) -> SurfaceCell:
        """Shaded color and elevation of grid cell (x, y), as a renderer draws it."""
        self._check_cell(x, y)
        color = tuple(int(c) for c in self.surface.colors[x, y])
        return SurfaceCell(color, float(self.surface.elevation[x, y]))

    def albedo_cell(self, x: int, y: int) -> Tuple[int, int, int]:
        """Unlit color of grid cell (x, y)."""
        self._check_cell(x, y)
        return tuple(int(c) for c in self.surface.albedo[x, y])

    def normal_cell(self, x: int, y: int) -> Tuple[float, float, float]:
        self._check_cell(x, y)
        return tuple(float(c) for c in self.surface.normals[x, y])

    def shadow_cell(self, x: int, y: int) -> float:
        self._check_cell(x, y)
        return float(self.surface.shadow[x, y])

    def is_cell_visible(self, x: int, y: int) -> bool:
        self._check_cell(x, y)
        return bool(self.surface.visible[x, y])

class StarSystem:
    """A seeded system: one central star, planets, their moons and an optional asteroid belt.

    Every size, distance, angle, eccentricity and color comes from the
    system's `DeterministicRandom`, so the same (name, seed) pair always
    yields the same layout. Bodies are stored parent before child, which is
    the order `update` advances them in.
    """

    def __init__(self, name: str = None, seed: int = None, resolution: int = None,
                 cosmetic_rng: random.Random = None):
        self.name = name if name is not None else config.StarSystem.DEFAULT_NAME
        self.seed = seed if seed is not None else config.StarSystem.DEFAULT_SEED
        self.resolution = resolution
        self.cosmetic_rng = cosmetic_rng
        self.mechanics = OrbitalMechanics()

        self._bodies: List[CelestialBody] = []
        self._by_name: Dict[str, CelestialBody] = {}
        self.star: CelestialBody = None
        self.generate()

    def _add(self, body: CelestialBody) -> CelestialBody:
        if body.name in self._by_name:
            raise ValueError(f"Duplicate body name '{body.name}' in system '{self.name}'.")
        self._bodies.append(body)
        self._by_name[body.name] = body
        return body

    def _make_body(self, name, body_type, radius, mass, color, position=(0.0, 0.0)) -> CelestialBody:
        return CelestialBody(name, body_type, radius, mass, color, position, self.cosmetic_rng,
                             self.resolution, self.mechanics)

    def generate(self):
        """Builds the whole system from the seed. Called once by the constructor."""
        settings = config.StarSystem
        rng = DeterministicRandom(self.seed)

        star_mass = rng.next_float(*settings.STAR_MASS_RANGE)
        star_radius = rng.next_float(*settings.STAR_RADIUS_RANGE)
        self.star = self._add(self._make_body(self.name, CelestialBodyType.STAR, star_radius, star_mass,
                                              rng.choose(settings.STAR_COLORS)))

        planet_count = rng.next_int(*settings.PLANET_COUNT_RANGE)
        distance = settings.FIRST_ORBIT_DISTANCE
        moon_total = 0
        for i in range(planet_count):
            distance += rng.next_float(*settings.ORBIT_SPACING_RANGE)
            planet_radius = rng.next_float(*settings.PLANET_RADIUS_RANGE)
            planet = self._add(self._make_body(f"{self.name}-{i + 1}", CelestialBodyType.PLANET, planet_radius,
                                               planet_radius * settings.PLANET_MASS_PER_RADIUS,
                                               rng.choose(settings.PLANET_COLORS)))
            start_angle = rng.next_float(0.0, 2.0 * math.pi)
            eccentricity = rng.next_float(0.0, settings.PLANET_MAX_ECCENTRICITY)
            planet.enter_orbit(self.star.position, distance, self.star.mass, start_angle, eccentricity,
                               parent_name=self.star.name)

            if planet_radius > settings.MOON_MIN_PLANET_RADIUS and rng.next() < settings.MOON_PROBABILITY:
                moon_count = rng.next_int(*settings.MOON_COUNT_RANGE)
                for j in range(moon_count):
                    moon_distance = planet_radius * settings.MOON_ORBIT_RADIUS_FACTOR + j * settings.MOON_ORBIT_SPACING
                    moon_radius = rng.next_float(*settings.MOON_RADIUS_RANGE)
                    moon = self._add(self._make_body(f"{planet.name}-M{j + 1}", CelestialBodyType.MOON, moon_radius,
                                                     moon_radius * settings.MOON_MASS_PER_RADIUS,
                                                     rng.choose(settings.MOON_COLORS)))
                    start_angle = rng.next_float(0.0, 2.0 * math.pi)
                    eccentricity = rng.next_float(0.0, settings.MOON_MAX_ECCENTRICITY)
                    moon.enter_orbit(planet.position, moon_distance, planet.mass, start_angle, eccentricity,
                                     parent_name=planet.name)
                    moon_total += 1

        asteroid_total = 0
        if rng.next() < settings.BELT_PROBABILITY:
            belt_distance = distance + rng.next_float(*settings.BELT_OFFSET_RANGE)
            asteroid_total = rng.next_int(*settings.ASTEROID_COUNT_RANGE)
            for i in range(asteroid_total):
                asteroid_distance = belt_distance + rng.next_float(-0.5, 0.5) * settings.BELT_SPREAD
                asteroid_radius = rng.next_float(*settings.ASTEROID_RADIUS_RANGE)
                asteroid = self._add(self._make_body(f"{self.name}-A{i + 1}", CelestialBodyType.ASTEROID,
                                                     asteroid_radius,
                                                     asteroid_radius * settings.ASTEROID_MASS_PER_RADIUS,
                                                     rng.choose(settings.ASTEROID_COLORS)))
                start_angle = rng.next_float(0.0, 2.0 * math.pi)
                eccentricity = rng.next_float(0.0, settings.ASTEROID_MAX_ECCENTRICITY)
                asteroid.enter_orbit(self.star.position, asteroid_distance, self.star.mass, start_angle,
                                     eccentricity, parent_name=self.star.name)

        logging.info(f"Generated star system '{self.name}' (seed {self.seed}): {planet_count} planets, "
                     f"{moon_total} moons, {asteroid_total} asteroids.")

    @property
    def bodies(self) -> List[CelestialBody]:
        return list(self._bodies)

    def get_body(self, name: str) -> Optional[CelestialBody]:
        return self._by_name.get(name)

    def children_of(self, name: str) -> List[CelestialBody]:
        return [body for body in self._bodies if body.parent_name == name]

    def update(self, dt: float):
        """Advances every body by `dt` seconds, clamped to `config.Simulation.MAX_DELTA_TIME`.

        Parents come before their children in `bodies`, so each child orbits
        the position its parent committed earlier in the same tick.
        """
        dt = clamp(dt, 0.0, config.Simulation.MAX_DELTA_TIME)
        for body in self._bodies:
            parent = self._by_name.get(body.parent_name) if body.parent_name else None
            body.update(dt, parent.position if parent is not None else None)
