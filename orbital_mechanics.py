# orbital_mechanics.py
import math
import logging
from dataclasses import dataclass, field, asdict
from typing import Optional, Tuple, Dict, Any

import numpy as np

from config import config
from physics_utils import PhysicsError, clamp, wrap_angle, TWO_PI


@dataclass(frozen=True)
class OrbitalElements:
    """The scalars a save subsystem stores per body to reproduce its motion exactly."""
    parent_name: Optional[str]
    periapsis: float
    eccentricity: float
    mean_anomaly: float
    parent_mass: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OrbitalElements':
        return cls(
            parent_name=data.get('parent_name'),
            periapsis=float(data['periapsis']),
            eccentricity=float(data['eccentricity']),
            mean_anomaly=float(data['mean_anomaly']),
            parent_mass=float(data['parent_mass']),
        )


@dataclass
class OrbitalState:
    """Two-body elliptical orbit around a parent, in world units.

    Invariants maintained by `OrbitalMechanics`:
    `semi_major_axis == periapsis / (1 - eccentricity)`,
    `apoapsis == semi_major_axis * (1 + eccentricity)`,
    `mean_motion == sqrt(G * parent_mass / semi_major_axis**3)` and
    `0 <= mean_anomaly < 2*pi`. The trailing fields cache the last solve.
    """
    parent_position: np.ndarray
    eccentricity: float
    semi_major_axis: float
    periapsis: float
    apoapsis: float
    mean_anomaly: float
    mean_motion: float
    parent_mass: float
    eccentric_anomaly: float = 0.0
    true_anomaly: float = 0.0
    radius: float = 0.0
    position: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float64))

    def __post_init__(self):
        self.parent_position = np.array(self.parent_position, dtype=np.float64)
        self.position = np.array(self.position, dtype=np.float64)

    def to_elements(self, parent_name: Optional[str] = None) -> OrbitalElements:
        return OrbitalElements(
            parent_name=parent_name,
            periapsis=self.periapsis,
            eccentricity=self.eccentricity,
            mean_anomaly=self.mean_anomaly,
            parent_mass=self.parent_mass,
        )


def solve_kepler_equation(mean_anomaly: float, eccentricity: float, iterations: int = None) -> float:
    """
    Solves Kepler's equation E - e*sin(E) = M for the eccentric anomaly E.

    Runs a fixed number of Newton-Raphson steps seeded with E0 = M. The cost is
    bounded per call; for e <= 0.95 five steps give game-level precision. The
    derivative 1 - e*cos(E) is at least 1 - e > 0, so no step divides by zero.

    Args:
        mean_anomaly: Mean anomaly M in radians.
        eccentricity: Eccentricity e in [0, 1).
        iterations: Number of Newton steps. Defaults to `config.Orbit.KEPLER_ITERATIONS`.

    Returns:
        Eccentric anomaly E in radians.
    """
    if iterations is None:
        iterations = config.Orbit.KEPLER_ITERATIONS
    eccentric_anomaly = mean_anomaly
    for _ in range(iterations):
        residual = eccentric_anomaly - eccentricity * math.sin(eccentric_anomaly) - mean_anomaly
        eccentric_anomaly -= residual / (1.0 - eccentricity * math.cos(eccentric_anomaly))
    return eccentric_anomaly


def true_anomaly_from_eccentric(eccentric_anomaly: float, eccentricity: float) -> float:
    """Angle from periapsis as seen from the parent, in (-pi, pi]."""
    return 2.0 * math.atan2(
        math.sqrt(1.0 + eccentricity) * math.sin(eccentric_anomaly / 2.0),
        math.sqrt(1.0 - eccentricity) * math.cos(eccentric_anomaly / 2.0),
    )


class OrbitalMechanics:
    """Builds and advances `OrbitalState` instances.

    Holds only constants (G, iteration count, time scale); all mutable orbit
    data lives in the state objects, one per body.
    """

    def __init__(self, gravitational_constant: float = None, kepler_iterations: int = None,
                 time_scale: float = None):
        self.gravitational_constant = (config.Orbit.GRAVITATIONAL_CONSTANT
                                       if gravitational_constant is None else float(gravitational_constant))
        self.kepler_iterations = (config.Orbit.KEPLER_ITERATIONS
                                  if kepler_iterations is None else int(kepler_iterations))
        self.time_scale = config.Orbit.TIME_SCALE if time_scale is None else float(time_scale)

    @staticmethod
    def clamp_eccentricity(eccentricity: float) -> float:
        """Clamps into [0, MAX_ECCENTRICITY]. Out-of-range input is a caller defect, but play goes on."""
        if not math.isfinite(eccentricity):
            raise PhysicsError(f"Eccentricity must be finite, got {eccentricity}.")
        max_e = config.Orbit.MAX_ECCENTRICITY
        clamped = clamp(eccentricity, 0.0, max_e)
        if clamped != eccentricity:
            logging.warning(f"Eccentricity {eccentricity} outside [0, {max_e}]; clamped to {clamped}.")
        return clamped

    def mean_motion(self, parent_mass: float, semi_major_axis: float) -> float:
        return math.sqrt(self.gravitational_constant * parent_mass / semi_major_axis ** 3)

    def enter_orbit(self, parent_position, periapsis: float, parent_mass: float,
                    start_angle: float = 0.0, eccentricity: float = 0.0) -> OrbitalState:
        """
        Creates an orbit whose closest approach to the parent is `periapsis`.

        Args:
            parent_position: (x, y) of the parent, copied into the state.
            periapsis: Periapsis distance in world units. Must be positive.
            parent_mass: Parent mass in game units. Must be non-negative; zero
                gives a body parked on its orbit.
            start_angle: Initial mean anomaly in radians; wrapped into [0, 2*pi).
            eccentricity: Clamped into [0, config.Orbit.MAX_ECCENTRICITY].

        Returns:
            OrbitalState: The new state, already solved for its initial position.

        Raises:
            PhysicsError: If periapsis or parent mass cannot describe an ellipse.
        """
        if not math.isfinite(periapsis) or periapsis <= 0:
            raise PhysicsError(f"Periapsis must be a positive finite distance, got {periapsis}.")
        if not math.isfinite(parent_mass) or parent_mass < 0:
            raise PhysicsError(f"Parent mass must be a non-negative finite value, got {parent_mass}.")
        if not math.isfinite(start_angle):
            raise PhysicsError(f"Start angle must be finite, got {start_angle}.")

        e = self.clamp_eccentricity(eccentricity)
        semi_major_axis = periapsis / (1.0 - e)
        state = OrbitalState(
            parent_position=parent_position,
            eccentricity=e,
            semi_major_axis=semi_major_axis,
            periapsis=float(periapsis),
            apoapsis=semi_major_axis * (1.0 + e),
            mean_anomaly=wrap_angle(start_angle),
            mean_motion=self.mean_motion(parent_mass, semi_major_axis),
            parent_mass=float(parent_mass),
        )
        self.solve(state)

        if config.Debug.ORBITAL_MECHANICS:
            logging.debug(f"Entered orbit: a={state.semi_major_axis:.3f}, e={state.eccentricity:.3f}, "
                          f"n={state.mean_motion:.6f} rad/frame, M0={state.mean_anomaly:.4f}")
        return state

    def from_elements(self, elements: OrbitalElements, parent_position) -> OrbitalState:
        """Rebuilds the state saved by `OrbitalState.to_elements`."""
        return self.enter_orbit(parent_position, elements.periapsis, elements.parent_mass,
                                elements.mean_anomaly, elements.eccentricity)

    def position_at(self, state: OrbitalState, mean_anomaly: float) -> Tuple[np.ndarray, float, float, float]:
        """
        Pure position query for an arbitrary mean anomaly.

        Returns:
            Tuple of (world position, radius, eccentric anomaly, true anomaly).
        """
        e = state.eccentricity
        eccentric_anomaly = solve_kepler_equation(mean_anomaly, e, self.kepler_iterations)
        nu = true_anomaly_from_eccentric(eccentric_anomaly, e)
        radius = state.semi_major_axis * (1.0 - e * math.cos(eccentric_anomaly))
        position = state.parent_position + radius * np.array([math.cos(nu), math.sin(nu)])
        return position, radius, eccentric_anomaly, nu

    def solve(self, state: OrbitalState) -> np.ndarray:
        """Recomputes the cached anomalies, radius and position from the mean anomaly."""
        position, radius, eccentric_anomaly, nu = self.position_at(state, state.mean_anomaly)
        state.position = position
        state.radius = radius
        state.eccentric_anomaly = eccentric_anomaly
        state.true_anomaly = nu
        return position

    def advance(self, state: OrbitalState, dt: float, parent_position=None) -> np.ndarray:
        """
        Moves the body along its orbit by `dt` seconds.

        Args:
            state: The orbit to advance in place.
            dt: Elapsed time in seconds, scaled by `time_scale`.
            parent_position: The parent's committed position for this tick. When
                given, the orbit is re-anchored on it before solving.

        Returns:
            np.ndarray: The new world position.
        """
        state.mean_anomaly = wrap_angle(state.mean_anomaly + state.mean_motion * dt * self.time_scale)
        if parent_position is not None:
            state.parent_position = np.array(parent_position, dtype=np.float64)
        return self.solve(state)

    def orbital_period(self, state: OrbitalState) -> float:
        """Seconds for one revolution, or infinity for a massless parent."""
        if state.mean_motion == 0.0:
            return math.inf
        return TWO_PI / (state.mean_motion * self.time_scale)

    def orbit_path(self, state: OrbitalState, points: int = None) -> np.ndarray:
        """Samples the closed ellipse uniformly in eccentric anomaly.

        Returns:
            np.ndarray: (points, 2) world coordinates, starting at periapsis.
        """
        if points is None:
            points = config.Orbit.ORBIT_PATH_POINTS
        if points < 3:
            raise ValueError(f"An orbit path needs at least 3 points, got {points}.")
        e = state.eccentricity
        eccentric = np.linspace(0.0, TWO_PI, points, endpoint=False)
        radius = state.semi_major_axis * (1.0 - e * np.cos(eccentric))
        nu = 2.0 * np.arctan2(np.sqrt(1.0 + e) * np.sin(eccentric / 2.0),
                              np.sqrt(1.0 - e) * np.cos(eccentric / 2.0))
        offsets = np.stack([radius * np.cos(nu), radius * np.sin(nu)], axis=-1)
        return state.parent_position + offsets
