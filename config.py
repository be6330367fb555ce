# config.py
import numpy as np
import logging

# Configure basic logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(module)s - %(message)s')

# Fundamental constants shared by several sections
MAX_COLOR_CHANNEL = 255.0

class ConfigurationError(Exception):
    """Custom exception for generator and simulation configuration errors.

    Raised by `SimulationConfig.validate()` when settings are invalid,
    inconsistent or missing, which would otherwise surface later as broken
    textures or unstable orbits.

    Attributes:
        message (str): A human-readable explanation of the configuration error.
                       This is the first argument passed to the exception constructor.
    """
    pass

class SimulationConfig:
    """Centralized, hierarchical configuration for celestial body generation and motion.

    All tunables live in nested static classes (`SimulationConfig.Surface`,
    `SimulationConfig.Lighting`, `SimulationConfig.Orbit`, ...). An instance
    named `config` is created at the end of this module, making it globally
    available via `from config import config`.

    The constructor invokes `validate()`, which checks every section for
    logical consistency and raises `ConfigurationError` on the first problem.

    Example Usage:
        >>> from config import config
        >>> print(f"Texture resolution: {config.Surface.RESOLUTION}")
        >>> print(f"Kepler iterations: {config.Orbit.KEPLER_ITERATIONS}")
    """

    # --- Surface Configuration ---
    class Surface:
        """Configuration for the base texture of every body.

        Attributes:
            RESOLUTION (int): Edge length of the square surface grid, in cells.
            OCTAVE_FREQUENCIES (Tuple[float, ...]): Spatial frequency (per cell) of
                each noise octave, coarse to fine.
            OCTAVE_WEIGHTS (Tuple[float, ...]): Amplitude of each octave. Must sum to 1
                so the octave sum stays within [-1, 1].
            COLOR_JITTER (float): Maximum absolute per-channel color offset applied to
                each cell (10% of 255).
            BASE_ELEVATION_SCALE (float): Baseline elevation is this factor times the
                normalized noise value.
            ELEVATION_RANGE (Tuple[float, float]): Documented bounds that elevation is
                clamped to after every feature stamp.
            PALETTES (Dict[str, List[Tuple[int, int, int]]]): Ordered base color
                anchors per body type, indexed by normalized noise.
        """
        RESOLUTION = 64
        OCTAVE_FREQUENCIES = (0.05, 0.11, 0.23)
        OCTAVE_WEIGHTS = (0.5, 0.3, 0.2)
        COLOR_JITTER = 25.5
        BASE_ELEVATION_SCALE = 0.3
        ELEVATION_RANGE = (-1.0, 1.0)

        PALETTES = {
            'star': [
                (255, 255, 200),  # White hot
                (255, 220, 150),  # Yellow
                (255, 180, 100),  # Orange
                (255, 140, 80),   # Red-orange
                (255, 100, 60),   # Deep red
            ],
            'planet': [
                (100, 150, 200),  # Ocean blue
                (120, 180, 120),  # Forest green
                (180, 140, 100),  # Desert tan
                (140, 120, 100),  # Rocky brown
                (200, 200, 200),  # Ice white
                (150, 100, 80),   # Mountain gray-brown
                (200, 120, 80),   # Volcanic red-orange
            ],
            'moon': [
                (180, 180, 170),  # Light gray
                (150, 150, 140),  # Medium gray
                (120, 120, 110),  # Dark gray
                (100, 100, 90),   # Very dark gray
                (140, 130, 120),  # Brownish gray
            ],
            'asteroid': [
                (80, 70, 60),     # Dark rock
                (120, 110, 100),  # Light rock
                (150, 130, 100),  # Iron-rich
                (100, 90, 80),    # Carbon-rich
                (160, 140, 120),  # Silicate
            ],
        }

    # --- Surface Feature Configuration ---
    class Features:
        """Configuration for discrete features stamped onto the base texture.

        Attributes:
            COUNT_RANGE (Tuple[int, int]): Inclusive range for the number of features
                per body.
            SIZE_RANGE (Tuple[float, float]): Feature diameter range in cells. The
                lower bound must be at least 3 so the falloff radius is never zero.
            INTENSITY_RANGE (Tuple[float, float]): Range of the strength multiplier.
            KINDS (Dict[str, Tuple[str, ...]]): Feature kinds available per body type.
            EFFECTS (Dict[str, Dict]): Per-kind full-strength color delta (RGB) and
                elevation delta. Scaled by falloff times intensity when stamped.
            ANIMATED_KINDS (Dict[str, Tuple[str, ...]]): Kinds kept after generation so
                the body can pulse them every tick.
            PULSE_AMPLITUDE (float): Size swing of an animated feature, in cells.
            PULSE_RATE (float): Angular rate of the pulse, radians per simulated second.
            MIN_ANIMATED_SIZE (float): Animated features never shrink below this size.
        """
        COUNT_RANGE = (5, 20)
        SIZE_RANGE = (3.0, 15.0)
        INTENSITY_RANGE = (0.3, 1.0)

        KINDS = {
            'planet': ('mountain', 'crater', 'valley', 'plateau', 'rift'),
            'moon': ('crater', 'ridge', 'basin'),
            'star': ('sunspot', 'flare', 'granule', 'prominence'),
            'asteroid': ('crater', 'boulder', 'fracture', 'metal_deposit'),
        }

        EFFECTS = {
            'crater':        {'color': (-45.0, -45.0, -45.0), 'elevation': -0.15},
            'mountain':      {'color': (35.0, 32.0, 28.0),    'elevation': 0.20},
            'valley':        {'color': (-20.0, -15.0, -10.0), 'elevation': -0.10},
            'plateau':       {'color': (15.0, 12.0, 8.0),     'elevation': 0.10},
            'rift':          {'color': (-35.0, -30.0, -25.0), 'elevation': -0.20},
            'ridge':         {'color': (20.0, 20.0, 20.0),    'elevation': 0.12},
            'basin':         {'color': (-30.0, -30.0, -25.0), 'elevation': -0.12},
            # Sunspots only darken, and green/blue fall faster than red
            'sunspot':       {'color': (-20.0, -60.0, -80.0), 'elevation': 0.0},
            'flare':         {'color': (30.0, 25.0, 0.0),     'elevation': 0.0},
            'granule':       {'color': (15.0, 10.0, 0.0),     'elevation': 0.0},
            'prominence':    {'color': (35.0, 10.0, -10.0),   'elevation': 0.0},
            'boulder':       {'color': (20.0, 18.0, 15.0),    'elevation': 0.15},
            'fracture':      {'color': (-30.0, -30.0, -30.0), 'elevation': -0.08},
            'metal_deposit': {'color': (35.0, 35.0, 40.0),    'elevation': 0.03},
        }

        ANIMATED_KINDS = {
            'star': ('sunspot', 'flare', 'prominence'),
        }
        PULSE_AMPLITUDE = 2.0
        PULSE_RATE = 1.0
        MIN_ANIMATED_SIZE = 3.0

    # --- Lighting Configuration ---
    class Lighting:
        """Configuration for the per-cell lighting model.

        Attributes:
            LIGHT_DIRECTION (Tuple[float, float, float]): Direction towards the light in
                grid space (x right, y down, z towards the viewer). Normalized on use.
                The default points to the upper right at roughly 45 degrees.
            AMBIENT (float): Light level received by every on-sphere cell.
            DIFFUSE_STRENGTH (float): Multiplier of the Lambert term.
            BUMP_SCALE (float): Fraction of the elevation gradient added to the normal.
            TERMINATOR_SLOPE (float): Weight of `nx` in the terminator factor.
            TERMINATOR_OFFSET (float): Constant term of the terminator factor.
            LIMB_FLOOR (float): Lower bound of the limb-darkening factor.
            VISIBILITY_NZ_THRESHOLD (float): Cells with `nz` at or below this face away
                from the viewer and are not drawn.
        """
        LIGHT_DIRECTION = (1.0, -1.0, 1.4142135623730951)
        AMBIENT = 0.2
        DIFFUSE_STRENGTH = 0.8
        BUMP_SCALE = 0.1
        TERMINATOR_SLOPE = 0.7
        TERMINATOR_OFFSET = 0.3
        LIMB_FLOOR = 0.3
        VISIBILITY_NZ_THRESHOLD = 0.1

    # --- Orbit Configuration ---
    class Orbit:
        """Configuration for two-body Keplerian motion at game scale.

        Attributes:
            GRAVITATIONAL_CONSTANT (float): Tuned G so that angular speeds feel right in
                world units. Not SI.
            MAX_ECCENTRICITY (float): Eccentricity is clamped to [0, MAX_ECCENTRICITY].
            KEPLER_ITERATIONS (int): Fixed number of Newton-Raphson steps per solve.
            TIME_SCALE (float): Multiplier applied to `dt` (seconds) before advancing
                the mean anomaly and the spin; normalizes to 60 frames per second.
            ORBIT_PATH_POINTS (int): Default number of samples for orbit outlines.
        """
        GRAVITATIONAL_CONSTANT = 0.0008
        MAX_ECCENTRICITY = 0.95
        KEPLER_ITERATIONS = 5
        TIME_SCALE = 60.0
        ORBIT_PATH_POINTS = 128

    # --- Rotation Configuration ---
    class Rotation:
        """Configuration for body spin.

        Attributes:
            SPEED_RANGE (Tuple[float, float]): Spin speed range in radians per
                normalized frame, drawn from cosmetic (non-seeded) randomness.
        """
        SPEED_RANGE = (0.0005, 0.0015)

    # --- Atmosphere Configuration ---
    class Atmosphere:
        """Configuration for cosmetic planet atmospheres.

        Attributes:
            PROBABILITY (float): Chance that a planet gets an atmosphere.
            RADIUS_FACTOR_RANGE (Tuple[float, float]): Atmosphere radius as a multiple
                of the body radius.
            PLANET_COLORS (List[Tuple[int, int, int, float]]): RGBA choices for planets.
        """
        PROBABILITY = 0.6
        RADIUS_FACTOR_RANGE = (1.15, 1.45)
        PLANET_COLORS = [
            (135, 206, 235, 0.3),  # Earth-like blue
            (255, 165, 0, 0.2),    # Mars-like orange
            (255, 255, 224, 0.25), # Venus-like yellow
            (138, 43, 226, 0.2),   # Exotic purple
            (0, 255, 127, 0.2),    # Alien green
        ]

    # --- Star System Generation Configuration ---
    class StarSystem:
        """Configuration for the seeded star system generator.

        Distances and radii are world units; masses are game units consumed by
        `Orbit.GRAVITATIONAL_CONSTANT`.

        Attributes:
            DEFAULT_NAME (str): System (and central star) name used by the CLI.
            DEFAULT_SEED (int): System seed used by the CLI.
            STAR_MASS_RANGE, STAR_RADIUS_RANGE (Tuple[float, float]): Central star.
            PLANET_COUNT_RANGE (Tuple[int, int]): Inclusive planet count range.
            FIRST_ORBIT_DISTANCE (float): Distance before the first spacing is added.
            ORBIT_SPACING_RANGE (Tuple[float, float]): Gap added before each planet.
            PLANET_RADIUS_RANGE (Tuple[float, float]): Planet radius range.
            PLANET_MASS_PER_RADIUS (float): Planet mass is radius times this factor.
            PLANET_MAX_ECCENTRICITY (float): Upper bound of planet eccentricity.
            MOON_MIN_PLANET_RADIUS (float): Only planets larger than this get moons.
            MOON_PROBABILITY (float): Chance that an eligible planet gets moons.
            MOON_COUNT_RANGE (Tuple[int, int]): Inclusive moon count range.
            MOON_ORBIT_RADIUS_FACTOR (float): First moon periapsis in planet radii.
            MOON_ORBIT_SPACING (float): Extra periapsis per additional moon.
            MOON_RADIUS_RANGE (Tuple[float, float]): Moon radius range.
            MOON_MASS_PER_RADIUS (float): Moon mass is radius times this factor.
            MOON_MAX_ECCENTRICITY (float): Upper bound of moon eccentricity.
            BELT_PROBABILITY (float): Chance that the system has an asteroid belt.
            BELT_OFFSET_RANGE (Tuple[float, float]): Belt distance beyond the last planet.
            BELT_SPREAD (float): Full radial width of the belt.
            ASTEROID_COUNT_RANGE (Tuple[int, int]): Inclusive asteroid count range.
            ASTEROID_RADIUS_RANGE (Tuple[float, float]): Asteroid radius range.
            ASTEROID_MASS_PER_RADIUS (float): Asteroid mass is radius times this factor.
            ASTEROID_MAX_ECCENTRICITY (float): Upper bound of asteroid eccentricity.
            STAR_COLORS, PLANET_COLORS, MOON_COLORS, ASTEROID_COLORS
                (List[Tuple[int, int, int]]): Base color choices per body type.
        """
        DEFAULT_NAME = 'Sol'
        DEFAULT_SEED = 12345

        STAR_MASS_RANGE = (800.0, 1200.0)
        STAR_RADIUS_RANGE = (120.0, 200.0)

        PLANET_COUNT_RANGE = (2, 7)
        FIRST_ORBIT_DISTANCE = 400.0
        ORBIT_SPACING_RANGE = (200.0, 600.0)
        PLANET_RADIUS_RANGE = (32.0, 92.0)
        PLANET_MASS_PER_RADIUS = 2.0
        PLANET_MAX_ECCENTRICITY = 0.3

        MOON_MIN_PLANET_RADIUS = 20.0
        MOON_PROBABILITY = 0.6
        MOON_COUNT_RANGE = (1, 3)
        MOON_ORBIT_RADIUS_FACTOR = 6.0
        MOON_ORBIT_SPACING = 80.0
        MOON_RADIUS_RANGE = (12.0, 32.0)
        MOON_MASS_PER_RADIUS = 1.0
        MOON_MAX_ECCENTRICITY = 0.15

        BELT_PROBABILITY = 0.7
        BELT_OFFSET_RANGE = (300.0, 700.0)
        BELT_SPREAD = 240.0
        ASTEROID_COUNT_RANGE = (15, 39)
        ASTEROID_RADIUS_RANGE = (8.0, 24.0)
        ASTEROID_MASS_PER_RADIUS = 0.5
        ASTEROID_MAX_ECCENTRICITY = 0.5

        STAR_COLORS = [
            (255, 215, 0),    # G-type (Yellow like our Sun)
            (255, 107, 71),   # K-type (Orange)
            (255, 68, 68),    # M-type (Red dwarf)
            (135, 206, 235),  # B-type (Blue)
            (255, 255, 255),  # O-type (White/Blue)
            (255, 165, 0),    # Orange giant
            (255, 228, 181),  # Warm yellow
        ]
        PLANET_COLORS = [
            (65, 105, 225), (205, 133, 63), (139, 69, 19), (34, 139, 34),
            (220, 20, 60), (147, 112, 219), (255, 99, 71), (70, 130, 180),
            (221, 160, 221), (50, 205, 50), (255, 140, 0), (138, 43, 226),
        ]
        MOON_COLORS = [
            (192, 192, 192), (139, 115, 85), (105, 105, 105), (160, 82, 45), (188, 143, 143),
        ]
        ASTEROID_COLORS = [
            (210, 105, 30), (244, 164, 96), (112, 128, 144), (119, 136, 153), (184, 134, 11),
        ]

    # --- Simulation Loop Configuration ---
    class Simulation:
        """Configuration for the per-tick driver.

        Attributes:
            DEFAULT_TICK_SECONDS (float): Tick length used by the CLI.
            MAX_DELTA_TIME (float): `StarSystem.update` clamps `dt` to this value so a
                stalled frame cannot fling bodies around their orbits.
        """
        DEFAULT_TICK_SECONDS = 1.0 / 60.0
        MAX_DELTA_TIME = 0.1

    # --- Debug Configuration ---
    class Debug:
        """Configuration for debugging features and logging verbosity.

        Attributes:
            ORBITAL_MECHANICS (bool): Toggle for verbose logging when bodies enter orbit.
            SURFACE_GENERATION (bool): Toggle for per-body surface generation details.
            CONFIG_VALIDATION (bool): If True, logs a message once validation passes.
        """
        ORBITAL_MECHANICS = False
        SURFACE_GENERATION = False
        CONFIG_VALIDATION = True

    def __init__(self):
        """Initializes the `SimulationConfig` instance and validates it.

        Raises:
            ConfigurationError: If `self.validate()` detects any issue with the
                                configuration values.
        """
        self.validate()

    @staticmethod
    def _check_range(name, value_range, allow_negative=False):
        low, high = value_range
        if low > high:
            raise ConfigurationError(f"{name} lower bound ({low}) exceeds upper bound ({high}).")
        if not allow_negative and low < 0:
            raise ConfigurationError(f"{name} ({value_range}) must not be negative.")

    def validate(self):
        """Performs validation of all configuration settings.

        Checks, per section:
        -   **Surface**: positive resolution, matching octave frequency/weight
            counts, weights summing to 1, ordered elevation range, 4-7 anchors
            per palette with channels in [0, 255].
        -   **Features**: ordered ranges, minimum size of 3 cells, every kind
            used by a body type has an effect, animated kinds are a subset of
            the body type's kinds.
        -   **Lighting**: non-zero light direction, non-negative terms.
        -   **Orbit**: positive G, eccentricity limit in [0, 1), at least one
            Kepler iteration, positive time scale.
        -   **StarSystem / Atmosphere / Simulation**: ordered ranges,
            probabilities in [0, 1], positive tick limits.

        Raises:
            ConfigurationError: If any configuration setting is found to be invalid.
        """
        # Surface validation
        if not isinstance(self.Surface.RESOLUTION, int) or self.Surface.RESOLUTION < 3:
            raise ConfigurationError("Surface.RESOLUTION must be an integer of at least 3.")
        if len(self.Surface.OCTAVE_FREQUENCIES) != len(self.Surface.OCTAVE_WEIGHTS):
            raise ConfigurationError("Surface.OCTAVE_FREQUENCIES and OCTAVE_WEIGHTS must have the same length.")
        if not (2 <= len(self.Surface.OCTAVE_WEIGHTS) <= 4):
            raise ConfigurationError("Surface noise must use between 2 and 4 octaves.")
        if any(f <= 0 for f in self.Surface.OCTAVE_FREQUENCIES):
            raise ConfigurationError("All Surface.OCTAVE_FREQUENCIES must be positive.")
        if any(w < 0 for w in self.Surface.OCTAVE_WEIGHTS) or not np.isclose(sum(self.Surface.OCTAVE_WEIGHTS), 1.0):
            raise ConfigurationError(
                f"Surface.OCTAVE_WEIGHTS {self.Surface.OCTAVE_WEIGHTS} must be non-negative and sum to 1."
            )
        if not (0 <= self.Surface.COLOR_JITTER <= MAX_COLOR_CHANNEL):
            raise ConfigurationError("Surface.COLOR_JITTER must be between 0 and 255.")
        self._check_range("Surface.ELEVATION_RANGE", self.Surface.ELEVATION_RANGE, allow_negative=True)
        low_elev, high_elev = self.Surface.ELEVATION_RANGE
        if not (low_elev <= 0.0 and self.Surface.BASE_ELEVATION_SCALE <= high_elev):
            raise ConfigurationError("Surface.ELEVATION_RANGE must contain the baseline elevation range.")
        for body_type, palette in self.Surface.PALETTES.items():
            if not (4 <= len(palette) <= 7):
                raise ConfigurationError(f"Palette for '{body_type}' must have 4 to 7 anchors, has {len(palette)}.")
            for color in palette:
                if len(color) != 3 or not all(0 <= c <= 255 for c in color):
                    raise ConfigurationError(f"Palette color {color} for '{body_type}' is not a valid RGB triple.")

        # Feature validation
        self._check_range("Features.COUNT_RANGE", self.Features.COUNT_RANGE)
        self._check_range("Features.SIZE_RANGE", self.Features.SIZE_RANGE)
        self._check_range("Features.INTENSITY_RANGE", self.Features.INTENSITY_RANGE)
        if self.Features.SIZE_RANGE[0] < 3.0:
            raise ConfigurationError("Features.SIZE_RANGE must start at 3 cells or more.")
        if set(self.Features.KINDS) != set(self.Surface.PALETTES):
            raise ConfigurationError("Features.KINDS and Surface.PALETTES must cover the same body types.")
        for body_type, kinds in self.Features.KINDS.items():
            if not kinds:
                raise ConfigurationError(f"Features.KINDS for '{body_type}' must not be empty.")
            missing = [kind for kind in kinds if kind not in self.Features.EFFECTS]
            if missing:
                raise ConfigurationError(f"Feature kinds {missing} for '{body_type}' have no entry in Features.EFFECTS.")
        for body_type, kinds in self.Features.ANIMATED_KINDS.items():
            if body_type not in self.Features.KINDS:
                raise ConfigurationError(f"Features.ANIMATED_KINDS references unknown body type '{body_type}'.")
            if not set(kinds) <= set(self.Features.KINDS[body_type]):
                raise ConfigurationError(f"Animated kinds for '{body_type}' must be a subset of its feature kinds.")
        if self.Features.MIN_ANIMATED_SIZE <= 0 or self.Features.PULSE_AMPLITUDE < 0:
            raise ConfigurationError("Features.MIN_ANIMATED_SIZE must be positive and PULSE_AMPLITUDE non-negative.")

        # Lighting validation
        if np.linalg.norm(self.Lighting.LIGHT_DIRECTION) < 1e-9:
            raise ConfigurationError("Lighting.LIGHT_DIRECTION must not be a zero vector.")
        if self.Lighting.AMBIENT < 0 or self.Lighting.DIFFUSE_STRENGTH < 0 or self.Lighting.BUMP_SCALE < 0:
            raise ConfigurationError("Lighting AMBIENT, DIFFUSE_STRENGTH and BUMP_SCALE must be non-negative.")
        if not (0.0 <= self.Lighting.LIMB_FLOOR <= 1.0):
            raise ConfigurationError("Lighting.LIMB_FLOOR must be between 0 and 1.")

        # Orbit validation
        if self.Orbit.GRAVITATIONAL_CONSTANT <= 0:
            raise ConfigurationError("Orbit.GRAVITATIONAL_CONSTANT must be positive.")
        if not (0.0 <= self.Orbit.MAX_ECCENTRICITY < 1.0):
            raise ConfigurationError(f"Orbit.MAX_ECCENTRICITY ({self.Orbit.MAX_ECCENTRICITY}) must be >= 0 and < 1.")
        if not isinstance(self.Orbit.KEPLER_ITERATIONS, int) or self.Orbit.KEPLER_ITERATIONS < 1:
            raise ConfigurationError("Orbit.KEPLER_ITERATIONS must be a positive integer.")
        if self.Orbit.TIME_SCALE <= 0 or self.Orbit.ORBIT_PATH_POINTS < 3:
            raise ConfigurationError("Orbit.TIME_SCALE must be positive and ORBIT_PATH_POINTS at least 3.")

        self._check_range("Rotation.SPEED_RANGE", self.Rotation.SPEED_RANGE)

        # Atmosphere validation
        if not (0.0 <= self.Atmosphere.PROBABILITY <= 1.0):
            raise ConfigurationError("Atmosphere.PROBABILITY must be between 0 and 1.")
        self._check_range("Atmosphere.RADIUS_FACTOR_RANGE", self.Atmosphere.RADIUS_FACTOR_RANGE)
        if not self.Atmosphere.PLANET_COLORS:
            raise ConfigurationError("Atmosphere.PLANET_COLORS must not be empty.")

        # Star system validation
        system = self.StarSystem
        for name in ("STAR_MASS_RANGE", "STAR_RADIUS_RANGE", "PLANET_COUNT_RANGE", "ORBIT_SPACING_RANGE",
                     "PLANET_RADIUS_RANGE", "MOON_COUNT_RANGE", "MOON_RADIUS_RANGE", "BELT_OFFSET_RANGE",
                     "ASTEROID_COUNT_RANGE", "ASTEROID_RADIUS_RANGE"):
            self._check_range(f"StarSystem.{name}", getattr(system, name))
        for name in ("MOON_PROBABILITY", "BELT_PROBABILITY"):
            if not (0.0 <= getattr(system, name) <= 1.0):
                raise ConfigurationError(f"StarSystem.{name} must be between 0 and 1.")
        for name in ("PLANET_MAX_ECCENTRICITY", "MOON_MAX_ECCENTRICITY", "ASTEROID_MAX_ECCENTRICITY"):
            if not (0.0 <= getattr(system, name) <= self.Orbit.MAX_ECCENTRICITY):
                raise ConfigurationError(f"StarSystem.{name} must be within [0, Orbit.MAX_ECCENTRICITY].")
        if system.FIRST_ORBIT_DISTANCE <= 0 or system.BELT_SPREAD < 0:
            raise ConfigurationError("StarSystem.FIRST_ORBIT_DISTANCE must be positive and BELT_SPREAD non-negative.")
        if system.BELT_SPREAD / 2 >= system.BELT_OFFSET_RANGE[0]:
            raise ConfigurationError("StarSystem.BELT_SPREAD must keep asteroids outside the last planet orbit.")
        if not all((system.STAR_COLORS, system.PLANET_COLORS, system.MOON_COLORS, system.ASTEROID_COLORS)):
            raise ConfigurationError("StarSystem color lists must not be empty.")

        # Simulation validation
        if self.Simulation.DEFAULT_TICK_SECONDS <= 0 or self.Simulation.MAX_DELTA_TIME <= 0:
            raise ConfigurationError("Simulation tick lengths must be positive.")

        if self.Debug.CONFIG_VALIDATION:
            logging.info("Configuration validated successfully.")


# --- Instantiate the configuration ---
# This makes the config object available for import and runs validation.
# e.g., from config import config
try:
    config = SimulationConfig()
except ConfigurationError as e:
    logging.error(f"FATAL CONFIGURATION ERROR: {e}", exc_info=True)
    raise
