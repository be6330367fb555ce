# celestial_types.py
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class CelestialBodyType(str, Enum):
    """Body categories; the value keys the palette and feature tables in `config`."""
    STAR = 'star'
    PLANET = 'planet'
    MOON = 'moon'
    ASTEROID = 'asteroid'


@dataclass(frozen=True)
class Atmosphere:
    """Cosmetic atmosphere halo. Never affects the generated surface."""
    color: Tuple[int, int, int, float]  # RGBA, alpha in [0, 1]
    radius: float
