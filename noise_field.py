# noise_field.py
"""
Coherent 2D gradient noise for terrain synthesis.

The lattice hash is pure integer mixing on unsigned 32-bit values, so a given
(x, y, seed) always produces the same sample regardless of platform, memory
layout or evaluation order. Inputs may be Python scalars or numpy arrays;
arrays are evaluated in one vectorized pass.
"""
import numpy as np
from typing import Sequence

# Eight unit gradients: the axes and the diagonals
_DIAGONAL = np.sqrt(0.5)
GRADIENTS = np.array([
    [1.0, 0.0], [-1.0, 0.0], [0.0, 1.0], [0.0, -1.0],
    [_DIAGONAL, _DIAGONAL], [-_DIAGONAL, _DIAGONAL], [_DIAGONAL, -_DIAGONAL], [-_DIAGONAL, -_DIAGONAL],
], dtype=np.float64)

# Unit gradients bound 2D gradient noise to about +-sqrt(1/2); rescale towards [-1, 1]
OUTPUT_SCALE = np.sqrt(2.0)

_PRIME_X = 0x8DA6B343
_PRIME_Y = 0xD8163841
_PRIME_SEED = 0xCB1AB31F
_MIX = 0x5BD1E995
_OCTAVE_SEED_STEP = 0x9E3779B9


def fade(t):
    """Quintic easing curve 6t^5 - 15t^4 + 10t^3 with zero first and second derivatives at 0 and 1."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lattice_hash(ix: np.ndarray, iy: np.ndarray, seed: int) -> np.ndarray:
    """Mixes integer lattice coordinates and a seed into a uint32 hash."""
    x = ix.astype(np.int64).astype(np.uint32)
    y = iy.astype(np.int64).astype(np.uint32)
    # Seed term mixed in Python ints; numpy scalar overflow would warn
    seed_term = np.uint32((int(seed) * _PRIME_SEED) & 0xFFFFFFFF)
    h = (x * np.uint32(_PRIME_X)) ^ (y * np.uint32(_PRIME_Y)) ^ seed_term
    h = h ^ (h >> np.uint32(13))
    h = h * np.uint32(_MIX)
    h = h ^ (h >> np.uint32(15))
    return h


def _corner(ix, iy, dx, dy, seed):
    gradient = GRADIENTS[lattice_hash(ix, iy, seed) & np.uint32(7)]
    return gradient[..., 0] * dx + gradient[..., 1] * dy


def sample(x, y, seed: int):
    """Samples gradient noise at (x, y).

    Returns a float for scalar input and an array for array input, in [-1, 1].
    """
    scalar_input = np.isscalar(x) and np.isscalar(y)
    x = np.atleast_1d(np.asarray(x, dtype=np.float64))
    y = np.atleast_1d(np.asarray(y, dtype=np.float64))
    x, y = np.broadcast_arrays(x, y)

    x0 = np.floor(x)
    y0 = np.floor(y)
    xf = x - x0
    yf = y - y0
    ix = x0.astype(np.int64)
    iy = y0.astype(np.int64)

    u = fade(xf)
    v = fade(yf)

    n00 = _corner(ix, iy, xf, yf, seed)
    n10 = _corner(ix + 1, iy, xf - 1.0, yf, seed)
    n01 = _corner(ix, iy + 1, xf, yf - 1.0, seed)
    n11 = _corner(ix + 1, iy + 1, xf - 1.0, yf - 1.0, seed)

    bottom = n00 + u * (n10 - n00)
    top = n01 + u * (n11 - n01)
    value = np.clip((bottom + v * (top - bottom)) * OUTPUT_SCALE, -1.0, 1.0)

    if scalar_input:
        return float(value[0])
    return value


def octave_seed(seed: int, octave: int) -> int:
    """Seed used for one octave of a fractal sum, so octaves are decorrelated."""
    return (int(seed) + octave * _OCTAVE_SEED_STEP) & 0xFFFFFFFF


def fractal(x, y, seed: int, frequencies: Sequence[float], weights: Sequence[float]):
    """Weighted sum of noise octaves.

    Each octave samples at `frequency * (x, y)` with its own derived seed. With
    weights summing to 1 the result stays within [-1, 1].
    """
    if len(frequencies) != len(weights):
        raise ValueError("frequencies and weights must have the same length.")
    total = 0.0
    for octave, (frequency, weight) in enumerate(zip(frequencies, weights)):
        total = total + weight * sample(np.multiply(x, frequency), np.multiply(y, frequency),
                                        octave_seed(seed, octave))
    return total


class NoiseField:
    """Noise bound to one seed."""

    def __init__(self, seed: int):
        self.seed = int(seed)

    def sample(self, x, y):
        return sample(x, y, self.seed)

    def fractal(self, x, y, frequencies: Sequence[float], weights: Sequence[float]):
        return fractal(x, y, self.seed, frequencies, weights)
