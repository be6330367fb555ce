# physics_utils.py

import math

import numpy as np

TWO_PI = 2.0 * math.pi

class PhysicsError(Exception):
    """Custom exception for orbits that cannot be constructed from the given inputs."""
    pass

def clamp(value, low, high):
    """
    Clamps a scalar or array into [low, high].

    Args:
        value (float or np.ndarray): The value(s) to clamp.
        low (float): Lower bound.
        high (float): Upper bound.

    Returns:
        float or np.ndarray: Scalars stay Python floats, arrays come back as new arrays.
    """
    if isinstance(value, np.ndarray):
        return np.clip(value, low, high)
    return float(max(low, min(high, value)))

def wrap_angle(angle):
    """
    Wraps an angle in radians into [0, 2*pi).

    Float modulo can round a tiny negative input up to exactly 2*pi, so that
    case is folded back to 0.
    """
    wrapped = math.fmod(angle, TWO_PI)
    if wrapped < 0.0:
        wrapped += TWO_PI
    if wrapped >= TWO_PI:
        wrapped = 0.0
    return wrapped

def normalize_vector(vector, epsilon=1e-12):
    """
    Normalizes a vector, or a stack of vectors along the last axis, to unit length.

    Args:
        vector (array_like): A single vector of shape (n,) or vectors of shape (..., n).
        epsilon (float): Magnitudes below this are treated as zero.

    Returns:
        np.ndarray: Unit vector(s). Vectors with near-zero magnitude become zero vectors.
    """
    vector = np.asarray(vector, dtype=np.float64)
    norm = np.linalg.norm(vector, axis=-1, keepdims=True)
    safe_norm = np.where(norm < epsilon, 1.0, norm)
    return np.where(norm < epsilon, 0.0, vector / safe_norm)
