# seeded_random.py
import hashlib
from typing import Sequence, TypeVar

T = TypeVar('T')

# Linear congruential recurrence: seed = (seed * MULTIPLIER + INCREMENT) % MODULUS
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


def seed_from_name(name: str) -> int:
    """Derives a stable seed from a body name.

    Uses a SHA-256 digest of the whole name, so the result is identical across
    interpreter runs and platforms (unlike the salted built-in `hash`).
    """
    digest = hashlib.sha256(name.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") % LCG_MODULUS


class DeterministicRandom:
    """Reproducible pseudo-random sequence driven by a single integer seed.

    Every draw advances the seed through an integer linear congruential
    recurrence, so two instances built from the same seed produce the same
    sequence bit for bit. Instances share no state.
    """

    def __init__(self, seed: int):
        self.seed = int(seed) % LCG_MODULUS

    def next(self) -> float:
        """Advances the state and returns a float in [0, 1)."""
        self.seed = (self.seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.seed / LCG_MODULUS

    def next_int(self, min_value: int, max_value: int) -> int:
        """Returns an integer in [min_value, max_value], both inclusive."""
        return int(self.next() * (max_value - min_value + 1)) + min_value

    def next_float(self, min_value: float, max_value: float) -> float:
        """Returns a float in [min_value, max_value)."""
        return self.next() * (max_value - min_value) + min_value

    def choose(self, sequence: Sequence[T]) -> T:
        if not sequence:
            raise IndexError("Cannot choose from an empty sequence.")
        return sequence[int(self.next() * len(sequence))]
