"""
Shared random source: numpy Generator behind one lock.
Every draw and every reseed takes the lock, so threads are serialized and never corrupt state.
"""
import logging
import threading
import time
from typing import Protocol

import numpy as np

logger = logging.getLogger(__name__)


class IntSource(Protocol):
    """Anything that can draw a uniform integer in [lower, upper] inclusive."""

    def randint(self, lower: int, upper: int) -> int: ...


_SEED_MASK = 0xFFFFFFFFFFFFFFFF


def _make_rng(seed: int | None) -> np.random.Generator:
    # numpy rejects negative seeds; fold them into the unsigned 64-bit range
    return np.random.default_rng(None if seed is None else int(seed) & _SEED_MASK)


class RandomSource:
    """
    Uniform inclusive integer draws with optional deterministic seed.
    An inverted interval (lower > upper) collapses to the single point `upper`.
    """

    def __init__(self, seed: int | None = None):
        self._lock = threading.Lock()
        self._rng = _make_rng(seed)
        self._seed = seed

    @property
    def last_seed(self) -> int | None:
        """Seed of the current stream (None = OS entropy)."""
        return self._seed

    def randint(self, lower: int, upper: int) -> int:
        if lower > upper:
            logger.debug("Degenerate range [%s, %s]: collapsing to %s", lower, upper, upper)
            return upper
        with self._lock:
            return int(self._rng.integers(lower, upper, endpoint=True))

    def seed(self, value: int | None = None) -> int:
        """Reinitialize the generator. No value = time-based seed. Returns the seed used."""
        if value is None:
            value = time.time_ns() & _SEED_MASK
        value = int(value)
        with self._lock:
            self._rng = _make_rng(value)
            self._seed = value
        logger.debug("Random source seeded with %s", value)
        return value
