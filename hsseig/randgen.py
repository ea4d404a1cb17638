"""Reproducible uniform random numbers from a 32-bit Mersenne Twister."""

from __future__ import annotations

import time
from enum import Enum

_DEFAULT_SEED = 5489
_MASK = 0xFFFFFFFF


class _MT19937:
    """The standard 32-bit Mersenne Twister engine."""

    _N = 624
    _M = 397

    def __init__(self, seed: int = _DEFAULT_SEED) -> None:
        self.seed(seed)

    def seed(self, seed: int) -> None:
        state = [seed & _MASK]
        for i in range(1, self._N):
            previous = state[-1]
            state.append((1812433253 * (previous ^ (previous >> 30)) + i) & _MASK)
        self._state = state
        self._index = self._N

    def _twist(self) -> None:
        state = self._state
        n, m = self._N, self._M
        for i in range(n):
            y = (state[i] & 0x80000000) | (state[(i + 1) % n] & 0x7FFFFFFF)
            value = state[(i + m) % n] ^ (y >> 1)
            if y & 1:
                value ^= 0x9908B0DF
            state[i] = value
        self._index = 0

    def next_u32(self) -> int:
        if self._index >= self._N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK


class Distribution(Enum):
    """Distributions a :class:`RandGen` may be asked for."""

    UNIFORM_REAL = "uniform_real"
    UNIFORM_INT = "uniform_int"


class RandGen:
    """Uniform real numbers in ``[low, high)`` from a seeded engine."""

    def __init__(self, distribution: Distribution = Distribution.UNIFORM_REAL) -> None:
        if distribution is not Distribution.UNIFORM_REAL:
            raise ValueError(f"distribution {distribution} is not supported")
        self._engine = _MT19937()
        self._interval: tuple[float, float] | None = None

    def set_seed(self, seed: int) -> None:
        """Restart the engine from ``seed`` (taken modulo 2**32)."""
        self._engine.seed(seed)

    def set_time_seed(self) -> None:
        """Seed the engine from the current time in whole seconds."""
        self.set_seed(int(time.time()))

    def set_interval(self, low: float, high: float) -> None:
        """Draw subsequent numbers from ``[low, high)``."""
        self._interval = (float(low), float(high))

    def rand(self) -> float:
        """Return the next random number in the configured interval."""
        if self._interval is None:
            raise RuntimeError("set_interval must be called before rand")
        low, high = self._interval
        unit = self._engine.next_u32() / 4294967296.0
        return unit * (high - low) + low