"""Injectable random number sources for the stochastic sensor models."""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class RandomSource(ABC):
    """Abstract source of uniform samples.

    Every noise, drift and bias term in the sensor models draws from an
    instance of this class, so a simulation can be made reproducible by
    handing every model the same seeded source.

    Example:
        >>> rng = NumpyRandomSource(seed=42)
        >>> imu = IMU(engine, rng=rng)
    """

    @abstractmethod
    def uniform(self) -> float:
        """Return a sample uniformly distributed on [0, 1)."""
        pass

    def uniform_range(self, low: float, high: float) -> float:
        """Return a sample uniformly distributed on [low, high)."""
        return low + (high - low) * self.uniform()

    def gaussian(self, mean: float = 0.0, std: float = 1.0) -> float:
        """Return a Gaussian sample using the Box-Muller transform.

        Args:
            mean: Distribution mean
            std: Standard deviation

        Returns:
            Normally distributed sample
        """
        # 1 - u lies in (0, 1], keeping log() finite
        u1 = 1.0 - self.uniform()
        u2 = self.uniform()
        z0 = np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)
        return float(z0 * std + mean)

    def integer(self, low: int, high: int) -> int:
        """Return an integer uniformly drawn from [low, high] inclusive."""
        return low + int(np.floor(self.uniform() * (high - low + 1)))


class NumpyRandomSource(RandomSource):
    """Default source backed by numpy's PCG64 generator.

    Pass a seed in tests for reproducibility; leave it as None in
    production to draw from system entropy.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self) -> float:
        return float(self._rng.random())

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed})"
