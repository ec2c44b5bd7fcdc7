"""Common base for sensors that sample the rigid body engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, TypeVar

from interfaces.hardware import SensorAdapter
from interfaces.random_source import NumpyRandomSource, RandomSource

if TYPE_CHECKING:
    from simulation.rigid_body import RigidBodyEngine

T = TypeVar("T")


class SimulatedSensor(SensorAdapter[T]):
    """Sensor backed by a shared RigidBodyEngine.

    Holds a read-only reference to the engine and the random source used
    for every noise term. Subclasses keep their own drift/bias state, which
    is initialized here at construction and never reset afterwards.
    """

    DEFAULT_ID = "sensor_0"

    def __init__(
        self,
        engine: RigidBodyEngine,
        rng: Optional[RandomSource] = None,
        sensor_id: Optional[str] = None,
    ):
        """Initialize sensor.

        Args:
            engine: Engine providing ground truth
            rng: Random source. If None, seeded from system entropy.
            sensor_id: Identifier. If None, uses the class default.
        """
        self._engine = engine
        self._rng = rng if rng is not None else NumpyRandomSource()
        self.sensor_id = sensor_id or self.DEFAULT_ID

    @property
    def engine(self) -> RigidBodyEngine:
        return self._engine

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.sensor_id})"
