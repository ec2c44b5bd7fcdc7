"""Downward camera producing visual-inertial odometry deltas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from interfaces.random_source import RandomSource
from interfaces.types import MeasurementKind, Vector3, VIOData
from sensors.base import SimulatedSensor

if TYPE_CHECKING:
    from simulation.rigid_body import RigidBodyEngine


@dataclass
class CameraParams:
    """VIO configuration."""
    flow_noise: float = 0.01  # m peak-to-peak, horizontal
    min_confidence: float = 0.9
    confidence_spread: float = 0.1


class Camera(SimulatedSensor[VIOData]):
    """Simulated VIO camera.

    Each read reports the movement since the previous read (or since
    construction for the first one). Optical flow error is added to the
    horizontal components only.
    """

    DEFAULT_ID = "cam_0"

    def __init__(
        self,
        engine: RigidBodyEngine,
        params: Optional[CameraParams] = None,
        rng: Optional[RandomSource] = None,
        sensor_id: Optional[str] = None,
    ):
        super().__init__(engine, rng, sensor_id)
        self.params = params or CameraParams()
        self._last_position = engine.get_position()

    def read_data(self) -> VIOData:
        cfg = self.params
        current = self._engine.get_position()

        delta = Vector3(
            x=current.x - self._last_position.x,
            y=current.y - self._last_position.y,
            z=current.z - self._last_position.z,
        )
        self._last_position = current

        delta.x += (self._rng.uniform() - 0.5) * cfg.flow_noise
        delta.y += (self._rng.uniform() - 0.5) * cfg.flow_noise

        return VIOData(
            delta_position=delta,
            confidence=cfg.min_confidence + self._rng.uniform() * cfg.confidence_spread,
        )

    def get_measurement_kind(self) -> MeasurementKind:
        return MeasurementKind.CAMERA
