"""Planar scanning lidar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

import numpy as np

from interfaces.random_source import RandomSource
from interfaces.types import NO_HIT, LidarScan, MeasurementKind, Vector3
from sensors.base import SimulatedSensor

if TYPE_CHECKING:
    from simulation.rigid_body import RigidBodyEngine


@dataclass
class LidarParams:
    """Lidar configuration."""
    ray_count: int = 8
    max_range: float = 20.0  # m


def planar_directions(ray_count: int) -> List[Vector3]:
    """Unit directions evenly spaced around the horizontal plane, starting at +x."""
    angles = np.linspace(0.0, 2.0 * np.pi, ray_count, endpoint=False)
    return [Vector3(float(np.cos(a)), float(np.sin(a)), 0.0) for a in angles]


class Lidar(SimulatedSensor[LidarScan]):
    """Simulated 2D lidar.

    Fires a fixed fan of horizontal rays from the body position through the
    engine's obstacle registry. The scan is deterministic given the engine
    state; rays that hit nothing are left out of the scan.
    """

    DEFAULT_ID = "lidar_0"

    def __init__(
        self,
        engine: RigidBodyEngine,
        params: Optional[LidarParams] = None,
        rng: Optional[RandomSource] = None,
        sensor_id: Optional[str] = None,
    ):
        super().__init__(engine, rng, sensor_id)
        self.params = params or LidarParams()
        self._directions = planar_directions(self.params.ray_count)

    @property
    def directions(self) -> List[Vector3]:
        return [d.copy() for d in self._directions]

    def read_data(self) -> LidarScan:
        origin = self._engine.get_position()
        points = []

        for direction in self._directions:
            distance = self._engine.raycast(origin, direction, self.params.max_range)
            if distance == NO_HIT:
                continue
            points.append(Vector3(
                x=origin.x + direction.x * distance,
                y=origin.y + direction.y * distance,
                z=origin.z + direction.z * distance,
            ))

        return LidarScan(points=points)

    def get_measurement_kind(self) -> MeasurementKind:
        return MeasurementKind.LIDAR
