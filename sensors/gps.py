"""GNSS receiver model with flat-earth projection and wandering drift."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from interfaces.random_source import RandomSource
from interfaces.types import FixType, GPSData, MeasurementKind
from sensors.base import SimulatedSensor

if TYPE_CHECKING:
    from simulation.rigid_body import RigidBodyEngine


@dataclass
class GPSParams:
    """GPS configuration."""
    # Local frame origin (San Francisco)
    origin_latitude: float = 37.7749  # degrees
    origin_longitude: float = -122.4194  # degrees
    meters_per_degree_lat: float = 111320.0

    # Drift random walk
    drift_step: float = 0.5  # m per reading, horizontal
    vertical_drift_ratio: float = 0.2

    # Fix quality
    min_satellites: int = 8
    max_satellites: int = 11
    hdop_min: float = 1.0
    hdop_spread: float = 0.5


class GPS(SimulatedSensor[GPSData]):
    """Simulated GPS receiver.

    Local ENU meters are projected to latitude/longitude around a fixed
    origin (x east -> longitude, y north -> latitude). A persistent drift
    vector accumulates a small uniform random step on every read, with
    reduced vertical wander.
    """

    DEFAULT_ID = "gps_0"

    def __init__(
        self,
        engine: RigidBodyEngine,
        params: Optional[GPSParams] = None,
        rng: Optional[RandomSource] = None,
        sensor_id: Optional[str] = None,
    ):
        super().__init__(engine, rng, sensor_id)
        self.params = params or GPSParams()
        self._drift = np.zeros(3)

    def read_data(self) -> GPSData:
        cfg = self.params
        local = self._engine.get_position()

        self._drift[0] += (self._rng.uniform() - 0.5) * cfg.drift_step
        self._drift[1] += (self._rng.uniform() - 0.5) * cfg.drift_step
        self._drift[2] += (self._rng.uniform() - 0.5) * cfg.drift_step * cfg.vertical_drift_ratio

        east = local.x + self._drift[0]
        north = local.y + self._drift[1]

        meters_per_degree_lon = cfg.meters_per_degree_lat * np.cos(np.radians(cfg.origin_latitude))

        return GPSData(
            latitude=cfg.origin_latitude + north / cfg.meters_per_degree_lat,
            longitude=cfg.origin_longitude + east / meters_per_degree_lon,
            altitude=local.z + self._drift[2],
            satellites=self._rng.integer(cfg.min_satellites, cfg.max_satellites),
            hdop=cfg.hdop_min + self._rng.uniform() * cfg.hdop_spread,
            fix_type=FixType.FIX_3D,
        )

    def get_measurement_kind(self) -> MeasurementKind:
        return MeasurementKind.GPS
