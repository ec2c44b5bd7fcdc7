"""Accelerometer + gyroscope model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from interfaces.random_source import RandomSource
from interfaces.types import IMUData, MeasurementKind, Vector3
from sensors.base import SimulatedSensor

if TYPE_CHECKING:
    from simulation.rigid_body import RigidBodyEngine


@dataclass
class IMUParams:
    """IMU noise configuration (standard deviations)."""
    accel_noise_std: float = 0.05  # m/s²
    gyro_noise_std: float = 0.01  # rad/s
    bias_drift_std: float = 0.0001  # rad/s per reading
    gravity: float = 9.81  # m/s²

    # Die temperature
    operating_temperature: float = 40.0  # °C
    temperature_jitter: float = 0.5  # °C


class IMU(SimulatedSensor[IMUData]):
    """Simulated 6-axis IMU.

    The accelerometer measures specific force: at rest on the ground it
    reads +g on z (the ground reaction), in free fall it reads ~0.

    The engine carries no attitude state, so the true angular rate is
    always zero and the gyroscope output is pure bias + noise. The bias
    follows a Gaussian random walk that advances on every read.
    """

    DEFAULT_ID = "imu_0"

    # No rotational dynamics are simulated
    TRUE_ANGULAR_VELOCITY = (0.0, 0.0, 0.0)

    def __init__(
        self,
        engine: RigidBodyEngine,
        params: Optional[IMUParams] = None,
        rng: Optional[RandomSource] = None,
        sensor_id: Optional[str] = None,
    ):
        super().__init__(engine, rng, sensor_id)
        self.params = params or IMUParams()
        self._gyro_bias = np.zeros(3)

    def read_data(self) -> IMUData:
        cfg = self.params
        true_accel = self._engine.get_acceleration()

        accel = Vector3(
            x=true_accel.x + self._rng.gaussian(0.0, cfg.accel_noise_std),
            y=true_accel.y + self._rng.gaussian(0.0, cfg.accel_noise_std),
            z=true_accel.z + cfg.gravity + self._rng.gaussian(0.0, cfg.accel_noise_std),
        )

        # Bias random walk
        for axis in range(3):
            self._gyro_bias[axis] += self._rng.gaussian(0.0, cfg.bias_drift_std)

        gyro = Vector3.from_array([
            self.TRUE_ANGULAR_VELOCITY[axis]
            + self._gyro_bias[axis]
            + self._rng.gaussian(0.0, cfg.gyro_noise_std)
            for axis in range(3)
        ])

        return IMUData(
            acceleration=accel,
            gyro=gyro,
            temperature=cfg.operating_temperature + self._rng.uniform() * cfg.temperature_jitter,
        )

    def get_measurement_kind(self) -> MeasurementKind:
        return MeasurementKind.IMU
