"""Static pressure sensor using the standard-atmosphere power law."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from interfaces.random_source import RandomSource
from interfaces.types import BarometerData, MeasurementKind
from sensors.base import SimulatedSensor

if TYPE_CHECKING:
    from simulation.rigid_body import RigidBodyEngine


@dataclass
class BarometerParams:
    """Barometer configuration."""
    sea_level_pressure: float = 1013.25  # hPa

    # P = P0 * (1 - L*h)^k
    lapse_coefficient: float = 2.25577e-5  # 1/m
    exponent: float = 5.25588

    pressure_noise: float = 0.1  # hPa peak-to-peak
    base_temperature: float = 20.0  # °C
    temperature_jitter: float = 1.0  # °C


def pressure_at_altitude(altitude: float, params: Optional[BarometerParams] = None) -> float:
    """Noise-free static pressure in hPa at the given altitude in meters.

    Above the altitude where the power-law base reaches zero the pressure
    is reported as 0.
    """
    cfg = params or BarometerParams()
    base = max(1.0 - cfg.lapse_coefficient * altitude, 0.0)
    return cfg.sea_level_pressure * base**cfg.exponent


class Barometer(SimulatedSensor[BarometerData]):
    """Simulated barometer.

    Pressure follows the barometric formula with a small uniform noise.
    The altitude field carries the true altitude the pressure was derived
    from.
    """

    DEFAULT_ID = "baro_0"

    def __init__(
        self,
        engine: RigidBodyEngine,
        params: Optional[BarometerParams] = None,
        rng: Optional[RandomSource] = None,
        sensor_id: Optional[str] = None,
    ):
        super().__init__(engine, rng, sensor_id)
        self.params = params or BarometerParams()

    def read_data(self) -> BarometerData:
        cfg = self.params
        altitude = self._engine.get_position().z

        pressure = pressure_at_altitude(altitude, cfg)
        noisy_pressure = pressure + (self._rng.uniform() - 0.5) * cfg.pressure_noise

        return BarometerData(
            pressure=noisy_pressure,
            temperature=cfg.base_temperature + self._rng.uniform() * cfg.temperature_jitter,
            altitude=altitude,
        )

    def get_measurement_kind(self) -> MeasurementKind:
        return MeasurementKind.BAROMETER
