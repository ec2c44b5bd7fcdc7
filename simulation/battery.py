"""LiPo battery pack with linear discharge curve, I*R sag and self-heating."""

import logging
from dataclasses import dataclass
from typing import Optional

from interfaces.hardware import HardwareAdapter
from interfaces.types import PowerState
from simulation.utils import sanitize_dt

logger = logging.getLogger(__name__)


@dataclass
class BatteryParams:
    """Battery pack parameters."""
    cell_count: int = 4
    capacity_mah: float = 5000.0

    # Discharge curve
    max_cell_voltage: float = 4.2  # V, full charge
    min_cell_voltage: float = 3.0  # V, cutoff
    internal_resistance: float = 0.05  # Ohm

    # Thermal model
    ambient_temperature: float = 25.0  # °C
    heating_coefficient: float = 0.01  # °C per joule
    cooling_rate: float = 0.05  # 1/s


class Battery(HardwareAdapter):
    """Simulated battery pack.

    Starts full. The scheduler feeds it the total current draw each tick;
    charge, terminal voltage and temperature follow. A depleted pack simply
    reports zero remaining charge and cutoff voltage.

    Example:
        >>> battery = Battery(BatteryParams(cell_count=4, capacity_mah=5000))
        >>> battery.update(3600, 5.0)
        >>> battery.remaining_mah
        0.0
    """

    def __init__(self, params: Optional[BatteryParams] = None):
        self.params = params or BatteryParams()

        self.cell_count = self.params.cell_count
        self.capacity_mah = self.params.capacity_mah
        self.remaining_mah = self.params.capacity_mah
        self.voltage = self.cell_count * self.params.max_cell_voltage
        self.current = 0.0
        self.temperature = self.params.ambient_temperature

    @property
    def state_of_charge(self) -> float:
        """Remaining fraction of capacity (0 to 1)."""
        if self.capacity_mah <= 0:
            return 0.0
        return self.remaining_mah / self.capacity_mah

    def update(self, dt: float, current_load_amps: float) -> None:
        """Drain the pack by current_load_amps for dt seconds.

        Args:
            dt: Time step (seconds)
            current_load_amps: Total current draw (A)
        """
        dt = sanitize_dt(dt, owner="Battery")
        p = self.params
        self.current = current_load_amps

        # A*s -> Ah -> mAh
        used_mah = current_load_amps * dt / 3600.0 * 1000.0
        self.remaining_mah = min(max(self.remaining_mah - used_mah, 0.0), self.capacity_mah)

        cell_voltage = p.min_cell_voltage + (p.max_cell_voltage - p.min_cell_voltage) * self.state_of_charge
        nominal_voltage = self.cell_count * cell_voltage

        # V_terminal = V_nominal - I * R
        self.voltage = max(nominal_voltage - self.current * p.internal_resistance, 0.0)

        heat_watts = self.current**2 * p.internal_resistance
        self.temperature += heat_watts * dt * p.heating_coefficient
        self.temperature -= (self.temperature - p.ambient_temperature) * min(dt * p.cooling_rate, 1.0)

    def read(self) -> PowerState:
        """Return battery state snapshot."""
        return PowerState(
            voltage=self.voltage,
            current=self.current,
            capacity_total=self.capacity_mah,
            capacity_remaining=self.remaining_mah,
            cell_count=self.cell_count,
            temperature=self.temperature,
        )

    def get_adapter_type(self) -> str:
        return "power"

    def describe(self) -> str:
        return f"Battery {self.cell_count}S {self.capacity_mah:.0f}mAh"

    def __repr__(self) -> str:
        return (
            f"Battery({self.cell_count}S, {self.remaining_mah:.0f}/{self.capacity_mah:.0f}mAh, "
            f"{self.voltage:.2f}V)"
        )
