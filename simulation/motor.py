"""Brushless motor with first-order spin-up lag."""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from interfaces.hardware import ActuatorAdapter
from interfaces.types import ActuatorState, MotorDirection, Vector3
from simulation.utils import sanitize_dt

logger = logging.getLogger(__name__)


@dataclass
class MotorParams:
    """Motor and propeller parameters."""
    max_rpm: float = 10000.0  # RPM at full throttle
    spin_up_time: float = 0.5  # s, first-order time constant
    max_thrust: float = 15.0  # N at max_rpm
    max_current: float = 20.0  # A at max_rpm


class Motor(ActuatorAdapter):
    """Simulated motor + ESC.

    Throttle commands set a target speed of throttle * max_rpm; the actual
    speed approaches it exponentially with time constant spin_up_time.

    Example:
        >>> motor = Motor(motor_id=1, direction=MotorDirection.CCW)
        >>> motor.set_throttle(1.0)
        >>> for _ in range(100):
        ...     motor.update(0.05)
        >>> round(motor.get_speed())
        10000
    """

    def __init__(
        self,
        motor_id: int = 0,
        position: Optional[Vector3] = None,
        direction: MotorDirection = MotorDirection.CW,
        params: Optional[MotorParams] = None,
    ):
        """Initialize motor at rest.

        Args:
            motor_id: Motor index on the frame
            position: Mount point relative to the center of mass (m)
            direction: Propeller spin direction
            params: Motor parameters. If None, uses defaults.

        Raises:
            ValueError: If max_rpm or spin_up_time is not positive
        """
        self.params = params or MotorParams()
        if not self.params.max_rpm > 0:
            raise ValueError(f"Motor max_rpm must be positive, got {self.params.max_rpm}")
        if not self.params.spin_up_time > 0:
            raise ValueError(f"Motor spin_up_time must be positive, got {self.params.spin_up_time}")

        self.motor_id = motor_id
        self.position = position.copy() if position is not None else Vector3()
        self.direction = direction

        self.throttle = 0.0
        self.current_rpm = 0.0

    def set_throttle(self, percent: float) -> None:
        """Set throttle, clamped to [0, 1]. Non-finite commands stop the motor."""
        if not math.isfinite(percent):
            logger.warning("Motor %d: non-finite throttle %r treated as 0", self.motor_id, percent)
            percent = 0.0
        self.throttle = float(np.clip(percent, 0.0, 1.0))

    def get_speed(self) -> float:
        return self.current_rpm

    def update(self, dt: float) -> float:
        """Advance motor speed by dt seconds.

        Args:
            dt: Time step (seconds)

        Returns:
            New speed in RPM
        """
        dt = sanitize_dt(dt, owner=f"Motor {self.motor_id}")
        target_rpm = self.throttle * self.params.max_rpm

        # Steps longer than the time constant land on target
        fraction = min(dt / self.params.spin_up_time, 1.0)
        self.current_rpm += (target_rpm - self.current_rpm) * fraction

        if self.current_rpm < 0:
            self.current_rpm = 0.0
        return self.current_rpm

    def thrust(self) -> float:
        """Propeller thrust in N (scales with speed squared)."""
        ratio = self.current_rpm / self.params.max_rpm
        return self.params.max_thrust * ratio**2

    def current_draw(self) -> float:
        """Electrical current in A (scales with speed cubed)."""
        ratio = self.current_rpm / self.params.max_rpm
        return self.params.max_current * ratio**3

    def read(self) -> ActuatorState:
        """Return motor state snapshot."""
        return ActuatorState(
            motor_id=self.motor_id,
            throttle=self.throttle,
            current_speed=self.current_rpm,
            max_speed=self.params.max_rpm,
            direction=self.direction,
        )

    def describe(self) -> str:
        return f"Motor {self.motor_id}"

    def get_info(self) -> dict:
        info = super().get_info()
        info.update({
            "motor_id": self.motor_id,
            "direction": self.direction.value,
            "max_rpm": self.params.max_rpm,
        })
        return info

    def __repr__(self) -> str:
        return f"Motor(id={self.motor_id}, direction={self.direction.value}, rpm={self.current_rpm:.0f})"
