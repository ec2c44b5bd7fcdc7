"""Vehicle backend interface for simulation and hardware."""

from abc import ABC, abstractmethod
from typing import Dict, Sequence

from interfaces.types import Measurement, MeasurementKind, VehicleState


class VehicleInterface(ABC):
    """Abstract interface for multirotor vehicle backends.

    This interface enables complete swappability between:
    - Simulation backends (SimulatedVehicle)
    - Real hardware (flight controller bridge)
    - Hardware-in-the-Loop

    The flight stack drives any backend through set_throttles()/step() and
    consumes read_sensors().
    """

    @abstractmethod
    def step(self, dt: float) -> VehicleState:
        """Advance simulation/hardware by dt seconds.

        For simulation: Steps motors, physics and battery forward by dt
        For hardware: Returns latest state (dt is nominal, not enforced)

        Args:
            dt: Time step in seconds

        Returns:
            Updated vehicle state

        Example:
            >>> vehicle = SimulatedVehicle(load_vehicle_config())
            >>> vehicle.set_throttles([0.8] * 4)
            >>> state = vehicle.step(dt=0.01)
            >>> state.motors[0].current_speed > 0
            True
        """
        pass

    @abstractmethod
    def set_throttles(self, throttles: Sequence[float]) -> None:
        """Command every motor.

        Args:
            throttles: One value per motor, normalized 0 to 1

        Raises:
            ValueError: If the number of values differs from the motor count
        """
        pass

    @abstractmethod
    def reset(self) -> VehicleState:
        """Reset vehicle to its initial state.

        For simulation: Rebuilds every component from configuration
        For hardware: Not truly resettable, returns current state

        Returns:
            State after reset
        """
        pass

    @abstractmethod
    def get_state(self) -> VehicleState:
        """Get current vehicle state without advancing time."""
        pass

    @abstractmethod
    def read_sensors(self) -> Dict[MeasurementKind, Measurement]:
        """Read every fitted sensor once.

        Returns:
            Measurements keyed by their kind tag. Sensors not fitted to the
            vehicle are absent.

        Example:
            >>> readings = vehicle.read_sensors()
            >>> readings[MeasurementKind.GPS].satellites
            9
        """
        pass

    def close(self) -> None:
        """Release the vehicle.

        A simulated vehicle disposes its motor, battery and sensor adapters;
        a hardware bridge would also disarm the motors and close its link.
        The base implementation has nothing to release.
        """

    @abstractmethod
    def get_backend_type(self) -> str:
        """Return where the motors and sensors live.

        Returns:
            "simulation" (in-process physics), "hardware" (flight controller
            on a real airframe) or "hil" (real autopilot, simulated airframe)
        """
        pass

    def get_dt_nominal(self) -> float:
        """Tick length the backend expects from the scheduler (s).

        Defaults to a 100 Hz control loop; simulated vehicles report their
        physics sub-step.
        """
        return 0.01

    def is_real_hardware(self) -> bool:
        """True when throttle commands spin real propellers."""
        return self.get_backend_type() in ["hardware", "hil"]

    def supports_reset(self) -> bool:
        """True when reset() puts the vehicle back on the ground with a full pack."""
        return self.get_backend_type() == "simulation"

    def get_info(self) -> dict:
        """Backend summary for logs (subclasses add airframe details)."""
        return {
            'backend_type': self.get_backend_type(),
            'dt_nominal': self.get_dt_nominal(),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.get_backend_type()})"
