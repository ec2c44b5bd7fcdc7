"""Hardware adapter contract shared by simulated and real components."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from interfaces.types import MeasurementKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HardwareAdapter(ABC):
    """Abstract interface for every hardware component.

    This interface enables swappability between:
    - Simulated components (this repository)
    - Real drivers (serial, I2C, CAN, ...)

    Zero code changes required in the flight stack to switch between them.
    Simulated components own no external resources, so the default
    init/write/dispose implementations are bookkeeping only.
    """

    _initialized: bool = False

    def init(self) -> None:
        """Initialize the component.

        Idempotent: repeated calls after the first are no-ops.

        Example:
            >>> imu.init()
            >>> imu.is_initialized
            True
        """
        if self._initialized:
            return
        self._initialized = True
        logger.info("%s initialized", self.describe())

    @abstractmethod
    def read(self) -> Any:
        """Read the current measurement or state snapshot.

        Returns:
            Sensors return their typed measurement, actuators and power
            sources return their state dataclass.
        """
        pass

    def write(self, command: Any) -> None:
        """Write a command to the component.

        Read-only components accept and ignore the command.

        Args:
            command: Component-specific command payload
        """
        logger.debug("%s ignored write: %r", self.describe(), command)

    def dispose(self) -> None:
        """Tear down the component. No resources to release in simulation."""
        logger.debug("%s disposed", self.describe())

    @abstractmethod
    def get_adapter_type(self) -> str:
        """Return adapter type identifier.

        Returns:
            "sensor", "actuator" or "power"
        """
        pass

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def describe(self) -> str:
        """Short human-readable identifier used in log messages."""
        return self.__class__.__name__

    def get_info(self) -> dict:
        """Get additional adapter information (optional).

        Example:
            >>> gps.get_info()
            {'adapter_type': 'sensor', 'initialized': False, 'sensor_id': 'gps_0', ...}
        """
        return {
            "adapter_type": self.get_adapter_type(),
            "initialized": self._initialized,
        }

    def __repr__(self) -> str:
        """String representation."""
        return f"{self.__class__.__name__}(type={self.get_adapter_type()})"


class ActuatorAdapter(HardwareAdapter):
    """Adapter for speed-controlled actuators (motors).

    Actuators are commanded through set_throttle(); write() is ignored.
    """

    @abstractmethod
    def set_throttle(self, percent: float) -> None:
        """Command throttle, normalized 0 to 1 (values outside are clamped)."""
        pass

    @abstractmethod
    def get_speed(self) -> float:
        """Current rotational speed in RPM."""
        pass

    def get_adapter_type(self) -> str:
        return "actuator"


class SensorAdapter(HardwareAdapter, Generic[T]):
    """Adapter for sensors producing a typed measurement.

    read() and read_data() are equivalent; read_data() is the typed entry
    point.
    """

    sensor_id: str = "sensor_0"

    @abstractmethod
    def read_data(self) -> T:
        """Produce one measurement.

        Not idempotent for stochastic sensors: drift and bias state
        advances on every call.
        """
        pass

    @abstractmethod
    def get_measurement_kind(self) -> MeasurementKind:
        """Return the tag of the measurement this sensor produces."""
        pass

    def read(self) -> T:
        return self.read_data()

    def get_adapter_type(self) -> str:
        return "sensor"

    def describe(self) -> str:
        return f"{self.__class__.__name__} {self.sensor_id}"

    def get_info(self) -> dict:
        info = super().get_info()
        info.update({
            "sensor_id": self.sensor_id,
            "measurement_kind": self.get_measurement_kind().value,
        })
        return info
