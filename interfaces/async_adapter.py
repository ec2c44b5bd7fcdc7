"""Awaitable wrapper around the synchronous hardware adapters.

Real hardware drivers usually expose coroutines. Wrapping the simulated
components lets the same asyncio flight code drive either one. No awaited
work happens inside the simulation, every coroutine completes immediately.
"""

from typing import Any

from interfaces.hardware import ActuatorAdapter, HardwareAdapter, SensorAdapter


class AsyncHardwareAdapter:
    """Expose a HardwareAdapter as coroutines.

    Example:
        >>> imu = AsyncHardwareAdapter(IMU(engine))
        >>> await imu.init()
        >>> data = await imu.read_data()
    """

    def __init__(self, adapter: HardwareAdapter):
        self._adapter = adapter

    @property
    def adapter(self) -> HardwareAdapter:
        """The wrapped synchronous adapter."""
        return self._adapter

    async def init(self) -> None:
        self._adapter.init()

    async def read(self) -> Any:
        return self._adapter.read()

    async def write(self, command: Any) -> None:
        self._adapter.write(command)

    async def dispose(self) -> None:
        self._adapter.dispose()

    async def read_data(self) -> Any:
        """Typed read; only available when wrapping a sensor.

        Raises:
            TypeError: If the wrapped adapter is not a SensorAdapter
        """
        if not isinstance(self._adapter, SensorAdapter):
            raise TypeError(f"{self._adapter!r} is not a sensor")
        return self._adapter.read_data()

    async def set_throttle(self, percent: float) -> None:
        """Throttle command; only available when wrapping an actuator.

        Raises:
            TypeError: If the wrapped adapter is not an ActuatorAdapter
        """
        if not isinstance(self._adapter, ActuatorAdapter):
            raise TypeError(f"{self._adapter!r} is not an actuator")
        self._adapter.set_throttle(percent)

    async def get_speed(self) -> float:
        """Rotational speed in RPM; only available when wrapping an actuator."""
        if not isinstance(self._adapter, ActuatorAdapter):
            raise TypeError(f"{self._adapter!r} is not an actuator")
        return self._adapter.get_speed()

    def __repr__(self) -> str:
        return f"AsyncHardwareAdapter({self._adapter!r})"
