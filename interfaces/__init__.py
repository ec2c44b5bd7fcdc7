"""Interfaces and shared data types for simulated flight hardware."""

from interfaces.types import (
    NO_HIT,
    Vector3,
    Obstacle,
    RigidBodyState,
    MotorDirection,
    ActuatorState,
    PowerState,
    MeasurementKind,
    FixType,
    IMUData,
    GPSData,
    BarometerData,
    LidarScan,
    VIOData,
    Measurement,
    VehicleState,
)
from interfaces.random_source import RandomSource, NumpyRandomSource
from interfaces.hardware import HardwareAdapter, ActuatorAdapter, SensorAdapter
from interfaces.async_adapter import AsyncHardwareAdapter
from interfaces.vehicle import VehicleInterface

__all__ = [
    # Types
    "NO_HIT",
    "Vector3",
    "Obstacle",
    "RigidBodyState",
    "MotorDirection",
    "ActuatorState",
    "PowerState",
    "MeasurementKind",
    "FixType",
    "IMUData",
    "GPSData",
    "BarometerData",
    "LidarScan",
    "VIOData",
    "Measurement",
    "VehicleState",
    # Randomness
    "RandomSource",
    "NumpyRandomSource",
    # Adapters
    "HardwareAdapter",
    "ActuatorAdapter",
    "SensorAdapter",
    "AsyncHardwareAdapter",
    "VehicleInterface",
]
