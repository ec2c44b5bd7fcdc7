"""Simulation module for multirotor hardware.

This module provides the physics engine, actuator and power models, and a
vehicle backend that implements VehicleInterface.
"""

from simulation.rigid_body import RigidBodyEngine, BodyParams
from simulation.motor import Motor, MotorParams
from simulation.battery import Battery, BatteryParams
from simulation.config import (
    VehicleConfig,
    SensorSuite,
    SensorParams,
    load_vehicle_config,
    config_from_dict,
    list_presets,
)
from simulation.vehicle_backend import SimulatedVehicle

__all__ = [
    "RigidBodyEngine",
    "BodyParams",
    "Motor",
    "MotorParams",
    "Battery",
    "BatteryParams",
    "VehicleConfig",
    "SensorSuite",
    "SensorParams",
    "load_vehicle_config",
    "config_from_dict",
    "list_presets",
    "SimulatedVehicle",
]
