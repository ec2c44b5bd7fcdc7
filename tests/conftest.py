"""Pytest fixtures for test suite.

This module provides common fixtures to eliminate code duplication across tests.
"""

import pytest

from interfaces.random_source import NumpyRandomSource
from interfaces.types import Vector3
from simulation import BodyParams, RigidBodyEngine, SimulatedVehicle, VehicleConfig


@pytest.fixture
def rng() -> NumpyRandomSource:
    """Seeded random source so noisy readings are reproducible."""
    return NumpyRandomSource(seed=1234)


@pytest.fixture
def engine() -> RigidBodyEngine:
    """1 kg body at rest at the origin in an empty world."""
    return RigidBodyEngine(BodyParams(mass=1.0))


@pytest.fixture
def wall_engine() -> RigidBodyEngine:
    """Engine with a 1 m thick wall spanning x in [9.5, 10.5].

    The wall extends 10 m either side in y and z, so forward rays from the
    origin hit it at 9.5 m.
    """
    engine = RigidBodyEngine(BodyParams(mass=1.0))
    engine.add_obstacle(9.5, 10.5, -10.0, 10.0, -10.0, 10.0)
    return engine


@pytest.fixture
def hovering_engine() -> RigidBodyEngine:
    """Engine whose body starts 100 m above the ground."""
    return RigidBodyEngine(BodyParams(mass=1.0), initial_position=Vector3(0.0, 0.0, 100.0))


@pytest.fixture
def quad_config() -> VehicleConfig:
    """Standard quadcopter with every sensor fitted and a fixed seed."""
    config = VehicleConfig(seed=7)
    config.sensors.lidar = True
    return config


@pytest.fixture
def quad(quad_config) -> SimulatedVehicle:
    """Simulated quadcopter on the ground at the origin."""
    return SimulatedVehicle(quad_config)
