"""Simulated sensors sampling the rigid body engine.

Each sensor implements SensorAdapter and can be swapped with a hardware
driver exposing the same interface.
"""

from sensors.base import SimulatedSensor
from sensors.imu import IMU, IMUParams
from sensors.gps import GPS, GPSParams
from sensors.barometer import Barometer, BarometerParams, pressure_at_altitude
from sensors.lidar import Lidar, LidarParams, planar_directions
from sensors.camera import Camera, CameraParams

__all__ = [
    "SimulatedSensor",
    "IMU",
    "IMUParams",
    "GPS",
    "GPSParams",
    "Barometer",
    "BarometerParams",
    "pressure_at_altitude",
    "Lidar",
    "LidarParams",
    "planar_directions",
    "Camera",
    "CameraParams",
]
