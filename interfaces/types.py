"""Common data types for the simulated flight hardware."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union

import numpy as np
from dataclasses_json import dataclass_json


# Returned by raycasts that hit nothing within range
NO_HIT = -1.0


@dataclass_json
@dataclass
class Vector3:
    """Plain 3D vector (meters, m/s, m/s^2 or unitless direction).

    World frame is local ENU: x east, y north, z up.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_array(self) -> np.ndarray:
        """Convert to numpy array [x, y, z]."""
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, arr) -> "Vector3":
        """Create from any 3-element sequence."""
        return cls(x=float(arr[0]), y=float(arr[1]), z=float(arr[2]))

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def magnitude(self) -> float:
        return float(np.sqrt(self.x**2 + self.y**2 + self.z**2))


@dataclass(frozen=True)
class Obstacle:
    """Axis-aligned box obstacle.

    Bounds are taken as given; callers keep min <= max on every axis.
    """

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float

    def slabs(self) -> Tuple[Tuple[float, float], ...]:
        """Per-axis (min, max) pairs in x, y, z order."""
        return (
            (self.min_x, self.max_x),
            (self.min_y, self.max_y),
            (self.min_z, self.max_z),
        )


@dataclass_json
@dataclass
class RigidBodyState:
    """Kinematic snapshot of the simulated body.

    Attributes:
        time: Accumulated simulation time (seconds)
        position: World position (meters, z up, z >= 0)
        velocity: World velocity (m/s)
        acceleration: World acceleration from the last update (m/s^2)
    """

    time: float = 0.0
    position: Vector3 = field(default_factory=Vector3)
    velocity: Vector3 = field(default_factory=Vector3)
    acceleration: Vector3 = field(default_factory=Vector3)

    @property
    def altitude(self) -> float:
        """Height above the ground plane in meters."""
        return self.position.z


class MotorDirection(Enum):
    """Propeller spin direction seen from above."""

    CW = "CW"
    CCW = "CCW"


@dataclass_json
@dataclass
class ActuatorState:
    """Motor snapshot. Speeds in RPM, throttle normalized 0 to 1."""

    motor_id: int = 0
    throttle: float = 0.0
    current_speed: float = 0.0
    max_speed: float = 10000.0
    direction: MotorDirection = MotorDirection.CW


@dataclass_json
@dataclass
class PowerState:
    """Battery snapshot.

    Attributes:
        voltage: Terminal voltage (V)
        current: Last load current (A)
        capacity_total: Rated capacity (mAh)
        capacity_remaining: Remaining charge (mAh, never negative)
        cell_count: Cells in series
        temperature: Pack temperature (Celsius)
    """

    voltage: float = 0.0
    current: float = 0.0
    capacity_total: float = 0.0
    capacity_remaining: float = 0.0
    cell_count: int = 0
    temperature: float = 25.0

    @property
    def state_of_charge(self) -> float:
        """Remaining fraction of rated capacity (0 to 1)."""
        if self.capacity_total <= 0:
            return 0.0
        return self.capacity_remaining / self.capacity_total


class MeasurementKind(Enum):
    """Tag identifying each measurement variant."""

    IMU = "imu"
    GPS = "gps"
    BAROMETER = "barometer"
    LIDAR = "lidar"
    CAMERA = "camera"


class FixType(Enum):
    """GPS fix quality."""

    NO_FIX = "NO_FIX"
    FIX_2D = "2D_FIX"
    FIX_3D = "3D_FIX"


@dataclass_json
@dataclass
class IMUData:
    """IMU reading: specific force [m/s^2] and angular rate [rad/s]."""

    acceleration: Vector3
    gyro: Vector3
    temperature: float
    kind: MeasurementKind = field(default=MeasurementKind.IMU, init=False)


@dataclass_json
@dataclass
class GPSData:
    """GPS fix in degrees latitude/longitude, altitude in meters."""

    latitude: float
    longitude: float
    altitude: float
    satellites: int
    hdop: float
    fix_type: FixType = FixType.FIX_3D
    kind: MeasurementKind = field(default=MeasurementKind.GPS, init=False)


@dataclass_json
@dataclass
class BarometerData:
    """Static pressure [hPa], sensor temperature [C], altitude [m]."""

    pressure: float
    temperature: float
    altitude: float
    kind: MeasurementKind = field(default=MeasurementKind.BAROMETER, init=False)


@dataclass_json
@dataclass
class LidarScan:
    """World-space hit points of one planar scan."""

    points: List[Vector3] = field(default_factory=list)
    kind: MeasurementKind = field(default=MeasurementKind.LIDAR, init=False)


@dataclass_json
@dataclass
class VIOData:
    """Visual odometry: movement since the previous frame [m]."""

    delta_position: Vector3
    confidence: float
    kind: MeasurementKind = field(default=MeasurementKind.CAMERA, init=False)


Measurement = Union[IMUData, GPSData, BarometerData, LidarScan, VIOData]


@dataclass_json
@dataclass
class VehicleState:
    """Full snapshot of a simulated vehicle after a tick."""

    time: float = 0.0
    body: RigidBodyState = field(default_factory=RigidBodyState)
    power: PowerState = field(default_factory=PowerState)
    motors: List[ActuatorState] = field(default_factory=list)
