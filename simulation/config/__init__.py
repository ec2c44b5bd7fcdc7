"""Vehicle configuration loading.

Loads YAML vehicle presets and converts them to dataclass structures.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from sensors.barometer import BarometerParams
from sensors.camera import CameraParams
from sensors.gps import GPSParams
from sensors.imu import IMUParams
from sensors.lidar import LidarParams
from simulation.battery import BatteryParams
from simulation.motor import MotorParams
from simulation.rigid_body import BodyParams

logger = logging.getLogger(__name__)

# Presets ship alongside this module
CONFIG_DIR = Path(__file__).parent

DEFAULT_PRESET = "standard_quadcopter.yaml"


def load_yaml(filepath: Path) -> Dict[str, Any]:
    """Load a YAML configuration file.

    Args:
        filepath: Path to YAML file

    Returns:
        Dictionary with configuration data (empty for an empty file)
    """
    with open(filepath, 'r') as f:
        return yaml.safe_load(f) or {}


@dataclass
class SensorSuite:
    """Which sensors are fitted to the vehicle."""
    imu: bool = True
    gps: bool = True
    barometer: bool = True
    lidar: bool = False
    camera: bool = True


@dataclass
class SensorParams:
    """Per-sensor noise/geometry parameters."""
    imu: IMUParams = field(default_factory=IMUParams)
    gps: GPSParams = field(default_factory=GPSParams)
    barometer: BarometerParams = field(default_factory=BarometerParams)
    lidar: LidarParams = field(default_factory=LidarParams)
    camera: CameraParams = field(default_factory=CameraParams)


@dataclass
class VehicleConfig:
    """Complete simulated vehicle configuration."""
    vehicle_id: str = "drone-quad-01"
    frame_type: str = "QUADCOPTER"
    motor_count: int = 4
    arm_length: float = 0.25  # m

    body: BodyParams = field(default_factory=lambda: BodyParams(mass=1.5))
    motor: MotorParams = field(default_factory=MotorParams)
    battery: BatteryParams = field(default_factory=BatteryParams)
    sensors: SensorSuite = field(default_factory=SensorSuite)
    sensor_params: SensorParams = field(default_factory=SensorParams)

    # Timing
    dt_physics: float = 0.01  # s, physics sub-step
    avionics_current: float = 0.5  # A, constant draw besides motors

    # Random seed for every sensor (None = system entropy)
    seed: Optional[int] = None

    def validate(self) -> None:
        """Check physical consistency.

        Raises:
            ValueError: On the first invalid parameter found
        """
        if not self.body.mass > 0:
            raise ValueError(f"mass must be positive, got {self.body.mass}")
        if self.motor_count < 1:
            raise ValueError(f"motor_count must be at least 1, got {self.motor_count}")
        if not self.motor.max_rpm > 0:
            raise ValueError(f"max_rpm must be positive, got {self.motor.max_rpm}")
        if not self.motor.spin_up_time > 0:
            raise ValueError(f"spin_up_time must be positive, got {self.motor.spin_up_time}")
        if not self.battery.capacity_mah > 0:
            raise ValueError(f"capacity_mah must be positive, got {self.battery.capacity_mah}")
        if self.battery.cell_count < 1:
            raise ValueError(f"cell_count must be at least 1, got {self.battery.cell_count}")
        if not self.dt_physics > 0:
            raise ValueError(f"dt_physics must be positive, got {self.dt_physics}")


def _apply_overrides(target: Any, values: Dict[str, Any], section: str) -> None:
    """Copy known keys from a YAML mapping onto a params dataclass."""
    for key, value in values.items():
        if hasattr(target, key):
            setattr(target, key, value)
        else:
            logger.warning("Unknown key '%s' in section '%s' ignored", key, section)


def config_from_dict(data: Dict[str, Any]) -> VehicleConfig:
    """Build a VehicleConfig from a parsed YAML mapping.

    Missing sections and keys keep their defaults.

    Args:
        data: Mapping with optional sections vehicle, body, motor, battery,
            sensors, sensor_params, simulation

    Returns:
        VehicleConfig (not yet validated)
    """
    config = VehicleConfig()

    # An empty YAML section ("sensors:" alone on a line) parses as None
    v = data.get('vehicle') or {}
    config.vehicle_id = v.get('id', config.vehicle_id)
    config.frame_type = v.get('type', config.frame_type)
    config.motor_count = v.get('motor_count', config.motor_count)
    config.arm_length = v.get('arm_length', config.arm_length)
    config.body.mass = v.get('mass', config.body.mass)

    _apply_overrides(config.body, data.get('body') or {}, 'body')
    _apply_overrides(config.motor, data.get('motor') or {}, 'motor')

    b = dict(data.get('battery') or {})
    if 'cells' in b:
        b['cell_count'] = b.pop('cells')
    _apply_overrides(config.battery, b, 'battery')

    _apply_overrides(config.sensors, data.get('sensors') or {}, 'sensors')

    for name, values in (data.get('sensor_params') or {}).items():
        if not hasattr(config.sensor_params, name):
            logger.warning("Unknown sensor '%s' in sensor_params ignored", name)
            continue
        _apply_overrides(getattr(config.sensor_params, name), values or {}, f'sensor_params.{name}')

    s = data.get('simulation') or {}
    config.dt_physics = s.get('dt_physics', config.dt_physics)
    config.avionics_current = s.get('avionics_current', config.avionics_current)
    config.seed = s.get('seed', config.seed)

    return config


def load_vehicle_config(config_file: Union[str, Path] = DEFAULT_PRESET) -> VehicleConfig:
    """Load and validate a vehicle configuration.

    Args:
        config_file: Preset name in this package (e.g. "racing_quadcopter.yaml")
            or a path to any YAML file

    Returns:
        VehicleConfig; defaults if the file does not exist

    Raises:
        ValueError: If the loaded configuration is physically invalid
    """
    filepath = Path(config_file)
    if not filepath.is_absolute() and not filepath.exists():
        filepath = CONFIG_DIR / filepath

    if not filepath.exists():
        logger.warning("Config file %s not found, using defaults", filepath)
        return VehicleConfig()

    config = config_from_dict(load_yaml(filepath))
    config.validate()
    logger.info("Loaded vehicle config '%s' from %s", config.vehicle_id, filepath.name)
    return config


def list_presets() -> list:
    """Names of the YAML presets shipped with the package."""
    return sorted(p.name for p in CONFIG_DIR.glob("*.yaml"))
