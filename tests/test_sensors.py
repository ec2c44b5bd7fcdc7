"""Unit tests for the simulated sensor models."""

import json

import numpy as np
import pytest

from interfaces.random_source import NumpyRandomSource
from interfaces.types import (
    FixType,
    GPSData,
    IMUData,
    LidarScan,
    MeasurementKind,
    Vector3,
    VIOData,
)
from sensors import (
    GPS,
    IMU,
    Barometer,
    BarometerParams,
    Camera,
    Lidar,
    LidarParams,
    planar_directions,
    pressure_at_altitude,
)
from simulation import RigidBodyEngine


class TestIMU:
    """Test accelerometer and gyroscope model."""

    def test_reads_gravity_at_rest(self, engine, rng):
        """Resting accelerometer reads +g on z."""
        data = IMU(engine, rng=rng).read_data()

        assert isinstance(data, IMUData)
        assert data.kind == MeasurementKind.IMU
        assert data.acceleration.z == pytest.approx(9.81, abs=0.3)
        assert abs(data.acceleration.x) < 0.5
        assert abs(data.acceleration.y) < 0.5

    def test_free_fall_reads_near_zero(self, hovering_engine, rng):
        """Accelerometer measures specific force, so free fall reads ~0."""
        hovering_engine.update(0.01)
        data = IMU(hovering_engine, rng=rng).read_data()

        assert data.acceleration.z == pytest.approx(0.0, abs=0.3)

    def test_gyro_is_noise_around_zero(self, engine, rng):
        imu = IMU(engine, rng=rng)
        samples = np.array([imu.read_data().gyro.to_array() for _ in range(200)])

        assert np.all(np.abs(samples) < 0.1)
        assert np.allclose(samples.mean(axis=0), 0.0, atol=0.01)

    def test_bias_walks_on_every_read(self, engine, rng):
        imu = IMU(engine, rng=rng)
        imu.read_data()
        first_bias = imu._gyro_bias.copy()
        imu.read_data()

        assert not np.array_equal(first_bias, imu._gyro_bias)

    def test_temperature_range(self, engine, rng):
        imu = IMU(engine, rng=rng)
        for _ in range(50):
            assert 40.0 <= imu.read_data().temperature < 40.5

    def test_kind_and_id(self, engine):
        imu = IMU(engine)
        assert imu.get_measurement_kind() == MeasurementKind.IMU
        assert imu.sensor_id == "imu_0"
        assert imu.get_adapter_type() == "sensor"


class TestGPS:
    """Test GNSS model."""

    def test_origin_maps_to_reference_coordinates(self, engine, rng):
        data = GPS(engine, rng=rng).read_data()

        assert isinstance(data, GPSData)
        assert data.latitude == pytest.approx(37.7749, abs=1e-4)
        assert data.longitude == pytest.approx(-122.4194, abs=1e-4)
        assert data.fix_type == FixType.FIX_3D

    def test_north_moves_latitude(self, rng):
        """y is north: 1113.2 m north is 0.01 degrees of latitude."""
        engine = RigidBodyEngine(initial_position=Vector3(0.0, 1113.2, 0.0))
        data = GPS(engine, rng=rng).read_data()

        assert data.latitude == pytest.approx(37.7849, abs=1e-4)
        assert data.longitude == pytest.approx(-122.4194, abs=1e-4)

    def test_east_moves_longitude(self, rng):
        """x is east: a degree of longitude shrinks by cos(origin latitude)."""
        east = 1113.2 * np.cos(np.radians(37.7749))
        engine = RigidBodyEngine(initial_position=Vector3(east, 0.0, 0.0))
        data = GPS(engine, rng=rng).read_data()

        assert data.longitude == pytest.approx(-122.4094, abs=1e-4)
        assert data.latitude == pytest.approx(37.7749, abs=1e-4)

    def test_quality_fields_in_range(self, engine, rng):
        gps = GPS(engine, rng=rng)
        satellites = set()
        for _ in range(200):
            data = gps.read_data()
            assert 8 <= data.satellites <= 11
            assert 1.0 <= data.hdop < 1.5
            satellites.add(data.satellites)

        assert satellites == {8, 9, 10, 11}

    def test_drift_stays_small_over_short_run(self, engine, rng):
        gps = GPS(engine, rng=rng)
        for _ in range(10):
            data = gps.read_data()

        # 10 steps of at most 0.25 m
        assert abs(data.altitude) <= 0.5
        assert data.latitude == pytest.approx(37.7749, abs=3e-5)

    def test_seeded_readings_are_reproducible(self, engine):
        first = GPS(engine, rng=NumpyRandomSource(seed=5))
        second = GPS(engine, rng=NumpyRandomSource(seed=5))

        for _ in range(5):
            assert first.read_data() == second.read_data()


class TestBarometer:
    """Test pressure model."""

    def test_sea_level_pressure(self, engine, rng):
        data = Barometer(engine, rng=rng).read_data()

        assert data.pressure == pytest.approx(1013.25, abs=0.05)
        assert data.altitude == 0.0
        assert 20.0 <= data.temperature < 21.0

    def test_pressure_falls_with_altitude(self, hovering_engine, engine, rng):
        low = Barometer(engine, rng=rng).read_data()
        high = Barometer(hovering_engine, rng=rng).read_data()

        assert high.pressure < low.pressure
        assert high.altitude == pytest.approx(100.0)

    def test_pressure_at_altitude(self):
        assert pressure_at_altitude(0.0) == pytest.approx(1013.25)
        assert pressure_at_altitude(1000.0) == pytest.approx(898.7, rel=1e-3)

    def test_pressure_floors_at_zero_above_model_ceiling(self):
        assert pressure_at_altitude(1e6) == 0.0

    def test_custom_sea_level(self):
        params = BarometerParams(sea_level_pressure=1000.0)
        assert pressure_at_altitude(0.0, params) == pytest.approx(1000.0)


class TestLidar:
    """Test planar lidar scans."""

    def test_planar_directions_are_unit_and_horizontal(self):
        directions = planar_directions(8)

        assert len(directions) == 8
        assert directions[0].x == pytest.approx(1.0)
        for direction in directions:
            assert direction.magnitude() == pytest.approx(1.0)
            assert direction.z == 0.0

    def test_empty_world_produces_no_points(self, engine, rng):
        scan = Lidar(engine, rng=rng).read_data()

        assert isinstance(scan, LidarScan)
        assert scan.points == []

    def test_wall_ahead(self, wall_engine, rng):
        """Forward ray reports the wall face at x = 9.5."""
        scan = Lidar(wall_engine, rng=rng).read_data()

        assert len(scan.points) == 3
        forward = min(scan.points, key=lambda p: abs(p.y))
        assert forward.x == pytest.approx(9.5)
        assert forward.y == pytest.approx(0.0, abs=1e-9)
        for point in scan.points:
            assert point.x == pytest.approx(9.5)

    def test_short_range_sees_nothing(self, wall_engine, rng):
        lidar = Lidar(wall_engine, LidarParams(max_range=5.0), rng=rng)
        assert lidar.read_data().points == []

    def test_ray_count(self, engine):
        lidar = Lidar(engine, LidarParams(ray_count=16))
        assert len(lidar.directions) == 16

    def test_directions_are_copies(self, engine):
        lidar = Lidar(engine)
        lidar.directions[0].x = 0.0
        assert lidar.directions[0].x == pytest.approx(1.0)


class TestCamera:
    """Test VIO delta model."""

    def test_first_read_is_near_zero(self, engine, rng):
        data = Camera(engine, rng=rng).read_data()

        assert isinstance(data, VIOData)
        assert abs(data.delta_position.x) <= 0.005
        assert abs(data.delta_position.y) <= 0.005
        assert data.delta_position.z == 0.0

    def test_delta_tracks_movement(self, engine, rng):
        camera = Camera(engine, rng=rng)
        camera.read_data()

        engine.update(1.0, Vector3(0.0, 0.0, 20.0))
        data = camera.read_data()

        assert data.delta_position.z == pytest.approx(20.0 - 9.81)

        # Next frame only sees motion since the previous read
        data = camera.read_data()
        assert data.delta_position.z == 0.0

    def test_confidence_range(self, engine, rng):
        camera = Camera(engine, rng=rng)
        for _ in range(50):
            assert 0.9 <= camera.read_data().confidence < 1.0


class TestSerialization:
    """Measurements serialize with their kind tag."""

    def test_imu_json_carries_kind(self, engine, rng):
        payload = json.loads(IMU(engine, rng=rng).read_data().to_json())

        assert payload["kind"] == "imu"
        assert set(payload["acceleration"]) == {"x", "y", "z"}

    def test_gps_json_carries_fix_type(self, engine, rng):
        payload = json.loads(GPS(engine, rng=rng).read_data().to_json())

        assert payload["kind"] == "gps"
        assert payload["fix_type"] == "3D_FIX"
