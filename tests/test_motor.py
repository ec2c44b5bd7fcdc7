"""Unit tests for the motor (actuator) model."""

import pytest

from interfaces.hardware import ActuatorAdapter
from interfaces.types import ActuatorState, MotorDirection, Vector3
from simulation import Motor, MotorParams


class TestMotorParams:
    """Test parameter validation at construction."""

    @pytest.mark.parametrize("params, field", [
        (MotorParams(spin_up_time=0.0), "spin_up_time"),
        (MotorParams(spin_up_time=-0.5), "spin_up_time"),
        (MotorParams(spin_up_time=float("nan")), "spin_up_time"),
        (MotorParams(max_rpm=0.0), "max_rpm"),
        (MotorParams(max_rpm=-100.0), "max_rpm"),
    ])
    def test_invalid_params_rejected(self, params, field):
        with pytest.raises(ValueError, match=field):
            Motor(params=params)


class TestThrottle:
    """Test throttle command handling."""

    @pytest.mark.parametrize("command, expected", [
        (-1.0, 0.0),
        (0.0, 0.0),
        (0.42, 0.42),
        (1.0, 1.0),
        (2.0, 1.0),
    ])
    def test_throttle_clamped(self, command, expected):
        motor = Motor()
        motor.set_throttle(command)
        assert motor.read().throttle == pytest.approx(expected)

    def test_non_finite_throttle_stops_motor(self):
        motor = Motor()
        motor.set_throttle(0.5)
        motor.set_throttle(float("nan"))
        assert motor.throttle == 0.0


class TestSpinUp:
    """Test first-order speed response."""

    def test_starts_at_rest(self):
        motor = Motor()
        assert motor.get_speed() == 0.0

    def test_converges_to_max_speed(self):
        """Full throttle for 10 time constants reaches max speed within 1%."""
        params = MotorParams(max_rpm=10000.0, spin_up_time=0.5)
        motor = Motor(params=params)
        motor.set_throttle(1.0)

        dt = 0.01
        steps = int(10 * params.spin_up_time / dt)
        for _ in range(steps):
            motor.update(dt)

        assert motor.get_speed() == pytest.approx(params.max_rpm, rel=0.01)

    def test_single_long_step_lands_on_target(self):
        """A step longer than the time constant does not overshoot."""
        motor = Motor(params=MotorParams(max_rpm=10000.0, spin_up_time=0.5))
        motor.set_throttle(1.0)
        motor.update(5.0)

        assert motor.get_speed() == pytest.approx(10000.0)

    def test_first_step_follows_exponential_approach(self):
        """Step size is (target - current) * dt / time constant."""
        motor = Motor(params=MotorParams(max_rpm=10000.0, spin_up_time=0.5))
        motor.set_throttle(0.5)
        motor.update(0.05)

        assert motor.get_speed() == pytest.approx(5000.0 * 0.1)

    def test_spins_down_when_throttle_cut(self):
        motor = Motor()
        motor.set_throttle(1.0)
        for _ in range(100):
            motor.update(0.05)
        motor.set_throttle(0.0)
        for _ in range(100):
            motor.update(0.05)

        assert 0.0 <= motor.get_speed() < 10.0

    def test_negative_dt_ignored(self):
        motor = Motor()
        motor.set_throttle(1.0)
        motor.update(-1.0)
        assert motor.get_speed() == 0.0


class TestPropellerModel:
    """Test thrust and current derived from speed."""

    def test_idle_motor_produces_nothing(self):
        motor = Motor()
        assert motor.thrust() == 0.0
        assert motor.current_draw() == 0.0

    def test_full_speed_thrust_and_current(self):
        params = MotorParams(max_thrust=15.0, max_current=20.0, spin_up_time=0.1)
        motor = Motor(params=params)
        motor.set_throttle(1.0)
        motor.update(1.0)

        assert motor.thrust() == pytest.approx(15.0)
        assert motor.current_draw() == pytest.approx(20.0)

    def test_half_speed_scaling(self):
        params = MotorParams(max_thrust=16.0, max_current=8.0, spin_up_time=0.1)
        motor = Motor(params=params)
        motor.set_throttle(0.5)
        motor.update(1.0)

        assert motor.thrust() == pytest.approx(4.0)
        assert motor.current_draw() == pytest.approx(1.0)


class TestAdapterContract:
    """Motor behaves as an ActuatorAdapter."""

    def test_is_actuator_adapter(self):
        motor = Motor()
        assert isinstance(motor, ActuatorAdapter)
        assert motor.get_adapter_type() == "actuator"

    def test_read_returns_state(self):
        motor = Motor(motor_id=3, position=Vector3(0.2, 0.0, 0.0), direction=MotorDirection.CCW)
        state = motor.read()

        assert isinstance(state, ActuatorState)
        assert state.motor_id == 3
        assert state.direction == MotorDirection.CCW
        assert state.max_speed == 10000.0

    def test_write_is_ignored(self):
        motor = Motor()
        motor.write({"throttle": 1.0})
        assert motor.throttle == 0.0

    def test_init_is_idempotent(self):
        motor = Motor()
        motor.init()
        motor.init()
        assert motor.is_initialized

    def test_dispose_is_noop(self):
        motor = Motor()
        motor.set_throttle(1.0)
        motor.update(0.1)
        speed = motor.get_speed()
        motor.dispose()
        assert motor.get_speed() == speed

    def test_info(self):
        info = Motor(motor_id=2, direction=MotorDirection.CCW).get_info()
        assert info["adapter_type"] == "actuator"
        assert info["motor_id"] == 2
        assert info["direction"] == "CCW"
