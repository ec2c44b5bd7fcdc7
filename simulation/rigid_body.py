"""Point-mass rigid body dynamics with a ground plane and box obstacles.

This module provides the single source of kinematic ground truth that every
simulated sensor reads from. It models translation only.

Features:
- 3-DOF translational dynamics (position, velocity, acceleration)
- Gravity
- Quadratic drag opposing velocity
- Externally supplied world-frame thrust
- Explicit (forward) Euler integration
- Ground plane at z = 0
- Axis-aligned box obstacles with ray queries (slab method)

Not modeled (for simplicity):
- Attitude / angular dynamics (thrust arrives already in world frame)
- Collisions with obstacles (they only affect ray queries)
- Wind
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from interfaces.types import NO_HIT, Obstacle, RigidBodyState, Vector3
from simulation.utils import sanitize_dt

logger = logging.getLogger(__name__)

# Direction components below this are treated as parallel to a slab
PARALLEL_EPSILON = 1e-6


@dataclass
class BodyParams:
    """Physical parameters of the simulated body."""
    mass: float = 1.0  # kg
    gravity: float = 9.81  # m/s²
    drag_coefficient: float = 0.1  # N per (m/s)²


class RigidBodyEngine:
    """Translational rigid body simulator.

    State (world frame, z up):
    - position [x, y, z] (m), z >= 0
    - velocity [vx, vy, vz] (m/s)
    - acceleration [ax, ay, az] (m/s²) from the last update

    Only the scheduler calls update(); sensors use the read-only accessors,
    which always return copies.

    Example:
        >>> engine = RigidBodyEngine(BodyParams(mass=1.5))
        >>> engine.add_obstacle(9.5, 10.5, -10, 10, -10, 10)
        >>> state = engine.update(0.01, Vector3(0.0, 0.0, 20.0))
        >>> engine.raycast(engine.get_position(), Vector3(1, 0, 0), 20.0)
        9.5
    """

    def __init__(
        self,
        params: Optional[BodyParams] = None,
        initial_position: Optional[Vector3] = None,
    ):
        """Initialize the engine at rest.

        Args:
            params: Body parameters. If None, uses a 1 kg body.
            initial_position: Starting position. If None, the origin.

        Raises:
            ValueError: If mass is not positive
        """
        self.params = params or BodyParams()
        if not self.params.mass > 0:
            raise ValueError(f"Body mass must be positive, got {self.params.mass}")

        self._position = (
            initial_position.to_array() if initial_position is not None else np.zeros(3)
        )
        self._velocity = np.zeros(3)
        self._acceleration = np.zeros(3)

        self._obstacles = []

        # Time
        self.time = 0.0

    # ------------------------------------------------------------------
    # Obstacles
    # ------------------------------------------------------------------

    def add_obstacle(
        self,
        min_x: float,
        max_x: float,
        min_y: float,
        max_y: float,
        min_z: float,
        max_z: float,
    ) -> Obstacle:
        """Append an axis-aligned box to the obstacle registry.

        Bounds are not validated; callers keep min <= max per axis.

        Returns:
            The stored (immutable) obstacle
        """
        obstacle = Obstacle(min_x, max_x, min_y, max_y, min_z, max_z)
        self._obstacles.append(obstacle)
        return obstacle

    @property
    def obstacles(self) -> Tuple[Obstacle, ...]:
        """Snapshot of the registry."""
        return tuple(self._obstacles)

    def raycast(self, origin: Vector3, direction: Vector3, max_range: float) -> float:
        """Distance along a ray to the nearest obstacle.

        Args:
            origin: Ray start (m)
            direction: Ray direction, normalized internally
            max_range: Hits farther than this are ignored (m)

        Returns:
            Distance to the closest hit in [0, max_range], or NO_HIT
        """
        d = direction.to_array()
        magnitude = np.linalg.norm(d)
        if not np.isfinite(magnitude) or magnitude == 0.0:
            return NO_HIT
        d = d / magnitude
        o = origin.to_array()

        closest = None
        for obstacle in self._obstacles:
            t = self._intersect(o, d, obstacle)
            if t is None or t > max_range:
                continue
            if closest is None or t < closest:
                closest = t

        return NO_HIT if closest is None else closest

    @staticmethod
    def _intersect(origin: np.ndarray, direction: np.ndarray, obstacle: Obstacle) -> Optional[float]:
        """Slab-method ray/box test. Returns entry distance or None."""
        t_min, t_max = -np.inf, np.inf

        for axis, (lo, hi) in enumerate(obstacle.slabs()):
            if abs(direction[axis]) < PARALLEL_EPSILON:
                # Parallel: this axis never constrains t, but the origin must lie inside the slab
                if origin[axis] < lo or origin[axis] > hi:
                    return None
                continue
            t0 = (lo - origin[axis]) / direction[axis]
            t1 = (hi - origin[axis]) / direction[axis]
            t_min = max(t_min, min(t0, t1))
            t_max = min(t_max, max(t0, t1))

        if t_max >= t_min and t_min >= 0:
            return float(t_min)
        return None

    # ------------------------------------------------------------------
    # Dynamics
    # ------------------------------------------------------------------

    def update(self, dt: float, thrust_world: Optional[Vector3] = None) -> RigidBodyState:
        """Advance the body by dt seconds with explicit Euler integration.

        Args:
            dt: Time step (seconds). Negative or non-finite steps count as 0.
            thrust_world: Total thrust force in world frame (N). None = no thrust.

        Returns:
            Updated rigid body state
        """
        dt = sanitize_dt(dt, owner="RigidBodyEngine")
        mass = self.params.mass

        thrust = thrust_world.to_array() if thrust_world is not None else np.zeros(3)
        gravity_force = np.array([0.0, 0.0, -self.params.gravity * mass])

        speed = np.linalg.norm(self._velocity)
        if speed > 0:
            drag_force = -(self._velocity / speed) * self.params.drag_coefficient * speed**2
        else:
            drag_force = np.zeros(3)

        acceleration = (thrust + gravity_force + drag_force) / mass
        velocity = self._velocity + acceleration * dt
        position = self._position + velocity * dt

        # Ground contact zeroes vertical dynamics for this tick
        if position[2] <= 0.0:
            position[2] = 0.0
            velocity[2] = 0.0
            acceleration[2] = 0.0

        self._acceleration = acceleration
        self._velocity = velocity
        self._position = position
        self.time += dt

        return self.get_state()

    # ------------------------------------------------------------------
    # Accessors (copies only)
    # ------------------------------------------------------------------

    def get_position(self) -> Vector3:
        return Vector3.from_array(self._position)

    def get_velocity(self) -> Vector3:
        return Vector3.from_array(self._velocity)

    def get_acceleration(self) -> Vector3:
        return Vector3.from_array(self._acceleration)

    def get_state(self) -> RigidBodyState:
        """Get current state as a RigidBodyState snapshot."""
        return RigidBodyState(
            time=self.time,
            position=self.get_position(),
            velocity=self.get_velocity(),
            acceleration=self.get_acceleration(),
        )

    def __repr__(self) -> str:
        return (
            f"RigidBodyEngine(mass={self.params.mass}, "
            f"obstacles={len(self._obstacles)})"
        )
