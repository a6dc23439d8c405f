"""
Rocket sled physics engine

Advances one point mass along a flat horizontal track under thrust, Coulomb
friction and quadratic air drag using semi-implicit Euler integration.
"""

import dataclasses
import math
from typing import Dict, Optional

import numpy as np

from sled.forces import ForceModel
from sled.params import SledParams
from sled.state import SledState


class PhysicsEngine:
    """Owns the kinematic state of the sled and advances it once per frame"""

    def __init__(self, params: Optional[SledParams] = None) -> None:
        """
        Initialize engine at rest

        Args:
            params: Sled physical parameters (defaults if omitted)
        """
        # Private copy: mass and gravity stay fixed for the session
        self._params = dataclasses.replace(params) if params is not None else SledParams()
        self.force_model = ForceModel(self._params)

        # Settings, changed only through the setters
        self._friction_enabled = self._params.friction_enabled
        self._air_drag_enabled = self._params.air_drag_enabled
        self._applied_force_magnitude = self._params.base_thrust
        self._friction_coefficient = self._params.friction_coefficient

        self.reset()

    @property
    def params(self) -> SledParams:
        """Copy of the engine parameters"""
        return dataclasses.replace(self._params)

    def reset(self) -> None:
        """Return kinematics, forces and thrust to the initial condition"""
        self._position = 0.0
        self._velocity = 0.0
        self._acceleration = 0.0
        self._applied_force = 0.0
        self._friction_force = 0.0
        self._air_drag_force = 0.0
        self._net_force = 0.0
        self._thrust_direction = 0

        # Weight and normal force are always present
        self._gravity_force = self._params.mass * self._params.gravity
        self._normal_force = self._gravity_force

    # Control inputs

    def set_thrust_direction(self, direction: float) -> None:
        """Store the sign of the commanded direction (-1 left, 0 off, 1 right)"""
        if math.isnan(direction):
            direction = 0
        self._thrust_direction = int(np.sign(direction))

    def set_applied_force_magnitude(self, magnitude: float) -> None:
        """Store the thrust magnitude, clamped to [0, max_thrust]"""
        self._applied_force_magnitude = float(min(max(0.0, magnitude), self._params.max_thrust))

    def set_friction_enabled(self, enabled: bool) -> None:
        self._friction_enabled = bool(enabled)

    def set_air_drag_enabled(self, enabled: bool) -> None:
        self._air_drag_enabled = bool(enabled)

    def set_friction_coefficient(self, coefficient: float) -> None:
        self._friction_coefficient = float(max(0.0, coefficient))

    # Integration

    def advance(self, dt: float) -> None:
        """
        Advance the simulation by one frame

        Args:
            dt: Elapsed time in seconds, already capped by the caller
        """
        params = self._params
        forces = self.force_model
        dt = max(0.0, dt)

        # Vertical forces (flat track, no vertical acceleration)
        self._gravity_force = params.mass * params.gravity
        self._normal_force = self._gravity_force

        self._applied_force = forces.applied_force(
            self._thrust_direction, self._applied_force_magnitude
        )
        self._friction_force = forces.friction_force(
            self._friction_enabled,
            self._velocity,
            self._applied_force,
            self._friction_coefficient,
            self._normal_force,
        )
        self._air_drag_force = forces.air_drag(self._air_drag_enabled, self._velocity)
        self._net_force = forces.net_force(
            self._applied_force, self._friction_force, self._air_drag_force
        )

        # Newton's second law
        self._acceleration = self._net_force / params.mass

        # Semi-implicit Euler: velocity first, then position with the new velocity
        velocity = self._velocity + self._acceleration * dt
        velocity = max(-params.max_velocity, min(params.max_velocity, velocity))

        # Without resistance the sled coasts forever; with it, kill the slow creep
        if abs(velocity) < params.snap_velocity and self._thrust_direction == 0:
            resisted = self._friction_enabled or self._air_drag_enabled
            if resisted and abs(velocity) < params.stop_velocity:
                velocity = 0.0

        self._velocity = velocity
        self._position += self._velocity * dt

    # Queries

    def snapshot(self) -> SledState:
        """Copy of the current state"""
        return SledState(
            position=self._position,
            velocity=self._velocity,
            acceleration=self._acceleration,
            mass=self._params.mass,
            applied_force=self._applied_force,
            friction_force=self._friction_force,
            air_drag_force=self._air_drag_force,
            normal_force=self._normal_force,
            gravity_force=self._gravity_force,
            net_force=self._net_force,
            friction_enabled=self._friction_enabled,
            air_drag_enabled=self._air_drag_enabled,
            thrust_direction=self._thrust_direction,
            applied_force_magnitude=self._applied_force_magnitude,
            friction_coefficient=self._friction_coefficient,
        )

    def speed_percentage(self) -> float:
        """Speed as a percentage of max velocity (0-100)"""
        return abs(self._velocity) / self._params.max_velocity * 100.0

    def is_in_red_zone(self) -> bool:
        """True when speed exceeds the alarm percentage"""
        return self.speed_percentage() > self._params.alarm_percentage

    def forces(self) -> Dict[str, float]:
        """Force components for the force diagram, horizontal signed, vertical magnitudes"""
        return {
            "applied": self._applied_force,
            "friction": self._friction_force,
            "air_drag": self._air_drag_force,
            "net": self._net_force,
            "normal": self._normal_force,
            "gravity": self._gravity_force,
        }
