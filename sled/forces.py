"""
Horizontal force model for the sled: thrust, Coulomb friction and air drag
"""

import numpy as np

from sled.params import SledParams


class ForceModel:
    """Computes the horizontal forces acting on the sled for one step"""

    def __init__(self, params: SledParams) -> None:
        """
        Initialize force model

        Args:
            params: Sled physical parameters
        """
        self.params = params

    def applied_force(self, thrust_direction: int, magnitude: float) -> float:
        """Thrust from the rockets, signed by direction"""
        return float(thrust_direction * magnitude)

    def kinetic_friction(
        self, velocity: float, friction_coefficient: float, normal_force: float
    ) -> float:
        """
        Kinetic (sliding) friction, opposing the current velocity

        Args:
            velocity: Sled velocity (m/s)
            friction_coefficient: Coefficient of friction (mu)
            normal_force: Normal force from the track (N)

        Returns:
            Friction force in Newtons, zero while at rest
        """
        if abs(velocity) <= self.params.velocity_epsilon:
            return 0.0
        friction_magnitude = friction_coefficient * normal_force
        return float(-np.sign(velocity) * friction_magnitude)

    def is_static_lock(
        self,
        velocity: float,
        applied_force: float,
        friction_coefficient: float,
        normal_force: float,
    ) -> bool:
        """
        Check whether static friction holds the sled in place

        Holds at rest while |applied| < slack * mu * N.
        """
        if abs(velocity) > self.params.velocity_epsilon:
            return False
        threshold = self.params.static_friction_slack * friction_coefficient * normal_force
        return abs(applied_force) < threshold

    def friction_force(
        self,
        enabled: bool,
        velocity: float,
        applied_force: float,
        friction_coefficient: float,
        normal_force: float,
    ) -> float:
        """
        Total friction force for the step

        Args:
            enabled: Whether friction is switched on
            velocity: Sled velocity (m/s)
            applied_force: Thrust for this step (N)
            friction_coefficient: Coefficient of friction (mu)
            normal_force: Normal force from the track (N)

        Returns:
            Friction force in Newtons
        """
        if not enabled:
            return 0.0
        # Static friction takes priority: cancel the applied force exactly
        if self.is_static_lock(velocity, applied_force, friction_coefficient, normal_force):
            return -applied_force
        return self.kinetic_friction(velocity, friction_coefficient, normal_force)

    def air_drag(self, enabled: bool, velocity: float) -> float:
        """
        Air drag, quadratic in velocity and opposing motion

        Args:
            enabled: Whether air drag is switched on
            velocity: Sled velocity (m/s)

        Returns:
            Drag force in Newtons
        """
        if not enabled or abs(velocity) <= self.params.velocity_epsilon:
            return 0.0
        drag_magnitude = self.params.air_drag_coefficient * velocity * velocity
        return float(-np.sign(velocity) * drag_magnitude)

    @staticmethod
    def net_force(applied_force: float, friction_force: float, air_drag_force: float) -> float:
        """Sum of horizontal forces"""
        return applied_force + friction_force + air_drag_force
