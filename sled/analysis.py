"""
Motion analysis of recorded sled runs
"""

from typing import Any, Dict

import numpy as np
from scipy.integrate import trapezoid

from sled.params import SledParams


class MotionAnalyzer:
    """Summarizes a simulated run: speeds, distances, work done by each force"""

    def __init__(self, params: SledParams) -> None:
        """
        Initialize motion analyzer

        Args:
            params: Sled physical parameters
        """
        self.params = params

    def analyze(
        self, t: np.ndarray, state: np.ndarray, forces: np.ndarray
    ) -> Dict[str, Any]:
        """
        Analyze simulation results

        Args:
            t: Time array
            state: State history [N x 3] with [position, velocity, acceleration]
            forces: Force history [N x 4] with [applied, friction, air_drag, net]

        Returns:
            Dictionary with analysis results
        """
        position = state[:, 0]
        velocity = state[:, 1]
        speed = np.abs(velocity)

        applied = forces[:, 0]
        friction = forces[:, 1]
        air_drag = forces[:, 2]

        max_speed = float(np.max(speed)) if len(speed) > 0 else 0.0
        final_position = float(position[-1]) if len(position) > 0 else 0.0
        final_velocity = float(velocity[-1]) if len(velocity) > 0 else 0.0

        # Work = integral of F·v dt; resistive forces always come out non-positive
        if len(t) > 1:
            distance_travelled = float(trapezoid(speed, t))
            thrust_work = float(trapezoid(applied * velocity, t))
            friction_work = float(trapezoid(friction * velocity, t))
            drag_work = float(trapezoid(air_drag * velocity, t))
        else:
            distance_travelled = thrust_work = friction_work = drag_work = 0.0

        kinetic_energy = 0.5 * self.params.mass * final_velocity**2

        # Red zone: time spent above the alarm speed, counted per completed step
        if len(t) > 1:
            step_durations = np.diff(t)
            in_red_zone = speed[1:] > self.params.alarm_velocity
            time_in_red_zone = float(np.sum(step_durations[in_red_zone]))
            red_zone_fraction = time_in_red_zone / float(t[-1] - t[0]) if t[-1] > t[0] else 0.0
        else:
            time_in_red_zone = 0.0
            red_zone_fraction = 0.0

        # Direction reversals ignore frames at exact rest
        moving_signs = np.sign(velocity[velocity != 0.0])
        direction_reversals = int(np.sum(np.diff(moving_signs) != 0)) if len(moving_signs) > 1 else 0

        is_velocity_bounded = bool(max_speed <= self.params.max_velocity + 1e-9)
        stopped = bool(abs(final_velocity) <= self.params.velocity_epsilon)

        return {
            "max_speed": max_speed,
            "final_position": final_position,
            "final_velocity": final_velocity,
            "distance_travelled": distance_travelled,
            "thrust_work": thrust_work,
            "friction_work": friction_work,
            "drag_work": drag_work,
            "kinetic_energy": kinetic_energy,
            "time_in_red_zone": time_in_red_zone,
            "red_zone_fraction": red_zone_fraction,
            "direction_reversals": direction_reversals,
            "is_velocity_bounded": is_velocity_bounded,
            "stopped": stopped,
        }
