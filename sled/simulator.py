"""
Offline sled simulator: runs the engine over a scripted control schedule
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from sled.engine import PhysicsEngine
from sled.params import SledParams
from sled.state import SledState
from sled.analysis import MotionAnalyzer

logger = logging.getLogger(__name__)

STATE_COLUMNS = ("position", "velocity", "acceleration")
FORCE_COLUMNS = ("applied", "friction", "air_drag", "net")


@dataclass(frozen=True)
class ControlEvent:
    """Operator action applied at the first frame at or after `time`"""

    time: float  # s
    thrust_direction: Optional[int] = None
    force_magnitude: Optional[float] = None  # N
    friction_enabled: Optional[bool] = None
    air_drag_enabled: Optional[bool] = None
    friction_coefficient: Optional[float] = None

    def apply(self, engine: PhysicsEngine) -> None:
        """Forward the set fields to the engine mutators"""
        if self.thrust_direction is not None:
            engine.set_thrust_direction(self.thrust_direction)
        if self.force_magnitude is not None:
            engine.set_applied_force_magnitude(self.force_magnitude)
        if self.friction_enabled is not None:
            engine.set_friction_enabled(self.friction_enabled)
        if self.air_drag_enabled is not None:
            engine.set_air_drag_enabled(self.air_drag_enabled)
        if self.friction_coefficient is not None:
            engine.set_friction_coefficient(self.friction_coefficient)


class SledSimulator:
    """Runs fixed-step simulations of the sled and records histories"""

    def __init__(self, params: Optional[SledParams] = None) -> None:
        """
        Initialize simulator

        Args:
            params: Sled physical parameters
        """
        self.params = params if params is not None else SledParams()
        self.engine = PhysicsEngine(self.params)
        self.analyzer = MotionAnalyzer(self.params)

    def simulate(
        self,
        duration: float = 10.0,
        dt: float = 1.0 / 60.0,
        events: Sequence[ControlEvent] = (),
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Run simulation from rest

        Args:
            duration: Simulation duration (s)
            dt: Frame time step (s), capped at params.max_dt
            events: Control schedule

        Returns:
            Tuple of (time_array, state_history, force_history) where state
            columns are [position, velocity, acceleration] and force columns
            are [applied, friction, air_drag, net]
        """
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        if duration < 0:
            raise ValueError(f"duration must be non-negative, got {duration}")

        dt = min(dt, self.params.max_dt)
        n_steps = int(round(duration / dt))
        t = np.arange(n_steps + 1) * dt

        # Fresh engine so toggles from a previous run do not leak in
        self.engine = PhysicsEngine(self.params)
        pending: List[ControlEvent] = sorted(events, key=lambda e: e.time)

        state_history = np.zeros((n_steps + 1, len(STATE_COLUMNS)))
        force_history = np.zeros((n_steps + 1, len(FORCE_COLUMNS)))
        self._record(self.engine.snapshot(), state_history, force_history, 0)

        for i in range(1, n_steps + 1):
            # Events fire at the start of the frame that reaches their time
            now = t[i - 1]
            while pending and pending[0].time <= now + 1e-9:
                pending.pop(0).apply(self.engine)
            self.engine.advance(dt)
            self._record(self.engine.snapshot(), state_history, force_history, i)

        logger.debug(
            "Simulated %d steps (dt=%.4f): x=%.2f m, v=%.2f m/s",
            n_steps, dt, state_history[-1, 0], state_history[-1, 1],
        )
        return t, state_history, force_history

    @staticmethod
    def _record(
        state: SledState, state_history: np.ndarray, force_history: np.ndarray, i: int
    ) -> None:
        state_history[i] = [state.position, state.velocity, state.acceleration]
        force_history[i] = [
            state.applied_force,
            state.friction_force,
            state.air_drag_force,
            state.net_force,
        ]

    def analyze_motion(
        self, t: np.ndarray, state: np.ndarray, forces: np.ndarray
    ) -> dict:
        """
        Analyze simulation results

        Args:
            t: Time array
            state: State history
            forces: Force history

        Returns:
            Dictionary with analysis results
        """
        return self.analyzer.analyze(t, state, forces)
