"""
Frame driver: samples the wall clock once per display refresh and steps the engine
"""

import logging
import time
from typing import Callable, Optional, Tuple

from sled.engine import PhysicsEngine
from sled.state import SledState

logger = logging.getLogger(__name__)


class FrameDriver:
    """Feeds clamped frame deltas to the engine and exposes UI-level actions"""

    def __init__(
        self,
        engine: PhysicsEngine,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        """
        Initialize frame driver

        Args:
            engine: Physics engine to drive
            clock: Monotonic clock returning seconds
        """
        self.engine = engine
        self.clock = clock
        self.running = True
        self.last_time: Optional[float] = None

    def start(self, now: Optional[float] = None) -> None:
        """Record the reference time for the first frame"""
        self.last_time = self.clock() if now is None else now
        logger.debug("Frame driver started at t=%.3f", self.last_time)

    def tick(self, now: Optional[float] = None) -> SledState:
        """
        Run one frame

        Args:
            now: Current time in seconds (sampled from the clock if omitted)

        Returns:
            State snapshot for rendering
        """
        if now is None:
            now = self.clock()
        if self.last_time is None:
            self.last_time = now

        if self.running:
            # Cap the step so a stalled frame (hidden tab, modal) can't jump
            dt = min(max(0.0, now - self.last_time), self.engine.params.max_dt)
            self.engine.advance(dt)
        self.last_time = now
        return self.engine.snapshot()

    def pause(self) -> None:
        self.running = False
        logger.debug("Simulation paused")

    def resume(self, now: Optional[float] = None) -> None:
        """Resume without a catch-up step for the paused interval"""
        self.running = True
        self.last_time = self.clock() if now is None else now
        logger.debug("Simulation resumed")

    def toggle(self, now: Optional[float] = None) -> bool:
        """Pause or resume, returning the new running flag"""
        if self.running:
            self.pause()
        else:
            self.resume(now)
        return self.running

    def full_reset(self, clear_toggles: bool = False) -> SledState:
        """
        Reset the engine and the operator controls

        The engine keeps its resistance flags across reset(); clearing the
        toggles is the control layer's job.

        Args:
            clear_toggles: Also switch friction and air drag off
        """
        self.engine.reset()
        self.engine.set_thrust_direction(0)
        if clear_toggles:
            self.engine.set_friction_enabled(False)
            self.engine.set_air_drag_enabled(False)
        logger.debug("Full reset (clear_toggles=%s)", clear_toggles)
        return self.engine.snapshot()

    def speed_readout(self) -> Tuple[str, float, bool]:
        """
        Speedometer values

        Returns:
            Tuple of (display text, bar percentage, red zone flag)
        """
        state = self.engine.snapshot()
        text = f"{state.speed:.1f} m/s"
        return text, self.engine.speed_percentage(), self.engine.is_in_red_zone()
