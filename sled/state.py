"""
Sled state snapshot
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class SledState:
    """Read-only snapshot of the physics state, taken once per frame"""

    position: float  # m from origin (positive = right)
    velocity: float  # m/s (positive = right)
    acceleration: float  # m/s²
    mass: float  # kg
    # Forces (N)
    applied_force: float
    friction_force: float
    air_drag_force: float
    normal_force: float
    gravity_force: float
    net_force: float
    # Settings
    friction_enabled: bool
    air_drag_enabled: bool
    thrust_direction: int  # -1 = left, 0 = off, 1 = right
    applied_force_magnitude: float
    friction_coefficient: float

    @property
    def speed(self) -> float:
        """Magnitude of velocity (m/s)"""
        return abs(self.velocity)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
