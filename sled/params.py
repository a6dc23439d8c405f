"""
Rocket sled physical parameters
"""

from dataclasses import dataclass


@dataclass
class SledParams:
    """Physical parameters and tunables of the sled simulation"""

    mass: float = 500.0  # kg
    base_thrust: float = 2000.0  # N (thrust magnitude at startup)
    max_thrust: float = 5000.0  # N (ceiling of the operator force slider)
    friction_coefficient: float = 0.15  # kinetic friction coefficient (mu)
    max_friction_coefficient: float = 1.0  # ceiling of the friction slider
    air_drag_coefficient: float = 0.5  # N·s²/m²
    gravity: float = 9.8  # m/s²
    max_velocity: float = 50.0  # m/s (cap for simulation stability)
    max_dt: float = 0.05  # s (frame delta ceiling, 50ms)
    # Low-speed thresholds
    velocity_epsilon: float = 0.01  # m/s, below this the sled counts as at rest
    static_friction_slack: float = 1.1  # static lock holds below 110% of mu*N
    snap_velocity: float = 0.1  # m/s, coast/stop check window
    stop_velocity: float = 0.05  # m/s, snapped to zero when resisted
    # Speed gauge
    alarm_percentage: float = 80.0  # % of max_velocity (red zone)
    # Initial toggle state
    friction_enabled: bool = False
    air_drag_enabled: bool = False
    # Derived
    weight: float = 0.0  # Will be calculated
    alarm_velocity: float = 0.0  # Will be calculated

    def __post_init__(self) -> None:
        """Validate and calculate derived parameters"""
        if self.mass <= 0:
            raise ValueError(f"mass must be positive, got {self.mass}")
        if self.gravity <= 0:
            raise ValueError(f"gravity must be positive, got {self.gravity}")
        if self.max_velocity <= 0:
            raise ValueError(f"max_velocity must be positive, got {self.max_velocity}")

        self.max_thrust = max(0.0, self.max_thrust)
        self.base_thrust = min(max(0.0, self.base_thrust), self.max_thrust)
        self.max_friction_coefficient = max(0.0, self.max_friction_coefficient)
        self.friction_coefficient = max(0.0, self.friction_coefficient)
        self.air_drag_coefficient = max(0.0, self.air_drag_coefficient)
        self.max_dt = max(0.0, self.max_dt)

        # Flat track: normal force equals weight
        self.weight = self.mass * self.gravity
        self.alarm_velocity = self.max_velocity * self.alarm_percentage / 100.0
