"""
Operator input mapping onto the engine's mutator API

Keyboard and button handlers translate into plain calls on the engine; the
engine itself knows nothing about keys or widgets.
"""

from typing import Callable, Dict

from sled.driver import FrameDriver

THRUST_LEFT = -1
THRUST_OFF = 0
THRUST_RIGHT = 1


def press_thrust(driver: FrameDriver, direction: int) -> None:
    driver.engine.set_thrust_direction(direction)


def set_force_slider(driver: FrameDriver, value: float) -> float:
    """Apply the force slider, returning the magnitude actually stored"""
    driver.engine.set_applied_force_magnitude(value)
    return driver.engine.snapshot().applied_force_magnitude


def set_friction_slider(driver: FrameDriver, value: float) -> float:
    """Apply the friction slider, clamped to the slider's range"""
    ceiling = driver.engine.params.max_friction_coefficient
    driver.engine.set_friction_coefficient(min(value, ceiling))
    return driver.engine.snapshot().friction_coefficient


def toggle_friction(driver: FrameDriver, enabled: bool) -> None:
    driver.engine.set_friction_enabled(enabled)


def toggle_air_drag(driver: FrameDriver, enabled: bool) -> None:
    driver.engine.set_air_drag_enabled(enabled)


def _reset(driver: FrameDriver) -> None:
    driver.full_reset()


KEY_BINDINGS: Dict[str, Callable[[FrameDriver], None]] = {
    "ArrowLeft": lambda d: press_thrust(d, THRUST_LEFT),
    "a": lambda d: press_thrust(d, THRUST_LEFT),
    "A": lambda d: press_thrust(d, THRUST_LEFT),
    "ArrowRight": lambda d: press_thrust(d, THRUST_RIGHT),
    "d": lambda d: press_thrust(d, THRUST_RIGHT),
    "D": lambda d: press_thrust(d, THRUST_RIGHT),
    " ": lambda d: press_thrust(d, THRUST_OFF),
    "r": _reset,
    "R": _reset,
}


def handle_key(driver: FrameDriver, key: str) -> bool:
    """
    Dispatch a key press

    Args:
        driver: Frame driver owning the engine
        key: Key name as reported by the host (e.g. "ArrowLeft", "a", " ")

    Returns:
        True if the key was bound to an action
    """
    action = KEY_BINDINGS.get(key)
    if action is None:
        return False
    action(driver)
    return True
