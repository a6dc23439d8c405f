"""
Built-in demonstration scenarios and batch analysis
"""

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from sled.params import SledParams
from sled.simulator import ControlEvent, SledSimulator

logger = logging.getLogger(__name__)

# name -> (description, control schedule)
SCENARIOS: Dict[str, Tuple[str, Tuple[ControlEvent, ...]]] = {
    "coasting": (
        "Thrust for 2 s, then coast with no resistance (Newton's first law)",
        (
            ControlEvent(0.0, thrust_direction=1),
            ControlEvent(2.0, thrust_direction=0),
        ),
    ),
    "friction_start": (
        "Friction on: thrust overcomes static friction, then the sled slides to a stop",
        (
            ControlEvent(0.0, friction_enabled=True, thrust_direction=1),
            ControlEvent(3.0, thrust_direction=0),
        ),
    ),
    "static_lock": (
        "Friction on with a weak push: static friction holds the sled",
        (
            ControlEvent(0.0, friction_enabled=True, force_magnitude=500.0, thrust_direction=1),
        ),
    ),
    "drag_terminal": (
        "Air drag on: speed levels off where drag balances thrust",
        (
            ControlEvent(0.0, air_drag_enabled=True, force_magnitude=1000.0, thrust_direction=1),
        ),
    ),
    "reversal": (
        "Full thrust right, then full thrust left: inertia resists the reversal",
        (
            ControlEvent(0.0, thrust_direction=1),
            ControlEvent(3.0, thrust_direction=-1),
        ),
    ),
}


def run_scenario_analysis(
    names: Optional[Iterable[str]] = None,
    duration: float = 10.0,
    dt: float = 1.0 / 60.0,
    params: Optional[SledParams] = None,
) -> Dict[str, Dict[str, Any]]:
    """
    Run simulation for multiple scenarios

    Args:
        names: Scenario names (all built-in scenarios if omitted)
        duration: Simulation duration in seconds
        dt: Frame time step in seconds
        params: Sled physical parameters

    Returns:
        Dictionary with results for each scenario
    """
    if names is None:
        names = list(SCENARIOS)
    results: Dict[str, Dict[str, Any]] = {}

    for name in names:
        if name not in SCENARIOS:
            raise KeyError(f"Unknown scenario: {name!r}")
        description, events = SCENARIOS[name]
        simulator = SledSimulator(params)

        t, state, forces = simulator.simulate(duration=duration, dt=dt, events=events)
        analysis = simulator.analyze_motion(t, state, forces)
        logger.debug("Scenario %s: max speed %.2f m/s", name, analysis["max_speed"])

        results[name] = {
            "description": description,
            "time": t,
            "state": state,
            "forces": forces,
            "analysis": analysis,
            "simulator": simulator,
        }

    return results
