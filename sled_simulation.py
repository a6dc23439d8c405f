"""
Rocket Sled Simulation

Entry point re-exporting the simulation API, with a console report of the
built-in scenarios when run as a script.
"""

import logging

from sled import (
    SCENARIOS,
    ControlEvent,
    FrameDriver,
    MotionAnalyzer,
    PhysicsEngine,
    SledParams,
    SledSimulator,
    SledState,
    run_scenario_analysis,
)

__all__ = [
    "SCENARIOS",
    "ControlEvent",
    "FrameDriver",
    "MotionAnalyzer",
    "PhysicsEngine",
    "SledParams",
    "SledSimulator",
    "SledState",
    "run_scenario_analysis",
]


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    results = run_scenario_analysis(duration=10.0)

    print("Scenario Analysis Results:")
    print("-" * 80)
    for name, data in results.items():
        analysis = data["analysis"]
        print(f"\nScenario: {name}")
        print(f"  {data['description']}")
        print(f"  Max speed: {analysis['max_speed']:.2f} m/s")
        print(f"  Final position: {analysis['final_position']:.2f} m")
        print(f"  Final velocity: {analysis['final_velocity']:.2f} m/s")
        print(f"  Distance travelled: {analysis['distance_travelled']:.2f} m")
        print(f"  Thrust work: {analysis['thrust_work']/1000:.2f} kJ")
        print(f"  Friction work: {analysis['friction_work']/1000:.2f} kJ")
        print(f"  Drag work: {analysis['drag_work']/1000:.2f} kJ")
        print(f"  Time in red zone: {analysis['time_in_red_zone']:.2f} s")
        print(f"  Direction reversals: {analysis['direction_reversals']}")
        print(f"  Stopped: {analysis['stopped']}")
