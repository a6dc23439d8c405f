"""
Rocket Sled Simulation

This package simulates a rocket sled on a flat track under operator-controlled
thrust, optional Coulomb friction and optional quadratic air drag, for teaching
Newton's laws.
"""

from sled.params import SledParams
from sled.state import SledState
from sled.forces import ForceModel
from sled.engine import PhysicsEngine
from sled.driver import FrameDriver
from sled.simulator import ControlEvent, SledSimulator
from sled.analysis import MotionAnalyzer
from sled.scenarios import SCENARIOS, run_scenario_analysis

__all__ = [
    "SledParams",
    "SledState",
    "ForceModel",
    "PhysicsEngine",
    "FrameDriver",
    "ControlEvent",
    "SledSimulator",
    "MotionAnalyzer",
    "SCENARIOS",
    "run_scenario_analysis",
]
