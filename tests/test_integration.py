"""
Integration tests for the full analysis workflow.

Tests the run_scenario_analysis function which runs the built-in scenarios
and analyzes each of them.
"""

import pytest

from sled_simulation import SCENARIOS, SledParams, run_scenario_analysis


class TestIntegration:
    """Test suite for integration tests"""

    def test_run_all_scenarios(self) -> None:
        """Test that every built-in scenario produces a result"""
        results = run_scenario_analysis(duration=2.0)

        assert set(results) == set(SCENARIOS)

    def test_results_contain_required_keys(self) -> None:
        """Test that results contain all required data"""
        results = run_scenario_analysis(["coasting"], duration=1.0)

        for name, data in results.items():
            assert "description" in data
            assert "time" in data
            assert "state" in data
            assert "forces" in data
            assert "analysis" in data
            assert "simulator" in data

    def test_unknown_scenario(self) -> None:
        with pytest.raises(KeyError):
            run_scenario_analysis(["warp_drive"], duration=1.0)

    def test_static_lock_scenario(self) -> None:
        """Test that the weak push never moves the sled"""
        analysis = run_scenario_analysis(["static_lock"])["static_lock"]["analysis"]

        assert analysis["max_speed"] == 0.0
        assert analysis["final_position"] == 0.0

    def test_friction_start_scenario(self) -> None:
        """Test that the sled breaks away, then slides to a stop"""
        analysis = run_scenario_analysis(["friction_start"])["friction_start"]["analysis"]

        assert analysis["max_speed"] > 0
        assert analysis["stopped"] is True

    def test_coasting_scenario(self) -> None:
        """Test that the sled keeps its speed after thrust is cut"""
        data = run_scenario_analysis(["coasting"])["coasting"]
        velocity = data["state"][:, 1]
        coast = data["time"] > 2.1

        assert velocity[coast].min() == velocity[coast].max()

    def test_drag_terminal_scenario(self) -> None:
        """Test that drag keeps the sled below the force-balance speed"""
        results = run_scenario_analysis(["drag_terminal"], duration=30.0)
        analysis = results["drag_terminal"]["analysis"]
        params = results["drag_terminal"]["simulator"].params
        terminal = (1000.0 / params.air_drag_coefficient) ** 0.5

        assert analysis["max_speed"] < terminal
        assert analysis["max_speed"] > 0.8 * terminal
        assert analysis["drag_work"] < 0

    def test_reversal_scenario(self) -> None:
        analysis = run_scenario_analysis(["reversal"])["reversal"]["analysis"]

        assert analysis["direction_reversals"] == 1

    def test_custom_params(self) -> None:
        """Test that a heavier sled accelerates more slowly"""
        light = run_scenario_analysis(["coasting"], params=SledParams(mass=500.0))
        heavy = run_scenario_analysis(["coasting"], params=SledParams(mass=1000.0))

        assert heavy["coasting"]["analysis"]["max_speed"] == pytest.approx(
            light["coasting"]["analysis"]["max_speed"] / 2, rel=1e-3
        )
