"""
Unit tests for the force model.

Tests thrust, kinetic friction, the static friction lock and air drag in
isolation from the integrator.
"""

import pytest

from sled.forces import ForceModel
from sled_simulation import SledParams


class TestForceModel:
    """Test suite for ForceModel"""

    @pytest.fixture
    def params(self) -> SledParams:
        """Create default sled parameters for testing"""
        return SledParams()

    @pytest.fixture
    def model(self, params: SledParams) -> ForceModel:
        return ForceModel(params)

    def test_applied_force_signed_by_direction(self, model: ForceModel) -> None:
        """Test that thrust takes the sign of the direction"""
        assert model.applied_force(1, 2000.0) == 2000.0
        assert model.applied_force(-1, 2000.0) == -2000.0
        assert model.applied_force(0, 2000.0) == 0.0

    def test_kinetic_friction_opposes_velocity(self, model: ForceModel, params: SledParams) -> None:
        """Test that kinetic friction has magnitude mu*N and opposes motion"""
        normal = params.weight

        assert model.kinetic_friction(5.0, 0.15, normal) == pytest.approx(-0.15 * normal)
        assert model.kinetic_friction(-5.0, 0.15, normal) == pytest.approx(0.15 * normal)

    def test_kinetic_friction_zero_at_rest(self, model: ForceModel, params: SledParams) -> None:
        """Test that kinetic friction vanishes below the rest threshold"""
        assert model.kinetic_friction(0.0, 0.15, params.weight) == 0.0
        assert model.kinetic_friction(0.01, 0.15, params.weight) == 0.0

    def test_static_lock_below_threshold(self, model: ForceModel, params: SledParams) -> None:
        """Test that a weak push at rest is held by static friction"""
        threshold = 1.1 * 0.15 * params.weight  # 808.5 N

        assert model.is_static_lock(0.0, threshold - 1.0, 0.15, params.weight)
        assert not model.is_static_lock(0.0, threshold + 1.0, 0.15, params.weight)

    def test_static_lock_only_at_rest(self, model: ForceModel, params: SledParams) -> None:
        """Test that static friction never applies while moving"""
        assert not model.is_static_lock(1.0, 100.0, 0.15, params.weight)

    def test_static_lock_cancels_applied_force(self, model: ForceModel, params: SledParams) -> None:
        """Test that friction exactly cancels a weak push at rest"""
        friction = model.friction_force(True, 0.0, 500.0, 0.15, params.weight)

        assert friction == -500.0

    def test_static_lock_overrides_kinetic(self, model: ForceModel, params: SledParams) -> None:
        """Test that the static rule wins inside the rest window"""
        friction = model.friction_force(True, 0.005, -300.0, 0.15, params.weight)

        assert friction == 300.0

    def test_strong_push_at_rest_no_friction(self, model: ForceModel, params: SledParams) -> None:
        """Test that a push beyond the static threshold sees no friction from rest"""
        friction = model.friction_force(True, 0.0, 2000.0, 0.15, params.weight)

        assert friction == 0.0

    def test_friction_disabled(self, model: ForceModel, params: SledParams) -> None:
        """Test that friction is zero when switched off"""
        assert model.friction_force(False, 5.0, 2000.0, 0.15, params.weight) == 0.0
        assert model.friction_force(False, 0.0, 500.0, 0.15, params.weight) == 0.0

    def test_air_drag_quadratic(self, model: ForceModel, params: SledParams) -> None:
        """Test that drag is k*v^2 opposing motion"""
        assert model.air_drag(True, 10.0) == pytest.approx(-params.air_drag_coefficient * 100.0)
        assert model.air_drag(True, -10.0) == pytest.approx(params.air_drag_coefficient * 100.0)
        assert model.air_drag(True, 20.0) == pytest.approx(4 * model.air_drag(True, 10.0))

    def test_air_drag_disabled_or_at_rest(self, model: ForceModel) -> None:
        """Test that drag vanishes when off or at rest"""
        assert model.air_drag(False, 10.0) == 0.0
        assert model.air_drag(True, 0.0) == 0.0

    def test_net_force_sum(self) -> None:
        """Test that net force is the signed sum"""
        assert ForceModel.net_force(2000.0, -735.0, -50.0) == pytest.approx(1215.0)
