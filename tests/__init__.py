"""
Test suite for the Rocket Sled Simulation.

This package contains unit tests organized by component:
- test_sled_params.py: Tests for SledParams class
- test_forces.py: Tests for thrust, friction and drag calculations
- test_engine.py: Tests for PhysicsEngine mutators, integration and queries
- test_driver.py: Tests for the frame driver and operator controls
- test_simulation.py: Tests for scripted simulation runs
- test_motion_analysis.py: Tests for motion analysis
- test_integration.py: Integration tests for the scenario workflow
"""
