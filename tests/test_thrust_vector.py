"""Unit tests for thrust-vector resolution into force and torque."""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from tvcrocket.environment import STANDARD_GRAVITY, gravity_force, weight
from tvcrocket.errors import DomainError
from tvcrocket.propulsion.thrust_vector import (
    ThrustVectorResolver,
    attitude_projection,
    gimbal_loss,
    normalize,
    resolve_force,
    resolve_torque,
)


def tan_deg(angle: float) -> float:
    return math.tan(math.radians(angle))


# =============================================================================
# Projections
# =============================================================================


class TestProjections:
    """Test the shared normalization."""

    def test_normalize_zero(self):
        assert normalize(0.0, 0.0) == 1.0

    def test_normalize_value(self):
        expected = math.sqrt(1 + tan_deg(10.0) ** 2 + tan_deg(-20.0) ** 2)
        assert_allclose(normalize(10.0, -20.0), expected, rtol=1e-12)

    def test_gimbal_loss_without_gimbal(self):
        assert gimbal_loss(None) == 1.0

    def test_gimbal_loss_matches_normalize(self):
        assert gimbal_loss((3.0, 4.0)) == normalize(3.0, 4.0)

    def test_attitude_projection_matches_normalize(self):
        assert attitude_projection(5.0, 6.0) == normalize(5.0, 6.0)


class TestGravity:
    def test_weight(self):
        assert_allclose(weight(10.0), 10.0 * STANDARD_GRAVITY)

    def test_gravity_force_points_down(self):
        assert_allclose(gravity_force(2.0, gravity=1.62), [0.0, 0.0, -3.24])


# =============================================================================
# Torque
# =============================================================================


class TestTorque:
    """Test torque from gimbal deflection."""

    def test_centered_gimbal_zero_torque(self):
        torque = resolve_torque(100.0, (0.0, 0.0), lever_arm=0.5)
        assert_allclose(torque, [0.0, 0.0, 0.0], atol=1e-12)

    def test_no_gimbal_zero_torque(self):
        """Without a gimbal there is no vectoring, whatever the thrust."""
        torque = resolve_torque(1.0e4, None, lever_arm=0.5)
        assert_allclose(torque, np.zeros(3))

    def test_deflected_gimbal(self):
        thrust, lever, gx, gy = 100.0, 0.5, 5.0, -3.0
        u = math.sqrt(1 + tan_deg(gx) ** 2 + tan_deg(gy) ** 2)

        torque = resolve_torque(thrust, (gx, gy), lever_arm=lever)

        assert_allclose(torque[0], lever * thrust * tan_deg(gx) / u, rtol=1e-12)
        assert_allclose(torque[1], lever * thrust * tan_deg(gy) / u, rtol=1e-12)
        assert torque[2] == 0.0

    def test_no_roll_torque(self):
        torque = resolve_torque(250.0, (7.0, 7.0), lever_arm=1.2)
        assert torque[2] == 0.0

    def test_torque_linear_in_lever_arm(self):
        t1 = resolve_torque(100.0, (4.0, 2.0), lever_arm=0.5)
        t2 = resolve_torque(100.0, (4.0, 2.0), lever_arm=1.0)
        assert_allclose(t2, 2 * t1, rtol=1e-12)

    def test_deflection_past_ninety_reflects(self):
        """95 deg acts like 85 deg."""
        assert_allclose(
            resolve_torque(100.0, (95.0, 0.0), lever_arm=0.5),
            resolve_torque(100.0, (85.0, 0.0), lever_arm=0.5),
        )

    def test_gimbal_singularity_raises(self):
        with pytest.raises(DomainError):
            resolve_torque(100.0, (90.0, 0.0), lever_arm=0.5)

    def test_negative_thrust_raises(self):
        with pytest.raises(DomainError):
            resolve_torque(-1.0, (0.0, 0.0), lever_arm=0.5)


# =============================================================================
# Force
# =============================================================================


class TestForce:
    """Test world-frame force from thrust and attitude."""

    def test_vertical_flight(self):
        """Zero gimbal and attitude: thrust minus weight along z."""
        force = resolve_force(100.0, (0.0, 0.0), (0.0, 0.0), mass=10.0)
        assert_allclose(force, [0.0, 0.0, 100.0 - 9.81 * 10.0], atol=1e-12)
        assert_allclose(force, [0.0, 0.0, 1.9], atol=1e-12)

    def test_no_thrust_pure_gravity(self):
        """Without thrust only gravity acts, whatever the angles."""
        force = resolve_force(0.0, (5.0, -4.0), (12.0, -8.0), mass=10.0)
        assert_allclose(force, [0.0, 0.0, -98.1], atol=1e-12)

    def test_attitude_tilts_force(self):
        thrust, mass, pitch, yaw = 200.0, 5.0, 10.0, -6.0
        v = math.sqrt(1 + tan_deg(pitch) ** 2 + tan_deg(yaw) ** 2)

        force = resolve_force(thrust, None, (pitch, yaw), mass=mass)

        assert_allclose(force[0], thrust * tan_deg(yaw) / v, rtol=1e-12)
        assert_allclose(force[1], thrust * tan_deg(pitch) / v, rtol=1e-12)
        assert_allclose(force[2], thrust / v - 9.81 * mass, rtol=1e-12)

    def test_gimbal_loss_reduces_force(self):
        """Gimbal deflection scales force but does not tilt it."""
        straight = resolve_force(100.0, (0.0, 0.0), (0.0, 0.0), mass=1.0)
        deflected = resolve_force(100.0, (6.0, 0.0), (0.0, 0.0), mass=1.0)

        u = math.sqrt(1 + tan_deg(6.0) ** 2)
        assert_allclose(deflected[:2], [0.0, 0.0], atol=1e-12)
        assert_allclose(deflected[2] + 9.81, 100.0 / u, rtol=1e-12)
        assert deflected[2] < straight[2]

    def test_custom_gravity(self):
        force = resolve_force(0.0, None, (0.0, 0.0), mass=2.0, gravity=1.62)
        assert_allclose(force, [0.0, 0.0, -3.24], atol=1e-12)

    def test_attitude_past_ninety_reflects(self):
        """A pitch of 100 deg acts like 80 deg."""
        assert_allclose(
            resolve_force(100.0, (2.0, 1.0), (100.0, 0.0), mass=1.0),
            resolve_force(100.0, (2.0, 1.0), (80.0, 0.0), mass=1.0),
        )

    def test_integer_inputs(self):
        assert_allclose(
            resolve_force(100, (0, 0), (0, 0), mass=10),
            [0.0, 0.0, 1.9],
            atol=1e-12,
        )

    def test_attitude_singularity_raises(self):
        with pytest.raises(DomainError):
            resolve_force(100.0, None, (0.0, -90.0), mass=1.0)


# =============================================================================
# Resolver
# =============================================================================


class TestThrustVectorResolver:
    """Test the configured resolver."""

    def test_scenario(self):
        """10 kg, CoM 0.5 m, 100 N straight up."""
        resolver = ThrustVectorResolver(lever_arm=0.5, mass=10.0)

        assert_allclose(
            resolver.force(100.0, (0.0, 0.0), (0.0, 0.0)), [0.0, 0.0, 1.9], atol=1e-12
        )
        assert_allclose(resolver.torque(100.0, (0.0, 0.0)), [0.0, 0.0, 0.0], atol=1e-12)

    def test_delegates_to_functions(self):
        resolver = ThrustVectorResolver(lever_arm=0.8, mass=3.0, gravity=9.0)

        assert_allclose(
            resolver.torque(50.0, (2.0, 1.0)),
            resolve_torque(50.0, (2.0, 1.0), 0.8),
        )
        assert_allclose(
            resolver.force(50.0, (2.0, 1.0), (4.0, 3.0)),
            resolve_force(50.0, (2.0, 1.0), (4.0, 3.0), 3.0, 9.0),
        )
