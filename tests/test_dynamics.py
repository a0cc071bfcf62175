"""Unit tests for body state and the rigid-body integrator."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from tvcrocket.dynamics import (
    BodyState,
    RigidBodyIntegrator,
    angular_acceleration,
    is_landed,
)
from tvcrocket.interfaces import Steppable

# =============================================================================
# Test Body
# =============================================================================


class PointMass:
    """Steppable body with a fixed force and torque."""

    def __init__(
        self,
        force: list[float],
        torque: list[float] | None = None,
        mass: float = 1.0,
        inertia: list[float] | None = None,
        state: BodyState | None = None,
    ) -> None:
        self._force = np.array(force, dtype=np.float64)
        self._torque = np.array(torque if torque is not None else [0.0, 0.0, 0.0])
        self._mass = mass
        self._inertia = np.array(inertia if inertia is not None else [1.0, 1.0, 1.0])
        self.state = state if state is not None else BodyState()
        self.calls: list[tuple[float, float]] = []

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def moment_of_inertia(self):
        return self._inertia

    def step(self, current_time: float, dt: float) -> None:
        self.calls.append((current_time, dt))

    def force(self, current_time: float, dt: float):
        return self._force.copy()

    def torque(self, current_time: float, dt: float):
        return self._torque.copy()

    def is_over(self) -> bool:
        return False


# =============================================================================
# Body State
# =============================================================================


class TestBodyState:
    """Test state construction and accessors."""

    def test_defaults_at_rest(self):
        state = BodyState()
        assert_allclose(state.position, np.zeros(3))
        assert_allclose(state.velocity, np.zeros(3))
        assert state.time == 0.0

    def test_defaults_not_shared(self):
        a, b = BodyState(), BodyState()
        a.position[2] = 5.0
        assert b.position[2] == 0.0

    def test_at_altitude(self):
        state = BodyState.at_altitude(10.0, pitch_deg=3.0, yaw_deg=-2.0)
        assert state.altitude == 10.0
        assert state.attitude == (3.0, -2.0)

    def test_rejects_bad_shape(self):
        with pytest.raises(ValueError, match="Position"):
            BodyState(position=np.zeros(2))

    def test_copy_is_independent(self):
        state = BodyState.at_altitude(1.0)
        clone = state.copy()
        clone.position[2] = 7.0
        assert state.altitude == 1.0

    def test_speed(self):
        state = BodyState(velocity=np.array([3.0, 0.0, 4.0]))
        assert state.speed == 5.0
        assert state.vertical_velocity == 4.0

    @pytest.mark.parametrize("z, vz, landed", [
        (0.0, 0.0, True),
        (-0.1, -2.0, True),
        (0.0, 1.0, False),
        (0.5, -1.0, False),
    ])
    def test_is_landed(self, z, vz, landed):
        state = BodyState(
            position=np.array([0.0, 0.0, z]),
            velocity=np.array([0.0, 0.0, vz]),
        )
        assert is_landed(state) is landed


# =============================================================================
# Integrator
# =============================================================================


class TestAngularAcceleration:
    def test_converts_to_degrees(self):
        alpha = angular_acceleration(np.array([2.0, 0.0, 0.0]), np.array([4.0, 4.0, 1.0]))
        assert_allclose(alpha, [np.degrees(0.5), 0.0, 0.0])


class TestRigidBodyIntegrator:
    """Test semi-implicit Euler steps."""

    def test_point_mass_is_steppable(self):
        assert isinstance(PointMass([0.0, 0.0, 0.0]), Steppable)

    def test_free_fall_step(self):
        body = PointMass([0.0, 0.0, -9.81], state=BodyState.at_altitude(10.0))

        result = RigidBodyIntegrator().step(body, current_time=0.0, dt=0.1)

        # Velocity updated first, then position from the new velocity
        assert_allclose(result.state.velocity, [0.0, 0.0, -0.981])
        assert_allclose(result.state.position, [0.0, 0.0, 10.0 - 0.0981])
        assert_allclose(result.state.time, 0.1)

    def test_thrust_climb(self):
        mass = 10.0
        net = 200.0 - 9.81 * mass
        body = PointMass([0.0, 0.0, net], mass=mass, state=BodyState.at_altitude(1.0))

        RigidBodyIntegrator().step(body, current_time=0.0, dt=0.01)

        accel = net / mass
        assert_allclose(body.state.vertical_velocity, accel * 0.01)
        assert_allclose(body.state.altitude, 1.0 + accel * 0.01 ** 2)

    def test_body_stepped_before_forces(self):
        body = PointMass([0.0, 0.0, 0.0])
        RigidBodyIntegrator().step(body, current_time=2.5, dt=0.01)
        assert body.calls == [(2.5, 0.01)]

    def test_result_carries_force_and_torque(self):
        body = PointMass([1.0, 2.0, 3.0], torque=[0.5, -0.5, 0.0])
        result = RigidBodyIntegrator().step(body, current_time=0.0, dt=0.01)
        assert_allclose(result.force, [1.0, 2.0, 3.0])
        assert_allclose(result.torque, [0.5, -0.5, 0.0])
        assert result.state is body.state

    def test_rotation(self):
        body = PointMass(
            [0.0, 0.0, 0.0], torque=[2.0, 0.0, 0.0], inertia=[4.0, 4.0, 1.0],
        )

        RigidBodyIntegrator().step(body, current_time=0.0, dt=0.1)

        rate = np.degrees(0.5) * 0.1
        assert_allclose(body.state.angular_velocity, [rate, 0.0, 0.0])
        assert_allclose(body.state.angular_position, [rate * 0.1, 0.0, 0.0])

    def test_ground_stops_descent(self):
        state = BodyState(
            position=np.array([0.0, 0.0, 0.001]),
            velocity=np.array([0.5, 0.0, -1.0]),
        )
        body = PointMass([0.0, 0.0, -9.81], state=state)

        RigidBodyIntegrator().step(body, current_time=0.0, dt=0.01)

        assert body.state.altitude == 0.0
        assert_allclose(body.state.velocity, np.zeros(3))
        assert is_landed(body.state)

    def test_ground_allows_lift_off(self):
        body = PointMass([0.0, 0.0, 5.0])
        RigidBodyIntegrator().step(body, current_time=0.0, dt=0.01)
        assert body.state.altitude > 0.0

    def test_ground_contact_disabled(self):
        body = PointMass([0.0, 0.0, -9.81], state=BodyState.at_altitude(0.001))
        RigidBodyIntegrator(ground_contact=False).step(body, current_time=0.0, dt=0.1)
        assert body.state.altitude < 0.0

    def test_repeated_steps_accumulate_time(self):
        body = PointMass([0.0, 0.0, 0.0])
        integrator = RigidBodyIntegrator()
        t = 0.0
        for _ in range(5):
            integrator.step(body, current_time=t, dt=0.2)
            t = body.state.time
        assert_allclose(body.state.time, 1.0)
