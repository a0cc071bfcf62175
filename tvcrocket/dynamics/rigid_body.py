"""Rigid-body integrator for Steppable bodies.

The integrator knows nothing about rockets. It advances any body that
implements the Steppable capability:

    body.step(t, dt)          body advances its own subsystems
    F = body.force(t, dt)     net world-frame force [N]
    M = body.torque(t, dt)    torque about the center of mass [N*m]

Translation and rotation are advanced with semi-implicit (symplectic)
Euler: velocity first, then position from the new velocity. Torque is
turned into an angular acceleration with the body's principal moments
and converted to deg/s^2, since attitude is kept in degrees.

The datum z = 0 is treated as solid ground. A body reaching it while
descending is stopped there.

Example:
    >>> from tvcrocket.dynamics import RigidBodyIntegrator
    >>> integrator = RigidBodyIntegrator()
    >>> result = integrator.step(rocket, current_time=0.0, dt=0.01)
    >>> altitude = result.state.altitude
"""

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
from numba import njit
from numpy.typing import NDArray

from tvcrocket._typing import beartype
from tvcrocket.dynamics.state import BodyState
from tvcrocket.interfaces import Steppable

# =============================================================================
# Numba-Optimized Update
# =============================================================================


@njit(cache=True)
def _semi_implicit_euler(
    x: NDArray[np.float64],
    v: NDArray[np.float64],
    a: NDArray[np.float64],
    dt: float,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Numba-optimized symplectic Euler update of (x, v)."""
    v_new = v + a * dt
    x_new = x + v_new * dt
    return x_new, v_new


@beartype
def angular_acceleration(
    torque: NDArray[np.float64],
    inertia: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Angular acceleration about principal axes [deg/s^2].

    Args:
        torque: [Mx, My, Mz] [N*m]
        inertia: Principal moments [Ixx, Iyy, Izz] [kg*m^2]
    """
    return np.degrees(torque / inertia)


# =============================================================================
# Integrator
# =============================================================================


class StepResult(NamedTuple):
    """Outcome of one integration step."""
    state: BodyState                # State after the step
    force: NDArray[np.float64]      # Force applied during the step [N]
    torque: NDArray[np.float64]     # Torque applied during the step [N*m]


@beartype
@dataclass
class RigidBodyIntegrator:
    """Semi-implicit Euler integrator with a ground plane at z = 0.

    Attributes:
        ground_contact: Stop the body at z = 0 when it descends through it
    """
    ground_contact: bool = True

    @beartype
    def step(self, body: Steppable, current_time: float, dt: float) -> StepResult:
        """Advance a body by one time step.

        Args:
            body: Body to advance; its state is replaced
            current_time: Flight time at the start of the step [s]
            dt: Time step [s]

        Returns:
            New state with the force and torque that produced it
        """
        body.step(current_time, dt)
        force = body.force(current_time, dt)
        torque = body.torque(current_time, dt)

        state = body.state
        position, velocity = _semi_implicit_euler(
            state.position, state.velocity, force / body.mass, dt,
        )
        angular_position, angular_velocity = _semi_implicit_euler(
            state.angular_position,
            state.angular_velocity,
            angular_acceleration(torque, body.moment_of_inertia),
            dt,
        )

        if self.ground_contact and position[2] <= 0.0 and velocity[2] <= 0.0:
            position[2] = 0.0
            velocity[:] = 0.0

        body.state = BodyState(
            position=position,
            velocity=velocity,
            angular_position=angular_position,
            angular_velocity=angular_velocity,
            time=current_time + dt,
        )
        return StepResult(state=body.state, force=force, torque=torque)
