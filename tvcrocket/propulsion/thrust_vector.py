"""Resolution of gimballed thrust into force and torque.

The thrust line is deflected from the body axis by two gimbal angles
(gx, gy). Part of the thrust is lost to the deflection, and the remainder
is rotated into the world frame by the body attitude (pitch, yaw).

Both projections use the same normalization:

    normalize(a, b) = sqrt(1 + tan(a)^2 + tan(b)^2)

    u = normalize(gx, gy)         gimbal loss
    v = normalize(pitch, yaw)     body-to-world projection

Torque about the transverse axes comes from the gimbal angles, while the
translational force comes from the attitude angles:

    torque = [l*T*tan(gx)/u, l*T*tan(gy)/u, 0]
    force  = [T*tan(yaw)/(u*v), T*tan(pitch)/(u*v), T/(u*v) - g*m]

where l is the lever arm from the nozzle to the center of mass. All
tangents go through bounded_tan, so angles past 90 deg are reflected and
an exact 90 deg raises DomainError.

Example:
    >>> from tvcrocket.propulsion.thrust_vector import ThrustVectorResolver
    >>> resolver = ThrustVectorResolver(lever_arm=0.5, mass=10.0)
    >>> resolver.force(100.0, deflection=(0.0, 0.0), attitude=(0.0, 0.0))
    array([0. , 0. , 1.9])
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from tvcrocket._typing import beartype
from tvcrocket.dynamics.trig import bounded_tan
from tvcrocket.environment.gravity import STANDARD_GRAVITY, gravity_force
from tvcrocket.errors import DomainError

# =============================================================================
# Projections
# =============================================================================


@beartype
def normalize(a_deg: float, b_deg: float) -> float:
    """Norm of the direction (tan(a), tan(b), 1)."""
    return float(np.sqrt(1.0 + bounded_tan(a_deg) ** 2 + bounded_tan(b_deg) ** 2))


@beartype
def gimbal_loss(deflection: tuple[float, float] | None) -> float:
    """Projection factor u for a gimbal deflection (1 without a gimbal)."""
    if deflection is None:
        return 1.0
    return normalize(*deflection)


@beartype
def attitude_projection(pitch_deg: float, yaw_deg: float) -> float:
    """Projection factor v from the body frame into the world frame."""
    return normalize(pitch_deg, yaw_deg)


def _check_thrust(thrust: float) -> None:
    if thrust < 0.0:
        raise DomainError("thrust", thrust, "thrust magnitude must be non-negative")


# =============================================================================
# Torque and Force
# =============================================================================


@beartype
def resolve_torque(
    thrust: float,
    deflection: tuple[float, float] | None,
    lever_arm: float,
) -> NDArray[np.float64]:
    """Torque about the center of mass from a gimballed thrust.

    Args:
        thrust: Thrust magnitude [N]
        deflection: Gimbal angles (gx, gy) [deg], None without a gimbal
        lever_arm: Distance from the nozzle to the center of mass [m]

    Returns:
        Torque [Mx, My, 0] [N*m]. Zero when there is no gimbal.
    """
    _check_thrust(thrust)

    # No gimbal, no vectoring authority
    if deflection is None:
        return np.zeros(3, dtype=np.float64)

    gx, gy = deflection
    u = normalize(gx, gy)
    return np.array([
        lever_arm * thrust * bounded_tan(gx) / u,
        lever_arm * thrust * bounded_tan(gy) / u,
        0.0,
    ])


@beartype
def resolve_force(
    thrust: float,
    deflection: tuple[float, float] | None,
    attitude: tuple[float, float],
    mass: float,
    gravity: float = STANDARD_GRAVITY,
) -> NDArray[np.float64]:
    """Net world-frame force from thrust and gravity.

    Args:
        thrust: Thrust magnitude [N]
        deflection: Gimbal angles (gx, gy) [deg], None without a gimbal
        attitude: Body attitude (pitch, yaw) [deg]
        mass: Rocket mass [kg]
        gravity: Gravitational acceleration [m/s^2]

    Returns:
        Force [Fx, Fy, Fz] in the world frame [N]
    """
    _check_thrust(thrust)

    pitch, yaw = attitude
    uv = gimbal_loss(deflection) * attitude_projection(pitch, yaw)

    thrust_force = np.array([
        thrust * bounded_tan(yaw) / uv,
        thrust * bounded_tan(pitch) / uv,
        thrust / uv,
    ])
    return thrust_force + gravity_force(mass, gravity)


# =============================================================================
# Resolver
# =============================================================================


@beartype
@dataclass(frozen=True)
class ThrustVectorResolver:
    """Force and torque model for one configured rocket.

    Attributes:
        lever_arm: Distance from the nozzle to the center of mass [m]
        mass: Rocket mass [kg]
        gravity: Gravitational acceleration [m/s^2]
    """
    lever_arm: float
    mass: float
    gravity: float = STANDARD_GRAVITY

    def torque(
        self,
        thrust: float,
        deflection: tuple[float, float] | None,
    ) -> NDArray[np.float64]:
        """Torque from thrust at the given gimbal deflection [N*m]."""
        return resolve_torque(thrust, deflection, self.lever_arm)

    def force(
        self,
        thrust: float,
        deflection: tuple[float, float] | None,
        attitude: tuple[float, float],
    ) -> NDArray[np.float64]:
        """Net force from thrust and gravity at the given attitude [N]."""
        return resolve_force(thrust, deflection, attitude, self.mass, self.gravity)
