"""Propulsion module: motors, gimbal and thrust-vector resolution.

Example:
    >>> from tvcrocket.propulsion import RateLimitedGimbal, ThrustCurveMotor
    >>>
    >>> motor = ThrustCurveMotor(times=[0.0, 0.2, 2.0], thrusts=[0.0, 180.0, 0.0])
    >>> gimbal = RateLimitedGimbal(max_angle=8.0, rate_limit=40.0)
"""

from tvcrocket.propulsion.gimbal import (
    RateLimitedGimbal,
)
from tvcrocket.propulsion.motor import (
    ConstantThrustMotor,
    ThrustCurveMotor,
)
from tvcrocket.propulsion.thrust_vector import (
    ThrustVectorResolver,
    attitude_projection,
    gimbal_loss,
    normalize,
    resolve_force,
    resolve_torque,
)

__all__ = [
    # Actuators
    "RateLimitedGimbal",
    # Motors
    "ConstantThrustMotor",
    "ThrustCurveMotor",
    # Thrust vector
    "ThrustVectorResolver",
    "attitude_projection",
    "gimbal_loss",
    "normalize",
    "resolve_force",
    "resolve_torque",
]
