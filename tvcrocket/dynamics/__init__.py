"""Dynamics module: kinematic state, trigonometry and integration.

Example:
    >>> from tvcrocket.dynamics import BodyState, RigidBodyIntegrator
    >>>
    >>> integrator = RigidBodyIntegrator()
    >>> result = integrator.step(rocket, current_time=0.0, dt=0.01)
"""

from tvcrocket.dynamics.rigid_body import (
    RigidBodyIntegrator,
    StepResult,
    angular_acceleration,
)
from tvcrocket.dynamics.state import (
    BodyState,
    is_landed,
)
from tvcrocket.dynamics.trig import (
    bounded_tan,
    reflect_angle,
)

__all__ = [
    # State
    "BodyState",
    "is_landed",
    # Trigonometry
    "bounded_tan",
    "reflect_angle",
    # Integration
    "RigidBodyIntegrator",
    "StepResult",
    "angular_acceleration",
]
