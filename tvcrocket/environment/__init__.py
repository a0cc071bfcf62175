"""Environment models for rocket flight simulation.

Example:
    >>> from tvcrocket.environment import STANDARD_GRAVITY, gravity_force
    >>> gravity_force(10.0)
    array([ 0. ,  0. , -98.1])
"""

from tvcrocket.environment.gravity import (
    STANDARD_GRAVITY,
    gravity_force,
    weight,
)

__all__ = [
    "STANDARD_GRAVITY",
    "gravity_force",
    "weight",
]
