"""Tangent of a deflection angle, reflected past perpendicular.

Angles are in degrees throughout. Beyond 90 degrees the supplementary
angle is used, so a deflection of 91 degrees behaves like one of 89
degrees instead of flipping through the singularity.

Example:
    >>> from tvcrocket.dynamics.trig import bounded_tan
    >>> bounded_tan(45.0)
    0.9999999999999999
    >>> bounded_tan(91.0) == bounded_tan(89.0)
    True
"""

import math

import numpy as np

from tvcrocket._typing import beartype
from tvcrocket.errors import DomainError

RIGHT_ANGLE_DEG: float = 90.0


@beartype
def reflect_angle(angle_deg: float) -> float:
    """Map an angle past +/-90 deg onto its supplementary angle."""
    if abs(angle_deg) > RIGHT_ANGLE_DEG:
        return 180.0 - angle_deg
    return angle_deg


@beartype
def bounded_tan(angle_deg: float) -> float:
    """Tangent of a reflected angle in degrees.

    Args:
        angle_deg: Angle [deg]

    Returns:
        tan(reflect_angle(angle_deg))

    Raises:
        DomainError: If the reflected angle is an odd multiple of 90 deg,
            where the tangent is undefined.
    """
    reflected = reflect_angle(angle_deg)

    # np.tan(np.radians(90)) is ~1.6e16 rather than inf, so test the angle
    if abs(math.remainder(reflected, 180.0)) == RIGHT_ANGLE_DEG:
        raise DomainError("angle_deg", angle_deg, "tangent is singular at +/-90 deg")

    return float(np.tan(np.radians(reflected)))
