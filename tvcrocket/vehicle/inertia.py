"""Transverse moment of inertia of a slender rocket body.

The body is treated as axisymmetric with a density that varies linearly
along its axis. The mass distribution is described by a single number,
the height of the center of mass above the nozzle. The body is split at
the center of mass into two conical density regions, and the squared
distance to the center of mass is integrated over each.

With r = com_height / length:

    I = length^2 * mass / 3 * (r^3 + (1-r)^4 / r) / (r + (1-r)^2 / r)

For r = 0.5 this reduces to the uniform rod, I = mass * length^2 / 12.

The roll (axial) component is not covered by this model and is supplied
separately as a nominal value.

Example:
    >>> from tvcrocket.vehicle.inertia import moment_of_inertia
    >>> round(moment_of_inertia(length=2.0, mass=10.0, com_height=0.5), 4)
    6.8333
"""

import numpy as np
from numba import njit
from numpy.typing import NDArray

from tvcrocket._typing import beartype
from tvcrocket.errors import DomainError

# Nominal roll-axis inertia [kg*m^2]
AXIAL_INERTIA_PLACEHOLDER: float = 1.0


@njit(cache=True)
def _distribution_factor(r: float) -> float:
    """Numba-compiled ratio-dependent part of the inertia formula.

    Requires 0 < r < 1; the caller checks.
    """
    s = 1.0 - r
    return (r**3 + s**4 / r) / (r + s**2 / r)


@beartype
def com_ratio(length: float, com_height: float) -> float:
    """Relative height of the center of mass, r = com_height / length.

    Raises:
        DomainError: If length <= 0 or r is not strictly inside (0, 1).
    """
    if length <= 0.0:
        raise DomainError("length", length, "body length must be positive")

    r = com_height / length
    if not 0.0 < r < 1.0:
        raise DomainError("com_ratio", r, "ratio must lie strictly inside (0, 1)")
    return r


@beartype
def moment_of_inertia(length: float, mass: float, com_height: float) -> float:
    """Transverse moment of inertia about the center of mass.

    Args:
        length: Distance from the nozzle to the top of the rocket [m]
        mass: Rocket mass [kg]
        com_height: Distance from the nozzle to the center of mass [m]

    Returns:
        Moment of inertia about either transverse axis [kg*m^2]

    Raises:
        DomainError: If com_height / length is not strictly inside (0, 1).
    """
    r = com_ratio(length, com_height)
    return length**2 * mass / 3 * float(_distribution_factor(r))


@beartype
def inertia_vector(
    length: float,
    mass: float,
    com_height: float,
    axial: float = AXIAL_INERTIA_PLACEHOLDER,
) -> NDArray[np.float64]:
    """Principal moments [Ixx, Iyy, Izz] with equal transverse components.

    Args:
        length: Body length [m]
        mass: Rocket mass [kg]
        com_height: Center of mass height above the nozzle [m]
        axial: Roll-axis moment, not derived from geometry [kg*m^2]
    """
    transverse = moment_of_inertia(length, mass, com_height)
    return np.array([transverse, transverse, axial], dtype=np.float64)
