"""Uniform gravity for short, low-altitude flights.

Flights modelled here stay within a few kilometres of the launch datum,
so gravity is a constant acting along -z only.
"""

import numpy as np
from numpy.typing import NDArray

from tvcrocket._typing import beartype

# Gravitational acceleration used by the thrust model [m/s^2]
STANDARD_GRAVITY: float = 9.81


@beartype
def weight(mass: float, gravity: float = STANDARD_GRAVITY) -> float:
    """Weight of a body [N]."""
    return gravity * mass


@beartype
def gravity_force(mass: float, gravity: float = STANDARD_GRAVITY) -> NDArray[np.float64]:
    """Gravity force vector in the world frame [N]."""
    return np.array([0.0, 0.0, -weight(mass, gravity)])
