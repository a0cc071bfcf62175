"""Vehicle module: rocket body and mass properties.

Example:
    >>> from tvcrocket.vehicle import RocketBody, moment_of_inertia
    >>>
    >>> rocket = RocketBody()
    >>> config = rocket.configure(None, None, mass=10.0, length=2.0, com_height=0.5)
    >>> config.moment_of_inertia
"""

from tvcrocket.vehicle.inertia import (
    AXIAL_INERTIA_PLACEHOLDER,
    com_ratio,
    inertia_vector,
    moment_of_inertia,
)
from tvcrocket.vehicle.rocket import (
    LAUNCH_ALTITUDE,
    FlightPhase,
    RocketBody,
    RocketConfig,
)

__all__ = [
    # Inertia
    "AXIAL_INERTIA_PLACEHOLDER",
    "com_ratio",
    "inertia_vector",
    "moment_of_inertia",
    # Rocket
    "LAUNCH_ALTITUDE",
    "FlightPhase",
    "RocketBody",
    "RocketConfig",
]
