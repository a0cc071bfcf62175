"""tvcrocket - Force, torque and inertia model of a thrust-vectored rocket.

Models a gimbal-controlled rocket as a rigid body: given a thrust source,
a two-axis gimbal deflection and the current attitude, it produces the net
force and torque for a rigid-body integrator, along with the moment of
inertia of a body with an axially varying density.

Example:
    >>> from tvcrocket import RocketBody, Simulator, SimConfig
    >>> from tvcrocket.propulsion import ConstantThrustMotor, RateLimitedGimbal
    >>>
    >>> rocket = RocketBody()
    >>> rocket.configure(
    ...     motor=ConstantThrustMotor(thrust=150.0, burn_time=2.0),
    ...     gimbal=RateLimitedGimbal(),
    ...     mass=10.0,
    ...     length=2.0,
    ...     com_height=0.5,
    ... )
    >>> result = Simulator(rocket, SimConfig(dt=0.01)).run()
    >>> print(f"Apogee: {result.apogee:.1f} m")
"""

__version__ = "0.1.0"

from tvcrocket.dynamics import (
    BodyState,
    RigidBodyIntegrator,
    StepResult,
    bounded_tan,
    is_landed,
)
from tvcrocket.errors import (
    ConfigurationError,
    DomainError,
    TVCRocketError,
)
from tvcrocket.interfaces import (
    Controller,
    Gimbal,
    Motor,
    Steppable,
    Subsystem,
)
from tvcrocket.simulation import (
    FlightRecord,
    FlightResult,
    SimConfig,
    Simulator,
)
from tvcrocket.vehicle import (
    FlightPhase,
    RocketBody,
    RocketConfig,
    inertia_vector,
    moment_of_inertia,
)

__all__ = [
    "__version__",
    # Errors
    "ConfigurationError",
    "DomainError",
    "TVCRocketError",
    # Collaborator protocols
    "Controller",
    "Gimbal",
    "Motor",
    "Steppable",
    "Subsystem",
    # Dynamics
    "BodyState",
    "RigidBodyIntegrator",
    "StepResult",
    "bounded_tan",
    "is_landed",
    # Vehicle
    "FlightPhase",
    "RocketBody",
    "RocketConfig",
    "inertia_vector",
    "moment_of_inertia",
    # Simulation
    "FlightRecord",
    "FlightResult",
    "SimConfig",
    "Simulator",
]
