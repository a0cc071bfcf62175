"""Rocket body: configuration, lifecycle and force/torque contract.

The rocket owns its geometry and mass (RocketConfig) and its kinematic
state, and holds optional, replaceable references to a motor, a gimbal and
a controller. It does not integrate its own motion: a rigid-body
integrator calls step(), then reads force() and torque().

Lifecycle:

    UNCONFIGURED --configure--> READY --step--> RUNNING --is_over--> LANDED

configure() may be called again at any time. reset() returns a configured
rocket to READY from any phase. init() re-arms a READY rocket.

Example:
    >>> from tvcrocket.vehicle import RocketBody
    >>> from tvcrocket.propulsion import ConstantThrustMotor
    >>>
    >>> rocket = RocketBody()
    >>> rocket.configure(
    ...     motor=ConstantThrustMotor(thrust=100.0),
    ...     gimbal=None,
    ...     mass=10.0,
    ...     length=2.0,
    ...     com_height=0.5,
    ... )
    >>> rocket.force(0.0, 0.01)
    array([0. , 0. , 1.9])
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np
from numpy.typing import NDArray

from tvcrocket._typing import beartype
from tvcrocket.dynamics.state import BodyState, is_landed
from tvcrocket.environment.gravity import STANDARD_GRAVITY
from tvcrocket.errors import ConfigurationError
from tvcrocket.interfaces import Controller, Gimbal, Motor, Subsystem
from tvcrocket.propulsion.thrust_vector import ThrustVectorResolver
from tvcrocket.vehicle.inertia import AXIAL_INERTIA_PLACEHOLDER, inertia_vector

logger = logging.getLogger(__name__)

# Altitude the rocket is placed at by init() [m]
LAUNCH_ALTITUDE: float = 1.0


# =============================================================================
# Configuration
# =============================================================================


@beartype
@dataclass(frozen=True)
class RocketConfig:
    """Validated rocket geometry and mass.

    Build through RocketConfig.create(), which validates the inputs and
    derives the moment of inertia.

    Attributes:
        mass: Rocket mass [kg]
        body_length: Distance from the nozzle to the top of the rocket [m]
        com_height: Distance from the nozzle to the center of mass [m]
        moment_of_inertia: [I, I, axial] principal moments [kg*m^2]
    """
    mass: float
    body_length: float
    com_height: float
    moment_of_inertia: NDArray[np.float64]

    @classmethod
    def create(
        cls,
        mass: float,
        length: float,
        com_height: float,
        axial_inertia: float = AXIAL_INERTIA_PLACEHOLDER,
    ) -> "RocketConfig":
        """Validate geometry and build a config.

        Raises:
            ConfigurationError: If mass <= 0, length <= 0, or com_height is
                not strictly between 0 and length.
        """
        if not mass > 0:
            raise ConfigurationError("mass", mass, lower=0.0)
        if not length > 0:
            raise ConfigurationError("length", length, lower=0.0)
        if not 0 < com_height < length:
            raise ConfigurationError(
                "com_height", com_height, lower=0.0, upper=length,
                message=(
                    f"The center of mass height must be > 0 and < rocket length "
                    f"({length:g} m), got {com_height!r}"
                ),
            )

        return cls(
            mass=float(mass),
            body_length=float(length),
            com_height=float(com_height),
            moment_of_inertia=inertia_vector(length, mass, com_height, axial_inertia),
        )

    @property
    def com_ratio(self) -> float:
        """Relative center of mass height, com_height / body_length."""
        return self.com_height / self.body_length


# =============================================================================
# Rocket Body
# =============================================================================


class FlightPhase(Enum):
    """Lifecycle phase of a rocket body."""

    UNCONFIGURED = auto()
    READY = auto()
    RUNNING = auto()
    LANDED = auto()


@beartype
@dataclass
class RocketBody:
    """Gimbal-controlled, thrust-vectored rocket.

    Implements the Steppable capability used by RigidBodyIntegrator.

    Attributes:
        motor: Thrust source, None for an unpowered body
        gimbal: Nozzle gimbal, None for a fixed nozzle
        controller: Attitude controller, None for open loop
        gravity: Gravitational acceleration, read on every force() [m/s^2]
        launch_altitude: Altitude set by init() [m]
        axial_inertia: Roll-axis moment used on configure() [kg*m^2]
        state: Kinematic state, advanced by the integrator
    """
    motor: Motor | None = None
    gimbal: Gimbal | None = None
    controller: Controller | None = None
    gravity: float = STANDARD_GRAVITY
    launch_altitude: float = LAUNCH_ALTITUDE
    axial_inertia: float = AXIAL_INERTIA_PLACEHOLDER
    state: BodyState = field(default_factory=BodyState)

    _config: RocketConfig | None = field(default=None, init=False, repr=False)
    _phase: FlightPhase = field(default=FlightPhase.UNCONFIGURED, init=False, repr=False)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @beartype
    def configure(
        self,
        motor: Motor | None,
        gimbal: Gimbal | None,
        mass: float,
        length: float,
        com_height: float,
    ) -> RocketConfig:
        """Set geometry, mass and propulsion hardware.

        Args:
            motor: Thrust source (None for no thrust)
            gimbal: Nozzle gimbal (None for no thrust vectoring)
            mass: Rocket mass [kg]
            length: Distance from the nozzle to the top of the rocket [m]
            com_height: Distance from the nozzle to the center of mass [m]

        Returns:
            The validated configuration

        Raises:
            ConfigurationError: If the geometry is invalid. The rocket is
                left unchanged in that case.
        """
        config = RocketConfig.create(mass, length, com_height, self.axial_inertia)

        self._config = config
        self.motor = motor
        self.gimbal = gimbal
        self._phase = FlightPhase.READY

        logger.info(
            f"Rocket configured: mass={mass:g} kg, length={length:g} m, "
            f"com_height={com_height:g} m, I={config.moment_of_inertia[0]:.4g} kg*m^2"
        )
        return config

    @property
    def config(self) -> RocketConfig | None:
        """Current configuration, None until configure() is called."""
        return self._config

    @property
    def phase(self) -> FlightPhase:
        """Current lifecycle phase."""
        return self._phase

    @property
    def mass(self) -> float:
        """Mass [kg] (1.0 before configuration)."""
        if self._config is None:
            return 1.0
        return self._config.mass

    @property
    def moment_of_inertia(self) -> NDArray[np.float64]:
        """Principal moments [kg*m^2] ([1, 1, 1] before configuration)."""
        if self._config is None:
            return np.ones(3, dtype=np.float64)
        return self._config.moment_of_inertia.copy()

    def _require_config(self) -> ThrustVectorResolver:
        if self._config is None:
            raise RuntimeError("Rocket is not configured; call configure() first")
        # gravity is read on every call, geometry only on configure()
        return ThrustVectorResolver(
            lever_arm=self._config.com_height,
            mass=self._config.mass,
            gravity=self.gravity,
        )

    def subsystems(self) -> list[Subsystem]:
        """Attached subsystems, in gimbal, motor, controller order."""
        return [s for s in (self.gimbal, self.motor, self.controller) if s is not None]

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def init(self) -> None:
        """Place the rocket at the launch altitude and arm its subsystems."""
        self._require_config()

        self.state.position[2] = self.launch_altitude
        for subsystem in self.subsystems():
            subsystem.init()
        self._phase = FlightPhase.READY

        logger.debug(f"Rocket armed at z={self.launch_altitude:g} m")

    def reset(self) -> None:
        """Restore the default kinematic state and reset subsystems."""
        self.state = BodyState()
        for subsystem in self.subsystems():
            subsystem.reset()
        if self._config is not None:
            self._phase = FlightPhase.READY

        logger.debug("Rocket reset")

    @beartype
    def step(self, current_time: float, dt: float) -> None:
        """Advance the gimbal, then the controller.

        Args:
            current_time: Flight time [s]
            dt: Time step [s], must be positive

        Raises:
            ValueError: If dt <= 0
            RuntimeError: If the rocket is not configured
        """
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt!r}")
        self._require_config()

        if self._phase is FlightPhase.READY:
            self._phase = FlightPhase.RUNNING

        if self.gimbal is not None:
            self.gimbal.advance(dt)
        if self.controller is not None:
            self.controller.advance(current_time)

    def is_over(self) -> bool:
        """Whether the rocket has landed after lift-off."""
        if self._phase is FlightPhase.LANDED:
            return True
        if self._phase is FlightPhase.RUNNING and is_landed(self.state):
            self._phase = FlightPhase.LANDED
            logger.info(f"Rocket landed at t={self.state.time:.3f} s")
            return True
        return False

    def stop(self) -> None:
        """Tell the controller to stop, if there is one."""
        if self.controller is None:
            logger.debug("stop() with no controller attached")
            return
        self.controller.stop()

    # -------------------------------------------------------------------------
    # Force / torque
    # -------------------------------------------------------------------------

    @beartype
    def thrust(self, current_time: float) -> float:
        """Current thrust magnitude [N], zero without a motor."""
        if self.motor is None:
            return 0.0
        return float(self.motor.thrust_at(current_time))

    def gimbal_deflection(self) -> tuple[float, float] | None:
        """Current (gx, gy) gimbal deflection [deg], None without a gimbal."""
        if self.gimbal is None:
            return None
        return float(self.gimbal.deflection_x()), float(self.gimbal.deflection_y())

    @beartype
    def force(self, current_time: float, dt: float) -> NDArray[np.float64]:
        """Net world-frame force at current_time [N]."""
        resolver = self._require_config()
        return resolver.force(
            self.thrust(current_time),
            self.gimbal_deflection(),
            self.state.attitude,
        )

    @beartype
    def torque(self, current_time: float, dt: float) -> NDArray[np.float64]:
        """Torque about the center of mass at current_time [N*m]."""
        resolver = self._require_config()
        return resolver.torque(self.thrust(current_time), self.gimbal_deflection())
