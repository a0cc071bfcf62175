"""Step-driven flight simulation for a thrust-vectored rocket.

The simulator owns the loop. Each step it hands the rocket to the
rigid-body integrator and records what happened, until the rocket reports
that the flight is over or the time limit is reached.

Example:
    >>> from tvcrocket.simulation import Simulator, SimConfig
    >>> from tvcrocket.vehicle import RocketBody
    >>> from tvcrocket.propulsion import ConstantThrustMotor
    >>>
    >>> rocket = RocketBody()
    >>> rocket.configure(ConstantThrustMotor(thrust=150.0, burn_time=2.0),
    ...                  None, mass=10.0, length=2.0, com_height=0.5)
    >>> result = Simulator(rocket, SimConfig(dt=0.01)).run()
    >>> print(f"Apogee: {result.apogee:.1f} m")
"""

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from tvcrocket._typing import beartype
from tvcrocket.dynamics.rigid_body import RigidBodyIntegrator
from tvcrocket.dynamics.state import BodyState
from tvcrocket.vehicle.rocket import RocketBody

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


@beartype
@dataclass
class SimConfig:
    """Simulation configuration.

    Attributes:
        dt: Time step [s]
        max_time: Flight time limit [s]
        record_history: Whether to keep a record of every step
    """
    dt: float = 0.01
    max_time: float = 120.0
    record_history: bool = True

    def __post_init__(self) -> None:
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt!r}")
        if self.max_time <= 0:
            raise ValueError(f"max_time must be positive, got {self.max_time!r}")


# =============================================================================
# Records
# =============================================================================


@beartype
@dataclass
class FlightRecord:
    """One integration step.

    Attributes:
        state: State at the end of the step
        force: Net force applied during the step [N]
        torque: Torque applied during the step [N*m]
        thrust: Thrust magnitude during the step [N]
        gimbal: Gimbal (gx, gy) during the step [deg], None without a gimbal
    """
    state: BodyState
    force: NDArray[np.float64]
    torque: NDArray[np.float64]
    thrust: float
    gimbal: tuple[float, float] | None


# =============================================================================
# Simulator
# =============================================================================


@beartype
@dataclass
class Simulator:
    """Runs a rocket from launch until it lands or time runs out.

    Attributes:
        rocket: Configured rocket body
        config: Simulation configuration
        integrator: Rigid-body integrator used for each step
    """
    rocket: RocketBody
    config: SimConfig = field(default_factory=SimConfig)
    integrator: RigidBodyIntegrator = field(default_factory=RigidBodyIntegrator)

    _history: list[FlightRecord] = field(default_factory=list, init=False, repr=False)

    def start(self) -> None:
        """Reset and arm the rocket for a new flight."""
        self.rocket.reset()
        self.rocket.init()
        self._history = []

    def step(self, current_time: float) -> FlightRecord:
        """Advance the rocket by one configured time step."""
        # Sampled before the step so the record shows what drove it
        thrust = self.rocket.thrust(current_time)
        result = self.integrator.step(self.rocket, current_time, self.config.dt)

        record = FlightRecord(
            state=result.state.copy(),
            force=result.force,
            torque=result.torque,
            thrust=thrust,
            gimbal=self.rocket.gimbal_deflection(),
        )
        if self.config.record_history:
            self._history.append(record)
        return record

    def run(self) -> "FlightResult":
        """Fly the rocket until it lands or max_time is reached."""
        self.start()
        logger.info(f"Starting simulation: dt={self.config.dt}s, max_time={self.config.max_time}s")

        n_steps = int(np.ceil(self.config.max_time / self.config.dt))
        current_time = 0.0
        for i in range(n_steps):
            self.step(current_time)
            current_time = (i + 1) * self.config.dt
            if self.rocket.is_over():
                break
        else:
            logger.info(f"Simulation reached max_time={self.config.max_time}s before landing")

        self.rocket.stop()
        logger.info(f"Simulation finished at t={current_time:.3f}s")
        return FlightResult(records=list(self._history), landed=self.rocket.is_over())

    def get_history(self) -> list[FlightRecord]:
        """Get recorded step history."""
        return self._history.copy()


# =============================================================================
# Results and Analysis
# =============================================================================


@beartype
@dataclass
class FlightResult:
    """Results from a completed flight.

    Provides convenient access to trajectory data.
    """
    records: list[FlightRecord]
    landed: bool = False

    @property
    def time(self) -> NDArray[np.float64]:
        """Time array [s]."""
        return np.array([r.state.time for r in self.records], dtype=np.float64)

    @property
    def position(self) -> NDArray[np.float64]:
        """Position history [m], shape (N, 3)."""
        return np.array([r.state.position for r in self.records], dtype=np.float64)

    @property
    def velocity(self) -> NDArray[np.float64]:
        """Velocity history [m/s], shape (N, 3)."""
        return np.array([r.state.velocity for r in self.records], dtype=np.float64)

    @property
    def attitude(self) -> NDArray[np.float64]:
        """Angular position history [deg], shape (N, 3)."""
        return np.array([r.state.angular_position for r in self.records], dtype=np.float64)

    @property
    def altitude(self) -> NDArray[np.float64]:
        """Altitude history [m]."""
        return np.array([r.state.altitude for r in self.records], dtype=np.float64)

    @property
    def force(self) -> NDArray[np.float64]:
        """Force history [N], shape (N, 3)."""
        return np.array([r.force for r in self.records], dtype=np.float64)

    @property
    def torque(self) -> NDArray[np.float64]:
        """Torque history [N*m], shape (N, 3)."""
        return np.array([r.torque for r in self.records], dtype=np.float64)

    @property
    def thrust(self) -> NDArray[np.float64]:
        """Thrust history [N]."""
        return np.array([r.thrust for r in self.records], dtype=np.float64)

    @property
    def apogee(self) -> float:
        """Highest altitude reached [m]."""
        if not self.records:
            return 0.0
        return float(self.altitude.max())

    @property
    def flight_time(self) -> float:
        """Time of the last recorded step [s]."""
        if not self.records:
            return 0.0
        return self.records[-1].state.time

    def to_dataframe(self):
        """Convert to Polars DataFrame."""
        import polars as pl

        position = self.position.reshape(-1, 3)
        velocity = self.velocity.reshape(-1, 3)
        attitude = self.attitude.reshape(-1, 3)
        force = self.force.reshape(-1, 3)
        torque = self.torque.reshape(-1, 3)

        return pl.DataFrame({
            "time": self.time,
            "x": position[:, 0],
            "y": position[:, 1],
            "z": position[:, 2],
            "vx": velocity[:, 0],
            "vy": velocity[:, 1],
            "vz": velocity[:, 2],
            "pitch": attitude[:, 0],
            "yaw": attitude[:, 1],
            "thrust": self.thrust,
            "fx": force[:, 0],
            "fy": force[:, 1],
            "fz": force[:, 2],
            "mx": torque[:, 0],
            "my": torque[:, 1],
        })
