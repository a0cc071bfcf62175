"""Kinematic state of a rocket body in a flat-earth frame.

The state vector contains:
- Position (3): [x, y, z] with z the altitude above the launch datum [m]
- Velocity (3): [vx, vy, vz] [m/s]
- Angular position (3): [pitch, yaw, roll] [deg]
- Angular velocity (3): [pitch rate, yaw rate, roll rate] [deg/s]

Attitude is kept as plain angles rather than a quaternion: the thrust
model only needs pitch and yaw, and those are read directly in degrees.
"""

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from tvcrocket._typing import beartype


def _zeros() -> NDArray[np.float64]:
    return np.zeros(3, dtype=np.float64)


@beartype
@dataclass
class BodyState:
    """Kinematic state advanced by the integrator.

    Attributes:
        position: [x, y, z] position, z up [m]
        velocity: [vx, vy, vz] velocity [m/s]
        angular_position: [pitch, yaw, roll] attitude [deg]
        angular_velocity: [pitch, yaw, roll] rates [deg/s]
        time: simulation time [s]
    """
    position: NDArray[np.float64] = field(default_factory=_zeros)
    velocity: NDArray[np.float64] = field(default_factory=_zeros)
    angular_position: NDArray[np.float64] = field(default_factory=_zeros)
    angular_velocity: NDArray[np.float64] = field(default_factory=_zeros)
    time: float = 0.0

    def __post_init__(self) -> None:
        """Coerce to float arrays and validate shapes."""
        self.position = np.asarray(self.position, dtype=np.float64)
        self.velocity = np.asarray(self.velocity, dtype=np.float64)
        self.angular_position = np.asarray(self.angular_position, dtype=np.float64)
        self.angular_velocity = np.asarray(self.angular_velocity, dtype=np.float64)

        if self.position.shape != (3,):
            raise ValueError(f"Position must be shape (3,), got {self.position.shape}")
        if self.velocity.shape != (3,):
            raise ValueError(f"Velocity must be shape (3,), got {self.velocity.shape}")
        if self.angular_position.shape != (3,):
            raise ValueError(
                f"Angular position must be shape (3,), got {self.angular_position.shape}"
            )
        if self.angular_velocity.shape != (3,):
            raise ValueError(
                f"Angular velocity must be shape (3,), got {self.angular_velocity.shape}"
            )

    @classmethod
    def at_altitude(
        cls,
        z: float,
        pitch_deg: float = 0.0,
        yaw_deg: float = 0.0,
    ) -> "BodyState":
        """Create a state at rest at altitude z with the given attitude."""
        return cls(
            position=np.array([0.0, 0.0, z]),
            angular_position=np.array([pitch_deg, yaw_deg, 0.0]),
        )

    def copy(self) -> "BodyState":
        """Create a copy of this state."""
        return BodyState(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            angular_position=self.angular_position.copy(),
            angular_velocity=self.angular_velocity.copy(),
            time=self.time,
        )

    @property
    def attitude(self) -> tuple[float, float]:
        """Get (pitch, yaw) in degrees."""
        return float(self.angular_position[0]), float(self.angular_position[1])

    @property
    def altitude(self) -> float:
        """Get altitude above the launch datum [m]."""
        return float(self.position[2])

    @property
    def vertical_velocity(self) -> float:
        """Get vertical velocity, positive up [m/s]."""
        return float(self.velocity[2])

    @property
    def speed(self) -> float:
        """Get speed magnitude [m/s]."""
        return float(np.linalg.norm(self.velocity))


@beartype
def is_landed(state: BodyState) -> bool:
    """Landing predicate: on or below the datum and not climbing."""
    return state.altitude <= 0.0 and state.vertical_velocity <= 0.0
