"""Thrust-curve motor models.

A motor maps flight time to thrust magnitude. Thrust is zero before
ignition and after burnout.

Example:
    >>> from tvcrocket.propulsion.motor import ThrustCurveMotor
    >>> motor = ThrustCurveMotor(
    ...     times=[0.0, 0.1, 1.0, 1.2],
    ...     thrusts=[0.0, 150.0, 100.0, 0.0],
    ... )
    >>> motor.thrust_at(0.55)
    125.0
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from tvcrocket._typing import beartype
from tvcrocket.errors import ConfigurationError

# =============================================================================
# Tabulated Thrust Curve
# =============================================================================


@beartype
@dataclass
class ThrustCurveMotor:
    """Motor with a tabulated thrust curve.

    Thrust is linearly interpolated between samples and is zero outside
    the tabulated burn.

    Attributes:
        times: Sample times from ignition, strictly increasing [s]
        thrusts: Thrust at each sample, non-negative [N]
        ignition_time: Flight time at which the curve starts [s]
    """
    times: Sequence[float] | NDArray[np.float64]
    thrusts: Sequence[float] | NDArray[np.float64]
    ignition_time: float = 0.0

    _times: NDArray[np.float64] = field(init=False, repr=False)
    _thrusts: NDArray[np.float64] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the curve."""
        self._times = np.asarray(self.times, dtype=np.float64)
        self._thrusts = np.asarray(self.thrusts, dtype=np.float64)

        if self._times.ndim != 1 or self._times.size < 2:
            raise ConfigurationError(
                "times", float(self._times.size),
                message="Thrust curve needs at least 2 samples",
            )
        if self._thrusts.shape != self._times.shape:
            raise ConfigurationError(
                "thrusts", float(self._thrusts.size),
                message="times and thrusts must have same length",
            )
        if np.any(np.diff(self._times) <= 0):
            raise ConfigurationError(
                "times", float(self._times[0]),
                message="Thrust curve times must be strictly increasing",
            )
        if np.any(self._thrusts < 0):
            raise ConfigurationError(
                "thrusts", float(self._thrusts.min()), lower=0.0,
                message="Thrust curve values must be non-negative",
            )

    def thrust_at(self, time: float) -> float:
        """Thrust at flight time [N]."""
        return float(np.interp(
            time - self.ignition_time,
            self._times,
            self._thrusts,
            left=0.0,
            right=0.0,
        ))

    def init(self) -> None:
        """Nothing to arm; the curve is stateless."""

    def reset(self) -> None:
        """Nothing to rewind; the curve is stateless."""

    @property
    def burn_time(self) -> float:
        """Duration of the tabulated burn [s]."""
        return float(self._times[-1] - self._times[0])

    @property
    def peak_thrust(self) -> float:
        """Maximum thrust [N]."""
        return float(self._thrusts.max())

    @property
    def total_impulse(self) -> float:
        """Total impulse by trapezoidal integration [N*s]."""
        dt = np.diff(self._times)
        mean_thrust = 0.5 * (self._thrusts[1:] + self._thrusts[:-1])
        return float(np.sum(dt * mean_thrust))


# =============================================================================
# Constant Thrust
# =============================================================================


@beartype
@dataclass
class ConstantThrustMotor:
    """Motor producing constant thrust for a fixed burn.

    Attributes:
        thrust: Thrust during the burn [N]
        burn_time: Burn duration [s]
        ignition_time: Flight time of ignition [s]
    """
    thrust: float
    burn_time: float = float("inf")
    ignition_time: float = 0.0

    def __post_init__(self) -> None:
        if self.thrust < 0:
            raise ConfigurationError("thrust", self.thrust, lower=0.0,
                                     message="Thrust must be non-negative")
        if self.burn_time <= 0:
            raise ConfigurationError("burn_time", self.burn_time, lower=0.0)

    def thrust_at(self, time: float) -> float:
        """Thrust at flight time [N]."""
        elapsed = time - self.ignition_time
        if 0.0 <= elapsed < self.burn_time:
            return self.thrust
        return 0.0

    def init(self) -> None:
        """Nothing to arm."""

    def reset(self) -> None:
        """Nothing to rewind."""

    @property
    def total_impulse(self) -> float:
        """Total impulse [N*s]."""
        return self.thrust * self.burn_time
