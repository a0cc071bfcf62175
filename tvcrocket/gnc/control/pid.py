"""Single-axis PID loop from attitude error to gimbal deflection.

One loop drives one gimbal axis. Its input is an attitude error and its
output a deflection command, both in degrees. The command saturates at the
gimbal travel:

    command = clip(kp*e + ki*integral(e) + kd*de/dt, -travel, travel)

The integral term is held within the travel on its own as well, so a long
stretch at the stop does not wind it past what the nozzle can deliver.

Example:
    >>> from tvcrocket.gnc.control.pid import GimbalAxisPID, PIDGains
    >>> loop = GimbalAxisPID(PIDGains(kp=2.0), travel=10.0)
    >>> loop.command(3.0, dt=0.01)
    6.0
    >>> loop.command(8.0, dt=0.01)
    10.0
"""

from dataclasses import dataclass, field

import numpy as np

from tvcrocket._typing import beartype
from tvcrocket.errors import ConfigurationError


@beartype
@dataclass(frozen=True)
class PIDGains:
    """Gains of one attitude loop.

    Attributes:
        kp: Proportional gain [deg gimbal / deg error]
        ki: Integral gain [deg gimbal / (deg error * s)]
        kd: Derivative gain [deg gimbal / (deg error / s)]
    """
    kp: float = 1.0
    ki: float = 0.0
    kd: float = 0.0


@beartype
@dataclass
class GimbalAxisPID:
    """PID loop commanding one gimbal axis.

    Attributes:
        gains: Loop gains
        travel: Gimbal travel on this axis; output limit [deg]
    """
    gains: PIDGains
    travel: float

    _integral: float = field(default=0.0, init=False, repr=False)
    _prev_error: float | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.travel <= 0.0:
            raise ConfigurationError("travel", self.travel, lower=0.0)

    def reset(self) -> None:
        """Forget the integral and the previous error."""
        self._integral = 0.0
        self._prev_error = None

    @beartype
    def command(self, error: float, dt: float) -> float:
        """Deflection command for the current attitude error.

        The first command after a reset has no derivative term.

        Args:
            error: Target minus measured attitude [deg]
            dt: Time since the previous command [s]

        Returns:
            Gimbal deflection command within +/-travel [deg]

        Raises:
            ValueError: If dt <= 0
        """
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt!r}")

        self._integral += error * dt
        i_term = self.gains.ki * self._integral
        if abs(i_term) > self.travel:
            i_term = float(np.clip(i_term, -self.travel, self.travel))
            self._integral = i_term / self.gains.ki

        d_term = 0.0
        if self._prev_error is not None:
            d_term = self.gains.kd * (error - self._prev_error) / dt
        self._prev_error = error

        command = self.gains.kp * error + i_term + d_term
        return float(np.clip(command, -self.travel, self.travel))
