"""Thrust vector control (TVC) gimbal actuator.

The gimbal holds a commanded target deflection per axis and slews its
actual deflection toward the target at a bounded rate. Both target and
deflection are clamped to the mechanical travel.

Example:
    >>> from tvcrocket.propulsion.gimbal import RateLimitedGimbal
    >>> gimbal = RateLimitedGimbal(max_angle=10.0, rate_limit=50.0)
    >>> gimbal.set_target(5.0, -2.0)
    >>> gimbal.advance(0.05)
    >>> gimbal.deflection()
    (2.5, -2.0)
"""

from dataclasses import dataclass, field

import numpy as np

from tvcrocket._typing import beartype
from tvcrocket.errors import ConfigurationError


@beartype
@dataclass
class RateLimitedGimbal:
    """Two-axis gimbal with travel and slew-rate limits.

    Attributes:
        max_angle: Maximum deflection on either axis [deg]
        rate_limit: Maximum slew rate on either axis [deg/s]
    """
    max_angle: float = 10.0
    rate_limit: float = 60.0

    _target: tuple[float, float] = field(default=(0.0, 0.0), init=False, repr=False)
    _current: tuple[float, float] = field(default=(0.0, 0.0), init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate limits."""
        # bounded_tan is singular at 90 deg, so travel must stay below it
        if not 0.0 < self.max_angle < 90.0:
            raise ConfigurationError("max_angle", self.max_angle, lower=0.0, upper=90.0)
        if self.rate_limit <= 0.0:
            raise ConfigurationError("rate_limit", self.rate_limit, lower=0.0)

    def _clamp(self, angle: float) -> float:
        return float(np.clip(angle, -self.max_angle, self.max_angle))

    @beartype
    def set_target(self, x: float, y: float) -> None:
        """Command target deflections [deg], clamped to the travel."""
        self._target = (self._clamp(x), self._clamp(y))

    @property
    def target(self) -> tuple[float, float]:
        """Commanded (x, y) deflection [deg]."""
        return self._target

    def deflection_x(self) -> float:
        """Current deflection about x [deg]."""
        return self._current[0]

    def deflection_y(self) -> float:
        """Current deflection about y [deg]."""
        return self._current[1]

    def deflection(self) -> tuple[float, float]:
        """Current (x, y) deflection [deg]."""
        return self._current

    @beartype
    def advance(self, dt: float) -> None:
        """Slew toward the target for dt seconds."""
        if dt <= 0:
            return

        max_change = self.rate_limit * dt

        x_delta = np.clip(self._target[0] - self._current[0], -max_change, max_change)
        y_delta = np.clip(self._target[1] - self._current[1], -max_change, max_change)

        self._current = (
            self._clamp(self._current[0] + x_delta),
            self._clamp(self._current[1] + y_delta),
        )

    def init(self) -> None:
        """Center the nozzle, keeping any commanded target."""
        self._current = (0.0, 0.0)

    def reset(self) -> None:
        """Center the nozzle and clear the target."""
        self._current = (0.0, 0.0)
        self._target = (0.0, 0.0)
