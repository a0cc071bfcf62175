"""Attitude-hold controller using the thrust gimbal.

Tracks a target (pitch, yaw) by commanding gimbal deflections. A positive
x deflection produces a positive torque about x and so raises pitch, which
makes the loop a direct PID on the attitude error:

    gx = pid_x(target_pitch - pitch)
    gy = pid_y(target_yaw - yaw)

The controller does not own the gimbal or the attitude: it is given the
gimbal to command and a callable returning the current (pitch, yaw).

Example:
    >>> from tvcrocket.gnc.control import AttitudeHoldController
    >>> from tvcrocket.propulsion import RateLimitedGimbal
    >>> from tvcrocket.vehicle import RocketBody
    >>>
    >>> rocket = RocketBody()
    >>> gimbal = RateLimitedGimbal()
    >>> rocket.controller = AttitudeHoldController(
    ...     gimbal=gimbal,
    ...     attitude=lambda: rocket.state.attitude,
    ... )
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tvcrocket._typing import beartype
from tvcrocket.gnc.control.pid import GimbalAxisPID, PIDGains
from tvcrocket.propulsion.gimbal import RateLimitedGimbal

logger = logging.getLogger(__name__)


@beartype
@dataclass
class AttitudeHoldController:
    """PID attitude hold through a rate-limited gimbal.

    Attributes:
        gimbal: Gimbal whose targets are commanded
        attitude: Callable returning the current (pitch, yaw) [deg]
        pitch_gains: Gains for the pitch (x) loop [deg/deg]
        yaw_gains: Gains for the yaw (y) loop [deg/deg]
        target: Target (pitch, yaw) [deg]
    """
    gimbal: RateLimitedGimbal
    attitude: Callable[[], tuple[float, float]]
    pitch_gains: PIDGains = field(default_factory=lambda: PIDGains(kp=1.0, ki=0.0, kd=0.3))
    yaw_gains: PIDGains = field(default_factory=lambda: PIDGains(kp=1.0, ki=0.0, kd=0.3))
    target: tuple[float, float] = (0.0, 0.0)

    # Per-axis loops
    _pitch_loop: GimbalAxisPID = field(init=False, repr=False)
    _yaw_loop: GimbalAxisPID = field(init=False, repr=False)

    # State
    _last_time: float | None = field(default=None, init=False, repr=False)
    _stopped: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        """Build the per-axis loops, saturated at the gimbal travel."""
        travel = self.gimbal.max_angle
        self._pitch_loop = GimbalAxisPID(self.pitch_gains, travel=travel)
        self._yaw_loop = GimbalAxisPID(self.yaw_gains, travel=travel)

    @property
    def stopped(self) -> bool:
        """Whether stop() has been called since the last reset."""
        return self._stopped

    @beartype
    def advance(self, current_time: float) -> None:
        """Command the gimbal for the given flight time [s].

        The first call after a reset only records the time; later calls
        use the time elapsed since the previous call.
        """
        if self._stopped:
            return

        if self._last_time is None:
            self._last_time = current_time
            return

        dt = current_time - self._last_time
        if dt <= 0:
            return
        self._last_time = current_time

        pitch, yaw = self.attitude()
        target_pitch, target_yaw = self.target

        gx = self._pitch_loop.command(target_pitch - pitch, dt)
        gy = self._yaw_loop.command(target_yaw - yaw, dt)
        self.gimbal.set_target(gx, gy)

    def stop(self) -> None:
        """Center the gimbal target and stop commanding it."""
        self._stopped = True
        self.gimbal.set_target(0.0, 0.0)
        logger.debug("Attitude controller stopped")

    def init(self) -> None:
        """Prepare for a new flight."""
        self.reset()

    def reset(self) -> None:
        """Reset loop state and resume control."""
        self._pitch_loop.reset()
        self._yaw_loop.reset()
        self._last_time = None
        self._stopped = False
