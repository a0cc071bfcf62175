"""GNC (Guidance, Navigation, Control) module for rocket vehicles.

Example:
    >>> from tvcrocket.gnc import AttitudeHoldController, PIDGains
    >>>
    >>> controller = AttitudeHoldController(
    ...     gimbal=gimbal,
    ...     attitude=lambda: rocket.state.attitude,
    ...     pitch_gains=PIDGains(kp=1.5, kd=0.4),
    ... )
"""

from tvcrocket.gnc.control import (
    AttitudeHoldController,
    GimbalAxisPID,
    PIDGains,
)

__all__ = [
    "AttitudeHoldController",
    "GimbalAxisPID",
    "PIDGains",
]
