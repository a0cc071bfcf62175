"""Control algorithms for thrust-vectored rockets.

Provides a PID controller and a gimbal-driven attitude hold.
"""

from tvcrocket.gnc.control.attitude import (
    AttitudeHoldController,
)
from tvcrocket.gnc.control.pid import (
    GimbalAxisPID,
    PIDGains,
)

__all__ = [
    "AttitudeHoldController",
    "GimbalAxisPID",
    "PIDGains",
]
