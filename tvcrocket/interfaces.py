"""Protocols for the collaborators a rocket body works with.

Motors, gimbals and controllers are optional and replaceable. Each of them
is a Subsystem: something the rocket can re-arm before a flight (init) and
restore to its defaults (reset).

The protocols are runtime-checkable so that beartype can verify them
structurally at call boundaries.
"""

from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from tvcrocket.dynamics.state import BodyState

# =============================================================================
# Subsystems
# =============================================================================


@runtime_checkable
class Subsystem(Protocol):
    """Anything the rocket re-arms and resets along with itself."""

    def init(self) -> None:
        """Prepare for a new flight."""
        ...

    def reset(self) -> None:
        """Restore default state."""
        ...


@runtime_checkable
class Motor(Subsystem, Protocol):
    """Thrust source."""

    def thrust_at(self, time: float) -> float:
        """Thrust magnitude at the given flight time [N], never negative."""
        ...


@runtime_checkable
class Gimbal(Subsystem, Protocol):
    """Two-axis nozzle actuator."""

    def deflection_x(self) -> float:
        """Current deflection about the body x axis [deg]."""
        ...

    def deflection_y(self) -> float:
        """Current deflection about the body y axis [deg]."""
        ...

    def advance(self, dt: float) -> None:
        """Advance the actuator by dt seconds."""
        ...


@runtime_checkable
class Controller(Subsystem, Protocol):
    """Attitude controller adjusting gimbal targets over time."""

    def advance(self, current_time: float) -> None:
        """Update commands for the given flight time [s]."""
        ...

    def stop(self) -> None:
        """Stop commanding the gimbal."""
        ...


# =============================================================================
# Integrator-facing capability
# =============================================================================


@runtime_checkable
class Steppable(Protocol):
    """A body that a rigid-body integrator can advance.

    The integrator owns the time loop. On each step it calls step() so the
    body can advance its own subsystems, then reads force() and torque() and
    integrates the body's state.
    """

    state: BodyState

    @property
    def mass(self) -> float:
        """Mass [kg]."""
        ...

    @property
    def moment_of_inertia(self) -> NDArray[np.float64]:
        """Principal moments [Ixx, Iyy, Izz] [kg*m^2]."""
        ...

    def step(self, current_time: float, dt: float) -> None:
        ...

    def force(self, current_time: float, dt: float) -> NDArray[np.float64]:
        ...

    def torque(self, current_time: float, dt: float) -> NDArray[np.float64]:
        ...

    def is_over(self) -> bool:
        ...
