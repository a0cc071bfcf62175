"""Simulation module for thrust-vectored rocket flights.

Example:
    >>> from tvcrocket.simulation import Simulator, SimConfig
    >>>
    >>> result = Simulator(rocket, SimConfig(dt=0.01, max_time=30.0)).run()
    >>> result.to_dataframe()
"""

from tvcrocket.simulation.simulator import (
    FlightRecord,
    FlightResult,
    SimConfig,
    Simulator,
)

__all__ = [
    "FlightRecord",
    "FlightResult",
    "SimConfig",
    "Simulator",
]
