"""Environments the controller can be wired to."""

from .simulation import (
    SimulatedHeater,
    SimulatedTemperatureSensor,
    SimulatedWindow,
    ThermalRoom,
)

__all__ = [
    "SimulatedHeater",
    "SimulatedTemperatureSensor",
    "SimulatedWindow",
    "ThermalRoom",
]
