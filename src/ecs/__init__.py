"""Environmental control: keep a temperature between two thresholds."""

from .base import (
    Actuator,
    Band,
    Controller,
    Device,
    Entity,
    Heater,
    Process,
    TemperatureSensor,
    Thresholds,
    Window,
)
from .controllers import (
    Decision,
    HeaterCommand,
    ThresholdController,
    WindowCommand,
)
from .exceptions import (
    ActuatorCommandFailed,
    EcsError,
    InvalidThreshold,
    SensorUnavailable,
)

__all__ = [
    "Actuator",
    "ActuatorCommandFailed",
    "Band",
    "Controller",
    "Decision",
    "Device",
    "EcsError",
    "Entity",
    "Heater",
    "HeaterCommand",
    "InvalidThreshold",
    "Process",
    "SensorUnavailable",
    "TemperatureSensor",
    "ThresholdController",
    "Thresholds",
    "Window",
    "WindowCommand",
]
