"""Base classes for the ecs control system."""

from ecs.base.device import Actuator, Device, Heater, TemperatureSensor, Window
from ecs.base.entity import Entity
from ecs.base.process import Controller, Process
from ecs.base.thresholds import Band, Thresholds

__all__ = [
    "Actuator",
    "Band",
    "Controller",
    "Device",
    "Entity",
    "Heater",
    "Process",
    "TemperatureSensor",
    "Thresholds",
    "Window",
]
