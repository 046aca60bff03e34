"""Collaborator contracts for temperature sensing and actuation.

The controller only ever talks to hardware through these classes.
Drivers subclass them and implement the abstract commands; the
simulated drivers in ``ecs.environments.simulation`` are one such
implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from pydantic import Field

from .entity import Entity


class Device(Entity, ABC):
    """Base class for hardware interface points.

    Each device stores arbitrary key-value pairs in ``properties``.
    Common property names:
    - unit: Measurement unit (C, F)
    - label: Human-readable description
    - path: Driver-specific hardware path (GPIO line, 1-Wire id)
    """

    properties: Dict[str, Any] = Field(
        default_factory=dict,
        description="Flexible key-value storage for device-specific "
        "properties",
    )


class TemperatureSensor(Device):
    """A device that reports the ambient temperature."""

    @abstractmethod
    def get_temperature(self) -> float:
        """Return the current temperature.

        Raises:
            SensorUnavailable: If no reading can be produced.
        """


class Actuator(Device):
    """A device that acts on the environment.

    Commands are idempotent: issuing the command for the state the
    actuator is already in must be harmless.
    """


class Heater(Actuator):
    """An actuator that adds heat."""

    @abstractmethod
    def turn_on(self) -> None:
        """Switch the heater on.

        Raises:
            ActuatorCommandFailed: If the command cannot be delivered.
        """

    @abstractmethod
    def turn_off(self) -> None:
        """Switch the heater off.

        Raises:
            ActuatorCommandFailed: If the command cannot be delivered.
        """


class Window(Actuator):
    """An actuator that vents the environment to the outside."""

    @abstractmethod
    def open(self) -> None:
        """Open the window.

        Raises:
            ActuatorCommandFailed: If the command cannot be delivered.
        """

    @abstractmethod
    def close(self) -> None:
        """Close the window.

        Raises:
            ActuatorCommandFailed: If the command cannot be delivered.
        """
