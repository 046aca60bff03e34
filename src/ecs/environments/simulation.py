"""Simulated room and drivers for running the controller without hardware.

The room is a single lumped thermal mass. Heat is lost towards the
outside temperature at a rate that depends on whether the window is
open, and the heater adds a fixed number of degrees per second while
it is on. Nothing here runs on its own: ``ThermalRoom.step()`` must be
called to advance time.
"""

import math

from pydantic import ConfigDict, Field

from ecs.base.device import Heater, TemperatureSensor, Window
from ecs.base.entity import Entity
from ecs.exceptions import ActuatorCommandFailed, SensorUnavailable


class ThermalRoom(Entity):
    """Lumped thermal model of a single room."""

    model_config = ConfigDict(frozen=False)

    temperature: float = Field(
        default=20.0, description="Current indoor temperature"
    )
    outside_temperature: float = Field(
        default=10.0, description="Outdoor temperature the room drifts to"
    )
    heater_on: bool = Field(default=False)
    window_open: bool = Field(default=False)
    heating_rate: float = Field(
        default=0.01,
        ge=0.0,
        description="Degrees per second added while the heater is on",
    )
    loss_rate: float = Field(
        default=0.0005,
        ge=0.0,
        description="Fraction of the indoor/outdoor difference lost per "
        "second with the window closed",
    )
    window_loss_rate: float = Field(
        default=0.005,
        ge=0.0,
        description="Fraction of the indoor/outdoor difference lost per "
        "second with the window open",
    )

    def step(self, seconds: float) -> float:
        """Advance the model and return the new temperature.

        Args:
            seconds: Simulated time to advance, must not be negative
        """
        if seconds < 0:
            raise ValueError(f"cannot step back in time ({seconds}s)")

        rate = self.window_loss_rate if self.window_open else self.loss_rate
        difference = self.temperature - self.outside_temperature
        # Exact decay, stable for any step size
        self.temperature = self.outside_temperature + difference * math.exp(
            -rate * seconds
        )
        if self.heater_on:
            self.temperature += self.heating_rate * seconds
        return self.temperature


class SimulatedTemperatureSensor(TemperatureSensor):
    """Sensor reading a ThermalRoom."""

    model_config = ConfigDict(frozen=False)

    room: ThermalRoom
    available: bool = Field(
        default=True, description="When False every read fails"
    )
    reads: int = Field(default=0, description="Number of successful reads")

    def get_temperature(self) -> float:
        if not self.available:
            raise SensorUnavailable(self.name, "simulated outage")
        self.reads += 1
        return self.room.temperature


class SimulatedHeater(Heater):
    """Heater switching ThermalRoom.heater_on."""

    model_config = ConfigDict(frozen=False)

    room: ThermalRoom
    responsive: bool = Field(
        default=True, description="When False every command fails"
    )
    commands_delivered: int = Field(default=0)

    def _set(self, on: bool) -> None:
        if not self.responsive:
            raise ActuatorCommandFailed(self.name, "simulated fault")
        self.room.heater_on = on
        self.commands_delivered += 1

    def turn_on(self) -> None:
        self._set(True)

    def turn_off(self) -> None:
        self._set(False)


class SimulatedWindow(Window):
    """Window switching ThermalRoom.window_open."""

    model_config = ConfigDict(frozen=False)

    room: ThermalRoom
    responsive: bool = Field(
        default=True, description="When False every command fails"
    )
    commands_delivered: int = Field(default=0)

    def _set(self, is_open: bool) -> None:
        if not self.responsive:
            raise ActuatorCommandFailed(self.name, "simulated fault")
        self.room.window_open = is_open
        self.commands_delivered += 1

    def open(self) -> None:
        self._set(True)

    def close(self) -> None:
        self._set(False)
