"""Fake collaborators for testing the controller.

Each fake counts the commands it receives and can be told to fail,
so tests can assert on exactly which commands a cycle issued.
"""

from typing import Any

from pydantic import ConfigDict, Field

from ecs import (
    ActuatorCommandFailed,
    Heater,
    SensorUnavailable,
    TemperatureSensor,
    Window,
)


class FakeTemperatureSensor(TemperatureSensor):
    """Sensor returning a configurable temperature."""

    model_config = ConfigDict(frozen=False, arbitrary_types_allowed=True)

    temperature: float = Field(default=20.0)
    fail: bool = Field(
        default=False, description="Raise SensorUnavailable on read"
    )
    error: Exception | None = Field(
        default=None, description="Raise this exception on read instead"
    )
    reading: Any = Field(
        default=None, description="Return this raw value instead"
    )
    read_count: int = Field(default=0)

    def get_temperature(self) -> float:
        self.read_count += 1
        if self.fail:
            raise SensorUnavailable(self.name, "fake outage")
        if self.error is not None:
            raise self.error
        if self.reading is not None:
            return self.reading
        return self.temperature


class FakeHeater(Heater):
    """Heater counting turn_on/turn_off calls."""

    model_config = ConfigDict(frozen=False, arbitrary_types_allowed=True)

    turn_on_count: int = Field(default=0)
    turn_off_count: int = Field(default=0)
    error: Exception | None = Field(default=None)
    log: Any = Field(
        default=None, description="Shared call log across fakes"
    )

    def _record(self, command: str) -> None:
        if self.log is not None:
            self.log.append(f"{self.name}.{command}")
        if self.error is not None:
            raise self.error

    def turn_on(self) -> None:
        self._record("turn_on")
        self.turn_on_count += 1

    def turn_off(self) -> None:
        self._record("turn_off")
        self.turn_off_count += 1


class FakeWindow(Window):
    """Window counting open/close calls."""

    model_config = ConfigDict(frozen=False, arbitrary_types_allowed=True)

    open_count: int = Field(default=0)
    close_count: int = Field(default=0)
    error: Exception | None = Field(default=None)
    log: Any = Field(default=None)

    def _record(self, command: str) -> None:
        if self.log is not None:
            self.log.append(f"{self.name}.{command}")
        if self.error is not None:
            raise self.error

    def open(self) -> None:
        self._record("open")
        self.open_count += 1

    def close(self) -> None:
        self._record("close")
        self.close_count += 1


def failing(actuator_name: str) -> ActuatorCommandFailed:
    """Build the error a fake actuator raises when it is broken."""
    return ActuatorCommandFailed(actuator_name, "fake fault")
