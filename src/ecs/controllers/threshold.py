"""Two-threshold controller driving a heater and a window."""

import math
import threading
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, PrivateAttr

from ecs.base.device import Actuator, Heater, TemperatureSensor, Window
from ecs.base.process import Controller
from ecs.base.thresholds import Band, Thresholds
from ecs.exceptions import (
    ActuatorCommandFailed,
    InvalidThreshold,
    SensorUnavailable,
)


class HeaterCommand(str, Enum):
    """Command issued to the heater."""

    ON = "on"
    OFF = "off"


class WindowCommand(str, Enum):
    """Command issued to the window."""

    OPEN = "open"
    CLOSE = "close"


# Heater and window command for each band. Total and non-overlapping:
# both thresholds belong to the comfortable band.
DECISION_TABLE: dict[Band, tuple[HeaterCommand, WindowCommand]] = {
    Band.BELOW: (HeaterCommand.ON, WindowCommand.CLOSE),
    Band.COMFORTABLE: (HeaterCommand.OFF, WindowCommand.CLOSE),
    Band.ABOVE: (HeaterCommand.OFF, WindowCommand.OPEN),
}


class Decision(BaseModel):
    """Outcome of one regulation cycle."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(description="Temperature observed this cycle")
    band: Band = Field(description="Band the temperature fell into")
    heater: HeaterCommand = Field(description="Command sent to the heater")
    window: WindowCommand = Field(description="Command sent to the window")


class ThresholdController(Controller):
    """Keeps a temperature between a lower and an upper threshold.

    Each ``regulate()`` call reads the sensor once and sends exactly
    one command to the heater and one to the window:

    - below the lower threshold: heater on, window closed
    - between the thresholds, bounds included: heater off, window closed
    - above the upper threshold: heater off, window open

    Commands are sent every cycle whether or not the actuator is
    already in the commanded state. The heater is commanded first.

    The three collaborators are bound at construction and cannot be
    reassigned. Thresholds are held as one immutable ``Thresholds``
    pair in the ``thresholds`` field, so they serialize with
    ``model_dump()``. Every mutation is validated against
    ``lower <= upper``; a rejected mutation raises ``InvalidThreshold``
    and leaves the pair untouched.

    A reentrant lock serializes regulation cycles and threshold
    mutations, so a cycle never sees a half-applied change. Each
    instance, copies included, has its own lock.

    Example:
        controller = ThresholdController(
            sensor, heater, window, lower_threshold=25, upper_threshold=28
        )
        decision = controller.regulate()
    """

    model_config = ConfigDict(validate_assignment=True)

    sensor: InstanceOf[TemperatureSensor] = Field(
        frozen=True, description="Source of the ambient temperature"
    )
    heater: InstanceOf[Heater] = Field(
        frozen=True, description="Heater driven by this controller"
    )
    window: InstanceOf[Window] = Field(
        frozen=True, description="Window driven by this controller"
    )
    thresholds: Thresholds = Field(
        description="Comfortable band the temperature is held in"
    )

    _lock: Any = PrivateAttr(default_factory=threading.RLock)
    _temperature: float | None = PrivateAttr(default=None)
    _decision: Decision | None = PrivateAttr(default=None)

    def __init__(
        self,
        sensor: TemperatureSensor,
        heater: Heater,
        window: Window,
        lower_threshold: float,
        upper_threshold: float,
        **data: Any,
    ) -> None:
        """Bind collaborators and set the initial thresholds.

        Raises:
            InvalidThreshold: If lower_threshold > upper_threshold.
        """
        data.setdefault("name", "controller")
        super().__init__(
            sensor=sensor,
            heater=heater,
            window=window,
            thresholds=Thresholds(
                lower=lower_threshold, upper=upper_threshold
            ),
            **data,
        )

    def __copy__(self) -> "ThresholdController":
        copied = super().__copy__()
        copied._lock = threading.RLock()
        return copied

    def __deepcopy__(
        self, memo: dict[int, Any] | None = None
    ) -> "ThresholdController":
        memo = {} if memo is None else memo
        # Locks cannot be deep-copied; hand the copy a fresh one
        memo[id(self._lock)] = threading.RLock()
        return super().__deepcopy__(memo)

    # Thresholds

    def get_lower_threshold(self) -> float:
        """Return the inclusive floor of the comfortable band."""
        return self.thresholds.lower

    def get_upper_threshold(self) -> float:
        """Return the inclusive ceiling of the comfortable band."""
        return self.thresholds.upper

    def set_lower_threshold(self, value: float) -> None:
        """Set the lower threshold.

        Raises:
            InvalidThreshold: If value exceeds the current upper
                threshold. The lower threshold is left unchanged.
        """
        self._replace_thresholds(lambda: self.thresholds.with_lower(value))

    def set_upper_threshold(self, value: float) -> None:
        """Set the upper threshold.

        Raises:
            InvalidThreshold: If value is below the current lower
                threshold. The upper threshold is left unchanged.
        """
        self._replace_thresholds(lambda: self.thresholds.with_upper(value))

    def set_thresholds(self, lower: float, upper: float) -> None:
        """Replace both thresholds at once.

        Only the final pair is validated, so the band can be moved
        past its current position in a single step.

        Raises:
            InvalidThreshold: If lower > upper. Both thresholds are
                left unchanged.
        """
        self._replace_thresholds(lambda: Thresholds(lower=lower, upper=upper))

    lower_threshold = property(get_lower_threshold, set_lower_threshold)
    upper_threshold = property(get_upper_threshold, set_upper_threshold)

    def _replace_thresholds(self, build: Callable[[], Thresholds]) -> None:
        with self._lock:
            try:
                updated = build()
            except InvalidThreshold as exc:
                self._logger.warning(
                    "Rejected thresholds %s..%s, keeping %r",
                    exc.lower,
                    exc.upper,
                    self.thresholds,
                )
                raise
            self._logger.info(
                "Thresholds changed from %r to %r", self.thresholds, updated
            )
            self.thresholds = updated

    # Regulation

    def regulate(self) -> Decision:
        """Run one decision cycle.

        Returns:
            The decision that was applied.

        Raises:
            SensorUnavailable: If the sensor gave no usable reading.
                No actuator was commanded.
            ActuatorCommandFailed: If an actuator command failed.
                Commands already delivered this cycle are not undone.
        """
        return self.execute()

    def execute(self) -> Decision:
        """Run one cycle while holding the threshold lock."""
        with self._lock:
            try:
                return super().execute()
            finally:
                self._temperature = None
                self._decision = None

    def _import_state(self) -> None:
        """Read the sensor once for this cycle."""
        try:
            reading = self.sensor.get_temperature()
        except SensorUnavailable:
            self._logger.warning("Sensor %s unavailable", self.sensor.name)
            raise
        except Exception as exc:  # noqa: BLE001
            self._logger.warning(
                "Sensor %s failed: %s", self.sensor.name, exc
            )
            raise SensorUnavailable(self.sensor.name, str(exc)) from exc

        self._temperature = self._to_temperature(reading)

    def _to_temperature(self, reading: Any) -> float:
        unusable = SensorUnavailable(
            self.sensor.name, f"unusable reading {reading!r}"
        )
        if isinstance(reading, (bool, str, bytes)):
            raise unusable
        try:
            temperature = float(reading)
        except (TypeError, ValueError, OverflowError) as exc:
            raise unusable from exc
        if math.isnan(temperature):
            raise unusable
        return temperature

    def _think(self) -> None:
        """Look up the commands for the observed temperature."""
        temperature = self._temperature
        band = self.thresholds.classify(temperature)
        heater, window = DECISION_TABLE[band]
        self._decision = Decision(
            temperature=temperature, band=band, heater=heater, window=window
        )
        self._logger.debug(
            "T=%s is %s %r: heater %s, window %s",
            temperature,
            band.value,
            self.thresholds,
            heater.value,
            window.value,
        )

    def _export_state(self) -> Decision:
        """Send the decided commands to heater and window."""
        decision = self._decision
        if decision.heater is HeaterCommand.ON:
            self._deliver(self.heater, self.heater.turn_on)
        else:
            self._deliver(self.heater, self.heater.turn_off)

        if decision.window is WindowCommand.OPEN:
            self._deliver(self.window, self.window.open)
        else:
            self._deliver(self.window, self.window.close)
        return decision

    def _deliver(self, actuator: Actuator, command: Callable[[], Any]) -> None:
        try:
            command()
        except ActuatorCommandFailed:
            self._logger.warning("Command to %s failed", actuator.name)
            raise
        except Exception as exc:  # noqa: BLE001
            self._logger.warning(
                "Command to %s failed: %s", actuator.name, exc
            )
            raise ActuatorCommandFailed(actuator.name, str(exc)) from exc
