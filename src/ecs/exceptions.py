"""Exception hierarchy for the environmental control system."""


class EcsError(Exception):
    """Base exception for ecs."""

    pass


class InvalidThreshold(EcsError):
    """Threshold pair would violate ``lower <= upper``.

    Recoverable: the rejected value is never stored, so the caller may
    retry with a corrected one.
    """

    def __init__(self, lower: float, upper: float) -> None:
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"lower threshold {lower} must not exceed upper threshold {upper}"
        )


class SensorUnavailable(EcsError):
    """Temperature sensor could not produce a reading."""

    def __init__(self, sensor: str, reason: str = "no reading") -> None:
        self.sensor = sensor
        self.reason = reason
        super().__init__(f"sensor '{sensor}' unavailable: {reason}")


class ActuatorCommandFailed(EcsError):
    """A command could not be delivered to an actuator."""

    def __init__(self, actuator: str, reason: str = "command failed") -> None:
        self.actuator = actuator
        self.reason = reason
        super().__init__(f"actuator '{actuator}': {reason}")
