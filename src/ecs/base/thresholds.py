"""Threshold pair defining the comfortable temperature band."""

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from ecs.exceptions import InvalidThreshold


class Band(str, Enum):
    """Where a temperature lies relative to a threshold pair."""

    BELOW = "below"
    COMFORTABLE = "comfortable"
    ABOVE = "above"


class Thresholds(BaseModel):
    """An ordered pair of inclusive temperature thresholds.

    Thresholds are immutable. Changing one value produces a new,
    validated instance, so a holder can swap the whole pair in one
    assignment and readers never see a lower value from one pair with
    the upper value of another. A zero-width band (``lower == upper``)
    is valid.
    """

    model_config = ConfigDict(frozen=True)

    lower: float = Field(
        description="Inclusive floor of the comfortable band"
    )
    upper: float = Field(
        description="Inclusive ceiling of the comfortable band"
    )

    @field_validator("lower", "upper", mode="before")
    @classmethod
    def _refuse_bool(cls, value: Any) -> Any:
        # bool is an int subclass and would coerce to 0.0 or 1.0
        if isinstance(value, bool):
            raise ValueError("threshold must be a number, not a bool")
        return value

    @model_validator(mode="after")
    def _check_order(self) -> "Thresholds":
        # `not <=` so that NaN on either side is rejected too
        if not self.lower <= self.upper:
            raise InvalidThreshold(self.lower, self.upper)
        return self

    def with_lower(self, value: float) -> "Thresholds":
        """Return new Thresholds with the lower value replaced."""
        return Thresholds(lower=value, upper=self.upper)

    def with_upper(self, value: float) -> "Thresholds":
        """Return new Thresholds with the upper value replaced."""
        return Thresholds(lower=self.lower, upper=value)

    def classify(self, temperature: float) -> Band:
        """Place a temperature below, within or above the band."""
        if temperature < self.lower:
            return Band.BELOW
        if temperature > self.upper:
            return Band.ABOVE
        return Band.COMFORTABLE

    def contains(self, temperature: float) -> bool:
        """Check if a temperature is inside the band, bounds included."""
        return self.classify(temperature) is Band.COMFORTABLE

    def __repr__(self) -> str:
        return f"Thresholds({self.lower}..{self.upper})"
