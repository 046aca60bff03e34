"""Control algorithms."""

from .threshold import (
    Decision,
    HeaterCommand,
    ThresholdController,
    WindowCommand,
)

__all__ = [
    "Decision",
    "HeaterCommand",
    "ThresholdController",
    "WindowCommand",
]
