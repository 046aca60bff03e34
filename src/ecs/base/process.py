"""Process classes for control cycle execution.

A Process runs one complete cycle per ``execute()`` call. It does not
schedule itself: whatever drives it (a polling loop, a timer, a test)
decides when the next cycle happens.
"""

import logging
from abc import ABC
from typing import Any

from pydantic import ConfigDict, Field, PrivateAttr

from ecs.base.entity import Entity


class Process(Entity, ABC):
    """Base class for computational units in ecs.

    ``execute()`` is a template method running three steps:
    ``_import_state()`` gathers inputs from the world,
    ``_think()`` computes on the gathered inputs, and
    ``_export_state()`` pushes the result back out and returns it.

    Exceptions raised by any step propagate unchanged to the caller of
    ``execute()``; a failed cycle is not counted.
    """

    model_config = ConfigDict(extra="allow", frozen=False)

    execution_count: int = Field(
        default=0,
        description="Number of successfully completed cycles",
    )

    _logger: logging.Logger = PrivateAttr(default=None)

    def model_post_init(self, context: Any) -> None:
        """Attach a per-instance logger.

        Runs after both construction and ``model_validate()``.
        """
        super().model_post_init(context)
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}."
            f"{self.__class__.__name__}."
            f"{self.name}"
        )

    def execute(self) -> Any:
        """Run one cycle and return what ``_export_state()`` produced."""
        self._import_state()
        self._think()
        result = self._export_state()
        self.update_execution_count()
        return result

    def _import_state(self) -> None:
        """Gather inputs for this cycle. Default does nothing."""

    def _think(self) -> None:
        """Core computation over the gathered inputs. Default does nothing."""

    def _export_state(self) -> Any:
        """Act on the computed result and return it.

        Default returns None.
        """
        return None

    def update_execution_count(self) -> None:
        """Count one successful cycle.

        Called by execute() only after every step succeeded.
        """
        self.execution_count += 1


class Controller(Process, ABC):
    """Abstract base class for control logic.

    A Controller reads sensors and commands actuators. It never writes
    to a sensor and holds no memory of what it commanded before: each
    cycle issues commands from scratch, so a restarted or glitched
    actuator is put back in the right state on the next cycle.

    Implementations usually read in ``_import_state()``, decide in
    ``_think()`` and command actuators in ``_export_state()``.
    """
