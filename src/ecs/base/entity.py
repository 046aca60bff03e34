"""Base entity class for named, identifiable objects."""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """Base class for every identifiable object in ecs.

    Controllers, sensors and actuators are all entities: each has a
    UUID and a human-readable name, and serializes with pydantic's
    ``model_dump()``.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    uuid: UUID = Field(
        default_factory=uuid4,
        description="Unique identifier for this entity",
    )
    name: str = Field(
        min_length=1, description="Human-readable name for this entity"
    )

    def __repr__(self) -> str:
        """Return class name and entity name."""
        return f"{self.__class__.__name__}(name='{self.name}')"
