import json
from uuid import UUID

import pytest
from pydantic import ValidationError

from ecs.base.entity import Entity


@pytest.mark.unit
class TestEntity:
    """Test cases for the Entity base class."""

    def test_entity_creation_with_defaults(self):
        """Test entity creation with default UUID generation."""
        entity = Entity(name="living_room")

        assert entity.name == "living_room"
        assert isinstance(entity.uuid, UUID)

    def test_entity_creation_with_provided_uuid(self, sample_uuid):
        entity = Entity(uuid=sample_uuid, name="living_room")

        assert entity.uuid == sample_uuid

    def test_entity_name_validation(self):
        """Test that an empty name is refused."""
        with pytest.raises(ValidationError):
            Entity(name="")

    def test_entity_is_immutable(self, sample_uuid):
        entity = Entity(uuid=sample_uuid, name="living_room")

        with pytest.raises(ValidationError):
            entity.name = "kitchen"

        assert entity.name == "living_room"

    def test_entity_json_roundtrip(self, sample_uuid):
        """Test entity survives JSON serialization."""
        entity = Entity(uuid=sample_uuid, name="living_room", floor=2)

        parsed = json.loads(entity.model_dump_json())
        assert parsed == {
            "uuid": str(sample_uuid),
            "name": "living_room",
            "floor": 2,
        }
        assert Entity.model_validate_json(entity.model_dump_json()) == entity

    def test_entity_representation(self):
        assert repr(Entity(name="living_room")) == "Entity(name='living_room')"

