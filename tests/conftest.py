from uuid import UUID

import pytest

from ecs import ThresholdController
from tests.unit.mocks import FakeHeater, FakeTemperatureSensor, FakeWindow


@pytest.fixture
def sample_uuid() -> UUID:
    """Provides a consistent UUID for testing."""
    return UUID("12345678-1234-5678-9abc-123456789abc")


@pytest.fixture
def fake_sensor() -> FakeTemperatureSensor:
    """Provides a sensor reporting a comfortable 26 degrees."""
    return FakeTemperatureSensor(name="fake_sensor", temperature=26.0)


@pytest.fixture
def fake_heater() -> FakeHeater:
    """Provides a heater counting its commands."""
    return FakeHeater(name="fake_heater")


@pytest.fixture
def fake_window() -> FakeWindow:
    """Provides a window counting its commands."""
    return FakeWindow(name="fake_window")


@pytest.fixture
def controller(
    fake_sensor: FakeTemperatureSensor,
    fake_heater: FakeHeater,
    fake_window: FakeWindow,
) -> ThresholdController:
    """Provides a controller with a 25..28 comfortable band."""
    return ThresholdController(
        fake_sensor,
        fake_heater,
        fake_window,
        lower_threshold=25,
        upper_threshold=28,
        name="test_controller",
    )


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "simulation: marks tests as simulation tests")
    config.addinivalue_line("markers", "slow: marks tests as slow running")
