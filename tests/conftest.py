from __future__ import annotations

from typing import Any, Mapping

import pytest

from weathersensor.core.config import Settings
from weathersensor.services.sensors.base import ComponentConfig, Sensor


class FakeTemperatureSensor(Sensor):
    def __init__(self, name: str = "inside-temp", readings: dict[str, Any] | None = None, error: Exception | None = None):
        super().__init__(name)
        self.readings = readings if readings is not None else {"degrees_celsius": 21.0}
        self.error = error
        self.calls = 0

    async def get_readings(self, extra: Mapping[str, Any] | None = None) -> dict[str, Any]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return dict(self.readings)


@pytest.fixture
def temp_sensor() -> FakeTemperatureSensor:
    return FakeTemperatureSensor()


@pytest.fixture
def make_temp_sensor():
    return FakeTemperatureSensor


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def attributes() -> dict[str, Any]:
    return {"temp-sensor": "inside-temp", "zipcode": 94103, "apikey": "secret"}


@pytest.fixture
def component_config(attributes) -> ComponentConfig:
    return ComponentConfig(
        name="weather",
        model="vijayvuyyuru:weathersensor:weathersensor",
        attributes=attributes,
    )


@pytest.fixture
def current_body() -> dict[str, Any]:
    return {
        "location": {"name": "San Francisco", "region": "California"},
        "current": {
            "temp_f": 61.2,
            "temp_c": 16.2,
            "is_day": 1,
            "condition": {"text": "Partly cloudy", "code": 1003},
            "cloud": 50,
            "precip_in": 0.02,
        },
    }


@pytest.fixture
def astronomy_body() -> dict[str, Any]:
    return {
        "location": {"name": "San Francisco"},
        "astronomy": {"astro": {"sunrise": "07:19 AM", "sunset": "06:29 PM", "is_sun_up": 1}},
    }
