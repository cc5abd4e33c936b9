from __future__ import annotations

# Import to register models
from weathersensor.services.sensors import weathersensor  # noqa: F401
from weathersensor.services.sensors.base import (
    SENSOR_API,
    ComponentConfig,
    Model,
    Sensor,
    sensor_from_dependencies,
)
from weathersensor.services.sensors.registry import (
    get_registration,
    list_registrations,
    register_model,
)

__all__ = [
    "SENSOR_API",
    "ComponentConfig",
    "Model",
    "Sensor",
    "sensor_from_dependencies",
    "register_model",
    "get_registration",
    "list_registrations",
]
