from __future__ import annotations

from typing import Type

from weathersensor.services.sensors.base import Model, Sensor

# Registry mapping (api, model) pairs to sensor classes
_model_registry: dict[tuple[str, str], Type[Sensor]] = {}


def register_model(api: str, model: Model):
    """Decorator to register a sensor class as the implementation of a model."""

    def decorator(cls: Type[Sensor]):
        key = (api, str(model))
        if key in _model_registry:
            raise ValueError(f"model {model} already registered for {api}")
        _model_registry[key] = cls
        cls.model = model
        return cls

    return decorator


def get_registration(api: str, model: str | Model) -> Type[Sensor] | None:
    """Get the sensor class registered for an api/model pair."""
    return _model_registry.get((api, str(model)))


def list_registrations() -> list[dict]:
    """List all registered models."""
    return [{"api": api, "model": model} for api, model in _model_registry]
