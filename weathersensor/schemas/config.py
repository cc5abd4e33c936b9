from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from weathersensor.core.errors import ValidationError


class WeatherSensorConfig(BaseModel):
    """Attributes of a weather sensor component, as written in the robot config."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    temperature_sensor: str = Field(default="", alias="temp-sensor")
    zipcode: int = Field(default=0)
    api_key: str = Field(default="", alias="apikey")

    def validate_config(self, path: str = "") -> list[str]:
        """Check required attributes and return the implicit dependencies.

        ``path`` is the location of the component in the robot config
        (e.g. ``"components.0"``), reported back on failure.
        """
        if not self.temperature_sensor:
            raise ValidationError('expected "temp-sensor" attribute for weather module', path=path)
        if not self.api_key:
            raise ValidationError('expected "apikey" attribute for weather module', path=path)
        if self.zipcode == 0:
            raise ValidationError('expected "zipcode" attribute for weather module', path=path)
        return [self.temperature_sensor]


def parse_config(attributes: Mapping[str, Any] | None, path: str = "") -> WeatherSensorConfig:
    try:
        return WeatherSensorConfig.model_validate(dict(attributes or {}))
    except PydanticValidationError as exc:
        raise ValidationError(f"invalid weather module attributes: {exc}", path=path) from exc


def validate_attributes(attributes: Mapping[str, Any] | None, path: str = "") -> list[str]:
    return parse_config(attributes, path).validate_config(path)
