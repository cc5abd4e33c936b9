from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from weathersensor.core.config import Settings, get_settings
from weathersensor.core.errors import DependencyError
from weathersensor.core.http import create_http_client
from weathersensor.schemas.config import parse_config
from weathersensor.services.sensors.base import (
    SENSOR_API,
    ComponentConfig,
    Dependencies,
    Model,
    Sensor,
    sensor_from_dependencies,
)
from weathersensor.services.sensors.registry import register_model
from weathersensor.services.weather.weatherapi import WeatherAPIClient


logger = logging.getLogger(__name__)

WEATHERSENSOR_MODEL = Model("vijayvuyyuru", "weathersensor", "weathersensor")


def celsius_to_fahrenheit(degrees_celsius: float) -> float:
    return degrees_celsius * 9 / 5 + 32


@register_model(SENSOR_API, WEATHERSENSOR_MODEL)
class WeatherSensor(Sensor):
    """Outside weather from WeatherAPI.com merged with an inside temperature sensor."""

    def __init__(
        self,
        name: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        super().__init__(name)
        self.settings = settings or get_settings()
        self._owns_http_client = http_client is None
        self.http_client = http_client or create_http_client(self.settings)
        self.temperature_sensor: Sensor | None = None
        self.weather: WeatherAPIClient | None = None

    @classmethod
    def validate_config(cls, config: ComponentConfig, path: str = "") -> list[str]:
        """Return the implicit dependencies of ``config``."""
        return parse_config(config.attributes, path).validate_config(path)

    @classmethod
    async def new(
        cls,
        config: ComponentConfig,
        dependencies: Dependencies,
        *,
        http_client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ) -> "WeatherSensor":
        sensor = cls(config.name, http_client=http_client, settings=settings)
        try:
            await sensor.reconfigure(config, dependencies)
        except Exception:
            await sensor.close()
            raise
        return sensor

    async def reconfigure(self, config: ComponentConfig, dependencies: Dependencies) -> None:
        cfg = parse_config(config.attributes)
        cfg.validate_config()
        self.temperature_sensor = sensor_from_dependencies(dependencies, cfg.temperature_sensor)
        self.weather = WeatherAPIClient(
            api_key=cfg.api_key,
            zipcode=cfg.zipcode,
            http_client=self.http_client,
            settings=self.settings,
        )
        logger.info("Configured weather sensor %s for zipcode %d", self.name, cfg.zipcode)

    async def get_readings(self, extra: Mapping[str, Any] | None = None) -> dict[str, Any]:
        if self.weather is None or self.temperature_sensor is None:
            raise RuntimeError(f"weather sensor {self.name} is not configured")

        current = (await self.weather.get_current_weather()).current
        astro = (await self.weather.get_current_astronomy()).astronomy.astro

        try:
            readings = await self.temperature_sensor.get_readings()
        except Exception as exc:
            raise DependencyError(f"error getting reading from temp sensor: {exc}") from exc

        if not isinstance(readings, Mapping):
            raise DependencyError(
                f"temp sensor {self.temperature_sensor.name} returned {type(readings).__name__}, not a mapping"
            )
        inside_c = readings.get("degrees_celsius")
        if isinstance(inside_c, bool) or not isinstance(inside_c, (int, float)):
            raise DependencyError(
                f"temp sensor {self.temperature_sensor.name} returned no numeric degrees_celsius"
            )

        return {
            "outside_f": current.temp_f,
            "condition": current.condition.text,
            "code": current.condition.code,
            "cloud_cover_pct": current.cloud,
            "precipitation_inches": current.precip_in,
            "is_day": astro.is_sun_up,
            "inside_f": celsius_to_fahrenheit(inside_c),
        }

    async def close(self) -> None:
        if self._owns_http_client:
            await self.http_client.aclose()
