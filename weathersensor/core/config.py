from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


WEATHERAPI_BASE_URL = "https://api.weatherapi.com/v1"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHERSENSOR_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)
    user_agent: str = Field(default="weathersensor/0.1")

    # api ref: https://app.swaggerhub.com/apis-docs/WeatherAPI.com/WeatherAPI/1.0.2
    current_weather_url: str = Field(default=f"{WEATHERAPI_BASE_URL}/current.json")
    astronomy_url: str = Field(default=f"{WEATHERAPI_BASE_URL}/astronomy.json")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
