from __future__ import annotations

from pydantic import BaseModel, Field


class WeatherCondition(BaseModel):
    text: str = Field(..., description="Human-friendly condition.")
    code: int = Field(..., description="WeatherAPI condition code.")


class WeatherCurrent(BaseModel):
    temp_f: float = Field(..., description="Air temperature (F).")
    condition: WeatherCondition
    cloud: float = Field(..., description="Cloud cover (%).")
    precip_in: float = Field(..., description="Precipitation (inches).")


class CurrentWeatherResponse(BaseModel):
    current: WeatherCurrent


class Astro(BaseModel):
    is_sun_up: int = Field(..., description="1 while the sun is above the horizon, else 0.")


class Astronomy(BaseModel):
    astro: Astro


class AstronomyResponse(BaseModel):
    astronomy: Astronomy
