from __future__ import annotations

import logging
from datetime import date
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from weathersensor.core.config import Settings, get_settings
from weathersensor.core.errors import APIError, DecodeError, TransportError, UnexpectedStatusError
from weathersensor.schemas.weather import AstronomyResponse, CurrentWeatherResponse


logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class WeatherAPIClient:
    """Fetches current conditions and astronomy for one location from WeatherAPI.com."""

    def __init__(
        self,
        *,
        api_key: str,
        zipcode: int,
        http_client: httpx.AsyncClient,
        settings: Settings | None = None,
    ) -> None:
        self.api_key = api_key
        self.zipcode = zipcode
        self.http_client = http_client
        self.settings = settings or get_settings()

    async def get_current_weather(self) -> CurrentWeatherResponse:
        params = {"q": self.zipcode, "key": self.api_key}
        data = await self.fetch_endpoint(self.settings.current_weather_url, params)
        return _parse(CurrentWeatherResponse, data)

    async def get_current_astronomy(self, day: date | None = None) -> AstronomyResponse:
        day = day or date.today()
        params = {"q": self.zipcode, "dt": day.isoformat(), "key": self.api_key}
        data = await self.fetch_endpoint(self.settings.astronomy_url, params)
        return _parse(AstronomyResponse, data)

    async def fetch_endpoint(self, url: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        try:
            resp = await self.http_client.get(
                url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.settings.http_timeout_seconds,
            )
        except httpx.DecodingError as exc:
            logger.error("Error decoding response content from %s: %s", url, exc)
            raise DecodeError(f"weather response from {url} could not be decoded: {exc}") from exc
        except httpx.RequestError as exc:
            logger.error("Error making request to %s: %s", url, exc)
            raise TransportError(f"weather request failed: {type(exc).__name__}: {exc}") from exc

        try:
            body = resp.json()
        except ValueError as exc:
            logger.error("Error decoding response body from %s: %s", url, exc)
            raise DecodeError(f"weather response from {url} is not valid JSON") from exc
        if not isinstance(body, dict):
            logger.error("Unexpected response body type from %s: %s", url, type(body).__name__)
            raise DecodeError(f"weather response from {url} is not a JSON object")

        if resp.status_code != 200:
            logger.error("Unexpected status code from %s: %d", url, resp.status_code)
            for field in ("code", "message"):
                if field not in body:
                    raise UnexpectedStatusError(
                        f"request failed with code {resp.status_code}, and no {field} in response body",
                        status_code=resp.status_code,
                    )
            raise APIError(
                status_code=resp.status_code,
                code=body["code"],
                message=body["message"],
                body=body,
            )
        return body


def _parse(model: type[ResponseT], data: dict[str, Any]) -> ResponseT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        logger.error("Unexpected %s shape: %s", model.__name__, exc)
        raise DecodeError(f"unexpected {model.__name__} shape: {exc}") from exc
