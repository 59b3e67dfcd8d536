from typing import Any, Dict, Optional

import httpx

from gateway.adapters.interfaces.provider import ProviderAdapter
from gateway.core.config import Settings
from gateway.core.exceptions import ConfigurationError, GatewayError, NotFoundError
from gateway.domain.models.envelope import Envelope
from gateway.domain.models.weather import WeatherCondition, WeatherCurrent, WeatherData, WeatherLocation

# weatherapi.com error code for "No matching location found."
LOCATION_NOT_FOUND_CODE = 1006


class WeatherAdapter(ProviderAdapter):
    """Current conditions from weatherapi.com. Requires WEATHER_API_KEY."""

    key = "weather"
    name = "Weather"
    operations = ("get_weather",)

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient,
        api_key: Optional[str] = None,
        timeout: float = 5.0,
    ):
        super().__init__(base_url, http_client, timeout)
        self.api_key = api_key

    @classmethod
    def from_settings(cls, settings: Settings, http_client: httpx.AsyncClient) -> "WeatherAdapter":
        return cls(
            settings.WEATHER_BASE_URL,
            http_client,
            api_key=settings.WEATHER_API_KEY,
            timeout=settings.DEFAULT_TIMEOUT,
        )

    def check_configuration(self) -> None:
        if not self.api_key:
            raise ConfigurationError(
                "Weather API key not configured. Please set WEATHER_API_KEY environment variable.",
                setting="WEATHER_API_KEY",
            )

    async def get_weather(self, city: str) -> Envelope:
        """Current weather for ``city``."""
        return await self.execute(self._fetch_weather, city)

    async def _fetch_weather(self, city: str) -> WeatherData:
        payload = await self.get_json(
            "current.json",
            params={"key": self.api_key, "q": city, "aqi": "no"},
        )
        return self.normalize(payload)

    def classify_error_response(self, response: httpx.Response) -> GatewayError:
        error = self.error_payload(response).get("error")
        if isinstance(error, dict) and error.get("code") == LOCATION_NOT_FOUND_CODE:
            city = response.request.url.params.get("q", "")
            return NotFoundError("Location", city, detail=f"Location '{city}' not found")
        return super().classify_error_response(response)

    @staticmethod
    def normalize(payload: Dict[str, Any]) -> WeatherData:
        location = payload["location"]
        current = payload["current"]
        condition = current["condition"]
        return WeatherData(
            location=WeatherLocation(
                name=location["name"],
                country=location["country"],
                region=location["region"],
            ),
            current=WeatherCurrent(
                temp_c=current["temp_c"],
                temp_f=current["temp_f"],
                condition=WeatherCondition(text=condition["text"], icon=condition["icon"]),
                humidity=current.get("humidity"),
                wind_kph=current.get("wind_kph"),
                feelslike_c=current.get("feelslike_c"),
            ),
        )
