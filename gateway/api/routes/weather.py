from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gateway.adapters.implementations import WeatherAdapter
from gateway.api.dependencies import get_weather_adapter
from gateway.api.responses import envelope_response, error_response
from gateway.api.validation import require_text
from gateway.core.logging import get_logger

weather_router = APIRouter()
logger = get_logger(__name__)


@weather_router.get(
    "/{city}",
    summary="Current weather",
    description="Current conditions for a city, from weatherapi.com.",
)
async def get_weather(city: str, weather: WeatherAdapter = Depends(get_weather_adapter)) -> JSONResponse:
    city = require_text(city, "City parameter is required", field="city")
    try:
        envelope = await weather.get_weather(city)
    except Exception as e:
        logger.error(f"Weather route error: {str(e)}", exc_info=True)
        return error_response("Failed to fetch weather data")
    return envelope_response(envelope)
