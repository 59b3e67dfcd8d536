from typing import Optional

from gateway.domain.models.base import DomainRecord


class WeatherLocation(DomainRecord):
    name: str
    country: str
    region: str


class WeatherCondition(DomainRecord):
    text: str
    icon: str


class WeatherCurrent(DomainRecord):
    temp_c: float
    temp_f: float
    condition: WeatherCondition
    humidity: Optional[float] = None
    wind_kph: Optional[float] = None
    feelslike_c: Optional[float] = None


class WeatherData(DomainRecord):
    """Current conditions for a single location."""

    location: WeatherLocation
    current: WeatherCurrent
