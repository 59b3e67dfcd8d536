"""
Domain models package for the gateway.

Records are immutable and carry no identity beyond their content: they are
assembled field-by-field from a provider payload, wrapped in an Envelope and
serialized once.
"""

from gateway.domain.models.character import Character
from gateway.domain.models.crypto import CryptoPrice
from gateway.domain.models.envelope import Envelope, ErrorKind
from gateway.domain.models.quote import Quote
from gateway.domain.models.user import Address, Company, Geo, Post, User
from gateway.domain.models.weather import WeatherCondition, WeatherCurrent, WeatherData, WeatherLocation

__all__ = [
    "Address",
    "Character",
    "Company",
    "CryptoPrice",
    "Envelope",
    "ErrorKind",
    "Geo",
    "Post",
    "Quote",
    "User",
    "WeatherCondition",
    "WeatherCurrent",
    "WeatherData",
    "WeatherLocation",
]
