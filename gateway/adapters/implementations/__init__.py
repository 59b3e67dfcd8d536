"""
Concrete provider adapters.

Each module wraps one third-party API and maps its payloads into the
gateway's domain records.
"""

from gateway.adapters.implementations.crypto import CryptoAdapter
from gateway.adapters.implementations.dragonball import DragonballAdapter
from gateway.adapters.implementations.quotes import QuotesAdapter
from gateway.adapters.implementations.users import UsersAdapter
from gateway.adapters.implementations.weather import WeatherAdapter

__all__ = [
    "CryptoAdapter",
    "DragonballAdapter",
    "QuotesAdapter",
    "UsersAdapter",
    "WeatherAdapter",
]
