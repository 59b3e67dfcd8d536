from functools import lru_cache
from typing import Annotated, Any, Optional
import os

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API settings
    PROJECT_NAME: str = "Learning Endpoints API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 9999

    # CORS settings
    BACKEND_CORS_ORIGINS: Annotated[list[str], NoDecode] = ["*"]

    # Logging settings
    LOG_LEVEL: str = "INFO"
    ENABLE_STRUCTURED_LOGGING: bool = True

    # Outbound call settings
    DEFAULT_TIMEOUT: float = 5.0  # seconds, per outbound call
    CRYPTO_MAX_SYMBOLS: int = 10

    # Provider credentials
    WEATHER_API_KEY: Optional[str] = None
    DRAGONBALL_API_KEY: Optional[str] = None

    # Provider endpoints
    WEATHER_BASE_URL: str = "http://api.weatherapi.com/v1"
    QUOTES_BASE_URL: str = "https://api.quotable.io"
    USERS_BASE_URL: str = "https://jsonplaceholder.typicode.com"
    CRYPTO_BASE_URL: str = "https://api.coinbase.com/v2"
    DRAGONBALL_BASE_URL: str = "https://dragonball-api.com/api/characters"

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Any) -> list[str]:
        """Parse CORS origins from string or list."""
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            return [i.strip().strip("\"'") for i in v.strip("[]").split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        raise ValueError(v)

    @field_validator("WEATHER_API_KEY", "DRAGONBALL_API_KEY", mode="before")
    @classmethod
    def blank_key_is_unset(cls, v: Any) -> Any:
        """Treat an empty or whitespace-only key as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


def load_env_file(env_file: str = ".env") -> None:
    """
    Load environment variables from specified .env file.

    Args:
        env_file: Path to the .env file. Defaults to ".env".
    """
    env_path = os.path.join(os.getcwd(), env_file)
    if os.path.exists(env_path):
        load_dotenv(env_path)


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings with caching for efficiency.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
