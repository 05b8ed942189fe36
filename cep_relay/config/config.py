from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cep_relay.exceptions.weather.api_key_error import WeatherAPIKeyError


class ServiceSettings(BaseSettings):
    """
    Settings shared by both services, loaded from environment variables and .env files.
    """

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="Host the service binds to")
    http_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Timeout applied to every outbound HTTP call"
    )

    # Tracing Configuration
    zipkin_endpoint: Optional[str] = Field(
        default=None, description="Zipkin collector URL; spans are not exported when unset"
    )

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json/text)")

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class FrontSettings(ServiceSettings):
    """Settings for the front service (service A)."""

    service_b_url: str = Field(
        default="http://localhost:8082/weather",
        description="Address of the relay service weather endpoint",
    )
    api_port: int = Field(default=8081, ge=1, le=65535, description="FastAPI port")


class RelaySettings(ServiceSettings):
    """
    Settings for the relay service (service B).

    Holds the addresses of the location and weather collaborators and the
    WeatherAPI access key, which must come from the environment.
    """

    weather_api_key: str = Field(..., description="WeatherAPI.com access key")
    weather_api_base_url: str = Field(
        default="http://api.weatherapi.com/v1", description="WeatherAPI.com base URL"
    )
    viacep_base_url: str = Field(
        default="https://viacep.com.br/ws", description="ViaCEP base URL"
    )
    api_port: int = Field(default=8082, ge=1, le=65535, description="FastAPI port")

    @field_validator("weather_api_key")
    def validate_weather_api_key(cls, v):
        if not v or not v.strip():
            raise WeatherAPIKeyError("Weather API key is required")
        return v.strip()


@lru_cache
def get_front_settings() -> FrontSettings:
    return FrontSettings()


@lru_cache
def get_relay_settings() -> RelaySettings:
    return RelaySettings()
