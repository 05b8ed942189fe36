from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


def celsius_to_fahrenheit(temp_c: float) -> float:
    return temp_c * 1.8 + 32


def celsius_to_kelvin(temp_c: float) -> float:
    return temp_c + 273.15


class WeatherApiLocation(BaseModel):
    """Location block of a WeatherAPI.com response."""

    name: Optional[str] = Field(None, description="Resolved location name")
    region: Optional[str] = Field(None, description="Region or state")
    country: Optional[str] = Field(None, description="Country name")


class CurrentConditions(BaseModel):
    """Current block of a WeatherAPI.com response."""

    temp_c: float = Field(..., description="Current temperature in Celsius")
    temp_f: Optional[float] = Field(None, description="Current temperature in Fahrenheit")


class WeatherApiResponse(BaseModel):
    """WeatherAPI.com ``current.json`` response, reduced to the fields used here."""

    location: Optional[WeatherApiLocation] = Field(None, description="Location details")
    current: CurrentConditions = Field(..., description="Current conditions")


class WeatherReport(BaseModel):
    """
    Temperature report returned by the relay service and re-encoded by the front service.

    Fahrenheit and Kelvin are always derived from ``temp_C``. When a report is
    decoded from JSON, incoming ``temp_F``/``temp_K`` values are ignored and
    recomputed.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    city: str = Field(..., description="City name")
    temp_c: float = Field(..., alias="temp_C", description="Temperature in Celsius")

    @computed_field(alias="temp_F")
    @property
    def temp_f(self) -> float:
        return celsius_to_fahrenheit(self.temp_c)

    @computed_field(alias="temp_K")
    @property
    def temp_k(self) -> float:
        return celsius_to_kelvin(self.temp_c)

    def to_response(self) -> dict:
        """Serialize with the public field names (``temp_C``, ``temp_F``, ``temp_K``)."""
        return self.model_dump(by_alias=True)
