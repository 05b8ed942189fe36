from cep_relay.models.cep.cep_request import CepRequest
from cep_relay.models.location.location import ViaCepResponse
from cep_relay.models.weather.weather import WeatherApiResponse, WeatherReport

__all__ = ["CepRequest", "ViaCepResponse", "WeatherApiResponse", "WeatherReport"]
