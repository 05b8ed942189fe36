import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from opentelemetry.trace import Tracer

from cep_relay.api.dependencies import (
    get_location_service,
    get_temperature_service,
    get_tracer,
)
from cep_relay.models.cep.cep_request import CepRequest
from cep_relay.models.weather.weather import WeatherReport
from cep_relay.services.location_service import LocationService
from cep_relay.services.temperature_service import TemperatureService
from cep_relay.utils.tracing import extract_trace_context

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Weather"])


@router.post("/weather", summary="Get Current Weather by Postal Code")
async def get_weather(
    request: Request,
    location_service: LocationService = Depends(get_location_service),
    temperature_service: TemperatureService = Depends(get_temperature_service),
    tracer: Tracer = Depends(get_tracer),
):
    """
    Resolve a postal code to its city and report the current temperature.

    Body: ``{"cep": "<8 digits>"}``.

    Returns:
        ``{"city", "temp_C", "temp_F", "temp_K"}``

    Raises:
        MalformedInputError / InvalidPostalCodeError: 422
        LocationServiceError: 404 "can not find zipcode"
        WeatherServiceError: 500 "error fetching temperature"
    """
    parent_context = extract_trace_context(dict(request.headers))

    with tracer.start_as_current_span("get_weather", context=parent_context):
        cep_request = CepRequest.from_body(await request.body())

        location = await location_service.resolve_location(cep_request.cep)
        temp_c = await temperature_service.resolve_temperature(location)
        report = WeatherReport(city=location, temp_c=temp_c)

        logger.info(
            "Successfully retrieved current weather",
            cep=cep_request.cep,
            city=report.city,
            temp_c=report.temp_c,
        )
        return JSONResponse(status_code=status.HTTP_200_OK, content=report.to_response())
