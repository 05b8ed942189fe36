import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from opentelemetry.trace import Tracer

from cep_relay.api.dependencies import get_relay_client, get_tracer
from cep_relay.models.cep.cep_request import CepRequest
from cep_relay.services.relay_client import RelayClient

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["CEP"])


@router.post("/cep", summary="Get Temperature by Postal Code")
async def handle_cep(
    request: Request,
    relay_client: RelayClient = Depends(get_relay_client),
    tracer: Tracer = Depends(get_tracer),
):
    """
    Validate a postal code and forward it to the relay service.

    Body: ``{"cep": "<8 digits>"}``.

    Returns:
        The relay's weather report re-encoded as
        ``{"city", "temp_C", "temp_F", "temp_K"}``.

    Raises:
        MalformedInputError: 422 if the body cannot be decoded
        InvalidPostalCodeError: 422 if the postal code is not 8 digits
        UpstreamStatusError: the relay's own status when it is not 200
        UpstreamUnreachableError / UpstreamDecodeError: 500
    """
    with tracer.start_as_current_span("handle_cep", attributes={"operation": "handle_cep"}):
        cep_request = CepRequest.from_body(await request.body())
        report = await relay_client.forward(cep_request)

        logger.info("Relayed weather report", cep=cep_request.cep, city=report.city)
        return JSONResponse(status_code=status.HTTP_200_OK, content=report.to_response())
