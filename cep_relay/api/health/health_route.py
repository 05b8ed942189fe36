from datetime import datetime, timezone

from fastapi import APIRouter, Request

from cep_relay import __version__

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="API Health Check")
async def get_health(request: Request):
    """Basic health check endpoint."""

    return {
        "message": f"{request.app.title} is running",
        "service": request.app.state.service_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
    }
