import argparse
import sys

import structlog
import uvicorn

from cep_relay.config.config import get_front_settings, get_relay_settings
from cep_relay.front_app import create_front_app
from cep_relay.relay_app import create_relay_app
from cep_relay.utils.logging_config import setup_logging

logger = structlog.get_logger(__name__)


def serve(service: str):
    """Build the requested service from environment settings and run it with uvicorn."""
    if service == "front":
        settings = get_front_settings()
        setup_logging(settings.log_level, settings.log_format)
        app = create_front_app(settings)
    else:
        settings = get_relay_settings()
        setup_logging(settings.log_level, settings.log_format)
        app = create_relay_app(settings)

    logger.info(
        f"Starting {service} service in {settings.environment} environment",
        host=settings.api_host,
        port=settings.api_port,
    )

    try:
        uvicorn.run(
            app,
            host=settings.api_host,
            port=settings.api_port,
            log_level=settings.log_level.lower(),
            access_log=True,
            server_header=False,
            date_header=False,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(description="CEP weather relay services")
    parser.add_argument(
        "service",
        choices=["front", "relay"],
        help="front: postal code entry point (service A); relay: weather lookup (service B)",
    )
    args = parser.parse_args(argv)
    serve(args.service)


def run_front():
    serve("front")


def run_relay():
    serve("relay")


if __name__ == "__main__":
    main()
