import logging
import sys

import structlog


class CustomFormatter(logging.Formatter):
    """Formatter for stdlib records (uvicorn): [yyyy-mm-dd hh:mm:ss] [log_type] [logger_name]: {message}"""

    def format(self, record):
        logger_name = record.name.split('.')[-1] if '.' in record.name else record.name
        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        formatted_message = f"[{timestamp}] [{record.levelname}] [{logger_name}]: {record.getMessage()}"

        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def setup_logging(log_level: str = "INFO", log_format: str = "json"):
    """
    Configure logging for a service process.

    structlog loggers render either JSON lines or colored console output;
    stdlib loggers (uvicorn, httpx) go through CustomFormatter at the same level.

    Args:
        log_level: Logging level name
        log_format: ``json`` or ``text``
    """
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(CustomFormatter())
    root_logger.addHandler(console_handler)

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(__name__).info(
        "Logging configured", log_level=log_level.upper(), log_format=log_format
    )
