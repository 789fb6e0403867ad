import logging
import os
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "travel-assistant-api"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")

_handler: logging.Handler | None = None


def setup_logging():
    """
    Configures structured JSON logging for the API process.

    Every module calls this at import time; the JSON handler is built on
    the first call and reused afterwards, so later calls do not drop
    handlers attached in between. Records carry timestamp, level, logger
    name, message, trace_id, span_id and a static `service` field. The
    level is read from LOG_LEVEL (default INFO).

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _handler

    root_logger = logging.getLogger()
    if _handler is not None:
        return root_logger

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
        static_fields={"service": SERVICE_NAME},
    )
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(formatter)

    root_logger.setLevel(level)
    root_logger.handlers = [_handler]

    for logger_name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level)
        server_logger.handlers = [_handler]
        server_logger.propagate = False

    return root_logger
