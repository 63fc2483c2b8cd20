"""Logging configuration for JSON formatted logs."""

import logging
import sys
from pythonjsonlogger import jsonlogger


def setup_logging(log_level: str = "WARNING", stream=None):
    """Configure JSON logging for the secret tools.

    Logs go to stderr by default so stdout only carries tool output.
    """

    formatter = jsonlogger.JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
        },
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Clear existing handlers
    root_logger.handlers = []

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    return root_logger
