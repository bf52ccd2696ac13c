"""
Dual-mode logging for the visionfi CLI.

Provides human-readable console logs by default and JSON structured logs
when VISIONFI_LOG_FORMAT=json, both written to stderr so they never mix
with command output.
"""

import logging
import os
import sys

from pythonjsonlogger import jsonlogger

ROOT_LOGGER = "visionfi_cli"


def setup_logger(verbose: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    Parameters
    ----------
    verbose : bool, optional
        Force DEBUG level regardless of VISIONFI_LOG_LEVEL, by default False.

    Returns
    -------
    logging.Logger
        Configured ``visionfi_cli`` logger. Module loggers created with
        ``logging.getLogger(__name__)`` propagate to it.

    Environment Variables
    ---------------------
    VISIONFI_LOG_FORMAT : str
        "console" (default) or "json"
    VISIONFI_LOG_LEVEL : str
        Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: WARNING)
    """
    logger = logging.getLogger(ROOT_LOGGER)

    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv("VISIONFI_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates if called multiple times
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if os.getenv("VISIONFI_LOG_FORMAT", "console").lower() == "json":
        formatter = _create_json_formatter()
    else:
        formatter = _create_console_formatter()

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def _create_json_formatter() -> logging.Formatter:
    """Create JSON formatter with a ``severity`` field instead of ``levelname``."""

    class JsonFormatter(jsonlogger.JsonFormatter):
        def add_fields(self, log_record, record, message_dict):
            super().add_fields(log_record, record, message_dict)
            if "levelname" in log_record:
                log_record["severity"] = log_record.pop("levelname")

    return JsonFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


def _create_console_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
