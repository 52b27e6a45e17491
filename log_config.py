"""
Structured logging.

JSON logs on stdout so the server output can be fed to a log aggregator.

Usage:
    from log_config import get_logger

    logger = get_logger(__name__)
    logger.info("Ticket created", extra={"ticket_id": "TKT-1700000000000"})
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any

from pythonjsonlogger.json import JsonFormatter

from config import ENVIRONMENT, LOG_LEVEL


class TicketJsonFormatter(JsonFormatter):
    """Adds an ISO ``timestamp`` and the deployment ``environment`` to every record."""

    def __init__(self, *args, environment: str = ENVIRONMENT, **kwargs):
        super().__init__(*args, **kwargs)
        self.environment = environment

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        if not log_record.get("timestamp"):
            log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["environment"] = self.environment


def setup_logging(level: str = LOG_LEVEL, environment: str = ENVIRONMENT) -> None:
    """
    Configure the root logger with a single JSON stdout handler.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        environment: Environment name stamped on every record
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        TicketJsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
            environment=environment,
        )
    )
    root_logger.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
