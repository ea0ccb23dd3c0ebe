"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from payment_manager.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_operation(
    request_id: str,
    resource: str,
    operation: str,
    outcome: str,
    duration_ms: float,
    error: str | None = None,
) -> None:
    """Log structured record operation outcome"""
    fields = {
        "request_id": request_id,
        "resource": resource,
        "step": f"{resource}_{operation}",
        "operation": operation,
        "outcome": outcome,
        "duration_ms": duration_ms,
    }
    if error is None:
        logging.info("Record operation completed", extra=fields)
    elif outcome == "storage_error":
        logging.error(f"Record operation failed: {error}", extra=fields)
    else:
        logging.warning(f"Record operation rejected: {error}", extra=fields)
