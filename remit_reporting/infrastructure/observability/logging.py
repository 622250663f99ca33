"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from remit_reporting.config import settings


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


def log_report_generated(
    request_id: str,
    owner: str,
    report_type: str,
    duration_ms: float,
    **fields: Any,
) -> None:
    """Log structured report outcome for audit"""
    logging.info(
        "Report generated",
        extra={
            "request_id": request_id,
            "owner": owner,
            "step": "report_generated",
            "report_type": report_type,
            "duration_ms": duration_ms,
            **fields,
        },
    )


def log_event(request_id: str, event: str, payload: Dict[str, Any]) -> None:
    """Mirror an outbox event into the log stream"""
    logging.info(
        "Reporting event",
        extra={"request_id": request_id, "event": event, "payload": payload},
    )
