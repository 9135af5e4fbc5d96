"""Structured JSON logging for ingestion runs"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "tier-statements", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "tier-statements") -> None:
    """Configure structured JSON logging on stderr"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # stdout is reserved for report output
    handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_rejected_record(line_number: int, kind: str, reason: str) -> None:
    """Log one rejected input line"""
    logging.warning(
        "Record rejected",
        extra={
            "step": "parse_record",
            "line_number": line_number,
            "failure_kind": kind,
            "reason": reason,
        },
    )


def log_ingestion_summary(valid_count: int, invalid_count: int, duration_ms: float) -> None:
    """Log structured ingestion outcome for analysis"""
    logging.info(
        "Ingestion completed",
        extra={
            "step": "ingest_complete",
            "valid_count": valid_count,
            "invalid_count": invalid_count,
            "duration_ms": duration_ms,
        },
    )
