"""Structured JSON logging for assessment audit trails"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from surety_gateway.config import settings
from surety_gateway.domain.models import AssessmentResult


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging on the root logger"""
    logger = logging.getLogger()
    logger.setLevel(level)

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)


def log_assessment(request_id: str, applicant: str, result: AssessmentResult, duration_ms: float) -> None:
    """Log the decision fields of one assessment for audit"""
    logging.info(
        "Assessment completed",
        extra={
            "request_id": request_id,
            "applicant": applicant,
            "step": "assessment_complete",
            "decision_band": result.decision_band.value,
            "final_score": round(result.final_score, 2),
            "collateral_status": result.collateral.status.value,
            "collateral_amount": result.collateral.amount,
            "policy_version": result.policy_version,
            "duration_ms": duration_ms,
        },
    )
