"""Structured JSON logging"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from .config import settings
from .schemas import BuyVsRentResult


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter that stamps each record with time, level and service name"""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Send root logging to stderr, keeping stdout for command output"""
    logger = logging.getLogger()
    logger.setLevel(level.upper())
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        formatter: logging.Formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s"
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_comparison(result: BuyVsRentResult, duration_ms: float) -> None:
    """Log the comparison outcome as a single structured record"""
    recommendation = result.recommendation
    logging.getLogger("buy_vs_rent").info(
        "Comparison completed",
        extra={
            "step": "comparison_complete",
            "verdict": recommendation.verdict.value,
            "reason": recommendation.reason.value,
            "break_even_year": result.break_even_year,
            "buy_vs_rent_difference": result.buy_vs_rent_difference,
            "debt_to_income_ratio": result.debt_to_income_ratio,
            "price_to_rent_ratio": result.price_to_rent_ratio,
            "duration_ms": duration_ms,
        },
    )
