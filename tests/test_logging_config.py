"""Tests for structured logging setup"""

import json
import logging
import warnings

from buy_vs_rent.logging_config import CustomJsonFormatter


def test_json_formatter_adds_service_fields():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    record = logging.LogRecord(
        "buy_vs_rent", logging.INFO, __file__, 1, "Comparison completed", None, None
    )
    record.verdict = "rent"

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "Comparison completed"
    assert payload["level"] == "INFO"
    assert payload["service"] == "buy-vs-rent"
    assert payload["verdict"] == "rent"
    assert "timestamp" in payload
