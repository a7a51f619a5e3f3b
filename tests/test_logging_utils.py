from __future__ import annotations

import json
import logging

import pytest

from hmac_lab.logging_utils import RunIdFilter, log_exception, log_json, new_run_id


def test_log_json_is_compact(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("hmac_lab.test")
    with caplog.at_level(logging.INFO, logger="hmac_lab.test"):
        log_json(logger, logging.INFO, "batch_completed", count=2, all_verified=True)

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload == {"event": "batch_completed", "count": 2, "all_verified": True}


def test_log_exception_carries_type_and_message(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("hmac_lab.test")
    try:
        raise ValueError("bad input")
    except ValueError as e:
        log_exception(logger, e, "batch_failed", processed=0)

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    payload = json.loads(record.getMessage())
    assert payload["event"] == "batch_failed"
    assert payload["exception_type"] == "ValueError"
    assert payload["exception_message"] == "bad input"
    assert "Traceback" in payload["exception_traceback"]
    assert payload["processed"] == 0


def test_run_id_filter_keeps_existing_value() -> None:
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    assert RunIdFilter("abc").filter(record) is True
    assert record.run_id == "abc"

    RunIdFilter("other").filter(record)
    assert record.run_id == "abc"


def test_new_run_id_is_short_hex() -> None:
    run_id = new_run_id()
    assert len(run_id) == 8
    int(run_id, 16)
