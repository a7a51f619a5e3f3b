from __future__ import annotations

import json
import logging
import secrets
import traceback
from typing import Any


def log_exception(logger: logging.Logger, exc: Exception, event: str, **fields: Any) -> None:
    exc_type = type(exc).__name__
    exc_tb = traceback.format_exc()
    log_json(
        logger,
        logging.ERROR,
        event,
        exception_type=exc_type,
        exception_message=str(exc),
        exception_traceback=exc_tb,
        **fields
    )

def log_json(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:

    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))

def new_run_id() -> str:
    return secrets.token_hex(4)

class RunIdFilter(logging.Filter):
    """Logging filter to add the invocation's run ID to log records."""

    def __init__(self, run_id: str = "-") -> None:
        super().__init__()
        self.run_id = run_id

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "run_id"):
            record.run_id = self.run_id
        return True

def setup_logging(level: str = "WARNING", run_id: str = "-") -> None:
    """Set up logging configuration on stderr, tagging records with ``run_id``."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s run_id=%(run_id)s %(message)s",
    )
    for handler in logging.getLogger().handlers:
        for f in list(handler.filters):
            if isinstance(f, RunIdFilter):
                handler.removeFilter(f)
        handler.addFilter(RunIdFilter(run_id))
