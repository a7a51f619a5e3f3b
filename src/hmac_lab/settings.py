from __future__ import annotations

import os
from dataclasses import dataclass

OUTPUT_FORMATS = ("text", "json")
_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _get_bool(name: str, default: bool) -> bool:
    v = (os.getenv(name) or "").strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return default

def _get_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    v = (os.getenv(name) or "").strip().lower()
    return v if v in choices else default

@dataclass(frozen=True)
class Settings:
    log_level: str = os.getenv("HMAC_LAB_LOG_LEVEL", "WARNING")
    output_format: str = _get_choice("HMAC_LAB_OUTPUT", "text", OUTPUT_FORMATS)
    timing: bool = _get_bool("HMAC_LAB_TIMING", True)

settings = Settings()
