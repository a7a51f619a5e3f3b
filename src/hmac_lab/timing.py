from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

_SECOND = 10**9
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE


@dataclass
class Elapsed:
    seconds: float = 0.0

    @property
    def ms(self) -> float:
        return round(self.seconds * 1000, 3)


def format_duration(seconds: float) -> str:
    """Render a duration the way Go prints ``time.Duration``.

    Below one second the largest fitting unit is used (``850ns``, ``12.5µs``,
    ``3.2ms``); from one second up it is split into hours, minutes and
    seconds (``1.05s``, ``1m30s``, ``1h0m0s``) at full nanosecond precision.
    """
    ns = int(round(seconds * 1e9))
    if ns == 0:
        return "0s"
    if ns < 0:
        return "-" + format_duration(-seconds)
    if ns < 1_000:
        return f"{ns}ns"
    if ns < 1_000_000:
        return f"{_frac(ns, 3)}µs"
    if ns < _SECOND:
        return f"{_frac(ns, 6)}ms"

    hours, rest = divmod(ns, _HOUR)
    minutes, rest = divmod(rest, _MINUTE)
    secs = f"{_frac(rest, 9)}s"
    if hours:
        return f"{hours}h{minutes}m{secs}"
    if minutes:
        return f"{minutes}m{secs}"
    return secs

def _frac(value: int, digits: int) -> str:
    whole, frac = divmod(value, 10**digits)
    if frac == 0:
        return str(whole)
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


@contextmanager
def track(name: str, emit: Callable[[str], None] = print) -> Iterator[Elapsed]:
    """Time the enclosed block and emit ``"<name> took <duration>"`` however it exits."""
    elapsed = Elapsed()
    t0 = time.perf_counter()
    try:
        yield elapsed
    finally:
        elapsed.seconds = time.perf_counter() - t0
        emit(f"{name} took {format_duration(elapsed.seconds)}")
