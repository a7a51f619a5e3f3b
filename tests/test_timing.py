from __future__ import annotations

import pytest

from hmac_lab.timing import format_duration, track


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "0s"),
        (850e-9, "850ns"),
        (12.5e-6, "12.5µs"),
        (3.2e-3, "3.2ms"),
        (1.05, "1.05s"),
        (1.234567891, "1.234567891s"),
        (60, "1m0s"),
        (90, "1m30s"),
        (3600, "1h0m0s"),
        (3661.5, "1h1m1.5s"),
        (1e-3, "1ms"),
        (-0.002, "-2ms"),
    ],
)
def test_format_duration(seconds: float, expected: str) -> None:
    assert format_duration(seconds) == expected


def test_track_emits_once_on_success() -> None:
    emitted: list[str] = []
    with track("Hashing", emit=emitted.append) as elapsed:
        pass

    assert len(emitted) == 1
    assert emitted[0].startswith("Hashing took ")
    assert elapsed.seconds >= 0
    assert elapsed.ms >= 0


def test_track_emits_on_error() -> None:
    emitted: list[str] = []
    with pytest.raises(RuntimeError):
        with track("Hashing", emit=emitted.append):
            raise RuntimeError("boom")

    assert len(emitted) == 1
    assert emitted[0].startswith("Hashing took ")
