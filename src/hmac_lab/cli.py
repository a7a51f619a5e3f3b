from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable, Iterator

from hmac_lab import __version__
from hmac_lab.logging_utils import log_exception, log_json, new_run_id, setup_logging
from hmac_lab.schemas import BatchSummary, MacResult
from hmac_lab.settings import settings
from hmac_lab.signing import (
    MacComputationError,
    TagFormatError,
    decode_tag,
    encode_tag,
    sign,
    to_bytes,
    verify,
)
from hmac_lab.timing import track

logger = logging.getLogger("hmac_lab")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hmac-lab",
        description="Compute and verify HMAC-SHA256 tags for each MESSAGE under KEY.",
    )
    parser.add_argument("--version", action="version", version=f"hmac-lab {__version__}")
    parser.add_argument("key", help="Shared key, hashed as the raw argument bytes")
    parser.add_argument("messages", nargs="*", metavar="MESSAGE", help="Input strings to authenticate")
    parser.add_argument(
        "--json",
        action=argparse.BooleanOptionalAction,
        default=settings.output_format == "json",
        help="Emit one JSON object per input instead of text lines (--no-json forces text)",
    )
    parser.add_argument(
        "--expect",
        type=str,
        metavar="BASE64",
        help="Verify every input against this tag instead of its own freshly computed tag",
    )
    parser.add_argument("--no-timing", action="store_true", help="Do not print the batch duration")
    parser.add_argument("--log-level", type=str, default=settings.log_level, help="Logging level")

    return parser


def printable(text: str) -> str:
    """Render undecodable argument bytes as backslash escapes so output never fails."""
    return to_bytes(text).decode("utf-8", "backslashreplace")


def iter_batch(key: str, messages: Iterable[str], expect: bytes | None = None) -> Iterator[MacResult]:
    """Authenticate each message in order, yielding as soon as it is done."""
    for message in messages:
        tag = sign(key, message)
        verified = verify(key, message, tag if expect is None else expect)
        yield MacResult(input=printable(message), tag=encode_tag(tag), verified=verified)

def run_batch(key: str, messages: Iterable[str], expect: bytes | None = None) -> list[MacResult]:
    return list(iter_batch(key, messages, expect))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    run_id = new_run_id()
    setup_logging(args.log_level, run_id)

    expect = None
    if args.expect is not None:
        try:
            expect = decode_tag(args.expect)
        except TagFormatError as e:
            parser.error(str(e))

    emit = print if settings.timing and not args.no_timing else logger.debug
    results: list[MacResult] = []

    log_json(logger, logging.DEBUG, "batch_started", count=len(args.messages))
    try:
        with track("Hashing", emit=emit) as elapsed:
            for result in iter_batch(args.key, args.messages, expect):
                print(result.model_dump_json() if args.json else result.to_line())
                results.append(result)
    except MacComputationError as e:
        log_exception(logger, e, "batch_failed", processed=len(results))
        return 1

    summary = BatchSummary(
        count=len(results),
        elapsed_ms=elapsed.ms,
        all_verified=all(r.verified for r in results),
    )
    log_json(logger, logging.INFO, "batch_completed", **summary.model_dump())
    return 0
