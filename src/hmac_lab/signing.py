from __future__ import annotations

import base64
import binascii
import hashlib
import hmac

TAG_SIZE = 32
BLOCK_SIZE = 64


class MacError(Exception):
    """Base error for the MAC engine."""


class MacComputationError(MacError):
    """The keyed hash could not be constructed. Not recoverable."""


class TagFormatError(MacError, ValueError):
    """A supplied tag is not valid padded Base64."""


def compute(key: bytes, message: bytes) -> bytes:
    """Generate the HMAC-SHA256 tag of ``message`` under ``key``.

    Keys longer than the 64-byte block are hashed down first, as the
    standard construction requires; empty keys and messages are allowed.
    """
    try:
        mac = hmac.new(key, message, hashlib.sha256)
    except (TypeError, ValueError) as e:
        raise MacComputationError(f"cannot construct HMAC-SHA256: {e}") from e
    return mac.digest()


def compare(key: bytes, message: bytes, candidate: bytes) -> bool:
    """Recompute the tag for ``message`` and check ``candidate`` in constant time."""
    expected = compute(key, message)
    # length is public, only the body needs constant time
    if len(candidate) != len(expected):
        return False
    return hmac.compare_digest(expected, candidate)


def to_bytes(text: str) -> bytes:
    """Recover the original argument bytes, including ones that were not valid UTF-8."""
    return text.encode("utf-8", "surrogateescape")


def sign(key: str, message: str) -> bytes:
    return compute(to_bytes(key), to_bytes(message))


def verify(key: str, message: str, candidate: bytes) -> bool:
    return compare(to_bytes(key), to_bytes(message), candidate)


def encode_tag(tag: bytes) -> str:
    return base64.b64encode(tag).decode("ascii")


def decode_tag(text: str) -> bytes:
    """Decode a standard padded Base64 tag, rejecting anything malformed."""
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise TagFormatError(f"invalid Base64 tag: {text!r}") from e
