"""HMAC-SHA256 tag computation and constant-time verification."""

from hmac_lab.signing import compare, compute

__all__ = ["compare", "compute"]
__version__ = "0.1.0"
