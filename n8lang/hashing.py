"""Message digests of the N8 standard library."""

from __future__ import annotations

import hashlib
import re
from typing import Any


def _text(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _digest(algorithm: str, value: Any) -> str:
    return hashlib.new(algorithm, _text(value).encode("utf-8")).hexdigest()


def _is_hex(value: Any, length: int) -> bool:
    return re.fullmatch(rf"[a-fA-F0-9]{{{length}}}", _text(value)) is not None


def md5(value: Any) -> str:
    """Return the MD5 digest of the value's text as lowercase hex."""
    return _digest("md5", value)


def validate_md5(value: Any) -> bool:
    """Return whether the value's text looks like an MD5 hex digest."""
    return _is_hex(value, 32)


def sha256(value: Any) -> str:
    """Return the SHA-256 digest of the value's text as lowercase hex."""
    return _digest("sha256", value)


def validate_sha256(value: Any) -> bool:
    """Return whether the value's text looks like a SHA-256 hex digest."""
    return _is_hex(value, 64)


def sha384(value: Any) -> str:
    """Return the SHA-384 digest of the value's text as lowercase hex."""
    return _digest("sha384", value)


def validate_sha384(value: Any) -> bool:
    """Return whether the value's text looks like a SHA-384 hex digest."""
    return _is_hex(value, 96)


def sha512(value: Any) -> str:
    """Return the SHA-512 digest of the value's text as lowercase hex."""
    return _digest("sha512", value)


def validate_sha512(value: Any) -> bool:
    """Return whether the value's text looks like a SHA-512 hex digest."""
    return _is_hex(value, 128)