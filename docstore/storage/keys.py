"""Storage key generation and validation."""

import os
import re
import secrets
import threading
import time

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9\-_]")

# 8 random bytes -> 16 hex characters
RANDOM_TOKEN_BYTES = 8

_clock_lock = threading.Lock()
_last_timestamp_ms = 0


def _timestamp_ms() -> int:
    """Milliseconds since epoch, never lower than a value already issued."""
    global _last_timestamp_ms
    now = time.time_ns() // 1_000_000
    with _clock_lock:
        if now < _last_timestamp_ms:
            now = _last_timestamp_ms
        _last_timestamp_ms = now
    return now


def sanitize_basename(name: str) -> str:
    """Replace every character outside [A-Za-z0-9-_] with an underscore."""
    return _UNSAFE_CHARS.sub("_", name)


def split_filename(filename: str) -> tuple[str, str]:
    """
    Return (base, extension) of the last path segment of filename.
    Both / and \\ count as separators, so directory parts are discarded.
    An extension holding a NUL byte is folded into the base to be sanitized.
    """
    segment = re.split(r"[/\\]", filename)[-1]
    base, ext = os.path.splitext(segment)
    if "\x00" in ext:
        return base + ext, ""
    return base, ext


def generate_key(original_filename: str) -> str:
    """
    Build a unique key: {timestamp}-{token}-{sanitized base}{extension}.
    Never raises; an empty or extension-only filename gives an empty base.
    """
    base, ext = split_filename(original_filename or "")
    token = secrets.token_hex(RANDOM_TOKEN_BYTES)
    return f"{_timestamp_ms()}-{token}-{sanitize_basename(base)}{ext}"


def is_safe_key(key: str) -> bool:
    """True when key is usable as one path segment inside the storage root."""
    if not key or key in (".", ".."):
        return False
    return not any(c in key for c in ("/", "\\", "\x00"))
