"""Store-assigned identifiers."""

import re
import secrets
import time

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-f]{24}$")


def new_object_id() -> str:
    """Generate a 24-hex-char identifier.

    The first 8 hex chars encode the creation time in seconds, so ids
    created in different seconds sort chronologically.
    """
    return f"{int(time.time()):08x}{secrets.token_hex(8)}"


def is_object_id(value: str) -> bool:
    """Check whether a string has the shape of a store identifier."""
    return bool(OBJECT_ID_PATTERN.match(value))
