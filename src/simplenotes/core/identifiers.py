"""
Note identifiers.

Ids are 24 lowercase hex chars (12 bytes): 4-byte unix timestamp, 5 random
bytes fixed per process, 3-byte counter.
"""

import itertools
import os
import re
import secrets
import threading
import time
from typing import Any

from .exceptions import MalformedIdentifierError

ID_LENGTH = 24

_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")

_process_random = secrets.token_bytes(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))
_counter_lock = threading.Lock()


def new_note_id() -> str:
    """Generate a fresh identifier."""
    with _counter_lock:
        count = next(_counter) % 0x1000000
    timestamp = int(time.time()).to_bytes(4, "big")
    return (timestamp + _process_random + count.to_bytes(3, "big")).hex()


def is_valid_note_id(value: Any) -> bool:
    """Check the identifier shape only, not whether a note exists."""
    return isinstance(value, str) and bool(_ID_PATTERN.fullmatch(value))


def parse_note_id(value: Any) -> str:
    """Normalize an identifier or raise MalformedIdentifierError."""
    if not is_valid_note_id(value):
        raise MalformedIdentifierError(value)
    return value.lower()
