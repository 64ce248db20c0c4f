"""
MockMaster ID Generation

IDs combine a base-36 millisecond timestamp, a process-wide counter and a
random suffix, so two IDs created within the same millisecond still differ.
"""

import itertools
import secrets
import threading
import time

_ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyz'

_counter = itertools.count()
_counter_lock = threading.Lock()


def to_base36(value: int) -> str:
    """Encode a non-negative integer in base 36."""
    if value == 0:
        return '0'

    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_ALPHABET[remainder])
    return ''.join(reversed(digits))


def now_ms() -> int:
    """Current wall-clock time in integer milliseconds."""
    return time.time_ns() // 1_000_000


def generate_id() -> str:
    """
    Generate a unique ID for a recording or mock.

    Returns:
        ID of the form '<time36>-<counter36>-<random>'
    """
    with _counter_lock:
        sequence = next(_counter)

    random_part = ''.join(secrets.choice(_ALPHABET) for _ in range(7))
    return f"{to_base36(now_ms())}-{to_base36(sequence)}-{random_part}"
