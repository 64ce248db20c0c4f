"""
MockMaster Sequence Store

Named integer counters for factories. Stores are passed around explicitly
instead of living in module state, so each test can use a fresh one.
"""

import threading
from typing import Dict, Optional

DEFAULT_SEQUENCE = 'default'


class SequenceStore:
    """
    Map of sequence name to last issued value.

    Example:
        store = SequenceStore()
        store.next()           # 1
        store.next()           # 2
        store.next('postId')   # 1
    """

    def __init__(self, initial: Optional[Dict[str, int]] = None):
        self._values: Dict[str, int] = dict(initial or {})
        self._lock = threading.Lock()

    def next(self, name: Optional[str] = None) -> int:
        """Advance a sequence and return its new value (first value is 1)."""
        key = name or DEFAULT_SEQUENCE
        with self._lock:
            value = self._values.get(key, 0) + 1
            self._values[key] = value
        return value

    def peek(self, name: Optional[str] = None) -> int:
        """Last issued value of a sequence (0 if never used)."""
        return self._values.get(name or DEFAULT_SEQUENCE, 0)

    def reset(self, name: Optional[str] = None) -> None:
        """Reset one sequence, or all of them when no name is given."""
        with self._lock:
            if name is None:
                self._values.clear()
            else:
                self._values.pop(name, None)

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._values)

    def __len__(self) -> int:
        return len(self._values)
