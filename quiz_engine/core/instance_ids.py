"""Process-wide allocation of quiz instance identifiers."""

from __future__ import annotations

from threading import Lock


class InstanceIdAllocator:
    """Hands out strictly increasing instance ids starting at 1.

    Every element id and input group name a quiz instance creates embeds its
    id, so two live instances must never share one.
    """

    def __init__(self) -> None:
        self._counter = 0
        self._lock = Lock()

    def next_id(self) -> int:
        with self._lock:
            self._counter += 1
            return self._counter

    def reset(self) -> None:
        """Return the counter to 0.

        Test/support hook only. Resetting while instances are live lets a new
        instance reuse a live instance's id and breaks isolation between them.
        """
        with self._lock:
            self._counter = 0

    @property
    def last_id(self) -> int:
        with self._lock:
            return self._counter


allocator = InstanceIdAllocator()
# Default allocator for the process. Hosts pass it (or their own) to the
# bootstrap explicitly; tests build a fresh one instead of resetting this.
