from contextlib import contextmanager
from threading import Lock

from ..errors import OperationInProgressError


class InFlightGuard:
    """Rejects a second request for a key while the first is still running."""

    def __init__(self):
        self._lock = Lock()
        self._active = set()

    def is_active(self, key: str) -> bool:
        with self._lock:
            return key in self._active

    @contextmanager
    def claim(self, key: str):
        with self._lock:
            if key in self._active:
                raise OperationInProgressError(f"{key} is already in progress")
            self._active.add(key)
        try:
            yield
        finally:
            with self._lock:
                self._active.discard(key)
