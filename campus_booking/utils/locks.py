import threading
from contextlib import contextmanager


class ResourceLocks:
    """Registry of one lock per resource id, created on first use."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks = {}

    def get(self, resource_id):
        with self._guard:
            lock = self._locks.get(resource_id)
            if lock is None:
                lock = self._locks[resource_id] = threading.Lock()
            return lock

    @contextmanager
    def hold(self, resource_id):
        lock = self.get(resource_id)
        with lock:
            yield
