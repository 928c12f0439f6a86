"""patient identifier generation"""
import threading
class IdGenerator:
    """
    issues unique, strictly increasing patient ids
    pre-increments like the original admission desk counter: start=1000 -> first id is 1001
    one generator per dispatcher, so tests can build a fresh sequence each time
    """
    def __init__(self, start: int = 1000):
        self._start = start
        self._current = start
        self._lock = threading.Lock()
    def next_id(self) -> int:
        """advance the counter and return the new id"""
        with self._lock:
            self._current += 1
            return self._current
    def peek(self) -> int:
        """last issued id (or the start value if nothing issued yet)"""
        with self._lock:
            return self._current
    @property
    def start(self) -> int:
        return self._start
