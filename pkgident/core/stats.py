import threading
import time
from dataclasses import dataclass
from dataclasses import field


@dataclass
class ResolveStats:
    total: int = 0
    resolved: int = 0
    overridden: int = 0
    warnings: int = 0
    start_time: float = field(default_factory=time.time)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def inc_resolved(self, count: int = 1):
        with self._lock:
            self.resolved += count

    def inc_overridden(self, count: int = 1):
        with self._lock:
            self.overridden += count

    def inc_warnings(self, count: int = 1):
        with self._lock:
            self.warnings += count

    @property
    def elapsed_time(self) -> float:
        return time.time() - self.start_time
