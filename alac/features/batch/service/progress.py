import threading
from types import TracebackType
from typing import Optional, Type

from tqdm import tqdm

class ProgressReporter:
    """
    Thread-safe "n of total" counter drawn as a tqdm bar (elapsed / remaining).
    Workers call advance() once per finished file, from any thread.
    """

    def __init__(self, total: int, description: str = "Converting", enabled: bool = True):
        self.total = total
        self.completed = 0
        self._lock = threading.Lock()
        self._bar = tqdm(
            total=total,
            desc=description,
            unit="file",
            disable=not enabled,
            dynamic_ncols=True,
        )

    def advance(self, label: Optional[str] = None) -> int:
        """Counts one completed file and returns the new count."""
        with self._lock:
            self.completed += 1
            if label:
                self._bar.set_postfix_str(label, refresh=False)
            self._bar.update(1)
            return self.completed

    def close(self) -> None:
        with self._lock:
            self._bar.close()

    def __enter__(self) -> "ProgressReporter":
        return self

    def __exit__(self,
                 exc_type: Optional[Type[BaseException]],
                 exc: Optional[BaseException],
                 tb: Optional[TracebackType]) -> None:
        self.close()
