import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("wordsearch")


class SearchTimer:
    """Per-stage wall-clock timings for one board query."""

    def __init__(self, label: str = "search"):
        self.label = label
        self.timings: dict[str, float] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            elapsed = round((time.perf_counter() - t0) * 1000, 1)  # ms
            self.timings[name] = self.timings.get(name, 0.0) + elapsed
            logger.info("%s stage=%s elapsed=%.1fms", self.label, name, elapsed)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}
