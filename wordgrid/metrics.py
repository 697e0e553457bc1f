import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("wordgrid")


class StageTimer:
    """Collects per-stage timing for one generation run.

    Stages entered repeatedly (one per sampling attempt) accumulate their time
    and a call count; only the first entry of a stage is logged.
    """

    def __init__(self):
        self.timings: dict[str, float] = {}
        self.counts: dict[str, int] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = (time.perf_counter() - t0) * 1000
            self.timings[name] = self.timings.get(name, 0.0) + elapsed_ms
            self.counts[name] = self.counts.get(name, 0) + 1
            if self.counts[name] == 1:
                logger.debug("stage=%s elapsed=%.1fms", name, elapsed_ms)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**{k: round(v, 1) for k, v in self.timings.items()}, "total": self.total_ms}

    def log_summary(self):
        for name, ms in self.timings.items():
            logger.info("stage=%s calls=%d elapsed=%.1fms", name, self.counts[name], ms)
