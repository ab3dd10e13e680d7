"""Timing utilities for instrumenting catalog loads."""

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class TimingContext:
    """Accumulates phase durations (fetch, parse, derive) for one load."""

    phases: dict[str, float] = field(default_factory=dict)

    def record(self, phase: str, duration_ms: float) -> None:
        """Record a phase duration, adding to any earlier measurement."""
        self.phases[phase] = self.phases.get(phase, 0.0) + duration_ms

    @contextmanager
    def measure(self, phase: str) -> Iterator[None]:
        """Context manager to measure duration of a block.

        The duration is recorded even when the block raises, so a failed
        fetch still shows how long it took.
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            self.record(phase, (time.perf_counter() - start) * 1000)

    @property
    def total_ms(self) -> float:
        return sum(self.phases.values())

    def summary(self) -> str:
        """Return a one-line summary, e.g. 'fetch=120ms parse=8ms total=128ms'."""
        parts = [f"{phase}={dur:.0f}ms" for phase, dur in self.phases.items()]
        parts.append(f"total={self.total_ms:.0f}ms")
        return " ".join(parts)

    def as_dict(self) -> dict[str, float]:
        """Return phase timings plus total for JSON serialization."""
        return {**self.phases, "total": self.total_ms}
