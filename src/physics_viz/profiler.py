# MIT License (see LICENSE)
"""
Per-frame section timing.

Scene wraps each piece of frame work (field tracing, wave mesh, collisions,
trails) in a named section. Anything slower than the frame budget is logged
at WARNING, since the host loop has a single animation tick to finish in.

Example:
    profiler = Profiler(budget_ms=4.0)
    scene = Scene(bodies=bodies, profiler=profiler)
    scene.step(1 / 60)
    print(profiler.stats.summary())
"""
from __future__ import annotations
import logging
import time
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass
class SectionStats:
    """
    Timing samples (seconds) for named sections.

    Only the most recent `max_samples` timings per section are kept, so a
    host that profiles every frame runs in bounded memory. `counts` keeps
    the total number of timed calls.
    """
    max_samples: int = 1000
    samples: dict[str, deque[float]] = field(default_factory=dict)
    counts: dict[str, int] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        window = self.samples.get(name)
        if window is None:
            window = self.samples[name] = deque(maxlen=self.max_samples)
        window.append(dt)
        self.counts[name] = self.counts.get(name, 0) + 1

    def total(self, name: str) -> float:
        """Sum over the retained window."""
        return sum(self.samples.get(name, ()))

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics over the retained window.

        Returns:
            Dict mapping section name to {'n', 'calls', 'mean_ms', 'max_ms'}.
        """
        out = {}
        for name, times in self.samples.items():
            out[name] = {
                "n": len(times),
                "calls": self.counts[name],
                "mean_ms": 1e3 * sum(times) / len(times),
                "max_ms": 1e3 * max(times),
            }
        return out


class Profiler:
    """
    Context-manager based section timer.

    Args:
        budget_ms: Per-section budget; slower sections are logged at
            WARNING. None disables the check.
        max_samples: Timings retained per section.
    """

    def __init__(self, budget_ms: float | None = None, max_samples: int = 1000) -> None:
        self.budget_ms = budget_ms
        self.max_samples = max_samples
        self.stats = SectionStats(max_samples=self.max_samples)

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - t0
            self.stats.add(name, elapsed)
            if self.budget_ms is not None and 1e3 * elapsed > self.budget_ms:
                logger.warning("Section '%s' took %.2f ms (budget %.2f ms)",
                               name, 1e3 * elapsed, self.budget_ms)

    def reset(self) -> None:
        self.stats = SectionStats(max_samples=self.max_samples)
