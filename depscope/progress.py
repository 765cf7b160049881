"""Per-phase statistics for one analysis run (tree build, graph analysis)."""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import structlog

log = structlog.get_logger("depscope.progress")

BUILD_TREE = "build_tree"
ANALYZE_GRAPH = "analyze_graph"


@dataclass
class PhaseStats:
    """What one phase produced.

    ``packages`` is the registry size seen by the phase.  The circularity
    fields are only filled by the graph analysis phase.
    """

    phase: str
    status: str = "running"  # "running" | "completed" | "failed"
    started: float = 0.0
    finished: float | None = None
    packages: int = 0
    circular_entries: int | None = None
    has_circular_dependency: bool | None = None
    error: str | None = None

    @property
    def duration(self) -> float | None:
        if self.finished is None:
            return None
        return round(self.finished - self.started, 4)

    def to_dict(self) -> dict[str, Any]:
        return {
            "phase": self.phase,
            "status": self.status,
            "duration": self.duration,
            "packages": self.packages,
            "circularEntries": self.circular_entries,
            "hasCircularDependency": self.has_circular_dependency,
            "error": self.error,
        }


class AnalysisProgress:
    """Collects :class:`PhaseStats` in the order the phases ran."""

    def __init__(self) -> None:
        self.phases: list[PhaseStats] = []

    def get(self, phase: str) -> PhaseStats | None:
        return next((p for p in self.phases if p.phase == phase), None)

    @contextmanager
    def phase(self, name: str) -> Iterator[PhaseStats]:
        """Time the enclosed block; an exception marks the phase failed and propagates."""
        stats = PhaseStats(phase=name, started=time.monotonic())
        self.phases.append(stats)
        try:
            yield stats
        except Exception as exc:
            stats.status = "failed"
            stats.error = str(exc)
            stats.finished = time.monotonic()
            log.debug("phase.failed", phase=name, error=stats.error)
            raise
        stats.status = "completed"
        stats.finished = time.monotonic()
        log.debug("phase.completed", **stats.to_dict())

    def to_dict(self) -> dict[str, Any]:
        return {
            "phases": [p.to_dict() for p in self.phases],
            "totalDuration": round(sum(p.duration or 0 for p in self.phases), 4),
        }
