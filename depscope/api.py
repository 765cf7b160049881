"""Public facade — build the dependency tree, then analyze it."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog

from depscope.engines.dependency_tree import PackageJsonSource, Registry, TreeBuilder
from depscope.engines.dependency_tree.source import ManifestSource
from depscope.engines.graph_analyzer import analyze_registry
from depscope.progress import ANALYZE_GRAPH, BUILD_TREE, AnalysisProgress

log = structlog.get_logger("depscope.api")


@dataclass
class AnalysisResult:
    """Outcome of one analysis run; ``map`` holds every entry with computed fields.

    ``progress`` is not part of :meth:`to_dict`, which keeps the result
    wire shape stable.
    """

    name: str
    version: str | None
    count: int
    has_circular_dependency: bool
    map: Registry
    progress: AnalysisProgress = field(default_factory=AnalysisProgress)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "count": self.count,
            "hasCircularDependency": self.has_circular_dependency,
            "map": self.map.to_dict(),
        }


def analyze_source(
    source: ManifestSource,
    depth: int | None = None,
    progress: AnalysisProgress | None = None,
) -> AnalysisResult:
    """Run the tree builder to completion, then the graph analyzer.

    Raises :class:`~depscope.exceptions.ManifestError` if the root manifest
    is missing or unreadable; no partial result is returned.
    """
    progress = progress or AnalysisProgress()

    with progress.phase(BUILD_TREE) as stats:
        registry = TreeBuilder(source, depth=depth).build()
        stats.packages = len(registry)

    with progress.phase(ANALYZE_GRAPH) as stats:
        cyclic = analyze_registry(registry)
        stats.packages = len(registry)
        stats.circular_entries = sum(1 for e in registry.entries() if e.circular)
        stats.has_circular_dependency = cyclic

    root = registry.root
    log.debug("analysis.summary", **progress.to_dict())
    return AnalysisResult(
        name=root.name,
        version=root.version,
        count=len(registry),
        has_circular_dependency=cyclic,
        map=registry,
        progress=progress,
    )


def analyze(
    base: Path | str = ".",
    depth: int | None = None,
    progress: AnalysisProgress | None = None,
) -> AnalysisResult:
    """Analyze the ``package.json`` in *base* and its installed ``node_modules``."""
    return analyze_source(PackageJsonSource(base), depth=depth, progress=progress)
