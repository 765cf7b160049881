"""Graph analyzer — circularity flags and inbound reference counts."""

from __future__ import annotations

import structlog

from depscope.engines.dependency_tree.models import PackageEntry
from depscope.engines.dependency_tree.registry import Registry
from depscope.engines.graph_analyzer.views import IdentityGraph, NameGraph

log = structlog.get_logger("depscope.engine")


def check_circular_dependency(entry: PackageEntry, registry: Registry) -> bool:
    """Return ``True`` if *entry*'s dependency chain reaches an edge back to its identity.

    Walks the identity graph from *entry*'s declared edges.  Each edge token
    is explored at most once per walk; a dependency name missing from the
    registry ends that branch.
    """
    graph = IdentityGraph(registry)
    target = entry.identity
    visited: set[str] = set()
    stack = [entry]
    while stack:
        current = stack.pop()
        for token, name in graph.edges(current):
            if token == target:
                return True
            if token in visited:
                continue
            visited.add(token)
            nxt = graph.resolve(name)
            if nxt is not None:
                stack.append(nxt)
    return False


def get_required_times(entry: PackageEntry, registry: Registry) -> int:
    """Number of registry entries that declare a dependency matching *entry*'s identity."""
    return IdentityGraph(registry).inbound(entry)


def has_circular_dependency(registry: Registry) -> bool:
    """Return ``True`` if the name-only dependency graph contains any cycle.

    Gray-node depth-first search started from every registered package.
    Names that are not registered have no outgoing edges and are never
    marked.
    """
    graph = NameGraph(registry)
    on_path: set[str] = set()
    done: set[str] = set()

    for start in graph.nodes():
        if start in done:
            continue
        on_path.add(start)
        stack = [(start, iter(graph.successors(start) or []))]
        while stack:
            node, pending = stack[-1]
            child = next(pending, None)
            if child is None:
                stack.pop()
                on_path.discard(node)
                done.add(node)
                continue
            if child in on_path:
                return True
            if child in done:
                continue
            successors = graph.successors(child)
            if successors is None:
                continue
            on_path.add(child)
            stack.append((child, iter(successors)))
    return False


def analyze_registry(registry: Registry) -> bool:
    """Fill ``circular`` and ``required_times`` on every entry.

    Returns the tree-wide cycle flag.  Only the two computed fields are
    written, so running this twice yields the same values.
    """
    for entry in registry.entries():
        entry.circular = check_circular_dependency(entry, registry)
        entry.required_times = get_required_times(entry, registry)

    cyclic = has_circular_dependency(registry)
    log.info(
        "analyzer.done",
        packages=len(registry),
        circular=sum(1 for e in registry.entries() if e.circular),
        has_circular_dependency=cyclic,
    )
    return cyclic
