"""Graph views over a Registry.

The registry supports two edge-identity rules and each has its own view:

* :class:`IdentityGraph` keys edges by ``"<name> (<requirement>)"`` tokens,
  so a request for a version other than the registered one does not match
  that entry's identity.  Neighbours are still looked up by name.
* :class:`NameGraph` keys edges by dependency name only.

Per-package circularity uses the identity view, the tree-wide cycle flag
uses the name view.  The two can disagree when a requested version differs
from the registered one.
"""

from __future__ import annotations

from collections.abc import Iterator

from depscope.engines.dependency_tree.models import PackageEntry, identity_token
from depscope.engines.dependency_tree.registry import Registry


class IdentityGraph:
    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def edges(self, entry: PackageEntry) -> Iterator[tuple[str, str]]:
        """Yield ``(token, dependency name)`` for each declared dependency."""
        for name, requirement in entry.dependencies.items():
            yield identity_token(name, requirement), name

    def resolve(self, name: str) -> PackageEntry | None:
        return self._registry.get(name)

    def inbound(self, entry: PackageEntry) -> int:
        """Count registry entries declaring an edge that matches *entry*'s identity."""
        target = entry.identity
        return sum(
            1
            for other in self._registry.entries()
            if any(token == target for token, _ in self.edges(other))
        )


class NameGraph:
    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def nodes(self) -> list[str]:
        return list(self._registry)

    def successors(self, name: str) -> list[str] | None:
        """Dependency names of *name*, or ``None`` if *name* is not registered."""
        entry = self._registry.get(name)
        if entry is None:
            return None
        return list(entry.dependencies)
