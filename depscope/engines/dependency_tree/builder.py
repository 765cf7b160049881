"""Tree builder — discover the installed dependency tree into a Registry."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import structlog

from depscope.engines.dependency_tree.models import PackageEntry
from depscope.engines.dependency_tree.registry import Registry
from depscope.engines.dependency_tree.source import ManifestSource, PackageJsonSource

log = structlog.get_logger("depscope.engine")

DEFAULT_ROOT_NAME = "package.json"


@dataclass
class _Frame:
    """Dependencies of one expanded package that are still to be visited."""

    pending: Iterator[tuple[str, str]]
    budget: int | None  # remaining expansion levels for the pending packages


class TreeBuilder:
    """Build a :class:`Registry` from a root manifest and its installed dependencies.

    Traversal is depth-first in declaration order, driven by an explicit
    stack so that deep trees never hit the interpreter's recursion limit.

    *depth* bounds how many levels below the root get expanded: ``None``
    means unlimited, ``0`` registers the root's direct dependencies as
    stubs without reading their manifests.
    """

    def __init__(self, source: ManifestSource, depth: int | None = None) -> None:
        if depth is not None and depth < 0:
            raise ValueError(f"depth must be a non-negative integer, got {depth}")
        self._source = source
        self._depth = depth

    def build(self) -> Registry:
        manifest = self._source.read_root()
        registry = Registry()
        root = PackageEntry(
            name=manifest.name or DEFAULT_ROOT_NAME,
            version=manifest.version,
            dependencies=dict(manifest.dependencies),
        )
        registry.insert_if_absent(root)

        stack = [_Frame(pending=iter(list(root.dependencies.items())), budget=self._depth)]
        while stack:
            frame = stack[-1]
            item = next(frame.pending, None)
            if item is None:
                stack.pop()
                continue

            name, requirement = item
            entry = PackageEntry(name=name, version=requirement)
            if not registry.insert_if_absent(entry):
                continue
            if frame.budget is not None and frame.budget <= 0:
                continue

            sub = self._source.find(name)
            if sub is None:
                continue
            entry.dependencies = dict(sub.dependencies)
            next_budget = None if frame.budget is None else frame.budget - 1
            stack.append(_Frame(pending=iter(list(entry.dependencies.items())), budget=next_budget))

        log.info(
            "tree.built",
            root=root.name,
            packages=len(registry),
            depth=self._depth,
        )
        return registry


def build_registry(base: Path | str = ".", depth: int | None = None) -> Registry:
    """Build the registry for the ``package.json`` found in *base*."""
    return TreeBuilder(PackageJsonSource(base), depth=depth).build()
