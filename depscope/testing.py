"""Test doubles for depscope — use in unit tests instead of files on disk.

Usage::

    from depscope.testing import InMemoryManifestSource

    source = InMemoryManifestSource(
        {"name": "app", "version": "1.0.0", "dependencies": {"x": "1"}},
        packages={"x": {"version": "1", "dependencies": {}}},
    )
"""

from __future__ import annotations

from typing import Any

from depscope.engines.dependency_tree.models import Manifest
from depscope.exceptions import ManifestNotFoundError


class InMemoryManifestSource:
    """Manifest source backed by plain dicts.

    Parameters
    ----------
    root:
        Root manifest data, or ``None`` to simulate a missing ``package.json``.
    packages:
        Installed manifests keyed by package name.  Names not present behave
        like packages that are not installed.
    """

    def __init__(
        self,
        root: dict[str, Any] | None,
        packages: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        self._root = root
        self._packages = packages or {}
        self._lookups: list[str] = []

    @property
    def lookups(self) -> list[str]:
        """Package names passed to :meth:`find` — useful for assertions in tests."""
        return self._lookups

    def read_root(self) -> Manifest:
        if self._root is None:
            raise ManifestNotFoundError("package.json")
        return Manifest.from_data(self._root)

    def find(self, name: str) -> Manifest | None:
        self._lookups.append(name)
        data = self._packages.get(name)
        return Manifest.from_data(data) if data is not None else None
