"""Registry — insertion-ordered, first-write-wins collection of package entries."""

from __future__ import annotations

from collections.abc import Iterator

from depscope.engines.dependency_tree.models import PackageEntry


class Registry:
    """Name-keyed package entries; the first inserted entry is the root."""

    def __init__(self) -> None:
        self._entries: dict[str, PackageEntry] = {}

    def insert_if_absent(self, entry: PackageEntry) -> bool:
        """Store *entry* unless its name is already registered.

        Returns ``True`` only when the insertion happened.  An existing entry
        is never overwritten, whatever version the new one carries.
        """
        if entry.name in self._entries:
            return False
        self._entries[entry.name] = entry
        return True

    def get(self, name: str) -> PackageEntry | None:
        return self._entries.get(name)

    @property
    def root(self) -> PackageEntry:
        if not self._entries:
            raise LookupError("registry is empty")
        return next(iter(self._entries.values()))

    def entries(self) -> list[PackageEntry]:
        return list(self._entries.values())

    def to_dict(self) -> dict[str, dict]:
        return {name: entry.to_dict() for name, entry in self._entries.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
