"""Data models for the dependency tree builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def identity_token(name: str, version: str | None) -> str:
    """Render a (name, version) pair as the token used for edge matching."""
    return f"{name} ({version})"


@dataclass
class Manifest:
    """A parsed package manifest (``package.json``)."""

    name: str | None
    version: str | None
    dependencies: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> Manifest:
        deps = data.get("dependencies")
        return cls(
            name=data.get("name") or None,
            version=data.get("version"),
            dependencies=dict(deps) if isinstance(deps, dict) else {},
        )


@dataclass
class PackageEntry:
    """One registered package; ``circular`` and ``required_times`` are computed."""

    name: str
    version: str | None
    dependencies: dict[str, str] = field(default_factory=dict)
    circular: bool = False
    required_times: int = 0

    @property
    def identity(self) -> str:
        return identity_token(self.name, self.version)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "dependencies": dict(self.dependencies),
            "circular": self.circular,
            "requiredTimes": self.required_times,
        }
