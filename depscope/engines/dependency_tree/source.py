"""Manifest sources — where the tree builder reads ``package.json`` files from."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from depscope.engines.dependency_tree.models import Manifest
from depscope.exceptions import ManifestNotFoundError, ManifestParseError

log = structlog.get_logger("depscope.engine")

MANIFEST_FILE = "package.json"
MODULES_DIR = "node_modules"


@runtime_checkable
class ManifestSource(Protocol):
    """Interface that every manifest source must satisfy."""

    def read_root(self) -> Manifest: ...

    def find(self, name: str) -> Manifest | None: ...


def _load(path: Path) -> Manifest:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestParseError(path, str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise ManifestParseError(path, f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestParseError(path, "Manifest is not a JSON object.")
    return Manifest.from_data(data)


class PackageJsonSource:
    """Reads ``<base>/package.json`` and ``<base>/node_modules/<name>/package.json``."""

    def __init__(self, base: Path | str = ".") -> None:
        self.base = Path(base)

    @property
    def root_path(self) -> Path:
        return self.base / MANIFEST_FILE

    def dependency_path(self, name: str) -> Path:
        # Scoped names ("@scope/pkg") map onto nested directories.
        return self.base / MODULES_DIR / name / MANIFEST_FILE

    def read_root(self) -> Manifest:
        path = self.root_path
        if not path.is_file():
            raise ManifestNotFoundError(path)
        return _load(path)

    def find(self, name: str) -> Manifest | None:
        """Return the installed manifest for *name*, or ``None`` if it is unusable."""
        path = self.dependency_path(name)
        if not path.is_file():
            log.debug("tree.sub_manifest_missing", package=name, path=str(path))
            return None
        try:
            return _load(path)
        except ManifestParseError as exc:
            log.warning("tree.sub_manifest_unreadable", package=name, reason=exc.reason)
            return None
