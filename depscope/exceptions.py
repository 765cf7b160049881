"""Custom exceptions for depscope."""

from __future__ import annotations

from pathlib import Path


class DepscopeError(Exception):
    """Base exception for all depscope errors."""


class ManifestError(DepscopeError):
    """Raised when the root manifest cannot be used for analysis."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Open {self.path} failed: {reason}")


class ManifestNotFoundError(ManifestError):
    """Raised when no manifest file exists at the analyzed base directory."""

    def __init__(self, path: Path | str):
        super().__init__(path, "File not found.")


class ManifestParseError(ManifestError):
    """Raised when the root manifest is not a valid JSON object."""
