"""Shared pytest fixtures for depscope tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest
import structlog


def _write_manifest(directory: Path, data: dict[str, Any]) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "package.json").write_text(json.dumps(data))


@pytest.fixture
def make_project(tmp_path) -> Callable[..., Path]:
    """Write a root package.json plus installed node_modules manifests.

    ``packages`` maps a package name to ``{"version": ..., "dependencies": ...}``.
    """

    def _make(root: dict[str, Any], packages: dict[str, dict[str, Any]] | None = None) -> Path:
        _write_manifest(tmp_path, root)
        for name, data in (packages or {}).items():
            _write_manifest(tmp_path / "node_modules" / name, {"name": name, **data})
        return tmp_path

    return _make


@pytest.fixture
def normal_project(make_project) -> Path:
    """root -> x, root -> y -> z."""
    return make_project(
        {
            "name": "normal-test",
            "version": "1.0.0",
            "dependencies": {"normal-test-x": "0", "normal-test-y": "1"},
        },
        {
            "normal-test-x": {"version": "0"},
            "normal-test-y": {"version": "1", "dependencies": {"normal-test-z": "2"}},
            "normal-test-z": {"version": "2"},
        },
    )


@pytest.fixture
def circular_project(make_project) -> Path:
    """root -> a -> b -> c -> a."""
    return make_project(
        {
            "name": "circular-test",
            "version": "1.0.0",
            "dependencies": {"circular-test-a": "0"},
        },
        {
            "circular-test-a": {"version": "0", "dependencies": {"circular-test-b": "1"}},
            "circular-test-b": {"version": "1", "dependencies": {"circular-test-c": "2"}},
            "circular-test-c": {"version": "2", "dependencies": {"circular-test-a": "0"}},
        },
    )


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo setup_logging() so handlers never outlive a test's captured streams."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
