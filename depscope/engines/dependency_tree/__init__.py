"""Dependency tree engine — read manifests into a flat package registry."""

from depscope.engines.dependency_tree.builder import TreeBuilder, build_registry
from depscope.engines.dependency_tree.models import Manifest, PackageEntry, identity_token
from depscope.engines.dependency_tree.registry import Registry
from depscope.engines.dependency_tree.source import ManifestSource, PackageJsonSource

__all__ = [
    "Manifest",
    "ManifestSource",
    "PackageEntry",
    "PackageJsonSource",
    "Registry",
    "TreeBuilder",
    "build_registry",
    "identity_token",
]
