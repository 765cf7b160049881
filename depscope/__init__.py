"""depscope: dependency tree cycle and reference analysis for package.json projects."""

__version__ = "0.1.0"

from depscope.api import AnalysisResult, analyze, analyze_source
from depscope.engines.dependency_tree import (
    Manifest,
    ManifestSource,
    PackageEntry,
    PackageJsonSource,
    Registry,
    TreeBuilder,
)
from depscope.engines.graph_analyzer import (
    analyze_registry,
    check_circular_dependency,
    get_required_times,
    has_circular_dependency,
)
from depscope.exceptions import (
    DepscopeError,
    ManifestError,
    ManifestNotFoundError,
    ManifestParseError,
)
from depscope.progress import AnalysisProgress, PhaseStats

__all__ = [
    "AnalysisProgress",
    "AnalysisResult",
    "DepscopeError",
    "Manifest",
    "ManifestError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "ManifestSource",
    "PackageEntry",
    "PackageJsonSource",
    "PhaseStats",
    "Registry",
    "TreeBuilder",
    "analyze",
    "analyze_registry",
    "analyze_source",
    "check_circular_dependency",
    "get_required_times",
    "has_circular_dependency",
]
