"""Graph analyzer engine — cycle detection and reference counting over a Registry."""

from depscope.engines.graph_analyzer.analyzer import (
    analyze_registry,
    check_circular_dependency,
    get_required_times,
    has_circular_dependency,
)
from depscope.engines.graph_analyzer.views import IdentityGraph, NameGraph

__all__ = [
    "IdentityGraph",
    "NameGraph",
    "analyze_registry",
    "check_circular_dependency",
    "get_required_times",
    "has_circular_dependency",
]
