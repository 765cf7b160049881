"""Tests for AnalysisProgress and PhaseStats."""

from __future__ import annotations

import pytest

from depscope.progress import ANALYZE_GRAPH, BUILD_TREE, AnalysisProgress, PhaseStats


class TestAnalysisProgress:
    def test_completed_phase_keeps_stats(self):
        progress = AnalysisProgress()
        with progress.phase(BUILD_TREE) as stats:
            stats.packages = 12

        recorded = progress.get(BUILD_TREE)
        assert recorded.status == "completed"
        assert recorded.packages == 12
        assert recorded.duration is not None
        assert recorded.duration >= 0

    def test_failed_phase_reraises(self):
        progress = AnalysisProgress()
        with pytest.raises(ValueError):
            with progress.phase(BUILD_TREE):
                raise ValueError("depth must be a non-negative integer")

        recorded = progress.get(BUILD_TREE)
        assert recorded.status == "failed"
        assert recorded.error == "depth must be a non-negative integer"
        assert recorded.finished is not None

    def test_get_unknown_phase(self):
        assert AnalysisProgress().get(ANALYZE_GRAPH) is None

    def test_phase_order(self):
        progress = AnalysisProgress()
        with progress.phase(BUILD_TREE):
            pass
        with progress.phase(ANALYZE_GRAPH):
            pass
        assert [p.phase for p in progress.phases] == [BUILD_TREE, ANALYZE_GRAPH]

    def test_to_dict(self):
        progress = AnalysisProgress()
        with progress.phase(ANALYZE_GRAPH) as stats:
            stats.packages = 4
            stats.circular_entries = 3
            stats.has_circular_dependency = True

        summary = progress.to_dict()
        phase = summary["phases"][0]
        assert phase["phase"] == ANALYZE_GRAPH
        assert phase["status"] == "completed"
        assert phase["packages"] == 4
        assert phase["circularEntries"] == 3
        assert phase["hasCircularDependency"] is True
        assert summary["totalDuration"] >= 0


class TestPhaseStats:
    def test_running_phase_has_no_duration(self):
        assert PhaseStats(phase=BUILD_TREE, started=1.0).duration is None

    def test_duration(self):
        stats = PhaseStats(phase=BUILD_TREE, started=1.0, finished=1.25)
        assert stats.duration == 0.25

    def test_tree_phase_leaves_cycle_fields_empty(self):
        data = PhaseStats(phase=BUILD_TREE, packages=2).to_dict()
        assert data["circularEntries"] is None
        assert data["hasCircularDependency"] is None
