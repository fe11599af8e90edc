"""Poly Stats - Per-asset mesh usage statistics for scene snapshots."""

__version__ = "0.1.0"

from poly_stats.models import (
    AggregateEntry,
    InstanceRecord,
    MeshStatsReport,
    ReportSettings,
    SortKey,
    is_editor_build,
)
from poly_stats.aggregator import Aggregator, aggregate
from poly_stats.sorter import sort_entries
from poly_stats.source import SceneRecordSource, SourceUnavailableError, StaticRecordSource
from poly_stats.report import build_report, dump_mesh_stats

__all__ = [
    "AggregateEntry",
    "Aggregator",
    "InstanceRecord",
    "MeshStatsReport",
    "ReportSettings",
    "SceneRecordSource",
    "SortKey",
    "SourceUnavailableError",
    "StaticRecordSource",
    "aggregate",
    "build_report",
    "dump_mesh_stats",
    "is_editor_build",
    "sort_entries",
]
