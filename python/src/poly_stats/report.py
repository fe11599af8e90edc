"""Mesh stats report: pipeline entry points and table formatting."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from poly_stats.aggregator import Aggregator
from poly_stats.columns import HEADERS
from poly_stats.models import (
    AggregateEntry,
    InstanceRecord,
    MeshStatsReport,
    ReportSettings,
)
from poly_stats.sorter import sort_entries
from poly_stats.source import RecordSource, SourceUnavailableError

logger = logging.getLogger(__name__)

BANNER = "=== Dumping Static Mesh Stats (Scene Only) ==="
SEPARATOR = " | "


def _format_row(cells: tuple, widths: tuple[int, ...]) -> str:
    # Every column is right-justified except the trailing path
    parts = [f"{cell:>{width}}" for cell, width in zip(cells[:-1], widths[:-1])]
    parts.append(f"{cells[-1]:<{widths[-1]}}")
    return SEPARATOR.join(parts)


def format_header(report: MeshStatsReport) -> str:
    return _format_row(HEADERS, report.widths.as_tuple())


def format_entry(entry: AggregateEntry, report: MeshStatsReport) -> str:
    cells = (
        entry.name,
        entry.min_lod,
        entry.vertex_count,
        entry.triangle_count,
        entry.count,
        entry.total_verts,
        entry.total_tris,
        entry.short_path,
    )
    return _format_row(cells, report.widths.as_tuple())


def format_totals(report: MeshStatsReport) -> str:
    return (
        f"=== GLOBAL TOTAL Verts: {report.total_verts}"
        f"   TOTAL Tris: {report.total_tris} ==="
    )


def render_lines(report: MeshStatsReport) -> list[str]:
    """Render the header, up to ``max_entries`` rows and the totals line."""
    lines = [format_header(report)]
    for entry in report.shown_entries:
        lines.append(format_entry(entry, report))
    lines.append(format_totals(report))
    return lines


def build_report(
    records: Iterable[InstanceRecord],
    settings: Optional[ReportSettings] = None,
) -> MeshStatsReport:
    """Run aggregation, filtering and sorting over ``records``.

    Args:
        records: Per-instance mesh records, consumed once in order
        settings: Filter, sort and output settings

    Returns:
        MeshStatsReport ready to be rendered
    """
    settings = settings or ReportSettings()
    settings.validate()

    agg = Aggregator(settings).add_all(records)
    entries = sort_entries(
        agg.filtered(),
        sort_by=settings.sort_by,
        descending=settings.sort_descending,
    )

    return MeshStatsReport(
        entries=entries,
        widths=agg.widths,
        total_verts=agg.total_verts,
        total_tris=agg.total_tris,
        max_entries=settings.max_entries_to_dump,
        aggregated_count=len(agg.entries),
    )


def dump_mesh_stats(
    source: RecordSource,
    settings: Optional[ReportSettings] = None,
    log: Optional[logging.Logger] = None,
) -> Optional[MeshStatsReport]:
    """Dump mesh stats from ``source`` to a logger.

    The table and totals are emitted as a single log message so output of
    concurrent dumps never interleaves.

    Returns:
        The report, or None if the source was unavailable
    """
    log = log or logger
    log.warning(BANNER)

    try:
        records = source.records()
        report = build_report(records, settings)
    except SourceUnavailableError as e:
        log.error("Scene invalid. %s", e)
        return None

    log.warning("\n".join(report.lines()))
    return report
