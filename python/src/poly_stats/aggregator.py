"""Fold per-instance records into per-asset stats."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from poly_stats.columns import ColumnWidths
from poly_stats.models import AggregateEntry, InstanceRecord, ReportSettings

logger = logging.getLogger(__name__)


def shorten_path(path: str, key_folder: str) -> str:
    """Strip everything up to and including ``key_folder`` from ``path``."""
    if not key_folder:
        return path
    index = path.find(key_folder)
    if index == -1:
        return path
    return path[index + len(key_folder):]


class Aggregator:
    """Collects mesh instances into one ``AggregateEntry`` per asset.

    Also tracks the global vertex/triangle totals of every accepted instance
    and grows the table column widths as entries are created and counted.

    Example:
        agg = Aggregator(ReportSettings(min_vert_count=100))
        agg.add_all(records)
        entries = agg.filtered()
    """

    def __init__(self, settings: Optional[ReportSettings] = None) -> None:
        self.settings = settings or ReportSettings()
        self.entries: dict[str, AggregateEntry] = {}
        self.widths = ColumnWidths()
        self.total_verts = 0
        self.total_tris = 0
        self.rejected = 0

    def accepts(self, record: InstanceRecord) -> bool:
        """Per-instance filters, applied before aggregation."""
        settings = self.settings
        if settings.has_lod_limit and record.min_lod > settings.max_min_lod_to_dump:
            return False
        if record.vertex_count < settings.min_vert_count:
            return False
        return True

    def add(self, record: InstanceRecord) -> Optional[AggregateEntry]:
        """Fold a single record. Returns the touched entry, or None if rejected."""
        if not self.accepts(record):
            self.rejected += 1
            return None

        self.total_verts += record.vertex_count
        self.total_tris += record.triangle_count

        entry = self.entries.get(record.name)
        if entry is None:
            entry = AggregateEntry(
                name=record.name,
                min_lod=record.min_lod,
                vertex_count=record.vertex_count,
                triangle_count=record.triangle_count,
                short_path=shorten_path(record.path, self.settings.key_folder),
            )
            self.entries[record.name] = entry
            self.widths.on_new_entry(entry)
        else:
            entry.count += 1

        self.widths.on_instance(entry)
        return entry

    def add_all(self, records: Iterable[InstanceRecord]) -> Aggregator:
        for record in records:
            self.add(record)
        logger.debug(
            "Aggregated %d assets (%d instances rejected)",
            len(self.entries),
            self.rejected,
        )
        return self

    def filtered(self) -> list[AggregateEntry]:
        """Entries passing the per-asset filters, in first-seen order."""
        return filter_entries(self.entries, self.settings)


def aggregate(
    records: Iterable[InstanceRecord],
    settings: Optional[ReportSettings] = None,
) -> dict[str, AggregateEntry]:
    """Aggregate records into a name -> entry mapping.

    Convenience function that creates an Aggregator instance.
    """
    return Aggregator(settings).add_all(records).entries


def filter_entries(
    entries: dict[str, AggregateEntry],
    settings: ReportSettings,
) -> list[AggregateEntry]:
    """Drop entries below the instance-count or total-vertex thresholds."""
    return [
        entry
        for entry in entries.values()
        if entry.count >= settings.min_instance_count
        and entry.total_verts >= settings.min_total_vert_count
    ]
