"""Data models for poly-stats."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from poly_stats.columns import ColumnWidths


# Sentinel for ``max_min_lod_to_dump`` meaning "no LOD limit"
NO_LOD_LIMIT = -1

DEFAULT_KEY_FOLDER = "Assets/MapBuildingAssets/"


class SortKey(str, Enum):
    NAME = "name"
    MIN_LOD = "min_lod"
    VERT = "vert"
    TRI = "tri"
    COUNT = "count"
    TOTAL_VERT = "total_vert"
    TOTAL_TRI = "total_tri"


@dataclass(frozen=True)
class InstanceRecord:
    """One placement of a mesh asset, as yielded by a record source."""
    name: str
    min_lod: int
    vertex_count: int
    triangle_count: int
    path: str = ""


@dataclass
class AggregateEntry:
    """Aggregated stats for one mesh asset.

    LOD, vertex and triangle counts are taken from the first instance seen;
    later instances only bump ``count``.
    """

    name: str
    min_lod: int
    vertex_count: int
    triangle_count: int
    short_path: str = ""
    count: int = 1

    @property
    def total_verts(self) -> int:
        """Vertices across all instances."""
        return self.vertex_count * self.count

    @property
    def total_tris(self) -> int:
        """Triangles across all instances."""
        return self.triangle_count * self.count


@dataclass
class ReportSettings:
    """Settings for a mesh stats dump."""

    # Sorting
    sort_by: SortKey = SortKey.TOTAL_VERT
    sort_descending: bool = True

    # Per-instance filters
    max_min_lod_to_dump: int = 5  # -1 = no limit
    min_vert_count: int = 1

    # Per-asset filters
    min_instance_count: int = 1
    min_total_vert_count: int = 1

    # Output
    max_entries_to_dump: int = 255
    key_folder: str = DEFAULT_KEY_FOLDER

    def __post_init__(self) -> None:
        self.sort_by = SortKey(self.sort_by)

    @property
    def has_lod_limit(self) -> bool:
        return self.max_min_lod_to_dump != NO_LOD_LIMIT

    def validate(self) -> None:
        """Validate settings."""
        if not (NO_LOD_LIMIT <= self.max_min_lod_to_dump <= 8):
            raise ValueError("max_min_lod_to_dump must be between -1 and 8")

        if self.min_instance_count < 1:
            raise ValueError("min_instance_count must be at least 1")

        if self.min_vert_count < 1:
            raise ValueError("min_vert_count must be at least 1")

        if self.min_total_vert_count < 1:
            raise ValueError("min_total_vert_count must be at least 1")

        if not (1 <= self.max_entries_to_dump <= 255):
            raise ValueError("max_entries_to_dump must be between 1 and 255")

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> ReportSettings:
        """Build settings from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        settings = cls(**{k: v for k, v in (data or {}).items() if k in known})
        settings.validate()
        return settings


@dataclass
class MeshStatsReport:
    """Result of one pipeline run, ready to be rendered."""

    entries: list[AggregateEntry]
    widths: ColumnWidths
    total_verts: int = 0
    total_tris: int = 0
    max_entries: int = 255

    # Number of assets before the per-asset filters
    aggregated_count: int = 0

    @property
    def shown_entries(self) -> list[AggregateEntry]:
        """Entries that make it into the table."""
        return self.entries[: self.max_entries]

    def lines(self) -> list[str]:
        """Header, rows and global totals as text lines."""
        from poly_stats.report import render_lines
        return render_lines(self)


def is_editor_build() -> bool:
    """Whether the dev-only stats tooling is enabled in this environment."""
    return os.environ.get("POLY_STATS_BUILD", "editor").lower() != "shipping"

