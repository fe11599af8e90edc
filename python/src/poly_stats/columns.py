"""Column widths for the fixed-width stats table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from poly_stats.models import AggregateEntry


HEADERS = (
    "Name",
    "MinLOD",
    "Verts",
    "Tris",
    "Count",
    "TotalVerts",
    "TotalTris",
    "Path",
)


def _digits(value: int) -> int:
    return len(str(value))


@dataclass
class ColumnWidths:
    """Display width of each table column.

    Seeded wide enough for the header labels and only ever grown, so the
    header and every row stay aligned no matter how many rows are printed.
    """

    name: int = 4
    min_lod: int = 6
    verts: int = 5
    tris: int = 5
    count: int = 5
    total_verts: int = 10
    total_tris: int = 9
    path: int = 10

    def as_tuple(self) -> tuple[int, ...]:
        """Widths in column order."""
        return (
            self.name,
            self.min_lod,
            self.verts,
            self.tris,
            self.count,
            self.total_verts,
            self.total_tris,
            self.path,
        )

    def on_new_entry(self, entry: AggregateEntry) -> None:
        """Grow the per-asset columns for a freshly created entry."""
        self.name = max(self.name, len(entry.name))
        self.min_lod = max(self.min_lod, _digits(entry.min_lod))
        self.verts = max(self.verts, _digits(entry.vertex_count))
        self.tris = max(self.tris, _digits(entry.triangle_count))
        self.total_verts = max(self.total_verts, self.verts)
        self.total_tris = max(self.total_tris, self.tris)
        self.path = max(self.path, len(entry.short_path))

    def on_instance(self, entry: AggregateEntry) -> None:
        """Grow the accumulating columns after ``entry.count`` changed."""
        self.count = max(self.count, _digits(entry.count))
        self.total_verts = max(self.total_verts, _digits(entry.total_verts))
        self.total_tris = max(self.total_tris, _digits(entry.total_tris))
