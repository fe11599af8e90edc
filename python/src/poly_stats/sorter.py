"""Ordering of aggregated mesh stats."""

from __future__ import annotations

from typing import Any, Callable, Union

from poly_stats.models import AggregateEntry, SortKey


SORT_KEYS: dict[SortKey, Callable[[AggregateEntry], Any]] = {
    SortKey.NAME: lambda e: (str(e.name).casefold(), str(e.name)),
    SortKey.MIN_LOD: lambda e: e.min_lod,
    SortKey.VERT: lambda e: e.vertex_count,
    SortKey.TRI: lambda e: e.triangle_count,
    SortKey.COUNT: lambda e: e.count,
    SortKey.TOTAL_VERT: lambda e: e.total_verts,
    SortKey.TOTAL_TRI: lambda e: e.total_tris,
}


def sort_entries(
    entries: list[AggregateEntry],
    sort_by: Union[SortKey, str] = SortKey.TOTAL_VERT,
    descending: bool = True,
) -> list[AggregateEntry]:
    """Return ``entries`` sorted by one key.

    The sort is stable in both directions: entries with equal keys keep
    their input order.
    """
    key = SORT_KEYS[SortKey(sort_by)]
    return sorted(entries, key=key, reverse=descending)
