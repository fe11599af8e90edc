# !/usr/bin/python
# coding=utf-8
"""Tests for poly_stats.columns."""
import unittest

from poly_stats.aggregator import Aggregator
from poly_stats.columns import HEADERS, ColumnWidths
from poly_stats.models import InstanceRecord, ReportSettings


class TestColumnWidths(unittest.TestCase):

    def test_seed_widths_fit_headers(self):
        for header, width in zip(HEADERS, ColumnWidths().as_tuple()):
            self.assertGreaterEqual(width, len(header))

    def test_new_entry_grows_asset_columns(self):
        agg = Aggregator(ReportSettings(key_folder=""))
        agg.add(InstanceRecord("SM_VeryLongMeshName_01", 3, 1234567, 7654321, "/Game/Env/SM_VeryLongMeshName_01"))

        widths = agg.widths
        self.assertEqual(widths.name, len("SM_VeryLongMeshName_01"))
        self.assertEqual(widths.min_lod, 6)
        self.assertEqual(widths.verts, 7)
        self.assertEqual(widths.tris, 7)
        self.assertEqual(widths.total_verts, 10)
        self.assertEqual(widths.path, len("/Game/Env/SM_VeryLongMeshName_01"))

    def test_counts_grow_totals(self):
        agg = Aggregator()
        for _ in range(100_000):
            agg.add(InstanceRecord("Grass", 0, 99_999, 50_000))

        widths = agg.widths
        self.assertEqual(widths.count, len("100000"))
        self.assertEqual(widths.total_verts, len(str(99_999 * 100_000)))
        self.assertEqual(widths.total_tris, len(str(50_000 * 100_000)))

    def test_widths_never_shrink(self):
        agg = Aggregator()
        agg.add(InstanceRecord("A_Long_Name", 0, 10, 5))
        agg.add(InstanceRecord("B", 0, 10, 5))
        self.assertEqual(agg.widths.name, len("A_Long_Name"))

    def test_covers_filtered_out_entries(self):
        # Widths are computed during aggregation, before per-asset filters
        agg = Aggregator(ReportSettings(min_instance_count=2))
        agg.add_all([
            InstanceRecord("Lonely_But_Long", 0, 10, 5),
            InstanceRecord("Pair", 0, 10, 5),
            InstanceRecord("Pair", 0, 10, 5),
        ])
        self.assertEqual([e.name for e in agg.filtered()], ["Pair"])
        self.assertEqual(agg.widths.name, len("Lonely_But_Long"))

    def test_totals_track_final_counts(self):
        agg = Aggregator()
        agg.add_all([
            InstanceRecord("Rock", 1, 12345, 6789, "/Game/Rock"),
            InstanceRecord("Rock", 1, 12345, 6789, "/Game/Rock"),
            InstanceRecord("Tree_Oak", 0, 800, 400, "/Game/Foliage/Tree_Oak"),
        ])
        self.assertEqual(
            agg.widths,
            ColumnWidths(name=8, min_lod=6, verts=5, tris=5, count=5, total_verts=10, total_tris=9, path=22),
        )


if __name__ == "__main__":
    unittest.main()
