# !/usr/bin/python
# coding=utf-8
"""Tests for poly_stats.sorter."""
import unittest

from poly_stats.models import AggregateEntry, SortKey
from poly_stats.sorter import SORT_KEYS, sort_entries


def entry(name, verts=100, tris=50, lod=0, count=1):
    return AggregateEntry(name=name, min_lod=lod, vertex_count=verts, triangle_count=tris, count=count)


def names(entries):
    return [e.name for e in entries]


class TestSortEntries(unittest.TestCase):

    def setUp(self):
        self.entries = [
            entry("Bush", verts=300, tris=100, lod=2, count=1),    # total 300 / 100
            entry("Alpha", verts=50, tris=40, lod=0, count=10),    # total 500 / 400
            entry("Cliff", verts=1000, tris=600, lod=1, count=2),  # total 2000 / 1200
        ]

    def test_every_key_has_an_extractor(self):
        self.assertEqual(set(SORT_KEYS), set(SortKey))

    def test_default_is_total_verts_descending(self):
        self.assertEqual(names(sort_entries(self.entries)), ["Cliff", "Alpha", "Bush"])

    def test_keys_ascending(self):
        expected = {
            SortKey.NAME: ["Alpha", "Bush", "Cliff"],
            SortKey.MIN_LOD: ["Alpha", "Cliff", "Bush"],
            SortKey.VERT: ["Alpha", "Bush", "Cliff"],
            SortKey.TRI: ["Alpha", "Bush", "Cliff"],
            SortKey.COUNT: ["Bush", "Cliff", "Alpha"],
            SortKey.TOTAL_VERT: ["Bush", "Alpha", "Cliff"],
            SortKey.TOTAL_TRI: ["Bush", "Alpha", "Cliff"],
        }
        for key, order in expected.items():
            with self.subTest(key=key):
                self.assertEqual(names(sort_entries(self.entries, key, descending=False)), order)

    def test_descending_reverses_unequal_keys(self):
        for key in SortKey:
            with self.subTest(key=key):
                ascending = names(sort_entries(self.entries, key, descending=False))
                descending = names(sort_entries(self.entries, key, descending=True))
                self.assertEqual(descending, list(reversed(ascending)))

    def test_accepts_key_value_strings(self):
        self.assertEqual(names(sort_entries(self.entries, "name", descending=True)), ["Cliff", "Bush", "Alpha"])

    def test_name_sort_ignores_case(self):
        entries = [entry("apple"), entry("Banana"), entry("cherry")]
        self.assertEqual(
            names(sort_entries(entries, SortKey.NAME, descending=False)),
            ["apple", "Banana", "cherry"],
        )
        self.assertEqual(
            names(sort_entries(entries, SortKey.NAME, descending=True)),
            ["cherry", "Banana", "apple"],
        )

    def test_names_differing_only_in_case(self):
        entries = [entry("rock"), entry("Rock10"), entry("Rock"), entry("Rock2")]
        self.assertEqual(
            names(sort_entries(entries, SortKey.NAME, descending=False)),
            ["Rock", "rock", "Rock10", "Rock2"],
        )

    def test_ties_keep_input_order_descending(self):
        entries = [
            entry("First", verts=100, count=2),
            entry("Big", verts=1000, count=1),
            entry("Second", verts=200, count=1),
        ]
        self.assertEqual(
            names(sort_entries(entries, SortKey.TOTAL_VERT, descending=True)),
            ["Big", "First", "Second"],
        )

    def test_ties_keep_input_order_ascending(self):
        entries = [entry("X", lod=1), entry("Y", lod=0), entry("Z", lod=1)]
        self.assertEqual(
            names(sort_entries(entries, SortKey.MIN_LOD, descending=False)),
            ["Y", "X", "Z"],
        )

    def test_large_totals(self):
        entries = [
            entry("Huge", verts=4_000_000_000, count=3),
            entry("Small", verts=10, count=1),
        ]
        ordered = sort_entries(entries, SortKey.TOTAL_VERT, descending=True)
        self.assertEqual(names(ordered), ["Huge", "Small"])
        self.assertEqual(ordered[0].total_verts, 12_000_000_000)

    def test_input_is_not_modified(self):
        before = names(self.entries)
        sort_entries(self.entries, SortKey.NAME)
        self.assertEqual(names(self.entries), before)


if __name__ == "__main__":
    unittest.main()
