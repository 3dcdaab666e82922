"""Tests for canonical entry datatypes and structural-path traversal."""

from __future__ import annotations

import unittest

from worldviewer.entry_model import (
    DirectoryEntry,
    FileEntry,
    count_entries,
    entry_path,
    find_entry,
    format_entry_path,
    is_record_collection,
    parse_entry_path,
    walk_entries,
)
from worldviewer.errors import InvalidEntry


def _sample_tree() -> DirectoryEntry:
    return DirectoryEntry(
        "root",
        (
            DirectoryEntry("data", (FileEntry("a.bin", 3), DirectoryEntry("data", (FileEntry("b.bin", 5),)))),
            FileEntry("level.dat", 128),
            DirectoryEntry("db", (FileEntry("k1", 4),)),
        ),
    )


class EntryTypeTests(unittest.TestCase):
    def test_entries_expose_kind_tags(self) -> None:
        self.assertEqual(FileEntry("a", 1).kind, "file")
        self.assertEqual(DirectoryEntry("d").kind, "directory")
        self.assertTrue(DirectoryEntry("d").is_dir)
        self.assertFalse(FileEntry("a").is_dir)

    def test_empty_names_are_rejected(self) -> None:
        with self.assertRaises(InvalidEntry):
            FileEntry("", 1)
        with self.assertRaises(InvalidEntry):
            DirectoryEntry("")

    def test_non_string_names_are_rejected(self) -> None:
        with self.assertRaises(InvalidEntry):
            FileEntry(5)  # type: ignore[arg-type]
        with self.assertRaises(InvalidEntry):
            DirectoryEntry(b"db")  # type: ignore[arg-type]

    def test_negative_or_non_integer_sizes_are_rejected(self) -> None:
        with self.assertRaises(InvalidEntry):
            FileEntry("a", -1)
        with self.assertRaises(InvalidEntry):
            FileEntry("a", True)

    def test_structurally_equal_trees_compare_equal(self) -> None:
        self.assertEqual(_sample_tree(), _sample_tree())
        self.assertNotEqual(FileEntry("x", 0), DirectoryEntry("x"))

    def test_path_helpers_round_trip_slash_text(self) -> None:
        path = parse_entry_path("root/db/k1")
        self.assertEqual(path, entry_path("root", "db", "k1"))
        self.assertEqual(format_entry_path(path), "root/db/k1")
        self.assertEqual(parse_entry_path("/root//db/"), ("root", "db"))

    def test_only_root_level_db_is_the_record_collection(self) -> None:
        self.assertTrue(is_record_collection(("root", "db")))
        self.assertFalse(is_record_collection(("root", "data", "db")))
        self.assertFalse(is_record_collection(("db",)))


class WalkTests(unittest.TestCase):
    def test_walk_entries_is_depth_first_in_child_order(self) -> None:
        paths = [path for path, _entry in walk_entries(_sample_tree())]
        self.assertEqual(
            paths,
            [
                ("root",),
                ("root", "data"),
                ("root", "data", "a.bin"),
                ("root", "data", "data"),
                ("root", "data", "data", "b.bin"),
                ("root", "level.dat"),
                ("root", "db"),
                ("root", "db", "k1"),
            ],
        )

    def test_find_entry_distinguishes_same_name_at_different_depths(self) -> None:
        tree = _sample_tree()
        outer = find_entry(tree, ("root", "data"))
        inner = find_entry(tree, ("root", "data", "data"))
        assert isinstance(outer, DirectoryEntry) and isinstance(inner, DirectoryEntry)
        self.assertEqual([child.name for child in outer.children], ["a.bin", "data"])
        self.assertEqual([child.name for child in inner.children], ["b.bin"])

    def test_find_entry_returns_none_for_missing_or_foreign_paths(self) -> None:
        tree = _sample_tree()
        self.assertIsNone(find_entry(tree, ("root", "missing")))
        self.assertIsNone(find_entry(tree, ("other", "data")))
        self.assertIsNone(find_entry(tree, ("root", "level.dat", "child")))
        self.assertIsNone(find_entry(tree, ()))
        self.assertIs(find_entry(tree, ("root",)), tree)

    def test_count_entries(self) -> None:
        self.assertEqual(count_entries(_sample_tree()), (4, 4))


if __name__ == "__main__":
    unittest.main()
