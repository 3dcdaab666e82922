"""Tests for raw backend result normalization and the synthetic db directory."""

from __future__ import annotations

import copy
import unittest

from worldviewer.entry_model import (
    RECORDS_DIRECTORY_NAME,
    DirectoryEntry,
    FileEntry,
    find_entry,
    install_record_collection,
    normalize,
)
from worldviewer.errors import InvalidEntry

END_TO_END_RAW = {
    "root": {
        "kind": "directory",
        "name": "root",
        "children": [{"kind": "file", "name": "level.dat", "size": 128}],
    },
    "records": [{"name": "k1", "size": 4}, {"name": "k2", "size": 9}],
}


class NormalizeShapeTests(unittest.TestCase):
    def test_root_object_with_records_builds_db_directory(self) -> None:
        tree = normalize(END_TO_END_RAW)

        self.assertEqual(
            tree,
            DirectoryEntry(
                "root",
                (
                    FileEntry("level.dat", 128),
                    DirectoryEntry("db", (FileEntry("k1", 4), FileEntry("k2", 9))),
                ),
            ),
        )

    def test_none_becomes_empty_root(self) -> None:
        self.assertEqual(normalize(None), DirectoryEntry("root", ()))
        self.assertEqual(normalize(None, root_name="world"), DirectoryEntry("world", ()))

    def test_result_without_root_still_gets_record_directory(self) -> None:
        tree = normalize({"root": None, "db_keys": ["a", "b"]})
        self.assertEqual(
            tree,
            DirectoryEntry("root", (DirectoryEntry("db", (FileEntry("a", 0), FileEntry("b", 0))),)),
        )

    def test_absent_records_give_empty_db_directory(self) -> None:
        tree = normalize({"root": []})
        self.assertEqual(tree, DirectoryEntry("root", (DirectoryEntry("db", ()),)))

    def test_root_array_of_type_tagged_entries(self) -> None:
        raw = {
            "root": [
                {"type": "directory", "name": "behavior_packs", "children": [
                    {"type": "file", "name": "manifest.json", "size": 10},
                ]},
                {"type": "file", "name": "levelname.txt", "size": 7},
            ],
            "db_keys": [{"name": "~local_player", "size": 300}],
        }
        tree = normalize(raw)
        self.assertEqual([child.name for child in tree.children], ["behavior_packs", "levelname.txt", "db"])
        manifest = find_entry(tree, ("root", "behavior_packs", "manifest.json"))
        self.assertEqual(manifest, FileEntry("manifest.json", 10))

    def test_flat_list_with_directory_flags_and_optional_children(self) -> None:
        raw = [
            {"name": "resource_packs", "is_dir": True},
            {"name": "nested", "isDirectory": True, "children": [{"name": "x", "size": 1}]},
            {"name": "world_icon.jpeg", "is_dir": False, "size": 2048},
        ]
        tree = normalize(raw)
        self.assertEqual(
            tree.children[:3],
            (
                DirectoryEntry("resource_packs", ()),
                DirectoryEntry("nested", (FileEntry("x", 1),)),
                FileEntry("world_icon.jpeg", 2048),
            ),
        )

    def test_children_key_marks_untagged_directories(self) -> None:
        tree = normalize({"root": [{"name": "d", "children": []}, {"name": "f"}]})
        self.assertIsInstance(tree.children[0], DirectoryEntry)
        self.assertEqual(tree.children[1], FileEntry("f", 0))

    def test_legacy_files_list_becomes_root_children(self) -> None:
        tree = normalize({"files": [{"name": "a", "size": 1}], "db_keys": ["k"]})
        self.assertEqual(tree.children, (FileEntry("a", 1), DirectoryEntry("db", (FileEntry("k", 0),))))

    def test_root_object_without_name_uses_root_name(self) -> None:
        tree = normalize({"children": [{"kind": "file", "name": "a"}]}, root_name="world")
        self.assertEqual(tree.name, "world")
        self.assertEqual(tree.children[0], FileEntry("a", 0))

    def test_child_order_is_preserved_without_sorting(self) -> None:
        names = ["zeta", "alpha", "Mid", "beta"]
        tree = normalize({"root": [{"kind": "file", "name": name} for name in names]})
        self.assertEqual([child.name for child in tree.children][:4], names)

    def test_duplicate_sibling_names_are_kept(self) -> None:
        tree = normalize({"root": [{"kind": "file", "name": "a"}, {"kind": "file", "name": "a", "size": 2}]})
        self.assertEqual(tree.children[:2], (FileEntry("a", 0), FileEntry("a", 2)))

    def test_root_object_carrying_its_own_records_keeps_children(self) -> None:
        tree = normalize(
            {
                "kind": "directory",
                "name": "root",
                "children": [{"kind": "file", "name": "level.dat", "size": 128}],
                "db_keys": [{"name": "k1", "size": 4}],
            }
        )
        self.assertEqual(
            tree,
            DirectoryEntry("root", (FileEntry("level.dat", 128), DirectoryEntry("db", (FileEntry("k1", 4),)))),
        )

    def test_untagged_root_object_with_records_keeps_children(self) -> None:
        tree = normalize({"children": [{"name": "a", "size": 1}], "records": ["k"]})
        self.assertEqual(tree.children, (FileEntry("a", 1), DirectoryEntry("db", (FileEntry("k", 0),))))

    def test_records_only_result_still_gets_empty_root(self) -> None:
        tree = normalize({"records": ["k"]})
        self.assertEqual(tree, DirectoryEntry("root", (DirectoryEntry("db", (FileEntry("k", 0),)),)))

    def test_file_tagged_root_with_records_is_rejected(self) -> None:
        with self.assertRaises(InvalidEntry):
            normalize({"kind": "file", "name": "root", "db_keys": []})


class NormalizeRecordCollectionTests(unittest.TestCase):
    def test_existing_db_directory_is_replaced_not_merged(self) -> None:
        raw = {
            "root": [
                {"kind": "file", "name": "level.dat", "size": 1},
                {"kind": "directory", "name": "db", "children": [
                    {"kind": "file", "name": "CURRENT", "size": 16},
                    {"kind": "file", "name": "MANIFEST-000001", "size": 64},
                ]},
                {"kind": "file", "name": "levelname.txt", "size": 2},
            ],
            "records": [{"name": f"key-{idx}", "size": idx} for idx in range(5)],
        }
        tree = normalize(raw)

        db_entries = [child for child in tree.children if child.name == RECORDS_DIRECTORY_NAME]
        self.assertEqual(len(db_entries), 1)
        db = db_entries[0]
        assert isinstance(db, DirectoryEntry)
        self.assertEqual([child.name for child in db.children], [f"key-{idx}" for idx in range(5)])
        # Replaced in place.
        self.assertEqual([child.name for child in tree.children], ["level.dat", "db", "levelname.txt"])

    def test_duplicate_root_db_entries_collapse_to_one(self) -> None:
        root = DirectoryEntry("root", (FileEntry("db", 1), DirectoryEntry("db"), FileEntry("x")))
        tree = install_record_collection(root, (FileEntry("k", 1),))
        self.assertEqual(tree.children, (DirectoryEntry("db", (FileEntry("k", 1),)), FileEntry("x")))

    def test_nested_db_directories_are_untouched(self) -> None:
        raw = {"root": [{"kind": "directory", "name": "pack", "children": [
            {"kind": "directory", "name": "db", "children": [{"kind": "file", "name": "inner"}]},
        ]}]}
        tree = normalize(raw)
        self.assertEqual(find_entry(tree, ("root", "pack", "db", "inner")), FileEntry("inner", 0))

    def test_record_size_defaults_to_zero(self) -> None:
        tree = normalize({"root": [], "records": [{"name": "k"}]})
        self.assertEqual(find_entry(tree, ("root", "db", "k")), FileEntry("k", 0))


class NormalizeInvariantTests(unittest.TestCase):
    def test_normalizing_same_input_twice_is_structurally_equal(self) -> None:
        self.assertEqual(normalize(END_TO_END_RAW), normalize(END_TO_END_RAW))

    def test_normalizing_a_canonical_tree_returns_an_equal_tree(self) -> None:
        tree = normalize(END_TO_END_RAW)
        self.assertEqual(normalize(tree), tree)

    def test_input_is_not_mutated(self) -> None:
        raw = copy.deepcopy(END_TO_END_RAW)
        normalize(raw)
        self.assertEqual(raw, END_TO_END_RAW)

    def test_empty_name_is_rejected_with_path(self) -> None:
        raw = {"root": [{"kind": "directory", "name": "a", "children": [{"kind": "file", "name": ""}]}]}
        with self.assertRaises(InvalidEntry) as ctx:
            normalize(raw)
        self.assertEqual(ctx.exception.path, ("root", "a", "[0]"))

    def test_empty_record_name_is_rejected(self) -> None:
        with self.assertRaises(InvalidEntry):
            normalize({"root": [], "records": [{"name": "", "size": 1}]})

    def test_invalid_sizes_are_rejected(self) -> None:
        with self.assertRaises(InvalidEntry):
            normalize({"root": [{"kind": "file", "name": "a", "size": -1}]})
        with self.assertRaises(InvalidEntry):
            normalize({"root": [{"kind": "file", "name": "a", "size": "12"}]})

    def test_unknown_kind_is_rejected(self) -> None:
        with self.assertRaises(InvalidEntry):
            normalize({"root": [{"kind": "symlink", "name": "a"}]})

    def test_file_root_is_rejected(self) -> None:
        with self.assertRaises(InvalidEntry):
            normalize({"root": {"kind": "file", "name": "root"}})

    def test_unsupported_shapes_are_rejected(self) -> None:
        with self.assertRaises(InvalidEntry):
            normalize({"root": [42]})
        with self.assertRaises(InvalidEntry):
            normalize({"root": [{"kind": "directory", "name": "d", "children": "oops"}]})


if __name__ == "__main__":
    unittest.main()
