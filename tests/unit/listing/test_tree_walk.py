"""Tests for the depth-bounded pre-order tree walk."""

from __future__ import annotations

import os
import sys
import tempfile
import unittest
from pathlib import Path

from lazyls.listing import EntryKind, TreeNode, iter_tree_nodes, tree_sort_key
from lazyls.listing.types import TREE_BLANK, TREE_BRANCH, TREE_LAST, TREE_PIPE


def _prefix_to_ancestors(prefix: str) -> tuple[bool, ...]:
    width = len(TREE_BLANK)
    segments = [prefix[idx : idx + width] for idx in range(0, len(prefix), width)]
    for segment in segments:
        assert segment in (TREE_BLANK, TREE_PIPE), segment
    return tuple(segment == TREE_BLANK for segment in segments)


def _make_nested_tree(root: Path) -> None:
    (root / "d1" / "x").mkdir(parents=True)
    (root / "d1" / "x" / "f1").write_text("1\n", encoding="utf-8")
    (root / "d1" / "x" / "f2").write_text("2\n", encoding="utf-8")
    (root / "d1" / "y").write_text("y\n", encoding="utf-8")
    (root / "d2").mkdir()
    (root / "d2" / "z").write_text("z\n", encoding="utf-8")
    (root / "file").write_text("f\n", encoding="utf-8")


class TreeWalkTests(unittest.TestCase):
    def test_scenario_lists_directory_first_with_branch_then_terminal_connector(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "b.txt").write_text("b\n", encoding="utf-8")
            (root / "A").mkdir()
            (root / ".hidden").write_text("secret\n", encoding="utf-8")

            nodes = list(iter_tree_nodes(root, show_hidden=False))

            self.assertEqual([node.entry.name for node in nodes], ["A", "b.txt"])
            self.assertEqual(nodes[0].connector, TREE_BRANCH)
            self.assertEqual(nodes[1].connector, TREE_LAST)
            self.assertTrue(all(node.depth == 0 for node in nodes))

    def test_walk_is_pre_order_with_directories_first_at_each_level(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_nested_tree(root)

            nodes = list(iter_tree_nodes(root, show_hidden=False))

            self.assertEqual(
                [(node.entry.name, node.depth) for node in nodes],
                [("d1", 0), ("x", 1), ("f1", 2), ("f2", 2), ("y", 1), ("d2", 0), ("z", 1), ("file", 0)],
            )

    def test_prefix_reconstructs_ancestor_last_sibling_chain(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_nested_tree(root)

            nodes = list(iter_tree_nodes(root, show_hidden=False))
            is_last_by_path = {node.entry.path: node.is_last_sibling for node in nodes}

            for node in nodes:
                relative = node.entry.path.relative_to(root)
                ancestor_paths = [root / parent for parent in reversed(relative.parents) if parent != Path(".")]
                expected = tuple(is_last_by_path[path] for path in ancestor_paths)
                self.assertEqual(node.ancestor_is_last, expected)
                self.assertEqual(_prefix_to_ancestors(node.prefix), expected)
                self.assertEqual(len(node.ancestor_is_last), node.depth)

    def test_directory_at_max_depth_is_listed_but_not_expanded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a" / "b" / "c" / "d").mkdir(parents=True)

            depth_one = list(iter_tree_nodes(root, show_hidden=False, max_depth=1))
            depth_zero = list(iter_tree_nodes(root, show_hidden=False, max_depth=0))

            self.assertEqual([node.entry.name for node in depth_one], ["a", "b"])
            self.assertTrue(all(node.depth <= 1 for node in depth_one))
            self.assertEqual([node.entry.name for node in depth_zero], ["a"])

    def test_negative_max_depth_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ValueError):
                list(iter_tree_nodes(Path(tmp), show_hidden=False, max_depth=-1))

    def test_hidden_directories_are_not_descended(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".git" / "objects").mkdir(parents=True)
            (root / "src").mkdir()

            hidden_off = [node.entry.name for node in iter_tree_nodes(root, show_hidden=False)]
            hidden_on = [node.entry.name for node in iter_tree_nodes(root, show_hidden=True)]

            self.assertEqual(hidden_off, ["src"])
            self.assertEqual(hidden_on, [".git", "objects", "src"])

    @unittest.skipUnless(hasattr(os, "symlink") and os.name == "posix", "requires POSIX symlinks")
    def test_symlink_cycle_is_bounded_by_depth_cap(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            os.symlink(root, root / "loop")

            nodes = list(iter_tree_nodes(root, show_hidden=False, max_depth=3))

            self.assertEqual([node.depth for node in nodes], [0, 1, 2, 3])
            self.assertTrue(all(node.entry.name == "loop" for node in nodes))

    @unittest.skipUnless(hasattr(os, "symlink") and os.name == "posix", "requires POSIX symlinks")
    def test_entry_with_unknown_kind_is_a_leaf(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            os.symlink(root / "nowhere", root / "dangling")

            (node,) = list(iter_tree_nodes(root, show_hidden=False))

            self.assertIs(node.entry.kind, EntryKind.FILE)
            self.assertTrue(node.is_last_sibling)

    @unittest.skipUnless(sys.platform.startswith("linux"), "requires byte-oriented file names")
    def test_undecodable_siblings_sort_by_raw_bytes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            raw_names = [b"b", b"a\xff", b"a\xfe"]
            try:
                for raw_name in raw_names:
                    with open(os.path.join(os.fsencode(tmp), raw_name), "wb") as handle:
                        handle.write(b"x")
            except OSError:
                self.skipTest("filesystem rejects non-UTF-8 names")

            nodes = list(iter_tree_nodes(Path(tmp), show_hidden=False))

            emitted = [os.fsencode(node.entry.path.name) for node in nodes]
            self.assertEqual(emitted, sorted(raw_names))
            self.assertEqual(len({tree_sort_key(node.entry) for node in nodes}), len(raw_names))

    def test_tree_nodes_are_immutable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "only").write_text("x\n", encoding="utf-8")
            (node,) = list(iter_tree_nodes(Path(tmp), show_hidden=False))
            self.assertIsInstance(node, TreeNode)
            with self.assertRaises(AttributeError):
                node.depth = 5  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
