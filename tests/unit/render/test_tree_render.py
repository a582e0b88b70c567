"""Tests for ANSI tree line rendering."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazyls.listing import ClassifiedEntry, EntryKind, TreeNode
from lazyls.render import build_tree_lines, format_tree_node, root_label
from lazyls.ui_theme import DEFAULT_THEME, PLAIN_THEME


class TreeLinesTests(unittest.TestCase):
    def test_root_is_emitted_once_before_children(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "b.txt").write_text("b\n", encoding="utf-8")
            (root / "A").mkdir()
            (root / ".hidden").write_text("secret\n", encoding="utf-8")

            lines = list(build_tree_lines(root, show_hidden=False, theme=PLAIN_THEME))

            self.assertEqual(lines, [str(root), "├── A", "└── b.txt"])

    def test_open_ancestors_draw_bar_and_closed_ancestors_draw_blank(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "d").mkdir()
            (root / "d" / "x.txt").write_text("x\n", encoding="utf-8")
            (root / "d" / "y").mkdir()
            (root / "d" / "y" / "deep.txt").write_text("deep\n", encoding="utf-8")
            (root / "e.txt").write_text("e\n", encoding="utf-8")

            lines = list(build_tree_lines(root, show_hidden=False, theme=PLAIN_THEME))

            self.assertEqual(
                lines,
                [
                    str(root),
                    "├── d",
                    "│   ├── y",
                    "│   │   └── deep.txt",
                    "│   └── x.txt",
                    "└── e.txt",
                ],
            )

    def test_last_directory_children_get_blank_continuation(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "only").mkdir()
            (root / "only" / "leaf").write_text("x\n", encoding="utf-8")

            lines = list(build_tree_lines(root, show_hidden=False, theme=PLAIN_THEME))

            self.assertEqual(lines[1:], ["└── only", "    └── leaf"])

    def test_max_depth_limits_rendered_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a" / "b").mkdir(parents=True)

            lines = list(build_tree_lines(root, show_hidden=False, max_depth=0, theme=PLAIN_THEME))

            self.assertEqual(lines[1:], ["└── a"])


class FormatTreeNodeTests(unittest.TestCase):
    def test_directory_name_uses_directory_color(self) -> None:
        node = TreeNode(
            entry=ClassifiedEntry(name="src", path=Path("src"), kind=EntryKind.DIRECTORY),
            depth=1,
            is_last_sibling=False,
            ancestor_is_last=(True,),
        )

        line = format_tree_node(node, DEFAULT_THEME)

        self.assertTrue(line.startswith(DEFAULT_THEME.tree_branch + "    ├── "))
        self.assertIn(f"{DEFAULT_THEME.name_dir}src{DEFAULT_THEME.reset}", line)

    def test_root_label_is_unprefixed(self) -> None:
        self.assertEqual(root_label(Path("."), PLAIN_THEME), ".")
        self.assertEqual(root_label(Path("."), DEFAULT_THEME), f"{DEFAULT_THEME.tree_root}.{DEFAULT_THEME.reset}")


if __name__ == "__main__":
    unittest.main()
