"""Tests for repository-tree row rendering and theme colors."""

from __future__ import annotations

import unittest

from repotree.tree_model import (
    GitStatus,
    ItemType,
    RepoNode,
    display_name,
    format_item_label,
    render_node,
    render_repo_tree,
)
from repotree.ui_theme import CLASSIC_THEME, DEFAULT_THEME, PLAIN_THEME


def _file(name: str) -> RepoNode:
    return RepoNode(name=name, kind=ItemType.FILE)


def _dir(name: str, *children: RepoNode) -> RepoNode:
    return RepoNode(name=name, kind=ItemType.DIRECTORY, children=tuple(children))


def _repo(name: str, status: GitStatus, *children: RepoNode) -> RepoNode:
    return RepoNode(
        name=name,
        kind=ItemType.REPO_DIRECTORY,
        children=tuple(children),
        all_paths_lead_to_repo=not children,
        git_status=status,
    )


class RenderRepoTreeTests(unittest.TestCase):
    def test_directory_root_is_suppressed_and_children_drawn(self) -> None:
        root = _dir("mock_cwd", _dir("dir1", _file("file1.txt")), _dir("dir2"))

        lines = render_repo_tree(root, PLAIN_THEME)

        self.assertEqual(lines, ["├── dir1", "│   └── file1.txt", "└── dir2"])

    def test_last_child_descendants_use_blank_continuation(self) -> None:
        root = _dir(
            "root",
            _file("a.txt"),
            _dir("b", _dir("c", _file("d.txt"), _file("e.txt"))),
        )

        lines = render_repo_tree(root, PLAIN_THEME)

        self.assertEqual(
            lines,
            [
                "├── a.txt",
                "└── b",
                "    └── c",
                "        ├── d.txt",
                "        └── e.txt",
            ],
        )

    def test_nested_branch_continuations_stack(self) -> None:
        root = _dir(
            "root",
            _dir("x", _dir("y", _file("z.txt")), _file("w.txt")),
            _file("last.txt"),
        )

        lines = render_repo_tree(root, PLAIN_THEME)

        self.assertEqual(
            lines,
            [
                "├── x",
                "│   ├── y",
                "│   │   └── z.txt",
                "│   └── w.txt",
                "└── last.txt",
            ],
        )

    def test_single_file_root_renders_alone(self) -> None:
        self.assertEqual(render_repo_tree(_file("only.txt"), PLAIN_THEME), ["only.txt"])

    def test_empty_directory_root_renders_alone(self) -> None:
        self.assertEqual(render_repo_tree(_dir("empty"), PLAIN_THEME), ["empty"])

    def test_render_node_with_prefix_prints_node_line(self) -> None:
        node = _dir("sub", _file("f"))

        self.assertEqual(render_node(node, "│   ", "├── ", PLAIN_THEME), ["│   ├── sub", "│   │   └── f"])


class FormatItemLabelTests(unittest.TestCase):
    def test_file_and_directory_use_fixed_colors(self) -> None:
        theme = DEFAULT_THEME
        self.assertEqual(format_item_label(_file("a.py"), theme), f"{theme.tree_file}a.py{theme.reset}")
        self.assertEqual(format_item_label(_dir("src"), theme), f"{theme.tree_dir}src{theme.reset}")

    def test_clean_repository_uses_clean_color(self) -> None:
        node = _repo("repo", GitStatus(has_working_changes=False, has_unpushed_changes=False, ahead_by=0))
        self.assertEqual(format_item_label(node, CLASSIC_THEME), "\033[32mrepo\033[0m")

    def test_repository_without_upstream_is_clean(self) -> None:
        node = _repo("repo", GitStatus(has_working_changes=False))
        self.assertEqual(format_item_label(node, CLASSIC_THEME), "\033[32mrepo\033[0m")

    def test_working_changes_make_repository_dirty(self) -> None:
        node = _repo("repo", GitStatus(has_working_changes=True, has_uncommitted_changes=True))
        self.assertEqual(format_item_label(node, CLASSIC_THEME), "\033[31mrepo\033[0m")

    def test_unpushed_commits_make_repository_dirty(self) -> None:
        node = _repo("repo", GitStatus(has_working_changes=False, has_unpushed_changes=True, ahead_by=3))
        self.assertEqual(format_item_label(node, CLASSIC_THEME), "\033[31mrepo\033[0m")

    def test_unknown_kind_gets_marker_and_no_style(self) -> None:
        node = RepoNode(name="fifo", kind=ItemType.UNKNOWN)
        self.assertEqual(format_item_label(node, DEFAULT_THEME), "fifo (unknown item type)")

    def test_plain_theme_emits_no_escapes(self) -> None:
        root = _dir("r", _repo("dirty", GitStatus(has_working_changes=True)), _file("f"))
        for line in render_repo_tree(root, PLAIN_THEME):
            self.assertNotIn("\033", line)

    def test_colors_wrap_name_only_not_prefix(self) -> None:
        root = _dir("r", _file("a"), _repo("b", GitStatus(has_working_changes=False)))

        lines = render_repo_tree(root, CLASSIC_THEME)

        self.assertEqual(lines, ["├── \033[30ma\033[0m", "└── \033[32mb\033[0m"])


class DisplayNameTests(unittest.TestCase):
    def test_undecodable_bytes_are_shown_as_hex_escapes(self) -> None:
        self.assertEqual(display_name("bad\udcffname"), "bad\\xffname")

    def test_control_characters_are_escaped(self) -> None:
        self.assertEqual(display_name("evil\nname\x1b[2J"), "evil\\x0aname\\x1b[2J")
        self.assertEqual(display_name("tab\there\x7f\x9b"), "tab\\x09here\\x7f\\x9b")

    def test_ordinary_unicode_names_are_unchanged(self) -> None:
        self.assertEqual(display_name("caf\u00e9 \u2603.txt"), "caf\u00e9 \u2603.txt")

    def test_each_node_stays_on_one_row(self) -> None:
        root = _dir("r", _file("evil\nname\x1b[2J"), _repo("bad\udcffrepo", GitStatus(has_working_changes=True)))

        lines = render_repo_tree(root, CLASSIC_THEME)

        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[0], "├── \033[30mevil\\x0aname\\x1b[2J\033[0m")
        self.assertEqual(lines[1], "└── \033[31mbad\\xffrepo\033[0m")
        self.assertEqual("\n".join(lines).encode("utf-8").count(b"\n"), 1)

    def test_unknown_kind_name_is_escaped(self) -> None:
        node = RepoNode(name="pipe\r", kind=ItemType.UNKNOWN)
        self.assertEqual(format_item_label(node, DEFAULT_THEME), "pipe\\x0d (unknown item type)")


if __name__ == "__main__":
    unittest.main()
