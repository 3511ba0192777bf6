"""Formatting helpers for repository-tree rows."""

from __future__ import annotations

import os
import re

from ..ui_theme import DEFAULT_THEME, UITheme
from .types import ItemType, RepoNode

BRANCH = "├── "
CORNER = "└── "
BRANCH_CONTINUATION = "│   "
CORNER_CONTINUATION = "    "
UNKNOWN_ITEM_SUFFIX = " (unknown item type)"

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control characters so a name stays on one inert row."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group()):02x}", source)


def display_name(name: str) -> str:
    """Return ``name`` as printable text.

    Undecodable bytes that ``os.scandir`` carried as surrogate escapes come
    back as ``\\xNN`` sequences; control characters are escaped the same way.
    """
    try:
        raw = os.fsencode(name)
    except UnicodeEncodeError:
        raw = name.encode("utf-8", "surrogatepass")
    return sanitize_terminal_text(raw.decode("utf-8", "backslashreplace"))


def _styled(text: str, color: str, theme: UITheme) -> str:
    if not color:
        return text
    return f"{color}{text}{theme.reset}"


def format_repo_item(node: RepoNode, theme: UITheme | None = None) -> str:
    """Color a repository name red when dirty and green when clean."""
    active_theme = theme or DEFAULT_THEME
    color = active_theme.repo_dirty if node.is_dirty else active_theme.repo_clean
    return _styled(display_name(node.name), color, active_theme)


def format_item_label(node: RepoNode, theme: UITheme | None = None) -> str:
    """Return the styled label for one node."""
    active_theme = theme or DEFAULT_THEME
    if node.kind is ItemType.FILE:
        return _styled(display_name(node.name), active_theme.tree_file, active_theme)
    if node.kind is ItemType.DIRECTORY:
        return _styled(display_name(node.name), active_theme.tree_dir, active_theme)
    if node.kind is ItemType.REPO_DIRECTORY:
        return format_repo_item(node, active_theme)
    return f"{display_name(node.name)}{UNKNOWN_ITEM_SUFFIX}"


def _child_indent(indent: str, prefix: str) -> str:
    if prefix == BRANCH:
        return indent + BRANCH_CONTINUATION
    if prefix == CORNER:
        return indent + CORNER_CONTINUATION
    return indent


def render_children(node: RepoNode, indent: str, theme: UITheme | None = None) -> list[str]:
    """Render every child of ``node`` with branch/corner glyphs under ``indent``."""
    lines: list[str] = []
    last_index = len(node.children) - 1
    for index, child in enumerate(node.children):
        prefix = CORNER if index == last_index else BRANCH
        lines.extend(render_node(child, indent, prefix, theme))
    return lines


def render_node(
    node: RepoNode,
    indent: str = "",
    prefix: str = "",
    theme: UITheme | None = None,
) -> list[str]:
    """Render ``node`` as one line followed by its subtree, depth-first."""
    lines = [f"{indent}{prefix}{format_item_label(node, theme)}"]
    lines.extend(render_children(node, _child_indent(indent, prefix), theme))
    return lines


def render_repo_tree(root: RepoNode, theme: UITheme | None = None) -> list[str]:
    """Render a whole build result.

    A directory root with children is not printed itself; its children become
    the top-level rows. Any other root is printed alone without a prefix.
    """
    if root.is_directory and root.children:
        return render_children(root, "", theme)
    return render_node(root, "", "", theme)
