"""Repository-tree model: node types, recursive builder, and row rendering.

``build_repo_tree`` walks the filesystem into immutable ``RepoNode`` values.
``render_repo_tree`` turns a built tree into box-drawn, colorized rows.
"""

from __future__ import annotations

from .build import build_entry_node, build_repo_tree, classify_item, fold_children
from .rendering import display_name, format_item_label, format_repo_item, render_node, render_repo_tree
from .types import GitStatus, ItemType, RepoNode, TreeOptions

__all__ = [
    "GitStatus",
    "ItemType",
    "RepoNode",
    "TreeOptions",
    "build_entry_node",
    "build_repo_tree",
    "classify_item",
    "display_name",
    "fold_children",
    "format_item_label",
    "format_repo_item",
    "render_node",
    "render_repo_tree",
]
