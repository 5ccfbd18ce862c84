"""Rich rendering utilities for graph commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.tree import Tree

if TYPE_CHECKING:
    from rich.console import Console

    from .graph_query import SortResult, TreeNode


def render_order(result: SortResult, console: Console) -> None:
    """Print a sort result, one key per line.

    Args:
        result: SortResult to render.
        console: Rich Console to output to.

    """
    for key in result.order:
        console.print(key, markup=False, highlight=False)


def render_tree(tree_node: TreeNode, console: Console) -> None:
    """Render a dependency tree using Rich Tree.

    Args:
        tree_node: TreeNode root to render.
        console: Rich Console to output to.

    """
    rich_tree = Tree(f"[bold]{escape(tree_node.key)}[/bold]")
    _add_tree_children(rich_tree, tree_node.children)
    console.print(rich_tree)


def _add_tree_children(parent: Tree, children: list[TreeNode]) -> None:
    for child in children:
        child_tree = parent.add(escape(child.key))
        _add_tree_children(child_tree, child.children)
