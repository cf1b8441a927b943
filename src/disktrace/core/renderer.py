from __future__ import annotations

"""
Tree Renderer.

Converts a parsed transcript tree into a visual ASCII representation
annotated with item sizes.
"""

from typing import List, Tuple

from disktrace.domain.tree_models import Directory, File, Item, get_size

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Directory) -> List[str]:
    """
    Render a tree, root line first.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines: List[str] = [_describe(root)]
    render_tree_structure(root, lines)
    return lines


def render_tree_structure(
        directory: Directory,
        lines: List[str],
        prefix: str = "",
) -> None:
    """
    Append the descendants of `directory` to `lines`.

    Uses standard ASCII connectors (├──, └──) and keeps the transcript
    insertion order of the children. Walks with an explicit stack so deep
    trees do not hit the recursion limit.

    Args:
        directory: Directory whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix of the first level.
    """
    stack: List[Tuple[Item, str, bool]] = _entries(directory, prefix)

    while stack:
        item, item_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{item_prefix}{connector}{_describe(item)}")

        if isinstance(item, Directory):
            child_prefix = item_prefix + ("    " if is_last else "│   ")
            stack.extend(_entries(item, child_prefix))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _entries(directory: Directory, prefix: str) -> List[Tuple[Item, str, bool]]:
    """Stack entries for the children of `directory`, first child on top."""
    total = len(directory.children)
    entries = [
        (child, prefix, i == total - 1)
        for i, child in enumerate(directory.children)
    ]
    entries.reverse()
    return entries


def _describe(item: Item) -> str:
    """Format a single tree entry with its kind and size."""
    if isinstance(item, File):
        return f"{item.name} (file, size={item.size})"
    return f"{item.name} (dir, size={get_size(item)})"
