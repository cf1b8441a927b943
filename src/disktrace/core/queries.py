from __future__ import annotations

"""
Directory Size Queries.

Read-only traversals over a parsed tree. Sizes are recomputed on every
visit through `get_size`; the tree carries no cached totals.
"""

import math
from typing import Optional, Tuple, Union

from disktrace.domain.constants import (
    DEFAULT_DISK_CAPACITY,
    DEFAULT_NEEDED_FREE_SPACE,
    DEFAULT_SIZE_THRESHOLD,
)
from disktrace.domain.tree_models import Directory, Item, get_size, iter_directories

# -----------------------------------------------------------------------------
# QUERY A: BOUNDED-SIZE DIRECTORY SUM
# -----------------------------------------------------------------------------

def sum_small_directories(item: Item, threshold: int = DEFAULT_SIZE_THRESHOLD) -> int:
    """
    Sum the sizes of all directories strictly smaller than `threshold`.

    Pre-order walk: each directory is measured once and counted if it is
    under the threshold. Nested directories are counted at every level they
    qualify, so a file may be accounted for more than once through its
    ancestors.

    Args:
        item: Subtree root. A file yields 0.
        threshold: Exclusive upper bound on a directory size.

    Returns:
        int: Sum of qualifying directory sizes.
    """
    total = 0
    for directory in iter_directories(item):
        size = get_size(directory)
        if size < threshold:
            total += size
    return total

# -----------------------------------------------------------------------------
# QUERY B: SMALLEST DIRECTORY TO FREE SPACE
# -----------------------------------------------------------------------------

def space_to_free(
        root: Item,
        disk_capacity: int = DEFAULT_DISK_CAPACITY,
        needed_free_space: int = DEFAULT_NEEDED_FREE_SPACE,
) -> int:
    """
    Compute how much space must be released to reach `needed_free_space`.

    Zero or negative when the disk already has enough free space.
    """
    free_space = disk_capacity - get_size(root)
    return needed_free_space - free_space


def smallest_directory_to_free(item: Item, minimum: int) -> Optional[int]:
    """
    Find the size of the smallest directory whose size is at least `minimum`.

    Args:
        item: Subtree root.
        minimum: Space that deleting the directory must release.

    Returns:
        Optional[int]: Size of the best directory, or None if none qualifies.
    """
    found = find_smallest_directory_to_free(item, minimum)
    if found is None:
        return None
    return found[1]


def find_smallest_directory_to_free(
        item: Item,
        minimum: int,
) -> Optional[Tuple[Directory, int]]:
    """
    Locate the smallest directory whose size is at least `minimum`.

    Directories are visited in pre-order and a candidate only replaces the
    current best when strictly smaller, so on ties the directory met first
    (an ancestor, or an earlier sibling) is kept.

    Args:
        item: Subtree root.
        minimum: Space that deleting the directory must release.

    Returns:
        Optional[Tuple[Directory, int]]: The directory and its size, or None.
    """
    best_node: Optional[Directory] = None
    best_size: Union[int, float] = math.inf

    for directory in iter_directories(item):
        size = get_size(directory)
        if minimum <= size < best_size:
            best_node, best_size = directory, size

    if best_node is None:
        return None
    return best_node, int(best_size)
