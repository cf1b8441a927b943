from __future__ import annotations

"""
Transcript Tree Data Models.

Provides the recursive item types (directories and files) reconstructed
from a shell transcript, together with the two primitive operations the
rest of the system relies on: size aggregation and child insertion.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Union

from disktrace.domain.constants import ROOT_NAME
from disktrace.domain.errors import InvalidInsertionError

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class File:
    """
    Leaf entry of the tree.

    Attributes:
        name: File name as listed by `ls`.
        size: Size in bytes.
    """
    name: str
    size: int


@dataclass
class Directory:
    """
    Inner node of the tree. Owns its children exclusively.

    Attributes:
        name: Directory name as listed by `ls` (`/` for the root).
        children: Directories and files in insertion order.
    """
    name: str
    children: List["Item"] = field(default_factory=list)


Item = Union[Directory, File]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def new_root() -> Directory:
    """Create an empty root directory."""
    return Directory(name=ROOT_NAME)


def get_size(item: Item) -> int:
    """
    Compute the size of an item.

    Files report their stored size; directories the sum of every file in
    their subtree. Nothing is cached, every call walks the subtree again.

    Args:
        item: File or directory to measure.

    Returns:
        int: Total size in bytes.
    """
    return sum(f.size for f in iter_files(item))


def add_item(parent: Item, item: Item) -> None:
    """
    Append an item to a directory, keeping insertion order.

    Args:
        parent: Target directory.
        item: Directory or file to attach.

    Raises:
        InvalidInsertionError: If `parent` is a file.
    """
    if not isinstance(parent, Directory):
        raise InvalidInsertionError(
            f"Cannot add '{item.name}' to file '{parent.name}'"
        )
    parent.children.append(item)


def iter_items(item: Item) -> Iterator[Item]:
    """
    Yield every item of a subtree in pre-order, starting with `item`.

    Uses an explicit stack so the nesting depth is not bounded by the
    interpreter recursion limit.
    """
    stack: List[Item] = [item]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, Directory):
            stack.extend(reversed(current.children))


def iter_directories(item: Item) -> Iterator[Directory]:
    """Yield every directory of a subtree in pre-order, starting with `item`."""
    for current in iter_items(item):
        if isinstance(current, Directory):
            yield current


def iter_files(item: Item) -> Iterator[File]:
    """Yield every file of a subtree in pre-order."""
    for current in iter_items(item):
        if isinstance(current, File):
            yield current
