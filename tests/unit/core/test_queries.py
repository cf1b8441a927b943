from __future__ import annotations

"""
Unit tests for the directory size queries.

Covers the small-directory sum, the space-to-free derivation and the
smallest-directory search, including brute-force cross checks.
"""

import pytest

from disktrace.core.queries import (
    find_smallest_directory_to_free,
    smallest_directory_to_free,
    space_to_free,
    sum_small_directories,
)
from disktrace.domain.tree_models import Directory, File, get_size, iter_directories


@pytest.fixture
def nested_tree() -> Directory:
    """
    /            (size 1001)
      big        (size 1000)
        mid      (size 100)
          small  (size 10)
      1 loose
    """
    small = Directory(name="small", children=[File("s", 10)])
    mid = Directory(name="mid", children=[small, File("m", 90)])
    big = Directory(name="big", children=[mid, File("b", 900)])
    return Directory(name="/", children=[big, File("loose", 1)])


# -----------------------------------------------------------------------------
# QUERY A
# -----------------------------------------------------------------------------

def test_sum_small_directories_reference(sample_tree: Directory) -> None:
    assert sum_small_directories(sample_tree, 100000) == 95437


def test_sum_small_directories_default_threshold(sample_tree: Directory) -> None:
    assert sum_small_directories(sample_tree) == 95437


def test_sum_small_directories_counts_nested_directories_at_each_level(
        nested_tree: Directory,
) -> None:
    # small(10) + mid(100), big and root are not below 500
    assert sum_small_directories(nested_tree, 500) == 110


def test_sum_small_directories_threshold_is_exclusive(nested_tree: Directory) -> None:
    assert sum_small_directories(nested_tree, 100) == 10
    assert sum_small_directories(nested_tree, 101) == 110


def test_sum_small_directories_ignores_loose_files(nested_tree: Directory) -> None:
    """The 1-byte file at the root is never counted on its own."""
    assert sum_small_directories(nested_tree, 2) == 0
    assert sum_small_directories(File("f", 1), 100) == 0


def test_sum_small_directories_matches_brute_force(sample_tree: Directory) -> None:
    for threshold in (0, 585, 94854, 100000, 24933643, 10 ** 9):
        expected = sum(
            get_size(d) for d in iter_directories(sample_tree) if get_size(d) < threshold
        )
        assert sum_small_directories(sample_tree, threshold) == expected


# -----------------------------------------------------------------------------
# QUERY B
# -----------------------------------------------------------------------------

def test_space_to_free_reference(sample_tree: Directory) -> None:
    assert space_to_free(sample_tree, 70000000, 30000000) == 8381165
    assert space_to_free(sample_tree) == 8381165


def test_space_to_free_can_be_negative(nested_tree: Directory) -> None:
    assert space_to_free(nested_tree, 10000, 1000) == 1000 - (10000 - 1001)


def test_smallest_directory_reference(sample_tree: Directory) -> None:
    assert smallest_directory_to_free(sample_tree, 8381165) == 24933642

    node, size = find_smallest_directory_to_free(sample_tree, 8381165)
    assert node.name == "d"
    assert size == 24933642


def test_smallest_directory_result_reaches_minimum(nested_tree: Directory) -> None:
    assert smallest_directory_to_free(nested_tree, 50) == 100
    assert smallest_directory_to_free(nested_tree, 100) == 100
    assert smallest_directory_to_free(nested_tree, 101) == 1000
    assert smallest_directory_to_free(nested_tree, 1001) == 1001


def test_smallest_directory_never_selects_files() -> None:
    root = Directory(name="/", children=[
        File("exact", 500),
        Directory(name="sub", children=[File("x", 600)]),
    ])

    assert smallest_directory_to_free(root, 500) == 600


def test_smallest_directory_none_when_nothing_qualifies(nested_tree: Directory) -> None:
    assert smallest_directory_to_free(nested_tree, 5000) is None
    assert find_smallest_directory_to_free(File("f", 10), 1) is None


def test_non_positive_minimum_selects_smallest_directory(nested_tree: Directory) -> None:
    assert smallest_directory_to_free(nested_tree, 0) == 10
    assert smallest_directory_to_free(nested_tree, -5) == 10


def test_smallest_directory_matches_brute_force(sample_tree: Directory) -> None:
    sizes = [get_size(d) for d in iter_directories(sample_tree)]
    for minimum in (0, 584, 585, 94853, 94854, 8381165, 24933643, 48381165):
        candidates = [s for s in sizes if s >= minimum]
        result = smallest_directory_to_free(sample_tree, minimum)
        assert result == min(candidates)
        assert result >= minimum


def test_smallest_directory_tie_keeps_directory_met_first() -> None:
    only_child = Directory(name="only", children=[File("x", 50)])
    root = Directory(name="/", children=[only_child])

    node, size = find_smallest_directory_to_free(root, 10)
    assert node is root
    assert size == 50


# -----------------------------------------------------------------------------
# DEEP TREES
# -----------------------------------------------------------------------------

def test_queries_on_deeply_nested_tree() -> None:
    """Nesting far beyond the interpreter recursion limit is supported."""
    depth = 3000
    leaf = Directory(name=f"d{depth}", children=[File("x", 5)])
    current = leaf
    for level in range(depth - 1, 0, -1):
        current = Directory(name=f"d{level}", children=[current])
    root = Directory(name="/", children=[current])

    assert get_size(root) == 5
    assert sum_small_directories(root, 100) == 5 * (depth + 1)
    node, size = find_smallest_directory_to_free(root, 5)
    assert node is root
    assert size == 5
