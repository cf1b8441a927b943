from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies connectors, indentation and size annotations.
"""

from disktrace.core.renderer import render_tree
from disktrace.domain.tree_models import Directory, File, new_root


def test_render_reference_tree(sample_tree: Directory) -> None:
    lines = render_tree(sample_tree)

    assert lines == [
        "/ (dir, size=48381165)",
        "├── a (dir, size=94853)",
        "│   ├── e (dir, size=584)",
        "│   │   └── i (file, size=584)",
        "│   ├── f (file, size=29116)",
        "│   ├── g (file, size=2557)",
        "│   └── h.lst (file, size=62596)",
        "├── b.txt (file, size=14848514)",
        "├── c.dat (file, size=8504156)",
        "└── d (dir, size=24933642)",
        "    ├── j (file, size=4060174)",
        "    ├── d.log (file, size=8033020)",
        "    ├── d.ext (file, size=5626152)",
        "    └── k (file, size=7214296)",
    ]


def test_render_empty_root() -> None:
    assert render_tree(new_root()) == ["/ (dir, size=0)"]


def test_render_keeps_insertion_order() -> None:
    root = Directory(name="/", children=[File("z", 1), File("a", 2)])

    assert render_tree(root)[1:] == ["├── z (file, size=1)", "└── a (file, size=2)"]
