from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides the reference transcript and trees built from it.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from disktrace.core.parser import parse_transcript  # noqa: E402
from disktrace.domain.tree_models import Directory  # noqa: E402

SAMPLE_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_transcript() -> str:
    """Return the reference transcript (root size 48381165)."""
    return SAMPLE_TRANSCRIPT


@pytest.fixture
def sample_tree() -> Directory:
    """Return the tree rebuilt from the reference transcript."""
    return parse_transcript(SAMPLE_TRANSCRIPT)


@pytest.fixture
def transcript_file(tmp_path: Path) -> Path:
    """Write the reference transcript to disk and return its path."""
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE_TRANSCRIPT, encoding="utf-8")
    return path
