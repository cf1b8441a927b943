from __future__ import annotations

"""
Analysis Domain Data Models.

Defines the result structure passed from the analysis engine to the
interface layer, plus factory functions for success and failure.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Unified result of one transcript analysis.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Transcript that was analyzed ("" for in-memory text).
        threshold: Exclusive size bound used by the small-directory sum.
        disk_capacity: Total disk size.
        needed_free_space: Free space required after deletion.
        small_directories_total: Sum of directory sizes under `threshold`.
        root_size: Size of the root directory.
        space_to_free: Space that must be released.
        smallest_directory_size: Size of the directory to delete, if any.
        smallest_directory_name: Name of the directory to delete, if any.
        directory_count: Number of directories including the root.
        file_count: Number of files.
        tree_lines: Rendered tree, when requested.
    """
    ok: bool
    error: str

    input_path: str
    threshold: int
    disk_capacity: int
    needed_free_space: int

    small_directories_total: int = 0
    root_size: int = 0
    space_to_free: int = 0
    smallest_directory_size: Optional[int] = None
    smallest_directory_name: Optional[str] = None

    directory_count: int = 0
    file_count: int = 0
    tree_lines: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str, cfg: Dict[str, Any]) -> AnalysisResult:
    """
    Create a failed analysis result.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.

    Returns:
        AnalysisResult: An immutable error result object.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        input_path=cfg.get("input_path", ""),
        threshold=cfg.get("threshold", 0),
        disk_capacity=cfg.get("disk_capacity", 0),
        needed_free_space=cfg.get("needed_free_space", 0),
    )


def create_success_result(
        cfg: Dict[str, Any],
        small_directories_total: int,
        root_size: int,
        space_to_free: int,
        smallest_directory_size: Optional[int],
        smallest_directory_name: Optional[str],
        directory_count: int,
        file_count: int,
        tree_lines: Optional[List[str]] = None,
) -> AnalysisResult:
    """
    Create a successful analysis result.

    Args:
        cfg: Final configuration used during execution.
        small_directories_total: Query A result.
        root_size: Total used space.
        space_to_free: Derived amount of space to release.
        smallest_directory_size: Query B result.
        smallest_directory_name: Name of the Query B directory.
        directory_count: Directories in the tree.
        file_count: Files in the tree.
        tree_lines: Optional rendered tree.

    Returns:
        AnalysisResult: An immutable success result object.
    """
    return AnalysisResult(
        ok=True,
        error="",
        input_path=cfg.get("input_path", ""),
        threshold=cfg["threshold"],
        disk_capacity=cfg["disk_capacity"],
        needed_free_space=cfg["needed_free_space"],
        small_directories_total=small_directories_total,
        root_size=root_size,
        space_to_free=space_to_free,
        smallest_directory_size=smallest_directory_size,
        smallest_directory_name=smallest_directory_name,
        directory_count=directory_count,
        file_count=file_count,
        tree_lines=tree_lines or [],
    )
