from __future__ import annotations

"""
Core analysis orchestration.

Coordinates one complete run:
1. Validates the configuration.
2. Reads the transcript in full.
3. Rebuilds the directory tree.
4. Runs the small-directory sum and the space-freeing query.

Any domain error aborts the run and propagates to the caller.
"""

import logging
from typing import Any, Dict, Optional

from disktrace.core.parser import parse_transcript
from disktrace.core.queries import (
    find_smallest_directory_to_free,
    space_to_free,
    sum_small_directories,
)
from disktrace.core.renderer import render_tree
from disktrace.core.validator import validate_config
from disktrace.domain.analysis_models import AnalysisResult, create_success_result
from disktrace.domain.tree_models import get_size, iter_directories, iter_files
from disktrace.infra.fs import normalize_path, read_transcript

logger = logging.getLogger(__name__)


def run_analysis(config: Optional[Dict[str, Any]]) -> AnalysisResult:
    """
    Analyze the transcript file named by the configuration.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        AnalysisResult: Query results and tree statistics.

    Raises:
        InputReadError: If the transcript cannot be read.
        InvalidCommandError: On an unknown transcript command.
        DirectoryLookupError: If the transcript enters a directory never listed.
    """
    cfg, warnings = validate_config(config or {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    input_path = normalize_path(cfg["input_path"])
    logger.info(f"Reading transcript: {input_path}")
    text = read_transcript(input_path)

    cfg["input_path"] = input_path
    return analyze_text(text, cfg)


def analyze_text(text: str, config: Optional[Dict[str, Any]] = None) -> AnalysisResult:
    """
    Analyze an in-memory transcript.

    Args:
        text: Raw transcript content.
        config: Optional configuration overriding the defaults.

    Returns:
        AnalysisResult: Query results and tree statistics.
    """
    cfg, warnings = validate_config(config or {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")
    if config is None or "input_path" not in config:
        cfg["input_path"] = ""

    root = parse_transcript(text)
    directory_count = sum(1 for _ in iter_directories(root))
    file_count = sum(1 for _ in iter_files(root))
    logger.debug(f"Tree rebuilt: {directory_count} directories, {file_count} files.")

    small_total = sum_small_directories(root, cfg["threshold"])
    root_size = get_size(root)
    to_free = space_to_free(root, cfg["disk_capacity"], cfg["needed_free_space"])

    found = find_smallest_directory_to_free(root, to_free)
    if found is None:
        logger.warning(f"No directory frees at least {to_free} bytes.")
        best_name, best_size = None, None
    else:
        best_name, best_size = found[0].name, found[1]

    logger.info("Analysis completed.")

    return create_success_result(
        cfg,
        small_directories_total=small_total,
        root_size=root_size,
        space_to_free=to_free,
        smallest_directory_size=best_size,
        smallest_directory_name=best_name,
        directory_count=directory_count,
        file_count=file_count,
        tree_lines=render_tree(root) if cfg["show_tree"] else None,
    )
