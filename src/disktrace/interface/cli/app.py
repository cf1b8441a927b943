from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, JSON file and CLI overrides), analysis execution and result
rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from disktrace.core.engine import run_analysis
from disktrace.core.validator import validate_config
from disktrace.domain.analysis_models import AnalysisResult, create_error_result
from disktrace.domain.config import get_default_config, load_config
from disktrace.domain.errors import DiskTraceError
from disktrace.infra.fs import normalize_path
from disktrace.infra.logging import LoggingConfig, configure_logging, get_logger
from disktrace.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 analysis failure,
             2 missing input, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Base configuration (defaults vs persistent file)
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_path)

    # 4. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 5. Pre-flight input verification
    input_path = normalize_path(clean_conf["input_path"])
    if not os.path.isfile(input_path):
        msg = f"Input file does not exist: {input_path}"
        logger.error(msg)
        _report_failure(msg, clean_conf, args.json_output)
        return 2

    # 6. Analysis phase
    try:
        result = run_analysis(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except DiskTraceError as e:
        logger.error(f"Analysis failed: {e}")
        _report_failure(str(e), clean_conf, args.json_output)
        return 1

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge the non-None override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    out = dict(base)
    for k in ("input_path", "threshold", "disk_capacity", "needed_free_space", "show_tree"):
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _report_failure(message: str, cfg: Dict[str, Any], json_output: bool) -> None:
    """Report an aborted run on stderr, or as a JSON error result on stdout."""
    if json_output:
        print(json.dumps(asdict(create_error_result(message, cfg)), ensure_ascii=False, indent=2))
    else:
        print(f"ERROR: {message}", file=sys.stderr)


def _print_human_summary(result: AnalysisResult) -> None:
    """
    Print the analysis result to the standard output.

    Args:
        result: The analysis result to render.
    """
    if result.tree_lines:
        print("\n".join(result.tree_lines))
        print()

    print(f"Total size of directories under {result.threshold}: {result.small_directories_total}")
    print(f"Root directory size: {result.root_size}")
    print(f"Space to free: {result.space_to_free}")

    if result.smallest_directory_size is None:
        print("Smallest directory to delete: none")
    else:
        print(
            f"Smallest directory to delete: {result.smallest_directory_size} "
            f"({result.smallest_directory_name})"
        )

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
