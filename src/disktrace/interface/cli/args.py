from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from disktrace import __version__
from disktrace.infra.logging import get_default_log_path

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the disktrace CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="disktrace",
        description=(
            "Rebuild a directory tree from a shell transcript and report "
            "directory size statistics."
        ),
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Transcript file to analyze (default: input.txt).",
    )
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file (default: user data config.json).",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any configuration file and start from built-in defaults.",
    )

    # --- Query Parameters ---
    p.add_argument(
        "--threshold",
        type=_non_negative_int,
        default=None,
        help="Exclusive size bound for the small-directory sum.",
    )
    p.add_argument(
        "--capacity",
        dest="disk_capacity",
        type=_non_negative_int,
        default=None,
        help="Total disk capacity.",
    )
    p.add_argument(
        "--needed",
        dest="needed_free_space",
        type=_non_negative_int,
        default=None,
        help="Free space required after the deletion.",
    )

    # --- Output ---
    p.add_argument(
        "--tree",
        dest="show_tree",
        action="store_true",
        help="Print the rebuilt directory tree.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const=get_default_log_path(),
        default=None,
        help="Also write logs to a rotating file (default location if no path given).",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["threshold"] = args.threshold
    overrides["disk_capacity"] = args.disk_capacity
    overrides["needed_free_space"] = args.needed_free_space

    if args.show_tree:
        overrides["show_tree"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    """argparse type for sizes."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"size must be non-negative: {value!r}")
    return number
