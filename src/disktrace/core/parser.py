from __future__ import annotations

"""
Shell Transcript Parser.

Replays a recorded `cd` / `ls` session against an initially empty root
directory and rebuilds the directory tree it describes.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from disktrace.domain.constants import MAX_FILE_SIZE, ROOT_NAME
from disktrace.domain.errors import DirectoryLookupError, InvalidCommandError
from disktrace.domain.tree_models import Directory, File, add_item, new_root

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "$"
DIR_MARKER = "dir"
PARENT_DIR = ".."

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_transcript(text: str) -> Directory:
    """
    Build the directory tree described by a full transcript.

    Args:
        text: Raw transcript content.

    Returns:
        Directory: The root directory (`/`).
    """
    return parse_lines(text.splitlines())


def parse_lines(lines: Iterable[str]) -> Directory:
    """
    Build the directory tree from transcript lines.

    Lines are processed in order. Each command line updates the working
    directory stack; each listing line adds an item to the directory the
    stack currently points at. Unrecognized lines are skipped.

    Args:
        lines: Transcript lines without line terminators.

    Returns:
        Directory: The root directory (`/`).

    Raises:
        InvalidCommandError: On an unknown command or `cd` without argument.
        DirectoryLookupError: If the stack points at a missing directory.
    """
    root = new_root()
    cwd: List[str] = [ROOT_NAME]

    for line_number, line in enumerate(lines, start=1):
        current = resolve_directory(root, cwd, line_number=line_number)
        tokens = line.split(" ")

        if len(tokens) < 2:
            logger.debug(f"Skipping line {line_number}: {line!r}")
            continue

        first, second = tokens[0], tokens[1]

        # Command: cd / ls
        if first == COMMAND_PROMPT:
            _apply_command(cwd, second, tokens[2:], line_number)
            continue

        # Listing: sub-directory
        if first == DIR_MARKER:
            add_item(current, Directory(name=second))
            continue

        # Listing: file
        size = _parse_size(first)
        if size is not None:
            add_item(current, File(name=second, size=size))
            continue

        logger.debug(f"Skipping line {line_number}: {line!r}")

    return root


def resolve_directory(
        root: Directory,
        path: Sequence[str],
        line_number: Optional[int] = None,
) -> Directory:
    """
    Walk from the root down a working directory path.

    Root markers in the path are ignored. When a directory holds several
    children with the same name, the first one wins.

    Args:
        root: Tree root.
        path: Directory names from the root to the target.
        line_number: Transcript line for error reporting.

    Returns:
        Directory: The directory the path points at.

    Raises:
        DirectoryLookupError: If a segment has no matching child directory.
    """
    current = root
    for segment in path:
        if segment == ROOT_NAME:
            continue

        match = next(
            (
                child for child in current.children
                if isinstance(child, Directory) and child.name == segment
            ),
            None,
        )
        if match is None:
            raise DirectoryLookupError(
                f"Directory '{segment}' not found under '{current.name}'",
                line_number=line_number,
            )
        current = match

    return current

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _apply_command(cwd: List[str], command: str, args: List[str], line_number: int) -> None:
    """Update the working directory stack for a `$` line."""
    if command == "ls":
        return

    if command != "cd":
        raise InvalidCommandError(f"Invalid command '{command}'", line_number=line_number)

    if not args:
        raise InvalidCommandError("cd requires a directory argument", line_number=line_number)

    target = args[0]
    if target == PARENT_DIR:
        # The root marker is never popped: `cd ..` at the root stays there
        if len(cwd) > 1:
            cwd.pop()
    elif target == ROOT_NAME:
        # The root is the implicit base of the stack; `cd /` changes nothing
        return
    else:
        cwd.append(target)


def _parse_size(token: str) -> Optional[int]:
    """
    Return the token as an unsigned 64-bit size, or None if it is not one.

    Accepts ASCII digits with an optional leading `+`.
    """
    digits = token[1:] if token.startswith("+") else token
    if not (digits.isascii() and digits.isdigit()):
        return None
    size = int(digits)
    if size > MAX_FILE_SIZE:
        return None
    return size
