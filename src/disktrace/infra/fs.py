from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Reads transcript inputs and resolves the per-user data directory used for
the persistent configuration and the optional log file.
"""

import os

from disktrace.domain.errors import InputReadError

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "DiskTrace"
UNIX_APP_DIR_NAME = ".disktrace"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/DiskTrace
    - Linux/Mac: ~/.disktrace

    The directory is not created here; writers create it on demand.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: str) -> str:
    """Expand `~` and environment variables and make the path absolute."""
    return os.path.abspath(os.path.expandvars(os.path.expanduser(path.strip())))

# -----------------------------------------------------------------------------
# INPUT API
# -----------------------------------------------------------------------------

def read_transcript(path: str) -> str:
    """
    Read a whole transcript file into memory.

    Args:
        path: Transcript location.

    Returns:
        str: The file content.

    Raises:
        InputReadError: If the file is missing, unreadable or not UTF-8.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        raise InputReadError(path, "file not found") from e
    except UnicodeDecodeError as e:
        raise InputReadError(path, f"invalid text encoding ({e.reason})") from e
    except OSError as e:
        raise InputReadError(path, e.strerror or str(e)) from e
