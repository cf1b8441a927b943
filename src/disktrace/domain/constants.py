from __future__ import annotations

"""
Domain Constants.

Centralizes the default limits of the disk analysis and the conventional
name of the transcript input file.
"""

ROOT_NAME = "/"
DEFAULT_INPUT_FILE = "input.txt"

# Query A: directories strictly below this size are summed
DEFAULT_SIZE_THRESHOLD = 100_000

# Query B: disk geometry of the reference scenario
DEFAULT_DISK_CAPACITY = 70_000_000
DEFAULT_NEEDED_FREE_SPACE = 30_000_000

# File sizes are unsigned 64-bit quantities
MAX_FILE_SIZE = 2 ** 64 - 1
