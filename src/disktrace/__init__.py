"""disktrace: directory size analysis of recorded shell transcripts."""

__version__ = "1.0.0"
