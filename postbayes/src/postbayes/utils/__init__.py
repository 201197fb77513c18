"""Expose the public utility surface for postbayes.

What:
  Re-export the logging and identifier helpers.

Why:
  Callers import ``postbayes.utils`` without depending on internal filenames.
"""

from .ids import checksum, file_checksum, new_run_id
from .logging import JsonLogger, get_logger

__all__ = [
    "JsonLogger",
    "get_logger",
    "new_run_id",
    "checksum",
    "file_checksum",
]
