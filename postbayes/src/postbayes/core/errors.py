"""Error taxonomy shared by the classifier core, row sources, and CLI.

What:
  Define one exception type per failure mode the classifier can hit, rooted at
  :class:`PostBayesError` so callers can catch the whole family at once.

Why:
  Every failure is terminal for the operation that raised it. Distinct types
  let the CLI map each condition to its own user-facing message instead of
  printing a generic diagnostic and carrying on with undefined ratios.

How:
  Plain :class:`Exception` subclasses without extra state; callers include the
  offending path, label, or line number in the message.

Interfaces:
  :class:`PostBayesError`, :class:`UsageError`, :class:`FileOpenError`,
  :class:`MalformedInputError`, :class:`UnknownLabelError`,
  :class:`DivisionDegenerateError`, :class:`NoModelError`.
"""
from __future__ import annotations


class PostBayesError(Exception):
    """Base class for every classifier failure."""


class UsageError(PostBayesError):
    """Raised when the command line carries the wrong number of arguments."""


class FileOpenError(PostBayesError):
    """Raised when an input path cannot be opened for reading.

    Attributes:
      path: The path that failed to open, kept for CLI diagnostics.
    """

    def __init__(self, path: str, message: str | None = None) -> None:
        super().__init__(message or f"Error opening file: {path}")
        self.path = path


class MalformedInputError(PostBayesError):
    """Raised when a training or test row lacks its label or content field."""


class UnknownLabelError(PostBayesError, KeyError):
    """Raised when a prior or likelihood is requested for an unseen label."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class DivisionDegenerateError(PostBayesError, ZeroDivisionError):
    """Raised when a probability ratio would divide by a zero count."""


class NoModelError(PostBayesError):
    """Raised when prediction is attempted before any label was trained."""
