"""postbayes logging helpers with deterministic JSON emission and redaction.

What:
  Offer a tiny facade over Python streams so every postbayes component emits
  JSON log lines with consistent fields and without leaking post text.

Why:
  The report printed on stdout is the product of a run; diagnostics must stay
  machine-parseable and out of its way. Training corpora may hold private
  posts, so raw text never belongs in a log line.

How:
  Provide a :class:`JsonLogger` dataclass bound to a stream, a component tag,
  and a minimum severity. ``extra`` dictionaries are scrubbed via a recursive
  redaction helper before being serialised with ``json.dump``.

Interfaces:
  :class:`JsonLogger`, :func:`get_logger`.

Invariants & Safety:
  - Every payload includes an ISO8601 timestamp, severity, and component name.
  - Keys that carry post text (``content``, ``text``, ``post``) are replaced
    with ``[redacted]``, including inside nested dictionaries.
  - Streams are flushed after every write.
"""
from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


REDACTED = "[redacted]"
LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_SENSITIVE_KEYS = frozenset({"content", "text", "post"})


@dataclass
class JsonLogger:
    """Structured JSON logger with automatic redaction.

    What:
      Emit single-line JSON entries with timestamp, severity, component tag,
      and optional supplemental fields.

    Why:
      One logger type keeps the schema uniform across the aggregator and the
      CLI, and lets tests parse log lines without ad-hoc heuristics.

    How:
      Store the destination stream, component label, and threshold, then expose
      :meth:`log` plus the :meth:`debug`, :meth:`info`, :meth:`warning`, and
      :meth:`error` shortcuts.
    """

    stream: Any = field(default_factory=lambda: sys.stderr)
    component: str = "postbayes"
    level: str = "WARN"

    def enabled_for(self, level: str) -> bool:
        """Return ``True`` when ``level`` meets the configured threshold."""

        return LEVELS.get(level.upper(), 0) >= LEVELS.get(self.level.upper(), 0)

    def log(self, level: str, message: str, *, extra: Optional[Dict[str, Any]] = None) -> None:
        """Emit a structured JSON log entry.

        Args:
          level: Severity name (``"debug"``, ``"info"``, ``"warn"``, ``"error"``).
          message: Core log message.
          extra: Optional context dictionary that is redacted recursively.
        """

        if not self.enabled_for(level):
            return
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "lvl": level.upper(),
            "msg": message,
            "component": self.component,
        }
        if extra:
            payload.update(self._redact(extra))
        json.dump(payload, self.stream, separators=(",", ":"))
        self.stream.write("\n")
        self.stream.flush()

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log("DEBUG", message, extra=kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log("INFO", message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log("WARN", message, extra=kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log("ERROR", message, extra=kwargs)

    @staticmethod
    def _redact(data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``data`` with post text masked at any depth."""

        result: Dict[str, Any] = {}
        for key, value in data.items():
            if key in _SENSITIVE_KEYS:
                result[key] = REDACTED
            elif isinstance(value, dict):
                result[key] = JsonLogger._redact(value)
            else:
                result[key] = value
        return result


def get_logger(component: str, *, level: str = "WARN", stream: Any = None) -> JsonLogger:
    """Construct a :class:`JsonLogger` for the requested component.

    What:
      Return a ready-to-use logger bound to ``component``.

    Why:
      Call sites avoid instantiating :class:`JsonLogger` directly so defaults
      (stream, threshold) can evolve centrally.

    How:
      Resolve the stream at call time so test runners that swap ``sys.stderr``
      capture the output, then build the dataclass.

    Args:
      component: Logical subsystem name included in every payload.
      level: Minimum severity that is written.
      stream: Destination stream; ``sys.stderr`` when omitted.

    Returns:
      Configured :class:`JsonLogger` instance.
    """

    return JsonLogger(stream=stream if stream is not None else sys.stderr, component=component, level=level)
