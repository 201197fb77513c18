"""Strict loader for the postbayes runtime configuration.

What:
  Locate, parse, validate, and cache ``postbayes.yaml``, the optional document
  that names CSV columns and tunes report and logging output.

Why:
  Configuration lives outside the package and can be malformed. Centralising
  parsing enforces one set of error messages and guarantees the CLI only ever
  sees a validated :class:`RuntimeConfig`.

How:
  Resolve candidate file locations from an explicit argument, the
  ``POSTBAYES_CONFIG_PATH`` environment variable, and well-known defaults.
  Parse YAML (JSON is accepted as a subset) with :func:`yaml.safe_load`,
  validate with Pydantic, and memoise the result.

Interfaces:
  - :func:`load_runtime_config` / :func:`get_runtime_config` /
    :func:`reset_runtime_config`: manage discovery and caching.
  - :func:`parse_runtime_config`: validate a configuration document held in
    memory.
  - :class:`ConfigLoadError`, :class:`RuntimeConfigError`.

Invariants:
  - Payloads pass strict Pydantic validation before they are returned.
  - A path requested explicitly (argument or environment) must exist; only the
    implicit defaults may be absent, in which case built-in defaults apply.
  - The cache respects explicit reload requests.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Iterable, Optional, Tuple

import yaml
from pydantic import ValidationError as _PydanticValidationError

from .schema import RuntimeConfig


class ConfigLoadError(Exception):
    """Base error for configuration parsing or validation failures."""


class RuntimeConfigError(ConfigLoadError):
    """Error raised when ``postbayes.yaml`` cannot be loaded or validated."""


_CONFIG_ENV = "POSTBAYES_CONFIG_PATH"
_DEFAULT_LOCATIONS: Tuple[Path, ...] = (
    Path("postbayes.yaml"),
    Path("~/.config/postbayes/config.yaml"),
)
_RUNTIME_CACHE: Optional[Tuple[Optional[Path], RuntimeConfig]] = None


def _candidate_paths(path: Optional[Path]) -> Iterable[Tuple[Path, bool]]:
    """Yield ``(path, required)`` pairs in priority order.

    What:
      Produce the ordered list of locations to inspect for the configuration.

    Why:
      Operators override the location by argument or environment variable;
      those overrides are mandatory while the defaults are opportunistic.

    How:
      Deduplicate expanded paths while preserving precedence and flag the
      explicit ones as required.
    """

    seen: set[Path] = set()
    if path is not None:
        candidate = path.expanduser()
        seen.add(candidate)
        yield candidate, True
    env_path = os.environ.get(_CONFIG_ENV)
    if env_path:
        candidate = Path(env_path).expanduser()
        if candidate not in seen:
            seen.add(candidate)
            yield candidate, True
    for default in _DEFAULT_LOCATIONS:
        candidate = default.expanduser()
        if candidate not in seen:
            seen.add(candidate)
            yield candidate, False


def parse_runtime_config(text: str, source: Any = "<string>") -> RuntimeConfig:
    """Parse and validate configuration text.

    What:
      Convert raw YAML or JSON text into a :class:`RuntimeConfig`.

    Why:
      Shared by file loading and tests so every payload takes the same
      validation path.

    How:
      ``yaml.safe_load`` the text, treat an empty document as an empty mapping,
      reject non-mappings, then run :meth:`RuntimeConfig.model_validate`.

    Args:
      text: Raw configuration contents.
      source: Origin used in error messages.

    Returns:
      The validated configuration.

    Raises:
      RuntimeConfigError: If the text is not valid YAML, not a mapping, or
        violates the schema.
    """

    try:
        payload = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise RuntimeConfigError(f"Invalid YAML in {source}: {exc}") from exc
    if not isinstance(payload, dict):
        raise RuntimeConfigError(f"{source} must contain a mapping at the top-level")
    try:
        return RuntimeConfig.model_validate(payload)
    except _PydanticValidationError as exc:
        raise RuntimeConfigError(f"Invalid configuration in {source}: {exc}") from exc


def _load_runtime_from_path(path: Path) -> RuntimeConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RuntimeConfigError(f"Configuration file missing: {path}") from exc
    except OSError as exc:  # pragma: no cover - filesystem surface
        raise RuntimeConfigError(f"Unable to read configuration file {path}: {exc}") from exc
    return parse_runtime_config(text, path)


def load_runtime_config(
    path: Optional[Path | str] = None,
    *,
    reload: bool = False,
) -> RuntimeConfig:
    """Resolve, parse, and cache the runtime configuration.

    What:
      Locate the configuration using the precedence chain, parse it, and return
      a validated :class:`RuntimeConfig`.

    Why:
      The CLI and tests share one cached instance; ``reload`` forces a fresh
      read when the file changed.

    How:
      Consult the cache unless ``reload`` is set or a different explicit path
      is requested, then walk the candidates. Missing required candidates are
      errors; when no optional candidate exists, the schema defaults are used.

    Args:
      path: Optional explicit location of the configuration file.
      reload: When ``True`` bypass the cache.

    Returns:
      The validated runtime configuration.

    Raises:
      RuntimeConfigError: If a required file is missing or any file fails
        validation.
    """

    global _RUNTIME_CACHE

    requested_path = Path(path).expanduser() if isinstance(path, (str, Path)) else None
    if not reload and _RUNTIME_CACHE is not None:
        cached_path, cached_config = _RUNTIME_CACHE
        if requested_path is None or cached_path == requested_path:
            return cached_config

    for candidate, required in _candidate_paths(requested_path):
        if not candidate.exists():
            if required:
                raise RuntimeConfigError(f"Configuration file missing: {candidate}")
            continue
        config = _load_runtime_from_path(candidate)
        _RUNTIME_CACHE = (candidate, config)
        return config

    config = RuntimeConfig()
    _RUNTIME_CACHE = (None, config)
    return config


def get_runtime_config() -> RuntimeConfig:
    """Return the cached runtime configuration, loading it on demand."""

    return load_runtime_config()


def reset_runtime_config() -> None:
    """Clear the runtime configuration cache."""

    global _RUNTIME_CACHE
    _RUNTIME_CACHE = None
