"""postbayes configuration package.

What:
  Provide one import surface for configuration loading and the Pydantic schema.

Why:
  Callers go through validated models instead of reading YAML themselves.

How:
  Re-export the loader helpers, error types, and schema classes with an
  explicit ``__all__``.
"""

from .loader import (
    ConfigLoadError,
    RuntimeConfigError,
    get_runtime_config,
    load_runtime_config,
    parse_runtime_config,
    reset_runtime_config,
)
from .schema import CsvSettings, LoggingSettings, ReportSettings, RuntimeConfig

__all__ = [
    "ConfigLoadError",
    "RuntimeConfigError",
    "get_runtime_config",
    "load_runtime_config",
    "parse_runtime_config",
    "reset_runtime_config",
    "CsvSettings",
    "LoggingSettings",
    "ReportSettings",
    "RuntimeConfig",
]
