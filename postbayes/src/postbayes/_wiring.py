"""Helper utilities bridging the CLI with the classifier core.

What:
  Provide the small functions :mod:`postbayes.cli` composes: argument count
  validation, report setting resolution, row source construction, training,
  and evaluation.

Why:
  Isolating these steps keeps the command body a readable sequence of calls
  and lets unit tests exercise each step without going through Typer.

How:
  Pure functions over the runtime configuration and the core types. None of
  them print; the CLI owns all output.

Interfaces:
  ``USAGE``, ``resolve_paths``, ``resolve_report_settings``, ``build_source``,
  ``train_model``, ``evaluate_model``.

Invariants & Safety:
  - ``train_model`` never returns a model built from a partial pass.
  - No helper logs post text; only counts, paths, and checksums are surfaced.
"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .config.schema import ReportSettings, RuntimeConfig
from .core.aggregator import TrainingAggregator
from .core.errors import UsageError
from .core.model import ProbabilityModel
from .core.predictor import Evaluation, Predictor
from .io.rows import CsvPostSource
from .utils.logging import JsonLogger

USAGE = "Usage: postbayes TRAIN_FILE [TEST_FILE]"


def resolve_paths(paths: Optional[Sequence[str]]) -> Tuple[str, Optional[str]]:
    """Split positional arguments into the training path and optional test path.

    Raises:
      UsageError: Unless exactly one or two paths were given.
    """

    paths = list(paths or [])
    if len(paths) not in (1, 2):
        raise UsageError(USAGE)
    return paths[0], (paths[1] if len(paths) == 2 else None)


def resolve_report_settings(
    runtime: RuntimeConfig,
    *,
    precision: Optional[int],
    quiet_training_data: bool,
) -> ReportSettings:
    """Apply command-line overrides on top of the configured report settings.

    Raises:
      UsageError: If ``precision`` is outside the accepted range.
    """

    updates = {}
    if precision is not None:
        if not 1 <= precision <= 17:
            raise UsageError("--precision must be between 1 and 17")
        updates["precision"] = precision
    if quiet_training_data:
        updates["show_training_data"] = False
    return runtime.report.model_copy(update=updates)


def build_source(path: str, runtime: RuntimeConfig) -> CsvPostSource:
    """Return a row source for ``path`` using the configured CSV dialect."""

    return CsvPostSource(
        path,
        label_field=runtime.csv.label_field,
        content_field=runtime.csv.content_field,
        delimiter=runtime.csv.delimiter,
    )


def train_model(source: CsvPostSource, logger: JsonLogger) -> ProbabilityModel:
    """Run one training pass over ``source`` and return the resulting model.

    Raises:
      FileOpenError: If the file vanished after it was checked.
      MalformedInputError: If a row lacks a required field.
    """

    aggregator = TrainingAggregator(logger=logger)
    aggregator.train(source)
    return aggregator.model()


def evaluate_model(model: ProbabilityModel, source: CsvPostSource) -> Evaluation:
    """Predict every post of ``source`` and return the collected outcomes.

    Raises:
      NoModelError: If the model has no trained labels.
      MalformedInputError: If a test row lacks a required field.
    """

    return Predictor(model).evaluate(source)
