"""Aggregated exports for the postbayes classifier core.

What:
  Provide a light-weight package facade exposing the tokenizer, aggregator,
  model, predictor, and error types while deferring submodule imports until
  they are needed.

Why:
  Tooling such as the configuration loader imports ``postbayes`` without
  touching the classifier; lazy access keeps those imports cheap and avoids
  import cycles between the aggregator and the model.

How:
  Define ``__all__`` explicitly for static analyzers and implement
  ``__getattr__`` to import the owning submodule on demand.

Interfaces:
  ``unique_words``, ``Post``, ``TrainingStats``, ``TrainingAggregator``,
  ``ProbabilityModel``, ``Prediction``, ``Outcome``, ``Evaluation``,
  ``Predictor`` and the error classes from :mod:`postbayes.core.errors`.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "unique_words",
    "Post",
    "TrainingStats",
    "TrainingAggregator",
    "ProbabilityModel",
    "Prediction",
    "Outcome",
    "Evaluation",
    "Predictor",
    "PostBayesError",
    "UsageError",
    "FileOpenError",
    "MalformedInputError",
    "UnknownLabelError",
    "DivisionDegenerateError",
    "NoModelError",
]

_OWNERS = {
    "unique_words": "tokenizer",
    "Post": "aggregator",
    "TrainingStats": "aggregator",
    "TrainingAggregator": "aggregator",
    "ProbabilityModel": "model",
    "Prediction": "predictor",
    "Outcome": "predictor",
    "Evaluation": "predictor",
    "Predictor": "predictor",
}


def __getattr__(name: str) -> Any:
    """Resolve public names lazily.

    Raises:
      AttributeError: If ``name`` is not part of the public surface.
    """

    if name not in __all__:
        raise AttributeError(name)
    from importlib import import_module

    module = import_module(f".{_OWNERS.get(name, 'errors')}", __name__)
    return getattr(module, name)
