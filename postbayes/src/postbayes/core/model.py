"""postbayes.core.model

What:
  Derive log-priors and word log-likelihoods from trained
  :class:`~postbayes.core.aggregator.TrainingStats`.

Why:
  The classifier never smooths with pseudo-counts. Instead, a word the label
  never saw backs off to its global document frequency, and a word nobody saw
  gets a floor of one post's worth of probability. Keeping that rule in one
  pure function guarantees training reports and predictions agree.

How:
  - :meth:`ProbabilityModel.log_prior` is ``ln(label_count / total_posts)``.
  - :meth:`ProbabilityModel.word_log_prob` applies the three cases in fixed
    order: unseen word, word unseen for this label, word seen for this label.
  - Likelihoods are computed on demand and memoised per ``(label, word)``;
    the counters are read-only once handed to the model.

Interfaces:
  :class:`ProbabilityModel`.

Invariants & Safety:
  - Unknown labels raise :class:`UnknownLabelError`; no zero count is ever
    substituted.
  - Zero denominators raise :class:`DivisionDegenerateError`.
  - Every returned value is finite and non-positive for consistent counters.
"""
from __future__ import annotations

import math
from typing import Dict, List, Tuple

from .aggregator import TrainingStats
from .errors import DivisionDegenerateError, UnknownLabelError


class ProbabilityModel:
    """Read-only probability view over trained counters.

    What:
      Answer prior, likelihood, and count queries used by the predictor and the
      report layer.

    Why:
      Separating derivation from aggregation keeps the counters the single
      source of truth and lets the model be shared between readers.

    How:
      Hold a reference to the committed :class:`TrainingStats` plus a memo
      dictionary for likelihoods.
    """

    def __init__(self, stats: TrainingStats) -> None:
        self._stats = stats
        self._likelihoods: Dict[Tuple[str, str], float] = {}

    @property
    def total_posts(self) -> int:
        return self._stats.total_posts

    @property
    def vocabulary_size(self) -> int:
        return self._stats.vocabulary_size

    def labels(self) -> List[str]:
        """Return trained labels in lexicographic order."""

        return sorted(self._stats.label_counts)

    def label_count(self, label: str) -> int:
        self._require_label(label)
        return self._stats.label_counts[label]

    def label_words(self, label: str) -> List[str]:
        """Return the words observed in ``label``'s posts, sorted."""

        self._require_label(label)
        return sorted(self._stats.word_counts.get(label, {}))

    def word_count(self, label: str, word: str) -> int:
        """Return how many of ``label``'s posts contain ``word`` (zero if none)."""

        self._require_label(label)
        return self._stats.word_counts.get(label, {}).get(word, 0)

    def document_frequency(self, word: str) -> int:
        """Return how many training posts contain ``word`` (zero if none)."""

        return self._stats.vocabulary.get(word, 0)

    def log_prior(self, label: str) -> float:
        """Return ``ln(P(label))`` estimated by relative frequency.

        Raises:
          UnknownLabelError: If ``label`` was never trained.
          DivisionDegenerateError: If the total or label count is zero.
        """

        self._require_label(label)
        return _log_ratio(self._stats.label_counts[label], self._stats.total_posts, "total posts")

    def word_log_prob(self, word: str, label: str) -> float:
        """Return ``ln(P(word | label))`` under the three-case fallback rule.

        What:
          Score one token for one label.

        How:
          Checked in this order:

          1. ``word`` not in the vocabulary: ``ln(1 / total_posts)``.
          2. ``word`` in the vocabulary but never in ``label``'s posts:
             ``ln(vocabulary[word] / total_posts)``.
          3. Otherwise ``ln(word_counts[label][word] / label_counts[label])``.

        Raises:
          UnknownLabelError: If ``label`` was never trained.
          DivisionDegenerateError: If the relevant denominator is zero.
        """

        self._require_label(label)
        key = (label, word)
        cached = self._likelihoods.get(key)
        if cached is not None:
            return cached
        stats = self._stats
        label_words = stats.word_counts.get(label, {})
        if word not in stats.vocabulary:
            value = _log_ratio(1, stats.total_posts, "total posts")
        elif word not in label_words:
            value = _log_ratio(stats.vocabulary[word], stats.total_posts, "total posts")
        else:
            value = _log_ratio(label_words[word], stats.label_counts[label], f"posts labelled {label!r}")
        self._likelihoods[key] = value
        return value

    def _require_label(self, label: str) -> None:
        if label not in self._stats.label_counts:
            raise UnknownLabelError(f"label not found in training data: {label!r}")


def _log_ratio(numerator: int, denominator: int, what: str) -> float:
    if denominator <= 0:
        raise DivisionDegenerateError(f"cannot divide by zero {what}")
    if numerator <= 0:
        raise DivisionDegenerateError(f"zero count over {what} has no finite logarithm")
    return math.log(numerator / denominator)
