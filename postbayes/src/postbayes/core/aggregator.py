"""postbayes.core.aggregator

What:
  Accumulate the document-frequency statistics a multinomial Naive Bayes
  classifier needs from a stream of labelled posts.

Why:
  Every probability the model reports is a ratio of these counters. Keeping
  them in one explicitly owned aggregate, with a single training pass as the
  only mutation, makes the model safe to query from many readers afterwards.

How:
  - Represent posts and trained counters as dataclasses.
  - Train in one forward pass into a scratch :class:`TrainingStats`; commit it
    only when the row stream ends normally so a malformed row leaves the
    aggregator exactly as it was.
  - Count each token once per post (set semantics) for both the global
    vocabulary and the per-label tallies.

Interfaces:
  :class:`Post`, :class:`TrainingStats`, :class:`TrainingAggregator`.

Invariants & Safety:
  - ``sum(label_counts.values()) == total_posts``.
  - ``word_counts[label][word] <= label_counts[label]``.
  - Summing ``word_counts[*][word]`` over labels equals ``vocabulary[word]``.
  - Counters are strictly additive; :meth:`TrainingAggregator.reset` is the
    only way back to zero.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional

from ..utils.logging import JsonLogger
from .errors import MalformedInputError
from .tokenizer import unique_words


@dataclass(frozen=True)
class Post:
    """Single labelled post supplied by a row source.

    Attributes:
      label: Category assigned to the post.
      content: Raw post text, tokenized on demand.
    """

    label: str
    content: str

    @classmethod
    def from_mapping(
        cls,
        row: Mapping[str, Any],
        *,
        label_field: str = "tag",
        content_field: str = "content",
    ) -> "Post":
        """Build a post from a record keyed by column name.

        Raises:
          MalformedInputError: If either field is absent or ``None``.
        """

        missing = [name for name in (label_field, content_field) if row.get(name) is None]
        if missing:
            raise MalformedInputError(f"row is missing required field(s): {', '.join(missing)}")
        return cls(label=str(row[label_field]), content=str(row[content_field]))


@dataclass
class TrainingStats:
    """Trained counters backing every model query.

    What:
      Hold the total post count, per-label post counts, the global vocabulary
      with document frequencies, and the per-label document frequencies.

    Why:
      Bundling the counters gives the model a single read-only input and lets
      the aggregator swap a fully built instance in atomically.

    Attributes:
      total_posts: Number of training posts seen.
      label_counts: Label to number of posts carrying it.
      vocabulary: Word to number of posts containing it, across all labels.
      word_counts: Label to (word to number of that label's posts containing
        it).
    """

    total_posts: int = 0
    label_counts: Dict[str, int] = field(default_factory=dict)
    vocabulary: Dict[str, int] = field(default_factory=dict)
    word_counts: Dict[str, Dict[str, int]] = field(default_factory=dict)

    @property
    def vocabulary_size(self) -> int:
        return len(self.vocabulary)

    def add(self, post: Post) -> None:
        """Fold one post into the counters."""

        self.total_posts += 1
        self.label_counts[post.label] = self.label_counts.get(post.label, 0) + 1
        label_words = self.word_counts.setdefault(post.label, {})
        for word in unique_words(post.content):
            self.vocabulary[word] = self.vocabulary.get(word, 0) + 1
            label_words[word] = label_words.get(word, 0) + 1


class TrainingAggregator:
    """Owns the trained counters through their lifecycle.

    What:
      Start empty, absorb exactly one training pass, then serve the committed
      :class:`TrainingStats` to the model layer.

    Why:
      Model state must never be ambient or half-built. The aggregator is the
      single writer; everything downstream only reads.

    How:
      :meth:`train` folds rows into a fresh scratch instance seeded from the
      current counters and assigns it to :attr:`stats` only after the
      iterator is exhausted. Exceptions raised by the row source propagate
      untouched.
    """

    def __init__(self, *, logger: Optional[JsonLogger] = None) -> None:
        self._stats = TrainingStats()
        self._logger = logger

    @property
    def stats(self) -> TrainingStats:
        return self._stats

    def reset(self) -> None:
        """Return to the empty state so the same data can be retrained."""

        self._stats = TrainingStats()

    def train(self, rows: Iterable[Post]) -> TrainingStats:
        """Consume ``rows`` in a single forward pass.

        What:
          Increment the post, label, vocabulary, and per-label word counters for
          every row.

        Why:
          Training is the only phase allowed to mutate counts and must either
          complete or leave no trace.

        How:
          Copy the committed counters into a scratch :class:`TrainingStats`,
          call :meth:`TrainingStats.add` per row, then commit. A second call
          without :meth:`reset` keeps adding on top of the earlier pass.

        Args:
          rows: Iterable of :class:`Post` records, typically a lazy row source.

        Returns:
          The newly committed :class:`TrainingStats`.

        Raises:
          MalformedInputError: Propagated from the row source; nothing is
            committed.
        """

        scratch = _copy_stats(self._stats)
        seen = 0
        try:
            for post in rows:
                scratch.add(post)
                seen += 1
        except MalformedInputError as exc:
            if self._logger is not None:
                self._logger.error("training_aborted", rows_read=seen, error=str(exc))
            raise
        self._stats = scratch
        if self._logger is not None:
            self._logger.info(
                "training_completed",
                rows_read=seen,
                total_posts=scratch.total_posts,
                labels=len(scratch.label_counts),
                vocabulary_size=scratch.vocabulary_size,
            )
        return scratch

    def model(self):
        """Return a :class:`~postbayes.core.model.ProbabilityModel` over the counters."""

        from .model import ProbabilityModel

        return ProbabilityModel(self._stats)


def _copy_stats(stats: TrainingStats) -> TrainingStats:
    return TrainingStats(
        total_posts=stats.total_posts,
        label_counts=dict(stats.label_counts),
        vocabulary=dict(stats.vocabulary),
        word_counts={label: dict(words) for label, words in stats.word_counts.items()},
    )
