"""postbayes.core.predictor

What:
  Classify posts with a trained :class:`~postbayes.core.model.ProbabilityModel`
  and measure accuracy over labelled test posts.

Why:
  Prediction is the user-facing half of the classifier. Its tie-break must be
  reproducible so two runs over the same data print the same labels.

How:
  - Tokenize the query into its unique word set.
  - Score every trained label as log-prior plus the sum of word
    log-likelihoods, iterating labels lexicographically.
  - Keep the first label whose score is strictly greater than the running
    best, so the lexicographically smallest label wins ties.

Interfaces:
  :class:`Prediction`, :class:`Outcome`, :class:`Evaluation`,
  :class:`Predictor`.

Invariants & Safety:
  - Prediction never mutates model state.
  - An empty post scores each label by its log-prior alone.
  - A model without labels raises :class:`NoModelError`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .aggregator import Post
from .errors import NoModelError
from .model import ProbabilityModel
from .tokenizer import unique_words


@dataclass(frozen=True)
class Prediction:
    """Most likely label for a post and its log-probability score."""

    label: str
    score: float


@dataclass(frozen=True)
class Outcome:
    """One evaluated test post paired with the prediction made for it."""

    post: Post
    prediction: Prediction

    @property
    def correct(self) -> bool:
        return self.post.label == self.prediction.label


@dataclass
class Evaluation:
    """Accuracy summary over a labelled test set.

    Attributes:
      outcomes: Per-post results in input order.
    """

    outcomes: List[Outcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def correct(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.correct)

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total else 0.0


class Predictor:
    """Arg-max label selection over a trained model."""

    def __init__(self, model: ProbabilityModel) -> None:
        self.model = model

    def scores(self, content: str) -> Dict[str, float]:
        """Return the log-probability score of every label, in label order.

        Raises:
          NoModelError: If the model has no trained labels.
        """

        labels = self.model.labels()
        if not labels:
            raise NoModelError("cannot predict before training on at least one post")
        words = unique_words(content)
        result: Dict[str, float] = {}
        for label in labels:
            score = self.model.log_prior(label)
            for word in words:
                score += self.model.word_log_prob(word, label)
            result[label] = score
        return result

    def predict(self, content: str) -> Prediction:
        """Return the highest-scoring label for ``content``.

        Labels are visited lexicographically and a later label only wins when
        its score is strictly greater, so ties resolve to the smallest label.

        Raises:
          NoModelError: If the model has no trained labels.
        """

        best: Prediction | None = None
        for label, score in self.scores(content).items():
            if best is None or score > best.score:
                best = Prediction(label=label, score=score)
        assert best is not None
        return best

    def evaluate(self, posts: Iterable[Post]) -> Evaluation:
        """Predict every post and collect the outcomes.

        An untrained model is rejected before any row is read, even when
        ``posts`` is empty.

        Raises:
          NoModelError: If the model has no trained labels.
          MalformedInputError: Propagated from a lazy row source.
        """

        if not self.model.labels():
            raise NoModelError("cannot evaluate before training on at least one post")
        evaluation = Evaluation()
        for post in posts:
            evaluation.outcomes.append(Outcome(post=post, prediction=self.predict(post.content)))
        return evaluation
