"""Plain-text reports over a trained classifier.

What:
  Render the training summary (corpus echo, counts, priors, likelihoods) and
  the test summary (per-post predictions and accuracy) as lists of lines.

Why:
  The classifier core performs no formatting. Keeping rendering pure makes the
  CLI a thin shell that writes lines only after every computation succeeded,
  so a failure never leaves a half-printed report.

How:
  Each function reads the model through its public accessors and formats
  floats with ``precision`` significant digits in ``%g`` style. Labels and
  words appear in lexicographic order.

Interfaces:
  :func:`format_number`, :func:`training_data_lines`,
  :func:`training_summary_lines`, :func:`classifier_parameter_lines`,
  :func:`evaluation_report_lines`.
"""
from __future__ import annotations

from typing import Iterable, List

from .core.aggregator import Post
from .core.model import ProbabilityModel
from .core.predictor import Evaluation


def format_number(value: float, precision: int = 3) -> str:
    return f"{value:.{precision}g}"


def training_data_lines(posts: Iterable[Post]) -> List[str]:
    """Echo the training rows under a ``training data:`` heading."""

    lines = ["training data:"]
    for post in posts:
        lines.append(f"  label = {post.label}, content = {post.content}")
    return lines


def training_summary_lines(model: ProbabilityModel) -> List[str]:
    return [
        f"trained on {model.total_posts} examples",
        f"vocabulary size = {model.vocabulary_size}",
        "",
    ]


def classifier_parameter_lines(model: ProbabilityModel, precision: int = 3) -> List[str]:
    """List every label's prior followed by the likelihood of each of its words."""

    lines = ["classifier parameters:"]
    for label in model.labels():
        lines.append(
            f"  {label}, {model.label_count(label)} examples, "
            f"log-prior = {format_number(model.log_prior(label), precision)}"
        )
        for word in model.label_words(label):
            lines.append(
                f"  {label}:{word}, count = {model.word_count(label, word)}, "
                f"log-likelihood = {format_number(model.word_log_prob(word, label), precision)}"
            )
    lines.append("")
    return lines


def evaluation_report_lines(model: ProbabilityModel, evaluation: Evaluation, precision: int = 3) -> List[str]:
    """Render per-post predictions and the overall accuracy line."""

    lines = [f"trained on {model.total_posts} examples", "", "test data:"]
    for outcome in evaluation.outcomes:
        lines.append(
            f"  correct = {outcome.post.label}, predicted = {outcome.prediction.label}, "
            f"log-probability score = {format_number(outcome.prediction.score, precision)}"
        )
        lines.append(f"  content = {outcome.post.content}")
        lines.append("")
    lines.append(f"performance: {evaluation.correct} / {evaluation.total} posts predicted correctly")
    return lines
