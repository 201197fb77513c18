"""Whitespace tokenizer producing the unique word set of a post.

What:
  Split post text into the set of distinct whitespace-delimited tokens.

Why:
  The classifier models document frequency, so only whether a word occurs in a
  post matters, never how often. Training and prediction must tokenize
  identically or the counts and queries drift apart.

How:
  Delegate to :meth:`str.split` without arguments (any run of whitespace is a
  separator, leading/trailing whitespace is ignored) and freeze the result.
  Tokens keep their case and punctuation.

Interfaces:
  :func:`unique_words`.
"""
from __future__ import annotations

from typing import FrozenSet


def unique_words(text: str) -> FrozenSet[str]:
    """Return the distinct whitespace-delimited tokens of ``text``.

    Args:
      text: Raw post content. An empty or all-whitespace string yields an empty
        set.

    Returns:
      Frozen set of case-sensitive tokens.
    """

    return frozenset(text.split())
