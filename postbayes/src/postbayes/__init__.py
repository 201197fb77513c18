"""
Module: postbayes.__init__

What:
  Package root for postbayes, a document-frequency Naive Bayes classifier for
  short labelled posts, and its command-line front end.

Why:
  Importers build on the subpackages named here; keeping the list explicit
  documents the supported extension points.

Interfaces:
  - config: Runtime configuration schema and loader.
  - core: Tokenizer, training aggregator, probability model, predictor.
  - io: CSV row sources.
  - utils: JSON logging and identifier helpers.
"""

__version__ = "0.1.0"

__all__ = [
    "config",
    "core",
    "io",
    "utils",
]
