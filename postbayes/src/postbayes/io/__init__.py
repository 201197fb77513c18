"""Row sources that turn files into labelled posts."""

from .rows import CsvPostSource, read_posts

__all__ = ["CsvPostSource", "read_posts"]
