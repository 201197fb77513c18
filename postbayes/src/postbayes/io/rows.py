"""CSV row source feeding labelled posts to the classifier.

What:
  Stream :class:`~postbayes.core.aggregator.Post` records out of a CSV file
  whose header names a label column and a content column.

Why:
  Training is a single forward pass, so rows are produced lazily and never
  re-read. File and format problems surface as the classifier's own error
  types so the CLI can report them precisely.

How:
  :class:`CsvPostSource` wraps :class:`csv.DictReader`. :meth:`check` opens and
  closes the file eagerly; iteration reopens it, validates the header, and
  converts each record through :meth:`Post.from_mapping`, prefixing errors with
  the path and line number.

Interfaces:
  :class:`CsvPostSource`, :func:`read_posts`.

Invariants & Safety:
  - Blank lines are skipped; every other record must carry both fields.
  - The file handle is closed when iteration finishes or fails.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import IO, Iterator, Union

from ..core.aggregator import Post
from ..core.errors import FileOpenError, MalformedInputError

PathLike = Union[str, Path]


class CsvPostSource:
    """Re-iterable view of the posts stored in one CSV file."""

    def __init__(
        self,
        path: PathLike,
        *,
        label_field: str = "tag",
        content_field: str = "content",
        delimiter: str = ",",
    ) -> None:
        self.path = Path(path)
        self.label_field = label_field
        self.content_field = content_field
        self.delimiter = delimiter

    def check(self) -> None:
        """Verify the file can be opened, without reading any rows.

        Raises:
          FileOpenError: If the path is missing, a directory, or unreadable.
        """

        self._open().close()

    def __iter__(self) -> Iterator[Post]:
        handle = self._open()
        with handle:
            try:
                reader = csv.DictReader(handle, delimiter=self.delimiter)
                fields = reader.fieldnames or []
                for name in (self.label_field, self.content_field):
                    if name not in fields:
                        raise MalformedInputError(f"{self.path}: header lacks column {name!r}")
                for row in reader:
                    try:
                        yield Post.from_mapping(
                            row,
                            label_field=self.label_field,
                            content_field=self.content_field,
                        )
                    except MalformedInputError as exc:
                        raise MalformedInputError(f"{self.path}, line {reader.line_num}: {exc}") from exc
            except (csv.Error, UnicodeDecodeError) as exc:
                raise MalformedInputError(f"{self.path}: {exc}") from exc

    def _open(self) -> IO[str]:
        try:
            return self.path.open("r", newline="", encoding="utf-8")
        except OSError as exc:
            raise FileOpenError(str(self.path)) from exc


def read_posts(
    path: PathLike,
    *,
    label_field: str = "tag",
    content_field: str = "content",
    delimiter: str = ",",
) -> Iterator[Post]:
    """Yield the posts of ``path`` in file order.

    Raises:
      FileOpenError: When iteration starts and the file cannot be opened.
      MalformedInputError: On a missing column, missing cell, or CSV syntax
        error.
    """

    source = CsvPostSource(path, label_field=label_field, content_field=content_field, delimiter=delimiter)
    yield from source
