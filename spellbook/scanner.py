import csv
from pathlib import Path
from typing import Iterator

from .errors import MalformedRow, SourceUnavailable

FIELD_DELIMITER = ";"


def read_source_text(fname) -> str:
    source_file = Path(f"{fname}")
    try:
        raw_source = source_file.read_bytes()
    except OSError as exc:
        raise SourceUnavailable(fname, exc.strerror or str(exc)) from exc

    try:
        return raw_source.decode("utf-8")
    except UnicodeDecodeError:
        pass
    try:
        return raw_source.decode("cp1252")
    except UnicodeDecodeError as exc:
        raise SourceUnavailable(fname, "not a utf-8 or cp1252 text file") from exc


def split_row(line: str) -> list[str]:
    """
    Split one line of a spell source into fields. Leading spaces after a
    delimiter are dropped. Double quotes are never treated as quoting, so
    a field keeps every quote character it contains, including a leading one.
    """
    try:
        return next(csv.reader(
            [line],
            delimiter=FIELD_DELIMITER,
            skipinitialspace=True,
            quoting=csv.QUOTE_NONE,
        ))
    except csv.Error as exc:
        raise MalformedRow(f"unreadable row: {exc}") from exc


def scan_source_lines(fname) -> Iterator[tuple[int, str]]:
    """
    Read a whole spell source and return an iterator over its non-blank
    lines as (line_number, line) pairs, numbered from 1.

    The file is read completely before the iterator is returned, so an
    unreadable source raises SourceUnavailable here and not partway
    through ingestion.
    """
    source_text = read_source_text(fname)
    line_iter = enumerate(source_text.splitlines(), start=1)
    return filter(lambda s: s[1].strip(), line_iter)
