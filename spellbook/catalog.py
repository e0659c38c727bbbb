from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

import littletable as lt
from loguru import logger

from .entry import Entry, class_tag, copy_entry, entry_table, parse_row
from .errors import MalformedRow
from .filters import FilterSpec, apply_filters
from .scanner import scan_source_lines, split_row


@dataclass
class IngestReport:
    """Outcome of ingesting one spell source."""

    source: str
    tag: str
    added: int = 0
    merged: int = 0
    errors: list[MalformedRow] = field(default_factory=list)

    @property
    def rows_read(self) -> int:
        return self.added + self.merged + len(self.errors)

    def __str__(self):
        summary = f"{self.source}: {self.added} added, {self.merged} merged as {self.tag}"
        if self.errors:
            summary += f", {len(self.errors)} malformed rows skipped"
        return summary


class SpellCatalog:
    """
    In-memory catalog of spell Entries, keyed by spell name.

    The first source to supply a spell name fixes all of that spell's
    fields. Every later row with the same name, from any source or from
    re-reading the same source, only appends its source's class tag to
    the existing Entry's classes.
    """

    def __init__(self, defaults: Iterable = ()):
        self._spells: lt.Table = entry_table(title="spells")
        self._defaults: list[str] = [str(d) for d in defaults]

    def __len__(self):
        return len(self._spells)

    def __iter__(self) -> Iterator[Entry]:
        return (copy_entry(entry) for entry in self._spells)

    def __contains__(self, name):
        return self._find(name) is not None

    @property
    def defaults(self) -> list[str]:
        return list(self._defaults)

    def set_defaults(self, sources: Iterable):
        self._defaults = [str(s) for s in sources]

    def _find(self, name: str) -> Optional[Entry]:
        matches = self._spells.where(name=name)
        return matches[0] if matches else None

    def get(self, name: str) -> Optional[Entry]:
        entry = self._find(name)
        return copy_entry(entry) if entry is not None else None

    def add(self, entry: Entry) -> bool:
        """
        Merge one parsed Entry into the catalog. Returns True if it was a
        new spell, False if its class tag was appended to an existing one.
        """
        if (existing := self._find(entry.name)) is not None:
            existing.classes.extend(entry.classes)
            return False
        self._spells.insert(copy_entry(entry))
        return True

    def ingest(self, source) -> IngestReport:
        """
        Read every row of a spell source into the catalog.

        Raises SourceUnavailable if the source cannot be read, in which
        case nothing from it is added. Malformed rows are logged, listed
        in the returned report, and skipped.
        """
        source = str(source)
        tag = class_tag(source)
        report = IngestReport(source, tag)

        for lineno, line in scan_source_lines(source):
            try:
                entry = parse_row(split_row(line), tag)
            except MalformedRow as exc:
                err = MalformedRow(exc.reason, source, lineno)
                logger.warning("skipping row: {}", err)
                report.errors.append(err)
                continue

            if self.add(entry):
                report.added += 1
            else:
                report.merged += 1

        logger.info("ingested {}", report)
        return report

    def ingest_defaults(self) -> list[IngestReport]:
        """
        Ingest each default source in order. An unavailable source raises
        SourceUnavailable and the remaining defaults are not read.
        """
        return [self.ingest(source) for source in self._defaults]

    def all(self) -> lt.Table:
        """
        Return a Table of copies of every Entry. Later ingestion does not
        change the returned entries, and changing them does not change the
        catalog.
        """
        return entry_table(map(copy_entry, self._spells))

    def lookup_prefix(self, partial: str) -> lt.Table:
        """Return all entries whose name starts with the given text (case-sensitive)."""
        return self.all().where(lambda entry: entry.name.startswith(partial))

    def apply(self, filters: Iterable[FilterSpec]) -> lt.Table:
        return apply_filters(self.all(), filters)

