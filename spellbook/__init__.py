"""
spellbook - load tabletop spell lists from ';'-delimited text files into
an in-memory catalog, and search and filter them.
"""

__version__ = "0.1.0"

from .catalog import IngestReport, SpellCatalog
from .entry import Entry, class_tag, parse_row, render_entry
from .errors import ConfigError, MalformedRow, SourceUnavailable, SpellbookError
from .filters import FilterKind, FilterToken, apply_filters, parse_filter
from .sorting import by_level, by_name, sort_entries

__all__ = [
    "Entry",
    "parse_row",
    "class_tag",
    "render_entry",
    "SpellCatalog",
    "IngestReport",
    "FilterKind",
    "FilterToken",
    "parse_filter",
    "apply_filters",
    "sort_entries",
    "by_name",
    "by_level",
    "SpellbookError",
    "SourceUnavailable",
    "MalformedRow",
    "ConfigError",
]
