from typing import Iterable

import littletable as lt

from .entry import Entry, entry_table

# Table.sort specs for each display order
SORT_ORDERS = {
    "name": "name",
    "level": "level,name",
}
DEFAULT_ORDER = "level"


def by_name(entry: Entry):
    return entry.name


def by_level(entry: Entry):
    return entry.level, entry.name


def sort_entries(entries: Iterable[Entry], order: str = DEFAULT_ORDER) -> lt.Table:
    """
    Sort entries for display, by "name" (alphabetical) or by "level"
    (ascending level, then alphabetical within a level). Table inputs are
    sorted in place; any other iterable is first gathered into a new Table.
    """
    try:
        sort_spec = SORT_ORDERS[order]
    except KeyError:
        raise ValueError(
            f"unknown sort order {order!r}, expected one of {', '.join(SORT_ORDERS)}"
        ) from None

    if not isinstance(entries, lt.Table):
        entries = entry_table(entries)
    entries.sort(sort_spec)
    return entries
