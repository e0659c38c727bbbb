import enum
import re
from dataclasses import dataclass
from typing import Iterable, Union

import littletable as lt

from .entry import MAX_LEVEL, Entry, entry_table

SCHOOL_PREFIX = "school="
CLASS_PREFIX = "class="

level_token_re = re.compile(r"[+-]?[0-9]+")


class FilterKind(enum.Enum):
    BONUS = "bonus"
    REACTION = "reaction"
    RITUAL = "ritual"
    CONCENTRATION = "concentration"
    SCHOOL = "school"
    CLASS = "class"
    LEVEL = "level"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class FilterToken:
    """
    A parsed filter expression. `text` keeps the token as the user typed
    it; `value` holds the school name, class name or level to compare
    against, for the kinds that take one.
    """

    kind: FilterKind
    text: str
    value: Union[str, int, None] = None

    def matches(self, entry: Entry) -> bool:
        kind = self.kind
        if kind is FilterKind.BONUS:
            return "bonus" in entry.cast_time
        if kind is FilterKind.REACTION:
            return "reaction" in entry.cast_time
        if kind is FilterKind.RITUAL:
            return entry.ritual
        if kind is FilterKind.CONCENTRATION:
            return entry.concentration
        if kind is FilterKind.SCHOOL:
            return entry.school == self.value
        if kind is FilterKind.CLASS:
            return self.value in entry.classes
        if kind is FilterKind.LEVEL:
            return entry.level == self.value
        # unrecognized tokens exclude every entry
        return False

    def __str__(self):
        return self.text


KEYWORD_KINDS = {
    "bonus": FilterKind.BONUS,
    "reaction": FilterKind.REACTION,
    "ritual": FilterKind.RITUAL,
    "concentration": FilterKind.CONCENTRATION,
}


def parse_filter(text: str) -> FilterToken:
    """
    Classify a filter expression. Checked in order: the keywords bonus,
    reaction, ritual and concentration; "school=<name>"; "class=<name>";
    a spell level 0-9. Anything else is UNRECOGNIZED, which matches no
    entry.
    """
    if kind := KEYWORD_KINDS.get(text):
        return FilterToken(kind, text)
    if text.startswith(SCHOOL_PREFIX):
        return FilterToken(FilterKind.SCHOOL, text, text.removeprefix(SCHOOL_PREFIX))
    if text.startswith(CLASS_PREFIX):
        return FilterToken(FilterKind.CLASS, text, text.removeprefix(CLASS_PREFIX))
    if level_token_re.fullmatch(text) and 0 <= int(text) <= MAX_LEVEL:
        return FilterToken(FilterKind.LEVEL, text, int(text))
    return FilterToken(FilterKind.UNRECOGNIZED, text)


FilterSpec = Union[FilterToken, str]


def apply_filters(entries: Iterable[Entry], filters: Iterable[FilterSpec]) -> lt.Table:
    """
    Return a Table of the entries that match every filter. Filters may be
    given as parsed FilterTokens or as raw strings. An empty filter list
    keeps every entry.
    """
    tokens = [parse_filter(f) if isinstance(f, str) else f for f in filters]
    if not isinstance(entries, lt.Table):
        entries = entry_table(entries)
    return entries.where(lambda entry: all(token.matches(entry) for token in tokens))
