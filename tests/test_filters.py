import pytest

from spellbook.filters import FilterKind, FilterToken, apply_filters, parse_filter


@pytest.mark.parametrize(
    "text, kind, value",
    [
        ("bonus", FilterKind.BONUS, None),
        ("reaction", FilterKind.REACTION, None),
        ("ritual", FilterKind.RITUAL, None),
        ("concentration", FilterKind.CONCENTRATION, None),
        ("school=Evocation", FilterKind.SCHOOL, "Evocation"),
        ("school=", FilterKind.SCHOOL, ""),
        ("class=Wizard", FilterKind.CLASS, "Wizard"),
        ("0", FilterKind.LEVEL, 0),
        ("9", FilterKind.LEVEL, 9),
        ("10", FilterKind.UNRECOGNIZED, None),
        ("-1", FilterKind.UNRECOGNIZED, None),
        ("Ritual", FilterKind.UNRECOGNIZED, None),
        ("level=3", FilterKind.UNRECOGNIZED, None),
        ("", FilterKind.UNRECOGNIZED, None),
    ],
)
def test_parse_filter(text, kind, value):
    token = parse_filter(text)
    assert token == FilterToken(kind, text, value)
    assert str(token) == text


def names(entries):
    return sorted(entry.name for entry in entries)


def test_empty_filter_list_keeps_everything(catalog):
    assert len(catalog.apply([])) == len(catalog)


def test_school_and_level(catalog):
    assert names(catalog.apply(["school=Evocation", "3"])) == ["Fireball"]
    assert names(catalog.apply(["school=Evocation", "2"])) == ["Scorching Ray"]


def test_school_match_is_exact(catalog):
    assert not catalog.apply(["school=evocation"])
    assert not catalog.apply(["school=Evoc"])


def test_keyword_filters(catalog):
    assert names(catalog.apply(["bonus"])) == ["Misty Step"]
    assert names(catalog.apply(["reaction"])) == ["Shield"]
    assert names(catalog.apply(["ritual"])) == ["Detect Magic", "Fireball"]
    assert names(catalog.apply(["concentration"])) == ["Bless", "Detect Magic"]


def test_class_filter(catalog):
    assert names(catalog.apply(["class=Cleric"])) == ["Bless", "Sacred Flame"]
    assert names(catalog.apply(["class=Bard", "class=Cleric"])) == ["Bless"]
    assert names(catalog.apply(["0", "class=Wizard"])) == ["Fire Bolt"]


def test_unrecognized_token_matches_nothing(catalog):
    assert not catalog.apply(["firebal"])
    assert not catalog.apply(["ritual", "bogus"])


def test_filters_combine_with_and(catalog):
    filters = [parse_filter(f) for f in ("concentration", "1", "class=Wizard")]
    kept = catalog.apply(filters)
    for entry in catalog:
        expected = all(token.matches(entry) for token in filters)
        assert (entry in kept) == expected
    assert names(kept) == ["Detect Magic"]


def test_apply_filters_to_plain_list(catalog):
    entries = list(catalog)
    result = apply_filters(entries, ["school=Abjuration"])
    assert names(result) == ["Shield"]


def test_duplicate_tokens_are_allowed(catalog):
    assert names(catalog.apply(["ritual", "ritual"])) == ["Detect Magic", "Fireball"]
