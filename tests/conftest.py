import pytest

from spellbook.catalog import SpellCatalog

FIREBALL_ROW = [
    "3",
    " Fireball (Ritual)",
    " 3rd-level Evocation",
    " 1 action",
    " 150 feet",
    " V, S, M",
    " Instantaneous",
    " (a tiny ball of bat guano and sulfur) A bright streak flashes...",
]

FIRE_BOLT_ROW = [
    "0",
    " Fire Bolt",
    " Evocation Cantrip",
    " 1 action",
    " 120 feet",
    " V, S",
    " Concentration, up to 1 minute",
    " You hurl a mote of fire...",
]

WIZARD_LINES = [
    "3; Fireball (Ritual); 3rd-level Evocation; 1 action; 150 feet; V, S, M; Instantaneous;"
    " (a tiny ball of bat guano and sulfur) A bright streak flashes...",
    "0; Fire Bolt; Evocation Cantrip; 1 action; 120 feet; V, S; Instantaneous; You hurl a mote of fire...",
    "2; Scorching Ray; 2nd-level Evocation; 1 action; 120 feet; V, S; Instantaneous; You create three rays of fire.",
    "1; Shield; 1st-level Abjuration; 1 reaction; Self; V, S; 1 round; An invisible barrier of magical force appears.",
    "1; Detect Magic (Ritual); 1st-level Divination; 1 action; Self; V, S;"
    " Concentration, up to 10 minutes; You sense the presence of magic.",
    "2; Misty Step; 2nd-level Conjuration; 1 bonus action; Self; V; Instantaneous; You teleport up to 30 feet.",
]

BARD_LINES = [
    "1; Bless; 1st-level Enchantment; 1 action; 30 feet; V, S, M;"
    " Concentration, up to 1 minute; (a sprinkling of holy water) You bless up to three creatures.",
    "0; Vicious Mockery; Enchantment Cantrip; 1 action; 60 feet; V; Instantaneous; You unleash insults.",
]

CLERIC_LINES = [
    "2; Bless; 2nd-level Abjuration; 1 bonus action; 60 feet; V;"
    " 1 hour; A different version of the spell.",
    "0; Sacred Flame; Evocation Cantrip; 1 action; 60 feet; V, S; Instantaneous; Flame-like radiance descends.",
]


@pytest.fixture
def write_source(tmp_path):
    """Factory fixture that writes lines to a source file and returns its path."""

    def _write(name, lines):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def wizard_source(write_source):
    return write_source("wizard.csv", WIZARD_LINES)


@pytest.fixture
def bard_source(write_source):
    return write_source("bard.csv", BARD_LINES)


@pytest.fixture
def cleric_source(write_source):
    return write_source("cleric.csv", CLERIC_LINES)


@pytest.fixture
def catalog(wizard_source, bard_source, cleric_source):
    spells = SpellCatalog()
    spells.ingest(wizard_source)
    spells.ingest(bard_source)
    spells.ingest(cleric_source)
    return spells
