import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable, Sequence

import littletable as lt

from .errors import MalformedRow

RITUAL_MARKER = " (Ritual)"
CONCENTRATION_PREFIX = "Concentration, up to "
MIN_FIELDS, MAX_FIELDS = 8, 9
MAX_LEVEL = 9

level_re = re.compile(r"[+-]?[0-9]+")
material_re = re.compile(r"\(.*?\)")
word_start_re = re.compile(r"\b[a-z]")

BOLD_START = "\033[31m"
BOLD_END = "\033[0m"


@dataclass
class Entry:
    """One spell, as parsed from a row of a spell source."""

    level: int
    name: str
    ritual: bool = False
    school: str = ""
    cast_time: str = ""
    range: str = ""
    components: str = ""
    duration: str = ""
    concentration: bool = False
    material: str = ""
    description: str = ""
    classes: list[str] = field(default_factory=list)

    @property
    def is_cantrip(self) -> bool:
        return self.level == 0

    def __str__(self):
        return render_entry(self, bold=False)


def copy_entry(entry: Entry) -> Entry:
    """Copy an Entry, including its own list of classes."""
    return replace(entry, classes=list(entry.classes))


def capitalize_words(text: str) -> str:
    return word_start_re.sub(lambda m: m[0].upper(), text)


def class_tag(source) -> str:
    """
    Derive the class tag for a source: its base name without the file
    suffix, with the first letter of each word capitalized.
    """
    return capitalize_words(Path(source).stem)


def parse_level(text: str) -> int:
    text = text.strip()
    if not level_re.fullmatch(text):
        raise MalformedRow(f"malformed level {text!r}")
    level = int(text)
    if not 0 <= level <= MAX_LEVEL:
        raise MalformedRow(f"level {level} out of range 0-{MAX_LEVEL}")
    return level


def parse_name(text: str) -> tuple[str, bool]:
    text = text.strip()
    if text.endswith(RITUAL_MARKER):
        return text.removesuffix(RITUAL_MARKER).strip(), True
    return text, False


def parse_school(text: str) -> str:
    # "3rd-level Evocation" or "Evocation Cantrip"
    if "level " in text:
        return text.partition("level ")[2].strip()
    if " Cantrip" in text:
        return text.partition(" Cantrip")[0].strip()
    return text.strip()


def parse_duration(text: str) -> tuple[str, bool]:
    text = text.strip()
    if text.startswith(CONCENTRATION_PREFIX):
        return text.removeprefix(CONCENTRATION_PREFIX).strip(), True
    return text, False


def parse_description(text: str) -> tuple[str, str]:
    text = text.strip()
    if match := material_re.match(text):
        return match[0], text[match.end():].strip()
    return "", text


def parse_row(row: Sequence[str], tag: str) -> Entry:
    """
    Convert one 8- or 9-field row into an Entry, tagged with the class
    tag of the source it came from. A 9th field is accepted and ignored.

    Raises MalformedRow if the field count is wrong or the level is not
    an integer in 0-9.
    """
    if not MIN_FIELDS <= len(row) <= MAX_FIELDS:
        raise MalformedRow(
            f"expected {MIN_FIELDS} or {MAX_FIELDS} fields, found {len(row)}"
        )

    level = parse_level(row[0])
    name, ritual = parse_name(row[1])
    duration, concentration = parse_duration(row[6])
    material, description = parse_description(row[7])

    return Entry(
        level=level,
        name=name,
        ritual=ritual,
        school=parse_school(row[2]),
        cast_time=row[3].strip(),
        range=row[4].strip(),
        components=row[5].strip(),
        duration=duration,
        concentration=concentration,
        material=material,
        description=description,
        classes=[capitalize_words(tag)],
    )


def render_entry(entry: Entry, bold: bool = True) -> str:
    """
    Format an Entry as multi-line text for display. With bold=True, the
    spell name is wrapped in ANSI highlighting.
    """
    name = f"{BOLD_START}{entry.name}{BOLD_END}" if bold else entry.name
    class_list = f"[{' '.join(entry.classes)}]"

    if entry.is_cantrip:
        lines = [f"{name}, {entry.school} cantrip for {class_list}"]
    else:
        lines = [f"{name}, Level {entry.level} {entry.school} spell for {class_list}"]
    if entry.ritual:
        lines.append("Ritual")
    lines.append(
        f"Casting time: {entry.cast_time}, Range: {entry.range}, Duration: {entry.duration}"
    )
    if entry.concentration:
        lines.append("Concentration")
    lines.append(f"Components: {entry.components}")
    if entry.material:
        lines.append(f"Materials: {entry.material}")
    lines.append(entry.description)

    return "\n".join(lines)


def entry_table(entries: Iterable[Entry] = (), title: str = "") -> lt.Table:
    """Create a Table of Entries, uniquely indexed by spell name."""
    table = lt.Table(title)
    table.create_index("name", unique=True)
    table.insert_many(entries)
    return table
