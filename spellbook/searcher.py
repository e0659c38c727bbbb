import sys
from typing import Iterable, TextIO

from .catalog import SpellCatalog
from .config import read_config
from .entry import Entry, render_entry
from .errors import SpellbookError
from .filters import FilterKind, FilterToken, parse_filter
from .logging_config import configure_logging
from .sorting import DEFAULT_ORDER, SORT_ORDERS, sort_entries

EXIT_COMMANDS = ("exit", "quit", "q", "x")

HELP_TEXT = """\
  exit              - exits program
  load 'filename'   - loads a spell source into memory ('load def' for the defaults)
  'spellname'       - prints spell information for all names starting with the text
  sort              - directs the program how to sort spells
  filter            - filters the list according to request
  list              - prints the current filtered list of spells
  table             - prints the current filtered list as a summary table
  help              - prints this help"""

SORT_HELP = """\
  Enter 'sort level' to sort spells by level. (default)
  Enter 'sort name' to sort spells by name."""

FILTER_HELP = """\
Options:
  filter clear                    - clears the filter list
  filter list                     - prints the current filtered list
  filter 0-9                      - only the specified level of spell
  filter bonus                    - only spells cast as a bonus action
  filter reaction                 - only spells cast as a reaction
  filter ritual                   - only ritual spells
  filter concentration            - only spells that require Concentration
  filter school=<NameOfSchool>    - only spells of the given school
  filter class=<NameOfClass>      - only spells castable by the given class"""


class SpellSearcher:
    """Interactive command handler over a SpellCatalog."""

    def __init__(self, catalog: SpellCatalog, sort_order: str = DEFAULT_ORDER, out: TextIO = None):
        self.catalog = catalog
        self.sort_order = sort_order
        self.filters: list[FilterToken] = []
        self.out = out or sys.stdout

    def say(self, *args):
        print(*args, file=self.out)

    def format_entries(self, entries: Iterable[Entry]) -> str:
        bold = self.out.isatty()
        return "\n\n".join(
            render_entry(entry, bold=bold) for entry in sort_entries(entries, self.sort_order)
        )

    def filter_names(self) -> str:
        return f"[{' '.join(str(f) for f in self.filters)}]"

    def load(self, source: str):
        self.say(f"Loading... {source}")
        try:
            if source == "def":
                reports = self.catalog.ingest_defaults()
            else:
                reports = [self.catalog.ingest(source)]
        except SpellbookError as exc:
            self.say(exc)
            return
        for report in reports:
            self.say(report)
            for err in report.errors:
                self.say(f"  {err}")

    def list_filtered(self):
        self.say(f"Filters: {self.filter_names()}")
        self.say(self.format_entries(self.catalog.apply(self.filters)))

    def present_filtered(self):
        results = sort_entries(self.catalog.apply(self.filters), self.sort_order)
        if not results:
            self.say("No spells match the current filters.")
            return
        results.select(
            "level name school",
            classes=lambda entry: ", ".join(entry.classes),
        ).present(file=self.out, caption=f"Filters: {self.filter_names()}")

    def sort_command(self, args: str):
        if not args:
            self.say(SORT_HELP)
        elif args in SORT_ORDERS:
            self.sort_order = args
            self.say(f"Now sorting by {args}.")
        else:
            self.say(f"Unknown sort order {args!r}.")
            self.say(SORT_HELP)

    def filter_command(self, args: str):
        if not args:
            self.say(f"Current filters: {self.filter_names()}")
            self.say(FILTER_HELP)
        elif args == "clear":
            self.filters.clear()
            self.say("Clearing filtered list.")
        elif args == "list":
            self.list_filtered()
        else:
            token = parse_filter(args)
            self.filters.append(token)
            if token.kind is FilterKind.UNRECOGNIZED:
                self.say(f"Unrecognized filter {args!r}, no spells will match it.")
            self.say(f"Filtering... {self.filter_names()}")

    def lookup(self, partial: str):
        matches = self.catalog.lookup_prefix(partial)
        if not matches:
            self.say("No spell or command not recognized. Please try again.")
        else:
            self.say(self.format_entries(matches))

    def handle(self, command: str) -> bool:
        """Process one command; returns False when the user asks to exit."""
        command = command.strip()
        verb, _, args = command.partition(" ")
        args = args.strip()

        if command in ("help", "h"):
            self.say(HELP_TEXT)
        elif command in EXIT_COMMANDS:
            self.say("Exiting program.")
            return False
        elif verb == "load" and args:
            self.load(args)
        elif verb == "sort":
            self.sort_command(args)
        elif verb == "filter":
            self.filter_command(args)
        elif command in ("list", "ls"):
            self.list_filtered()
        elif command == "table":
            self.present_filtered()
        elif command:
            self.lookup(command)
        return True

    def run(self):
        while True:
            try:
                command = input("\n>>> ")
            except EOFError:
                break
            if not self.handle(command):
                break


def main(config_file=None):
    configure_logging()
    print("Welcome to Spellbook!")

    catalog = SpellCatalog()
    sort_order = DEFAULT_ORDER
    try:
        config = read_config(config_file)
    except SpellbookError as exc:
        print(exc)
    else:
        catalog.set_defaults(config.sources)
        sort_order = config.sort_order
        try:
            catalog.ingest_defaults()
        except SpellbookError as exc:
            print(exc)
        else:
            print("Default spell sources loaded.")

    SpellSearcher(catalog, sort_order).run()


if __name__ == '__main__':
    main()
