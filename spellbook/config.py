"""Default-source configuration, read from a small key=value file."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError
from .sorting import DEFAULT_ORDER, SORT_ORDERS

DEFAULT_CONFIG_NAME = "spells.cfg"
CONFIG_ENV_VAR = "SPELLBOOK_CONFIG"


@dataclass
class SpellbookConfig:
    directory: Path = field(default_factory=Path.cwd)
    sources: list[Path] = field(default_factory=list)
    sort_order: str = DEFAULT_ORDER


def config_path(path=None) -> Path:
    if path is not None:
        return Path(path)
    return Path(os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_NAME))


def read_config(path=None) -> SpellbookConfig:
    """
    Read a spellbook config file. Recognized keys:

        dir=<directory>        directory for source names on later list= lines
        list=<a.csv>;<b.csv>   default sources, joined onto the current dir
        sort=<name|level>      default display order

    Blank lines, '#' comments, and unknown keys are ignored. Raises
    ConfigError if the file cannot be read or names no sources.
    """
    cfg_file = config_path(path)
    try:
        cfg_text = cfg_file.read_text()
    except OSError as exc:
        raise ConfigError(cfg_file, "no config file found, no default sources will be loaded") from exc

    config = SpellbookConfig()
    for line in cfg_text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()

        if key == "dir":
            config.directory = Path(value.strip())
        elif key == "list":
            config.sources.extend(
                config.directory / name.strip()
                for name in value.split(";")
                if name.strip()
            )
        elif key == "sort":
            order = value.strip()
            if order not in SORT_ORDERS:
                raise ConfigError(cfg_file, f"unknown sort order {order!r}")
            config.sort_order = order

    if not config.sources:
        raise ConfigError(cfg_file, "no spell sources listed")

    return config
