"""User settings — reads ~/.config/tz/conf.toml to produce a Config.

Key entities:
  - Config: frozen dataclass with the resolved zones and keymaps.
  - ConfigLoader: locate, read, parse and resolve; tags defaulted loads.
  - load_config_file(): convenience wrapper around ConfigLoader.load().

A missing home directory or config file is not an error: the loader returns
an empty Config whose ``outcome`` says why. A malformed file raises
ConfigParseError, which callers must treat as fatal.
"""

from __future__ import annotations

import enum
import logging
import os
import tomllib
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .errors import ConfigParseError
from .keymaps import Keymaps
from .zones import TimezoneDatabase, Zone, ZoneEntry, ZoneInfoDatabase, resolve_zone

CONFIG_RELPATH = Path(".config") / "tz" / "conf.toml"
DISPLAY_PATH = "~/.config/tz/conf.toml"

# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


class LoadOutcome(enum.Enum):
    LOADED = "loaded"
    DEFAULTED_NO_HOME = "defaulted_no_home"
    DEFAULTED_NO_FILE = "defaulted_no_file"


@dataclass(frozen=True)
class ConfigDocument:
    """Raw shape of conf.toml; only lives for the duration of a load."""

    header: str = ""
    zones: tuple[ZoneEntry, ...] = ()
    keymaps: Keymaps = field(default_factory=Keymaps)


@dataclass(frozen=True)
class Config:
    """Loaded configuration, read-only for the rest of the process.

    ``zones`` keeps the order of the [[zones]] entries in the file.
    """

    zones: tuple[Zone, ...] = ()
    keymaps: Keymaps = field(default_factory=Keymaps)
    header: str = ""
    outcome: LoadOutcome = LoadOutcome.DEFAULTED_NO_FILE
    path: Path | None = None

    @property
    def is_defaulted(self) -> bool:
        return self.outcome is not LoadOutcome.LOADED


def config_path(home: Path) -> Path:
    return home / CONFIG_RELPATH


# ---------------------------------------------------------------------------
# Document parsing
# ---------------------------------------------------------------------------


def _expect(value: Any, kind: type, where: str) -> Any:
    if not isinstance(value, kind):
        raise ValueError(
            f"{where}: expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _zone_entry(index: int, raw: Any) -> ZoneEntry:
    _expect(raw, dict, f"zones[{index}]")
    return ZoneEntry(
        id=_expect(raw.get("id", ""), str, f"zones[{index}].id"),
        name=_expect(raw.get("name", ""), str, f"zones[{index}].name"),
    )


def parse_document(raw: dict[str, Any]) -> ConfigDocument:
    """Shape a decoded TOML table into a ConfigDocument.

    Unknown keys are ignored.

    Raises:
        ValueError: if a known key has the wrong type.
    """
    header = _expect(raw.get("header", ""), str, "header")
    zones_raw = _expect(raw.get("zones", []), list, "zones")
    keymaps_raw = _expect(raw.get("keymaps", {}), dict, "keymaps")
    return ConfigDocument(
        header=header,
        zones=tuple(_zone_entry(i, z) for i, z in enumerate(zones_raw)),
        keymaps=Keymaps.from_dict(keymaps_raw),
    )


# ---------------------------------------------------------------------------
# ConfigLoader
# ---------------------------------------------------------------------------


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ConfigLoader:
    """Load the user config from ``<home>/.config/tz/conf.toml``.

    Args:
        home: Home directory override. Defaults to ``Path.home()``.
        database: Timezone database used to resolve zones.
        logger: Logger for the missing-file notice and debug output.
        clock: Returns the reference instant for zone abbreviations.
    """

    def __init__(
        self,
        home: Path | None = None,
        *,
        database: TimezoneDatabase | None = None,
        logger: logging.Logger | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.home = home
        self.database = database if database is not None else ZoneInfoDatabase()
        self.logger = logger or logging.getLogger(__name__)
        self.clock = clock or _utcnow

    def _resolve_home(self) -> Path | None:
        if self.home is not None:
            return self.home
        # Path.home() turns an empty HOME into "/"
        if os.environ.get("HOME") == "":
            return None
        try:
            return Path.home()
        except (RuntimeError, KeyError):
            return None

    def parse(self, path: Path, data: bytes) -> ConfigDocument:
        """Decode and shape ``data`` read from ``path``.

        Raises:
            ConfigParseError: on invalid UTF-8, invalid TOML or a bad shape.
        """
        try:
            raw = tomllib.loads(data.decode("utf-8"))
            return parse_document(raw)
        except (UnicodeDecodeError, tomllib.TOMLDecodeError, ValueError) as e:
            raise ConfigParseError(path, e) from e

    def load(self) -> Config:
        """Read, parse and resolve the config file.

        Returns:
            The loaded Config, or an empty one tagged DEFAULTED_NO_HOME /
            DEFAULTED_NO_FILE when there is nothing to load.

        Raises:
            ConfigParseError: the file exists but cannot be used (fatal).
            ZoneLookupError: a configured zone is unknown; nothing is loaded.
        """
        home = self._resolve_home()
        if home is None:
            return Config(outcome=LoadOutcome.DEFAULTED_NO_HOME)

        path = config_path(home)
        try:
            data = path.read_bytes()
        except OSError:
            self.logger.info("Config file '%s' not found. Skipping...", DISPLAY_PATH)
            return Config(outcome=LoadOutcome.DEFAULTED_NO_FILE)

        document = self.parse(path, data)

        now = self.clock()
        zones = tuple(
            resolve_zone(now, entry, self.database) for entry in document.zones
        )
        self.logger.debug("Loaded %d zone(s) from %s", len(zones), path)

        return Config(
            zones=zones,
            keymaps=document.keymaps,
            header=document.header,
            outcome=LoadOutcome.LOADED,
            path=path,
        )


def load_config_file(
    home: Path | None = None,
    *,
    database: TimezoneDatabase | None = None,
    logger: logging.Logger | None = None,
    clock: Callable[[], datetime] | None = None,
) -> Config:
    """Load the user config; see ConfigLoader.load()."""
    loader = ConfigLoader(home, database=database, logger=logger, clock=clock)
    return loader.load()
