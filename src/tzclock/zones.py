"""Zone resolution: turn a configured zone entry into a display-ready Zone.

The timezone database is reached through the small TimezoneDatabase
protocol so the resolver can be exercised without the host's tzdata.
ZoneInfoDatabase is the default implementation over ``zoneinfo``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo

from .errors import ZoneLookupError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoneEntry:
    """One [[zones]] entry. An empty name means "use the database name"."""

    id: str = ""
    name: str = ""


@dataclass(frozen=True)
class Zone:
    """A resolved zone, labelled as ``"(<abbreviation>) <display-name>"``."""

    db_name: str
    name: str

    def __str__(self) -> str:
        return self.name

    def location(self) -> tzinfo | None:
        """tzinfo for db_name; None stands for the host's local zone.

        Raises:
            ZoneLookupError: if zoneinfo does not know db_name.
        """
        try:
            return ZoneInfoDatabase().lookup(self.db_name).tz
        except (KeyError, ValueError, OSError) as e:
            raise ZoneLookupError(self.db_name, e) from e


class Location(Protocol):
    @property
    def canonical_name(self) -> str: ...

    def local_at(self, instant: datetime) -> tuple[timedelta, str]: ...


class TimezoneDatabase(Protocol):
    def lookup(self, identifier: str) -> Location:
        """Return the location for ``identifier``.

        Raises KeyError, ValueError or OSError for unknown identifiers.
        """
        ...


@dataclass(frozen=True)
class TzLocation:
    canonical_name: str
    tz: tzinfo | None  # None: host local time

    def local_at(self, instant: datetime) -> tuple[timedelta, str]:
        """Return (UTC offset, abbreviation) in effect at ``instant``."""
        then = instant.astimezone(self.tz)
        return then.utcoffset() or timedelta(0), then.tzname() or ""


class ZoneInfoDatabase:
    """Host timezone database.

    Mirrors the usual tz conventions: "" and "UTC" mean UTC, "Local" is the
    host's local zone, anything else is an IANA key looked up via zoneinfo.
    """

    def lookup(self, identifier: str) -> TzLocation:
        if identifier in ("", "UTC"):
            return TzLocation("UTC", timezone.utc)
        if identifier == "Local":
            return TzLocation("Local", None)
        zone = ZoneInfo(identifier)
        return TzLocation(zone.key, zone)


def resolve_zone(
    now: datetime,
    entry: ZoneEntry,
    database: TimezoneDatabase | None = None,
) -> Zone:
    """Resolve ``entry`` as of ``now`` (naive values are taken as UTC).

    The abbreviation depends on the instant, so the same entry yields EST in
    January and EDT in July. Whatever abbreviation the database reports is
    used as-is, including an empty one.

    Raises:
        ZoneLookupError: if the database does not know ``entry.id``.
    """
    if database is None:
        database = ZoneInfoDatabase()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    try:
        location = database.lookup(entry.id)
    except (KeyError, ValueError, OSError) as e:
        raise ZoneLookupError(entry.id, e) from e

    canonical = location.canonical_name
    display = entry.name or canonical
    _, abbreviation = location.local_at(now)
    if canonical != entry.id:
        logger.debug("Zone %r resolved to %r", entry.id, canonical)
    return Zone(db_name=canonical, name=f"({abbreviation}) {display}")
