"""Configuration errors raised by the loader and the zone resolver.

ConfigParseError is the fatal variant: the loader raises it instead of
exiting, and the process entry point is expected to terminate on it.
"""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Base class for tzclock configuration errors."""


class ConfigParseError(ConfigError, ValueError):
    """The config file exists but is not a usable document."""

    def __init__(self, path: Path, reason: object) -> None:
        self.path = path
        self.reason = str(reason)
        super().__init__(f"Error parsing config file {path}\n {self.reason}")


class ZoneLookupError(ConfigError, LookupError):
    """A configured zone identifier is unknown to the timezone database."""

    def __init__(self, identifier: str, cause: BaseException) -> None:
        self.identifier = identifier
        # KeyError.__str__ quotes its message
        if isinstance(cause, KeyError) and cause.args:
            detail = cause.args[0]
        else:
            detail = cause
        super().__init__(f"looking up zone {identifier}: {detail}")
