"""Shared fixtures for tzclock tests."""

from datetime import datetime, timedelta
from pathlib import Path

import pytest


class FakeLocation:
    def __init__(self, canonical_name: str, abbreviation: str) -> None:
        self.canonical_name = canonical_name
        self.abbreviation = abbreviation

    def local_at(self, instant: datetime) -> tuple[timedelta, str]:
        return timedelta(0), self.abbreviation


class FakeDatabase:
    """In-memory timezone database keyed by identifier."""

    def __init__(self, locations: dict[str, FakeLocation]) -> None:
        self.locations = locations
        self.lookups: list[str] = []

    def lookup(self, identifier: str) -> FakeLocation:
        self.lookups.append(identifier)
        try:
            return self.locations[identifier]
        except KeyError:
            raise KeyError(f"unknown time zone {identifier}") from None


@pytest.fixture
def make_database():
    """Build a FakeDatabase from {identifier: (canonical_name, abbreviation)}."""

    def _make(entries: dict[str, tuple[str, str]]) -> FakeDatabase:
        return FakeDatabase(
            {key: FakeLocation(*value) for key, value in entries.items()}
        )

    return _make


@pytest.fixture
def write_config(tmp_path: Path):
    """Write conf.toml with tmp_path as the home directory; returns its path."""

    def _write(content: str | bytes) -> Path:
        path = tmp_path / ".config" / "tz" / "conf.toml"
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path

    return _write
