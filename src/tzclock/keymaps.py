"""Keybinding actions read from the [keymaps] table."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Keymaps:
    """Ordered key bindings per action. An empty tuple means unbound.

    Two actions may share a binding; resolving that is up to the consumer.
    """

    prev_hour: tuple[str, ...] = ()
    next_hour: tuple[str, ...] = ()
    prev_day: tuple[str, ...] = ()
    next_day: tuple[str, ...] = ()
    prev_week: tuple[str, ...] = ()
    next_week: tuple[str, ...] = ()
    toggle_date: tuple[str, ...] = ()
    open_web: tuple[str, ...] = ()
    now: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Keymaps:
        """Build from a decoded [keymaps] table.

        Raises:
            ValueError: if a known action is not a list of strings.
        """
        values: dict[str, tuple[str, ...]] = {}
        for action, bindings in data.items():
            if action not in ACTIONS:
                logger.debug("Ignoring unknown keymap action: %s", action)
                continue
            if not isinstance(bindings, list) or not all(
                isinstance(b, str) for b in bindings
            ):
                raise ValueError(f"keymaps.{action}: expected a list of strings")
            values[action] = tuple(bindings)
        return cls(**values)

    def to_dict(self) -> dict[str, list[str]]:
        return {f.name: list(getattr(self, f.name)) for f in fields(self)}

    def actions_for(self, key: str) -> list[str]:
        """Return every action bound to ``key``, in declaration order."""
        return [action for action, keys in self.to_dict().items() if key in keys]


ACTIONS: tuple[str, ...] = tuple(f.name for f in fields(Keymaps))
