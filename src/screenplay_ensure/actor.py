"""A minimal actor to perform ensures against.

Screenplay frameworks bring their own actor; any object exposing what the
lazy values read (typically ``recall``) can be passed to ``perform_as``.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol


class Task(Protocol):
    def perform_as(self, actor: Any) -> None: ...


class Actor:
    def __init__(self, name: str, logger: logging.Logger | None = None):
        self.name = name
        self._memory: dict[str, Any] = {}
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def named(cls, name: str) -> "Actor":
        return cls(name)

    def remember(self, key: str, value: Any) -> None:
        self._memory[key] = value

    def recall(self, key: str) -> Any:
        """Return what was remembered under ``key``, or None."""
        return self._memory.get(key)

    def attempts_to(self, *performables: Task) -> None:
        """Perform each in order; the first failure propagates and stops the rest."""
        for performable in performables:
            self.logger.info(f"{self.name} attempts to ensure {performable}")
            performable.perform_as(self)

    def __repr__(self) -> str:
        return f"Actor({self.name!r})"
