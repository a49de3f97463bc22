"""Deferred values resolved against an actor when an ensure is performed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from screenplay_ensure.config import DEFAULT_SETTINGS, EnsureSettings
from screenplay_ensure.results import render_literal

T = TypeVar("T")


@dataclass(frozen=True)
class LazyValue(Generic[T]):
    """A named read of a value that is only known once an actor is available.

    ``resolve`` may be called any number of times and must not change the
    actor. ``None`` means the value is absent.
    """

    description: str
    resolver: Callable[[Any], T | None]

    def resolve(self, actor: Any) -> T | None:
        return self.resolver(actor)

    def __call__(self, actor: Any) -> T | None:
        return self.resolve(actor)

    def __str__(self) -> str:
        return self.description


class KnownValue(LazyValue[T]):
    """A value already known when the ensure is written."""

    def __init__(
        self,
        value: T | None,
        description: str | None = None,
        settings: EnsureSettings = DEFAULT_SETTINGS,
    ):
        super().__init__(
            description=description if description is not None else render_literal(value, settings),
            resolver=lambda _actor: value,
        )
        object.__setattr__(self, "value", value)


def the_value_of(description: str, fn: Callable[[Any], T | None]) -> LazyValue[T]:
    """Build a LazyValue from a callable taking the actor."""
    return LazyValue(description, fn)


def recalled(key: str, description: str | None = None) -> LazyValue[Any]:
    """A value the actor remembered under ``key`` (absent if it never did)."""
    return LazyValue(
        description or f"the value remembered as '{key}'",
        lambda actor: actor.recall(key),
    )


def as_lazy_value(value: Any, settings: EnsureSettings = DEFAULT_SETTINGS) -> LazyValue[Any]:
    if isinstance(value, LazyValue):
        return value
    return KnownValue(value, settings=settings)
