"""Entry points for writing ensures."""

from __future__ import annotations

from typing import Any

from screenplay_ensure.comparable import Comparator, ComparableEnsure, natural_order
from screenplay_ensure.config import DEFAULT_SETTINGS, EnsureSettings
from screenplay_ensure.strings import StringEnsure
from screenplay_ensure.values import KnownValue, LazyValue, as_lazy_value


class Ensure:
    """Builds ensures that share one set of settings."""

    def __init__(self, settings: EnsureSettings | None = None):
        self.settings = settings or DEFAULT_SETTINGS

    def that(self, value: Any) -> StringEnsure | ComparableEnsure[Any]:
        """Ensures about a value already known.

        Strings (and ``None``) get the string ensures; anything else gets the
        equality and ordering ensures.
        """
        if value is None or isinstance(value, str):
            return StringEnsure.of(value, self.settings)
        if isinstance(value, LazyValue):
            raise TypeError(
                "that() takes a known value; use that_the_string() or that_the() for a LazyValue"
            )
        return ComparableEnsure(KnownValue(value, settings=self.settings), settings=self.settings)

    def that_the_string(self, value: LazyValue[str] | str | None) -> StringEnsure:
        """Ensures about a string, typically one only known once an actor is available."""
        return StringEnsure(as_lazy_value(value, self.settings), settings=self.settings)

    def that_the(
        self, value: LazyValue[Any] | Any, comparator: Comparator | None = None
    ) -> ComparableEnsure[Any]:
        return ComparableEnsure(
            as_lazy_value(value, self.settings),
            comparator or natural_order,
            settings=self.settings,
        )


ensure = Ensure()

that = ensure.that
that_the_string = ensure.that_the_string
that_the = ensure.that_the
