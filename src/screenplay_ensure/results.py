"""Result and failure-report data structures."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from screenplay_ensure.config import DEFAULT_SETTINGS, EnsureSettings


def render_literal(value: Any, settings: EnsureSettings = DEFAULT_SETTINGS) -> str:
    """Render a value the way it appears in descriptions and failure messages.

    Strings are double quoted, ``None`` uses ``settings.absent_literal``,
    compiled patterns show their source and lists/tuples are rendered item by
    item, comma separated.
    """
    if value is None:
        text = settings.absent_literal
    elif isinstance(value, str):
        text = f'"{value}"'
    elif isinstance(value, re.Pattern):
        text = f'"{value.pattern}"'
    elif isinstance(value, (list, tuple)):
        return ", ".join(render_literal(item, settings) for item in value)
    else:
        text = repr(value)

    limit = settings.max_literal_length
    if limit and len(text) > limit:
        text = text[:limit] + "..."
    return text


@dataclass(frozen=True)
class FailureReport:
    """Structured description of a failed ensure.

    Attributes:
        actual_description: Description of the value source, rendered as-is
            (e.g. ``"red green blue"`` or ``the page title``).
        predicate_description: Description of the named test (e.g. "empty").
        negated: Whether the ensure was negated; renders "not to be".
        expected: Expected value(s), already rendered. Empty for predicates,
            one entry for expectations, two (low, high) for range checks.
        actual: The resolved actual value, rendered.
    """

    actual_description: str
    predicate_description: str
    negated: bool
    expected: tuple[str, ...] = ()
    actual: str = ""

    @property
    def message(self) -> str:
        verb = "not to be" if self.negated else "to be"
        parts = [f"Expected {self.actual_description} {verb} {self.predicate_description}"]
        if len(self.expected) == 2:
            parts.append(f"{self.expected[0]} and {self.expected[1]}")
        elif self.expected:
            parts.extend(self.expected)
        return " ".join(parts) + f" but was {self.actual}"


@dataclass
class AssertionResult:
    """Outcome of evaluating a single ensure without raising on mismatch.

    Attributes:
        name: The ensure's description (e.g. ``"abc" to be empty``).
        passed: Whether the (possibly negated) verdict was true.
        message: The failure message, or a short confirmation when passed.
        score: 1.0 when passed, 0.0 otherwise.
        report: The failure report for a failed ensure.
    """

    name: str
    passed: bool
    message: str
    score: float = 0.0
    report: FailureReport | None = field(default=None, compare=False)
