"""Checks shared by named tests before they evaluate."""

from __future__ import annotations

from typing import Any, Iterable

from screenplay_ensure.errors import PreconditionViolation


def ensure_actual_not_none(actual: Any) -> None:
    if actual is None:
        raise PreconditionViolation("actual value should not be None")


def ensure_expected_not_none(expected: Any) -> None:
    if expected is None:
        raise PreconditionViolation("expected value should not be None")


def ensure_actual_and_expected_not_none(actual: Any, expected: Any) -> None:
    ensure_actual_not_none(actual)
    ensure_expected_not_none(expected)


def ensure_not_empty(message: str, values: Iterable[Any] | None) -> None:
    ensure_expected_not_none(values)
    if not list(values):
        raise PreconditionViolation(message)


def ensure_no_none_elements_in(message: str, values: Iterable[Any]) -> None:
    if any(value is None for value in values):
        raise PreconditionViolation(message)
