"""Executable ensures: a lazy value, a named test, expected values and a negation flag.

Nothing is evaluated until ``perform_as`` (or ``evaluate``) is called with an
actor. ``perform_as`` raises ``AssertionFailure`` when the verdict is false and
returns ``None`` otherwise.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from screenplay_ensure.config import DEFAULT_SETTINGS, EnsureSettings
from screenplay_ensure.errors import AssertionFailure, EnsureEngineError, EnsureError
from screenplay_ensure.expectations import BiExpectation, Expectation, Predicate
from screenplay_ensure.results import AssertionResult, FailureReport, render_literal
from screenplay_ensure.values import LazyValue

T = TypeVar("T")
E = TypeVar("E")


class Performable(ABC, Generic[T]):
    """Shared execution algorithm for the three arities."""

    value: LazyValue[T]
    negated: bool
    settings: EnsureSettings

    @property
    @abstractmethod
    def predicate_description(self) -> str:
        """Description of the named test."""

    @abstractmethod
    def expected_values(self) -> tuple[Any, ...]:
        """Expected value(s) passed to the named test after the actual value."""

    @abstractmethod
    def _check_preconditions(self, actual: T | None) -> None: ...

    @abstractmethod
    def _apply(self, actual: T | None) -> bool: ...

    @property
    def description(self) -> str:
        verb = "not to be" if self.negated else "to be"
        text = f"{self.value.description} {verb} {self.predicate_description}"
        rendered = self._rendered_expected()
        if len(rendered) == 2:
            text += f" {rendered[0]} and {rendered[1]}"
        elif rendered:
            text += f" {rendered[0]}"
        return text

    def __str__(self) -> str:
        return self.description

    @property
    def logger(self) -> logging.Logger:
        return logging.getLogger(self.settings.logger_name)

    def _rendered_expected(self) -> tuple[str, ...]:
        return tuple(render_literal(v, self.settings) for v in self.expected_values())

    def _resolve(self, actor: Any) -> T | None:
        try:
            return self.value.resolve(actor)
        except EnsureError:
            raise
        except Exception as e:
            raise EnsureEngineError(f"Unable to resolve {self.value.description}: {e}") from e

    def _verdict(self, actor: Any) -> tuple[bool, T | None]:
        actual = self._resolve(actor)
        self._check_preconditions(actual)
        try:
            raw = self._apply(actual)
        except EnsureError:
            raise
        except Exception as e:
            raise EnsureEngineError(
                f"Unable to evaluate {self.value.description} as {self.predicate_description}: {e}"
            ) from e
        verdict = raw != self.negated
        self.logger.debug(f"{self.description}: raw={raw}, negated={self.negated}, verdict={verdict}")
        return verdict, actual

    def _report(self, actual: T | None) -> FailureReport:
        return FailureReport(
            actual_description=self.value.description,
            predicate_description=self.predicate_description,
            negated=self.negated,
            expected=self._rendered_expected(),
            actual=render_literal(actual, self.settings),
        )

    def perform_as(self, actor: Any) -> None:
        """Evaluate against ``actor``; raise AssertionFailure if the verdict is false."""
        self.logger.info(f"Ensuring {self.description}")
        verdict, actual = self._verdict(actor)
        if not verdict:
            report = self._report(actual)
            self.logger.warning(report.message)
            raise AssertionFailure(report)

    def evaluate(self, actor: Any) -> AssertionResult:
        """Like ``perform_as`` but return the outcome instead of raising on mismatch.

        Precondition violations and engine errors still raise.
        """
        self.logger.info(f"Evaluating {self.description}")
        verdict, actual = self._verdict(actor)
        if verdict:
            return AssertionResult(
                name=self.description, passed=True, message=f"{self.description}: ok", score=1.0
            )
        report = self._report(actual)
        return AssertionResult(
            name=self.description, passed=False, message=report.message, score=0.0, report=report
        )


@dataclass(frozen=True)
class PerformablePredicate(Performable[T]):
    value: LazyValue[T]
    predicate: Predicate[T]
    negated: bool = False
    settings: EnsureSettings = DEFAULT_SETTINGS

    @property
    def predicate_description(self) -> str:
        return self.predicate.description

    def expected_values(self) -> tuple[Any, ...]:
        return ()

    def _check_preconditions(self, actual: T | None) -> None:
        self.predicate.check_preconditions(actual)

    def _apply(self, actual: T | None) -> bool:
        return self.predicate.apply(actual)


@dataclass(frozen=True)
class PerformableExpectation(Performable[T], Generic[T, E]):
    value: LazyValue[T]
    expectation: Expectation[T, E]
    expected: E
    negated: bool = False
    settings: EnsureSettings = DEFAULT_SETTINGS

    @property
    def predicate_description(self) -> str:
        return self.expectation.description

    def expected_values(self) -> tuple[Any, ...]:
        return (self.expected,)

    def _check_preconditions(self, actual: T | None) -> None:
        self.expectation.check_preconditions(actual, self.expected)

    def _apply(self, actual: T | None) -> bool:
        return self.expectation.apply(actual, self.expected)


@dataclass(frozen=True)
class BiPerformableExpectation(Performable[T], Generic[T, E]):
    value: LazyValue[T]
    expectation: BiExpectation[T, E]
    low: E
    high: E
    negated: bool = False
    settings: EnsureSettings = DEFAULT_SETTINGS

    @property
    def predicate_description(self) -> str:
        return self.expectation.description

    def expected_values(self) -> tuple[Any, ...]:
        return (self.low, self.high)

    def _check_preconditions(self, actual: T | None) -> None:
        self.expectation.check_preconditions(actual, self.low, self.high)

    def _apply(self, actual: T | None) -> bool:
        return self.expectation.apply(actual, self.low, self.high)
