"""Ordering-aware ensures shared by every value type."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from screenplay_ensure.config import DEFAULT_SETTINGS, EnsureSettings
from screenplay_ensure.expectations import BiExpectation, Expectation, Predicate
from screenplay_ensure.performables import (
    BiPerformableExpectation,
    PerformableExpectation,
    PerformablePredicate,
)
from screenplay_ensure.preconditions import (
    ensure_expected_not_none,
    ensure_not_empty,
)
from screenplay_ensure.values import LazyValue

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison using the values' own ordering."""
    return (a > b) - (a < b)


def _ensure_bound(actual: Any, expected: Any) -> None:
    ensure_expected_not_none(expected)


def _ensure_bounds(actual: Any, low: Any, high: Any) -> None:
    ensure_expected_not_none(low)
    ensure_expected_not_none(high)


def _ensure_candidates(actual: Any, candidates: tuple[Any, ...]) -> None:
    ensure_not_empty("expected values should not be empty", candidates)


IS_NONE = Predicate("None", lambda actual: actual is None)
IS_NOT_NONE = Predicate("not None", lambda actual: actual is not None)


@dataclass(frozen=True)
class ComparableEnsure(Generic[T]):
    """Builder of ensures for any value ordered by ``comparator``.

    Builders are immutable: ``not_()`` and ``using_comparator()`` return copies.
    Every factory method bakes the current negation flag into the ensure it
    returns.
    """

    value: LazyValue[T]
    comparator: Comparator = natural_order
    negated: bool = False
    settings: EnsureSettings = DEFAULT_SETTINGS

    def not_(self) -> "ComparableEnsure[T]":
        return dataclasses.replace(self, negated=not self.negated)

    def using_comparator(self, comparator: Comparator) -> "ComparableEnsure[T]":
        return dataclasses.replace(self, comparator=comparator)

    def is_negated(self) -> bool:
        return self.negated

    # --- named tests bound to this builder's comparator ---

    def _compares(self, description: str, accept: Callable[[int], bool]) -> Expectation[T, T]:
        cmp = self.comparator

        def test(actual: T | None, expected: T) -> bool:
            if actual is None:
                return False
            return accept(cmp(actual, expected))

        return Expectation(description, test, _ensure_bound)

    def _equals(self, actual: T | None, expected: T | None) -> bool:
        if actual is None or expected is None:
            return actual is None and expected is None
        return self.comparator(actual, expected) == 0

    # --- factories ---

    def _expectation(self, expectation: Expectation[T, Any], expected: Any) -> PerformableExpectation[T, Any]:
        return PerformableExpectation(self.value, expectation, expected, self.negated, self.settings)

    def _predicate(self, predicate: Predicate[T]) -> PerformablePredicate[T]:
        return PerformablePredicate(self.value, predicate, self.negated, self.settings)

    def is_equal_to(self, expected: T | None) -> PerformableExpectation[T, T]:
        return self._expectation(Expectation("equal to", self._equals), expected)

    def is_not_equal_to(self, expected: T | None) -> PerformableExpectation[T, T]:
        return self._expectation(
            Expectation("not equal to", lambda actual, exp: not self._equals(actual, exp)),
            expected,
        )

    def is_greater_than(self, expected: T) -> PerformableExpectation[T, T]:
        return self._expectation(self._compares("greater than", lambda c: c > 0), expected)

    def is_greater_than_or_equal_to(self, expected: T) -> PerformableExpectation[T, T]:
        return self._expectation(
            self._compares("greater than or equal to", lambda c: c >= 0), expected
        )

    def is_less_than(self, expected: T) -> PerformableExpectation[T, T]:
        return self._expectation(self._compares("less than", lambda c: c < 0), expected)

    def is_less_than_or_equal_to(self, expected: T) -> PerformableExpectation[T, T]:
        return self._expectation(
            self._compares("less than or equal to", lambda c: c <= 0), expected
        )

    def is_between(self, low: T, high: T) -> BiPerformableExpectation[T, T]:
        """Inclusive on both ends."""
        cmp = self.comparator

        def test(actual: T | None, lo: T, hi: T) -> bool:
            if actual is None:
                return False
            return cmp(actual, lo) >= 0 and cmp(actual, hi) <= 0

        return BiPerformableExpectation(
            self.value, BiExpectation("between", test, _ensure_bounds), low, high, self.negated, self.settings
        )

    def is_strictly_between(self, low: T, high: T) -> BiPerformableExpectation[T, T]:
        """Exclusive on both ends."""
        cmp = self.comparator

        def test(actual: T | None, lo: T, hi: T) -> bool:
            if actual is None:
                return False
            return cmp(actual, lo) > 0 and cmp(actual, hi) < 0

        return BiPerformableExpectation(
            self.value,
            BiExpectation("strictly between", test, _ensure_bounds),
            low,
            high,
            self.negated,
            self.settings,
        )

    def is_none(self) -> PerformablePredicate[T]:
        return self._predicate(IS_NONE)

    def is_not_none(self) -> PerformablePredicate[T]:
        return self._predicate(IS_NOT_NONE)

    def is_in(self, *candidates: T) -> PerformableExpectation[T, tuple[T, ...]]:
        return self._expectation(
            Expectation(
                "in",
                lambda actual, values: any(self._equals(actual, v) for v in values),
                _ensure_candidates,
            ),
            candidates,
        )

    def is_not_in(self, *candidates: T) -> PerformableExpectation[T, tuple[T, ...]]:
        return self._expectation(
            Expectation(
                "not in",
                lambda actual, values: not any(self._equals(actual, v) for v in values),
                _ensure_candidates,
            ),
            candidates,
        )

    def satisfies(self, description: str, fn: Callable[[T | None], bool]) -> PerformablePredicate[T]:
        """An ad hoc named predicate, e.g. ``satisfies("an even number", lambda n: n % 2 == 0)``."""
        return self._predicate(Predicate(description, fn))
