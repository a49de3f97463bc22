"""Named tests: a description paired with a pure boolean function.

A named test receives the already resolved actual value followed by the
expected value(s). The three arities are:

* ``Predicate``: ``test(actual)``, e.g. "empty"
* ``Expectation``: ``test(actual, expected)``, e.g. "starting with"
* ``BiExpectation``: ``test(actual, low, high)``, e.g. "of size of between"

An optional ``precondition`` takes the same arguments and raises
``PreconditionViolation`` when the ensure is misused.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Predicate(Generic[T]):
    description: str
    test: Callable[[T | None], bool]
    precondition: Callable[[T | None], None] | None = None

    def check_preconditions(self, actual: T | None) -> None:
        if self.precondition is not None:
            self.precondition(actual)

    def apply(self, actual: T | None) -> bool:
        return bool(self.test(actual))


@dataclass(frozen=True)
class Expectation(Generic[T, E]):
    description: str
    test: Callable[[T | None, E], bool]
    precondition: Callable[[T | None, E], None] | None = None

    def check_preconditions(self, actual: T | None, expected: E) -> None:
        if self.precondition is not None:
            self.precondition(actual, expected)

    def apply(self, actual: T | None, expected: E) -> bool:
        return bool(self.test(actual, expected))


@dataclass(frozen=True)
class BiExpectation(Generic[T, E]):
    description: str
    test: Callable[[T | None, E, E], bool]
    precondition: Callable[[T | None, E, E], None] | None = None

    def check_preconditions(self, actual: T | None, low: E, high: E) -> None:
        if self.precondition is not None:
            self.precondition(actual, low, high)

    def apply(self, actual: T | None, low: E, high: E) -> bool:
        return bool(self.test(actual, low, high))


_ARITIES: dict[int, type] = {1: Predicate, 2: Expectation, 3: BiExpectation}


def expect_that_actual_is(
    description: str,
    test: Callable[..., bool],
    precondition: Callable[..., None] | None = None,
) -> Predicate[Any] | Expectation[Any, Any] | BiExpectation[Any, Any]:
    """Build a named test, choosing the arity from ``test``'s positional parameters.

    Raises ValueError if ``test`` does not take 1, 2 or 3 positional parameters.
    """
    params = [
        p
        for p in inspect.signature(test).parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]
    kind = _ARITIES.get(len(params))
    if kind is None:
        raise ValueError(
            f"Test for '{description}' must take 1, 2 or 3 positional parameters, got {len(params)}"
        )
    return kind(description, test, precondition)
