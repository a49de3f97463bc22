"""Ensures about strings.

Example::

    actor.attempts_to(
        that("red green blue").contains("green", "red"),
        that_the_string(recalled("title")).not_().is_blank(),
    )

Absent values (``None``) get a defined truth value per predicate; the
per-predicate choices below are deliberate and are not uniform.
"""

from __future__ import annotations

import dataclasses
import io
import re
from dataclasses import dataclass
from typing import Callable, Sequence

from screenplay_ensure.comparable import Comparator, ComparableEnsure, natural_order
from screenplay_ensure.config import DEFAULT_SETTINGS, EnsureSettings
from screenplay_ensure.errors import PreconditionViolation
from screenplay_ensure.expectations import Expectation, Predicate, expect_that_actual_is
from screenplay_ensure.performables import (
    BiPerformableExpectation,
    PerformableExpectation,
    PerformablePredicate,
)
from screenplay_ensure.preconditions import (
    ensure_actual_not_none,
    ensure_expected_not_none,
    ensure_no_none_elements_in,
    ensure_not_empty,
)
from screenplay_ensure.values import KnownValue, LazyValue


# --- preconditions ---


def _fragments_given(actual: str | None, fragments: Sequence[str]) -> None:
    ensure_not_empty("expected should not be empty", fragments)
    ensure_no_none_elements_in("expected should not contain None elements", fragments)


def _expected_given(actual: str | None, expected: object) -> None:
    ensure_expected_not_none(expected)


def _pattern_given(actual: str | None, expected: str) -> None:
    ensure_expected_not_none(expected)
    try:
        re.compile(expected)
    except re.error as e:
        raise PreconditionViolation(f"expected should be a valid regular expression: {e}") from e


def _bounds_given(actual: str | None, low: int, high: int) -> None:
    ensure_expected_not_none(low)
    ensure_expected_not_none(high)


def _actual_given(actual: str | None, expected: object) -> None:
    ensure_actual_not_none(actual)


# --- tests ---


def _all(actual: str, check: Callable[[str], bool]) -> bool:
    return all(check(ch) for ch in actual)


# str.isspace also accepts these; Character.isWhitespace does not
_NOT_WHITESPACE = frozenset("\u00a0\u2007\u202f\u0085")


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_WHITESPACE


def _is_letter_or_digit(ch: str) -> bool:
    return ch.isalpha() or ch.isdecimal()


def _count_lines(text: str) -> int:
    # universal newlines: \n, \r\n and \r all terminate a line
    with io.StringIO(text, newline=None) as reader:
        return sum(1 for _ in reader)


def _is_null_or_empty(actual: str | None) -> bool:
    return actual is None or actual == ""


def _is_empty(actual: str | None) -> bool:
    return actual is not None and actual == ""


def _is_not_empty(actual: str | None) -> bool:
    return actual is not None and actual != ""


def _contains(actual: str | None, fragments: Sequence[str]) -> bool:
    if actual is None:
        return False
    return all(fragment in actual for fragment in fragments)


def _does_not_contain(actual: str | None, fragments: Sequence[str]) -> bool:
    if actual is None:
        return True
    return not any(fragment in actual for fragment in fragments)


def _contains_ignoring_case(actual: str | None, fragments: Sequence[str]) -> bool:
    if actual is None:
        return False
    folded = actual.lower()
    return all(fragment.lower() in folded for fragment in fragments)


def _equals_ignoring_case(actual: str | None, expected: str) -> bool:
    if actual is None:
        return expected == ""
    return actual.lower() == expected.lower()


def _is_in_uppercase(actual: str | None) -> bool:
    if actual is None:
        return False
    return actual != "" and actual.upper() == actual


def _is_in_lowercase(actual: str | None) -> bool:
    if actual is None:
        return True
    return actual != "" and actual.lower() == actual


def _is_blank(actual: str | None) -> bool:
    if actual is None:
        return True
    return _all(actual, str.isspace)


def _is_not_blank(actual: str | None) -> bool:
    if actual is None:
        return True
    return not _all(actual, str.isspace)


def _is_substring_of(actual: str | None, expected: str) -> bool:
    if actual is None:
        return False
    return actual in expected


def _starts_with(actual: str | None, expected: str) -> bool:
    if actual is None:
        return False
    return actual.startswith(expected)


def _ends_with(actual: str | None, expected: str) -> bool:
    if actual is None:
        return False
    return actual.endswith(expected)


def _matches(actual: str | None, expected: str) -> bool:
    if actual is None:
        return False
    return re.fullmatch(expected, actual) is not None


def _matches_pattern(actual: str | None, expected: re.Pattern[str]) -> bool:
    if actual is None:
        return False
    return expected.fullmatch(actual) is not None


def _contains_whitespaces(actual: str | None) -> bool:
    if actual is None:
        return False
    return any(_is_whitespace(ch) for ch in actual)


def _contains_only_whitespaces(actual: str | None) -> bool:
    if actual is None:
        return False
    return actual != "" and _all(actual, _is_whitespace)


def _contains_no_whitespaces(actual: str | None) -> bool:
    if actual is None:
        return True
    return not any(_is_whitespace(ch) for ch in actual)


def _contains_only(check: Callable[[str], bool]) -> Callable[[str | None], bool]:
    def test(actual: str | None) -> bool:
        if actual is None:
            return False
        return actual != "" and _all(actual, check)

    return test


def _has_size(accept: Callable[[int, int], bool]) -> Callable[[str | None, int], bool]:
    def test(actual: str | None, expected: int) -> bool:
        if actual is None:
            return False
        return accept(len(actual), expected)

    return test


def _has_size_between(actual: str | None, low: int, high: int) -> bool:
    if actual is None:
        return False
    return low <= len(actual) <= high


def _has_line_count(actual: str | None, expected: int) -> bool:
    return _count_lines(actual) == expected


def _has_same_size(actual: str | None, expected: str) -> bool:
    if actual is None:
        return False
    return len(actual) == len(expected)


NULL_OR_EMPTY = expect_that_actual_is("null or empty", _is_null_or_empty)
IS_EMPTY = expect_that_actual_is("empty", _is_empty)
IS_NOT_EMPTY = expect_that_actual_is("not empty", _is_not_empty)
CONTAINS = expect_that_actual_is("containing", _contains, _fragments_given)
DOES_NOT_CONTAIN = expect_that_actual_is("not containing", _does_not_contain, _fragments_given)
CONTAINS_IGNORING_CASE = expect_that_actual_is(
    "containing (ignoring case)", _contains_ignoring_case, _fragments_given
)
EQUALS_IGNORING_CASE = expect_that_actual_is(
    "equal to (ignoring case)", _equals_ignoring_case, _expected_given
)
IS_UPPER_CASE = expect_that_actual_is("in uppercase", _is_in_uppercase)
IS_LOWER_CASE = expect_that_actual_is("in lowercase", _is_in_lowercase)
BLANK = expect_that_actual_is("blank", _is_blank)
NOT_BLANK = expect_that_actual_is("not blank", _is_not_blank)
SUBSTRING_OF = expect_that_actual_is("a substring of", _is_substring_of, _expected_given)
STARTS_WITH = expect_that_actual_is("starting with", _starts_with, _expected_given)
ENDS_WITH = expect_that_actual_is("ending with", _ends_with, _expected_given)
MATCHES = expect_that_actual_is("a match for", _matches, _pattern_given)
MATCHES_PATTERN = expect_that_actual_is("a match for", _matches_pattern, _expected_given)
CONTAINS_WHITESPACES = expect_that_actual_is("containing whitespaces", _contains_whitespaces)
CONTAINS_ONLY_WHITESPACES = expect_that_actual_is(
    "containing only whitespaces", _contains_only_whitespaces
)
CONTAINS_NO_WHITESPACES = expect_that_actual_is("without any whitespaces", _contains_no_whitespaces)
CONTAINS_ONLY_DIGITS = expect_that_actual_is("containing only digits", _contains_only(str.isdecimal))
CONTAINS_ONLY_LETTERS = expect_that_actual_is("containing only letters", _contains_only(str.isalpha))
CONTAINS_ONLY_LETTERS_OR_DIGITS = expect_that_actual_is(
    "containing only letters or digits", _contains_only(_is_letter_or_digit)
)
HAS_SIZE = expect_that_actual_is("of size", _has_size(lambda n, e: n == e), _expected_given)
HAS_SIZE_LESS_THAN = expect_that_actual_is(
    "of size less than", _has_size(lambda n, e: n < e), _expected_given
)
HAS_SIZE_LESS_THAN_OR_EQUAL_TO = expect_that_actual_is(
    "of size less than or equal to", _has_size(lambda n, e: n <= e), _expected_given
)
HAS_SIZE_GREATER_THAN = expect_that_actual_is(
    "of size greater than", _has_size(lambda n, e: n > e), _expected_given
)
HAS_SIZE_GREATER_THAN_OR_EQUAL_TO = expect_that_actual_is(
    "of size greater than or equal to", _has_size(lambda n, e: n >= e), _expected_given
)
HAS_SIZE_BETWEEN = expect_that_actual_is("of size of between", _has_size_between, _bounds_given)
HAS_LINE_COUNT = expect_that_actual_is("with a line count of", _has_line_count, _actual_given)
HAS_SAME_SIZE = expect_that_actual_is("the same size as", _has_same_size, _expected_given)


@dataclass(frozen=True)
class StringEnsure:
    """Ensures about a string value.

    Shared equality and ordering ensures are delegated to a
    :class:`ComparableEnsure` built from the same value, comparator, negation
    and settings.
    """

    value: LazyValue[str]
    comparator: Comparator = natural_order
    negated: bool = False
    settings: EnsureSettings = DEFAULT_SETTINGS

    @classmethod
    def of(cls, value: str | None, settings: EnsureSettings = DEFAULT_SETTINGS) -> "StringEnsure":
        """Ensures about a string already known when the ensure is written."""
        return cls(KnownValue(value, settings=settings), settings=settings)

    @property
    def comparable(self) -> ComparableEnsure[str]:
        return ComparableEnsure(self.value, self.comparator, self.negated, self.settings)

    def not_(self) -> "StringEnsure":
        return dataclasses.replace(self, negated=not self.negated)

    def using_comparator(self, comparator: Comparator) -> "StringEnsure":
        return dataclasses.replace(self, comparator=comparator)

    def is_negated(self) -> bool:
        return self.negated

    def _predicate(self, predicate: Predicate[str]) -> PerformablePredicate[str]:
        return PerformablePredicate(self.value, predicate, self.negated, self.settings)

    def _expectation(self, expectation: Expectation[str, object], expected: object) -> PerformableExpectation:
        return PerformableExpectation(self.value, expectation, expected, self.negated, self.settings)

    # --- shared ensures ---

    def is_equal_to(self, expected: str | None) -> PerformableExpectation:
        return self.comparable.is_equal_to(expected)

    def is_not_equal_to(self, expected: str | None) -> PerformableExpectation:
        return self.comparable.is_not_equal_to(expected)

    def is_greater_than(self, expected: str) -> PerformableExpectation:
        return self.comparable.is_greater_than(expected)

    def is_greater_than_or_equal_to(self, expected: str) -> PerformableExpectation:
        return self.comparable.is_greater_than_or_equal_to(expected)

    def is_less_than(self, expected: str) -> PerformableExpectation:
        return self.comparable.is_less_than(expected)

    def is_less_than_or_equal_to(self, expected: str) -> PerformableExpectation:
        return self.comparable.is_less_than_or_equal_to(expected)

    def is_between(self, low: str, high: str) -> BiPerformableExpectation:
        return self.comparable.is_between(low, high)

    def is_strictly_between(self, low: str, high: str) -> BiPerformableExpectation:
        return self.comparable.is_strictly_between(low, high)

    def is_none(self) -> PerformablePredicate[str]:
        return self.comparable.is_none()

    def is_not_none(self) -> PerformablePredicate[str]:
        return self.comparable.is_not_none()

    def is_in(self, *candidates: str) -> PerformableExpectation:
        return self.comparable.is_in(*candidates)

    def is_not_in(self, *candidates: str) -> PerformableExpectation:
        return self.comparable.is_not_in(*candidates)

    def satisfies(self, description: str, fn: Callable[[str | None], bool]) -> PerformablePredicate[str]:
        return self.comparable.satisfies(description, fn)

    # --- emptiness ---

    def is_null_or_empty(self) -> PerformablePredicate[str]:
        """The string is empty or absent."""
        return self._predicate(NULL_OR_EMPTY)

    def is_empty(self) -> PerformablePredicate[str]:
        """The string is present and has no characters. An absent value is not empty."""
        return self._predicate(IS_EMPTY)

    def is_not_empty(self) -> PerformablePredicate[str]:
        return self._predicate(IS_NOT_EMPTY)

    # --- content ---

    def contains(self, *expected: str) -> PerformableExpectation:
        """The string contains every one of the given fragments, in any order.

        ``that("red green blue").contains("green", "red")``
        """
        return self._expectation(CONTAINS, expected)

    def does_not_contain(self, *expected: str) -> PerformableExpectation:
        """The string contains none of the given fragments. An absent value contains nothing."""
        return self._expectation(DOES_NOT_CONTAIN, expected)

    def contains_ignoring_case(self, *expected: str) -> PerformableExpectation:
        return self._expectation(CONTAINS_IGNORING_CASE, expected)

    def is_equal_to_ignoring_case(self, expected: str) -> PerformableExpectation:
        """Case-insensitive equality. An absent value equals only ``""``."""
        return self._expectation(EQUALS_IGNORING_CASE, expected)

    def is_substring_of(self, expected: str) -> PerformableExpectation:
        return self._expectation(SUBSTRING_OF, expected)

    def starts_with(self, expected: str) -> PerformableExpectation:
        return self._expectation(STARTS_WITH, expected)

    def ends_with(self, expected: str) -> PerformableExpectation:
        return self._expectation(ENDS_WITH, expected)

    def matches(self, expected: str | re.Pattern[str]) -> PerformableExpectation:
        """The whole string matches a regular expression (text or compiled pattern)."""
        if isinstance(expected, re.Pattern):
            return self._expectation(MATCHES_PATTERN, expected)
        return self._expectation(MATCHES, expected)

    # --- case and blankness ---

    def is_in_uppercase(self) -> PerformablePredicate[str]:
        """Empty or absent strings fail."""
        return self._predicate(IS_UPPER_CASE)

    def is_in_lowercase(self) -> PerformablePredicate[str]:
        """Empty strings fail; an absent value passes."""
        return self._predicate(IS_LOWER_CASE)

    def is_blank(self) -> PerformablePredicate[str]:
        return self._predicate(BLANK)

    def is_not_blank(self) -> PerformablePredicate[str]:
        return self._predicate(NOT_BLANK)

    # --- character classes ---

    def contains_whitespaces(self) -> PerformablePredicate[str]:
        return self._predicate(CONTAINS_WHITESPACES)

    def contains_only_whitespaces(self) -> PerformablePredicate[str]:
        return self._predicate(CONTAINS_ONLY_WHITESPACES)

    def does_not_contain_any_whitespaces(self) -> PerformablePredicate[str]:
        return self._predicate(CONTAINS_NO_WHITESPACES)

    def contains_only_digits(self) -> PerformablePredicate[str]:
        """Fails for empty strings."""
        return self._predicate(CONTAINS_ONLY_DIGITS)

    def contains_only_letters(self) -> PerformablePredicate[str]:
        return self._predicate(CONTAINS_ONLY_LETTERS)

    def contains_only_letters_or_digits(self) -> PerformablePredicate[str]:
        return self._predicate(CONTAINS_ONLY_LETTERS_OR_DIGITS)

    # --- size ---

    def has_size(self, expected: int) -> PerformableExpectation:
        return self._expectation(HAS_SIZE, expected)

    def has_size_less_than(self, expected: int) -> PerformableExpectation:
        return self._expectation(HAS_SIZE_LESS_THAN, expected)

    def has_size_less_than_or_equal_to(self, expected: int) -> PerformableExpectation:
        return self._expectation(HAS_SIZE_LESS_THAN_OR_EQUAL_TO, expected)

    def has_size_greater_than(self, expected: int) -> PerformableExpectation:
        return self._expectation(HAS_SIZE_GREATER_THAN, expected)

    def has_size_greater_than_or_equal_to(self, expected: int) -> PerformableExpectation:
        return self._expectation(HAS_SIZE_GREATER_THAN_OR_EQUAL_TO, expected)

    def has_size_between(self, low: int, high: int) -> BiPerformableExpectation:
        """Inclusive on both ends."""
        return BiPerformableExpectation(
            self.value, HAS_SIZE_BETWEEN, low, high, self.negated, self.settings
        )

    def has_line_count(self, expected: int) -> PerformableExpectation:
        """Counts lines the way a line reader would: ``"a\\nb\\n"`` has 2 lines."""
        return self._expectation(HAS_LINE_COUNT, expected)

    def has_same_size_as(self, expected: str) -> PerformableExpectation:
        return self._expectation(HAS_SAME_SIZE, expected)
