"""Tests for the execution of performable ensures."""

import logging

import pytest

from screenplay_ensure import (
    AssertionFailure,
    EnsureEngineError,
    EnsureSettings,
    KnownValue,
    PreconditionViolation,
    recalled,
    that_the,
    the_value_of,
)
from screenplay_ensure.expectations import BiExpectation, Expectation, Predicate
from screenplay_ensure.performables import (
    BiPerformableExpectation,
    PerformableExpectation,
    PerformablePredicate,
)
from screenplay_ensure.preconditions import ensure_expected_not_none

IS_EVEN = Predicate("even", lambda actual: actual is not None and actual % 2 == 0)
DIVISIBLE_BY = Expectation("divisible by", lambda actual, n: actual % n == 0)
WITHIN = BiExpectation("within", lambda actual, low, high: low <= actual <= high)


# --- verdicts ---


def test_predicate_passes_silently(actor):
    assert PerformablePredicate(KnownValue(4), IS_EVEN).perform_as(actor) is None


def test_predicate_failure_raises_assertion_failure(actor):
    with pytest.raises(AssertionFailure) as exc_info:
        PerformablePredicate(KnownValue(3), IS_EVEN).perform_as(actor)
    report = exc_info.value.report
    assert report.actual_description == "3"
    assert report.predicate_description == "even"
    assert report.negated is False
    assert report.expected == ()
    assert report.actual == "3"


def test_assertion_failure_is_an_assertion_error(actor):
    with pytest.raises(AssertionError):
        PerformablePredicate(KnownValue(3), IS_EVEN).perform_as(actor)


@pytest.mark.parametrize(
    "value, negated, passed",
    [(4, False, True), (4, True, False), (3, False, False), (3, True, True)],
)
def test_verdict_is_result_xor_negation(actor, value, negated, passed):
    ensure = PerformablePredicate(KnownValue(value), IS_EVEN, negated)
    assert ensure.evaluate(actor).passed is passed


def test_expectation_passes_expected_value(actor):
    assert PerformableExpectation(KnownValue(9), DIVISIBLE_BY, 3).evaluate(actor).passed
    result = PerformableExpectation(KnownValue(9), DIVISIBLE_BY, 2).evaluate(actor)
    assert result.passed is False
    assert result.score == 0.0
    assert result.message == "Expected 9 to be divisible by 2 but was 9"


def test_bi_expectation_renders_both_bounds(actor):
    ensure = BiPerformableExpectation(KnownValue(12), WITHIN, 1, 10)
    assert ensure.description == "12 to be within 1 and 10"
    result = ensure.evaluate(actor)
    assert result.message == "Expected 12 to be within 1 and 10 but was 12"
    assert result.report.expected == ("1", "10")


def test_negated_description(actor):
    ensure = PerformableExpectation(KnownValue(9), DIVISIBLE_BY, 3, negated=True)
    assert str(ensure) == "9 not to be divisible by 3"
    with pytest.raises(AssertionFailure, match="Expected 9 not to be divisible by 3 but was 9"):
        ensure.perform_as(actor)


def test_evaluate_success_result(actor):
    result = PerformablePredicate(KnownValue(2), IS_EVEN).evaluate(actor)
    assert result.passed is True
    assert result.score == 1.0
    assert result.report is None
    assert result.name == "2 to be even"


# --- lazy resolution ---


def test_value_is_resolved_when_performed_not_when_built(actor):
    ensure = PerformablePredicate(the_value_of("the counter", lambda a: a.recall("counter")), IS_EVEN)
    actor.remember("counter", 3)
    assert ensure.evaluate(actor).passed is False
    actor.remember("counter", 8)
    assert ensure.evaluate(actor).passed is True


def test_value_is_resolved_against_the_given_actor():
    from screenplay_ensure import Actor

    ensure = PerformablePredicate(the_value_of("the counter", lambda a: a.recall("counter")), IS_EVEN)
    odd, even = Actor.named("Odile"), Actor.named("Evan")
    odd.remember("counter", 1)
    even.remember("counter", 2)
    assert ensure.evaluate(odd).passed is False
    assert ensure.evaluate(even).passed is True


# --- error kinds ---


def test_resolution_failure_is_wrapped_as_engine_error(actor):
    def broken(a):
        raise KeyError("page")

    ensure = PerformablePredicate(the_value_of("the page title", broken), IS_EVEN)
    with pytest.raises(EnsureEngineError, match="the page title") as exc_info:
        ensure.perform_as(actor)
    assert isinstance(exc_info.value.__cause__, KeyError)
    assert not isinstance(exc_info.value, AssertionError)


def test_io_failure_during_test_is_wrapped_as_engine_error(actor):
    def scan(actual):
        raise OSError("stream closed")

    ensure = PerformablePredicate(KnownValue("abc"), Predicate("scannable", scan))
    with pytest.raises(EnsureEngineError) as exc_info:
        ensure.perform_as(actor)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_raising_comparator_is_wrapped_as_engine_error(actor):
    def boom(a, b):
        raise KeyError("no ordering for these")

    ensure = that_the(3).using_comparator(boom).is_greater_than(1)
    with pytest.raises(EnsureEngineError) as exc_info:
        ensure.perform_as(actor)
    assert isinstance(exc_info.value.__cause__, KeyError)
    assert not isinstance(exc_info.value, AssertionError)


def test_raising_satisfies_function_is_wrapped_as_engine_error(actor):
    ensure = that_the(0).satisfies("a valid ratio", lambda n: 10 / n > 1)
    with pytest.raises(EnsureEngineError, match="a valid ratio") as exc_info:
        ensure.evaluate(actor)
    assert isinstance(exc_info.value.__cause__, ZeroDivisionError)


def test_comparing_mismatched_types_is_wrapped_as_engine_error(actor):
    actor.remember("total", "twelve")
    ensure = that_the(recalled("total")).is_greater_than(3)
    with pytest.raises(EnsureEngineError) as exc_info:
        ensure.perform_as(actor)
    assert isinstance(exc_info.value.__cause__, TypeError)
    assert not isinstance(exc_info.value, AssertionFailure)


def test_precondition_runs_before_the_test(actor):
    calls = []

    def test(actual, expected):
        calls.append(expected)
        return True

    expectation = Expectation("checked", test, lambda actual, expected: ensure_expected_not_none(expected))
    with pytest.raises(PreconditionViolation):
        PerformableExpectation(KnownValue(1), expectation, None).perform_as(actor)
    assert calls == []


def test_precondition_violation_raises_from_evaluate_too(actor):
    expectation = Expectation("checked", lambda a, e: True, lambda a, e: ensure_expected_not_none(e))
    with pytest.raises(PreconditionViolation):
        PerformableExpectation(KnownValue(1), expectation, None).evaluate(actor)


# --- settings and logging ---


def test_absent_literal_from_settings(actor):
    settings = EnsureSettings(absent_literal="null")
    ensure = PerformablePredicate(
        KnownValue(None, settings=settings), IS_EVEN, settings=settings
    )
    result = ensure.evaluate(actor)
    assert result.message == "Expected null to be even but was null"


def test_long_literals_are_truncated(actor):
    settings = EnsureSettings(max_literal_length=5)
    ensure = PerformablePredicate(
        the_value_of("the essay", lambda a: "x" * 50), Predicate("short", lambda v: len(v) < 10), settings=settings
    )
    result = ensure.evaluate(actor)
    assert result.message == 'Expected the essay to be short but was "xxxx...'


def test_failure_is_logged_before_raising(actor, caplog):
    with caplog.at_level(logging.DEBUG, logger="screenplay_ensure"):
        with pytest.raises(AssertionFailure):
            PerformablePredicate(KnownValue(3), IS_EVEN).perform_as(actor)
    messages = [r.getMessage() for r in caplog.records if r.name == "screenplay_ensure"]
    assert "Ensuring 3 to be even" in messages
    assert "Expected 3 to be even but was 3" in messages
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1


def test_logger_name_from_settings(actor, caplog):
    settings = EnsureSettings(logger_name="screenplay_ensure.custom")
    with caplog.at_level(logging.INFO, logger="screenplay_ensure.custom"):
        PerformablePredicate(KnownValue(2), IS_EVEN, settings=settings).perform_as(actor)
    assert any(r.name == "screenplay_ensure.custom" for r in caplog.records)


def test_performables_are_immutable():
    ensure = PerformablePredicate(KnownValue(2), IS_EVEN)
    with pytest.raises(AttributeError):
        ensure.negated = True
