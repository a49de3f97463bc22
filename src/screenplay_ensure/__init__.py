"""Deferred, actor-driven fluent assertions."""

from screenplay_ensure.actor import Actor
from screenplay_ensure.comparable import ComparableEnsure, natural_order
from screenplay_ensure.config import DEFAULT_SETTINGS, EnsureSettings, load_settings
from screenplay_ensure.ensure import Ensure, that, that_the, that_the_string
from screenplay_ensure.errors import (
    AssertionFailure,
    EnsureEngineError,
    EnsureError,
    PreconditionViolation,
)
from screenplay_ensure.results import AssertionResult, FailureReport
from screenplay_ensure.strings import StringEnsure
from screenplay_ensure.values import KnownValue, LazyValue, recalled, the_value_of

__all__ = [
    "Actor",
    "AssertionFailure",
    "AssertionResult",
    "ComparableEnsure",
    "DEFAULT_SETTINGS",
    "Ensure",
    "EnsureEngineError",
    "EnsureError",
    "EnsureSettings",
    "FailureReport",
    "KnownValue",
    "LazyValue",
    "PreconditionViolation",
    "StringEnsure",
    "load_settings",
    "natural_order",
    "recalled",
    "that",
    "that_the",
    "that_the_string",
    "the_value_of",
]
