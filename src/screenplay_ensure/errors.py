"""Exceptions raised while building or performing an ensure."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from screenplay_ensure.results import FailureReport


class EnsureError(Exception):
    """Base class for every error raised by this package."""


class PreconditionViolation(EnsureError, ValueError):
    """The ensure was built or used incorrectly (e.g. an empty expected list).

    Distinct from a predicate mismatch: it is never turned into a ``False``
    verdict, and negation does not apply to it.
    """


class AssertionFailure(EnsureError, AssertionError):
    """The predicate evaluated cleanly and the (possibly negated) verdict was false."""

    def __init__(self, report: FailureReport):
        super().__init__(report.message)
        self.report = report


class EnsureEngineError(EnsureError, RuntimeError):
    """Resolving or scanning the actual value failed unexpectedly.

    Always raised with the underlying exception as ``__cause__``.
    """
