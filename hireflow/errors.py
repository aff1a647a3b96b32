"""
Exception hierarchy for hireflow.

Every error raised on purpose by the package derives from
:class:`HireflowError` so the CLI can report it uniformly.  The
concrete classes also inherit from the matching built-in exception so
callers that already catch ``TypeError`` or ``ValueError`` keep
working.
"""

from __future__ import annotations


class HireflowError(Exception):
    """Base class for hireflow errors."""


class InvalidInputError(HireflowError, TypeError):
    """A scoring operation received a missing or non-string argument."""


class ScoringAborted(HireflowError):
    """The caller aborted a scoring call while it was still waiting."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} aborted before completion")
        self.operation = operation


class ConfigError(HireflowError, ValueError):
    """The configuration file or an environment override is invalid."""


class RecordError(HireflowError, ValueError):
    """A pipeline record could not be read from its CSV row."""
