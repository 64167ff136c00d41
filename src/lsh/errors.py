"""Application-level exception types for lsh."""

from __future__ import annotations


class LshError(Exception):
    """Base exception for lsh."""


class FatalError(LshError):
    """Base exception for failures the interpreter cannot continue after."""


class FatalAllocationError(FatalError):
    """Raised when an input or token buffer cannot grow."""


class ConfigurationError(LshError):
    """Raised when settings fail validation at startup."""


def describe_failure(exc: Exception) -> str:
    """Return the human-readable cause of a failed system call."""
    strerror = getattr(exc, "strerror", None)
    return strerror or str(exc)
