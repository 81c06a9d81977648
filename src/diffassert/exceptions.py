#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the diffassert library.

A difference between two compared values is *not* an error: the comparison
functions return it as a :class:`~diffassert.outcome.Mismatch` value. The
exceptions below cover misuse of the API and the explicit conversion of a
mismatch into a failure.

Exception Hierarchy
-------------------
- DiffAssertError (base exception)

  - ValidationError (invalid modes, adapter kinds or option values)

  - MismatchError (a mismatch raised on request; also an AssertionError)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from diffassert.outcome import Mismatch


class DiffAssertError(Exception):
    """Base exception class for all diffassert-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(DiffAssertError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class MismatchError(DiffAssertError, AssertionError):
    """Exception raised when a mismatch is explicitly turned into a failure.

    Subclasses :class:`AssertionError` so test runners treat it as an
    ordinary assertion failure rather than an error.

    Parameters
    ----------
    mismatch : Mismatch
        The comparison outcome that triggered the failure

    Attributes
    ----------
    mismatch : Mismatch
        The comparison outcome, with actual, expect and rendered diff

    """

    def __init__(self, mismatch: Mismatch):
        """Initialize the error with the mismatch report as its message."""
        super().__init__(mismatch.report())
        self.mismatch = mismatch
