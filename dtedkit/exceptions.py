# -*- coding: utf-8 -*-
"""
dtedkit Exception Hierarchy - Domain-specific exceptions for DTED decoding.

Provides a small exception hierarchy that lets callers catch dtedkit
errors distinctly from Python built-in exceptions. All dtedkit exceptions
subclass both ``DtedError`` and the appropriate built-in exception, so
``except ValueError`` keeps working for code that does not know about
this package.

Decode failures carry the byte offset at which decoding stopped. I/O
errors raised while opening or reading files are never wrapped.

Author
------
dtedkit contributors

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-16

Modified
--------
2026-10-16
"""

from typing import Optional


class DtedError(Exception):
    """Base exception for all dtedkit errors."""


class ValidationError(DtedError, ValueError):
    """Invalid input data, parameters, or decoded structure.

    Raised for inconsistent record counts, degenerate grids, bad query
    array shapes, and other input validation failures.
    """


class AngleError(DtedError, ValueError):
    """Angle construction violated a field invariant.

    Raised when minutes or seconds are out of ``[0, 60)``, degrees are
    outside the representable range, or a total-seconds value is too
    large to be an angle.
    """


class ConversionError(DtedError, TypeError):
    """A value could not be converted between numeric representations.

    Raised by ``AxisElement`` when a component cannot be converted to
    the requested type (e.g. an angle to ``float``, or a non-finite
    float to ``int``).
    """


class DecodeError(DtedError, ValueError):
    """Base class for failures while decoding DTED bytes.

    Parameters
    ----------
    message : str
        Human-readable description.
    offset : int, optional
        Byte offset into the decoded buffer where the failure occurred.
    """

    def __init__(self, message: str, offset: Optional[int] = None) -> None:
        if offset is not None:
            message = f"{message} (at byte offset {offset})"
        super().__init__(message)
        self.offset = offset


class IncompleteInputError(DecodeError):
    """Fewer bytes were available than the fixed layout requires."""

    def __init__(
        self, needed: int, available: int, offset: Optional[int] = None
    ) -> None:
        super().__init__(
            f"Incomplete input: needed {needed} bytes, "
            f"only {available} available",
            offset,
        )
        self.needed = needed
        self.available = available


class SentinelMismatchError(DecodeError):
    """A recognition sentinel or fixed tag did not match.

    Usually means the buffer is not DTED at all, or that a record is
    misaligned because the header counts disagree with the data.
    """

    def __init__(
        self, expected: bytes, found: bytes, offset: Optional[int] = None
    ) -> None:
        super().__init__(
            f"Expected sentinel {expected!r}, found {found!r}", offset,
        )
        self.expected = expected
        self.found = found


class FieldValueError(DecodeError):
    """A numeric field held a non-digit byte or an out-of-domain value."""


class TrailingDataError(DecodeError):
    """Bytes remained after the last data record."""


class ChecksumError(DecodeError):
    """A data record's stored checksum did not match its contents."""


class ChecksumWarning(UserWarning):
    """Issued instead of ``ChecksumError`` under the ``WARN`` policy."""
