# -*- coding: utf-8 -*-
"""
Angle - Degrees/minutes/seconds geographic angle with exact field storage.

DTED stores origins as fixed-width ``DDDMMSSH`` text fields. Keeping the
degree, minute and second fields separately (rather than collapsing to a
decimal degree on read) preserves what the file says exactly, and lets
arithmetic be carried out in total arc-seconds before normalizing back
into fields.

The sign of an angle is carried once, in ``negative``; minutes and
seconds are always non-negative. Positive and negative zero compare
equal, which is made explicit by ``Angle.normalized``.

Examples
--------
>>> from dtedkit.primitives import Angle
>>> Angle(0, 1, 0.0) == Angle.from_total_seconds(60.0)
True
>>> Angle(123, 45, 43.8, negative=True).degrees
-123.76216666666667

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

# Standard library
import functools
import math
import numbers
from dataclasses import dataclass
from typing import Tuple

# dtedkit internal
from dtedkit.exceptions import AngleError

#: Arc-seconds per degree
SEC_PER_DEG = 3600.0
#: Arc-seconds per minute
SEC_PER_MIN = 60.0
#: Minutes per degree
MIN_PER_DEG = 60.0

#: Largest degree magnitude an Angle can hold (16-bit unsigned)
MAX_DEGREES = 0xFFFF

#: Decimal places of seconds kept when normalizing and comparing
SEC_DIGITS = 9


def _round_dms(deg: int, minutes: int, sec: float) -> Tuple[int, int, float]:
    """Round seconds to ``SEC_DIGITS`` places, carrying into minutes."""
    sec = round(sec, SEC_DIGITS)
    if sec >= 60.0:
        sec -= 60.0
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        deg += 1
    return deg, minutes, sec


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Angle:
    """A signed angle in degrees, minutes and seconds.

    Parameters
    ----------
    deg : int
        Degree magnitude, ``0 <= deg <= 65535``.
    min : int
        Minutes, ``0 <= min < 60``.
    sec : float
        Seconds, ``0 <= sec < 60``. May be fractional.
    negative : bool
        True for south latitudes / west longitudes (or any negative
        arithmetic result).

    Raises
    ------
    AngleError
        If any field violates the ranges above.

    Notes
    -----
    Instances are immutable. ``+``/``-`` combine two angles; ``*``/``/``
    scale an angle by a real number. Dividing an angle by an angle gives
    their ratio as a ``float``. Angles order by ``total_seconds()``.
    """

    deg: int = 0
    min: int = 0
    sec: float = 0.0
    negative: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.deg, numbers.Integral) or isinstance(
                self.deg, bool):
            raise AngleError(f"Degrees must be an integer, got {self.deg!r}")
        if not isinstance(self.min, numbers.Integral) or isinstance(
                self.min, bool):
            raise AngleError(f"Minutes must be an integer, got {self.min!r}")
        if not 0 <= self.deg <= MAX_DEGREES:
            raise AngleError(
                f"Degrees must be within [0, {MAX_DEGREES}], got {self.deg}. "
                f"To make a negative Angle, set negative=True."
            )
        if self.min >= 60:
            raise AngleError(f"Minutes must be less than 60, got {self.min}")
        if self.min < 0:
            raise AngleError(
                f"Minutes must be non-negative, got {self.min}. "
                f"To make a negative Angle, set negative=True."
            )
        sec = float(self.sec)
        if sec >= 60.0:
            raise AngleError(f"Seconds must be less than 60, got {sec}")
        if not sec >= 0.0:
            raise AngleError(
                f"Seconds must be non-negative, got {sec}. "
                f"To make a negative Angle, set negative=True."
            )
        object.__setattr__(self, 'deg', int(self.deg))
        object.__setattr__(self, 'min', int(self.min))
        object.__setattr__(self, 'sec', sec)
        object.__setattr__(self, 'negative', bool(self.negative))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_total_seconds(cls, total_sec: float) -> 'Angle':
        """Normalize a signed arc-second count into an Angle.

        Parameters
        ----------
        total_sec : float
            Signed total arc-seconds.

        Returns
        -------
        Angle

        Raises
        ------
        AngleError
            If ``total_sec`` is not finite or its magnitude exceeds
            ``65535`` degrees.
        """
        total_sec = float(total_sec)
        sec_abs = abs(total_sec)
        if not math.isfinite(total_sec) or sec_abs > MAX_DEGREES * SEC_PER_DEG:
            raise AngleError(f"{total_sec}s is too large to be an Angle")

        whole = int(sec_abs)
        deg, remainder = divmod(whole, 3600)
        minutes = remainder // 60
        deg, minutes, sec = _round_dms(
            deg, minutes, sec_abs - (deg * 3600 + minutes * 60)
        )
        return cls(deg, minutes, sec, total_sec < 0.0)

    @classmethod
    def from_degrees(cls, degrees: float) -> 'Angle':
        """Build an Angle from signed decimal degrees."""
        return cls.from_total_seconds(float(degrees) * SEC_PER_DEG)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def sign(self) -> int:
        """``-1`` for negative angles, ``+1`` otherwise."""
        return -1 if self.negative else 1

    @property
    def is_zero(self) -> bool:
        """True when every field is zero, regardless of sign."""
        return self.deg == 0 and self.min == 0 and self.sec == 0.0

    @property
    def degrees(self) -> float:
        """Signed decimal degrees, ``sign * (deg + min/60 + sec/3600)``."""
        return self.sign * (
            self.deg + self.min / MIN_PER_DEG + self.sec / SEC_PER_DEG
        )

    def total_seconds(self) -> float:
        """Signed total arc-seconds of the angle."""
        secs_abs = self.deg * 3600 + self.min * 60 + self.sec
        return self.sign * secs_abs

    def normalized(self) -> Tuple[int, int, float, bool]:
        """Return the ``(deg, min, sec, negative)`` tuple used for equality.

        Seconds are rounded to ``SEC_DIGITS`` decimal places, so float
        drift from arithmetic does not break equality. Zero is always
        reported as non-negative, so ``+0`` and ``-0`` normalize to the
        same tuple.
        """
        deg, minutes, sec = _round_dms(self.deg, self.min, self.sec)
        zero = deg == 0 and minutes == 0 and sec == 0.0
        return (deg, minutes, sec, self.negative and not zero)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.normalized() == other.normalized()

    def __hash__(self) -> int:
        return hash(self.normalized())

    def __lt__(self, other: 'Angle') -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.total_seconds() < other.total_seconds()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: 'Angle') -> 'Angle':
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle.from_total_seconds(
            self.total_seconds() + other.total_seconds()
        )

    def __sub__(self, other: 'Angle') -> 'Angle':
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle.from_total_seconds(
            self.total_seconds() - other.total_seconds()
        )

    def __mul__(self, other: numbers.Real) -> 'Angle':
        if isinstance(other, Angle) or not isinstance(other, numbers.Real):
            return NotImplemented
        return Angle.from_total_seconds(self.total_seconds() * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Angle):
            return self.total_seconds() / other.total_seconds()
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Angle.from_total_seconds(self.total_seconds() / float(other))

    def __neg__(self) -> 'Angle':
        return Angle(self.deg, self.min, self.sec, not self.negative)

    def __pos__(self) -> 'Angle':
        return self

    def __abs__(self) -> 'Angle':
        return Angle(self.deg, self.min, self.sec, False)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def __float__(self) -> float:
        return self.degrees

    def __int__(self) -> int:
        return int(self.degrees)

    def __str__(self) -> str:
        sign = '-' if self.negative and not self.is_zero else ''
        return f"{sign}{self.deg}°{self.min:02d}'{self.sec:05.2f}\""
