# -*- coding: utf-8 -*-
"""
AxisElement - Latitude/longitude pair with per-axis arithmetic.

DTED describes nearly everything twice, once per axis: the grid origin,
the sample interval, the number of samples, the coverage bounds. An
``AxisElement`` holds one value per axis and applies arithmetic to each
axis independently, so derived quantities read like the formulas they
implement::

    max_bound = origin + interval * (count - 1)

Operands may be another ``AxisElement`` (combined axis by axis) or a
scalar (broadcast to both axes). When the two values on an axis have no
native operation between them, e.g. an ``Angle`` plus a ``float``, both
are converted through ``float`` and the result is a float. Conversions
that cannot be made raise ``ConversionError``.

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
import numbers
import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Tuple, TypeVar

# dtedkit internal
from dtedkit.exceptions import AngleError, ConversionError
from dtedkit.primitives.angle import Angle

T = TypeVar('T')
U = TypeVar('U')


def _convert(value: Any, kind: Callable[[Any], U], axis: str) -> U:
    """Convert one axis value, reporting failure as ``ConversionError``."""
    try:
        return kind(value)
    except (TypeError, ValueError, OverflowError) as exc:
        name = getattr(kind, '__name__', repr(kind))
        raise ConversionError(
            f"Cannot convert {axis} value {value!r} to {name}: {exc}"
        ) from exc


def _apply(op: Callable[[Any, Any], Any], lhs: Any, rhs: Any,
           axis: str) -> Any:
    """Apply ``op`` natively, falling back to float arithmetic."""
    try:
        return op(lhs, rhs)
    except TypeError:
        pass
    return op(_convert(lhs, float, axis), _convert(rhs, float, axis))


def _is_operand(value: Any) -> bool:
    return isinstance(value, (numbers.Real, Angle))


@dataclass(frozen=True)
class AxisElement(Generic[T]):
    """A value per geographic axis.

    Parameters
    ----------
    lat : T
        Latitude-axis value.
    lon : T
        Longitude-axis value.

    Examples
    --------
    >>> AxisElement(10, 20) + AxisElement(12, 32)
    AxisElement(lat=22, lon=52)
    >>> AxisElement(-10, 20) - 12.0
    AxisElement(lat=-22.0, lon=8.0)
    """

    lat: T
    lon: T

    def __iter__(self) -> Iterator[T]:
        yield self.lat
        yield self.lon

    def as_tuple(self) -> Tuple[T, T]:
        """Return ``(lat, lon)``."""
        return (self.lat, self.lon)

    def map(self, func: Callable[[T], U]) -> 'AxisElement[U]':
        """Apply ``func`` to each axis value."""
        return AxisElement(func(self.lat), func(self.lon))

    def astype(self, kind: Callable[[Any], U]) -> 'AxisElement[U]':
        """Convert both axis values with ``kind`` (e.g. ``float``, ``int``).

        Raises
        ------
        ConversionError
            If either value cannot be converted.
        """
        return AxisElement(
            _convert(self.lat, kind, 'lat'),
            _convert(self.lon, kind, 'lon'),
        )

    def to_float(self) -> 'AxisElement[float]':
        """Convert both axis values to ``float``.

        ``Angle`` values become signed decimal degrees.
        """
        return self.astype(float)

    def to_angle(self) -> 'AxisElement[Angle]':
        """Interpret both axis values as decimal degrees and build Angles.

        Raises
        ------
        ConversionError
            If a value is not a real number or is too large for an Angle.
        """
        def _angle(value: Any) -> Angle:
            if isinstance(value, Angle):
                return value
            try:
                return Angle.from_degrees(value)
            except AngleError as exc:
                raise ValueError(str(exc)) from exc
        return self.astype(_angle)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _combine(self, other: Any, op: Callable[[Any, Any], Any],
                 reflected: bool = False) -> 'AxisElement':
        if isinstance(other, AxisElement):
            rhs_lat, rhs_lon = other.lat, other.lon
        elif _is_operand(other):
            rhs_lat = rhs_lon = other
        else:
            return NotImplemented
        if reflected:
            return AxisElement(
                _apply(op, rhs_lat, self.lat, 'lat'),
                _apply(op, rhs_lon, self.lon, 'lon'),
            )
        return AxisElement(
            _apply(op, self.lat, rhs_lat, 'lat'),
            _apply(op, self.lon, rhs_lon, 'lon'),
        )

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __radd__(self, other):
        return self._combine(other, operator.add, reflected=True)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __rsub__(self, other):
        return self._combine(other, operator.sub, reflected=True)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __rmul__(self, other):
        return self._combine(other, operator.mul, reflected=True)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __rtruediv__(self, other):
        return self._combine(other, operator.truediv, reflected=True)

    def __neg__(self) -> 'AxisElement[T]':
        return self.map(operator.neg)
