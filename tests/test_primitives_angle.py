# -*- coding: utf-8 -*-
"""
Angle Tests - Construction, normalization, equality and arithmetic.

Dependencies
------------
pytest

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

import dataclasses

import pytest

from dtedkit.exceptions import AngleError
from dtedkit.primitives import Angle


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestAngleConstruction:
    """Test field validation on construction."""

    def test_fields(self):
        """Test fields are stored as given."""
        angle = Angle(123, 55, 28.25, True)
        assert angle.deg == 123
        assert angle.min == 55
        assert angle.sec == 28.25
        assert angle.negative is True

    def test_defaults_to_zero(self):
        """Test default Angle is positive zero."""
        angle = Angle()
        assert angle.is_zero
        assert not angle.negative

    def test_minutes_upper_bound(self):
        """Test minutes >= 60 are rejected."""
        with pytest.raises(AngleError, match="Minutes must be less than 60"):
            Angle(45, 67, 4.0)

    def test_seconds_upper_bound(self):
        """Test seconds >= 60 are rejected."""
        with pytest.raises(AngleError, match="Seconds must be less than 60"):
            Angle(45, 4, 60.0)

    def test_seconds_lower_bound(self):
        """Test negative seconds are rejected."""
        with pytest.raises(AngleError, match="non-negative"):
            Angle(45, 4, -4.0)

    def test_negative_degrees_rejected(self):
        """Test the sign must go in ``negative``, not in degrees."""
        with pytest.raises(AngleError):
            Angle(-45, 0, 0.0)

    def test_degrees_upper_bound(self):
        """Test degrees beyond 16 bits are rejected."""
        Angle(65535, 0, 0.0)
        with pytest.raises(AngleError):
            Angle(65536, 0, 0.0)

    def test_nan_seconds_rejected(self):
        """Test NaN seconds are rejected."""
        with pytest.raises(AngleError):
            Angle(0, 0, float('nan'))

    def test_angle_error_is_value_error(self):
        """Test AngleError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Angle(0, 60, 0.0)

    def test_immutable(self):
        """Test fields cannot be reassigned."""
        angle = Angle(1, 2, 3.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            angle.deg = 5


# ---------------------------------------------------------------------------
# Total seconds
# ---------------------------------------------------------------------------

class TestAngleTotalSeconds:
    """Test conversion to and from total arc-seconds."""

    def test_total_seconds(self):
        """Test signed total seconds."""
        assert Angle(0, 1, 1.0).total_seconds() == 61.0
        assert Angle(123, 45, 43.5, True).total_seconds() == -445543.5

    def test_from_total_seconds(self):
        """Test normalization of a seconds count into fields."""
        assert Angle.from_total_seconds(61.0) == Angle(0, 1, 1.0)
        assert Angle.from_total_seconds(-3600.0) == Angle(1, 0, 0.0, True)
        assert Angle.from_total_seconds(-445543.5) == Angle(
            123, 45, 43.5, True
        )

    @pytest.mark.parametrize('deg,minutes,sec,negative', [
        (0, 0, 0.0, False),
        (42, 0, 0.0, False),
        (15, 30, 0.5, True),
        (179, 59, 59.75, True),
        (90, 0, 0.125, False),
        (65535, 0, 0.0, True),
        (123, 45, 43.8, True),
        (100, 0, 0.1, False),
        (15, 30, 12.3, False),
        (0, 0, 59.9, True),
    ])
    def test_round_trip(self, deg, minutes, sec, negative):
        """Test from_total_seconds inverts total_seconds."""
        angle = Angle(deg, minutes, sec, negative)
        assert Angle.from_total_seconds(angle.total_seconds()) == angle

    def test_round_trip_negative_zero(self):
        """Test -0 round-trips to an angle equal to +0."""
        angle = Angle(0, 0, 0.0, True)
        restored = Angle.from_total_seconds(angle.total_seconds())
        assert restored == angle
        assert restored == Angle()

    def test_fractional_seconds_fields(self):
        """Test decimal seconds come back without float drift."""
        angle = Angle.from_total_seconds(Angle(15, 30, 12.3).total_seconds())
        assert angle.deg == 15
        assert angle.min == 30
        assert angle.sec == 12.3

    def test_seconds_carry(self):
        """Test seconds rounding up to 60 carry into minutes and degrees."""
        assert Angle.from_total_seconds(3599.9999999999) == Angle(1, 0, 0.0)
        angle = Angle.from_total_seconds(-3599.9999999999)
        assert (angle.deg, angle.min, angle.sec) == (1, 0, 0.0)
        assert angle.negative

    def test_too_large(self):
        """Test magnitudes beyond 65535 degrees are rejected."""
        with pytest.raises(AngleError, match="too large"):
            Angle.from_total_seconds(1e10)

    def test_not_finite(self):
        """Test infinite seconds are rejected."""
        with pytest.raises(AngleError):
            Angle.from_total_seconds(float('inf'))

    def test_from_degrees(self):
        """Test construction from decimal degrees."""
        assert Angle.from_degrees(-74.5) == Angle(74, 30, 0.0, True)


# ---------------------------------------------------------------------------
# Equality and ordering
# ---------------------------------------------------------------------------

class TestAngleEquality:
    """Test normalized equality, hashing and ordering."""

    def test_equal(self):
        """Test identical fields compare equal."""
        assert Angle(1, 1, 1.0) == Angle(1, 1, 1.0)

    def test_sign_matters(self):
        """Test opposite signs of a non-zero angle differ."""
        assert Angle(1, 1, 1.0) != Angle(1, 1, 1.0, True)

    def test_seconds_matter(self):
        """Test differing seconds compare unequal."""
        assert Angle(1, 1, 1.0) != Angle(1, 1, 2.0)

    def test_signed_zero_equal(self):
        """Test +0 and -0 compare equal and hash equal."""
        assert Angle(0, 0, 0.0) == Angle(0, 0, 0.0, True)
        assert hash(Angle(0, 0, 0.0)) == hash(Angle(0, 0, 0.0, True))

    def test_zero_degrees_only_is_not_zero(self):
        """Test an angle with zero degrees but non-zero minutes keeps sign."""
        assert Angle(0, 1, 0.0) != Angle(0, 1, 0.0, True)

    def test_normalized(self):
        """Test the normalized tuple drops the sign of zero only."""
        assert Angle(0, 0, 0.0, True).normalized() == (0, 0, 0.0, False)
        assert Angle(1, 2, 3.0, True).normalized() == (1, 2, 3.0, True)

    def test_arithmetic_drift_equal(self):
        """Test sums with float drift equal the exact angle and hash alike."""
        total = Angle(0, 0, 0.1) + Angle(0, 0, 0.2)
        assert total == Angle(0, 0, 0.3)
        assert hash(total) == hash(Angle(0, 0, 0.3))

    def test_tiny_negative_equals_zero(self):
        """Test sub-precision negative residue compares equal to +0."""
        assert Angle(0, 0, 1e-12, True) == Angle()

    def test_not_equal_to_float(self):
        """Test an Angle never equals a plain number."""
        assert Angle(1, 0, 0.0) != 1.0

    def test_ordering(self):
        """Test angles order by total seconds."""
        assert Angle(0, 0, 1.0, True) < Angle(0, 0, 0.0)
        assert Angle(1, 0, 0.0) > Angle(0, 59, 59.5)
        assert sorted([Angle(2), Angle(1, negative=True), Angle(0)]) == [
            Angle(1, negative=True), Angle(0), Angle(2),
        ]


# ---------------------------------------------------------------------------
# Arithmetic and conversion
# ---------------------------------------------------------------------------

class TestAngleArithmetic:
    """Test arithmetic produces new normalized angles."""

    def test_add(self):
        """Test adding a negative angle borrows across fields."""
        result = Angle(3, 2, 59.0) + Angle(0, 1, 1.0, True)
        assert result == Angle(3, 1, 58.0)

    def test_add_crosses_zero(self):
        """Test a sum may change sign."""
        assert Angle(0, 0, 0.0) + Angle(0, 2, 0.0, True) == Angle(
            0, 2, 0.0, True
        )

    def test_sub(self):
        """Test subtracting a negative angle."""
        assert Angle(3, 1, 1.0) - Angle(0, 10, 58.0, True) == Angle(
            3, 11, 59.0
        )

    def test_mul_scalar(self):
        """Test scaling by a real number, from either side."""
        assert Angle(1, 0, 0.0) * 2 == Angle(2, 0, 0.0)
        assert 0.5 * Angle(1, 0, 0.0) == Angle(0, 30, 0.0)

    def test_div_scalar(self):
        """Test dividing by a real number."""
        assert Angle(1, 0, 0.0) / 4 == Angle(0, 15, 0.0)

    def test_div_angle_is_ratio(self):
        """Test dividing two angles gives a float ratio."""
        assert Angle(2, 0, 0.0) / Angle(0, 30, 0.0) == 4.0

    def test_add_number_unsupported(self):
        """Test adding a bare number is ambiguous and rejected."""
        with pytest.raises(TypeError):
            Angle(1, 0, 0.0) + 1.0

    def test_neg_abs(self):
        """Test negation and absolute value flip or clear the sign."""
        assert -Angle(1, 2, 3.0) == Angle(1, 2, 3.0, True)
        assert abs(Angle(1, 2, 3.0, True)) == Angle(1, 2, 3.0)

    def test_result_is_new_object(self):
        """Test arithmetic does not mutate its operands."""
        a = Angle(1, 0, 0.0)
        b = a + Angle(0, 1, 0.0)
        assert a == Angle(1, 0, 0.0)
        assert b is not a

    def test_degrees(self):
        """Test decimal degree conversion."""
        assert Angle(123, 45, 43.8, True).degrees == pytest.approx(
            -123.76216666666667
        )
        assert float(Angle(42, 30, 0.0)) == 42.5
        assert int(Angle(123, 45, 43.8, True)) == -123

    def test_str(self):
        """Test human readable formatting."""
        assert str(Angle(42, 5, 7.5, True)) == "-42°05'07.50\""
