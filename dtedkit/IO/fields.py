# -*- coding: utf-8 -*-
"""
DTED Field Decoders - Primitive decoders for fixed-layout DTED fields.

DTED mixes two encodings: header blocks hold fixed-width ASCII text
(digits, hemisphere letters, ``NA`` placeholders) while data records
hold big-endian binary words. Elevations use a signed-magnitude 16-bit
encoding, *not* two's complement: bit 15 is the sign and bits 0-14 the
magnitude, so ``0x8003`` is ``-3`` and ``0x8000`` is zero.

Every decoder reads from a ``ByteCursor`` and either returns the
decoded value having advanced the cursor, or raises a ``DecodeError``
subclass carrying the offending byte offset.

Dependencies
------------
numpy

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
from typing import Optional, Union

# Third-party
import numpy as np

# dtedkit internal
from dtedkit.exceptions import (
    AngleError,
    FieldValueError,
    IncompleteInputError,
    SentinelMismatchError,
)
from dtedkit.primitives.angle import Angle
from dtedkit.vocabulary import Hemisphere, RecognitionSentinel

# Signed-magnitude 16-bit word layout
U16_SIGN_BIT = 0x8000
U16_DATA_MASK = 0x7FFF

_DIGIT_0 = 0x30
_DIGIT_9 = 0x39

# Fill after the NA placeholder
_NA_PAD = b'$'

BytesLike = Union[bytes, bytearray, memoryview]


class ByteCursor:
    """Read position over an immutable in-memory byte buffer.

    Parameters
    ----------
    data : bytes, bytearray, or memoryview
        Buffer to decode. Not copied.
    offset : int, optional
        Starting position. Default 0.
    """

    def __init__(self, data: BytesLike, offset: int = 0) -> None:
        self._data = memoryview(data).cast('B')
        if not 0 <= offset <= len(self._data):
            raise ValueError(
                f"Offset {offset} outside buffer of {len(self._data)} bytes"
            )
        self.offset = offset

    def __len__(self) -> int:
        return len(self._data)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._data) - self.offset

    @property
    def at_end(self) -> bool:
        return self.remaining == 0

    def peek(self, count: int) -> bytes:
        """Return up to ``count`` bytes without advancing."""
        return bytes(self._data[self.offset:self.offset + count])

    def require(self, count: int) -> None:
        """Raise ``IncompleteInputError`` unless ``count`` bytes remain."""
        if self.remaining < count:
            raise IncompleteInputError(count, self.remaining, self.offset)

    def take(self, count: int) -> bytes:
        """Consume and return exactly ``count`` bytes."""
        self.require(count)
        chunk = bytes(self._data[self.offset:self.offset + count])
        self.offset += count
        return chunk

    def skip(self, count: int) -> None:
        """Consume ``count`` bytes without returning them."""
        self.require(count)
        self.offset += count

    def field(self, count: int) -> 'ByteCursor':
        """Consume ``count`` bytes and return a cursor bounded to them.

        The returned cursor keeps absolute offsets, so errors raised while
        decoding inside a fixed-width field still report file positions.
        """
        self.require(count)
        sub = ByteCursor(self._data[:self.offset + count], self.offset)
        self.offset += count
        return sub

    def window(self, start: int, stop: int) -> bytes:
        """Return the already-read bytes in ``[start, stop)``."""
        return bytes(self._data[start:stop])


def decode_tag(
    cursor: ByteCursor,
    sentinel: Union[RecognitionSentinel, bytes],
) -> bytes:
    """Consume a literal byte sequence.

    Parameters
    ----------
    cursor : ByteCursor
        Input position.
    sentinel : RecognitionSentinel or bytes
        Expected literal.

    Returns
    -------
    bytes
        The matched bytes.

    Raises
    ------
    SentinelMismatchError
        If the next bytes differ from the literal.
    IncompleteInputError
        If the input ends part way through an otherwise matching literal.
    """
    if isinstance(sentinel, RecognitionSentinel):
        expected = sentinel.value
    else:
        expected = bytes(sentinel)
    found = cursor.peek(len(expected))
    if found != expected:
        if len(found) < len(expected) and expected.startswith(found):
            raise IncompleteInputError(
                len(expected), len(found), cursor.offset
            )
        raise SentinelMismatchError(expected, found, cursor.offset)
    cursor.skip(len(expected))
    return found


def decode_uint(cursor: ByteCursor, width: int, default: int = 0) -> int:
    """Decode a fixed-width unsigned ASCII decimal field.

    Parameters
    ----------
    cursor : ByteCursor
        Input position.
    width : int
        Number of digit bytes. ``0`` consumes nothing and yields
        ``default``.
    default : int, optional
        Value returned for a zero-width field. Default 0.

    Returns
    -------
    int

    Raises
    ------
    FieldValueError
        If any byte is not an ASCII digit.
    """
    if width == 0:
        return default
    start = cursor.offset
    raw = cursor.take(width)
    value = 0
    for i, byte in enumerate(raw):
        if not _DIGIT_0 <= byte <= _DIGIT_9:
            raise FieldValueError(
                f"Non-digit byte {bytes([byte])!r} in {width}-digit "
                f"field {raw!r}",
                start + i,
            )
        value = value * 10 + (byte - _DIGIT_0)
    return value


def decode_optional_uint(cursor: ByteCursor, width: int = 4) -> Optional[int]:
    """Decode an unsigned field that may hold the ``NA`` placeholder.

    DTED writes ``NA`` left-justified and pads the rest of the field
    with ``$`` (``NA$$`` for a 4-byte field). Only that exact literal
    means absent; anything else, ``NA12`` or ``NA  `` included, is read
    as digits.

    Returns
    -------
    int or None
        None when the field is not available.

    Raises
    ------
    FieldValueError
        If the field is neither the placeholder nor all digits.
    """
    na = RecognitionSentinel.NA.value
    placeholder = na + _NA_PAD * (width - len(na))
    cursor.require(width)
    if width >= len(na) and cursor.peek(width) == placeholder:
        cursor.skip(width)
        return None
    return decode_uint(cursor, width)


def decode_hemisphere(cursor: ByteCursor) -> int:
    """Decode an optional hemisphere letter into a sign.

    ``N``/``E`` give ``+1`` and ``S``/``W`` give ``-1``. Any other byte,
    or the end of input, yields ``+1`` and consumes nothing.
    """
    try:
        hemisphere = Hemisphere(cursor.peek(1))
    except ValueError:
        return 1
    cursor.skip(1)
    return hemisphere.sign


def decode_angle(
    cursor: ByteCursor,
    num_deg: int,
    num_min: int,
    num_sec: int,
) -> Angle:
    """Decode a ``D..M..S..H`` angle field.

    Parameters
    ----------
    cursor : ByteCursor
        Input position.
    num_deg, num_min, num_sec : int
        Digit widths of the degree, minute and second sub-fields. A
        width of 0 means the sub-field is absent and reads as 0.

    Returns
    -------
    Angle

    Raises
    ------
    FieldValueError
        If a sub-field holds a non-digit byte or the values violate the
        Angle invariants (e.g. 75 minutes).
    """
    start = cursor.offset
    deg = decode_uint(cursor, num_deg)
    minutes = decode_uint(cursor, num_min)
    sec = decode_uint(cursor, num_sec)
    sign = decode_hemisphere(cursor)
    try:
        return Angle(deg, minutes, float(sec), sign < 0)
    except AngleError as exc:
        raise FieldValueError(f"Invalid angle field: {exc}", start) from exc


def decode_be_u16(cursor: ByteCursor) -> int:
    """Decode a big-endian unsigned 16-bit word."""
    return int.from_bytes(cursor.take(2), 'big')


def decode_be_i32(cursor: ByteCursor) -> int:
    """Decode a big-endian two's complement 32-bit integer."""
    return int.from_bytes(cursor.take(4), 'big', signed=True)


def signed_magnitude(word: int) -> int:
    """Convert a signed-magnitude 16-bit word to an integer.

    Examples
    --------
    >>> signed_magnitude(0x8003)
    -3
    >>> signed_magnitude(0xFFFF)
    -32767
    """
    magnitude = word & U16_DATA_MASK
    return -magnitude if word & U16_SIGN_BIT else magnitude


def signed_magnitude_array(words: np.ndarray) -> np.ndarray:
    """Vectorized ``signed_magnitude`` over an array of 16-bit words.

    Returns
    -------
    np.ndarray
        dtype int16, same shape as ``words``.
    """
    words = np.asarray(words, dtype=np.uint16)
    magnitude = (words & U16_DATA_MASK).astype(np.int16)
    return np.where(
        (words & U16_SIGN_BIT) != 0, -magnitude, magnitude
    ).astype(np.int16)


def decode_signed_magnitude(cursor: ByteCursor) -> int:
    """Decode one big-endian signed-magnitude 16-bit value."""
    return signed_magnitude(decode_be_u16(cursor))


def decode_signed_magnitude_line(cursor: ByteCursor, count: int) -> np.ndarray:
    """Decode ``count`` consecutive signed-magnitude values.

    Returns
    -------
    np.ndarray
        Read-only int16 array of shape ``(count,)``.
    """
    raw = np.frombuffer(cursor.take(2 * count), dtype=np.dtype('>u2'))
    values = signed_magnitude_array(raw)
    values.setflags(write=False)
    return values
