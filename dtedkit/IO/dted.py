# -*- coding: utf-8 -*-
"""
DTED Decoder - Decode DTED Level 0/1/2 files from bytes or paths.

Decodes the User Header Label, skips the Data Set Identification and
Accuracy Description blocks, then decodes one data record per longitude
line. Decoding is atomic: any failure aborts the whole file, there is
no partial result.

The decoders work on in-memory buffers. The ``read_*`` helpers accept a
path or a bytes-like object; paths are read whole (or just the first 80
bytes for ``read_dted_header``) before decoding begins, and I/O errors
propagate unchanged.

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
import logging
import warnings
from pathlib import Path
from typing import Optional, Union

# Third-party
import numpy as np

# dtedkit internal
from dtedkit.exceptions import (
    ChecksumError,
    ChecksumWarning,
    TrailingDataError,
)
from dtedkit.IO.fields import (
    BytesLike,
    ByteCursor,
    decode_angle,
    decode_be_i32,
    decode_be_u16,
    decode_optional_uint,
    decode_signed_magnitude_line,
    decode_tag,
    decode_uint,
)
from dtedkit.IO.models.dted import (
    ACC_RECORD_LENGTH,
    DSI_RECORD_LENGTH,
    DTEDFile,
    DTEDHeader,
    DTEDRecord,
    UHL_LENGTH,
)
from dtedkit.IO.options import DecodeOptions
from dtedkit.primitives import AxisElement
from dtedkit.vocabulary import ChecksumPolicy, RecognitionSentinel

logger = logging.getLogger(__name__)

DTEDSource = Union[str, Path, BytesLike]

# UHL field widths
_ANGLE_FIELD_LENGTH = 8
_UHL_RESERVED_1 = 15
_UHL_RESERVED_2 = 25


def decode_uhl(cursor: ByteCursor) -> DTEDHeader:
    """Decode the 80-byte User Header Label.

    Layout::

        UHL1 | lon origin DDDMMSSH | lat origin DDDMMSSH
             | lon interval (4) | lat interval (4) | accuracy (4)
             | reserved (15) | lon count (4) | lat count (4) | reserved (25)

    Parameters
    ----------
    cursor : ByteCursor
        Positioned at the start of the header.

    Returns
    -------
    DTEDHeader

    Raises
    ------
    SentinelMismatchError
        If the buffer does not start with ``UHL1``.
    IncompleteInputError
        If fewer than 80 bytes are available.
    FieldValueError
        If a numeric field holds a non-digit byte or an invalid angle.
    """
    decode_tag(cursor, RecognitionSentinel.UHL)
    cursor.require(UHL_LENGTH - RecognitionSentinel.UHL.length)

    lon_origin = decode_angle(cursor.field(_ANGLE_FIELD_LENGTH), 3, 2, 2)
    lat_origin = decode_angle(cursor.field(_ANGLE_FIELD_LENGTH), 3, 2, 2)
    lon_interval = decode_uint(cursor, 4)
    lat_interval = decode_uint(cursor, 4)
    accuracy = decode_optional_uint(cursor, 4)
    cursor.skip(_UHL_RESERVED_1)
    lon_count = decode_uint(cursor, 4)
    lat_count = decode_uint(cursor, 4)
    cursor.skip(_UHL_RESERVED_2)

    header = DTEDHeader(
        origin=AxisElement(lat_origin, lon_origin),
        interval=AxisElement(lat_interval, lon_interval),
        accuracy=accuracy,
        count=AxisElement(lat_count, lon_count),
    )
    logger.debug(
        "Decoded UHL: origin=(%s, %s) interval=%s count=%s accuracy=%s",
        lat_origin, lon_origin, header.interval.as_tuple(),
        header.count.as_tuple(), accuracy,
    )
    return header


def compute_checksum(data: bytes) -> int:
    """Arithmetic sum of every byte in ``data``, as DTED records store it."""
    return int(np.frombuffer(data, dtype=np.uint8).sum(dtype=np.int64))


def _check_record_checksum(
    cursor: ByteCursor,
    start: int,
    stop: int,
    stored: int,
    policy: ChecksumPolicy,
) -> None:
    computed = compute_checksum(cursor.window(start, stop))
    if computed == stored:
        return
    message = (
        f"Record checksum mismatch: stored {stored}, computed {computed}"
    )
    if policy is ChecksumPolicy.STRICT:
        raise ChecksumError(message, start)
    warnings.warn(
        f"{message} (record at byte offset {start})",
        ChecksumWarning,
        stacklevel=3,
    )


def decode_record(
    cursor: ByteCursor,
    line_len: int,
    checksum: ChecksumPolicy = ChecksumPolicy.IGNORE,
) -> DTEDRecord:
    """Decode one longitude-line data record.

    Parameters
    ----------
    cursor : ByteCursor
        Positioned at the record's ``0xAA`` sentinel.
    line_len : int
        Number of elevations in the line, i.e. the header's latitude
        count. A record does not describe its own length.
    checksum : ChecksumPolicy, optional
        Whether to verify the trailing checksum. Default ``IGNORE``.

    Returns
    -------
    DTEDRecord

    Raises
    ------
    SentinelMismatchError
        If the record does not start with ``0xAA``; usually the header
        counts disagree with the data.
    IncompleteInputError
        If the buffer ends inside the record.
    ChecksumError
        On checksum mismatch under ``ChecksumPolicy.STRICT``.
    """
    start = cursor.offset
    decode_tag(cursor, RecognitionSentinel.DATA)
    block_high = cursor.take(1)[0]
    block_low = decode_be_u16(cursor)
    lon_count = decode_be_u16(cursor)
    lat_count = decode_be_u16(cursor)
    elevations = decode_signed_magnitude_line(cursor, line_len)
    body_end = cursor.offset
    stored = decode_be_i32(cursor)

    if checksum is not ChecksumPolicy.IGNORE:
        _check_record_checksum(cursor, start, body_end, stored, checksum)

    return DTEDRecord(
        block_count=block_high * 0x10000 + block_low,
        lon_count=lon_count,
        lat_count=lat_count,
        elevations=elevations,
        checksum=stored,
    )


def decode_dted(
    data: BytesLike,
    options: Optional[DecodeOptions] = None,
) -> DTEDFile:
    """Decode a complete DTED buffer.

    Parameters
    ----------
    data : bytes, bytearray, or memoryview
        Entire file contents.
    options : DecodeOptions, optional
        Strictness settings. Defaults to ``DecodeOptions()``.

    Returns
    -------
    DTEDFile
        Header and ``header.count.lon`` records, west to east.

    Raises
    ------
    DecodeError
        Any decode failure (see ``dtedkit.exceptions``). Trailing bytes
        raise ``TrailingDataError`` unless
        ``options.allow_trailing_bytes`` is set.
    """
    if options is None:
        options = DecodeOptions()
    cursor = ByteCursor(data)

    header = decode_uhl(cursor)
    dsi = cursor.field(DSI_RECORD_LENGTH)
    acc = cursor.field(ACC_RECORD_LENGTH)
    if options.verify_block_sentinels:
        decode_tag(dsi, RecognitionSentinel.DSI)
        decode_tag(acc, RecognitionSentinel.ACC)

    line_len = header.count.lat
    records = tuple(
        decode_record(cursor, line_len, options.checksum)
        for _ in range(header.count.lon)
    )

    if not cursor.at_end and not options.allow_trailing_bytes:
        raise TrailingDataError(
            f"{cursor.remaining} unexpected bytes after the last data record",
            cursor.offset,
        )

    logger.debug(
        "Decoded DTED: %d records of %d elevations", len(records), line_len,
    )
    return DTEDFile(header=header, records=records)


def decode_header(data: BytesLike) -> DTEDHeader:
    """Decode only the User Header Label at the start of ``data``."""
    return decode_uhl(ByteCursor(data))


def _read_source(source: DTEDSource, limit: Optional[int] = None) -> BytesLike:
    """Return ``source`` as bytes, reading it from disk when it is a path."""
    if isinstance(source, (bytes, bytearray, memoryview)):
        return source
    with open(Path(source), 'rb') as f:
        return f.read() if limit is None else f.read(limit)


def read_dted_file(
    source: DTEDSource,
    options: Optional[DecodeOptions] = None,
) -> DTEDFile:
    """Read and decode a whole DTED file.

    Parameters
    ----------
    source : str, Path, or bytes-like
        Path to a ``.dt0``/``.dt1``/``.dt2`` file, or its contents.
    options : DecodeOptions, optional
        Strictness settings.

    Returns
    -------
    DTEDFile

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    DecodeError
        If the contents are not a valid DTED file.
    """
    return decode_dted(_read_source(source), options)


def read_dted_header(source: DTEDSource) -> DTEDHeader:
    """Read and decode only the User Header Label.

    Only the first 80 bytes of a file are read.

    Parameters
    ----------
    source : str, Path, or bytes-like
        Path to a DTED file, or its contents.

    Returns
    -------
    DTEDHeader

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    DecodeError
        If the header is missing, truncated or malformed.
    """
    return decode_header(_read_source(source, limit=UHL_LENGTH))
