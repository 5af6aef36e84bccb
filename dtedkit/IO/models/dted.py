# -*- coding: utf-8 -*-
"""
DTED Metadata Models - Dataclasses for decoded DTED headers and records.

Holds the values decoded from a DTED file exactly as stored: origin
angles in degrees/minutes/seconds, intervals in tenths of an arc-second,
and elevation lines as signed 16-bit metres. Decimal-degree views are
provided as properties so nothing is lost on decode.

Layout reference (MIL-PRF-89020B)::

    offset  length  block
    0       80      User Header Label (UHL)
    80      648     Data Set Identification (DSI)
    728     2700    Accuracy Description (ACC)
    3428    ...     count.lon data records, 8 + 2*count.lat + 4 bytes each

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
from dataclasses import dataclass
from typing import Optional, Tuple

# Third-party
import numpy as np

# dtedkit internal
from dtedkit.primitives import Angle, AxisElement

#: Length of the User Header Label in bytes
UHL_LENGTH = 80
#: Length of the Data Set Identification record in bytes
DSI_RECORD_LENGTH = 648
#: Length of the Accuracy Description record in bytes
ACC_RECORD_LENGTH = 2700
#: Offset of the first data record
DATA_OFFSET = UHL_LENGTH + DSI_RECORD_LENGTH + ACC_RECORD_LENGTH
#: Fixed bytes per data record: sentinel, block count, two counts
RECORD_PREFIX_LENGTH = 8
#: Trailing checksum bytes per data record
RECORD_CHECKSUM_LENGTH = 4

#: Tenths of an arc-second per degree
TENTHS_PER_DEG = 36000.0
#: Tenths of an arc-second per arc-second
TENTHS_PER_SEC = 10.0


def record_length(line_len: int) -> int:
    """Byte length of one data record holding ``line_len`` elevations."""
    return RECORD_PREFIX_LENGTH + 2 * line_len + RECORD_CHECKSUM_LENGTH


@dataclass(frozen=True)
class DTEDHeader:
    """Decoded User Header Label.

    Parameters
    ----------
    origin : AxisElement[Angle]
        Lower-left (south-west) corner of the grid.
    interval : AxisElement[int]
        Sample spacing in tenths of an arc-second.
    accuracy : int or None
        Absolute vertical accuracy in metres (90% linear error), or None
        when the file declares it not available.
    count : AxisElement[int]
        ``count.lon`` longitude lines, ``count.lat`` points per line.
    """

    origin: AxisElement[Angle]
    interval: AxisElement[int]
    accuracy: Optional[int]
    count: AxisElement[int]

    @property
    def interval_secs(self) -> AxisElement[float]:
        """Sample spacing in arc-seconds."""
        return self.interval / TENTHS_PER_SEC

    @property
    def interval_degrees(self) -> AxisElement[float]:
        """Sample spacing in decimal degrees."""
        return self.interval / TENTHS_PER_DEG

    @property
    def origin_degrees(self) -> AxisElement[float]:
        """Grid origin in signed decimal degrees."""
        return self.origin.to_float()

    @property
    def data_length(self) -> int:
        """Total bytes of all data records the header describes."""
        return self.count.lon * record_length(self.count.lat)


@dataclass(frozen=True, eq=False)
class DTEDRecord:
    """One decoded longitude line.

    Parameters
    ----------
    block_count : int
        24-bit sequential block number.
    lon_count : int
        Longitude index echoed by the record.
    lat_count : int
        Latitude index echoed by the record.
    elevations : np.ndarray
        Read-only int16 elevations in metres, ordered south to north.
    checksum : int
        Stored checksum (signed 32-bit).
    """

    block_count: int
    lon_count: int
    lat_count: int
    elevations: np.ndarray
    checksum: int = 0

    def __len__(self) -> int:
        return int(self.elevations.shape[0])


@dataclass(frozen=True)
class DTEDFile:
    """Raw result of decoding a whole DTED buffer.

    Parameters
    ----------
    header : DTEDHeader
        Decoded User Header Label.
    records : Tuple[DTEDRecord, ...]
        Data records ordered west to east.
    """

    header: DTEDHeader
    records: Tuple[DTEDRecord, ...]
