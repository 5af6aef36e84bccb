# -*- coding: utf-8 -*-
"""
Shared fixtures - Synthetic DTED byte builders for the test suite.

All tests use synthetic data -- no real DTED tiles required. The
builders lay bytes out exactly as MIL-PRF-89020B describes: an 80-byte
UHL, a 648-byte DSI, a 2700-byte ACC, then one data record per
longitude line.

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
import struct
from typing import Optional, Sequence

# Third-party
import numpy as np
import pytest


def _encode_signed_magnitude(values: Sequence[int]) -> bytes:
    """Encode integers as big-endian signed-magnitude 16-bit words."""
    values = np.asarray(values, dtype=np.int32)
    words = np.where(values < 0, 0x8000 | -values, values)
    return words.astype('>u2').tobytes()


def _build_uhl(
    lat_origin: bytes = b'0420000N',
    lon_origin: bytes = b'0150000E',
    lat_interval: int = 10,
    lon_interval: int = 10,
    accuracy: Optional[int] = None,
    lat_count: int = 3601,
    lon_count: int = 3601,
) -> bytes:
    """Build an 80-byte User Header Label."""
    acc = b'NA$$' if accuracy is None else b'%04d' % accuracy
    uhl = (
        b'UHL1'
        + lon_origin
        + lat_origin
        + b'%04d' % lon_interval
        + b'%04d' % lat_interval
        + acc
        + b'U  ' + b' ' * 12          # security code + unique reference
        + b'%04d' % lon_count
        + b'%04d' % lat_count
        + b'0' + b' ' * 24            # multiple accuracy + reserved
    )
    assert len(uhl) == 80
    return uhl


def _build_record(
    elevations: Sequence[int],
    block: int = 0,
    lon_index: int = 0,
    lat_index: int = 0,
    checksum: Optional[int] = None,
) -> bytes:
    """Build one data record; the checksum is computed unless given."""
    body = (
        b'\xaa'
        + bytes([block >> 16])
        + struct.pack('>HHH', block & 0xFFFF, lon_index, lat_index)
        + _encode_signed_magnitude(elevations)
    )
    if checksum is None:
        checksum = int(np.frombuffer(body, dtype=np.uint8).sum())
    return body + struct.pack('>i', checksum)


def _build_dsi() -> bytes:
    return b'DSIU' + b' ' * 644


def _build_acc() -> bytes:
    return b'ACC' + b' ' * 2697


def _build_dted(
    grid: np.ndarray,
    lat_origin: bytes = b'0420000N',
    lon_origin: bytes = b'0150000E',
    lat_interval: int = 10,
    lon_interval: int = 10,
    accuracy: Optional[int] = None,
) -> bytes:
    """Build a complete DTED file from a ``(lon, lat)`` elevation grid."""
    grid = np.asarray(grid)
    lon_count, lat_count = grid.shape
    parts = [
        _build_uhl(lat_origin, lon_origin, lat_interval, lon_interval,
                   accuracy, lat_count, lon_count),
        _build_dsi(),
        _build_acc(),
    ]
    for i in range(lon_count):
        parts.append(_build_record(grid[i], block=i, lon_index=i))
    return b''.join(parts)


@pytest.fixture
def build_uhl():
    """Factory for 80-byte User Header Labels."""
    return _build_uhl


@pytest.fixture
def build_record():
    """Factory for single data records."""
    return _build_record


@pytest.fixture
def build_dted():
    """Factory for complete DTED files from a ``(lon, lat)`` grid."""
    return _build_dted


@pytest.fixture
def ramp_grid():
    """5x5 grid where ``grid[lon, lat] == 100 * lon + lat``."""
    lon_idx, lat_idx = np.meshgrid(np.arange(5), np.arange(5), indexing='ij')
    return (100 * lon_idx + lat_idx).astype(np.int16)


@pytest.fixture
def ramp_dted(build_dted, ramp_grid):
    """DTED bytes for ``ramp_grid`` at 0.25 degree spacing from (42N, 15E).

    9000 tenths of an arc-second is exactly 0.25 degrees, so every post
    lands on an exactly representable coordinate.
    """
    return build_dted(ramp_grid, lat_interval=9000, lon_interval=9000)
