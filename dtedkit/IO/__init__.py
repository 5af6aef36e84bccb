# -*- coding: utf-8 -*-
"""
IO Module - Decoding of DTED files into typed header and record models.

Key Functions
-------------
- read_dted_file: Read and decode a complete DTED file
- read_dted_header: Read and decode only the 80-byte User Header Label
- decode_dted: Decode an in-memory DTED buffer
- decode_uhl / decode_record: Block-level decoders

Usage
-----
    >>> from dtedkit.IO import read_dted_header
    >>> header = read_dted_header('/data/dted/e015/n42.dt2')
    >>> header.count.as_tuple()
    (3601, 3601)

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

from dtedkit.IO.dted import (
    compute_checksum,
    decode_dted,
    decode_header,
    decode_record,
    decode_uhl,
    read_dted_file,
    read_dted_header,
)
from dtedkit.IO.fields import ByteCursor
from dtedkit.IO.models import DTEDFile, DTEDHeader, DTEDRecord
from dtedkit.IO.options import DecodeOptions

__all__ = [
    'ByteCursor',
    'DecodeOptions',
    'DTEDFile',
    'DTEDHeader',
    'DTEDRecord',
    'compute_checksum',
    'decode_dted',
    'decode_header',
    'decode_record',
    'decode_uhl',
    'read_dted_file',
    'read_dted_header',
]
