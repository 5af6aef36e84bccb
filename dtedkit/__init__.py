# -*- coding: utf-8 -*-
"""
dtedkit - Digital Terrain Elevation Data decoding and elevation lookup.

Decodes DTED Level 0/1/2 files into an in-memory elevation grid and
answers point elevation queries by bilinear interpolation.

    >>> from dtedkit import read_dted, read_dted_header
    >>> header = read_dted_header('/data/dted/e015/n42.dt2')
    >>> data = read_dted('/data/dted/e015/n42.dt2')
    >>> data.get_elevation(42.5, 15.25)

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

__version__ = "0.1.0"

from dtedkit.exceptions import (
    AngleError,
    ChecksumError,
    ChecksumWarning,
    ConversionError,
    DecodeError,
    DtedError,
    FieldValueError,
    IncompleteInputError,
    SentinelMismatchError,
    TrailingDataError,
    ValidationError,
)
from dtedkit.vocabulary import ChecksumPolicy, Hemisphere, RecognitionSentinel
from dtedkit.primitives import Angle, AxisElement
from dtedkit.IO import (
    DecodeOptions,
    DTEDFile,
    DTEDHeader,
    DTEDRecord,
    decode_dted,
    read_dted_file,
    read_dted_header,
)
from dtedkit.geolocation.elevation import (
    DTEDData,
    DTEDElevation,
    ElevationModel,
    read_dted,
)

__all__ = [
    'DtedError',
    'ValidationError',
    'AngleError',
    'ConversionError',
    'DecodeError',
    'IncompleteInputError',
    'SentinelMismatchError',
    'FieldValueError',
    'TrailingDataError',
    'ChecksumError',
    'ChecksumWarning',
    'ChecksumPolicy',
    'Hemisphere',
    'RecognitionSentinel',
    'Angle',
    'AxisElement',
    'DecodeOptions',
    'DTEDFile',
    'DTEDHeader',
    'DTEDRecord',
    'decode_dted',
    'read_dted_file',
    'read_dted_header',
    'DTEDData',
    'DTEDElevation',
    'ElevationModel',
    'read_dted',
]
