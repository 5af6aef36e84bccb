# -*- coding: utf-8 -*-
"""
IO Models - Typed dataclasses for decoded DTED content.

Key Classes
-----------
- DTEDHeader: Decoded User Header Label
- DTEDRecord: One decoded longitude line of elevations
- DTEDFile: Header plus all records

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

from dtedkit.IO.models.dted import (
    ACC_RECORD_LENGTH,
    DATA_OFFSET,
    DSI_RECORD_LENGTH,
    DTEDFile,
    DTEDHeader,
    DTEDRecord,
    UHL_LENGTH,
    record_length,
)

__all__ = [
    'DTEDHeader',
    'DTEDRecord',
    'DTEDFile',
    'UHL_LENGTH',
    'DSI_RECORD_LENGTH',
    'ACC_RECORD_LENGTH',
    'DATA_OFFSET',
    'record_length',
]
