# -*- coding: utf-8 -*-
"""
Primitives - Angle and per-axis value types shared by the decoders.

Key Classes
-----------
- Angle: Immutable degrees/minutes/seconds angle with exact fields
- AxisElement: Latitude/longitude pair with per-axis arithmetic

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

from dtedkit.primitives.angle import (
    Angle,
    MAX_DEGREES,
    MIN_PER_DEG,
    SEC_PER_DEG,
    SEC_PER_MIN,
)
from dtedkit.primitives.axis import AxisElement

__all__ = [
    'Angle',
    'AxisElement',
    'MAX_DEGREES',
    'MIN_PER_DEG',
    'SEC_PER_DEG',
    'SEC_PER_MIN',
]
