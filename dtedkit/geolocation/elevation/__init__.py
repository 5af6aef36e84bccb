# -*- coding: utf-8 -*-
"""
Elevation Module - DTED terrain elevation lookup.

Provides the elevation grid decoded from a single DTED file and an
elevation model over a directory tree of DTED tiles.

Key Classes
-----------
- DTEDData: Bilinear queries over one decoded DTED tile
- ElevationModel: Abstract base class for vectorized elevation models
- DTEDElevation: Elevation model over a DTED directory tree

Usage
-----
    >>> from dtedkit.geolocation.elevation import read_dted
    >>> data = read_dted('/data/dted/e015/n42.dt2')
    >>> data.get_elevation(42.5, 15.25)
    312.75

    >>> from dtedkit.geolocation.elevation import DTEDElevation
    >>> elev = DTEDElevation('/data/dted')
    >>> elev.get_elevation(42.5, 15.25)
    312.75

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

from dtedkit.geolocation.elevation.base import ElevationModel
from dtedkit.geolocation.elevation.dted import DTEDElevation
from dtedkit.geolocation.elevation.grid import DTEDData, read_dted

__all__ = [
    'ElevationModel',
    'DTEDData',
    'DTEDElevation',
    'read_dted',
]
