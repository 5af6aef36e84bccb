# -*- coding: utf-8 -*-
"""
Geolocation Module - Terrain elevation lookup from decoded DTED.

Modules
-------
- elevation: DTED elevation grid and tile-directory elevation model

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
