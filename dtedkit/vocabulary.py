# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for DTED decoding.

Defines the single source of truth for the recognition sentinels that
delimit DTED blocks, the hemisphere letters used in angle fields, and
the strictness policies accepted by the decoders.

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

from enum import Enum


class RecognitionSentinel(Enum):
    """Literal byte sequences that identify DTED blocks and values.

    See MIL-PRF-89020B section 3.13 (User Header Label, Data Set
    Identification, Accuracy Description and Data Records).
    """

    UHL = b"UHL1"
    DSI = b"DSIU"
    ACC = b"ACC"
    DATA = b"\xaa"
    NA = b"NA"

    @property
    def length(self) -> int:
        """Number of bytes the sentinel occupies."""
        return len(self.value)


class Hemisphere(Enum):
    """Hemisphere letters and the sign they give an angle."""

    N = b"N"
    S = b"S"
    E = b"E"
    W = b"W"

    @property
    def sign(self) -> int:
        return -1 if self in (Hemisphere.S, Hemisphere.W) else 1


class ChecksumPolicy(Enum):
    """What to do with the trailing checksum of each data record.

    - ``IGNORE``: skip the checksum bytes without verifying them.
    - ``WARN``: verify, and issue a ``ChecksumWarning`` on mismatch.
    - ``STRICT``: verify, and raise ``ChecksumError`` on mismatch.
    """

    IGNORE = "ignore"
    WARN = "warn"
    STRICT = "strict"
