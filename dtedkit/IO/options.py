# -*- coding: utf-8 -*-
"""
Decode Options - Strictness settings for the DTED decoders.

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

# dtedkit internal
from dtedkit.exceptions import ValidationError
from dtedkit.vocabulary import ChecksumPolicy


@dataclass(frozen=True)
class DecodeOptions:
    """How strictly to decode a DTED buffer.

    Parameters
    ----------
    checksum : ChecksumPolicy or str, optional
        Handling of each record's trailing checksum. Default ``IGNORE``.
    verify_block_sentinels : bool, optional
        Require the DSI block to start with ``DSIU`` and the ACC block
        with ``ACC``. Default False (both blocks are skipped unread).
    allow_trailing_bytes : bool, optional
        Accept bytes after the last data record. Default False.
    """

    checksum: ChecksumPolicy = ChecksumPolicy.IGNORE
    verify_block_sentinels: bool = False
    allow_trailing_bytes: bool = False

    def __post_init__(self) -> None:
        try:
            policy = ChecksumPolicy(self.checksum)
        except ValueError:
            raise ValidationError(
                f"Unknown checksum policy {self.checksum!r}. Expected one "
                f"of {[p.value for p in ChecksumPolicy]}."
            ) from None
        object.__setattr__(self, 'checksum', policy)
