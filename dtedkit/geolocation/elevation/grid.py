# -*- coding: utf-8 -*-
"""
DTED Elevation Grid - Bilinear elevation queries over one decoded DTED tile.

Wraps a decoded header and its data records with decimal-degree bounds
and spacing, and answers point queries by bilinear interpolation of the
four surrounding posts.

Grid conventions::

    elevations[lon_index, lat_index]

    lon_index 0 .. count.lon - 1   west -> east  (one data record each)
    lat_index 0 .. count.lat - 1   south -> north (within a record)

    min = origin
    max = origin + interval * (count - 1)

A query exactly on the north or east edge has an integer index of
``count - 1``; the index is stepped back by one and the fraction set to
1.0 so the four-post lookup stays in bounds and returns the edge value.

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
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

# Third-party
import numpy as np

# dtedkit internal
from dtedkit.exceptions import ValidationError
from dtedkit.IO.dted import DTEDSource, read_dted_file
from dtedkit.IO.models.dted import DTEDFile, DTEDHeader, DTEDRecord
from dtedkit.IO.options import DecodeOptions
from dtedkit.primitives import Angle, AxisElement


class DTEDData:
    """Elevation grid decoded from one DTED file.

    Parameters
    ----------
    header : DTEDHeader
        Decoded User Header Label.
    records : iterable of DTEDRecord
        Data records ordered west to east, ``header.count.lon`` of them,
        each holding ``header.count.lat`` elevations.
    filename : str, optional
        Source file name, for display.

    Raises
    ------
    ValidationError
        If the records disagree with the header counts, a count is less
        than 2, or an interval is zero.

    Examples
    --------
    >>> from dtedkit import read_dted
    >>> data = read_dted('/data/dted/e015/n42.dt2')
    >>> data.get_elevation(42.5, 15.25)
    312.75
    >>> data.get_elevation(0.0, 0.0) is None
    True
    """

    def __init__(
        self,
        header: DTEDHeader,
        records: Iterable[DTEDRecord],
        filename: Optional[str] = None,
    ) -> None:
        records = tuple(records)
        count = header.count
        if count.lat < 2 or count.lon < 2:
            raise ValidationError(
                f"DTED grid needs at least 2 posts per axis, got "
                f"count={count.as_tuple()}"
            )
        if len(records) != count.lon:
            raise ValidationError(
                f"Header declares {count.lon} longitude lines, "
                f"got {len(records)} records"
            )
        for i, record in enumerate(records):
            if len(record) != count.lat:
                raise ValidationError(
                    f"Record {i} holds {len(record)} elevations, header "
                    f"declares {count.lat}"
                )
        if header.interval.lat <= 0 or header.interval.lon <= 0:
            raise ValidationError(
                f"DTED intervals must be positive, got "
                f"{header.interval.as_tuple()}"
            )

        self.filename = filename
        self._header = header
        self._records = records
        self._interval = header.interval_degrees
        self._min = header.origin_degrees
        self._max = header.origin + self._interval * (count - 1)

        self._elevations = np.stack([r.elevations for r in records])
        self._elevations.setflags(write=False)

    @classmethod
    def from_file(
        cls, dted_file: DTEDFile, filename: Optional[str] = None
    ) -> 'DTEDData':
        """Build the grid from a raw ``DTEDFile`` decode result."""
        return cls(dted_file.header, dted_file.records, filename=filename)

    @classmethod
    def read(
        cls,
        source: DTEDSource,
        options: Optional[DecodeOptions] = None,
    ) -> 'DTEDData':
        """Read, decode and wrap a whole DTED file.

        Parameters
        ----------
        source : str, Path, or bytes-like
            Path to a DTED file, or its contents.
        options : DecodeOptions, optional
            Strictness settings.

        Returns
        -------
        DTEDData
        """
        filename = None
        if isinstance(source, (str, Path)):
            filename = str(source)
        return cls.from_file(read_dted_file(source, options), filename)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    @property
    def header(self) -> DTEDHeader:
        return self._header

    @property
    def records(self) -> Tuple[DTEDRecord, ...]:
        """Data records, west to east."""
        return self._records

    @property
    def elevations(self) -> np.ndarray:
        """Read-only int16 grid of shape ``(count.lon, count.lat)``."""
        return self._elevations

    @property
    def origin(self) -> AxisElement[float]:
        """South-west corner in decimal degrees."""
        return self._min

    @property
    def origin_angle(self) -> AxisElement[Angle]:
        """South-west corner as stored (degrees/minutes/seconds)."""
        return self._header.origin

    @property
    def interval(self) -> AxisElement[float]:
        """Post spacing in decimal degrees."""
        return self._interval

    @property
    def interval_secs(self) -> AxisElement[float]:
        """Post spacing in arc-seconds."""
        return self._header.interval_secs

    @property
    def accuracy(self) -> Optional[int]:
        """Absolute vertical accuracy in metres, if declared."""
        return self._header.accuracy

    @property
    def count(self) -> AxisElement[int]:
        return self._header.count

    @property
    def min(self) -> AxisElement[float]:
        """Lower coverage bound per axis, decimal degrees."""
        return self._min

    @property
    def max(self) -> AxisElement[float]:
        """Upper coverage bound per axis, decimal degrees."""
        return self._max

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, lat: float, lon: float) -> bool:
        """True when ``(lat, lon)`` lies inside the closed grid bounds."""
        return (self._min.lat <= lat <= self._max.lat
                and self._min.lon <= lon <= self._max.lon)

    def _split(self, value: float, axis: str) -> Tuple[int, float]:
        """Index and fraction of ``value`` along ``axis``, edge-clamped."""
        pos = ((value - getattr(self._min, axis))
               / getattr(self._interval, axis))
        index = int(pos)
        frac = pos - index
        if index == getattr(self.count, axis) - 1:
            index -= 1
            frac += 1.0
        return index, frac

    def get_elevation(self, lat: float, lon: float) -> Optional[float]:
        """Bilinearly interpolated elevation at a point.

        Parameters
        ----------
        lat : float
            Latitude in decimal degrees North.
        lon : float
            Longitude in decimal degrees East.

        Returns
        -------
        float or None
            Elevation in metres, or None if the point is outside the
            grid. Being outside coverage is not an error.
        """
        lat = float(lat)
        lon = float(lon)
        if not self.contains(lat, lon):
            return None

        lat_idx, lat_frac = self._split(lat, 'lat')
        lon_idx, lon_frac = self._split(lon, 'lon')

        grid = self._elevations
        elev00 = float(grid[lon_idx, lat_idx])
        elev01 = float(grid[lon_idx, lat_idx + 1])
        elev10 = float(grid[lon_idx + 1, lat_idx])
        elev11 = float(grid[lon_idx + 1, lat_idx + 1])

        return (elev00 * (1.0 - lon_frac) * (1.0 - lat_frac)
                + elev01 * (1.0 - lon_frac) * lat_frac
                + elev10 * lon_frac * (1.0 - lat_frac)
                + elev11 * lon_frac * lat_frac)

    def get_elevation_array(
        self,
        lats: Union[list, np.ndarray],
        lons: Union[list, np.ndarray],
    ) -> np.ndarray:
        """Vectorized ``get_elevation``.

        Parameters
        ----------
        lats, lons : array-like
            Coordinates in decimal degrees, same shape.

        Returns
        -------
        np.ndarray
            float64 elevations, same shape as the inputs. NaN for points
            outside the grid.
        """
        lats = np.asarray(lats, dtype=np.float64)
        lons = np.asarray(lons, dtype=np.float64)
        if lats.shape != lons.shape:
            raise ValidationError(
                f"Latitude shape {lats.shape} does not match "
                f"longitude shape {lons.shape}"
            )
        heights = np.full(lats.shape, np.nan, dtype=np.float64)

        valid = (
            (lats >= self._min.lat) & (lats <= self._max.lat)
            & (lons >= self._min.lon) & (lons <= self._max.lon)
        )
        if not np.any(valid):
            return heights

        lat_pos = (lats[valid] - self._min.lat) / self._interval.lat
        lon_pos = (lons[valid] - self._min.lon) / self._interval.lon
        lat_idx = np.floor(lat_pos).astype(np.intp)
        lon_idx = np.floor(lon_pos).astype(np.intp)
        lat_frac = lat_pos - lat_idx
        lon_frac = lon_pos - lon_idx

        lat_edge = lat_idx == self.count.lat - 1
        lat_idx[lat_edge] -= 1
        lat_frac[lat_edge] += 1.0
        lon_edge = lon_idx == self.count.lon - 1
        lon_idx[lon_edge] -= 1
        lon_frac[lon_edge] += 1.0

        grid = self._elevations
        elev00 = grid[lon_idx, lat_idx].astype(np.float64)
        elev01 = grid[lon_idx, lat_idx + 1].astype(np.float64)
        elev10 = grid[lon_idx + 1, lat_idx].astype(np.float64)
        elev11 = grid[lon_idx + 1, lat_idx + 1].astype(np.float64)

        heights[valid] = (elev00 * (1.0 - lon_frac) * (1.0 - lat_frac)
                          + elev01 * (1.0 - lon_frac) * lat_frac
                          + elev10 * lon_frac * (1.0 - lat_frac)
                          + elev11 * lon_frac * lat_frac)
        return heights

    def __repr__(self) -> str:
        return (
            f"DTEDData(filename={self.filename!r}, "
            f"origin=({self._min.lat}, {self._min.lon}), "
            f"count={self.count.as_tuple()})"
        )


def read_dted(
    source: DTEDSource,
    options: Optional[DecodeOptions] = None,
) -> DTEDData:
    """Read a DTED file into a queryable elevation grid.

    Parameters
    ----------
    source : str, Path, or bytes-like
        Path to a ``.dt0``/``.dt1``/``.dt2`` file, or its contents.
    options : DecodeOptions, optional
        Strictness settings.

    Returns
    -------
    DTEDData

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    DecodeError
        If the contents are not a valid DTED file.
    ValidationError
        If the decoded records disagree with the header.
    """
    return DTEDData.read(source, options)
