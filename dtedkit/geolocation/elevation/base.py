# -*- coding: utf-8 -*-
"""
Elevation Model Base Class - Abstract interface for terrain elevation lookup.

Defines the abstract base class for elevation models backed by decoded
DTED data. Concrete implementations provide a single vectorized lookup;
the public ``get_elevation`` method handles scalar/array dispatch.

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
from abc import ABC, abstractmethod
from typing import Any, Optional, Union

# Third-party
import numpy as np

# dtedkit internal
from dtedkit.exceptions import ValidationError


def _is_scalar(val: Any) -> bool:
    """Check if a value is a scalar (not array-like)."""
    if isinstance(val, np.ndarray):
        return val.ndim == 0
    return isinstance(val, (int, float, np.integer, np.floating))


def _to_array(val: Any) -> np.ndarray:
    """Convert scalar, list, or array to a float64 array of at least 1D."""
    arr = np.asarray(val, dtype=np.float64)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    return arr


class ElevationModel(ABC):
    """Terrain height lookup over one or more decoded DTED tiles.

    Subclasses supply ``_get_elevation_array``, a lookup over flat
    float64 coordinate arrays. ``get_elevation`` adapts every accepted
    input form to that call and shapes the result to match the input.

    Heights are returned exactly as DTED stores them, in metres above
    mean sea level. Points with no coverage are NaN.

    Parameters
    ----------
    dem_path : str or None, optional
        Where the elevation data lives: a single DTED file or a tile
        directory, depending on the subclass.

    Coordinate Conventions
    ----------------------
    - **Latitude:** decimal degrees North, south negative.
    - **Longitude:** decimal degrees East, west negative.
    """

    def __init__(self, dem_path: Optional[str] = None) -> None:
        self.dem_path = dem_path

    @abstractmethod
    def _get_elevation_array(
        self, lats: np.ndarray, lons: np.ndarray
    ) -> np.ndarray:
        """Heights for flat coordinate arrays.

        Parameters
        ----------
        lats, lons : np.ndarray
            Shape ``(N,)``, dtype float64. May contain NaN.

        Returns
        -------
        np.ndarray
            float64 heights of shape ``(N,)``, NaN where uncovered.
        """
        ...

    def get_elevation(
        self,
        lat_or_points: Union[float, list, np.ndarray],
        lon: Optional[Union[float, list, np.ndarray]] = None,
    ) -> Union[float, np.ndarray]:
        """Terrain height at one or many points.

        Three call forms are accepted:

        - ``get_elevation(lat, lon)`` with scalars gives a ``float``.
        - ``get_elevation(lats, lons)`` with equally shaped arrays or
          lists gives an array of that shape.
        - ``get_elevation(points)`` with a ``(2, N)`` array of stacked
          latitudes and longitudes gives an ``(N,)`` array.

        Parameters
        ----------
        lat_or_points : float, list, or np.ndarray
            Latitude(s), or the stacked ``(2, N)`` points when ``lon`` is
            omitted.
        lon : float, list, or np.ndarray, optional
            Longitude(s).

        Returns
        -------
        float or np.ndarray
            Heights in metres; NaN outside coverage.

        Raises
        ------
        ValidationError
            If stacked points are not ``(2, N)``, or latitudes and
            longitudes differ in shape.
        """
        if lon is None:
            pts = np.asarray(lat_or_points, dtype=np.float64)
            if pts.ndim != 2 or pts.shape[0] != 2:
                raise ValidationError(
                    f"Expected (2, N) array, got shape {pts.shape}"
                )
            return self._get_elevation_array(pts[0], pts[1])

        lats_arr = _to_array(lat_or_points)
        lons_arr = _to_array(lon)
        if lats_arr.shape != lons_arr.shape:
            raise ValidationError(
                f"Latitude shape {lats_arr.shape} does not match "
                f"longitude shape {lons_arr.shape}"
            )
        heights = self._get_elevation_array(
            lats_arr.ravel(), lons_arr.ravel()
        ).reshape(lats_arr.shape)
        if _is_scalar(lat_or_points) and _is_scalar(lon):
            return float(heights[0])
        return heights
