# -*- coding: utf-8 -*-
"""
DTED Elevation Model - Terrain elevation lookup from a DTED tile directory.

Serves heights from a tree of one-degree DTED tiles laid out the way
NGA distributes them: one directory per longitude, one file per
latitude. Tiles are decoded with ``dtedkit.IO`` the first time a query
lands in them and kept in memory afterwards. Level 0, 1 and 2 files
(.dt0, .dt1, .dt2) are recognized; when several levels exist for the
same cell the finest one is used.

DTED directory structure::

    dted_root/
        e015/
            n42.dt2
            n43.dt2
        w074/
            s12.dt1
            s13.dt1

A tile named ``w074/s12`` covers latitudes -12..-11 and longitudes
-74..-73; it is looked up by ``(floor(lon), floor(lat))``. A point on a
whole-degree line with no tile above or east of it falls back to the
tile whose north or east edge it lies on.

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
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

# Third-party
import numpy as np

# dtedkit internal
from dtedkit.exceptions import ValidationError
from dtedkit.geolocation.elevation.base import ElevationModel
from dtedkit.geolocation.elevation.grid import DTEDData
from dtedkit.IO.options import DecodeOptions

logger = logging.getLogger(__name__)

# Finest level first
_DTED_EXTENSIONS = ('.dt2', '.dt1', '.dt0')

_HEMISPHERE_SIGN = {'n': 1, 's': -1, 'e': 1, 'w': -1}

TileKey = Tuple[int, int]


def _parse_dted_tile_key(filepath: Path) -> Optional[TileKey]:
    """Tile key ``(lon, lat)`` encoded in a tile path, or None.

    The latitude comes from the file stem (``n42``, ``s07``) and the
    longitude from the parent directory (``e015``, ``w120``). Anything
    else is not a tile.
    """
    lat_stem = filepath.stem.lower()
    lon_dir = filepath.parent.name.lower()

    if lat_stem[:1] not in ('n', 's') or lon_dir[:1] not in ('e', 'w'):
        return None
    if not lat_stem[1:].isdigit() or not lon_dir[1:].isdigit():
        return None

    lat = _HEMISPHERE_SIGN[lat_stem[0]] * int(lat_stem[1:])
    lon = _HEMISPHERE_SIGN[lon_dir[0]] * int(lon_dir[1:])
    return (lon, lat)


class DTEDElevation(ElevationModel):
    """Elevation model backed by a directory of DTED tiles.

    The directory is indexed once, at construction. Each query point is
    routed to the tile under ``(floor(lon), floor(lat))``, or to the tile
    whose north or east edge it lies on when that cell is empty, and
    answered by that tile's bilinear interpolation. Points no tile
    covers, and non-finite coordinates, give NaN.

    Parameters
    ----------
    dem_path : str or Path
        Root of the tile tree. Searched recursively.
    options : DecodeOptions, optional
        Decode settings used for every tile, e.g. a strict checksum
        policy.

    Raises
    ------
    FileNotFoundError
        If ``dem_path`` does not exist.
    ValidationError
        If ``dem_path`` is a file rather than a directory.

    Examples
    --------
    >>> from dtedkit.geolocation.elevation import DTEDElevation
    >>> elev = DTEDElevation('/data/dted')
    >>> elev.get_elevation(42.5, 15.25)
    312.75
    >>> elev.get_elevation(np.array([[42.1, 42.2], [15.1, 15.2]]))
    array([...])
    """

    def __init__(
        self,
        dem_path: Union[str, Path],
        options: Optional[DecodeOptions] = None,
    ) -> None:
        dem_path = Path(dem_path)
        if not dem_path.exists():
            raise FileNotFoundError(
                f"DTED directory does not exist: {dem_path}"
            )
        if not dem_path.is_dir():
            raise ValidationError(
                f"DTED dem_path must be a directory, got file: {dem_path}"
            )

        super().__init__(dem_path=str(dem_path))
        self._options = options
        self._tile_index: Dict[TileKey, Path] = self._scan_tiles(dem_path)
        self._tiles: Dict[TileKey, DTEDData] = {}

    @staticmethod
    def _scan_tiles(root: Path) -> Dict[TileKey, Path]:
        """Map each tile key under ``root`` to its finest-level file."""
        index: Dict[TileKey, Path] = {}
        # Coarser levels are visited last and never replace a finer one
        for ext in _DTED_EXTENSIONS:
            for filepath in sorted(root.rglob(f'*{ext}')):
                key = _parse_dted_tile_key(filepath)
                if key is not None:
                    index.setdefault(key, filepath)

        logger.debug("Indexed %d DTED tiles under %s", len(index), root)
        return index

    @property
    def tile_count(self) -> int:
        """Number of tiles found under ``dem_path``."""
        return len(self._tile_index)

    @property
    def coverage_bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """``(min_lon, min_lat, max_lon, max_lat)`` over all tiles.

        None when the directory holds no tiles. Cells inside the box may
        still be missing.
        """
        if not self._tile_index:
            return None
        lons, lats = zip(*self._tile_index)
        return (
            float(min(lons)),
            float(min(lats)),
            float(max(lons) + 1),
            float(max(lats) + 1),
        )

    def _indexed(
        self, lon_keys: np.ndarray, lat_keys: np.ndarray
    ) -> np.ndarray:
        """Boolean mask of which ``(lon, lat)`` keys have a tile."""
        return np.fromiter(
            ((int(a), int(b)) in self._tile_index
             for a, b in zip(lon_keys, lat_keys)),
            dtype=bool, count=len(lon_keys),
        )

    def _tile_keys(
        self, lats: np.ndarray, lons: np.ndarray
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Tile key per point, finite coordinates only.

        A point on a whole-degree line belongs to the cell above or to
        the east of it. When that cell has no tile, the point is the
        north or east edge of the neighbouring tile and is routed there.
        """
        lon_keys = np.floor(lons).astype(np.int64)
        lat_keys = np.floor(lats).astype(np.int64)
        lon_edge = lons == lon_keys
        lat_edge = lats == lat_keys

        missing = ~self._indexed(lon_keys, lat_keys)
        for d_lon, d_lat in ((0, 1), (1, 0), (1, 1)):
            step = missing.copy()
            if d_lon:
                step &= lon_edge
            if d_lat:
                step &= lat_edge
            if not np.any(step):
                continue
            cand_lon = lon_keys[step] - d_lon
            cand_lat = lat_keys[step] - d_lat
            found = self._indexed(cand_lon, cand_lat)
            idx = np.flatnonzero(step)[found]
            lon_keys[idx] = cand_lon[found]
            lat_keys[idx] = cand_lat[found]
            missing[idx] = False
        return lon_keys, lat_keys

    def get_tile(self, lat: float, lon: float) -> Optional[DTEDData]:
        """Decoded tile covering ``(lat, lon)``, or None.

        A point on a whole-degree line resolves to the tile above or to
        the east when one exists, else to the tile whose north or east
        edge it is. Decode errors propagate.
        """
        lats = np.array([lat], dtype=np.float64)
        lons = np.array([lon], dtype=np.float64)
        if not (np.isfinite(lats[0]) and np.isfinite(lons[0])):
            return None
        lon_keys, lat_keys = self._tile_keys(lats, lons)
        return self._load_tile((int(lon_keys[0]), int(lat_keys[0])))

    def _load_tile(self, key: TileKey) -> Optional[DTEDData]:
        if key in self._tiles:
            return self._tiles[key]
        path = self._tile_index.get(key)
        if path is None:
            return None
        logger.debug("Decoding DTED tile %s", path)
        tile = DTEDData.read(path, self._options)
        self._tiles[key] = tile
        return tile

    def _get_elevation_array(
        self, lats: np.ndarray, lons: np.ndarray
    ) -> np.ndarray:
        heights = np.full(lats.shape, np.nan, dtype=np.float64)

        finite = np.flatnonzero(np.isfinite(lats) & np.isfinite(lons))
        if finite.size == 0:
            return heights

        keys = np.column_stack(self._tile_keys(lats[finite], lons[finite]))
        cells, owner = np.unique(keys, axis=0, return_inverse=True)
        owner = owner.ravel()

        for cell_idx, (lon_key, lat_key) in enumerate(cells):
            tile = self._load_tile((int(lon_key), int(lat_key)))
            if tile is None:
                continue
            points = finite[owner == cell_idx]
            heights[points] = tile.get_elevation_array(
                lats[points], lons[points]
            )

        return heights
