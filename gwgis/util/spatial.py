"""
Utility functions for dealing with the spatial location of rasters:
:func:`gwgis.util.spatial.coord_reference`,
:func:`gwgis.util.spatial_reference` and :func:`gwgis.util.transform`. These
are used internally, but are not private since they may be useful to users as
well.
"""

import collections
from typing import Any, Dict, Tuple

import affine
import numpy as np
import xarray as xr


def _xycoords(bounds, cellsizes) -> Dict[str, Any]:
    """Based on bounds and cellsizes, construct coords with spatial information"""
    xmin, xmax, ymin, ymax = bounds
    dx, dy = cellsizes
    nrow = max(1, int(round((ymax - ymin) / abs(dy))))
    ncol = max(1, int(round((xmax - xmin) / abs(dx))))
    coords: collections.OrderedDict[str, Any] = collections.OrderedDict()
    # Midpoints from the number of cells, rather than np.arange with a float
    # step, which may produce one cell too many.
    coords["x"] = xmin + (np.arange(ncol) + 0.5) * dx
    coords["y"] = ymax + (np.arange(nrow) + 0.5) * dy
    coords["dx"] = np.array(float(dx))
    coords["dy"] = np.array(float(dy))
    return coords


def coord_reference(da_coord) -> Tuple[float, float, float]:
    """
    Extracts dx, xmin, xmax for a coordinate DataArray, where x is any coordinate.

    Parameters
    ----------
    da_coord : xarray.DataArray of a coordinate

    Returns
    --------------
    tuple
        (dx, xmin, xmax) for a coordinate x
    """
    x = da_coord.values

    dx_string = f"d{da_coord.name}"
    if dx_string in da_coord.coords:
        dx = float(da_coord.coords[dx_string])
    elif x.size == 1:
        raise ValueError(
            f"DataArray has size 1 along {da_coord.name}, so cellsize must be provided"
            f" as a coordinate named d{da_coord.name}."
        )
    else:
        dxs = np.diff(x.astype(np.float64))
        dx = dxs[0]
        atolx = abs(1.0e-4 * dx)
        if not np.allclose(dxs, dx, atolx):
            raise ValueError(
                f"DataArray has to be equidistant along {da_coord.name}, or cellsizes"
                f" must be provided as a coordinate named d{da_coord.name}."
            )
        dx = float(dx)

    # as xarray uses midpoint coordinates
    xmin = float(x.min()) - 0.5 * abs(dx)
    xmax = float(x.max()) + 0.5 * abs(dx)
    return dx, xmin, xmax


def spatial_reference(
    a: xr.DataArray,
) -> Tuple[float, float, float, float, float, float]:
    """
    Extracts spatial reference from DataArray.

    Parameters
    ----------
    a : xarray.DataArray

    Returns
    --------------
    tuple
        (dx, xmin, xmax, dy, ymin, ymax)
    """
    dx, xmin, xmax = coord_reference(a["x"])
    dy, ymin, ymax = coord_reference(a["y"])
    return dx, xmin, xmax, dy, ymin, ymax


def transform(a: xr.DataArray) -> affine.Affine:
    """
    Extract the spatial reference information from the DataArray coordinates,
    into an affine.Affine object for writing to e.g. rasterio supported formats.

    Parameters
    ----------
    a : xarray.DataArray

    Returns
    -------
    affine.Affine
    """
    dx, xmin, _, dy, _, ymax = spatial_reference(a)
    if dx < 0.0:
        raise ValueError("dx must be positive")
    if dy > 0.0:
        raise ValueError("dy must be negative")
    return affine.Affine(dx, 0.0, xmin, 0.0, dy, ymax)


def empty_2d(
    dx: float,
    xmin: float,
    xmax: float,
    dy: float,
    ymin: float,
    ymax: float,
) -> xr.DataArray:
    """
    Create an empty 2D (x, y) DataArray.

    Note that xarray uses midpoint coordinates. ``xmin`` and ``ymax`` are kept
    as is; when the extent is not a whole number of cells, ``xmax`` and
    ``ymin`` move to the nearest cell edge.

    Parameters
    ----------
    dx: float
        cell size along x
    xmin: float
    xmax: float
    dy: float
        cell size along y
    ymin: float
    ymax: float

    Returns
    -------
    empty: xr.DataArray
        Filled with NaN.
    """
    bounds = (xmin, xmax, ymin, ymax)
    cellsizes = (np.abs(dx), -np.abs(dy))
    coords = _xycoords(bounds, cellsizes)
    nrow = coords["y"].size
    ncol = coords["x"].size
    return xr.DataArray(
        data=np.full((nrow, ncol), np.nan), coords=coords, dims=["y", "x"]
    )
