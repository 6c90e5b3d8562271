"""
Create a binary active/inactive model grid from a boundary polygon.
"""

import pathlib

import geopandas as gpd
import numpy as np

import gwgis
from gwgis.errors import InvalidArgumentError
from gwgis.logging import logger
from gwgis.logging.logging_decorators import standard_log_decorator
from gwgis.prepare.spatial import rasterize

ACTIVE = 1
INACTIVE = 0


def _read_boundary(boundary):
    if isinstance(boundary, (str, pathlib.Path)):
        logger.info(f"Reading boundary from {boundary}")
        boundary = gpd.read_file(boundary)
    elif isinstance(boundary, gpd.GeoSeries):
        boundary = gpd.GeoDataFrame(geometry=boundary)
    elif not isinstance(boundary, gpd.GeoDataFrame):
        raise InvalidArgumentError(
            "boundary must be a GeoDataFrame, GeoSeries, or path to a vector "
            f"file, received: {type(boundary).__name__}"
        )
    if boundary.empty or boundary.geometry.is_empty.all():
        raise InvalidArgumentError("boundary does not contain any geometry")
    return boundary


def _cellsizes(resolution):
    try:
        dx, dy = np.broadcast_to(np.asarray(resolution, dtype=np.float64), (2,))
    except (TypeError, ValueError):
        raise InvalidArgumentError(
            f"resolution must be a number or (dx, dy), received: {resolution}"
        )
    if not (np.isfinite(dx) and np.isfinite(dy)) or dx <= 0.0 or dy <= 0.0:
        raise InvalidArgumentError(
            f"resolution must be positive, received: {resolution}"
        )
    return float(dx), float(dy)


def _sizing(resolution, nrow, ncol, xmin, xmax, ymin, ymax):
    """Returns the cell sizes (dx, dy) for either sizing mode."""
    rowcol = (nrow is not None, ncol is not None)
    if rowcol == (True, False) or rowcol == (False, True):
        raise InvalidArgumentError(
            "If specifying nrow/ncol, both must be specified"
        )
    if all(rowcol):
        if resolution is not None:
            raise InvalidArgumentError(
                "Specify either resolution or nrow and ncol, not both"
            )
        if int(nrow) != nrow or int(ncol) != ncol or nrow < 1 or ncol < 1:
            raise InvalidArgumentError(
                f"nrow and ncol must be positive integers, received: {nrow}, {ncol}"
            )
        return (xmax - xmin) / int(ncol), (ymax - ymin) / int(nrow)
    if resolution is None:
        raise InvalidArgumentError("Specify either resolution or nrow and ncol")
    return _cellsizes(resolution)


def _extent(boundary, extent):
    if extent is None:
        xmin, ymin, xmax, ymax = (float(v) for v in boundary.total_bounds)
    else:
        try:
            xmin, ymin, xmax, ymax = (float(v) for v in extent)
        except (TypeError, ValueError):
            raise InvalidArgumentError(
                f"extent must be (xmin, ymin, xmax, ymax), received: {extent}"
            )
    if not (xmin < xmax and ymin < ymax):
        raise InvalidArgumentError(
            f"extent must satisfy xmin < xmax and ymin < ymax, received: "
            f"{(xmin, ymin, xmax, ymax)}"
        )
    return xmin, ymin, xmax, ymax


@standard_log_decorator()
def create_binary_grid(
    boundary,
    resolution=None,
    nrow=None,
    ncol=None,
    extent=None,
    plot=False,
    path=None,
    all_touched=False,
):
    """
    Create a binary grid from a boundary polygon: cells inside the boundary
    are active (1), cells outside are inactive (0).

    The cell size is set by either ``resolution`` or ``nrow`` and ``ncol``.
    The grid covers the bounding box of ``boundary``, unless ``extent`` is
    given. The coordinate reference system is copied from ``boundary``.

    Parameters
    ----------
    boundary : geopandas.GeoDataFrame, geopandas.GeoSeries, str or Path
        Polygon(s) defining the active area, or a path to any vector file
        supported by ``geopandas.read_file``.
    resolution : float or tuple of two floats, optional
        Cell size, in the units of the coordinate reference system. A single
        value gives square cells, a tuple gives ``(dx, dy)``. When the extent
        is not a whole number of cells, xmin and ymax are kept and xmax and
        ymin move to the nearest cell edge.
    nrow : int, optional
        Number of rows. Must be given together with ``ncol``, and cannot be
        combined with ``resolution``.
    ncol : int, optional
        Number of columns.
    extent : tuple of four floats, optional
        ``(xmin, ymin, xmax, ymax)`` of the grid, overriding the bounding box
        of ``boundary``. The boundary is still used to assign active cells.
    plot : bool, optional
        Plot the grid with the boundary on top. Default is False.
    path : str or Path, optional
        If given, write the grid to this file as unsigned 8-bit integers. The
        file format follows from the extension, e.g. ".tif" or ".img".
    all_touched : bool, optional
        If True, every cell touched by the boundary is active. By default only
        cells whose centre lies within the boundary are active.

    Returns
    -------
    active : xr.DataArray of uint8
        With dimensions ``("y", "x")`` and the coordinate reference system in
        ``attrs["crs"]``.

    Examples
    --------
    Create a grid with 1000 m cells and write it to disk:

    >>> boundary = geopandas.read_file("boundary.shp")
    >>> active = gwgis.prepare.create_binary_grid(
    >>>     boundary, resolution=1000.0, path="active.img"
    >>> )

    Specify the number of rows and columns instead:

    >>> active = gwgis.prepare.create_binary_grid(boundary, nrow=286, ncol=496)

    Use a different extent than the boundary's:

    >>> active = gwgis.prepare.create_binary_grid(
    >>>     boundary, resolution=1000.0, extent=(-245e3, -153e3, 273e3, 154e3)
    >>> )
    """
    boundary = _read_boundary(boundary)
    xmin, ymin, xmax, ymax = _extent(boundary, extent)
    dx, dy = _sizing(resolution, nrow, ncol, xmin, xmax, ymin, ymax)

    like = gwgis.util.empty_2d(dx, xmin, xmax, dy, ymin, ymax)
    like.attrs["crs"] = boundary.crs
    nrow, ncol = like.shape
    logger.debug(f"Allocated grid of {nrow} rows and {ncol} columns")

    active = rasterize(
        boundary,
        like=like,
        fill=INACTIVE,
        default_value=ACTIVE,
        all_touched=all_touched,
        dtype=np.uint8,
    )
    active.name = "active"
    logger.debug(
        f"{int(active.sum())} of {active.size} cells are within the boundary"
    )

    if plot:
        gwgis.visualize.plot_grid(active, boundary)

    if path:
        gwgis.rasterio.write(path, active, dtype=np.uint8)

    return active
