"""
Functions that make use of `rasterio
<https://rasterio.readthedocs.io/en/stable/>`_ for input and output of single
band GDAL rasters.
"""

import pathlib

import numpy as np
import rasterio
import rasterio.crs
import xarray as xr

from gwgis import util
from gwgis.errors import InvalidArgumentError, UnsupportedFeatureError
from gwgis.logging import logger

# tiff and jpeg keys have been added manually.
EXTENSION_GDAL_DRIVER_CODE_MAP = {
    "asc": "AAIGrid",
    "bil": "EHdr",
    "bmp": "BMP",
    "ers": "ERS",
    "gpkg": "GPKG",
    "grd": "NWT_GRD",
    "img": "HFA",
    "map": "PCRaster",
    "nc": "netCDF",
    "png": "PNG",
    "rst": "RST",
    "tif": "GTiff",
    "tiff": "GTiff",
    "vrt": "VRT",
    "xyz": "XYZ",
}


def _get_driver(path):
    ext = path.suffix.lower()[1:]  # skip the period
    try:
        return EXTENSION_GDAL_DRIVER_CODE_MAP[ext]
    except KeyError:
        raise InvalidArgumentError(
            f'Unknown extension "{ext}", available extensions: '
            f'{", ".join(EXTENSION_GDAL_DRIVER_CODE_MAP.keys())}'
        )


def _limitations(riods, path):
    if riods.count != 1:
        raise UnsupportedFeatureError(
            f"Cannot open multi-band grid: {path}. Try rioxarray.open_rasterio() instead."
        )
    if not riods.transform.is_rectilinear:
        raise UnsupportedFeatureError(
            f"Cannot open non-rectilinear grid: {path}. Try rioxarray.open_rasterio() instead."
        )


def open(path):
    """
    Open a single band GDAL supported raster file as an xarray.DataArray.

    Parameters
    ----------
    path : str or Path

    Returns
    -------
    xarray.DataArray
        With dimensions ``("y", "x")``, cell sizes as ``dx`` and ``dy``
        coordinates, and the coordinate reference system in
        ``attrs["crs"]``. For floating point rasters nodata values are
        replaced by NaN.

    Examples
    --------
    Open a model grid to use as template:

    >>> like = gwgis.rasterio.open("active.tif")
    """
    path = pathlib.Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")

    with rasterio.open(path, "r") as riods:
        _limitations(riods, path)
        a = riods.read(1)
        nodata = riods.nodata
        crs = riods.crs
        xmin, ymin, xmax, ymax = riods.bounds
        dx = riods.transform[0]
        dy = riods.transform[4]

    if np.issubdtype(a.dtype, np.floating) and nodata is not None:
        a = np.where(a == nodata, np.nan, a)

    coords = util.spatial._xycoords((xmin, xmax, ymin, ymax), (dx, dy))
    logger.debug(f"Read raster {path} with shape {a.shape}")
    return xr.DataArray(a, coords, ("y", "x"), attrs={"crs": crs})


def write(path, da, driver=None, nodata=None, dtype=None):
    """
    Write ``xarray.DataArray`` to GDAL supported geospatial rasters using
    ``rasterio``.

    Parameters
    ----------
    path: str or Path
        path to the output raster
    da: xarray DataArray
        The DataArray to be written. Should have only x and y dimensions.
    driver: str; optional
        Which GDAL format driver to use. The complete list is at
        https://gdal.org/drivers/raster/index.html.
        By default tries to guess from the file extension.
    nodata: float, optional
        Nodata value to use. Should be convertible to the DataArray and GDAL
        dtype. By default the raster has no nodata value.
    dtype: numpy dtype, optional
        Data type on disk. Defaults to the dtype of ``da``.

    Examples
    --------
    Save a binary grid as a single byte per cell:

    >>> gwgis.rasterio.write("active.img", da, dtype=np.uint8)
    """
    path = pathlib.Path(path)
    if driver is None:
        driver = _get_driver(path)

    extradims = list(filter(lambda dim: dim not in ("y", "x"), da.dims))
    if extradims:
        raise InvalidArgumentError(
            f"Only x and y dimensions supported, found {da.dims}"
        )
    if dtype is None:
        dtype = da.dtype
    crs = da.attrs.get("crs")
    if crs is not None:
        # pyproj CRS objects, as used by geopandas, go through WKT
        crs = rasterio.crs.CRS.from_user_input(
            crs.to_wkt() if hasattr(crs, "to_wkt") else crs
        )

    profile = {
        "transform": util.transform(da),
        "driver": driver,
        "height": da.y.size,
        "width": da.x.size,
        "count": 1,
        "dtype": np.dtype(dtype).name,
        "nodata": nodata,
        "crs": crs,
    }
    if nodata is not None and np.issubdtype(da.dtype, np.floating):
        da = da.fillna(nodata)
    values = da.values.astype(dtype)

    with rasterio.Env():
        with rasterio.open(path, "w", **profile) as ds:
            ds.write(values, 1)
    logger.info(f"Wrote {profile['dtype']} raster to {path} using {driver} driver")
