"""
Functions for reading simulated heads from HDF5 files, as exported by GMS, to
``xarray.DataArray``.

GMS stores the heads as a single 2D dataset of shape (time, cell): each row
holds the heads of all cells of one time step, in row-major order of the model
grid. After reading, the dataset is handled as its transpose, (cell, time).
"""

import pathlib

import h5py
import numpy as np
import xarray as xr

from gwgis.errors import (
    DatasetNotFoundError,
    ShapeMismatchError,
    UnsupportedFeatureError,
)
from gwgis.logging import logger
from gwgis.logging.logging_decorators import standard_log_decorator

DEFAULT_HEAD_DATASET = "Datasets/Head/Values"


def _read_dataset(path, dataset):
    with h5py.File(path, "r") as f:
        if dataset not in f:
            raise DatasetNotFoundError(f'{path}: no dataset "{dataset}"')
        node = f[dataset]
        if not isinstance(node, h5py.Dataset):
            raise DatasetNotFoundError(f'{path}: "{dataset}" is a group, not a dataset')
        # (time, cell) on disk -> (cell, time)
        return node[()].T


@standard_log_decorator()
def read_head(path, like, layer, start_year, dataset=DEFAULT_HEAD_DATASET):
    """
    Read simulated heads from an HDF5 file into a stack of yearly grids.

    Parameters
    ----------
    path : str or pathlib.Path
        Path to the HDF5 file.
    like : xr.DataArray
        Model grid with dimensions ``("y", "x")``. Its shape defines how the
        values of a time step are reshaped; its coordinates and ``crs``
        attribute are copied to the result.
    layer : int
        Model layer. Only layer 1 is supported.
    start_year : int
        Year of the first time step. Time step ``t`` is labelled
        ``start_year + t``.
    dataset : str, optional
        Path of the head dataset within the file. Defaults to
        ``"Datasets/Head/Values"``.

    Returns
    -------
    head : xr.DataArray
        With dimensions ``("year", "y", "x")``.

    Examples
    --------
    >>> like = gwgis.rasterio.open("active.tif")
    >>> head = gwgis.formats.h5.read_head("Head.h5", like, layer=1, start_year=1993)
    >>> head.sel(year=2000).plot.imshow()
    """
    if layer != 1:
        raise UnsupportedFeatureError(
            f"only layer 1 is currently processable, received layer {layer}"
        )
    if like.dims != ("y", "x"):
        raise ShapeMismatchError(
            f'like must have dimensions ("y", "x"), received: {like.dims}'
        )

    path = pathlib.Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")
    values = _read_dataset(path, dataset)

    if values.ndim != 2:
        raise ShapeMismatchError(
            f'{path}: dataset "{dataset}" must be 2D (time, cell), found shape '
            f"{values.shape}"
        )
    nrow, ncol = like.shape
    ncell = nrow * ncol
    ncell_source, ntime = values.shape
    if ncell > ncell_source:
        raise ShapeMismatchError(
            f"like has {ncell} cells ({nrow} rows, {ncol} columns), but "
            f'dataset "{dataset}" only holds {ncell_source} values per time step'
        )
    logger.debug(f"Read {ntime} time steps of {ncell_source} cells from {path}")
    if ncell < ncell_source:
        logger.warning(
            f"Using the first {ncell} of {ncell_source} values per time step of "
            f"{path}, the remainder does not fit on like"
        )

    # (cell, time) -> (time, row, column)
    data = np.ascontiguousarray(values[:ncell, :].T).reshape(ntime, nrow, ncol)
    year = int(start_year) + np.arange(ntime)

    coords = {"year": year}
    coords.update(like.coords)
    return xr.DataArray(
        data,
        coords=coords,
        dims=("year", "y", "x"),
        name="head",
        attrs={"crs": like.attrs.get("crs")},
    )
