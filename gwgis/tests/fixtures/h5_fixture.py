import h5py
import numpy as np
import pytest
import rasterio.crs

import gwgis


@pytest.fixture(scope="function")
def like_10x10():
    like = gwgis.util.empty_2d(1.0, 0.0, 10.0, 1.0, 0.0, 10.0)
    like.attrs["crs"] = rasterio.crs.CRS.from_epsg(32650)
    return like


@pytest.fixture(scope="function")
def head_array():
    # 100 cells, 5 time steps, as (cell, time)
    return np.arange(500.0).reshape(100, 5)


@pytest.fixture(scope="function")
def head_h5(tmp_path, head_array):
    path = tmp_path / "Head.h5"
    # stored as (time, cell), like GMS does
    with h5py.File(path, "w") as f:
        f.create_dataset("Datasets/Head/Values", data=head_array.T)
    return path
