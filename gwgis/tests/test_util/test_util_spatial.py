import affine
import numpy as np
import pytest
import xarray as xr

import gwgis


def test_transform():
    # implicit dx dy
    data = np.ones((2, 3))
    coords = {"x": [0.5, 1.5, 2.5], "y": [1.5, 0.5]}
    dims = ("y", "x")
    da = xr.DataArray(data, coords, dims)
    actual = gwgis.util.spatial.transform(da)
    expected = affine.Affine(1.0, 0.0, 0.0, 0.0, -1.0, 2.0)
    assert actual == expected

    # explicit dx dy
    coords = {"x": [0.5, 1.5, 2.5], "y": [1.5, 0.5], "dx": 1.0, "dy": -1.0}
    da = xr.DataArray(data, coords, dims)
    actual = gwgis.util.spatial.transform(da)
    assert actual == expected

    # non-equidistant
    coords = {"x": [0.5, 1.5, 3.5], "y": [1.5, 0.5]}
    da = xr.DataArray(data, coords, dims)
    with pytest.raises(ValueError, match="equidistant"):
        gwgis.util.spatial.transform(da)

    # increasing y
    coords = {"x": [0.5, 1.5, 2.5], "y": [0.5, 1.5]}
    da = xr.DataArray(data, coords, dims)
    with pytest.raises(ValueError, match="dy must be negative"):
        gwgis.util.spatial.transform(da)


def test_coord_reference_size_one():
    da = xr.DataArray([1.0], {"x": [0.5]}, ("x",))
    with pytest.raises(ValueError, match="cellsize must be provided"):
        gwgis.util.coord_reference(da["x"])


def test_empty_2d():
    da = gwgis.util.empty_2d(1.0, 0.0, 4.0, 1.0, 0.0, 3.0)
    assert da.dims == ("y", "x")
    assert da.shape == (3, 4)
    assert da.isnull().all()
    assert np.allclose(da["x"], [0.5, 1.5, 2.5, 3.5])
    assert np.allclose(da["y"], [2.5, 1.5, 0.5])
    assert gwgis.util.spatial_reference(da) == (1.0, 0.0, 4.0, -1.0, 0.0, 3.0)


def test_empty_2d_fractional_cellsize():
    # np.arange with a float step would produce a fourth column here.
    da = gwgis.util.empty_2d(0.1, 0.0, 0.3, 0.1, 0.0, 0.2)
    assert da.shape == (2, 3)


def test_empty_2d_snaps_extent():
    da = gwgis.util.empty_2d(3.0, 0.0, 10.0, 3.0, 0.0, 10.0)
    _, xmin, xmax, _, ymin, ymax = gwgis.util.spatial_reference(da)
    assert (xmin, xmax, ymin, ymax) == (0.0, 9.0, 1.0, 10.0)
