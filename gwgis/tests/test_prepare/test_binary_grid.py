import matplotlib.pyplot as plt
import numpy as np
import pytest
import shapely.geometry as sg

import gwgis
from gwgis.errors import InvalidArgumentError


def extent_of(da):
    _, xmin, xmax, _, ymin, ymax = gwgis.util.spatial_reference(da)
    return xmin, ymin, xmax, ymax


def test_resolution_square(square_boundary):
    active = gwgis.prepare.create_binary_grid(square_boundary, resolution=1.0)
    assert active.dims == ("y", "x")
    assert active.shape == (10, 10)
    assert active.dtype == np.uint8
    assert (active == 1).all()
    assert extent_of(active) == (0.0, 0.0, 10.0, 10.0)
    assert float(active["dx"]) == 1.0
    assert float(active["dy"]) == -1.0


def test_crs_from_boundary(square_boundary):
    active = gwgis.prepare.create_binary_grid(square_boundary, resolution=1.0)
    assert active.attrs["crs"] == square_boundary.crs


def test_mask_cell_centres(triangle_boundary):
    active = gwgis.prepare.create_binary_grid(triangle_boundary, resolution=1.0)
    polygon = triangle_boundary.geometry.iloc[0]
    assert active.shape == (7, 10)
    assert set(np.unique(active.values)) <= {0, 1}
    for i, y in enumerate(active["y"].values):
        for j, x in enumerate(active["x"].values):
            expected = 1 if polygon.contains(sg.Point(x, y)) else 0
            assert active.values[i, j] == expected
    # Both values occur
    assert active.values.min() == 0
    assert active.values.max() == 1


def test_all_touched(triangle_boundary):
    centres = gwgis.prepare.create_binary_grid(triangle_boundary, resolution=1.0)
    touched = gwgis.prepare.create_binary_grid(
        triangle_boundary, resolution=1.0, all_touched=True
    )
    assert (touched >= centres).all()
    assert touched.sum() > centres.sum()


def test_resolution_tuple(square_boundary):
    active = gwgis.prepare.create_binary_grid(square_boundary, resolution=(2.0, 1.0))
    assert active.shape == (10, 5)
    assert float(active["dx"]) == 2.0
    assert float(active["dy"]) == -1.0


def test_resolution_not_divisible(square_boundary):
    # xmin and ymax are kept; xmax and ymin are snapped to whole cells.
    active = gwgis.prepare.create_binary_grid(square_boundary, resolution=3.0)
    assert active.shape == (3, 3)
    assert extent_of(active) == (0.0, 1.0, 9.0, 10.0)


def test_nrow_ncol(square_boundary):
    active = gwgis.prepare.create_binary_grid(square_boundary, nrow=5, ncol=4)
    assert active.shape == (5, 4)
    assert float(active["dx"]) == pytest.approx(2.5)
    assert float(active["dy"]) == pytest.approx(-2.0)
    assert np.allclose(extent_of(active), (0.0, 0.0, 10.0, 10.0))
    assert (active == 1).all()


def test_extent_override(large_boundary):
    extent = (-245000.0, -153000.0, 273000.0, 154000.0)
    active = gwgis.prepare.create_binary_grid(
        large_boundary, resolution=1000.0, extent=extent
    )
    assert extent_of(active) == extent
    assert active.shape == (307, 518)
    assert float(active["dx"]) == 1000.0
    assert float(active["dy"]) == -1000.0
    # Corners lie outside the boundary
    assert active.values[0, 0] == 0
    assert active.values[-1, -1] == 0
    assert active.sel(x=0.0, y=0.0, method="nearest") == 1


def test_extent_from_boundary(large_boundary):
    active = gwgis.prepare.create_binary_grid(large_boundary, resolution=1000.0)
    assert extent_of(active) == tuple(large_boundary.total_bounds)


def test_geoseries_and_path(triangle_boundary, boundary_shapefile):
    expected = gwgis.prepare.create_binary_grid(triangle_boundary, resolution=1.0)
    from_series = gwgis.prepare.create_binary_grid(
        triangle_boundary.geometry, resolution=1.0
    )
    from_file = gwgis.prepare.create_binary_grid(boundary_shapefile, resolution=1.0)
    assert np.array_equal(from_series.values, expected.values)
    assert np.array_equal(from_file.values, expected.values)


def test_identical_calls(triangle_boundary):
    first = gwgis.prepare.create_binary_grid(triangle_boundary, resolution=0.5)
    second = gwgis.prepare.create_binary_grid(triangle_boundary, resolution=0.5)
    assert first.identical(second)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"nrow": 5},
        {"ncol": 5},
        {"resolution": 1.0, "nrow": 5},
        {},
        {"resolution": 1.0, "nrow": 5, "ncol": 5},
        {"resolution": 0.0},
        {"resolution": -1.0},
        {"resolution": (1.0, 2.0, 3.0)},
        {"nrow": 0, "ncol": 5},
        {"nrow": 2.5, "ncol": 5},
        {"resolution": 1.0, "extent": (10.0, 0.0, 0.0, 10.0)},
        {"resolution": 1.0, "extent": (0.0, 0.0, 10.0)},
    ],
)
def test_invalid_arguments(square_boundary, kwargs):
    with pytest.raises(InvalidArgumentError):
        gwgis.prepare.create_binary_grid(square_boundary, **kwargs)


def test_invalid_argument_is_value_error(square_boundary):
    with pytest.raises(ValueError, match="both must be specified"):
        gwgis.prepare.create_binary_grid(square_boundary, ncol=3)


def test_invalid_boundary():
    with pytest.raises(InvalidArgumentError):
        gwgis.prepare.create_binary_grid([(0.0, 0.0), (1.0, 1.0)], resolution=1.0)


@pytest.mark.parametrize("extension", [".tif", ".img"])
def test_write(triangle_boundary, tmp_path, extension):
    path = tmp_path / f"active{extension}"
    active = gwgis.prepare.create_binary_grid(
        triangle_boundary, resolution=1.0, path=path
    )
    assert path.exists()
    back = gwgis.rasterio.open(path)
    assert back.dtype == np.uint8
    assert np.array_equal(back.values, active.values)
    assert extent_of(back) == extent_of(active)
    assert back.attrs["crs"] is not None


def test_write_geotiff_crs(triangle_boundary, tmp_path):
    path = tmp_path / "active.tif"
    gwgis.prepare.create_binary_grid(triangle_boundary, resolution=1.0, path=path)
    back = gwgis.rasterio.open(path)
    assert back.attrs["crs"].to_epsg() == 28992


def test_write_empty_path(square_boundary, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    gwgis.prepare.create_binary_grid(square_boundary, resolution=1.0, path="")
    assert list(tmp_path.iterdir()) == []


def test_write_unknown_extension(square_boundary, tmp_path):
    with pytest.raises(InvalidArgumentError, match="Unknown extension"):
        gwgis.prepare.create_binary_grid(
            square_boundary, resolution=1.0, path=tmp_path / "active.unknown"
        )


def test_plot(triangle_boundary):
    plt.close("all")
    active = gwgis.prepare.create_binary_grid(
        triangle_boundary, resolution=1.0, plot=True
    )
    assert len(plt.get_fignums()) == 1
    ax = plt.gcf().axes[0]
    # raster and boundary outline
    assert len(ax.images) == 1
    assert len(ax.collections) >= 1
    assert active.shape == (7, 10)
    plt.close("all")
