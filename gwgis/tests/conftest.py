import matplotlib
import pytest

from .fixtures.boundary_fixture import (
    boundary_shapefile,
    large_boundary,
    square_boundary,
    triangle_boundary,
)
from .fixtures.h5_fixture import head_array, head_h5, like_10x10
from .fixtures.hob_fixture import hob_file, os_file

matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def reset_logger():
    import gwgis
    from gwgis.logging.nulllogger import NullLogger

    yield
    gwgis.logging.logger.instance = NullLogger()
