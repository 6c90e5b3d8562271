# exports
from gwgis import (
    errors,
    formats,
    logging,
    prepare,
    util,
    visualize,
)
from gwgis import rasterio
from gwgis.formats.h5 import read_head
from gwgis.formats.hob import merge_head_observations
from gwgis.prepare import create_binary_grid

__version__ = "0.1.0"
