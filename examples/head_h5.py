"""
Yearly head grids
=================

GMS exports the simulated heads of all cells and time steps to a single HDF5
file. This example turns the heads of the first layer into a grid per year,
using a model grid as template.

Run from a directory with the model files::

    python head_h5.py Head.h5
"""

import sys

import rasterio.crs

import gwgis

# %%
# The model grid: 114 rows, 127 columns of 1000 m, in UTM zone 50.

like = gwgis.util.empty_2d(1000.0, 394_328.0, 521_328.0, 1000.0, 4_372_600.0, 4_486_600.0)
like.attrs["crs"] = rasterio.crs.CRS.from_epsg(32650)

head = gwgis.read_head(sys.argv[1], like, layer=1, start_year=1993)

# %%
# One panel per year.

head.plot.imshow(col="year", col_wrap=4)

# %%
# Write the first year to a GeoTIFF.

gwgis.rasterio.write("head_1993.tif", head.sel(year=1993))
