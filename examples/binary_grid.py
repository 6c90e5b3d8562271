"""
Binary model grid
=================

The active area of a groundwater model is often delineated by a polygon, e.g.
a catchment boundary. This example turns such a polygon into a grid of active
(1) and inactive (0) cells.
"""

# %%
# We'll start with the usual imports
import geopandas as gpd
import shapely.geometry as sg

import gwgis

# %%
# A simple catchment polygon, in a projected coordinate reference system with
# metres as unit.

catchment = sg.Polygon(
    [
        (-200_000.0, -100_000.0),
        (250_000.0, -120_000.0),
        (200_000.0, 140_000.0),
        (-230_000.0, 100_000.0),
    ]
)
boundary = gpd.GeoDataFrame(geometry=[catchment], crs="EPSG:5070")

# %%
# Cells of 1000 by 1000 m, covering the bounding box of the polygon. The
# ``plot`` flag draws the grid with the polygon on top.

active = gwgis.prepare.create_binary_grid(boundary, resolution=1000.0, plot=True)

# %%
# Instead of a resolution, the number of rows and columns can be given.

active_rowcol = gwgis.prepare.create_binary_grid(boundary, nrow=286, ncol=496)

# %%
# The grid may also cover a different extent than the polygon. The result is
# written to an ERDAS Imagine file with one byte per cell.

extent = (-245_000.0, -153_000.0, 273_000.0, 154_000.0)
active_extent = gwgis.prepare.create_binary_grid(
    boundary,
    resolution=1000.0,
    extent=extent,
    plot=True,
    path="surface_grid_1000m.img",
)
