"""
Functions to prepare model input from GIS data.
"""

from gwgis.prepare.binary_grid import create_binary_grid
from gwgis.prepare.spatial import rasterize
