"""
Miscellaneous Utilities.
"""

from gwgis.util.spatial import (
    coord_reference,
    empty_2d,
    spatial_reference,
    transform,
)
