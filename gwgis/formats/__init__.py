"""
Readers for groundwater model output files.
"""

from gwgis.formats import h5, hob
