"""
Shorthand plots to check the products of gwgis. All ``xarray.DataArray`` and
``geopandas.GeoDataFrame`` objects have ``.plot()`` methods to plot them
directly.
"""

from gwgis.visualize.spatial import plot_grid
