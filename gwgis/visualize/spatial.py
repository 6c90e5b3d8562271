import matplotlib.pyplot as plt


def plot_grid(
    raster,
    boundary=None,
    ax=None,
    kwargs_raster=None,
    kwargs_boundary=None,
    figsize=None,
):
    """
    Plot a 2D grid, optionally with the outline of a boundary on top.

    Parameters
    ----------
    raster : xr.DataArray
        2D grid to plot.
    boundary : geopandas.GeoDataFrame or GeoSeries, optional
        Polygons whose outline is drawn over the grid.
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. A new figure is created when not given.
    kwargs_raster : dict of keyword arguments, optional
        These arguments are forwarded to ``raster.plot.imshow()``
    kwargs_boundary : dict of keyword arguments, optional
        These arguments are forwarded to ``boundary.boundary.plot()``
    figsize : tuple of two floats or integers, optional
        This is used in plt.subplots(figsize)

    Returns
    -------
    fig : matplotlib.figure
    ax : matplotlib.ax

    Examples
    --------
    >>> fig, ax = gwgis.visualize.plot_grid(active, boundary)
    """
    if raster.ndim != 2:
        raise ValueError(f"Can only plot a 2D grid, got dimensions {raster.dims}")

    if kwargs_raster is None:
        kwargs_raster = {}
    if kwargs_boundary is None:
        kwargs_boundary = {"color": "black"}

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    raster.plot.imshow(ax=ax, **kwargs_raster)
    if boundary is not None:
        boundary.boundary.plot(ax=ax, **kwargs_boundary)
    ax.set_aspect("equal")
    return fig, ax
