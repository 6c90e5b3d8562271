from gwgis.logging.ilogger import ILogger


class NullLogger(ILogger):
    """
    Discards everything; the default until :func:`gwgis.logging.configure` is
    called.
    """

    def debug(self, message: str, additional_depth: int = 0) -> None:
        pass

    info = debug
    warning = debug
