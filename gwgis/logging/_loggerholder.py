from gwgis.logging.ilogger import ILogger
from gwgis.logging.nulllogger import NullLogger


class _LoggerHolder(ILogger):
    """
    Wrapper that allows swapping the logger at runtime.

    Modules grab ``gwgis.logging.logger`` at import time, before the user had
    a chance to call :func:`gwgis.logging.configure`. The holder is what they
    get; ``configure`` replaces the instance inside it, and every call is
    forwarded to that instance.
    """

    def __init__(self) -> None:
        self.instance: ILogger = NullLogger()

    def debug(self, message: str, additional_depth: int = 0) -> None:
        self.instance.debug(message, additional_depth)

    def info(self, message: str, additional_depth: int = 0) -> None:
        self.instance.info(message, additional_depth)

    def warning(self, message: str, additional_depth: int = 0) -> None:
        self.instance.warning(message, additional_depth)
