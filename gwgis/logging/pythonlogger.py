import logging
import sys

from gwgis.logging.ilogger import ILogger
from gwgis.logging.loglevel import LogLevel

# Skip the holder and this wrapper so filename and lineno refer to the calling
# gwgis module.
_STACKLEVEL = 3


class PythonLogger(ILogger):
    """
    Logs messages to the ``gwgis`` logger of the standard library logging
    framework.
    """

    def __init__(
        self,
        log_level: LogLevel,
        add_default_stream_handler: bool,
        add_default_file_handler: bool,
    ) -> None:
        from gwgis.logging.config import LOG_FILENAME

        self.logger = logging.getLogger("gwgis")
        self.logger.setLevel(log_level.value)

        handlers = []
        if add_default_stream_handler:
            handlers.append(logging.StreamHandler(stream=sys.stdout))
        if add_default_file_handler:
            handlers.append(logging.FileHandler(LOG_FILENAME))
        formatter = logging.Formatter(
            "%(name)s: %(asctime)s | %(levelname)s | %(filename)s:%(lineno)s >>> %(message)s"
        )
        for handler in handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def debug(self, message: str, additional_depth: int = 0) -> None:
        self.logger.debug(message, stacklevel=_STACKLEVEL + additional_depth)

    def info(self, message: str, additional_depth: int = 0) -> None:
        self.logger.info(message, stacklevel=_STACKLEVEL + additional_depth)

    def warning(self, message: str, additional_depth: int = 0) -> None:
        self.logger.warning(message, stacklevel=_STACKLEVEL + additional_depth)
