import sys

from loguru import logger

from gwgis.logging.ilogger import ILogger
from gwgis.logging.loglevel import LogLevel

# Frames between the gwgis call site and loguru: the holder and this wrapper.
_DEPTH = 2


class LoguruLogger(ILogger):
    """
    Logs messages using the loguru logging framework.
    """

    def __init__(
        self,
        log_level: LogLevel,
        add_default_stream_handler: bool,
        add_default_file_handler: bool,
    ) -> None:
        from gwgis.logging.config import LOG_FILENAME

        # Remove default handler set by loguru
        logger.remove()

        if add_default_stream_handler:
            logger.add(sys.stdout, level=log_level.value)
        if add_default_file_handler:
            logger.add(LOG_FILENAME, level=log_level.value)

    def debug(self, message: str, additional_depth: int = 0) -> None:
        logger.opt(depth=_DEPTH + additional_depth).debug(message)

    def info(self, message: str, additional_depth: int = 0) -> None:
        logger.opt(depth=_DEPTH + additional_depth).info(message)

    def warning(self, message: str, additional_depth: int = 0) -> None:
        logger.opt(depth=_DEPTH + additional_depth).warning(message)
