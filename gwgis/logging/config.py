from enum import Enum

import gwgis

from .loglevel import LogLevel
from .logurulogger import LoguruLogger
from .nulllogger import NullLogger
from .pythonlogger import PythonLogger

LOG_FILENAME = "gwgis.log"


class LoggerType(Enum):
    """
    The available logging frameworks.
    """

    PYTHON = PythonLogger.__name__
    """
    The standard library logging framework.
    """
    LOGURU = LoguruLogger.__name__
    """
    The loguru logging framework.
    """
    NULL = NullLogger.__name__
    """
    Discards all messages.
    """


def configure(
    logger_type: LoggerType,
    log_level: LogLevel = LogLevel.WARNING,
    add_default_stream_handler: bool = True,
    add_default_file_handler: bool = False,
) -> None:
    """
    Select the logging framework and assign it a log level.

    Parameters
    ----------
    logger_type : LoggerType
        The logging framework to be used.
    log_level : LogLevel
        The log level to be set.
    add_default_stream_handler : bool
        Write log messages to stdout. True by default.
    add_default_file_handler : bool
        Write log messages to ``gwgis.log`` in the working directory. False by
        default.
    """
    match logger_type:
        case LoggerType.PYTHON:
            gwgis.logging.logger.instance = PythonLogger(
                log_level, add_default_stream_handler, add_default_file_handler
            )
        case LoggerType.LOGURU:
            gwgis.logging.logger.instance = LoguruLogger(
                log_level, add_default_stream_handler, add_default_file_handler
            )
        case _:
            gwgis.logging.logger.instance = NullLogger()
