"""
Logging support for gwgis.

By default nothing is logged. Pick a logging framework at runtime:

>>> import gwgis
>>> from gwgis.logging import LoggerType, LogLevel
>>>
>>> gwgis.logging.configure(LoggerType.PYTHON, LogLevel.INFO)

Or hand the messages to loguru and write them to ``gwgis.log`` as well:

>>> gwgis.logging.configure(
>>>     LoggerType.LOGURU, LogLevel.DEBUG, add_default_file_handler=True
>>> )

To integrate into an existing python logging setup, disable the default
handlers and configure the ``gwgis`` logger yourself:

>>> import logging
>>> gwgis.logging.configure(
>>>     LoggerType.PYTHON, LogLevel.INFO, add_default_stream_handler=False
>>> )
>>> logging.getLogger("gwgis").addHandler(logging.FileHandler("workflow.log"))
"""

from gwgis.logging._loggerholder import _LoggerHolder
from gwgis.logging.config import LoggerType, configure
from gwgis.logging.ilogger import ILogger  # noqa: I001
from gwgis.logging.loglevel import LogLevel

logger = _LoggerHolder()
