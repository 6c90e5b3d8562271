from enum import Enum


class LogLevel(Enum):
    """
    Thresholds for the log output, matching the numeric levels of the standard
    library.
    """

    DEBUG = 10
    """
    Granular information, e.g. computed grid sizes and row counts.
    """
    INFO = 20
    """
    Start of an operation, files read and written.
    """
    WARNING = 30
    """
    Input that was only partially used, e.g. surplus cells in a head file.
    """
    ERROR = 40
    """
    Silences gwgis: failures are raised as exceptions, not logged.
    """

    @classmethod
    def emitted(cls):
        return (cls.DEBUG, cls.INFO, cls.WARNING)
