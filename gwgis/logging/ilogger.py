from abc import abstractmethod

from gwgis.logging.loglevel import LogLevel


class ILogger:
    """
    Interface to be implemented by all logger wrappers.

    ``additional_depth`` corrects the reported filename and line number when
    the call passes through extra frames, e.g. a decorator.
    """

    @abstractmethod
    def debug(self, message: str, additional_depth: int = 0) -> None:
        raise NotImplementedError

    @abstractmethod
    def info(self, message: str, additional_depth: int = 0) -> None:
        raise NotImplementedError

    @abstractmethod
    def warning(self, message: str, additional_depth: int = 0) -> None:
        raise NotImplementedError

    def log(self, loglevel: LogLevel, message: str, additional_depth: int = 0) -> None:
        """
        Log a message at one of the levels gwgis emits: DEBUG, INFO or WARNING.
        """
        if loglevel not in LogLevel.emitted():
            raise ValueError(f"gwgis does not log at level {loglevel}")
        method = getattr(self, loglevel.name.lower())
        method(message, additional_depth)
