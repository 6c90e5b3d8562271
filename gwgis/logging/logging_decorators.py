from functools import wraps
from time import time
from typing import Callable, ParamSpec, TypeVar

from gwgis.logging.loglevel import LogLevel

T = TypeVar("T")
P = ParamSpec("P")


def standard_log_decorator(
    start_level: LogLevel = LogLevel.INFO, end_level: LogLevel = LogLevel.DEBUG
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator to log messages announcing the beginning and end of the
    decorated function, including its duration.
    """

    def decorator(fun: Callable[P, T]) -> Callable[P, T]:
        @wraps(fun)
        def wrapper(*args: P.args, **kwargs: P.kwargs):
            from gwgis.logging import logger

            function_name = f"{fun.__module__}.{fun.__name__}"
            start_time = time()
            logger.log(
                loglevel=start_level,
                message=f"Beginning execution of {function_name}...",
                additional_depth=2,
            )

            return_value = fun(*args, **kwargs)
            end_time = time()

            logger.log(
                loglevel=end_level,
                message=f"Finished execution of {function_name} in {end_time - start_time} seconds...",
                additional_depth=2,
            )
            return return_value

        return wrapper

    return decorator
