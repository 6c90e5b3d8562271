"""
Exceptions raised by gwgis.

Every exception derives from :class:`GwgisError` and from the closest builtin
exception, so callers can catch either ``gwgis.errors.FormatError`` or a plain
``ValueError``.
"""


class GwgisError(Exception):
    pass


class InvalidArgumentError(GwgisError, ValueError):
    """Malformed call parameters, e.g. only one of ``nrow``/``ncol`` given."""


class UnsupportedFeatureError(GwgisError, NotImplementedError):
    """A valid request for functionality that is not implemented."""


class FormatError(GwgisError, ValueError):
    """An input file does not match the expected schema."""


class DatasetNotFoundError(GwgisError, OSError):
    """A dataset is absent from an otherwise readable file."""


class ShapeMismatchError(GwgisError, ValueError):
    """Array dimensions are incompatible with the template grid."""
