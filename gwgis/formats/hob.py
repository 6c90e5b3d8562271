"""
Functions for reading MODFLOW head observations to ``pandas.DataFrame``.

Head observation metadata is read from the comment block at the top of a
``.hob`` file, the simulated equivalents and observed values from the ``._os``
file written by MODFLOW. :func:`gwgis.formats.hob.merge_head_observations`
combines both into a single table.

The comment block of the ``.hob`` file starts with a single header line,
followed by one line per observation with eight fields::

    # GMS head observation metadata
    # 1 1 1,001 412,345.5 4,401,234.0 365.0 obs_1
    # 1 1 1,002 413,000.0 4,402,000.0 365.0 obs_2

Of these, the last five are kept: well id, x, y, time, observation name.
"""

import io
import pathlib
import re

import pandas as pd

from gwgis.errors import FormatError
from gwgis.logging import logger
from gwgis.logging.logging_decorators import standard_log_decorator

# Whitespace separated fields of a metadata record, in order.
HOB_METADATA_FIELDS = [
    "marker",
    "unused_1",
    "unused_2",
    "well_id",
    "x",
    "y",
    "time",
    "obsname",
]
METADATA_COLUMNS = ["well_id", "x", "y", "time", "obsname"]
# Numeric fields, and whether they may contain thousands separators.
NUMERIC_FIELDS = {"x": True, "y": True, "time": False}
OBSERVATION_KEY = "observation_name"


def _check_field_count(body, path):
    nfield = len(HOB_METADATA_FIELDS)
    # lineno is 1-based, and the header line is skipped
    for lineno, line in enumerate(body, start=2):
        found = len(line.split())
        if found != nfield:
            raise FormatError(
                f"{path}, line {lineno}: expected {nfield} fields, found "
                f"{found}: {line.strip()!r}"
            )


def _to_float(df, column, thousands, path):
    text = df[column]
    if thousands:
        text = text.str.replace(",", "", regex=False)
    numbers = pd.to_numeric(text, errors="coerce")
    invalid = numbers.isna()
    if invalid.any():
        lineno = invalid.idxmax()
        raise FormatError(
            f"{path}, line {lineno}, field {column}: "
            f"{df.at[lineno, column]!r} is not a number"
        )
    return numbers.astype("float64")


def read_metadata(path) -> pd.DataFrame:
    """
    Read the observation metadata from the comment block of a ``.hob`` file.

    The number of observations is the number of lines starting with ``#``,
    minus one for the header line.

    Parameters
    ----------
    path : str or pathlib.Path

    Returns
    -------
    pandas.DataFrame
        With columns ``well_id`` (categorical), ``x``, ``y``, ``time``
        (floats), and ``obsname`` (str).
    """
    path = pathlib.Path(path)
    with open(path) as f:
        lines = f.readlines()

    ncomment = sum(line.lstrip().startswith("#") for line in lines)
    if ncomment == 0:
        raise FormatError(f"{path}: no comment lines marked with '#'")
    nrow = ncomment - 1
    body = lines[1 : 1 + nrow]
    _check_field_count(body, path)

    if body:
        df = pd.read_csv(
            io.StringIO("".join(body)),
            sep=r"\s+",
            header=None,
            names=HOB_METADATA_FIELDS,
            dtype=str,
        )
    else:
        df = pd.DataFrame(columns=HOB_METADATA_FIELDS, dtype=str)
    # label rows by line number for error messages
    df.index = pd.RangeIndex(2, 2 + len(df))

    for column, thousands in NUMERIC_FIELDS.items():
        df[column] = _to_float(df, column, thousands, path)
    df["well_id"] = df["well_id"].str.replace(",", "", regex=False)
    df = df[METADATA_COLUMNS].reset_index(drop=True)
    df["well_id"] = df["well_id"].astype("category")
    logger.debug(f"Read {len(df)} observation metadata records from {path}")
    return df


def _normalize_colname(name: str) -> str:
    return re.sub(r"\W+", "_", str(name).strip()).strip("_").lower()


def read_values(path) -> pd.DataFrame:
    """
    Read the simulated equivalents and observed values from a ``._os`` file.

    Column names are normalized: lower case, and any run of non-word
    characters is replaced by an underscore, so ``"OBSERVATION NAME"`` becomes
    ``observation_name``.

    Parameters
    ----------
    path : str or pathlib.Path

    Returns
    -------
    pandas.DataFrame
        The observation name as str, all other columns as floats.
    """
    path = pathlib.Path(path)
    try:
        df = pd.read_csv(path, sep=r"\s+", dtype=str)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise FormatError(f"{path}: {e}") from e

    df.columns = [_normalize_colname(c) for c in df.columns]
    if OBSERVATION_KEY not in df.columns:
        raise FormatError(
            f'{path}: missing column "OBSERVATION NAME", found: '
            f'{", ".join(df.columns)}'
        )
    for column in df.columns:
        if column == OBSERVATION_KEY:
            continue
        try:
            df[column] = pd.to_numeric(df[column], errors="raise")
        except (TypeError, ValueError) as e:
            raise FormatError(f"{path}, column {column}: {e}") from e

    logger.debug(f"Read {len(df)} observation values from {path}")
    return df


@standard_log_decorator()
def merge_head_observations(metadata_path, values_path, sort=True) -> pd.DataFrame:
    """
    Combine head observation metadata from a ``.hob`` file with the simulated
    and observed heads from the ``._os`` file.

    Only observations present in both files are returned.

    Parameters
    ----------
    metadata_path : str or pathlib.Path
        Path to the ``.hob`` file.
    values_path : str or pathlib.Path
        Path to the ``._os`` file.
    sort : bool, optional
        If True (default), sort by time, then by well id. Otherwise the order
        of the ``._os`` file is kept.

    Returns
    -------
    pandas.DataFrame
        Columns ``obsname``, ``well_id``, ``x``, ``y``, ``time``, followed by
        the value columns of the ``._os`` file, e.g. ``simulated_equivalent``
        and ``observed_value``.

    Examples
    --------
    >>> heads = gwgis.formats.hob.merge_head_observations(
    >>>     "model.hob", "model._os"
    >>> )
    >>> heads["residual"] = heads["observed_value"] - heads["simulated_equivalent"]
    """
    metadata = read_metadata(metadata_path)
    values = read_values(values_path)
    collisions = [c for c in values.columns if c in METADATA_COLUMNS]
    if collisions:
        raise FormatError(
            f"{values_path}: columns {', '.join(collisions)} clash with the "
            f"metadata columns of {metadata_path}"
        )
    values = values.rename(columns={OBSERVATION_KEY: "obsname"})

    try:
        merged = values.merge(metadata, on="obsname", how="inner", validate="1:1")
    except pd.errors.MergeError as e:
        raise FormatError(f"Observation names must be unique: {e}") from e

    ndropped = len(values) - len(merged)
    if ndropped > 0:
        logger.info(f"{ndropped} observations in {values_path} have no metadata")

    value_columns = [c for c in values.columns if c != "obsname"]
    merged = merged[["obsname", "well_id", "x", "y", "time"] + value_columns]
    if sort:
        merged = merged.sort_values(["time", "well_id"])
    return merged.reset_index(drop=True)
