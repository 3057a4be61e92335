"""
pandas adapters: format Series and DataFrame columns with a shared format per column.

Tests: tests/test_frame
"""
import pandas as pd

from .core.consts import DEFAULT_DIGITS, DEFAULT_THRESHOLD
from .formatters import formatter
from .log_config import setup_logger

logger = setup_logger(__name__)

def format_series(series: pd.Series, digits=DEFAULT_DIGITS, threshold=DEFAULT_THRESHOLD, trim=False) -> pd.Series:
    """Format a numeric Series, keeping its index and name."""
    # numpy scalars keep float32 values distinguishable from float64
    values = list(series.to_numpy())
    fmt = formatter(values, digits, threshold, trim)
    return pd.Series([fmt(x) for x in values], index=series.index, name=series.name, dtype=object)

def format_frame(df: pd.DataFrame, columns=None, digits=DEFAULT_DIGITS, threshold=DEFAULT_THRESHOLD,
                 trim=False) -> pd.DataFrame:
    """
    Parameters
    ----------
    df : pd.DataFrame
        Input frame, left untouched.
    columns : list, optional
        Columns to format. Defaults to every numeric column.
    digits, threshold, trim
        See :func:`seqformat.formatters.formatter`. Each column gets its own fit.

    Returns
    -------
    pd.DataFrame
        A copy with the selected columns replaced by strings.

    Raises
    ------
    KeyError
        If a requested column is not in the frame.
    """
    if columns is None:
        columns = df.select_dtypes(include="number").columns.tolist()
    else:
        missing = [col for col in columns if col not in df.columns]
        if missing:
            raise KeyError(f"Columns not found in DataFrame: {missing}")

    out = df.copy()
    for col in columns:
        out[col] = format_series(df[col], digits, threshold, trim)
        logger.debug(f"Formatted column {col!r}")
    return out
