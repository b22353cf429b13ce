"""Loading the loan dataset from CSV."""

from os import PathLike
from typing import Union

import pandas as pd

from ._checks import as_binary_target
from .logging_config import logger


def load_dataset(
    path: Union[str, PathLike], target: str = "bad", **read_csv_kwargs
) -> pd.DataFrame:
    """
    Read a loan table from CSV and validate its binary target.

    Parameters
    ----------
    path : str or path-like
        CSV file location.
    target : str, default="bad"
        Name of the 0/1 target column (1 = bad).
    **read_csv_kwargs
        Passed through to ``pandas.read_csv``.

    Returns:
    -------
    pd.DataFrame
        The table with the target cast to int.
    """
    df = pd.read_csv(path, **read_csv_kwargs)
    if target not in df.columns:
        raise KeyError(f"Target column '{target}' not found in {path}")
    df[target] = as_binary_target(df[target], len(df))
    logger.info(
        f"Loaded {len(df)} rows x {df.shape[1]} columns from {path}; "
        f"bad rate {df[target].mean():.2%}"
    )
    return df


__all__ = ["load_dataset"]
