"""Descriptive summaries of a loan dataset."""

from collections.abc import Sequence

import numpy as np
import pandas as pd

from ._checks import as_binary_target
from .binning import MISSING_LABEL
from .scoring import _natural_levels

DEFAULT_PERCENTILES = (0.01, 0.05, 0.25, 0.5, 0.75, 0.95, 0.99)


def _is_numeric(series: pd.Series) -> bool:
    return pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(
        series
    )


def summarize_dataset(
    df: pd.DataFrame, percentiles: Sequence[float] = DEFAULT_PERCENTILES
) -> pd.DataFrame:
    """
    Summarize every column: type, cardinality, missing rate and quantiles.

    Parameters
    ----------
    df : pd.DataFrame
        Observation table.
    percentiles : sequence of float
        Quantile fractions reported for numeric columns, as ``p1``, ``p50``...

    Returns:
    -------
    pd.DataFrame
        One row per column. Non-numeric columns get NaN numeric statistics.
    """
    pct_columns = [f"p{pct * 100:g}" for pct in percentiles]
    rows = []
    for col in df.columns:
        series = df[col]
        n_missing = int(series.isna().sum())
        row = {
            "column": col,
            "dtype": str(series.dtype),
            "kind": "numeric" if _is_numeric(series) else "categorical",
            "n_unique": int(series.nunique(dropna=True)),
            "n_missing": n_missing,
            "missing_rate": n_missing / len(series) if len(series) else np.nan,
            "mean": np.nan,
            "min": np.nan,
            **dict.fromkeys(pct_columns, np.nan),
            "max": np.nan,
        }
        observed = series.dropna()
        if _is_numeric(series) and len(observed):
            row["mean"] = float(observed.mean())
            row["min"] = float(observed.min())
            row["max"] = float(observed.max())
            quantiles = np.quantile(observed.to_numpy(dtype=float), list(percentiles))
            row.update(zip(pct_columns, quantiles.tolist()))
        rows.append(row)
    return pd.DataFrame(rows)


def good_bad_table(df: pd.DataFrame, feature: str, target: str = "bad") -> pd.DataFrame:
    """Cross-tab of goods and bads per level of a discrete variable."""
    x = df[feature]
    y = as_binary_target(df[target], len(df))
    keys = x.astype(object).where(x.notna(), MISSING_LABEL)
    table = (
        pd.DataFrame({"level": keys.to_numpy(), "bad": y})
        .groupby("level", sort=False)["bad"]
        .agg(total="count", bad="sum")
        .reindex(_natural_levels(x, keys))
    )
    table["good"] = table["total"] - table["bad"]
    table["bad_rate"] = table["bad"] / table["total"]
    return table.reset_index()[["level", "good", "bad", "total", "bad_rate"]]


__all__ = ["summarize_dataset", "good_bad_table", "DEFAULT_PERCENTILES"]
