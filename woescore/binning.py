"""Quantile binning of numeric variables into ordered categorical levels."""

import warnings
from typing import Optional

import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator, TransformerMixin

from ._checks import ArrayLike, as_series
from .exceptions import DegenerateInputError
from .logging_config import logger

MISSING_LABEL = "Missing"
_STRATEGIES = ("quantile",)


def _format_labels(edges: np.ndarray, precision: int) -> list[str]:
    """
    Build interval labels ``[lo, hi)`` with the last one closed, ``[lo, hi]``.

    Decimal places start at ``precision`` and grow until distinct edges get
    distinct text and no non-zero edge reads as zero. Edges that fixed-point
    text cannot tell apart use their shortest round-trip representation.
    """
    n_distinct = len(np.unique(edges))
    text = [np.format_float_positional(edge, unique=True, trim="-") for edge in edges]
    for digits in range(precision, 17):
        fixed = [f"{edge:.{digits}f}" for edge in edges]
        if len(set(fixed)) == n_distinct and all(
            float(t) != 0.0 or edge == 0.0 for t, edge in zip(fixed, edges)
        ):
            text = fixed
            break
    return [
        f"[{text[i]}, {text[i + 1]}" + ("]" if i == len(edges) - 2 else ")")
        for i in range(len(edges) - 1)
    ]


class QuantileBinner(BaseEstimator, TransformerMixin):
    """
    Cut a numeric variable into ordered equal-count bins.

    Cut points are the ``n_bins + 1`` quantiles from 0 to 1 of the
    non-missing values. Coinciding cut points are merged, so skewed or
    discrete data may produce fewer bins than requested. Each value is
    assigned to the half-open interval ``[cut[i], cut[i+1])`` containing it;
    the last interval is closed on both ends.

    Parameters
    ----------
    n_bins : int, default=5
        Requested number of bins, at least 2.
    strategy : str, default="quantile"
        Binning strategy. Only "quantile" is supported.
    precision : int, default=2
        Minimum number of decimal places in the interval labels.
    missing_label : str, default="Missing"
        Level assigned to missing values, appended after the intervals.

    Attributes:
    ----------
    bin_edges_ : np.ndarray
        Distinct ascending cut points.
    labels_ : list[str]
        Interval labels, one per bin.
    n_bins_ : int
        Number of bins actually produced.
    """

    def __init__(
        self,
        n_bins=5,
        strategy="quantile",
        precision=2,
        missing_label=MISSING_LABEL,
    ):
        self.n_bins = n_bins
        self.strategy = strategy
        self.precision = precision
        self.missing_label = missing_label

    def _check_params(self) -> None:
        if self.strategy not in _STRATEGIES:
            raise ValueError(
                f"strategy must be one of {_STRATEGIES}, got '{self.strategy}'"
            )
        if self.n_bins < 2:
            raise DegenerateInputError(
                f"At least 2 bins are required, got n_bins={self.n_bins}"
            )

    # pylint: disable=invalid-name, unused-argument
    def fit(self, X: ArrayLike, y=None):
        """Compute the cut points from the non-missing values of ``X``."""
        self._check_params()
        series = as_series(X)
        observed = pd.to_numeric(series, errors="raise").dropna().to_numpy(dtype=float)
        if observed.size == 0:
            raise DegenerateInputError(
                f"Column '{series.name}' has no non-missing values for binning"
            )

        cut_points = np.quantile(observed, np.linspace(0.0, 1.0, self.n_bins + 1))
        edges = np.unique(cut_points)
        if edges.size == 1:
            # Constant column: a single closed interval [v, v]
            edges = np.repeat(edges, 2)

        self.bin_edges_ = edges
        self.labels_ = _format_labels(edges, self.precision)
        self.n_bins_ = len(self.labels_)

        if self.n_bins_ < self.n_bins:
            logger.debug(
                f"Duplicate quantile cut points in '{series.name}': "
                f"{self.n_bins} bins requested, {self.n_bins_} produced"
            )
            warnings.warn(
                f"Bins whose quantile cut points coincide were merged in "
                f"'{series.name}'. Requested {self.n_bins} bins, "
                f"produced {self.n_bins_}.",
                UserWarning,
                stacklevel=2,
            )
        return self

    # pylint: disable=invalid-name
    def transform(self, X: ArrayLike) -> pd.Categorical:
        """Assign each value of ``X`` to its ordered interval label."""
        if not hasattr(self, "bin_edges_"):
            raise ValueError("QuantileBinner must be fitted before transforming data")

        values = pd.to_numeric(as_series(X), errors="raise").to_numpy(dtype=float)
        mask_missing = np.isnan(values)

        codes = np.searchsorted(self.bin_edges_[1:-1], values, side="right")
        categories = list(self.labels_)
        if mask_missing.any():
            codes[mask_missing] = len(categories)
            categories.append(self.missing_label)

        return pd.Categorical.from_codes(codes, categories=categories, ordered=True)

    def fit_transform(self, X: ArrayLike, y=None, **fit_params) -> pd.Categorical:
        """Fit and transform in one step."""
        return self.fit(X, y).transform(X)

    def get_bin_table(self) -> pd.DataFrame:
        """Get the fitted intervals as a table of label, lower and upper edge."""
        if not hasattr(self, "bin_edges_"):
            raise ValueError("QuantileBinner must be fitted before getting bins")
        return pd.DataFrame(
            {
                "label": self.labels_,
                "lower": self.bin_edges_[:-1],
                "upper": self.bin_edges_[1:],
            }
        )


def bin_variable(
    values: ArrayLike,
    n_bins: int = 5,
    strategy: str = "quantile",
    precision: Optional[int] = None,
) -> pd.Categorical:
    """
    Bin a numeric variable into at most ``n_bins`` ordered levels.

    Convenience wrapper around :class:`QuantileBinner` for one-off use.

    Examples:
    --------
    >>> labels = bin_variable(range(1, 101), n_bins=4)
    >>> labels.value_counts().tolist()
    [25, 25, 25, 25]
    """
    binner = QuantileBinner(
        n_bins=n_bins,
        strategy=strategy,
        precision=2 if precision is None else precision,
    )
    return binner.fit_transform(values)


__all__ = ["QuantileBinner", "bin_variable", "MISSING_LABEL"]
