"""Cap/floor treatment and missing-value imputation for numeric variables."""

from typing import Union

import numpy as np
import pandas as pd

from ._checks import ArrayLike, as_series
from .exceptions import DegenerateInputError
from .logging_config import logger


def _check_quantiles(q_low: float, q_high: float) -> None:
    if not 0 <= q_low < q_high <= 1:
        raise ValueError(
            f"Quantile fractions must satisfy 0 <= q_low < q_high <= 1, "
            f"got q_low={q_low}, q_high={q_high}"
        )


def _non_missing(values: pd.Series) -> np.ndarray:
    observed = pd.to_numeric(values, errors="raise").dropna().to_numpy(dtype=float)
    if observed.size == 0:
        raise DegenerateInputError(
            f"Column '{values.name}' has no non-missing values; quantiles are undefined"
            if values.name is not None
            else "All values are missing; quantiles are undefined"
        )
    return observed


def treatment_bounds(
    values: ArrayLike, q_low: float = 0.0, q_high: float = 1.0
) -> tuple[float, float]:
    """
    Compute the floor and cap used by :func:`treat_variable`.

    Both quantiles come from a single ``numpy.quantile`` call over the
    non-missing values (linear interpolation).

    Returns:
    -------
    tuple
        ``(Q(q_low), Q(q_high))``
    """
    _check_quantiles(q_low, q_high)
    observed = _non_missing(as_series(values))
    low, high = np.quantile(observed, [q_low, q_high])
    return float(low), float(high)


def treat_variable(
    values: ArrayLike,
    q_low: float = 0.0,
    q_high: float = 1.0,
    impute_value: Union[float, str] = "median",
) -> pd.Series:
    """
    Floor, cap and impute a numeric variable.

    Non-missing values below the ``q_low`` quantile are raised to it and
    values above the ``q_high`` quantile are lowered to it. Missing values are
    then replaced by ``impute_value``, itself held to the same bounds; they
    take no part in the quantile computation.

    Parameters
    ----------
    values : array-like
        Numeric values, possibly with missing entries.
    q_low : float, default=0.0
        Lower quantile fraction used as the floor.
    q_high : float, default=1.0
        Upper quantile fraction used as the cap.
    impute_value : float or "median", default="median"
        Replacement for missing entries, clipped to the bounds. ``"median"``
        uses the median of the non-missing values.

    Returns:
    -------
    pd.Series
        Treated values with the input's index, no missing entries and every
        value within ``[Q(q_low), Q(q_high)]``.

    Examples:
    --------
    >>> treat_variable([1, 2, 3, 4, 100], q_low=0.0, q_high=0.8).round(1).tolist()
    [1.0, 2.0, 3.0, 4.0, 23.2]
    """
    series = as_series(values)
    _check_quantiles(q_low, q_high)
    observed = _non_missing(series)
    low, high = np.quantile(observed, [q_low, q_high])

    if isinstance(impute_value, str):
        if impute_value != "median":
            raise ValueError(
                f"impute_value must be a number or 'median', got '{impute_value}'"
            )
        fill = float(np.median(observed))
    else:
        fill = float(impute_value)
    fill = float(np.clip(fill, low, high))

    numeric = pd.to_numeric(series, errors="raise").astype(float)
    n_missing = int(numeric.isna().sum())
    n_floored = int((numeric < low).sum())
    n_capped = int((numeric > high).sum())

    treated = numeric.clip(lower=low, upper=high).fillna(fill)
    logger.debug(
        f"Treated '{series.name}': floor={low:.6g} ({n_floored} rows), "
        f"cap={high:.6g} ({n_capped} rows), imputed {n_missing} missing with {fill:.6g}"
    )
    return treated


__all__ = ["treat_variable", "treatment_bounds"]
