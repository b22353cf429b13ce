"""Input coercion and validation shared by the public functions."""

from typing import Union

import numpy as np
import pandas as pd

from .exceptions import DegenerateInputError, InputShapeError

ArrayLike = Union[pd.Series, np.ndarray, pd.Categorical, list, tuple]


def as_series(values: ArrayLike, name=None) -> pd.Series:
    """Wrap values in a Series without copying data that already is one."""
    if isinstance(values, pd.Series):
        return values
    return pd.Series(values, name=name)


def as_binary_target(target: ArrayLike, n_rows: int) -> np.ndarray:
    """Validate a 0/1 target of ``n_rows`` rows and return it as an int array."""
    y = as_series(target)
    if len(y) != n_rows:
        raise InputShapeError(
            f"Predictor and target must have the same length, "
            f"got {n_rows} and {len(y)}"
        )
    if y.isna().any():
        raise InputShapeError(
            f"Target contains {int(y.isna().sum())} missing values; expected only 0/1"
        )
    unique_values = pd.unique(y)
    if not set(unique_values.tolist()).issubset({0, 1}):
        found = sorted(map(str, unique_values.tolist()))
        raise InputShapeError(
            f"Target must be binary (0/1). Found values: {found[:10]}"
            f"{'...' if len(found) > 10 else ''}"
        )
    return y.to_numpy().astype(int)


def require_both_classes(y: np.ndarray) -> tuple[int, int]:
    """Return ``(total_good, total_bad)``, failing when either class is absent."""
    total_bad = int(y.sum())
    total_good = int(len(y) - total_bad)
    if total_good == 0 or total_bad == 0:
        raise DegenerateInputError(
            f"Target has no variation (good={total_good}, bad={total_bad}); "
            "Information Value is undefined"
        )
    return total_good, total_bad
