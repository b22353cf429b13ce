"""
Information Value tables for variable selection.

The IV of each candidate is ranked and placed in the conventional bands:

    < 0.02      useless
    0.02 - 0.1  weak
    0.1 - 0.3   medium
    0.3 - 0.5   strong
    >= 0.5      suspicious (check for leakage)

Merging levels or dropping variables flagged ``low_iv`` is left to the
caller.
"""

from collections.abc import Iterable, Mapping
from typing import Optional, Union

import pandas as pd

from .scoring import DEFAULT_SMOOTHING, VariableScore, score_variable

LOW_IV_THRESHOLD = 0.02
IV_BANDS = (
    (0.02, "useless"),
    (0.1, "weak"),
    (0.3, "medium"),
    (0.5, "strong"),
)


def predictive_power(iv: float) -> str:
    """Band label for an Information Value."""
    for upper, label in IV_BANDS:
        if iv < upper:
            return label
    return "suspicious"


def score_features(
    df: pd.DataFrame,
    target: str = "bad",
    features: Optional[list[str]] = None,
    smoothing: float = DEFAULT_SMOOTHING,
) -> dict[str, VariableScore]:
    """Score each discrete column of ``df`` against ``target``."""
    if features is None:
        features = [col for col in df.columns if col != target]
    return {
        col: score_variable(df[col], df[target], smoothing=smoothing, feature=col)
        for col in features
    }


def information_value_table(
    scores: Union[Mapping[str, VariableScore], Iterable[VariableScore]],
    low_iv_threshold: float = LOW_IV_THRESHOLD,
) -> pd.DataFrame:
    """
    Rank variables by Information Value.

    Parameters
    ----------
    scores : mapping or iterable of VariableScore
        Scored variables, e.g. the output of :func:`score_features`.
    low_iv_threshold : float, default=0.02
        IV below which a variable is flagged as a candidate for merging or
        dropping.

    Returns:
    -------
    pd.DataFrame
        Columns feature, iv, efficiency, n_levels, predictive_power, low_iv;
        sorted by IV descending.
    """
    if isinstance(scores, Mapping):
        scores = scores.values()
    rows = [
        {
            "feature": score.feature,
            "iv": score.iv,
            "efficiency": score.efficiency,
            "n_levels": score.n_levels,
            "predictive_power": predictive_power(score.iv),
            "low_iv": score.iv < low_iv_threshold,
        }
        for score in scores
    ]
    columns = ["feature", "iv", "efficiency", "n_levels", "predictive_power", "low_iv"]
    table = pd.DataFrame(rows, columns=columns)
    return table.sort_values("iv", ascending=False).reset_index(drop=True)


__all__ = [
    "IV_BANDS",
    "LOW_IV_THRESHOLD",
    "information_value_table",
    "predictive_power",
    "score_features",
]
