"""
Discrimination metrics for comparing fitted scoring models.

The models themselves (logistic regression, trees, CHAID...) come from other
libraries; here their predicted probabilities are compared by AUROC, KS and
Gini.
"""

from collections.abc import Mapping
from typing import Union

import numpy as np
import pandas as pd
from sklearn.metrics import roc_auc_score, roc_curve

from ._checks import ArrayLike, as_binary_target, require_both_classes
from .exceptions import InputShapeError


def _prepare(y_true: ArrayLike, y_score: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    scores = np.asarray(y_score, dtype=float).ravel()
    y = as_binary_target(y_true, len(scores))
    require_both_classes(y)
    if np.isnan(scores).any():
        raise InputShapeError("Scores contain missing values")
    return y, scores


def auroc(y_true: ArrayLike, y_score: ArrayLike) -> float:
    """Area under the ROC curve."""
    y, scores = _prepare(y_true, y_score)
    return float(roc_auc_score(y, scores))


def gini(y_true: ArrayLike, y_score: ArrayLike) -> float:
    """Gini coefficient, ``2 * AUROC - 1``."""
    return 2.0 * auroc(y_true, y_score) - 1.0


def ks_statistic(y_true: ArrayLike, y_score: ArrayLike) -> float:
    """
    Kolmogorov-Smirnov statistic.

    Largest distance between the cumulative score distributions of bads and
    goods, read off the ROC curve as ``max |TPR - FPR|``.
    """
    y, scores = _prepare(y_true, y_score)
    fpr, tpr, _ = roc_curve(y, scores)
    return float(np.max(np.abs(tpr - fpr)))


def compare_models(
    model_scores: Mapping[str, ArrayLike], y_true: ArrayLike
) -> pd.DataFrame:
    """
    Compare models by AUROC, KS and Gini on the same target.

    Parameters
    ----------
    model_scores : mapping of str to array-like
        Predicted probability of bad per model, keyed by model name.
    y_true : array-like
        Binary target (0 = good, 1 = bad).

    Returns:
    -------
    pd.DataFrame
        Columns model, auroc, ks, gini; sorted by AUROC descending.

    Examples:
    --------
    >>> compare_models({"logit": p_logit, "rpart": p_tree}, y_test)
    """
    rows: list[dict[str, Union[str, float]]] = []
    for name, scores in model_scores.items():
        area = auroc(y_true, scores)
        rows.append(
            {
                "model": name,
                "auroc": area,
                "ks": ks_statistic(y_true, scores),
                "gini": 2.0 * area - 1.0,
            }
        )
    table = pd.DataFrame(rows, columns=["model", "auroc", "ks", "gini"])
    return table.sort_values("auroc", ascending=False).reset_index(drop=True)


__all__ = ["auroc", "gini", "ks_statistic", "compare_models"]
