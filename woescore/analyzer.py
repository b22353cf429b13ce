"""analyzer.py."""

import warnings
from typing import Any, Optional, Union

import numpy as np
import pandas as pd

from ._checks import as_binary_target, require_both_classes
from .binning import MISSING_LABEL, QuantileBinner
from .logging_config import logger
from .scoring import DEFAULT_SMOOTHING, VariableScore, score_variable
from .selection import LOW_IV_THRESHOLD, information_value_table
from .treatment import treatment_bounds

DEFAULT_TREATMENT: dict[str, Any] = {
    "q_low": 0.0,
    "q_high": 1.0,
    "impute_value": "median",
}


class WoeAnalyzer:
    """
    Univariate WOE/IV analysis of a loan table.

    Runs treatment, binning and scoring column by column:

    1. Caps, floors and imputes the columns listed in ``treatment``
    2. Bins numeric columns with at least ``numerical_threshold`` distinct
       values into quantile bins; other columns are used as they are
    3. Scores every column against the binary target

    The fitted treatment bounds and binners are reused by :meth:`prepare`
    and :meth:`transform` on new data.

    Parameters
    ----------
    n_bins : int, default=5
        Number of quantile bins for numeric columns.
    smoothing : float, default=0.5
        Zero-count smoothing passed to :func:`woescore.scoring.score_variable`.
    numerical_threshold : int, default=10
        Minimum number of distinct values for a numeric column to be binned.
    treatment : dict, optional
        Per-column treatment rules, e.g.
        ``{"income": {"q_low": 0.01, "q_high": 0.99}}``. Missing keys take
        the defaults ``q_low=0``, ``q_high=1``, ``impute_value="median"``.
    binner_kwargs : dict, optional
        Additional keyword arguments for :class:`QuantileBinner`.
    low_iv_threshold : float, default=0.02
        IV below which :meth:`get_iv_table` flags a variable.

    Attributes:
    ----------
    treatment_bounds_ : dict
        ``(floor, cap)`` per treated column.
    impute_values_ : dict
        Imputation value per treated column, clipped to its bounds.
    binners_ : dict
        Fitted QuantileBinner per binned column.
    scores_ : dict
        VariableScore per column.
    """

    def __init__(
        self,
        n_bins=5,
        smoothing=DEFAULT_SMOOTHING,
        numerical_threshold=10,
        treatment=None,
        binner_kwargs=None,
        low_iv_threshold=LOW_IV_THRESHOLD,
    ):
        default_binner_kwargs = {
            "n_bins": n_bins,
            "strategy": "quantile",
        }
        if binner_kwargs is None:
            self.binner_kwargs = default_binner_kwargs
        else:
            self.binner_kwargs = {**default_binner_kwargs, **binner_kwargs}

        self.treatment: dict[str, dict[str, Any]] = {
            col: {**DEFAULT_TREATMENT, **rule} for col, rule in (treatment or {}).items()
        }
        self.n_bins = self.binner_kwargs["n_bins"]
        self.smoothing = smoothing
        self.numerical_threshold = numerical_threshold
        self.low_iv_threshold = low_iv_threshold

        self.treatment_bounds_: dict[str, tuple[float, float]] = {}
        self.impute_values_: dict[str, float] = {}
        self.binners_: dict[str, QuantileBinner] = {}
        self.scores_: dict[str, VariableScore] = {}
        self.is_fitted_: bool = False

    @staticmethod
    def _as_frame(X: Union[pd.DataFrame, np.ndarray, pd.Series]) -> pd.DataFrame:  # pylint: disable=invalid-name
        if isinstance(X, np.ndarray):
            warnings.warn(
                "Input X is a numpy array. Converting to pandas DataFrame with generic column names.",
                stacklevel=3,
            )
            return pd.DataFrame(X, columns=[f"feature_{i}" for i in range(X.shape[1])])
        if isinstance(X, pd.Series):
            return X.to_frame(name=X.name if X.name is not None else "feature_0")
        return X

    def _is_binnable(self, series: pd.Series) -> bool:
        return (
            pd.api.types.is_numeric_dtype(series)
            and not pd.api.types.is_bool_dtype(series)
            and series.nunique() >= self.numerical_threshold
        )

    def _apply_treatment(self, X: pd.DataFrame) -> pd.DataFrame:  # pylint: disable=invalid-name
        X_treated = X.copy()
        for col, (low, high) in self.treatment_bounds_.items():
            X_treated[col] = (
                pd.to_numeric(X_treated[col], errors="raise")
                .astype(float)
                .clip(lower=low, upper=high)
                .fillna(self.impute_values_[col])
            )
        return X_treated

    # pylint: disable=invalid-name
    def fit(self, X: Union[pd.DataFrame, np.ndarray, pd.Series], y):
        """
        Fit treatment, binning and scoring on a training table.

        Parameters
        ----------
        X : pd.DataFrame
            Candidate predictors.
        y : array-like
            Binary target aligned with ``X`` (0 = good, 1 = bad).

        Returns:
        -------
        self : WoeAnalyzer
        """
        X = self._as_frame(X)
        y_arr = as_binary_target(y, len(X))
        require_both_classes(y_arr)

        unknown = sorted(set(self.treatment) - set(X.columns))
        if unknown:
            raise KeyError(f"Treatment configured for unknown columns: {unknown}")

        self.treatment_bounds_ = {}
        self.impute_values_ = {}
        self.binners_ = {}
        self.scores_ = {}

        for col, rule in self.treatment.items():
            self.treatment_bounds_[col] = treatment_bounds(
                X[col], rule["q_low"], rule["q_high"]
            )
            impute_value = rule["impute_value"]
            if isinstance(impute_value, str):
                if impute_value != "median":
                    raise ValueError(
                        f"impute_value must be a number or 'median', got '{impute_value}'"
                    )
                impute_value = pd.to_numeric(X[col], errors="raise").median()
            low, high = self.treatment_bounds_[col]
            self.impute_values_[col] = float(np.clip(impute_value, low, high))
            logger.debug(
                f"Treatment '{col}': bounds={self.treatment_bounds_[col]}, "
                f"impute={self.impute_values_[col]:.6g}"
            )

        X_prepared = self._apply_treatment(X)
        for col in X_prepared.columns:
            if self._is_binnable(X_prepared[col]):
                binner = QuantileBinner(**self.binner_kwargs)
                X_prepared[col] = binner.fit_transform(X_prepared[col])
                self.binners_[col] = binner

        for col in X_prepared.columns:
            self.scores_[col] = score_variable(
                X_prepared[col], y_arr, smoothing=self.smoothing, feature=col
            )

        n_low = sum(score.iv < self.low_iv_threshold for score in self.scores_.values())
        logger.info(
            f"Scored {len(self.scores_)} features ({len(self.binners_)} binned); "
            f"{n_low} below IV {self.low_iv_threshold}"
        )
        self.is_fitted_ = True
        return self

    def prepare(self, X: Union[pd.DataFrame, np.ndarray, pd.Series]) -> pd.DataFrame:
        """Apply the fitted treatment and binning, returning discrete columns."""
        if not self.is_fitted_:
            raise ValueError("WoeAnalyzer must be fitted before preparing data")
        X_prepared = self._apply_treatment(self._as_frame(X))
        for col, binner in self.binners_.items():
            X_prepared[col] = binner.transform(X_prepared[col])
        return X_prepared

    def transform(self, X: Union[pd.DataFrame, np.ndarray, pd.Series]) -> pd.DataFrame:
        """
        Replace each value by the WOE of its level.

        Levels not seen during fit get WOE 0, the neutral value.
        """
        X_prepared = self.prepare(X)
        woe_df = pd.DataFrame(index=X_prepared.index)
        for col, score in self.scores_.items():
            values = X_prepared[col]
            keys = values.astype(object).where(values.notna(), MISSING_LABEL)
            woe_df[col] = keys.map(score.woe_map()).astype(float).fillna(0.0)
        return woe_df

    def fit_transform(self, X: pd.DataFrame, y) -> pd.DataFrame:
        """Fit and transform in one step."""
        return self.fit(X, y).transform(X)

    def get_score(self, feature: str) -> VariableScore:
        """Get the VariableScore of a fitted feature."""
        if not self.is_fitted_:
            raise ValueError("WoeAnalyzer must be fitted before getting scores")
        if feature not in self.scores_:
            raise KeyError(f"Feature '{feature}' not found in fitted features")
        return self.scores_[feature]

    def get_level_stats(self, feature: str) -> pd.DataFrame:
        """Get the level table (counts, shares, WOE, IV) of a feature."""
        return self.get_score(feature).to_frame()

    def get_iv_table(self, low_iv_threshold: Optional[float] = None) -> pd.DataFrame:
        """Get all features ranked by Information Value."""
        if not self.is_fitted_:
            raise ValueError("WoeAnalyzer must be fitted before getting the IV table")
        threshold = self.low_iv_threshold if low_iv_threshold is None else low_iv_threshold
        return information_value_table(self.scores_, low_iv_threshold=threshold)


__all__ = ["WoeAnalyzer", "DEFAULT_TREATMENT"]
