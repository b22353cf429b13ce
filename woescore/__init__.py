"""
woescore: univariate Weight of Evidence analysis for credit scoring.

This package provides the data-preparation and variable-screening steps of
a scorecard workflow on an in-memory loan table with a binary ``bad`` target.

Features:
- treat_variable: Cap/floor at quantiles and impute missing values
- QuantileBinner / bin_variable: Ordered equal-count binning
- score_variable: Per-level WOE, Information Value and efficiency
- rank_diagnostic: Bucketed bad-rate trend and rank Gini for raw predictors
- WoeAnalyzer: Treatment, binning and scoring over a whole table
- compare_models: AUROC, KS and Gini of fitted models' scores
"""

from .analyzer import WoeAnalyzer
from .binning import QuantileBinner, bin_variable
from .data import load_dataset
from .exceptions import (
    DegenerateInputError,
    InputShapeError,
    NumericDomainError,
    WoeScoreError,
)
from .logging_config import logger
from .metrics import auroc, compare_models, gini, ks_statistic
from .rank import RankBucket, RankDiagnostic, rank_diagnostic
from .scoring import LevelStats, VariableScore, score_variable
from .selection import information_value_table, predictive_power, score_features
from .summary import good_bad_table, summarize_dataset
from .treatment import treat_variable, treatment_bounds

# Silent until setup_logger() is called
logger.disable("woescore")

__version__ = "0.1.0"

__all__ = [
    "WoeAnalyzer",
    "QuantileBinner",
    "bin_variable",
    "load_dataset",
    "WoeScoreError",
    "InputShapeError",
    "DegenerateInputError",
    "NumericDomainError",
    "auroc",
    "compare_models",
    "gini",
    "ks_statistic",
    "RankBucket",
    "RankDiagnostic",
    "rank_diagnostic",
    "LevelStats",
    "VariableScore",
    "score_variable",
    "information_value_table",
    "predictive_power",
    "score_features",
    "good_bad_table",
    "summarize_dataset",
    "treat_variable",
    "treatment_bounds",
]
