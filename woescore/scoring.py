"""
Weight of Evidence and Information Value for discrete or binned variables.

For every level of a variable the scorer counts goods (target 0) and bads
(target 1), turns the counts into shares of all goods and all bads, and
derives:

    WOE_j = ln(share_good_j / share_bad_j)
    IV    = sum_j (share_good_j - share_bad_j) * WOE_j
    efficiency = max_j |pct_good_j - pct_bad_j| / 2

Zero-count smoothing
--------------------
WOE is a log-ratio, so a level without goods or without bads has no finite
WOE. When any level has a zero count, ``smoothing`` is added to the good and
bad counts of every level and WOE/IV use shares recomputed from the smoothed
counts. The reported ``pct_good``/``pct_bad`` and the efficiency always come
from the raw counts.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional

import numpy as np
import pandas as pd

from ._checks import ArrayLike, as_binary_target, as_series, require_both_classes
from .binning import MISSING_LABEL
from .exceptions import NumericDomainError
from .logging_config import logger

DEFAULT_SMOOTHING = 0.5


@dataclass(frozen=True)
class LevelStats:
    """Good/bad counts, shares and WOE for one level of a variable."""

    level: Any
    count_good: int
    count_bad: int
    count_total: int
    pct_good: float
    pct_bad: float
    woe: float
    iv: float


@dataclass(frozen=True)
class VariableScore:
    """Level table and aggregate Information Value of one variable."""

    feature: Optional[str]
    levels: tuple[LevelStats, ...]
    iv: float
    efficiency: float
    total_good: int
    total_bad: int
    smoothing: float
    smoothed: bool

    @property
    def n_levels(self) -> int:
        return len(self.levels)

    def get_level(self, level) -> LevelStats:
        """Get the statistics of a single level."""
        for stats in self.levels:
            if stats.level == level:
                return stats
        raise KeyError(f"Level {level!r} not found in feature '{self.feature}'")

    def woe_map(self) -> dict:
        """Mapping of level to WOE, in level order."""
        return {stats.level: stats.woe for stats in self.levels}

    def to_frame(self) -> pd.DataFrame:
        """Render the level statistics as a DataFrame, one row per level."""
        return pd.DataFrame([asdict(stats) for stats in self.levels])


def _natural_levels(x: pd.Series, keys: pd.Series) -> list:
    """Order levels by category order, else by value, with Missing last."""
    present = set(keys.unique().tolist())
    if isinstance(x.dtype, pd.CategoricalDtype):
        levels = [cat for cat in x.cat.categories.tolist() if cat in present]
    else:
        observed = pd.unique(x.dropna()).tolist()
        try:
            levels = sorted(observed)
        except TypeError:
            # Mixed types that do not compare keep their order of appearance
            levels = observed
    if MISSING_LABEL in present and MISSING_LABEL not in levels:
        levels.append(MISSING_LABEL)
    return levels


def score_variable(
    binned_values: ArrayLike,
    target: ArrayLike,
    smoothing: float = DEFAULT_SMOOTHING,
    feature: Optional[str] = None,
) -> VariableScore:
    """
    Compute per-level WOE statistics and the variable's Information Value.

    Parameters
    ----------
    binned_values : array-like
        Discrete levels, either a natural categorical variable or the output
        of :func:`woescore.binning.bin_variable`. Missing values form their
        own "Missing" level.
    target : array-like
        Binary target aligned with ``binned_values`` (0 = good, 1 = bad).
    smoothing : float, default=0.5
        Count added to every level's goods and bads when any level has a
        zero count (see module docstring).
    feature : str, optional
        Name recorded on the result. Defaults to the Series name.

    Returns:
    -------
    VariableScore
        Level statistics in natural level order, IV and efficiency.

    Raises:
    ------
    InputShapeError
        Lengths differ or the target is not 0/1.
    DegenerateInputError
        The target has a single class.
    NumericDomainError
        A share is still zero after smoothing (only with ``smoothing=0``).
    """
    if smoothing < 0:
        raise ValueError(f"smoothing must be non-negative, got {smoothing}")

    x = as_series(binned_values)
    y = as_binary_target(target, len(x))
    total_good, total_bad = require_both_classes(y)

    keys = x.astype(object).where(x.notna(), MISSING_LABEL)
    levels = _natural_levels(x, keys)

    counts = (
        pd.DataFrame({"level": keys.to_numpy(), "bad": y})
        .groupby("level", sort=False)["bad"]
        .agg(["count", "sum"])
        .reindex(levels)
    )
    count_total = counts["count"].to_numpy(dtype=int)
    count_bad = counts["sum"].to_numpy(dtype=int)
    count_good = count_total - count_bad

    pct_good = count_good / total_good
    pct_bad = count_bad / total_bad

    smoothed = bool((count_good == 0).any() or (count_bad == 0).any())
    if smoothed:
        adj_good = count_good + smoothing
        adj_bad = count_bad + smoothing
        share_good = adj_good / adj_good.sum()
        share_bad = adj_bad / adj_bad.sum()
    else:
        share_good, share_bad = pct_good, pct_bad

    if (share_good <= 0).any() or (share_bad <= 0).any():
        raise NumericDomainError(
            f"Zero share in WOE denominator for feature '{feature or x.name}' "
            f"with smoothing={smoothing}"
        )

    woe = np.log(share_good / share_bad)
    iv_level = (share_good - share_bad) * woe
    iv = float(iv_level.sum())
    efficiency = float(np.max(np.abs(pct_good - pct_bad)) / 2)

    level_stats = tuple(
        LevelStats(
            level=level,
            count_good=int(count_good[i]),
            count_bad=int(count_bad[i]),
            count_total=int(count_total[i]),
            pct_good=float(pct_good[i]),
            pct_bad=float(pct_bad[i]),
            woe=float(woe[i]),
            iv=float(iv_level[i]),
        )
        for i, level in enumerate(levels)
    )

    name = feature if feature is not None else x.name
    logger.debug(
        f"Scored '{name}': {len(levels)} levels, IV={iv:.4f}, "
        f"efficiency={efficiency:.4f}{' (smoothed)' if smoothed else ''}"
    )
    return VariableScore(
        feature=name,
        levels=level_stats,
        iv=iv,
        efficiency=efficiency,
        total_good=total_good,
        total_bad=total_bad,
        smoothing=float(smoothing),
        smoothed=smoothed,
    )


__all__ = ["LevelStats", "VariableScore", "score_variable", "DEFAULT_SMOOTHING"]
