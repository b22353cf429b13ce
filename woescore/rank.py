"""Rank diagnostic for continuous predictors.

Sorts observations by the predictor, slices them into equal-population
buckets and reports the bad rate per bucket together with a rank-based Gini,
so the monotonicity of a raw variable can be judged before binning it.
"""

from dataclasses import asdict, dataclass
from typing import Optional

import numpy as np
import pandas as pd
from scipy.stats import rankdata

from ._checks import ArrayLike, as_binary_target, as_series, require_both_classes
from .exceptions import DegenerateInputError
from .logging_config import logger


@dataclass(frozen=True)
class RankBucket:
    rank: int
    avg_value: float
    bad_rate: float
    count: int


@dataclass(frozen=True)
class RankDiagnostic:
    """Bucketed bad-rate trend and rank Gini of one continuous predictor."""

    feature: Optional[str]
    buckets: tuple[RankBucket, ...]
    gini: float
    n_dropped: int

    def to_frame(self) -> pd.DataFrame:
        """Render the buckets as a DataFrame, one row per rank."""
        return pd.DataFrame([asdict(bucket) for bucket in self.buckets])


def rank_gini(values: np.ndarray, y: np.ndarray) -> float:
    """
    Gini-like separation of a predictor from its ranks, scaled to [-100, 100].

    A (bad, good) pair is concordant when the bad row has the higher value
    and discordant when it has the lower one; ties count as neither. The
    statistic is ``100 * (C - D) / (n_bad * n_good)``, obtained from the
    Mann-Whitney rank sum of the bads.
    """
    n_bad = int(y.sum())
    n_good = len(y) - n_bad
    ranks = rankdata(values)
    u_bad = ranks[y == 1].sum() - n_bad * (n_bad + 1) / 2.0
    return float(100.0 * (2.0 * u_bad / (n_bad * n_good) - 1.0))


def rank_diagnostic(
    values: ArrayLike, target: ArrayLike, num_ranks: int = 10
) -> RankDiagnostic:
    """
    Bucket a continuous predictor by rank and report the bad rate per bucket.

    Parameters
    ----------
    values : array-like
        Continuous predictor. Rows where it is missing are left out.
    target : array-like
        Binary target aligned with ``values`` (0 = good, 1 = bad).
    num_ranks : int, default=10
        Number of equal-population buckets. The last bucket takes the rows
        left over by the integer division.

    Returns:
    -------
    RankDiagnostic
        Buckets in ascending value order and the rank Gini.
    """
    x = as_series(values)
    y = as_binary_target(target, len(x))
    if num_ranks < 1:
        raise DegenerateInputError(f"num_ranks must be at least 1, got {num_ranks}")

    numeric = pd.to_numeric(x, errors="raise").to_numpy(dtype=float)
    mask = ~np.isnan(numeric)
    n_dropped = int((~mask).sum())
    if n_dropped:
        logger.debug(f"Rank diagnostic on '{x.name}': dropped {n_dropped} missing rows")

    values_kept = numeric[mask]
    y_kept = y[mask]
    n_rows = len(values_kept)
    if n_rows < num_ranks:
        raise DegenerateInputError(
            f"Need at least {num_ranks} non-missing rows for {num_ranks} ranks, "
            f"got {n_rows}"
        )
    require_both_classes(y_kept)

    order = np.argsort(values_kept, kind="stable")
    values_sorted = values_kept[order]
    y_sorted = y_kept[order]

    size = n_rows // num_ranks
    buckets = []
    for i in range(num_ranks):
        start = i * size
        stop = n_rows if i == num_ranks - 1 else start + size
        bucket_y = y_sorted[start:stop]
        buckets.append(
            RankBucket(
                rank=i + 1,
                avg_value=float(values_sorted[start:stop].mean()),
                bad_rate=float(bucket_y.mean()),
                count=int(stop - start),
            )
        )

    return RankDiagnostic(
        feature=x.name,
        buckets=tuple(buckets),
        gini=rank_gini(values_kept, y_kept),
        n_dropped=n_dropped,
    )


__all__ = ["RankBucket", "RankDiagnostic", "rank_diagnostic", "rank_gini"]
