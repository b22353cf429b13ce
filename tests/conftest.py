"""Pytest configuration and shared fixtures for woescore tests."""

import numpy as np
import pandas as pd
import pytest

GRADE_BAD_RATES = {"A": 0.05, "B": 0.15, "C": 0.30, "D": 0.50}


@pytest.fixture
def two_level_scenario():
    """10 rows: 'low' has 1 bad out of 5, 'high' has 4 bads out of 5."""
    levels = pd.Categorical(
        ["low"] * 5 + ["high"] * 5, categories=["low", "high"], ordered=True
    )
    target = pd.Series([1, 0, 0, 0, 0] + [1, 1, 1, 1, 0])
    return levels, target


@pytest.fixture
def loan_frame():
    """Synthetic loan table with a predictive grade, income, tenure and noise."""
    rng = np.random.default_rng(42)
    n_samples = 1000
    grade = rng.choice(list(GRADE_BAD_RATES), n_samples, p=[0.3, 0.3, 0.25, 0.15])
    income = rng.lognormal(mean=10.0, sigma=0.5, size=n_samples)
    income[rng.choice(n_samples, 40, replace=False)] = np.nan
    months_employed = rng.integers(0, 240, n_samples).astype(float)
    months_employed[rng.choice(n_samples, 25, replace=False)] = np.nan

    p_bad = np.array([GRADE_BAD_RATES[g] for g in grade])
    p_bad = np.where(np.nan_to_num(income, nan=0.0) < 15000, p_bad + 0.1, p_bad)
    bad = rng.binomial(1, np.clip(p_bad, 0, 1))

    return pd.DataFrame(
        {
            "grade": grade,
            "income": income,
            "months_employed": months_employed,
            "noise": rng.uniform(0, 1, n_samples),
            "bad": bad,
        }
    )
