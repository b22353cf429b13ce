"""Tests for cap/floor treatment and imputation."""

import numpy as np
import pandas as pd
import pytest

from woescore import DegenerateInputError, treat_variable, treatment_bounds


class TestTreatVariable:
    """Test cases for treat_variable."""

    def test_caps_maximum_at_upper_quantile(self):
        """Capping [1, 2, 3, 4, 100] at the 80th percentile only moves 100."""
        values = [1, 2, 3, 4, 100]
        treated = treat_variable(values, q_low=0.0, q_high=0.8)

        expected_cap = np.quantile(values, 0.8)
        assert treated.iloc[:4].tolist() == [1.0, 2.0, 3.0, 4.0]
        assert treated.iloc[4] == pytest.approx(expected_cap)
        assert treated.iloc[4] == pytest.approx(23.2)

    def test_floors_minimum_at_lower_quantile(self):
        """Values below the lower quantile are raised to it."""
        values = [-50, 1, 2, 3, 4]
        treated = treat_variable(values, q_low=0.2, q_high=1.0)

        assert treated.iloc[0] == pytest.approx(np.quantile(values, 0.2))
        assert treated.iloc[1:].tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_imputes_missing_with_median(self):
        """Missing values become the median of the observed values."""
        treated = treat_variable([1, np.nan, 3, None, 5])

        assert not treated.isna().any()
        assert treated.tolist() == [1.0, 3.0, 3.0, 3.0, 5.0]

    def test_imputes_missing_with_given_value(self):
        """A numeric impute_value inside the bounds is used as given."""
        treated = treat_variable([1, 2, 3, np.nan], impute_value=2.5)

        assert treated.tolist() == [1.0, 2.0, 3.0, 2.5]

    @pytest.mark.parametrize(
        "values,q_high,impute_value,expected",
        [
            ([1, 2, 3, np.nan], 1.0, 1000, 3.0),
            ([1, 2, 3, 4, 100, np.nan], 0.8, 0, 1.0),
        ],
    )
    def test_imputed_values_stay_within_bounds(self, values, q_high, impute_value, expected):
        """An impute_value outside the quantile bounds is clipped to them."""
        low, high = treatment_bounds(values, 0.0, q_high)
        treated = treat_variable(values, q_low=0.0, q_high=q_high, impute_value=impute_value)

        assert treated.iloc[-1] == pytest.approx(expected)
        assert treated.between(low, high).all()

    def test_median_imputation_clipped_to_narrow_bounds(self):
        """The median is held to the bounds when both quantiles lie above it."""
        values = [1.0, 2.0, 3.0, 4.0, 5.0, np.nan]
        low, high = treatment_bounds(values, 0.75, 1.0)
        treated = treat_variable(values, q_low=0.75, q_high=1.0)

        assert treated.iloc[-1] == pytest.approx(low)
        assert treated.between(low, high).all()

    def test_missing_values_do_not_affect_quantiles(self):
        """Quantiles are computed over the non-missing values only."""
        with_missing = treat_variable([1, 2, 3, 4, 100, np.nan, np.nan], 0.0, 0.8)
        without_missing = treat_variable([1, 2, 3, 4, 100], 0.0, 0.8)

        assert with_missing.iloc[4] == pytest.approx(without_missing.iloc[4])

    def test_output_bounded_by_quantiles(self):
        """All treated values lie within the pre-treatment quantiles."""
        rng = np.random.default_rng(0)
        values = rng.standard_cauchy(500)
        values[rng.choice(500, 30, replace=False)] = np.nan
        low, high = np.quantile(values[~np.isnan(values)], [0.05, 0.95])

        treated = treat_variable(values, q_low=0.05, q_high=0.95)

        assert len(treated) == len(values)
        assert not treated.isna().any()
        assert (treated >= low - 1e-12).all()
        assert (treated <= high + 1e-12).all()

    def test_preserves_index(self):
        """The treated Series keeps the input index."""
        series = pd.Series([5.0, np.nan, 1.0], index=["a", "b", "c"], name="x")
        treated = treat_variable(series)

        assert treated.index.tolist() == ["a", "b", "c"]

    def test_all_missing_raises(self):
        """Quantiles are undefined without observed values."""
        with pytest.raises(DegenerateInputError):
            treat_variable([np.nan, np.nan])

    @pytest.mark.parametrize("q_low,q_high", [(0.5, 0.5), (0.9, 0.1), (-0.1, 0.5), (0.0, 1.5)])
    def test_invalid_quantiles_raise(self, q_low, q_high):
        """Quantile fractions must satisfy 0 <= q_low < q_high <= 1."""
        with pytest.raises(ValueError):
            treat_variable([1, 2, 3], q_low=q_low, q_high=q_high)

    def test_invalid_impute_keyword_raises(self):
        """Only 'median' is accepted as a string impute_value."""
        with pytest.raises(ValueError, match="impute_value"):
            treat_variable([1, np.nan], impute_value="mean")


class TestTreatmentBounds:
    """Test cases for treatment_bounds."""

    def test_returns_quantile_pair(self):
        """Bounds match numpy's linear quantiles."""
        values = np.arange(1, 101, dtype=float)
        low, high = treatment_bounds(values, 0.1, 0.9)

        assert low == pytest.approx(np.quantile(values, 0.1))
        assert high == pytest.approx(np.quantile(values, 0.9))

    def test_ignores_missing(self):
        """Missing values are excluded from the quantiles."""
        assert treatment_bounds([np.nan, 1.0, 3.0]) == (1.0, 3.0)
