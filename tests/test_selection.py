"""Tests for the Information Value table."""

import numpy as np
import pandas as pd
import pytest

from woescore import information_value_table, predictive_power, score_features, score_variable


class TestPredictivePower:
    """Test cases for predictive_power bands."""

    @pytest.mark.parametrize(
        "iv,label",
        [
            (0.0, "useless"),
            (0.019, "useless"),
            (0.02, "weak"),
            (0.099, "weak"),
            (0.1, "medium"),
            (0.3, "strong"),
            (0.5, "suspicious"),
            (2.0, "suspicious"),
        ],
    )
    def test_bands(self, iv, label):
        assert predictive_power(iv) == label


class TestInformationValueTable:
    """Test cases for information_value_table and score_features."""

    @pytest.fixture
    def frame(self):
        rng = np.random.default_rng(21)
        n_samples = 2000
        strong = rng.choice(["low", "mid", "high"], n_samples)
        noise = rng.choice(["x", "y"], n_samples)
        p_bad = pd.Series(strong).map({"low": 0.05, "mid": 0.2, "high": 0.5}).to_numpy()
        return pd.DataFrame(
            {"strong": strong, "noise": noise, "bad": rng.binomial(1, p_bad)}
        )

    def test_score_features_skips_target(self, frame):
        scores = score_features(frame, target="bad")

        assert set(scores) == {"strong", "noise"}
        assert scores["strong"].feature == "strong"

    def test_table_sorted_by_iv(self, frame):
        table = information_value_table(score_features(frame, target="bad"))

        assert table.columns.tolist() == [
            "feature",
            "iv",
            "efficiency",
            "n_levels",
            "predictive_power",
            "low_iv",
        ]
        assert table["feature"].tolist() == ["strong", "noise"]
        assert table["iv"].is_monotonic_decreasing

    def test_low_iv_flag(self, frame):
        table = information_value_table(score_features(frame, target="bad")).set_index(
            "feature"
        )

        assert not table.loc["strong", "low_iv"]
        assert table.loc["noise", "low_iv"]
        assert table.loc["noise", "predictive_power"] == "useless"

    def test_custom_threshold(self, frame):
        scores = score_features(frame, target="bad")
        table = information_value_table(scores, low_iv_threshold=10.0)

        assert table["low_iv"].all()

    def test_accepts_iterable(self, two_level_scenario):
        levels, target = two_level_scenario
        table = information_value_table([score_variable(levels, target, feature="f")])

        assert table["feature"].tolist() == ["f"]
        assert table["n_levels"].tolist() == [2]

    def test_empty(self):
        table = information_value_table({})
        assert table.empty
