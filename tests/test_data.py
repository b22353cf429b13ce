"""Tests for CSV loading."""

import pandas as pd
import pytest

from woescore import InputShapeError, load_dataset


class TestLoadDataset:
    """Test cases for load_dataset."""

    def test_loads_and_casts_target(self, tmp_path):
        path = tmp_path / "loans.csv"
        pd.DataFrame({"amount": [1000, 2500, 400], "bad": [0.0, 1.0, 0.0]}).to_csv(
            path, index=False
        )

        df = load_dataset(path)

        assert df.shape == (3, 2)
        assert df["bad"].tolist() == [0, 1, 0]
        assert pd.api.types.is_integer_dtype(df["bad"])

    def test_custom_target_and_kwargs(self, tmp_path):
        path = tmp_path / "loans.csv"
        path.write_text("amount;default\n10;1\n20;0\n")

        df = load_dataset(path, target="default", sep=";")

        assert df["default"].tolist() == [1, 0]

    def test_missing_target_column(self, tmp_path):
        path = tmp_path / "loans.csv"
        pd.DataFrame({"amount": [1, 2]}).to_csv(path, index=False)

        with pytest.raises(KeyError, match="bad"):
            load_dataset(path)

    def test_non_binary_target(self, tmp_path):
        path = tmp_path / "loans.csv"
        pd.DataFrame({"amount": [1, 2], "bad": [0, 3]}).to_csv(path, index=False)

        with pytest.raises(InputShapeError):
            load_dataset(path)
