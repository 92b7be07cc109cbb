"""Tests for dataset loading and request record conversion."""

import pandas as pd
import pytest

from calhousing.data import (
    FEATURE_NAMES,
    TARGET_NAME,
    load_housing_frame,
    records_to_frame,
    train_test_housing,
)


class TestSyntheticDataset:
    """Tests for the offline synthetic dataset."""

    def test_columns_match_feature_names(self) -> None:
        frame = load_housing_frame("synthetic", n_samples=50)
        assert tuple(frame.features.columns) == FEATURE_NAMES
        assert frame.target.name == TARGET_NAME
        assert len(frame.features) == 50

    def test_default_size(self) -> None:
        frame = load_housing_frame("synthetic")
        assert len(frame.features) == 1000

    def test_target_clipped_to_real_range(self) -> None:
        frame = load_housing_frame("synthetic", n_samples=500)
        assert frame.target.min() >= 0.15
        assert frame.target.max() <= 5.0

    def test_bedrooms_below_rooms(self) -> None:
        features = load_housing_frame("synthetic", n_samples=200).features
        assert (features["AveBedrms"] < features["AveRooms"]).all()

    def test_generation_is_seeded(self) -> None:
        a = load_housing_frame("synthetic", n_samples=30)
        b = load_housing_frame("synthetic", n_samples=30)
        pd.testing.assert_frame_equal(a.features, b.features)
        pd.testing.assert_series_equal(a.target, b.target)

    def test_unknown_dataset_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown dataset"):
            load_housing_frame("boston")

    @pytest.mark.parametrize("dataset", ["synthetic", "california"])
    @pytest.mark.parametrize("n_samples", [0, -5])
    def test_non_positive_size_raises(self, dataset: str, n_samples: int) -> None:
        with pytest.raises(ValueError, match="n_samples must be positive"):
            load_housing_frame(dataset, n_samples=n_samples)


class TestTrainTestSplit:
    """Tests for train_test_housing."""

    def test_split_sizes(self) -> None:
        splits = train_test_housing("synthetic", test_size=0.25, n_samples=200)
        assert len(splits.X_train) == 150
        assert len(splits.X_test) == 50
        assert len(splits.y_train) == 150
        assert len(splits.y_test) == 50


class TestRecordsToFrame:
    """Tests for converting API records into a model-ready frame."""

    def test_reorders_columns(self, sample_record) -> None:
        shuffled = dict(reversed(list(sample_record.items())))
        df = records_to_frame([shuffled])
        assert tuple(df.columns) == FEATURE_NAMES
        assert df.loc[0, "MedInc"] == pytest.approx(8.3252)

    def test_extra_keys_dropped(self, sample_record) -> None:
        df = records_to_frame([{**sample_record, "id": "block-1"}])
        assert "id" not in df.columns

    def test_numeric_strings_cast_to_float(self, sample_record) -> None:
        df = records_to_frame([{**sample_record, "HouseAge": "41"}])
        assert df.loc[0, "HouseAge"] == 41.0
        assert all(dtype == float for dtype in df.dtypes)

    def test_missing_feature_raises(self, sample_record) -> None:
        record = dict(sample_record)
        del record["Latitude"]
        with pytest.raises(ValueError, match="Missing feature\\(s\\): Latitude"):
            records_to_frame([record])

    def test_non_numeric_value_raises(self, sample_record) -> None:
        with pytest.raises(ValueError, match="Non-numeric"):
            records_to_frame([{**sample_record, "MedInc": "high"}])

    def test_null_value_raises(self, sample_record) -> None:
        with pytest.raises(ValueError, match="Missing value"):
            records_to_frame([{**sample_record, "AveOccup": None}])

    def test_empty_records_raise(self) -> None:
        with pytest.raises(ValueError, match="No records"):
            records_to_frame([])
