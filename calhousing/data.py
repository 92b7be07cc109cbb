# calhousing/data.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

import numpy as np
import pandas as pd
from sklearn.datasets import fetch_california_housing
from sklearn.model_selection import train_test_split

from .config import RANDOM_SEED, SKLEARN_DATA_HOME

_LOGGER = logging.getLogger(__name__)


# ---------- Schema ----------

# Column order the estimators are fitted on
FEATURE_NAMES = (
    "MedInc",
    "HouseAge",
    "AveRooms",
    "AveBedrms",
    "Population",
    "AveOccup",
    "Latitude",
    "Longitude",
)

# Median house value, in units of $100,000
TARGET_NAME = "MedHouseVal"

DATASETS = ("california", "synthetic")


# ---------- Simple containers ----------

@dataclass
class HousingFrame:
    features: pd.DataFrame   # X
    target: pd.Series        # y


@dataclass
class HousingSplits:
    X_train: pd.DataFrame
    X_test: pd.DataFrame
    y_train: pd.Series
    y_test: pd.Series


# ---------- Loaders ----------

def _load_california(n_samples: Optional[int] = None) -> HousingFrame:
    """
    Load the California housing census table through scikit-learn.

    The first call downloads the data into the sklearn cache.
    """
    bunch = fetch_california_housing(data_home=SKLEARN_DATA_HOME, as_frame=True)
    df = bunch.frame

    if n_samples is not None and n_samples < len(df):
        df = df.sample(n=n_samples, random_state=RANDOM_SEED)

    return HousingFrame(
        features=df[list(FEATURE_NAMES)].astype(float),
        target=df[TARGET_NAME].astype(float).rename(TARGET_NAME),
    )


def _load_synthetic(n_samples: Optional[int] = None) -> HousingFrame:
    """
    Generate an offline stand-in for the California table.

    Feature ranges follow the real census blocks; the target is a noisy,
    mostly monotone function of income, age, rooms, occupancy and location,
    clipped to the range of the real target.
    """
    n = 1000 if n_samples is None else n_samples
    rng = np.random.default_rng(RANDOM_SEED)

    med_inc = rng.uniform(0.5, 15.0, n)
    house_age = rng.integers(1, 53, n).astype(float)
    ave_rooms = rng.uniform(3.0, 8.0, n)
    # bedrooms are always a fraction of rooms
    ave_bedrms = ave_rooms * rng.uniform(0.18, 0.25, n)
    population = rng.uniform(100.0, 5000.0, n)
    ave_occup = rng.uniform(1.5, 5.0, n)
    latitude = rng.uniform(32.5, 42.0, n)
    longitude = rng.uniform(-124.3, -114.3, n)

    target = (
        0.4 * med_inc
        + 0.008 * house_age
        + 0.05 * ave_rooms
        - 0.05 * ave_occup
        - 0.03 * (latitude - 34.0)
        - 0.02 * (longitude + 118.0)
        + rng.normal(0.0, 0.2, n)
    )

    features = pd.DataFrame(
        {
            "MedInc": med_inc,
            "HouseAge": house_age,
            "AveRooms": ave_rooms,
            "AveBedrms": ave_bedrms,
            "Population": population,
            "AveOccup": ave_occup,
            "Latitude": latitude,
            "Longitude": longitude,
        },
        columns=list(FEATURE_NAMES),
    )
    return HousingFrame(
        features=features,
        target=pd.Series(np.clip(target, 0.15, 5.0), name=TARGET_NAME),
    )


def load_housing_frame(
    dataset: str = "california",
    n_samples: Optional[int] = None,
) -> HousingFrame:
    """
    Load (X, y) for the given dataset name ("california" or "synthetic").
    """
    if n_samples is not None and n_samples < 1:
        raise ValueError(f"n_samples must be positive, got {n_samples}")

    if dataset == "california":
        frame = _load_california(n_samples)
    elif dataset == "synthetic":
        frame = _load_synthetic(n_samples)
    else:
        raise ValueError(f"Unknown dataset: {dataset}")

    _LOGGER.info("Loaded %s dataset: %d rows", dataset, len(frame.features))
    return frame


def train_test_housing(
    dataset: str = "california",
    test_size: float = 0.2,
    n_samples: Optional[int] = None,
) -> HousingSplits:
    """
    Split housing data into train/test sets.
    """
    frame = load_housing_frame(dataset, n_samples=n_samples)

    X_train, X_test, y_train, y_test = train_test_split(
        frame.features,
        frame.target,
        test_size=test_size,
        random_state=RANDOM_SEED,
    )

    return HousingSplits(
        X_train=X_train,
        X_test=X_test,
        y_train=y_train,
        y_test=y_test,
    )


# ---------- Request records ----------

def records_to_frame(
    records: Iterable[Dict[str, Any]],
    feature_names: Iterable[str] = FEATURE_NAMES,
) -> pd.DataFrame:
    """
    Turn feature dicts into a float frame with columns in model order.

    Extra keys are dropped. Missing columns or non-numeric values
    raise ValueError.
    """
    columns: List[str] = list(feature_names)
    df = pd.DataFrame(list(records))

    if df.empty:
        raise ValueError("No records provided.")

    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"Missing feature(s): {', '.join(missing)}")

    try:
        df = df[columns].astype(float)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Non-numeric feature value: {e}") from e

    if df.isna().any().any():
        bad = df.columns[df.isna().any()].tolist()
        raise ValueError(f"Missing value for feature(s): {', '.join(bad)}")

    return df
