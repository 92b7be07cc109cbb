"""Shared pytest fixtures.

Models are trained on the synthetic dataset so the suite never needs
network access.
"""

from pathlib import Path
from typing import Any, Dict

import pytest

from calhousing.predict import LoadedModel, load_trained_model
from calhousing.train import TrainConfig, train

MODEL_NAME = "test_synthetic_rf"


@pytest.fixture(scope="session")
def pretrained_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Artifact directory holding one small trained model."""
    root = tmp_path_factory.mktemp("pretrained")
    train(
        TrainConfig(
            dataset="synthetic",
            model_name="rf",
            n_samples=400,
            save_model_name=MODEL_NAME,
        ),
        pretrained_dir=root,
    )
    return root


@pytest.fixture(scope="session")
def loaded_model(pretrained_dir: Path) -> LoadedModel:
    return load_trained_model(MODEL_NAME, pretrained_dir=pretrained_dir)


@pytest.fixture
def sample_record() -> Dict[str, Any]:
    """First row of the California housing table."""
    return {
        "MedInc": 8.3252,
        "HouseAge": 41.0,
        "AveRooms": 6.984127,
        "AveBedrms": 1.023810,
        "Population": 322.0,
        "AveOccup": 2.555556,
        "Latitude": 37.88,
        "Longitude": -122.23,
    }
