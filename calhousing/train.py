# calhousing/train.py

import json
import logging
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
from joblib import dump
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from .config import PRETRAINED_DIR
from .data import FEATURE_NAMES, TARGET_NAME, train_test_housing
from .models import create_model

_LOGGER = logging.getLogger(__name__)


@dataclass
class TrainConfig:
    # What dataset to train on
    # - "california": the census housing table fetched by scikit-learn
    # - "synthetic": offline stand-in with the same columns
    dataset: str = "california"

    # Model choice (resolved via models.py)
    model_name: str = "rf"

    # Optional subsample size; None uses the whole table
    n_samples: Optional[int] = None

    test_size: float = 0.2
    save_model_name: str = "california_rf"  # folder under artifacts/pretrained


def evaluate(model, X_test, y_test) -> Dict[str, float]:
    """Regression metrics on a held-out split."""
    y_pred = model.predict(X_test)
    return {
        "r2": float(r2_score(y_test, y_pred)),
        "rmse": float(np.sqrt(mean_squared_error(y_test, y_pred))),
        "mae": float(mean_absolute_error(y_test, y_pred)),
    }


def train(config: TrainConfig, pretrained_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    High-level training entrypoint.

    - Loads and splits the chosen dataset
    - Fits the chosen regressor and scores it on the test split
    - Saves model + metadata to <pretrained_dir>/<save_model_name>/
    - Returns a dict with model_path, config, metrics, extra
    """
    if not 0.0 < config.test_size < 1.0:
        raise ValueError(f"test_size must be in (0, 1), got {config.test_size}")

    _LOGGER.info(
        "Training %s on %s dataset (test_size=%s)",
        config.model_name, config.dataset, config.test_size,
    )

    splits = train_test_housing(
        dataset=config.dataset,
        test_size=config.test_size,
        n_samples=config.n_samples,
    )

    model = create_model(config.model_name)
    model.fit(splits.X_train, splits.y_train)

    metrics = evaluate(model, splits.X_test, splits.y_test)
    _LOGGER.info(
        "Test metrics: r2=%.4f rmse=%.4f mae=%.4f",
        metrics["r2"], metrics["rmse"], metrics["mae"],
    )

    extra = {
        "dataset": config.dataset,
        "feature_names": list(FEATURE_NAMES),
        "target_name": TARGET_NAME,
        "n_train_rows": int(splits.X_train.shape[0]),
        "n_test_rows": int(splits.X_test.shape[0]),
        "trained_at": datetime.now(timezone.utc).isoformat(),
    }

    # Prepare directory for saving
    model_dir = Path(pretrained_dir or PRETRAINED_DIR) / config.save_model_name
    model_dir.mkdir(parents=True, exist_ok=True)

    model_fp = model_dir / "model.joblib"
    meta_fp = model_dir / "meta.json"

    dump(model, model_fp)

    meta = {
        "config": asdict(config),
        "metrics": metrics,
        "extra": extra,
    }
    meta_fp.write_text(json.dumps(meta, indent=2))
    _LOGGER.info("Saved model to %s", model_fp)

    return {
        "model_path": str(model_fp),
        "config": meta["config"],
        "metrics": metrics,
        "extra": extra,
    }
