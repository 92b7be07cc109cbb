# calhousing/predict.py

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import numpy as np
import pandas as pd
from joblib import load

from .config import PRETRAINED_DIR
from .data import FEATURE_NAMES, records_to_frame

_LOGGER = logging.getLogger(__name__)


@dataclass
class LoadedModel:
    model: Any
    meta: Dict[str, Any]
    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def dataset(self) -> Optional[str]:
        """
        Dataset name from metadata.

        Priority:
        1. meta["extra"]["dataset"]
        2. meta["config"]["dataset"]
        """
        extra = self.meta.get("extra", {})
        if isinstance(extra, dict) and "dataset" in extra:
            return extra["dataset"]

        cfg = self.meta.get("config", {})
        if isinstance(cfg, dict) and "dataset" in cfg:
            return cfg["dataset"]

        return None

    @property
    def feature_names(self) -> List[str]:
        extra = self.meta.get("extra", {})
        if isinstance(extra, dict) and extra.get("feature_names"):
            return list(extra["feature_names"])
        return list(FEATURE_NAMES)


def load_trained_model(name: str, pretrained_dir: Optional[Path] = None) -> LoadedModel:
    """
    Load a trained model and its metadata from <pretrained_dir>/<name>/.

    Assumes:
      - model.joblib
      - meta.json  (optional, but recommended)
    """
    model_dir = Path(pretrained_dir or PRETRAINED_DIR) / name
    model_fp = model_dir / "model.joblib"
    meta_fp = model_dir / "meta.json"

    if not model_fp.exists():
        raise FileNotFoundError(f"Model file not found: {model_fp}")

    model = load(model_fp)

    meta: Dict[str, Any] = {}
    if meta_fp.exists():
        try:
            meta = json.loads(meta_fp.read_text())
        except (OSError, ValueError) as e:
            _LOGGER.warning("Ignoring unreadable metadata %s: %s", meta_fp, e)
            meta = {}

    _LOGGER.info("Loaded model %s from %s", name, model_dir)
    return LoadedModel(model=model, meta=meta, path=model_dir)


def predict_dataframe(loaded: LoadedModel, df: pd.DataFrame) -> np.ndarray:
    """
    Run predictions on a pandas DataFrame using the loaded model.

    Columns are reordered to the order the model was fitted on.
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"Expected pandas DataFrame, got {type(df)}")

    return loaded.model.predict(df[loaded.feature_names])


def predict_records(loaded: LoadedModel, records: Iterable[Dict[str, Any]]) -> List[float]:
    """Predict prices for a list of feature dicts."""
    df = records_to_frame(records, loaded.feature_names)
    return [float(p) for p in predict_dataframe(loaded, df)]
