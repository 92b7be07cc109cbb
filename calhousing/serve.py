# calhousing/serve.py

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import List

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field, field_validator

from .config import served_model_name
from .data import FEATURE_NAMES
from .logging_utils import configure_logging
from .predict import LoadedModel, load_trained_model, predict_records

configure_logging()
_LOGGER = logging.getLogger(__name__)


# ---------- Request / Response schemas ----------

class HousingFeatures(BaseModel):
    """One census block group, as in the California housing table."""

    MedInc: float = Field(..., description="Median income in block group (tens of thousands USD)")
    HouseAge: float = Field(..., description="Median house age in block group")
    AveRooms: float = Field(..., description="Average number of rooms per household")
    AveBedrms: float = Field(..., description="Average number of bedrooms per household")
    Population: float = Field(..., description="Block group population")
    AveOccup: float = Field(..., description="Average number of household members")
    Latitude: float = Field(..., description="Block group latitude")
    Longitude: float = Field(..., description="Block group longitude")

    @field_validator(*FEATURE_NAMES, mode="before")
    @classmethod
    def reject_booleans(cls, value):
        # JSON true/false would otherwise pass as 1.0/0.0
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value


class PredictionResponse(BaseModel):
    # Median house value in units of $100,000
    predicted_price: float


class BatchPredictionRequest(BaseModel):
    instances: List[HousingFeatures] = Field(..., min_length=1)


class BatchPredictionResponse(BaseModel):
    model_name: str
    n_instances: int
    predictions: List[float]


# ---------- Model loading ----------

@lru_cache(maxsize=1)
def get_loaded_model() -> LoadedModel:
    """Load and cache the trained model specified by CALHOUSING_MODEL_NAME."""
    return load_trained_model(served_model_name())


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Deserialize once, before the first request
    try:
        loaded = get_loaded_model()
    except FileNotFoundError:
        _LOGGER.exception("Cannot start without model '%s'", served_model_name())
        raise
    _LOGGER.info("Serving model '%s' (dataset=%s)", loaded.name, loaded.dataset)
    yield


# ---------- FastAPI app ----------

app = FastAPI(title="California Housing Price API", lifespan=lifespan)


def _run_prediction(loaded: LoadedModel, instances: List[HousingFeatures]) -> List[float]:
    try:
        return predict_records(loaded, [inst.model_dump() for inst in instances])
    except Exception as e:
        _LOGGER.exception("Prediction failed")
        raise HTTPException(status_code=400, detail=f"Error during prediction: {e}")


@app.get("/health")
def health():
    try:
        loaded = get_loaded_model()
    except FileNotFoundError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {
        "status": "ok",
        "model_name": loaded.name,
        "dataset": loaded.dataset,
    }


@app.post("/predict", response_model=PredictionResponse)
def predict(
    features: HousingFeatures,
    loaded: LoadedModel = Depends(get_loaded_model),
):
    """
    Predict the median house value for one block group.

    Expects:
      {"MedInc": 8.3, "HouseAge": 41, "AveRooms": 6.98, "AveBedrms": 1.02,
       "Population": 322, "AveOccup": 2.55, "Latitude": 37.88, "Longitude": -122.23}
    """
    (price,) = _run_prediction(loaded, [features])
    return PredictionResponse(predicted_price=price)


@app.post("/predict/batch", response_model=BatchPredictionResponse)
def predict_batch(
    req: BatchPredictionRequest,
    loaded: LoadedModel = Depends(get_loaded_model),
):
    """Predict for several block groups in one call."""
    preds = _run_prediction(loaded, req.instances)
    return BatchPredictionResponse(
        model_name=loaded.name,
        n_instances=len(preds),
        predictions=preds,
    )
