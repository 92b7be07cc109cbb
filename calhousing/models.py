# calhousing/models.py

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List

from sklearn.ensemble import GradientBoostingRegressor, RandomForestRegressor
from sklearn.linear_model import LinearRegression, Ridge
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from .config import RANDOM_SEED


class ModelFamily(str, Enum):
    RANDOM_FOREST = "random_forest"
    LINEAR = "linear"
    RIDGE = "ridge"
    GRADIENT_BOOSTING = "gradient_boosting"


@dataclass
class ModelSpec:
    """
    High-level description of a regression model.
    - family: which estimator to build
    - params: keyword arguments passed to the estimator
    """
    family: ModelFamily
    params: Dict[str, Any] = field(default_factory=dict)


# short, user-facing name -> family
_ALIASES = {
    "rf": ModelFamily.RANDOM_FOREST,
    "random_forest": ModelFamily.RANDOM_FOREST,
    "linear": ModelFamily.LINEAR,
    "linreg": ModelFamily.LINEAR,
    "ridge": ModelFamily.RIDGE,
    "gbr": ModelFamily.GRADIENT_BOOSTING,
    "gradient_boosting": ModelFamily.GRADIENT_BOOSTING,
}


def available_models() -> List[str]:
    return sorted(_ALIASES)


def get_model_spec(name: str) -> ModelSpec:
    """
    Map a short, user-facing model name to a full spec.
    This is where you define *all* supported models.
    """
    family = _ALIASES.get(name)

    if family == ModelFamily.RANDOM_FOREST:
        return ModelSpec(
            family=family,
            params={"n_estimators": 100, "random_state": RANDOM_SEED, "n_jobs": -1},
        )

    if family == ModelFamily.RIDGE:
        return ModelSpec(family=family, params={"alpha": 1.0})

    if family == ModelFamily.GRADIENT_BOOSTING:
        return ModelSpec(family=family, params={"random_state": RANDOM_SEED})

    if family == ModelFamily.LINEAR:
        return ModelSpec(family=family)

    raise ValueError(f"Unknown model name: {name}")


def create_model(name: str):
    """
    Create an unfitted regressor for the given model name.

    Linear models are wrapped with a StandardScaler; tree ensembles
    take the raw features.
    """
    spec = get_model_spec(name)

    if spec.family == ModelFamily.RANDOM_FOREST:
        return RandomForestRegressor(**spec.params)

    if spec.family == ModelFamily.GRADIENT_BOOSTING:
        return GradientBoostingRegressor(**spec.params)

    if spec.family == ModelFamily.LINEAR:
        return Pipeline(
            steps=[
                ("scaler", StandardScaler()),
                ("model", LinearRegression(**spec.params)),
            ]
        )

    if spec.family == ModelFamily.RIDGE:
        return Pipeline(
            steps=[
                ("scaler", StandardScaler()),
                ("model", Ridge(**spec.params)),
            ]
        )

    raise ValueError(f"Unhandled model family: {spec.family}")
