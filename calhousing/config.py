# calhousing/config.py

from pathlib import Path
import os

# Root of the project; overridable via env for containers
PROJECT_ROOT = Path(
    os.getenv("CALHOUSING_ROOT", Path(__file__).resolve().parents[1])
)

# Base artifacts directory (models, metadata)
ARTIFACTS_DIR = PROJECT_ROOT / "artifacts"

# Where trained models / artifacts are stored
PRETRAINED_DIR = ARTIFACTS_DIR / "pretrained"

# scikit-learn dataset cache; None lets sklearn use ~/scikit_learn_data
SKLEARN_DATA_HOME = os.getenv("CALHOUSING_SKLEARN_DATA") or None

# Global random seed (overridable via env)
RANDOM_SEED = int(os.getenv("CALHOUSING_RANDOM_SEED", "42"))

# Env lookups made at call time


def served_model_name() -> str:
    """Model directory under PRETRAINED_DIR that the API serves."""
    return os.getenv("CALHOUSING_MODEL_NAME", "california_rf")


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "info")
