# calhousing/cli/train.py

import argparse
import json

from calhousing.data import DATASETS
from calhousing.logging_utils import configure_logging
from calhousing.models import available_models
from calhousing.train import TrainConfig, train


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Train a California housing price model."
    )

    parser.add_argument(
        "--dataset",
        choices=list(DATASETS),
        default="california",
        help="Which dataset to train on.",
    )

    parser.add_argument(
        "--model-name",
        choices=available_models(),
        default="rf",
        help="Model name (defined in calhousing.models).",
    )

    parser.add_argument(
        "--n-samples",
        type=int,
        default=None,
        help="Subsample / generate this many rows (default: whole table, 1000 for synthetic).",
    )

    parser.add_argument(
        "--test-size",
        type=float,
        default=0.2,
        help="Fraction of data to use as test split.",
    )

    parser.add_argument(
        "--save-model-name",
        default="california_rf",
        help="Name of folder under artifacts/pretrained/ to store the trained model.",
    )

    return parser.parse_args()


def main():
    configure_logging()
    args = parse_args()

    cfg = TrainConfig(
        dataset=args.dataset,
        model_name=args.model_name,
        n_samples=args.n_samples,
        test_size=args.test_size,
        save_model_name=args.save_model_name,
    )

    results = train(cfg)
    print(json.dumps(results, indent=2))


if __name__ == "__main__":
    main()
