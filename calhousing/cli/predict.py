# calhousing/cli/predict.py

import argparse
import json
from pathlib import Path

from calhousing.data import load_housing_frame
from calhousing.logging_utils import configure_logging
from calhousing.predict import load_trained_model, predict_records


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run predictions with a trained housing price model."
    )
    parser.add_argument(
        "--model-name",
        default="california_rf",
        help="Name of the trained model directory under artifacts/pretrained/",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="JSON file with one feature record or a list of records.",
    )
    parser.add_argument(
        "--num-samples",
        type=int,
        default=5,
        help="Without --input, predict on this many rows of the training dataset.",
    )
    return parser.parse_args()


def main():
    configure_logging()
    args = parse_args()

    loaded = load_trained_model(args.model_name)

    if args.input is not None:
        payload = json.loads(args.input.read_text())
        records = payload if isinstance(payload, list) else [payload]
    else:
        frame = load_housing_frame(loaded.dataset or "california")
        records = frame.features.head(args.num_samples).to_dict(orient="records")

    preds = predict_records(loaded, records)

    output = {
        "model_name": args.model_name,
        "meta": loaded.meta,
        "n_samples": len(preds),
        "predictions": [{"predicted_price": p} for p in preds],
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
