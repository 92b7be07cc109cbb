# calhousing/cli/serve.py

import argparse
import os

import uvicorn

from calhousing.config import log_level
from calhousing.logging_utils import configure_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the housing price model via FastAPI.")
    parser.add_argument(
        "--model-name",
        default="california_rf",
        help="Trained model directory under artifacts/pretrained/ to load.",
    )
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--log-level", default=log_level())
    return parser.parse_args()


def main():
    args = parse_args()

    # Tell calhousing.serve which model to load
    os.environ["CALHOUSING_MODEL_NAME"] = args.model_name
    os.environ["LOG_LEVEL"] = args.log_level
    configure_logging(args.log_level)

    uvicorn.run(
        "calhousing.serve:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
