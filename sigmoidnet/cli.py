"""Command that prints a stored network's predictions for rows of a CSV file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from sigmoidnet.csvdata import read_row
from sigmoidnet.dense import Dense
from sigmoidnet.predict import prediction


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sigmoidnet",
        description="Print a stored network's predictions next to the target values of a CSV file.",
    )
    parser.add_argument("--model", default="Model.txt", help="weight file to load")
    parser.add_argument(
        "--data", default="chess_positions.csv", help="CSV file with a header line"
    )
    parser.add_argument("--rows", type=int, default=20, help="number of data rows to predict")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Load the model, then print target and scaled prediction for each data row."""
    args = _parser().parse_args(argv)
    network = Dense()
    try:
        network.load_weights(args.model)
        for index in range(1, args.rows + 1):
            row = read_row(args.data, index)
            if not row:
                raise ValueError(f"{args.data} has no data row {index}")
            *inputs, target = row
            print(f"target value : {target:g}")
            output = prediction(network, inputs)
            print(f"prediction : {output[0] * 100:g}")
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0