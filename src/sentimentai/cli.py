# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import FEATURIZER_KINDS, PipelineConfig, load_config
from .console import MLConsole
from .evaluation.evaluate import evaluate_model
from .inference.predictor import SentimentPredictor
from .schemas import EvaluationMetrics, SentimentPrediction
from .training.dataset import load_data
from .training.trainer import save_model, train_model

SINGLE_SAMPLE = "This place is very good"
BATCH_SAMPLES = ("This was a horrible meal", "I love this spaghetti.")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Train, evaluate and run a binary sentiment classifier.")
    parser.add_argument("texts", nargs="*", help="Extra texts classified as a separate batch after the built-in samples")
    parser.add_argument("--data", type=Path, default=None, help="Labeled TSV file (text<TAB>label)")
    parser.add_argument("--test-fraction", type=float, default=None, help="Holdout fraction in (0, 1)")
    parser.add_argument("--seed", type=int, default=None, help="Train/test split seed")
    parser.add_argument("--featurizer", choices=FEATURIZER_KINDS, default=None, help="Text featurizer")
    parser.add_argument("--save-model", type=Path, default=None, help="Write the trained model to this joblib file")
    parser.add_argument("--quiet", action="store_true", help="Disable console output")
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        force=True,
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
    )


def report_metrics(console: MLConsole, metrics: EvaluationMetrics) -> None:
    console.metrics_table(metrics.rates(), title="Model quality metrics evaluation")
    console.info(f"LogLoss: {metrics.log_loss:.4f} | TN={metrics.tn} FP={metrics.fp} FN={metrics.fn} TP={metrics.tp}")


def run_pipeline(config: PipelineConfig, *, extra_texts: Sequence[str] = (), save_path: Path | None = None) -> dict[str, object]:
    """
    Run load, train, evaluate and predict once and return every stage's result.
    """

    console = MLConsole(enabled=config.console)
    console.banner()

    split = load_data(config.data_path, test_fraction=config.test_fraction, seed=config.seed)
    console.info(f"Loaded {split.train_rows + split.test_rows} records from {escape(str(config.data_path))}")

    model = train_model(split.train, config, console=console)

    console.section("Evaluating Model accuracy with Test data")
    metrics = evaluate_model(model, split.test)
    report_metrics(console, metrics)
    console.section("End of model evaluation")

    predictor = SentimentPredictor(model)

    console.section("Prediction Test of model with a single sample and test dataset")
    single = predictor.predict(SINGLE_SAMPLE)
    console.prediction_line(single)
    console.section("End of Predictions")

    console.section("Prediction Test of loaded model with multiple samples")
    batch: list[SentimentPrediction] = predictor.predict_batch(BATCH_SAMPLES)
    console.predictions(batch)
    console.section("End of predictions")

    extra: list[SentimentPrediction] = []
    if extra_texts:
        console.section("Prediction of command-line samples")
        extra = predictor.predict_batch(extra_texts)
        console.predictions(extra)
        console.section("End of command-line predictions")

    if save_path is not None:
        console.success(f"Model saved to {save_model(model, save_path)}")

    return {"split": split, "model": model, "metrics": metrics, "single": single, "batch": batch, "extra": extra}


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config = load_config().with_overrides(
        data_path=args.data,
        test_fraction=args.test_fraction,
        seed=args.seed,
        featurizer=args.featurizer,
        console=False if args.quiet else None,
    )
    configure_logging(config.log_level)
    run_pipeline(config, extra_texts=args.texts, save_path=args.save_model)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
