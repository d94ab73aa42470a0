# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

import joblib
import pandas as pd
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline

from ..config import PipelineConfig
from ..console import MLConsole
from ..exceptions import DatasetFormatError, ModelNotTrainedError
from ..features import LABEL_COLUMN, TEXT_COLUMN, build_featurizer
from ..schemas import TrainedModel

LOGGER = logging.getLogger(__name__)


def _timestamp_key() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def build_model(config: PipelineConfig) -> Pipeline:
    # liblinear with dual=True is dual coordinate descent on the L2 logistic loss
    return Pipeline(
        steps=[
            (
                "featurizer",
                build_featurizer(
                    config.featurizer,
                    max_features=config.max_features,
                    hashing_features=config.hashing_features,
                ),
            ),
            (
                "clf",
                LogisticRegression(
                    dual=True,
                    solver="liblinear",
                    C=config.c,
                    max_iter=config.max_iter,
                ),
            ),
        ]
    )


def train_model(train_df: pd.DataFrame, config: PipelineConfig, *, console: MLConsole | None = None) -> TrainedModel:
    if train_df.empty:
        raise DatasetFormatError("Training partition is empty")
    labels = train_df[LABEL_COLUMN].astype(bool)
    if labels.nunique() < 2:
        raise DatasetFormatError(
            "Training partition needs both positive and negative labels",
            context={"rows": int(len(train_df)), "positives": int(labels.sum())},
        )

    console = console or MLConsole(enabled=config.console)
    console.section("Create and Train the Model")
    LOGGER.info("Training %s featurizer + logistic regression on %d rows", config.featurizer, len(train_df))

    pipeline = build_model(config)
    pipeline.fit(train_df[TEXT_COLUMN].astype(str).tolist(), labels.to_numpy())

    console.section("End of training")
    LOGGER.info("Training finished")
    return TrainedModel(
        pipeline=pipeline,
        model_version=_timestamp_key(),
        featurizer=config.featurizer,
        train_rows=int(len(train_df)),
        created_at_utc=_iso_now(),
        threshold=float(config.threshold),
    )


def save_model(model: TrainedModel, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    joblib.dump(model, path)
    LOGGER.info("Saved model %s to %s", model.model_version, path)
    return path


def load_model(path: Path) -> TrainedModel:
    path = Path(path)
    if not path.exists():
        raise ModelNotTrainedError(f"Model file not found at {path}. Train the model first.", context={"path": str(path)})
    model = joblib.load(path)
    if not isinstance(model, TrainedModel):
        raise ModelNotTrainedError(f"Persisted model at {path} is invalid or corrupted.", context={"path": str(path)})
    return model
