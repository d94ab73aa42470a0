# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

import pandas as pd


@dataclass(frozen=True, slots=True)
class SentimentRecord:
    text: str
    label: bool | None = None


@dataclass(frozen=True, slots=True)
class SentimentPrediction:
    text: str
    prediction: bool
    probability: float
    score: float = 0.0

    @property
    def sentiment(self) -> str:
        return "Positive" if self.prediction else "Negative"


@dataclass(frozen=True, slots=True, eq=False)
class SplitDataset:
    train: pd.DataFrame
    test: pd.DataFrame

    @property
    def train_rows(self) -> int:
        return int(len(self.train))

    @property
    def test_rows(self) -> int:
        return int(len(self.test))


@dataclass(frozen=True)
class TrainedModel:
    """Fitted featurizer + classifier pipeline and the metadata of its training run."""

    pipeline: Any
    model_version: str
    featurizer: str
    train_rows: int
    created_at_utc: str
    threshold: float = 0.5


@dataclass(frozen=True, slots=True)
class EvaluationMetrics:
    accuracy: float
    auc: float
    f1: float
    precision: float = 0.0
    recall: float = 0.0
    auprc: float = 0.0
    log_loss: float = 0.0
    tn: int = 0
    fp: int = 0
    fn: int = 0
    tp: int = 0

    def as_dict(self) -> dict[str, float]:
        return {key: float(value) for key, value in asdict(self).items()}

    def rates(self) -> dict[str, float]:
        """Metrics bounded to [0, 1], keyed the way the console prints them."""

        return {
            "Accuracy": self.accuracy,
            "Auc": self.auc,
            "F1Score": self.f1,
            "Precision": self.precision,
            "Recall": self.recall,
            "Auprc": self.auprc,
        }
