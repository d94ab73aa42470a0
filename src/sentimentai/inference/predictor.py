# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import numpy as np

from ..schemas import SentimentPrediction, TrainedModel
from ..training.trainer import load_model


class SentimentPredictor:
    def __init__(self, model: TrainedModel) -> None:
        self.model = model

    @property
    def model_version(self) -> str:
        return self.model.model_version

    def predict(self, text: str) -> SentimentPrediction:
        return self.predict_batch([text])[0]

    def predict_batch(self, texts: Sequence[str]) -> list[SentimentPrediction]:
        items = [str(text) for text in texts]
        if not items:
            return []
        pipeline = self.model.pipeline
        probs = np.clip(pipeline.predict_proba(items)[:, 1], 0.0, 1.0)
        scores = pipeline.decision_function(items)
        threshold = self.model.threshold
        return [
            SentimentPrediction(text=text, prediction=bool(prob >= threshold), probability=float(prob), score=float(score))
            for text, prob, score in zip(items, probs, scores)
        ]


def load_predictor(path: Path) -> SentimentPredictor:
    return SentimentPredictor(load_model(path))
