# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import math

import numpy as np
import pandas as pd
from sklearn.metrics import (
    accuracy_score,
    average_precision_score,
    confusion_matrix,
    f1_score,
    log_loss,
    precision_score,
    recall_score,
    roc_auc_score,
)

from ..exceptions import DatasetFormatError
from ..features import LABEL_COLUMN, TEXT_COLUMN
from ..schemas import EvaluationMetrics, TrainedModel


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _safe_auc(y_true: np.ndarray, y_prob: np.ndarray) -> float:
    if len(np.unique(y_true)) < 2:
        return 0.0
    return _finite_or_zero(float(roc_auc_score(y_true, y_prob)))


def _safe_auprc(y_true: np.ndarray, y_prob: np.ndarray) -> float:
    if len(np.unique(y_true)) < 2:
        return 0.0
    return _finite_or_zero(float(average_precision_score(y_true, y_prob)))


def compute_metrics(y_true: np.ndarray, y_prob: np.ndarray, threshold: float = 0.5) -> EvaluationMetrics:
    y_true = np.asarray(y_true, dtype=int)
    y_prob = np.clip(np.asarray(y_prob, dtype=float), 0.0, 1.0)
    y_pred = (y_prob >= threshold).astype(int)
    tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels=[0, 1]).ravel()
    return EvaluationMetrics(
        accuracy=float(accuracy_score(y_true, y_pred)),
        auc=_safe_auc(y_true, y_prob),
        f1=float(f1_score(y_true, y_pred, zero_division=0)),
        precision=float(precision_score(y_true, y_pred, zero_division=0)),
        recall=float(recall_score(y_true, y_pred, zero_division=0)),
        auprc=_safe_auprc(y_true, y_prob),
        log_loss=float(log_loss(y_true, y_prob, labels=[0, 1])),
        tn=int(tn),
        fp=int(fp),
        fn=int(fn),
        tp=int(tp),
    )


def evaluate_model(model: TrainedModel, test_df: pd.DataFrame) -> EvaluationMetrics:
    """Score ``test_df`` with ``model`` and compare against its ground-truth labels."""

    if test_df.empty:
        raise DatasetFormatError("Test partition is empty")
    texts = test_df[TEXT_COLUMN].astype(str).tolist()
    y_true = test_df[LABEL_COLUMN].astype(bool).astype(int).to_numpy()
    probs = model.pipeline.predict_proba(texts)[:, 1]
    return compute_metrics(y_true, probs, threshold=model.threshold)


__all__ = ["compute_metrics", "evaluate_model"]
