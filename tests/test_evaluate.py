"""
Unit tests for evaluation metrics.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from sentimentai.evaluation.evaluate import compute_metrics, evaluate_model
from sentimentai.exceptions import DatasetFormatError
from sentimentai.schemas import SplitDataset, TrainedModel


class TestComputeMetrics:
    def test_perfect_predictions(self) -> None:
        metrics = compute_metrics(np.array([0, 0, 1, 1]), np.array([0.1, 0.2, 0.8, 0.9]))

        assert metrics.accuracy == 1.0
        assert metrics.auc == 1.0
        assert metrics.f1 == 1.0
        assert (metrics.tn, metrics.fp, metrics.fn, metrics.tp) == (2, 0, 0, 2)

    def test_threshold_changes_labels(self) -> None:
        metrics = compute_metrics(np.array([0, 1]), np.array([0.6, 0.7]), threshold=0.65)

        assert metrics.accuracy == 1.0

    def test_single_class_auc_is_zero(self) -> None:
        metrics = compute_metrics(np.array([1, 1, 1]), np.array([0.9, 0.4, 0.7]))

        assert metrics.auc == 0.0
        assert metrics.auprc == 0.0
        assert metrics.accuracy == pytest.approx(2 / 3)

    def test_no_positive_predictions_gives_zero_f1(self) -> None:
        metrics = compute_metrics(np.array([0, 1]), np.array([0.1, 0.2]))

        assert metrics.f1 == 0.0
        assert metrics.precision == 0.0


class TestEvaluateModel:
    def test_metrics_within_unit_interval(self, trained_model: TrainedModel, split: SplitDataset) -> None:
        metrics = evaluate_model(trained_model, split.test)

        for name, value in metrics.rates().items():
            assert 0.0 <= value <= 1.0, name
        assert metrics.log_loss >= 0.0
        assert metrics.tn + metrics.fp + metrics.fn + metrics.tp == split.test_rows

    def test_as_dict_is_flat_floats(self, trained_model: TrainedModel, split: SplitDataset) -> None:
        payload = evaluate_model(trained_model, split.test).as_dict()

        assert {"accuracy", "auc", "f1"} <= set(payload)
        assert all(isinstance(value, float) for value in payload.values())

    def test_empty_test_partition_raises(self, trained_model: TrainedModel) -> None:
        with pytest.raises(DatasetFormatError, match="empty"):
            evaluate_model(trained_model, pd.DataFrame(columns=["text", "label"]))
