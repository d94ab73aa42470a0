# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Sentiment AI package."""

from .config import PipelineConfig, load_config
from .evaluation.evaluate import evaluate_model
from .inference.predictor import SentimentPredictor, load_predictor
from .schemas import EvaluationMetrics, SentimentPrediction, SentimentRecord, SplitDataset, TrainedModel
from .training.dataset import load_data
from .training.trainer import train_model

__all__ = [
    "EvaluationMetrics",
    "PipelineConfig",
    "SentimentPrediction",
    "SentimentPredictor",
    "SentimentRecord",
    "SplitDataset",
    "TrainedModel",
    "evaluate_model",
    "load_config",
    "load_data",
    "load_predictor",
    "train_model",
]
