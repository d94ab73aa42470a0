# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Exception hierarchy for the sentiment pipeline."""

from __future__ import annotations

from typing import Any


class SentimentAIError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class DatasetAccessError(SentimentAIError, FileNotFoundError):
    """Raised when the labeled data file cannot be read."""


class DatasetFormatError(SentimentAIError, ValueError):
    """Raised when a data file or partition does not match the expected schema."""


class ModelNotTrainedError(SentimentAIError, RuntimeError):
    """Raised when a model artifact is missing or invalid."""


__all__ = ["SentimentAIError", "DatasetAccessError", "DatasetFormatError", "ModelNotTrainedError"]
