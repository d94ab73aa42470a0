# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Runtime configuration shared by every pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .env import get_bool_env, get_env, get_float_env, get_int_env

DEFAULT_DATA_PATH = Path("Data") / "yelp_labelled.txt"
FEATURIZER_KINDS = ("tfidf", "hashing")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    """
    Fixed configuration for one pipeline run.

    Values are validated on construction; use ``load_config`` to build one
    from ``SENTIMENTAI_*`` environment variables.
    """

    data_path: Path = DEFAULT_DATA_PATH
    test_fraction: float = 0.2
    seed: int = 42
    featurizer: str = "tfidf"
    max_features: int = 60000
    hashing_features: int = 2**18
    c: float = 1.0
    max_iter: int = 1000
    threshold: float = 0.5
    log_level: str = "WARNING"
    console: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.data_path, str):
            object.__setattr__(self, "data_path", Path(self.data_path))
        if not (0.0 < self.test_fraction < 1.0):
            raise ValueError("test_fraction must be within (0.0, 1.0).")
        if self.featurizer not in FEATURIZER_KINDS:
            raise ValueError(f"featurizer must be one of {', '.join(FEATURIZER_KINDS)}.")
        if self.max_features <= 0 or self.hashing_features <= 0:
            raise ValueError("max_features and hashing_features must be positive.")
        if self.c <= 0.0:
            raise ValueError("c must be strictly positive.")
        if self.max_iter <= 0:
            raise ValueError("max_iter must be positive.")
        if not (0.0 <= self.threshold <= 1.0):
            raise ValueError("threshold must be within [0.0, 1.0].")
        object.__setattr__(self, "log_level", str(self.log_level).upper())
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}.")

    def with_overrides(self, **changes: Any) -> PipelineConfig:
        """Return a copy with the non-``None`` values of ``changes`` applied."""

        return replace(self, **{key: value for key, value in changes.items() if value is not None})


def load_config() -> PipelineConfig:
    defaults = PipelineConfig()
    return PipelineConfig(
        data_path=Path(get_env("SENTIMENTAI_DATA_PATH", str(defaults.data_path)) or defaults.data_path),
        test_fraction=get_float_env("SENTIMENTAI_TEST_FRACTION", defaults.test_fraction),
        seed=get_int_env("SENTIMENTAI_SEED", defaults.seed),
        featurizer=(get_env("SENTIMENTAI_FEATURIZER", defaults.featurizer) or defaults.featurizer).lower(),
        max_features=get_int_env("SENTIMENTAI_MAX_FEATURES", defaults.max_features),
        hashing_features=get_int_env("SENTIMENTAI_HASHING_FEATURES", defaults.hashing_features),
        c=get_float_env("SENTIMENTAI_C", defaults.c),
        max_iter=get_int_env("SENTIMENTAI_MAX_ITER", defaults.max_iter),
        threshold=get_float_env("SENTIMENTAI_THRESHOLD", defaults.threshold),
        log_level=(get_env("SENTIMENTAI_LOG_LEVEL", defaults.log_level) or defaults.log_level).upper(),
        console=get_bool_env("SENTIMENTAI_CONSOLE", defaults.console),
    )


__all__ = ["DEFAULT_DATA_PATH", "FEATURIZER_KINDS", "LOG_LEVELS", "PipelineConfig", "load_config"]
