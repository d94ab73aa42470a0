"""
Shared fixtures: a small labeled review corpus and a model trained on it.
"""

from __future__ import annotations

import itertools
from pathlib import Path

import pytest

from sentimentai.config import PipelineConfig
from sentimentai.schemas import SplitDataset, TrainedModel
from sentimentai.training.dataset import load_data
from sentimentai.training.trainer import train_model

DISHES = ["pasta", "pizza", "burger", "salad", "soup", "steak", "sushi", "spaghetti"]
POSITIVE = ["I loved the {}", "The {} was amazing", "Great {} and friendly staff", "Really good {}, will come back", "Delicious {}"]
NEGATIVE = ["I hated the {}", "The {} was horrible", "Terrible {} and rude staff", "Awful {}, never coming back", "Disgusting {}"]


def _corpus_lines() -> list[str]:
    lines: list[str] = []
    for template, dish in itertools.product(POSITIVE, DISHES):
        lines.append(f"{template.format(dish)}\t1")
    for template, dish in itertools.product(NEGATIVE, DISHES):
        lines.append(f"{template.format(dish)}\t0")
    return lines


@pytest.fixture
def corpus_path(tmp_path: Path) -> Path:
    """Write an 80-line tab-separated corpus (40 positive, 40 negative)."""
    path = tmp_path / "reviews.txt"
    path.write_text("\n".join(_corpus_lines()) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def config(corpus_path: Path) -> PipelineConfig:
    return PipelineConfig(data_path=corpus_path, console=False)


@pytest.fixture
def split(config: PipelineConfig) -> SplitDataset:
    return load_data(config.data_path, test_fraction=config.test_fraction, seed=config.seed)


@pytest.fixture
def trained_model(split: SplitDataset, config: PipelineConfig) -> TrainedModel:
    return train_model(split.train, config)
