# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
import math
from pathlib import Path

import pandas as pd
from sklearn.model_selection import train_test_split

from ..exceptions import DatasetAccessError, DatasetFormatError
from ..features import LABEL_COLUMN, TEXT_COLUMN
from ..schemas import SentimentRecord, SplitDataset

LOGGER = logging.getLogger(__name__)

POSITIVE_LABELS = {"1", "true", "positive"}
NEGATIVE_LABELS = {"0", "false", "negative"}


def _parse_label(raw: str, *, line_no: int, path: Path) -> bool:
    value = raw.strip().lower()
    if value in POSITIVE_LABELS:
        return True
    if value in NEGATIVE_LABELS:
        return False
    raise DatasetFormatError(
        f"{path}:{line_no}: unsupported label {raw!r}",
        context={"path": str(path), "line": line_no, "label": raw},
    )


def _read_text(path: Path) -> str:
    if not path.is_file():
        raise DatasetAccessError(f"Dataset not found: {path}", context={"path": str(path)})
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DatasetAccessError(f"Cannot read dataset {path}: {exc}", context={"path": str(path)}) from exc
    except UnicodeDecodeError as exc:
        raise DatasetFormatError(f"Dataset {path} is not valid UTF-8", context={"path": str(path)}) from exc


def load_records(path: Path) -> list[SentimentRecord]:
    """Read ``text<TAB>label`` lines, skipping blank ones."""

    path = Path(path)
    rows: list[SentimentRecord] = []
    for line_no, raw in enumerate(_read_text(path).splitlines(), start=1):
        if not raw.strip():
            continue
        columns = raw.split("\t")
        if len(columns) != 2:
            raise DatasetFormatError(
                f"{path}:{line_no}: expected 2 tab-separated columns, got {len(columns)}",
                context={"path": str(path), "line": line_no, "columns": len(columns)},
            )
        text, label = columns
        rows.append(SentimentRecord(text=text.strip(), label=_parse_label(label, line_no=line_no, path=path)))
    if not rows:
        raise DatasetFormatError(f"Dataset {path} contains no records", context={"path": str(path)})
    LOGGER.info("Loaded %d records from %s", len(rows), path)
    return rows


def to_dataframe(rows: list[SentimentRecord]) -> pd.DataFrame:
    data = [{TEXT_COLUMN: row.text, LABEL_COLUMN: row.label} for row in rows]
    return pd.DataFrame(data, columns=[TEXT_COLUMN, LABEL_COLUMN])


def split_dataset(df: pd.DataFrame, *, test_fraction: float = 0.2, seed: int = 42) -> SplitDataset:
    if not (0.0 < test_fraction < 1.0):
        raise ValueError("test_fraction must be within (0.0, 1.0).")
    if len(df) < 2:
        raise DatasetFormatError(
            f"Need at least 2 records to split, got {len(df)}",
            context={"rows": int(len(df))},
        )
    n_test = math.ceil(test_fraction * len(df))
    if n_test <= 0 or n_test >= len(df):
        raise DatasetFormatError(
            f"test_fraction={test_fraction} leaves an empty partition for {len(df)} records",
            context={"rows": int(len(df)), "test_fraction": float(test_fraction)},
        )
    counts = df[LABEL_COLUMN].value_counts()
    stratify = df[LABEL_COLUMN] if len(counts) >= 2 and int(counts.min()) >= 2 else None
    try:
        train, test = train_test_split(df, test_size=test_fraction, random_state=seed, stratify=stratify)
    except ValueError:
        if stratify is None:
            raise
        # too few rows per class for the requested holdout size
        train, test = train_test_split(df, test_size=test_fraction, random_state=seed)
    LOGGER.info("Split %d records into %d train / %d test", len(df), len(train), len(test))
    return SplitDataset(train=train.reset_index(drop=True), test=test.reset_index(drop=True))


def load_data(path: Path, *, test_fraction: float = 0.2, seed: int = 42) -> SplitDataset:
    return split_dataset(to_dataframe(load_records(path)), test_fraction=test_fraction, seed=seed)
