# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re
from collections.abc import Iterable

from sklearn.feature_extraction.text import HashingVectorizer, TfidfTransformer, TfidfVectorizer
from sklearn.pipeline import FeatureUnion, Pipeline

WHITESPACE_RE = re.compile(r"\s+")

TEXT_COLUMN = "text"
LABEL_COLUMN = "label"


def normalize_text(value: object) -> str:
    return WHITESPACE_RE.sub(" ", str(value or "")).strip().lower()


def normalize_many(values: Iterable[object]) -> list[str]:
    return [normalize_text(value) for value in values]


def _tfidf_featurizer(max_features: int) -> FeatureUnion:
    # word uni/bi-grams plus char tri-grams, each L2 normalized
    return FeatureUnion(
        transformer_list=[
            (
                "word_tfidf",
                TfidfVectorizer(
                    analyzer="word",
                    ngram_range=(1, 2),
                    max_features=max_features,
                    preprocessor=normalize_text,
                    token_pattern=r"(?u)\b\w+\b",
                ),
            ),
            (
                "char_tfidf",
                TfidfVectorizer(
                    analyzer="char_wb",
                    ngram_range=(3, 3),
                    max_features=max_features,
                    preprocessor=normalize_text,
                ),
            ),
        ]
    )


def _hashing_featurizer(n_features: int) -> Pipeline:
    return Pipeline(
        steps=[
            (
                "hashing",
                HashingVectorizer(
                    analyzer="word",
                    ngram_range=(1, 2),
                    n_features=n_features,
                    alternate_sign=False,
                    norm=None,
                    preprocessor=normalize_text,
                    token_pattern=r"(?u)\b\w+\b",
                ),
            ),
            ("tfidf", TfidfTransformer()),
        ]
    )


def build_featurizer(kind: str = "tfidf", *, max_features: int = 60000, hashing_features: int = 2**18):
    """
    Return an unfitted transformer mapping raw strings to a sparse feature matrix.

    ``tfidf`` learns a vocabulary from the training texts; ``hashing`` has a
    fixed dimensionality and only learns the IDF weights.
    """

    if kind == "tfidf":
        return _tfidf_featurizer(max_features)
    if kind == "hashing":
        return _hashing_featurizer(hashing_features)
    raise ValueError(f"Unknown featurizer: {kind!r}")
