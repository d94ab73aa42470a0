"""
Unit tests for single and batch inference.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from sentimentai.inference.predictor import SentimentPredictor, load_predictor
from sentimentai.schemas import SentimentPrediction, TrainedModel
from sentimentai.training.trainer import save_model


class TestSentimentPredictor:
    @pytest.fixture
    def predictor(self, trained_model: TrainedModel) -> SentimentPredictor:
        return SentimentPredictor(trained_model)

    def test_single_prediction_fields(self, predictor: SentimentPredictor) -> None:
        result = predictor.predict("This place is very good")

        assert isinstance(result, SentimentPrediction)
        assert result.text == "This place is very good"
        assert isinstance(result.prediction, bool)
        assert isinstance(result.probability, float)
        assert 0.0 <= result.probability <= 1.0
        assert result.sentiment in {"Positive", "Negative"}

    def test_batch_preserves_order(self, predictor: SentimentPredictor) -> None:
        texts = ["This was a horrible meal", "I love this spaghetti."]

        results = predictor.predict_batch(texts)

        assert [result.text for result in results] == texts

    def test_empty_batch_returns_empty_list(self, predictor: SentimentPredictor) -> None:
        assert predictor.predict_batch([]) == []

    def test_single_matches_batch(self, predictor: SentimentPredictor) -> None:
        texts = ["The sushi was amazing", "Rude staff and awful soup", "okay"]
        batch = predictor.predict_batch(texts)

        for text, from_batch in zip(texts, batch):
            single = predictor.predict(text)
            assert single.prediction == from_batch.prediction
            assert single.probability == pytest.approx(from_batch.probability)
            assert single.score == pytest.approx(from_batch.score)

    def test_prediction_follows_threshold(self, predictor: SentimentPredictor) -> None:
        for result in predictor.predict_batch(["Delicious pizza", "Disgusting burger"]):
            assert result.prediction == (result.probability >= predictor.model.threshold)

    def test_learns_obvious_sentiment(self, predictor: SentimentPredictor) -> None:
        positive, negative = predictor.predict_batch(["I loved the amazing pasta", "I hated the horrible soup"])

        assert positive.probability > negative.probability


class TestLoadPredictor:
    def test_loads_saved_model(self, trained_model: TrainedModel, tmp_path: Path) -> None:
        path = save_model(trained_model, tmp_path / "model.joblib")

        predictor = load_predictor(path)

        assert predictor.model_version == trained_model.model_version
        assert predictor.predict("Great steak").text == "Great steak"
