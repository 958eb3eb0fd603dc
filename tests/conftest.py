"""Shared fixtures: a Flask app wired to fake upstream collaborators."""

import json

import pytest

from factories import SCENARIO
from lotto_analyzer import create_app
from lotto_analyzer.config import TestingConfig
from lotto_analyzer.services.lotto_analysis_service import LottoAnalysisService
from lotto_analyzer.services.recommendation_service import RecommendationService


MODEL_ANSWER = {
    "report": "Low numbers dominate. The second set follows the cold list.",
    "combinations": [
        {"numbers": [1, 2, 3, 12, 24, 36], "theme": "balanced mix"},
        {"numbers": [16, 17, 18, 19, 20, 21], "theme": "cold-number focus"},
    ],
}


class FakeRepository:
    def __init__(self, records):
        self._records = list(records)
        self.counts = []

    def fetch_recent(self, count):
        self.counts.append(count)
        return self._records[:count]


class FakeMessage:
    def __init__(self, content):
        self.content = content


class FakeLLM:
    def __init__(self, content=None, error=None):
        self.content = content if content is not None else json.dumps(MODEL_ANSWER)
        self.error = error
        self.prompts = []

    def invoke(self, messages):
        self.prompts.append(messages[0].content)
        if self.error is not None:
            raise self.error
        return FakeMessage(self.content)


@pytest.fixture()
def repository():
    return FakeRepository(SCENARIO)


@pytest.fixture()
def llm():
    return FakeLLM()


@pytest.fixture()
def app(repository, llm):
    service = LottoAnalysisService(
        repository=repository,
        recommender=RecommendationService(llm=llm),
    )
    return create_app(TestingConfig, analysis_service=service)


@pytest.fixture()
def client(app):
    return app.test_client()
