"""
Pytest configuration and fixtures.
"""

import copy
import os

import bson
import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from sixfactors.config import Settings, get_settings
from sixfactors.core.dependencies import get_catalog, get_progress_store
from sixfactors.main import app
from sixfactors.question_service.catalog import build_catalog
from sixfactors.repositories.progress_repository import ProgressStore


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables."""

    test_env = {
        "SIXFACTORS_ENV": "test",
        "SIXFACTORS_MONGO_URI": "mongodb://localhost:27017",
        "SIXFACTORS_MONGO_DB": "sixfactors_test",
    }

    for key, value in test_env.items():
        os.environ[key] = value

    yield

    for key in test_env:
        os.environ.pop(key, None)


class FakeCollection:
    """In-memory stand-in for the answers collection."""

    def __init__(self):
        self.documents = {}
        self.reads = 0
        self.writes = 0

    def find_one(self, filter, projection=None):
        self.reads += 1
        document = self.documents.get(filter["user_id"])
        if document is None:
            return None
        return copy.deepcopy(document)

    def update_one(self, filter, update, upsert=False):
        # Same BSON encoding the driver applies before sending
        bson.encode(update)
        self.writes += 1
        user_id = filter["user_id"]
        if user_id not in self.documents:
            assert upsert
            self.documents[user_id] = {"user_id": user_id}
        self.documents[user_id].update(update["$set"])


class FailingCollection:
    """Collection whose every operation times out."""

    def find_one(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("no servers")

    def update_one(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("no servers")


FIVE_QUESTIONS = [
    {"factor": "honesty_humility", "label": {"en": "Question zero", "fr": "Question zéro"}},
    {"factor": "emotionality", "label": {"en": "Question one"}},
    {"factor": "extraversion", "label": {"en": "Question two", "fr": "Question deux"}},
    {"factor": "agreeableness", "label": {"en": "Question three"}},
    {"factor": "conscientiousness", "label": {"en": "Question four", "fr": "Question quatre"}},
]


@pytest.fixture
def catalog():
    return build_catalog(questions=FIVE_QUESTIONS)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def store(fake_collection):
    return ProgressStore(lambda: fake_collection)


@pytest.fixture
def failing_store():
    return ProgressStore(FailingCollection)


@pytest.fixture
def client(catalog, store, settings):
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_progress_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
