"""
Shared fixtures: a mongomock server stands in for MongoDB.
"""

import mongomock
import pytest
from starlette.testclient import TestClient

from mongogql import database
from mongogql.config import MONGO_COLLECTION, MONGO_DATABASE
from mongogql.server import create_app


@pytest.fixture(autouse=True)
def mongo_env(monkeypatch):
    monkeypatch.setenv('HOST', 'localhost:27017')
    monkeypatch.setenv('USER', 'root')
    monkeypatch.setenv('PWD', 'secret')


@pytest.fixture
def mongo_client(monkeypatch):
    """One in-memory server shared by every connection the code opens."""
    client = mongomock.MongoClient()
    monkeypatch.setattr(client, 'close', lambda: None)
    monkeypatch.setattr(database, 'MongoClient', lambda *args, **kwargs: client)
    return client


@pytest.fixture
def posts(mongo_client):
    return mongo_client[MONGO_DATABASE][MONGO_COLLECTION]


@pytest.fixture
def app(mongo_client):
    return create_app()


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan, which seeds the collection.
    with TestClient(app) as client:
        yield client
