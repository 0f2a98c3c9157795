from unittest.mock import MagicMock

import pytest

from value_api import MemoryValueStore, RedisValueStore, create_app


@pytest.fixture
def store():
    return MemoryValueStore()


@pytest.fixture
def client(store):
    app = create_app(store)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def redis_client():
    return MagicMock()


@pytest.fixture
def redis_store(redis_client):
    return RedisValueStore(redis_client)
