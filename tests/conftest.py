"""
Configuración de pytest para tests
"""
import os

# antes de importar la app: Settings lee el entorno al importarse
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret")

import asyncio
import uuid
import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from car_doctor.db import Store
from car_doctor.main import app
from car_doctor.security import create_access_token


@pytest.fixture
def store():
    """Store en memoria con una base de datos nueva por test"""
    s = Store(AsyncMongoMockClient(), f"cardoctor_test_{uuid.uuid4().hex}")
    app.state.store = s
    yield s
    del app.state.store


@pytest.fixture
def client(store):
    """Cliente de test sin lifespan (no conecta a Mongo real)"""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def seed():
    def _seed(collection, docs):
        asyncio.run(collection.insert_many([dict(d) for d in docs]))
    return _seed


@pytest.fixture
def auth_header():
    def _header(payload):
        return {"Authorization": f"Bearer {create_access_token(payload)}"}
    return _header
