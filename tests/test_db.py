import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from car_doctor import main
from car_doctor.config import Settings
from car_doctor.db import Store, connect
from car_doctor.errors import StoreError


class _TrackedStore(Store):
    closed = False

    def close(self):
        self.closed = True


@pytest.mark.asyncio
async def test_connect_unreachable_is_fatal():
    settings = Settings(mongodb_uri="mongodb://127.0.0.1:1/?serverSelectionTimeoutMS=200")
    with pytest.raises(StoreError):
        await connect(settings)


def test_lifespan_opens_and_closes_store(monkeypatch):
    tracked = _TrackedStore(AsyncMongoMockClient(), "cardoctor_lifespan")

    async def fake_connect(settings):
        return tracked

    monkeypatch.setattr(main, "connect", fake_connect)
    with TestClient(main.app) as client:
        assert main.app.state.store is tracked
        assert client.get("/services").json() == []
    assert tracked.closed
