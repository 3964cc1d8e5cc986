import pytest
from httpx import AsyncClient, ASGITransport
from car_doctor.main import app


@pytest.mark.asyncio
async def test_booking_status_flow(store):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        # token del cliente
        r = await ac.post("/jwt", json={"email": "flow@example.com"})
        headers = {"Authorization": f"Bearer {r.json()['token']}"}

        # Reserva
        r = await ac.post("/bookings", json={"email": "flow@example.com", "service": "Oil Change", "status": "pending"})
        booking_id = r.json()["insertedId"]

        # Confirmar
        r = await ac.patch(f"/bookings/{booking_id}", json={"status": "confirmed"})
        assert r.status_code == 200 and r.json()["modifiedCount"] == 1

        r = await ac.get("/bookings", params={"email": "flow@example.com"}, headers=headers)
        assert [b["status"] for b in r.json()] == ["confirmed"]

        # Cancelar (borrar)
        r = await ac.delete(f"/bookings/{booking_id}")
        assert r.json()["deletedCount"] == 1

        r = await ac.get("/bookings", params={"email": "flow@example.com"}, headers=headers)
        assert r.json() == []
