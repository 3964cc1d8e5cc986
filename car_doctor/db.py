import logging
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from .config import Settings
from .errors import StoreError

logger = logging.getLogger(__name__)


class Store:
    """Handle de persistencia: un cliente (un pool) por proceso."""

    def __init__(self, client, db_name: str):
        self.client = client
        self.db: AsyncIOMotorDatabase = client[db_name]

    @property
    def services(self) -> AsyncIOMotorCollection:
        return self.db["services"]

    @property
    def bookings(self) -> AsyncIOMotorCollection:
        return self.db["bookings"]

    async def ping(self) -> None:
        await self.client["admin"].command("ping")

    def close(self) -> None:
        self.client.close()


async def connect(settings: Settings) -> Store:
    """
    Crea el cliente y hace ping antes de aceptar requests.
    Si el ping falla se lanza StoreError y el arranque se aborta.
    """
    client = AsyncIOMotorClient(
        settings.database_uri(),
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
        maxPoolSize=settings.max_pool_size,
    )
    store = Store(client, settings.db_name)
    try:
        await store.ping()
    except PyMongoError as e:
        client.close()
        logger.error("No se pudo conectar a MongoDB: %s", e)
        raise StoreError(f"MongoDB unreachable: {e}") from e
    logger.info("Pinged your deployment. You successfully connected to MongoDB!")
    return store


def get_store(request: Request) -> Store:
    return request.app.state.store
