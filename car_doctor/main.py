from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
import logging

from .config import Settings, get_settings
from .db import connect
from .errors import ApiError, api_error_handler
from .routers import auth, services, bookings

# Configurar logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # si Mongo no responde, connect lanza y el servidor no arranca
    store = await connect(app.state.settings)
    app.state.store = store
    try:
        yield
    finally:
        store.close()
        logger.info("Conexión a MongoDB cerrada")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.add_exception_handler(ApiError, api_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "car doctor server is running"

    # Routers
    app.include_router(auth.router, tags=["auth"])
    app.include_router(services.router, prefix="/services", tags=["services"])
    app.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
    return app


app = create_app()


def run():
    import uvicorn
    port = get_settings().port
    logger.info("Car doctor server is running on port: %s", port)
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    run()
