from functools import lru_cache
from typing import List, Optional
from urllib.parse import quote_plus
from pydantic import BaseModel
import os
from dotenv import load_dotenv
load_dotenv()  # carga el archivo .env de la raíz

DEFAULT_CLUSTER = "cluster0.2mmen1j.mongodb.net"


class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "Car Doctor")
    env: str = os.getenv("APP_ENV", "dev")
    port: int = int(os.getenv("PORT", "5000"))
    db_user: Optional[str] = os.getenv("DB_USER")
    db_pass: Optional[str] = os.getenv("DB_PASS")
    db_cluster: str = os.getenv("DB_CLUSTER", DEFAULT_CLUSTER)
    mongodb_uri: Optional[str] = os.getenv("MONGODB_URI")
    db_name: str = os.getenv("DB_NAME", "CarDoctor")
    max_pool_size: int = int(os.getenv("DB_MAX_POOL_SIZE", "10"))
    access_token_secret: Optional[str] = os.getenv("ACCESS_TOKEN_SECRET")
    access_token_expires_hours: int = int(os.getenv("ACCESS_TOKEN_EXPIRES_HOURS", "1"))
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    def database_uri(self) -> str:
        """
        URI de conexión a MongoDB.
        MONGODB_URI tiene prioridad; si no existe se arma la URI del cluster
        Atlas con DB_USER/DB_PASS (sin validar: si faltan, falla al conectar).
        """
        if self.mongodb_uri:
            return self.mongodb_uri
        user = quote_plus(self.db_user or "")
        password = quote_plus(self.db_pass or "")
        return f"mongodb+srv://{user}:{password}@{self.db_cluster}/?retryWrites=true&w=majority"

    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
