import os
from typing import List

from pydantic import BaseModel


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    cors_origins: List[str] = [
        "http://localhost:5173",  # Vite default port
        "http://localhost:3000",  # Alternative React port
    ]


def load_server_config() -> ServerConfig:
    origins = os.getenv("BINDMASTER_CORS_ORIGINS")
    config = ServerConfig(
        host=os.getenv("BINDMASTER_HOST", "0.0.0.0"),
        port=int(os.getenv("BINDMASTER_PORT", 8000)),
        reload=os.getenv("BINDMASTER_RELOAD", "").lower() in ("1", "true", "yes"),
    )
    if origins:
        config.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]
    return config


SERVER = load_server_config()
