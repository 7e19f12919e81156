import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

# Development origins (Vite frontend + preview server)
DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:8080",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:8080",
]


def _extra_origins() -> list[str]:
    raw = os.getenv("ALLOWED_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Settings(BaseModel):
    google_maps_api_key: str = os.getenv("GOOGLE_MAPS_API_KEY", "")
    maps_request_timeout: float = float(os.getenv("MAPS_REQUEST_TIMEOUT", "10"))
    allowed_origins: list[str] = DEFAULT_ALLOWED_ORIGINS + _extra_origins()
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def get_settings() -> Settings:
    return Settings()
