"""Service configuration, read from the environment (and an optional .env file)."""
import os
from typing import List

from dotenv import load_dotenv

from string_analyzer import __version__

load_dotenv()


class Settings:
    app_title: str = "String Analyzer Service"
    app_description: str = "Analyze, store and filter strings by their computed properties"
    version: str = __version__

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    cors_origins: List[str] = [
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
    ]


settings = Settings()
