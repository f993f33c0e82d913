"""Application settings and validation."""

import os
from pathlib import Path
from typing import List

BASE = Path(__file__).resolve().parent.parent
DEFAULT_CORS_ORIGINS = "http://localhost:5174,http://localhost:3000"


class Settings:
    ENV: str
    DATABASE_URL: str
    SQL_ECHO: bool
    CORS_ORIGINS: List[str]
    LOG_LEVEL: str

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'app.db'}")
        self.SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
        self.CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",") if o.strip()]
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self._validate()

    def _validate(self):
        if self.ENV != "dev" and "*" in self.CORS_ORIGINS:
            raise RuntimeError("CORS_ORIGINS must list explicit origins in non-dev environments")


settings = Settings()
