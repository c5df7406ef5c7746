"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent


class Settings:
    DATABASE_URL: str
    SQL_ECHO: bool
    LOG_LEVEL: str
    ALLOW_DEV_CORS: bool

    def __init__(self):
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'app.db'}")
        self.SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self._validate()

    def _validate(self):
        if not self.DATABASE_URL.strip():
            raise RuntimeError("DATABASE_URL must not be empty")


settings = Settings()
