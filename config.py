"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Database ──────────────────────────────────────────────
# Placeholder credentials: replace username, password and mydb.
DB_HOST: str = os.getenv("DB_HOST", "127.0.0.1")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "mydb")
DB_USER: str = os.getenv("DB_USER", "username")
DB_PASS: str = os.getenv("DB_PASS", "password")

DATABASE_URL: str = os.getenv(
    "DATABASE_URL",
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)

# ── Seed record ───────────────────────────────────────────
SEED_USERNAME: str = os.getenv("SEED_USERNAME", "radovskyb")
SEED_PASSWORD: str = os.getenv("SEED_PASSWORD", "password123")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
