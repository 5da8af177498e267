"""
db/init_db.py
-------------
Creates the `users` table if it does not already exist.
The session runner never calls this; run it once against a fresh database:
    python -m db.init_db
"""

from db.connection import Database
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = {
    "postgresql": """
        CREATE TABLE IF NOT EXISTS users (
            id          SERIAL PRIMARY KEY,
            username    VARCHAR(100) NOT NULL,
            password    VARCHAR(100) NOT NULL
        );
    """,
    "sqlite": """
        CREATE TABLE IF NOT EXISTS users (
            id          INTEGER PRIMARY KEY AUTOINCREMENT,
            username    TEXT NOT NULL,
            password    TEXT NOT NULL
        );
    """,
}


def create_tables(db: Database) -> None:
    """
    Execute the schema SQL for the connection's backend.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        with db.cursor() as cur:
            cur.execute(SCHEMA_SQL[db.dialect.name])
        db.commit()
        logger.info("Database schema initialized successfully.")
    except db.Error as e:
        db.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from config import DATABASE_URL
    from db.connection import open_database

    with open_database(DATABASE_URL) as database:
        create_tables(database)
    print("Database schema created successfully.")
