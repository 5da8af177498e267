"""
main.py
-------
Entry point for the user session runner.

Responsibilities:
    - Build the seed user from configuration.
    - Run one database session against DATABASE_URL.
    - Turn the first failure into a logged, non-zero exit.
"""

import sys

from config import DATABASE_URL, SEED_PASSWORD, SEED_USERNAME
from db.errors import SessionError
from models.user import User
from services.session_runner import run_session
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> int:
    """Run the session; return the process exit status."""
    user = User(username=SEED_USERNAME, password=SEED_PASSWORD)
    try:
        run_session(DATABASE_URL, user)
    except SessionError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
