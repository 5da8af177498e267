"""
services/session_runner.py
--------------------------
Runs one database session end to end: connect, ping, insert a user,
report the insert, read every user back and print them.

Every step either succeeds or raises a SessionError subclass; nothing is
retried. The cursor and the connection are closed on every exit path,
cursor first.
"""

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from db.connection import open_database
from models.user import User
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class SessionReport:
    """Outcome of a completed session."""
    rows_affected: int
    last_insert_id: int
    users: list[User] = field(default_factory=list)


def run_session(database_url: str, user: User, out: Optional[TextIO] = None) -> SessionReport:
    """
    Execute the session against `database_url`.

    Workflow:
        1. Open the connection and verify it with a ping.
        2. Insert `user`.
        3. Print rows affected, then the new id.
        4. Select all users, printing each decoded row.
        5. Check whether iteration ended on a fault.

    Args:
        database_url: ``postgresql://...`` or ``sqlite:///...``.
        user: The record to insert.
        out: Where results are printed (default: stdout).

    Returns:
        A SessionReport with the insert metadata and the users read back.

    Raises:
        DatabaseConnectionError: Connect or ping failed.
        QueryError: The insert or the select failed.
        ResultError: Insert metadata was unavailable.
        DecodeError: A row did not match the User shape.
    """
    out = out or sys.stdout

    with open_database(database_url) as db:
        db.ping()
        logger.info("Database connection verified.")

        repo = UserRepository(db)
        result = repo.add(user)

        rows_affected = result.rows_affected()
        print(rows_affected, file=out)
        last_insert_id = result.last_insert_id()
        print(last_insert_id, file=out)

        report = SessionReport(rows_affected=rows_affected, last_insert_id=last_insert_id)
        with repo.query_all() as rows:
            for row_user in rows:
                print(row_user, file=out)
                report.users.append(row_user)
            rows.raise_for_error()

    logger.info(f"Session finished: {len(report.users)} user(s) read back.")
    return report
