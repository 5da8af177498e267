"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
All SQL queries related to the `users` table live here.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from db.connection import Database
from db.errors import DecodeError, QueryError, ResultError
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)

USER_COLUMNS = ("id", "username", "password")


@dataclass
class InsertResult:
    """
    What the driver reported about a single INSERT.

    ``rowcount`` is -1 and ``lastrowid`` is None when the driver could not
    determine them.
    """
    rowcount: int
    lastrowid: Optional[int]

    def rows_affected(self) -> int:
        """
        Raises:
            ResultError: If the driver did not report a row count.
        """
        if self.rowcount is None or self.rowcount < 0:
            raise ResultError("Driver did not report the number of affected rows")
        return self.rowcount

    def last_insert_id(self) -> int:
        """
        Raises:
            ResultError: If the driver did not report the generated id.
        """
        if self.lastrowid is None:
            raise ResultError("Driver did not report the last inserted id")
        return self.lastrowid


class UserRows:
    """
    Open result set of a select over `users`.

    Iterating decodes one row per step. A driver fault while fetching ends
    the iteration the same way exhaustion does; call `raise_for_error()`
    after the loop to tell the two apart. The cursor is closed when the
    result set is closed, which is safe to repeat.

    Usage:
        with repo.query_all() as rows:
            for user in rows:
                print(user)
            rows.raise_for_error()
    """

    def __init__(self, db: Database, cursor):
        self._db = db
        self._cursor = cursor
        self._error: Optional[Exception] = None
        self.closed = False

    def __enter__(self) -> "UserRows":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[User]:
        while not self.closed:
            try:
                row = self._cursor.fetchone()
            except self._db.Error as e:
                logger.error(f"Row iteration stopped on error: {e}")
                self._error = e
                self.close()
                return
            if row is None:
                self.close()
                return
            yield _row_to_user(row)

    @property
    def error(self) -> Optional[Exception]:
        """The driver error that ended iteration, if any."""
        return self._error

    def raise_for_error(self) -> None:
        """
        Raises:
            QueryError: If iteration ended because of a driver fault
                rather than because the rows ran out.
        """
        if self._error is not None:
            raise QueryError(f"Failed while reading users: {self._error}") from self._error

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._cursor.close()


def _row_to_user(row) -> User:
    """
    Map a raw ``(id, username, password)`` row onto a User.

    Raises:
        DecodeError: If the column count or the value types do not match.
    """
    if len(row) != len(USER_COLUMNS):
        problem = f"Expected {len(USER_COLUMNS)} columns {USER_COLUMNS}, got {len(row)}"
    else:
        user_id, username, password = row
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            problem = f"Column 'id' is not an integer: {user_id!r}"
        elif not isinstance(username, str):
            problem = f"Column 'username' is not text: {username!r}"
        elif not isinstance(password, str):
            problem = f"Column 'password' is not text: {password!r}"
        else:
            return User(id=user_id, username=username, password=password)
    logger.error(f"Cannot decode user row: {problem}")
    raise DecodeError(problem)


class UserRepository:
    """Repository for reads and writes on the users table."""

    def __init__(self, db: Database):
        self.db = db

    # ── CREATE ────────────────────────────────────────────

    def add(self, user: User) -> InsertResult:
        """
        Insert a new user record.

        Args:
            user: The User to persist; its `id` is set when the driver reports one.

        Returns:
            The InsertResult describing the write.

        Raises:
            QueryError: If the statement fails. The transaction is rolled back.
        """
        p = self.db.dialect.placeholder
        sql = f"INSERT INTO users (username, password) VALUES ({p}, {p})"
        if self.db.dialect.returning_id:
            sql += " RETURNING id"

        try:
            with self.db.cursor() as cur:
                cur.execute(sql, (user.username, user.password))
                if self.db.dialect.returning_id:
                    row = cur.fetchone()
                    new_id = row[0] if row else None
                else:
                    new_id = cur.lastrowid
                rowcount = cur.rowcount
            self.db.commit()
        except self.db.Error as e:
            self.db.rollback()
            logger.error(f"Failed to add user {user.username!r}: {e}")
            raise QueryError(f"Failed to add user: {e}") from e

        user.id = new_id
        logger.info(f"Added user #{new_id} ({user.username})")
        return InsertResult(rowcount=rowcount, lastrowid=new_id)

    # ── READ ──────────────────────────────────────────────

    def query_all(self) -> UserRows:
        """
        Select every user, ordered by id.

        Returns:
            An open UserRows; the caller closes it.

        Raises:
            QueryError: If the select fails to execute.
        """
        sql = "SELECT * FROM users ORDER BY id"
        cur = None
        try:
            cur = self.db.open_cursor()
            cur.execute(sql)
        except self.db.Error as e:
            if cur is not None:
                cur.close()
            logger.error(f"Failed to query users: {e}")
            raise QueryError(f"Failed to query users: {e}") from e
        return UserRows(self.db, cur)
