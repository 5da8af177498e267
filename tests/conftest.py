import pytest

from db.connection import SQLITE_PREFIX, open_database
from db.init_db import create_tables


@pytest.fixture()
def db_url(tmp_path):
    url = SQLITE_PREFIX + str(tmp_path / "test.db")
    with open_database(url) as db:
        create_tables(db)
    return url


@pytest.fixture()
def db(db_url):
    with open_database(db_url) as database:
        yield database


@pytest.fixture()
def custom_users_table(tmp_path):
    """Return a factory that builds a database whose `users` table uses the given DDL."""
    def _make(ddl, *inserts):
        url = SQLITE_PREFIX + str(tmp_path / "custom.db")
        with open_database(url) as db:
            db.conn.execute(ddl)
            for sql in inserts:
                db.conn.execute(sql)
            db.commit()
        return url
    return _make


def _count_users(url):
    with open_database(url) as db:
        return db.conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]


@pytest.fixture()
def user_count():
    return _count_users
