"""
models/user.py
--------------
Domain model for rows of the `users` table.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a single user account.

    Attributes:
        username: Login name.
        password: Stored as plaintext.
        id: Database primary key (None until the row is inserted).
    """
    username: str
    password: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"User(id={self.id}, username={self.username!r}, password={self.password!r})"
