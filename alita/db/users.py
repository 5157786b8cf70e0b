"""Users the bot has seen."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from alita.db.storage import Database

COLLECTION = "users"

log = logging.getLogger(__name__)


@dataclass
class User:
    """A user's id, username, display name and preferred language."""

    user_id: int
    username: str = ""
    name: str = ""
    language: str = ""

    def to_document(self) -> dict[str, Any]:
        return {"username": self.username, "name": self.name, "language": self.language}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "User":
        return cls(
            user_id=doc["_id"],
            username=doc.get("username", ""),
            name=doc.get("name", ""),
            language=doc.get("language", ""),
        )


class UserStore:
    """Reads and writes known users."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def _save(self, user: User) -> None:
        self._coll.update_one({"_id": user.user_id}, user.to_document())

    def ensure_bot(self, user_id: int, username: str, name: str) -> None:
        """Store the bot's own account."""
        self._save(User(user_id=user_id, username=username, name=name))
        log.info("bot updated in database")

    def get(self, user_id: int) -> User | None:
        doc = self._coll.find_one({"_id": user_id})
        return User.from_document(doc) if doc is not None else None

    def update(self, user_id: int, username: str, name: str) -> None:
        """Store the user's username and name, writing only when they changed."""
        user = self.get(user_id)
        if user is not None:
            if user.name == name and user.username == username:
                return
            user.name = name
            user.username = username
        else:
            user = User(user_id=user_id, username=username, name=name)
        self._save(user)
        log.info("updated user %d", user_id)

    def id_by_username(self, username: str) -> int:
        """Return the id of the user with this username, or 0 if unknown."""
        doc = self._coll.find_one({"username": username})
        return doc["_id"] if doc is not None else 0

    def info(self, user_id: int) -> tuple[str, str, bool]:
        """Return (username, name, found) for a user."""
        user = self.get(user_id)
        if user is None:
            return "", "", False
        return user.username, user.name, True

    def count(self) -> int:
        return self._coll.count({})