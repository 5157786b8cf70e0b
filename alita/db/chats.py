"""Chats the bot is in and the users seen in them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from alita.db.storage import Database

COLLECTION = "chats"


@dataclass
class Chat:
    """A chat record."""

    chat_id: int
    name: str = ""
    language: str = ""
    users: list[int] = field(default_factory=list)
    is_inactive: bool = False

    def to_document(self) -> dict[str, Any]:
        return {
            "chat_name": self.name,
            "language": self.language,
            "users": list(self.users),
            "is_inactive": self.is_inactive,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Chat":
        return cls(
            chat_id=doc["_id"],
            name=doc.get("chat_name", ""),
            language=doc.get("language", ""),
            users=list(doc.get("users") or []),
            is_inactive=bool(doc.get("is_inactive", False)),
        )


class ChatStore:
    """Reads and writes chat records."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def _save(self, chat: Chat) -> None:
        self._coll.update_one({"_id": chat.chat_id}, chat.to_document())

    def get(self, chat_id: int) -> Chat:
        """Return the chat, or an empty record if it is not stored."""
        doc = self._coll.find_one({"_id": chat_id})
        return Chat.from_document(doc) if doc is not None else Chat(chat_id=chat_id)

    def toggle_inactive(self, chat_id: int, value: bool) -> None:
        chat = self.get(chat_id)
        chat.is_inactive = value
        self._save(chat)

    def update(self, chat_id: int, name: str, user_id: int) -> None:
        """Record the chat's name and a user seen in it; marks the chat active."""
        chat = self.get(chat_id)
        known_user = user_id in chat.users
        if chat.name == name and known_user:
            return
        if not known_user:
            chat.users.append(user_id)
        chat.name = name
        chat.is_inactive = False
        self._save(chat)

    def all(self) -> dict[int, Chat]:
        return {doc["_id"]: Chat.from_document(doc) for doc in self._coll.find({})}

    def stats(self) -> tuple[int, int]:
        """Return (active chats, inactive chats)."""
        chats = self.all().values()
        inactive = sum(1 for chat in chats if chat.is_inactive)
        return len(chats) - inactive, inactive