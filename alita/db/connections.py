"""Users' connections to chats they manage from a private conversation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from alita.db.storage import Database

COLLECTION = "connection"
SETTINGS_COLLECTION = "connection_settings"


@dataclass
class Connection:
    """The chat a user is, or was last, connected to."""

    user_id: int
    chat_id: int = 0
    connected: bool = False

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {}
        if self.chat_id:
            doc["chat_id"] = self.chat_id
        doc["connected"] = self.connected
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Connection":
        return cls(
            user_id=doc["_id"],
            chat_id=int(doc.get("chat_id", 0)),
            connected=bool(doc.get("connected", False)),
        )


@dataclass
class ConnectionSettings:
    """Whether ordinary members may connect to a chat."""

    chat_id: int
    allow_connect: bool = False

    def to_document(self) -> dict[str, Any]:
        return {"can_connect": self.allow_connect}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "ConnectionSettings":
        return cls(chat_id=doc["_id"], allow_connect=bool(doc.get("can_connect", False)))


class ConnectionStore:
    """Reads and writes connections and per-chat connection settings."""

    def __init__(self, database: Database) -> None:
        self._users = database.collection(COLLECTION)
        self._settings = database.collection(SETTINGS_COLLECTION)

    def _save_user(self, conn: Connection) -> None:
        self._users.update_one({"_id": conn.user_id}, conn.to_document())

    def _save_settings(self, settings: ConnectionSettings) -> None:
        self._settings.update_one({"_id": settings.chat_id}, settings.to_document())

    def chat_settings(self, chat_id: int) -> ConnectionSettings:
        doc = self._settings.find_one({"_id": chat_id})
        if doc is None:
            settings = ConnectionSettings(chat_id=chat_id)
            self._save_settings(settings)
            return settings
        return ConnectionSettings.from_document(doc)

    def set_allow_connect(self, chat_id: int, value: bool) -> None:
        settings = self.chat_settings(chat_id)
        settings.allow_connect = value
        self._save_settings(settings)

    def user(self, user_id: int) -> Connection:
        doc = self._users.find_one({"_id": user_id})
        if doc is None:
            conn = Connection(user_id=user_id)
            self._save_user(conn)
            return conn
        return Connection.from_document(doc)

    def connect(self, user_id: int, chat_id: int) -> None:
        conn = self.user(user_id)
        conn.connected = True
        conn.chat_id = chat_id
        self._save_user(conn)

    def disconnect(self, user_id: int) -> None:
        """Mark the user disconnected; the last chat is remembered for reconnecting."""
        conn = self.user(user_id)
        conn.connected = False
        self._save_user(conn)

    def reconnect(self, user_id: int) -> int:
        """Reconnect to the last chat and return its id, 0 if there is none."""
        conn = self.user(user_id)
        conn.connected = True
        self._save_user(conn)
        return conn.chat_id

    def stats(self) -> tuple[int, int]:
        """Return (connected users, chats that allow connections)."""
        connected_chats = self._settings.count({"can_connect": True})
        connected_users = self._users.count({"connected": True})
        return connected_users, connected_chats