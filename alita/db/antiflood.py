"""Per-chat antiflood settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from alita.db.storage import Database

COLLECTION = "antiflood_settings"
DEFAULT_MODE = "mute"


@dataclass
class FloodSettings:
    """How many consecutive messages a user may send and what happens beyond that."""

    chat_id: int
    limit: int = 0
    mode: str = DEFAULT_MODE
    delete_messages: bool = False

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"limit": self.limit}
        if self.mode:
            doc["mode"] = self.mode
        doc["del_msg"] = self.delete_messages
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "FloodSettings":
        return cls(
            chat_id=doc["_id"],
            limit=int(doc.get("limit", 0)),
            mode=doc.get("mode", ""),
            delete_messages=bool(doc.get("del_msg", False)),
        )


class FloodSettingsStore:
    """Reads and writes flood settings, creating defaults on first access."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def _save(self, settings: FloodSettings) -> None:
        self._coll.update_one({"_id": settings.chat_id}, settings.to_document())

    def get(self, chat_id: int) -> FloodSettings:
        doc = self._coll.find_one({"_id": chat_id})
        if doc is None:
            settings = FloodSettings(chat_id=chat_id)
            self._save(settings)
            return settings
        return FloodSettings.from_document(doc)

    def set_limit(self, chat_id: int, limit: int) -> None:
        """Set the limit; a limit of 0 turns antiflood off."""
        settings = self.get(chat_id)
        if not settings.mode:
            settings = FloodSettings(chat_id=chat_id, limit=limit, mode=DEFAULT_MODE)
        else:
            settings.limit = limit
        self._save(settings)

    def set_mode(self, chat_id: int, mode: str) -> None:
        settings = self.get(chat_id)
        settings.mode = mode
        self._save(settings)

    def set_delete_messages(self, chat_id: int, value: bool) -> None:
        settings = self.get(chat_id)
        settings.delete_messages = value
        self._save(settings)

    def enabled_count(self) -> int:
        """Number of chats that have a non-zero flood limit."""
        return self._coll.count({}) - self._coll.count({"limit": 0})