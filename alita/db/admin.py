"""Per-chat admin settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from alita.db.storage import Database

COLLECTION = "admin"


@dataclass
class AdminSettings:
    """Admin behaviour for one chat."""

    chat_id: int
    anon_admin: bool = False

    def to_document(self) -> dict[str, Any]:
        return {"anon_admin": self.anon_admin}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "AdminSettings":
        return cls(chat_id=doc["_id"], anon_admin=bool(doc.get("anon_admin", False)))


class AdminSettingsStore:
    """Reads and writes admin settings, creating defaults on first access."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def _save(self, settings: AdminSettings) -> None:
        self._coll.update_one({"_id": settings.chat_id}, settings.to_document())

    def get(self, chat_id: int) -> AdminSettings:
        doc = self._coll.find_one({"_id": chat_id})
        if doc is None:
            settings = AdminSettings(chat_id=chat_id)
            self._save(settings)
            return settings
        return AdminSettings.from_document(doc)

    def set_anon_admin(self, chat_id: int, value: bool) -> None:
        settings = self.get(chat_id)
        settings.anon_admin = value
        self._save(settings)