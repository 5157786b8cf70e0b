"""Per-chat blacklisted words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from alita.db.storage import Database

COLLECTION = "blacklists"
DEFAULT_ACTION = "none"
DEFAULT_REASON = "Automated Blacklisted word %s"


@dataclass
class BlacklistSettings:
    """Blacklisted triggers of a chat and the action taken on a match."""

    chat_id: int
    action: str = DEFAULT_ACTION
    triggers: list[str] = field(default_factory=list)
    reason: str = DEFAULT_REASON

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"triggers": list(self.triggers)}
        if self.action:
            doc["action"] = self.action
        if self.reason:
            doc["reason"] = self.reason
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "BlacklistSettings":
        return cls(
            chat_id=doc["_id"],
            action=doc.get("action", ""),
            triggers=list(doc.get("triggers") or []),
            reason=doc.get("reason", ""),
        )


class BlacklistStore:
    """Reads and writes blacklist settings, creating defaults on first access."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def _save(self, settings: BlacklistSettings) -> None:
        self._coll.update_one({"_id": settings.chat_id}, settings.to_document())

    def get(self, chat_id: int) -> BlacklistSettings:
        doc = self._coll.find_one({"_id": chat_id})
        if doc is None:
            settings = BlacklistSettings(chat_id=chat_id)
            self._save(settings)
            return settings
        return BlacklistSettings.from_document(doc)

    def add(self, chat_id: int, trigger: str) -> None:
        settings = self.get(chat_id)
        settings.triggers.append(trigger.lower())
        self._save(settings)

    def remove(self, chat_id: int, trigger: str) -> None:
        """Remove the first occurrence of the trigger, if present."""
        settings = self.get(chat_id)
        try:
            settings.triggers.remove(trigger.lower())
        except ValueError:
            pass
        self._save(settings)

    def remove_all(self, chat_id: int) -> None:
        settings = self.get(chat_id)
        settings.triggers = []
        self._save(settings)

    def set_action(self, chat_id: int, action: str) -> None:
        settings = self.get(chat_id)
        settings.action = action.lower()
        self._save(settings)

    def stats(self) -> tuple[int, int]:
        """Return (total triggers, chats with at least one trigger)."""
        total = chats = 0
        for doc in self._coll.find({}):
            count = len(doc.get("triggers") or [])
            total += count
            if count:
                chats += 1
        return total, chats