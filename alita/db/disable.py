"""Commands disabled per chat."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from alita.db.storage import Database

COLLECTION = "disable"


@dataclass
class DisabledCommands:
    """Commands disabled in one chat and whether their use is deleted."""

    chat_id: int
    commands: list[str] = field(default_factory=list)
    should_delete: bool = False

    def to_document(self) -> dict[str, Any]:
        return {"commands": list(self.commands), "should_delete": self.should_delete}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "DisabledCommands":
        return cls(
            chat_id=doc["_id"],
            commands=list(doc.get("commands") or []),
            should_delete=bool(doc.get("should_delete", False)),
        )


class DisableStore:
    """Reads and writes disabled commands, creating defaults on first access."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def _save(self, settings: DisabledCommands) -> None:
        self._coll.update_one({"_id": settings.chat_id}, settings.to_document())

    def get(self, chat_id: int) -> DisabledCommands:
        doc = self._coll.find_one({"_id": chat_id})
        if doc is None:
            settings = DisabledCommands(chat_id=chat_id)
            self._save(settings)
            return settings
        return DisabledCommands.from_document(doc)

    def disable(self, chat_id: int, command: str) -> None:
        settings = self.get(chat_id)
        settings.commands.append(command)
        self._save(settings)

    def enable(self, chat_id: int, command: str) -> None:
        """Remove the first occurrence of the command, if present."""
        settings = self.get(chat_id)
        try:
            settings.commands.remove(command)
        except ValueError:
            pass
        self._save(settings)

    def disabled_commands(self, chat_id: int) -> list[str]:
        return self.get(chat_id).commands

    def is_disabled(self, chat_id: int, command: str) -> bool:
        return command in self.disabled_commands(chat_id)

    def set_delete(self, chat_id: int, value: bool) -> None:
        settings = self.get(chat_id)
        settings.should_delete = value
        self._save(settings)

    def should_delete(self, chat_id: int) -> bool:
        return self.get(chat_id).should_delete

    def stats(self) -> tuple[int, int]:
        """Return (total disabled commands, chats with at least one disabled)."""
        total = chats = 0
        for doc in self._coll.find({}):
            count = len(doc.get("commands") or [])
            total += count
            if count:
                chats += 1
        return total, chats