"""Per-chat rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from alita.db.storage import Database

COLLECTION = "rules"


@dataclass
class Rules:
    """A chat's rules text and how it is shown."""

    chat_id: int
    rules: str = ""
    private: bool = False
    button: str = ""

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"rules": self.rules, "privrules": self.private}
        if self.button:
            doc["rules_button"] = self.button
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Rules":
        return cls(
            chat_id=doc["_id"],
            rules=doc.get("rules", ""),
            private=bool(doc.get("privrules", False)),
            button=doc.get("rules_button", ""),
        )


class RulesStore:
    """Reads and writes rules, creating defaults on first access."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def _save(self, rules: Rules) -> None:
        self._coll.update_one({"_id": rules.chat_id}, rules.to_document())

    def get(self, chat_id: int) -> Rules:
        doc = self._coll.find_one({"_id": chat_id})
        if doc is None:
            rules = Rules(chat_id=chat_id)
            self._save(rules)
            return rules
        return Rules.from_document(doc)

    def set_rules(self, chat_id: int, rules: str) -> None:
        record = self.get(chat_id)
        record.rules = rules
        self._save(record)

    def set_button(self, chat_id: int, button: str) -> None:
        record = self.get(chat_id)
        record.button = button
        self._save(record)

    def set_private(self, chat_id: int, value: bool) -> None:
        record = self.get(chat_id)
        record.private = value
        self._save(record)

    def stats(self) -> tuple[int, int]:
        """Return (chats with rules set, chats showing rules privately)."""
        set_rules = self._coll.count({"rules": {"$ne": ""}})
        private_rules = self._coll.count({"privrules": True})
        return set_rules, private_rules