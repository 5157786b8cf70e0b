"""Per-chat pin settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from alita.db.storage import Database

COLLECTION = "pins"


@dataclass
class Pins:
    """Pin behaviour for one chat."""

    chat_id: int
    anti_channel_pin: bool = False
    clean_linked: bool = False

    def to_document(self) -> dict[str, Any]:
        return {"antichannelpin": self.anti_channel_pin, "cleanlinked": self.clean_linked}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Pins":
        return cls(
            chat_id=doc["_id"],
            anti_channel_pin=bool(doc.get("antichannelpin", False)),
            clean_linked=bool(doc.get("cleanlinked", False)),
        )


class PinStore:
    """Reads and writes pin settings, creating defaults on first access."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def _save(self, pins: Pins) -> None:
        self._coll.update_one({"_id": pins.chat_id}, pins.to_document())

    def get(self, chat_id: int) -> Pins:
        doc = self._coll.find_one({"_id": chat_id})
        if doc is None:
            pins = Pins(chat_id=chat_id)
            self._save(pins)
            return pins
        return Pins.from_document(doc)

    def set_clean_linked(self, chat_id: int, value: bool) -> None:
        """Set clean-linked; anti-channel-pin is switched off."""
        self._save(Pins(chat_id=chat_id, anti_channel_pin=False, clean_linked=value))

    def set_anti_channel_pin(self, chat_id: int, value: bool) -> None:
        """Set anti-channel-pin; clean-linked is switched off."""
        self._save(Pins(chat_id=chat_id, anti_channel_pin=value, clean_linked=False))

    def stats(self) -> tuple[int, int]:
        """Return (chats with anti-channel-pin only, chats with clean-linked only)."""
        anti_channel = self._coll.count({"cleanlinked": False, "antichannelpin": True})
        clean_linked = self._coll.count({"cleanlinked": True, "antichannelpin": False})
        return anti_channel, clean_linked