"""Warnings given to users and per-chat warning settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from alita.db.storage import Database

SETTINGS_COLLECTION = "warns_settings"
USERS_COLLECTION = "warns_users"
DEFAULT_WARN_LIMIT = 3
DEFAULT_WARN_MODE = "mute"
NO_REASON = "No Reason"
MAX_REASON_LENGTH = 3000


@dataclass
class WarnSettings:
    """How many warnings a chat allows and what happens after that."""

    chat_id: int
    limit: int = DEFAULT_WARN_LIMIT
    mode: str = DEFAULT_WARN_MODE

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"warn_limit": self.limit}
        if self.mode:
            doc["warn_mode"] = self.mode
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "WarnSettings":
        return cls(
            chat_id=doc["_id"],
            limit=int(doc.get("warn_limit", 0)),
            mode=doc.get("warn_mode", ""),
        )


@dataclass
class Warns:
    """The warnings one user has in one chat."""

    user_id: int
    chat_id: int
    count: int = 0
    reasons: list[str] = field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "chat_id": self.chat_id,
            "num_warns": self.count,
            "warns": list(self.reasons),
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Warns":
        return cls(
            user_id=int(doc.get("user_id", 0)),
            chat_id=int(doc.get("chat_id", 0)),
            count=int(doc.get("num_warns", 0)),
            reasons=list(doc.get("warns") or []),
        )


class WarnStore:
    """Reads and writes warnings, creating defaults on first access."""

    def __init__(self, database: Database) -> None:
        self._settings = database.collection(SETTINGS_COLLECTION)
        self._users = database.collection(USERS_COLLECTION)

    def _save_settings(self, settings: WarnSettings) -> None:
        self._settings.update_one({"_id": settings.chat_id}, settings.to_document())

    def _save_warns(self, warns: Warns) -> None:
        self._users.update_one(
            {"user_id": warns.user_id, "chat_id": warns.chat_id}, warns.to_document()
        )

    def settings(self, chat_id: int) -> WarnSettings:
        doc = self._settings.find_one({"_id": chat_id})
        if doc is None:
            settings = WarnSettings(chat_id=chat_id)
            self._save_settings(settings)
            return settings
        return WarnSettings.from_document(doc)

    def _warns(self, user_id: int, chat_id: int) -> Warns:
        doc = self._users.find_one({"user_id": user_id, "chat_id": chat_id})
        if doc is None:
            warns = Warns(user_id=user_id, chat_id=chat_id)
            self._save_warns(warns)
            return warns
        return Warns.from_document(doc)

    def warn(self, user_id: int, chat_id: int, reason: str) -> tuple[int, list[str]]:
        """Add a warning and return the new count and all reasons.

        Reasons longer than 3000 characters are cut; an empty reason is recorded
        as "No Reason".
        """
        warns = self._warns(user_id, chat_id)
        warns.count += 1
        warns.reasons.append(reason[:MAX_REASON_LENGTH] if reason else NO_REASON)
        self._save_warns(warns)
        return warns.count, warns.reasons

    def remove_warn(self, user_id: int, chat_id: int) -> bool:
        """Remove the latest warning; False if the user had none."""
        warns = self._warns(user_id, chat_id)
        if warns.count <= 0:
            return False
        warns.count -= 1
        if warns.reasons:
            warns.reasons.pop()
        self._save_warns(warns)
        return True

    def reset(self, user_id: int, chat_id: int) -> None:
        self._users.delete_one({"user_id": user_id, "chat_id": chat_id})

    def get(self, user_id: int, chat_id: int) -> tuple[int, list[str]]:
        warns = self._warns(user_id, chat_id)
        return warns.count, warns.reasons

    def set_limit(self, chat_id: int, limit: int) -> None:
        settings = self.settings(chat_id)
        settings.limit = limit
        self._save_settings(settings)

    def set_mode(self, chat_id: int, mode: str) -> None:
        settings = self.settings(chat_id)
        settings.mode = mode
        self._save_settings(settings)

    def chat_warn_count(self, chat_id: int) -> int:
        """Number of warning records kept for the chat."""
        return self._users.count({"chat_id": chat_id})

    def reset_chat(self, chat_id: int) -> None:
        self._users.delete_many({"chat_id": chat_id})