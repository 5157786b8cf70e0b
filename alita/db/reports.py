"""Report settings of chats and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from alita.db.storage import Database

CHAT_COLLECTION = "report_chat_settings"
USER_COLLECTION = "report_user_settings"


@dataclass
class ChatReportSettings:
    """Whether reports are on in a chat and who may not report."""

    chat_id: int
    status: bool = True
    blocked_list: list[int] = field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        return {"status": self.status, "blocked_list": list(self.blocked_list)}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "ChatReportSettings":
        return cls(
            chat_id=doc["_id"],
            status=bool(doc.get("status", False)),
            blocked_list=list(doc.get("blocked_list") or []),
        )


@dataclass
class UserReportSettings:
    """Whether a user receives reports."""

    user_id: int
    status: bool = True

    def to_document(self) -> dict[str, Any]:
        return {"status": self.status}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "UserReportSettings":
        return cls(user_id=doc["_id"], status=bool(doc.get("status", False)))


class ReportStore:
    """Reads and writes report settings, creating defaults on first access."""

    def __init__(self, database: Database) -> None:
        self._chats = database.collection(CHAT_COLLECTION)
        self._users = database.collection(USER_COLLECTION)

    def _save_chat(self, settings: ChatReportSettings) -> None:
        self._chats.update_one({"_id": settings.chat_id}, settings.to_document())

    def _save_user(self, settings: UserReportSettings) -> None:
        self._users.update_one({"_id": settings.user_id}, settings.to_document())

    def chat_settings(self, chat_id: int) -> ChatReportSettings:
        doc = self._chats.find_one({"_id": chat_id})
        if doc is None:
            settings = ChatReportSettings(chat_id=chat_id)
            self._save_chat(settings)
            return settings
        return ChatReportSettings.from_document(doc)

    def set_chat_status(self, chat_id: int, value: bool) -> None:
        settings = self.chat_settings(chat_id)
        settings.status = value
        self._save_chat(settings)

    def block_user(self, chat_id: int, user_id: int) -> bool:
        """Stop a user from reporting in a chat; False if already blocked."""
        settings = self.chat_settings(chat_id)
        if user_id in settings.blocked_list:
            return False
        settings.blocked_list.append(user_id)
        self._save_chat(settings)
        return True

    def unblock_user(self, chat_id: int, user_id: int) -> bool:
        """Allow a blocked user to report again; False if not blocked."""
        settings = self.chat_settings(chat_id)
        if user_id not in settings.blocked_list:
            return False
        settings.blocked_list = [uid for uid in settings.blocked_list if uid != user_id]
        self._save_chat(settings)
        return True

    def user_settings(self, user_id: int) -> UserReportSettings:
        doc = self._users.find_one({"_id": user_id})
        if doc is None:
            settings = UserReportSettings(user_id=user_id)
            self._save_user(settings)
            return settings
        return UserReportSettings.from_document(doc)

    def set_user_status(self, user_id: int, value: bool) -> None:
        self._save_user(UserReportSettings(user_id=user_id, status=value))

    def stats(self) -> tuple[int, int]:
        """Return (users with reports on, chats with reports on)."""
        users = self._users.count({"status": True})
        chats = self._chats.count({"status": True})
        return users, chats