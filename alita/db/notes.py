"""Saved notes and per-chat note settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from alita.db.storage import Button, Database, MsgType

COLLECTION = "notes"
SETTINGS_COLLECTION = "notes_settings"


@dataclass
class NoteSettings:
    """Whether notes of a chat are sent in private."""

    chat_id: int
    private_notes: bool = False

    def to_document(self) -> dict[str, Any]:
        return {"private_notes": self.private_notes}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "NoteSettings":
        return cls(chat_id=doc["_id"], private_notes=bool(doc.get("private_notes", False)))


@dataclass
class ChatNote:
    """A named note saved in one chat."""

    chat_id: int
    name: str
    content: str = ""
    msg_type: int = MsgType.TEXT
    file_id: str = ""
    private_only: bool = False
    group_only: bool = False
    admin_only: bool = False
    web_preview: bool = False
    is_protected: bool = False
    no_notif: bool = False
    buttons: list[Button] = field(default_factory=list)

    _FLAGS = (
        ("private_only", "private_only"),
        ("group_only", "group_only"),
        ("admin_only", "admin_only"),
        ("web_preview", "webpreview"),
        ("is_protected", "is_protected"),
        ("no_notif", "no_notif"),
    )

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {}
        if self.chat_id:
            doc["chat_id"] = self.chat_id
        if self.name:
            doc["note_name"] = self.name
        if self.content:
            doc["note_content"] = self.content
        doc["msgtype"] = int(self.msg_type)
        if self.file_id:
            doc["fileid"] = self.file_id
        for attr, key in self._FLAGS:
            if getattr(self, attr):
                doc[key] = True
        if self.buttons:
            doc["note_buttons"] = [button.to_document() for button in self.buttons]
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "ChatNote":
        flags = {attr: bool(doc.get(key, False)) for attr, key in cls._FLAGS}
        return cls(
            chat_id=int(doc.get("chat_id", 0)),
            name=doc.get("note_name", ""),
            content=doc.get("note_content", ""),
            msg_type=int(doc.get("msgtype", 0)),
            file_id=doc.get("fileid", ""),
            buttons=[Button.from_document(b) for b in doc.get("note_buttons") or []],
            **flags,
        )


class NoteStore:
    """Reads and writes notes and note settings."""

    def __init__(self, database: Database) -> None:
        self._notes = database.collection(COLLECTION)
        self._settings = database.collection(SETTINGS_COLLECTION)

    def _save_settings(self, settings: NoteSettings) -> None:
        self._settings.update_one({"_id": settings.chat_id}, settings.to_document())

    def settings(self, chat_id: int) -> NoteSettings:
        doc = self._settings.find_one({"_id": chat_id})
        if doc is None:
            settings = NoteSettings(chat_id=chat_id)
            self._save_settings(settings)
            return settings
        return NoteSettings.from_document(doc)

    def all(self, chat_id: int) -> list[ChatNote]:
        return [ChatNote.from_document(doc) for doc in self._notes.find({"chat_id": chat_id})]

    def get(self, chat_id: int, name: str) -> ChatNote | None:
        doc = self._notes.find_one({"chat_id": chat_id, "note_name": name})
        return ChatNote.from_document(doc) if doc is not None else None

    def names(self, chat_id: int, admin: bool) -> list[str]:
        """Names of the chat's notes; admin-only notes are listed only for admins."""
        return [note.name for note in self.all(chat_id) if admin or not note.admin_only]

    def exists(self, chat_id: int, name: str) -> bool:
        return name in self.names(chat_id, True)

    def add(self, note: ChatNote) -> bool:
        """Save a new note; an existing name is left untouched and False returned."""
        if self.exists(note.chat_id, note.name):
            return False
        self._notes.update_one(
            {"chat_id": note.chat_id, "note_name": note.name}, note.to_document()
        )
        return True

    def remove(self, chat_id: int, name: str) -> bool:
        """Delete a note; returns False if it did not exist."""
        if not self.exists(chat_id, name):
            return False
        self._notes.delete_one({"chat_id": chat_id, "note_name": name})
        return True

    def remove_all(self, chat_id: int) -> None:
        self._notes.delete_many({"chat_id": chat_id})

    def set_private_notes(self, chat_id: int, value: bool) -> None:
        settings = self.settings(chat_id)
        settings.private_notes = value
        self._save_settings(settings)

    def stats(self) -> tuple[int, int]:
        """Return (total notes, chats with at least one note)."""
        docs = self._notes.find({})
        return len(docs), len({doc.get("chat_id", 0) for doc in docs})