"""Keyword filters that trigger automatic replies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from alita.db.storage import Button, Database, MsgType

COLLECTION = "filters"


@dataclass
class ChatFilter:
    """A saved reply triggered by a keyword in one chat."""

    chat_id: int
    keyword: str
    reply: str = ""
    msg_type: int = MsgType.TEXT
    file_id: str = ""
    no_notif: bool = False
    buttons: list[Button] = field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {}
        if self.chat_id:
            doc["chat_id"] = self.chat_id
        if self.keyword:
            doc["keyword"] = self.keyword
        if self.reply:
            doc["filter_reply"] = self.reply
        if self.msg_type:
            doc["msgtype"] = int(self.msg_type)
        if self.file_id:
            doc["fileid"] = self.file_id
        if self.no_notif:
            doc["nonotif"] = True
        if self.buttons:
            doc["filter_buttons"] = [button.to_document() for button in self.buttons]
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "ChatFilter":
        return cls(
            chat_id=int(doc.get("chat_id", 0)),
            keyword=doc.get("keyword", ""),
            reply=doc.get("filter_reply", ""),
            msg_type=int(doc.get("msgtype", 0)),
            file_id=doc.get("fileid", ""),
            no_notif=bool(doc.get("nonotif", False)),
            buttons=[Button.from_document(b) for b in doc.get("filter_buttons") or []],
        )


class FilterStore:
    """Reads and writes chat filters."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def get(self, chat_id: int, keyword: str) -> ChatFilter | None:
        doc = self._coll.find_one({"chat_id": chat_id, "keyword": keyword})
        return ChatFilter.from_document(doc) if doc is not None else None

    def all(self, chat_id: int) -> list[ChatFilter]:
        return [ChatFilter.from_document(doc) for doc in self._coll.find({"chat_id": chat_id})]

    def keywords(self, chat_id: int) -> list[str]:
        return [f.keyword for f in self.all(chat_id)]

    def exists(self, chat_id: int, keyword: str) -> bool:
        """Check for a filter; the keyword is looked up in lower case."""
        return keyword.lower() in self.keywords(chat_id)

    def add(
        self,
        chat_id: int,
        keyword: str,
        reply_text: str,
        file_id: str,
        buttons: Iterable[Button],
        msg_type: int,
    ) -> bool:
        """Save a new filter; an existing keyword is left untouched and False returned."""
        if keyword in self.keywords(chat_id):
            return False
        new_filter = ChatFilter(
            chat_id=chat_id,
            keyword=keyword,
            reply=reply_text,
            msg_type=msg_type,
            file_id=file_id,
            buttons=list(buttons),
        )
        self._coll.update_one({"chat_id": chat_id, "keyword": keyword}, new_filter.to_document())
        return True

    def remove(self, chat_id: int, keyword: str) -> bool:
        """Delete a filter; returns False if it did not exist."""
        if keyword not in self.keywords(chat_id):
            return False
        self._coll.delete_one({"chat_id": chat_id, "keyword": keyword})
        return True

    def remove_all(self, chat_id: int) -> None:
        self._coll.delete_many({"chat_id": chat_id})

    def count(self, chat_id: int) -> int:
        return self._coll.count({"chat_id": chat_id})

    def stats(self) -> tuple[int, int]:
        """Return (total filters, chats with at least one filter)."""
        docs = self._coll.find({})
        return len(docs), len({doc.get("chat_id", 0) for doc in docs})