"""Per-chat locks on content types and restrictions."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from alita.db.storage import Database

COLLECTION = "locks"


@dataclass
class Permissions:
    """Content types that can be locked."""

    sticker: bool = False
    audio: bool = False
    voice: bool = False
    video: bool = False
    document: bool = False
    video_note: bool = False
    contact: bool = False
    photo: bool = False
    gif: bool = False
    url: bool = False
    bot: bool = False
    forward: bool = False
    game: bool = False
    location: bool = False
    arab_chars: bool = False
    send_as_channel: bool = False


@dataclass
class Restrictions:
    """Broad restrictions on what members may send."""

    messages: bool = False
    channel_comments: bool = False
    media: bool = False
    other: bool = False
    previews: bool = False
    all: bool = False


# lock name -> (section, attribute)
_LOCK_FIELDS: dict[str, tuple[str, str]] = {
    "sticker": ("permissions", "sticker"),
    "audio": ("permissions", "audio"),
    "voice": ("permissions", "voice"),
    "document": ("permissions", "document"),
    "video": ("permissions", "video"),
    "videonote": ("permissions", "video_note"),
    "contact": ("permissions", "contact"),
    "photo": ("permissions", "photo"),
    "gif": ("permissions", "gif"),
    "url": ("permissions", "url"),
    "bots": ("permissions", "bot"),
    "forward": ("permissions", "forward"),
    "game": ("permissions", "game"),
    "location": ("permissions", "location"),
    "rtl": ("permissions", "arab_chars"),
    "anonchannel": ("permissions", "send_as_channel"),
    "messages": ("restrictions", "messages"),
    "comments": ("restrictions", "channel_comments"),
    "media": ("restrictions", "media"),
    "other": ("restrictions", "other"),
    "previews": ("restrictions", "previews"),
    "all": ("restrictions", "all"),
}

LOCK_TYPES = tuple(_LOCK_FIELDS)


def _flags_document(obj: Any) -> dict[str, bool]:
    return {f.name: True for f in fields(obj) if getattr(obj, f.name)}


@dataclass
class Locks:
    """All locks of one chat."""

    chat_id: int
    permissions: Permissions = field(default_factory=Permissions)
    restrictions: Restrictions = field(default_factory=Restrictions)

    def as_map(self) -> dict[str, bool]:
        """Map each lock name to whether it is on."""
        return {
            name: bool(getattr(getattr(self, section), attr))
            for name, (section, attr) in _LOCK_FIELDS.items()
        }

    def to_document(self) -> dict[str, Any]:
        return {
            "permissions": _flags_document(self.permissions),
            "restrictions": _flags_document(self.restrictions),
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Locks":
        perms = doc.get("permissions") or {}
        restr = doc.get("restrictions") or {}
        return cls(
            chat_id=doc["_id"],
            permissions=Permissions(
                **{f.name: bool(perms.get(f.name, False)) for f in fields(Permissions)}
            ),
            restrictions=Restrictions(
                **{f.name: bool(restr.get(f.name, False)) for f in fields(Restrictions)}
            ),
        )


class LockStore:
    """Reads and writes chat locks, creating defaults on first access."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def _save(self, locks: Locks) -> None:
        self._coll.update_one({"_id": locks.chat_id}, locks.to_document())

    def get(self, chat_id: int) -> Locks:
        doc = self._coll.find_one({"_id": chat_id})
        if doc is None:
            locks = Locks(chat_id=chat_id)
            self._save(locks)
            return locks
        return Locks.from_document(doc)

    def update(self, chat_id: int, lock_type: str, value: bool) -> None:
        """Set one lock; an unknown lock name changes nothing."""
        locks = self.get(chat_id)
        target = _LOCK_FIELDS.get(lock_type)
        if target is not None:
            section, attr = target
            setattr(getattr(locks, section), attr, value)
        self._save(locks)

    def is_locked(self, chat_id: int, lock_type: str) -> bool:
        return self.get(chat_id).as_map().get(lock_type, False)