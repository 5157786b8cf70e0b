"""Channels the bot has seen."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from alita.db.storage import Database

COLLECTION = "channels"

log = logging.getLogger(__name__)


@dataclass
class Channel:
    """A channel's id, title and username."""

    channel_id: int
    name: str = ""
    username: str = ""

    def to_document(self) -> dict[str, Any]:
        return {"channel_name": self.name, "username": self.username}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Channel":
        return cls(
            channel_id=doc["_id"],
            name=doc.get("channel_name", ""),
            username=doc.get("username", ""),
        )


class ChannelStore:
    """Reads and writes known channels."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def get(self, channel_id: int) -> Channel | None:
        doc = self._coll.find_one({"_id": channel_id})
        return Channel.from_document(doc) if doc is not None else None

    def update(self, channel_id: int, name: str, username: str) -> None:
        """Store the channel's name and username, writing only when they changed."""
        channel = self.get(channel_id)
        if channel is not None:
            if channel.name == name and channel.username == username:
                return
            channel.name = name
            channel.username = username
        else:
            channel = Channel(channel_id=channel_id, name=name, username=username)
        self._coll.update_one({"_id": channel_id}, channel.to_document())
        log.info("updated channel %s", name)

    def id_by_username(self, username: str) -> int:
        """Return the id of the channel with this username, or 0 if unknown."""
        doc = self._coll.find_one({"username": username})
        return doc["_id"] if doc is not None else 0

    def info(self, channel_id: int) -> tuple[str, str, bool]:
        """Return (username, name, found) for a channel."""
        channel = self.get(channel_id)
        if channel is None:
            return "", "", False
        return channel.username, channel.name, True

    def count(self) -> int:
        return self._coll.count({})