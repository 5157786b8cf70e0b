"""Members of the bot's team: developers and sudo users."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from alita.db.storage import Database

COLLECTION = "devs"

log = logging.getLogger(__name__)


@dataclass
class TeamMember:
    """A user's standing in the bot's team."""

    user_id: int
    dev: bool = False
    sudo: bool = False

    def to_document(self) -> dict[str, Any]:
        return {"dev": self.dev, "sudo": self.sudo}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "TeamMember":
        return cls(
            user_id=doc["_id"],
            dev=bool(doc.get("dev", False)),
            sudo=bool(doc.get("sudo", False)),
        )

    @property
    def role(self) -> str:
        """"dev", "sudo", or an empty string for neither."""
        if self.dev:
            return "dev"
        if self.sudo:
            return "sudo"
        return ""


class TeamStore:
    """Reads and writes team membership."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def _save(self, member: TeamMember) -> None:
        self._coll.update_one({"_id": member.user_id}, member.to_document())

    def get(self, user_id: int) -> TeamMember:
        """Return the member, or a record with no rights if the user is not in the team."""
        doc = self._coll.find_one({"_id": user_id})
        return TeamMember.from_document(doc) if doc is not None else TeamMember(user_id=user_id)

    def members(self) -> dict[int, str]:
        """Map every stored user id to its role."""
        return {
            member.user_id: member.role
            for member in (TeamMember.from_document(doc) for doc in self._coll.find({}))
        }

    def add_dev(self, user_id: int) -> None:
        """Make the user a developer; any sudo standing is replaced."""
        self._save(TeamMember(user_id=user_id, dev=True, sudo=False))
        log.info("added dev %d", user_id)

    def remove_dev(self, user_id: int) -> None:
        self._coll.delete_one({"_id": user_id})

    def add_sudo(self, user_id: int) -> None:
        """Make the user a sudo user; any developer standing is replaced."""
        self._save(TeamMember(user_id=user_id, dev=False, sudo=True))
        log.info("added sudo %d", user_id)

    def remove_sudo(self, user_id: int) -> None:
        self._coll.delete_one({"_id": user_id})