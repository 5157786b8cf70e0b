"""Tracking of consecutive messages per chat to detect flooding."""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass, field

FLOOD_MODES = ("ban", "kick", "mute")
MIN_FLOOD_LIMIT = 3
MAX_FLOOD_LIMIT = 100

_OFF_WORDS = frozenset({"off", "no", "false", "0"})
_MODE_DESCRIPTIONS = {"mute": "muted", "ban": "banned", "kick": "kicked"}
_INT_PATTERN = re.compile(r"[+-]?[0-9]+\Z")


@dataclass
class FloodControl:
    """The run of messages the latest sender in a chat has sent in a row."""

    user_id: int = 0
    message_count: int = 0
    message_ids: list[int] = field(default_factory=list)


class FloodTracker:
    """Counts consecutive messages of one user per chat."""

    def __init__(self) -> None:
        self._chats: dict[int, FloodControl] = {}
        self._lock = threading.Lock()

    def update(
        self, chat_id: int, user_id: int, message_id: int, limit: int
    ) -> tuple[bool, FloodControl]:
        """Record a message and report whether the sender went over the limit.

        A limit of 0 means antiflood is off. The returned control holds the
        run's message ids, newest first. Once the limit is passed the chat's
        run starts over.
        """
        if limit == 0:
            return False, FloodControl()
        with self._lock:
            current = self._chats.get(chat_id, FloodControl())
            if current.user_id != user_id or current.user_id == 0:
                current = FloodControl(user_id=user_id)
            control = FloodControl(
                user_id=current.user_id,
                message_count=current.message_count + 1,
                message_ids=[message_id, *current.message_ids],
            )
            if control.message_count > limit:
                self._chats[chat_id] = FloodControl()
                return True, control
            self._chats[chat_id] = control
            return False, control

    def reset(self, chat_id: int) -> None:
        """Forget the current run in a chat."""
        with self._lock:
            self._chats.pop(chat_id, None)


def parse_flood_limit(value: str) -> int:
    """Parse a flood limit argument; 0 turns antiflood off.

    Raises ValueError if the value is not an integer or lies outside 3..100.
    """
    if value.lower() in _OFF_WORDS:
        return 0
    if not _INT_PATTERN.match(value):
        raise ValueError(f"not an integer: {value!r}")
    number = int(value)
    if not MIN_FLOOD_LIMIT <= number <= MAX_FLOOD_LIMIT:
        raise ValueError(
            f"flood limit must be between {MIN_FLOOD_LIMIT} and {MAX_FLOOD_LIMIT}"
        )
    return number


def describe_flood_mode(mode: str) -> str:
    """Past-tense word for a flood action, or an empty string for an unknown mode."""
    return _MODE_DESCRIPTIONS.get(mode, "")