"""Per-chat message rate limiting."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, replace
from typing import Callable, Iterable

SPAM_LIMIT = 18
SPAM_EXPIRY_NS = 1_000_000_000


@dataclass
class AntiSpamLevel:
    """One rate window: at most ``limit`` messages per ``expiry`` nanoseconds."""

    curr_time: int
    limit: int
    expiry: int
    count: int = 0
    spammed: bool = False


class AntiSpam:
    """Tracks how many messages each chat sent within its windows."""

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._clock = clock
        self._chats: dict[int, list[AntiSpamLevel]] = {}
        self._lock = threading.Lock()

    def check_spammed(self, chat_id: int, levels: Iterable[AntiSpamLevel]) -> bool:
        """Count one message; the first message only registers the given levels."""
        with self._lock:
            current = self._chats.get(chat_id)
            if current is None:
                self._chats[chat_id] = [replace(level) for level in levels]
                return False
            spammed = False
            for level in current:
                now = self._clock()
                if level.curr_time + level.expiry <= now:
                    level.curr_time = now
                    level.count = 0
                    level.spammed = False
                level.count += 1
                if level.count + 1 > level.limit:
                    level.spammed = True
                spammed = spammed or level.spammed
            return spammed

    def spam_check(self, chat_id: int) -> bool:
        """Count one message against the default limit of 18 per second."""
        now = self._clock()
        return self.check_spammed(
            chat_id, [AntiSpamLevel(curr_time=now, limit=SPAM_LIMIT, expiry=SPAM_EXPIRY_NS)]
        )