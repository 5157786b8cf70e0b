"""Runtime configuration read from environment variables."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Mapping

from dotenv import load_dotenv

BOT_VERSION = "2.1.3"
DEFAULT_API_SERVER = "https://api.telegram.org"
DEFAULT_DB_NAME = "Alita_Robot"
DEFAULT_REDIS_ADDRESS = "localhost:6379"
DEFAULT_LANG_CODES = ("en",)
DEFAULT_ALLOWED_UPDATES = (
    "message",
    "edited_message",
    "channel_post",
    "edited_channel_post",
    "inline_query",
    "chosen_inline_result",
    "callback_query",
    "shipping_query",
    "pre_checkout_query",
    "poll",
    "poll_answer",
    "my_chat_member",
    "chat_member",
    "chat_join_request",
)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+\Z")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_bool(value: str) -> bool:
    """Return True only for the exact strings "yes" and "true"."""
    return value in ("yes", "true")


def parse_int(value: str) -> int:
    """Parse a base-10 integer; malformed input gives 0, overflow is clamped."""
    if not _INT_PATTERN.match(value):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(value)))


def parse_list(value: str) -> list[str]:
    """Split a comma separated string and strip whitespace from each item."""
    return [part.strip() for part in value.split(",")]


def _list_or_default(value: str, default: tuple[str, ...]) -> list[str]:
    items = parse_list(value)
    if items == [""]:
        return list(default)
    return items


@dataclass(frozen=True)
class Config:
    """Settings the bot runs with."""

    bot_token: str = ""
    database_uri: str = ""
    main_db_name: str = DEFAULT_DB_NAME
    api_server: str = DEFAULT_API_SERVER
    owner_id: int = 0
    message_dump: int = 0
    debug: bool = False
    drop_pending_updates: bool = False
    allowed_updates: list[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_UPDATES))
    valid_lang_codes: list[str] = field(default_factory=lambda: list(DEFAULT_LANG_CODES))
    redis_address: str = DEFAULT_REDIS_ADDRESS
    redis_password: str = ""
    redis_db: int = 0
    bot_version: str = BOT_VERSION
    working_mode: str = "worker"


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Build a Config from a mapping, or from the process environment and .env file."""
    if environ is None:
        load_dotenv()
        environ = os.environ

    def get(name: str) -> str:
        return environ.get(name, "")

    return Config(
        bot_token=get("BOT_TOKEN"),
        database_uri=get("DB_URI"),
        main_db_name=get("DB_NAME") or DEFAULT_DB_NAME,
        api_server=get("API_SERVER") or DEFAULT_API_SERVER,
        owner_id=parse_int(get("OWNER_ID")),
        message_dump=parse_int(get("MESSAGE_DUMP")),
        debug=parse_bool(get("DEBUG")),
        drop_pending_updates=parse_bool(get("DROP_PENDING_UPDATES")),
        allowed_updates=_list_or_default(get("ALLOWED_UPDATES"), DEFAULT_ALLOWED_UPDATES),
        valid_lang_codes=_list_or_default(get("ENABLED_LOCALES"), DEFAULT_LANG_CODES),
        redis_address=get("REDIS_ADDRESS") or DEFAULT_REDIS_ADDRESS,
        redis_password=get("REDIS_PASSWORD"),
        redis_db=parse_int(get("REDIS_DB")),
    )