"""Preferred languages of users and chats."""

from __future__ import annotations

import logging

from alita.db import chats, users
from alita.db.chats import ChatStore
from alita.db.storage import Database
from alita.db.users import UserStore

DEFAULT_LANGUAGE = "en"

log = logging.getLogger(__name__)


class LanguageStore:
    """Reads and changes the language used for users and chats."""

    def __init__(self, database: Database) -> None:
        self._chats = ChatStore(database)
        self._users = UserStore(database)
        self._chat_coll = database.collection(chats.COLLECTION)
        self._user_coll = database.collection(users.COLLECTION)

    def chat_language(self, chat_id: int) -> str:
        return self._chats.get(chat_id).language or DEFAULT_LANGUAGE

    def user_language(self, user_id: int) -> str:
        user = self._users.get(user_id)
        if user is None or not user.language:
            return DEFAULT_LANGUAGE
        return user.language

    def language_for(self, chat_id: int, chat_type: str, user_id: int) -> str:
        """Private chats use the sender's language; other chats use the chat's."""
        if chat_type == "private":
            return self.user_language(user_id)
        return self.chat_language(chat_id)

    def set_user_language(self, user_id: int, lang: str) -> None:
        """Change a known user's language; unknown users are left alone."""
        user = self._users.get(user_id)
        if user is None or user.language == lang:
            return
        user.language = lang
        self._user_coll.update_one({"_id": user_id}, user.to_document())
        log.info("changed language of user %d", user_id)

    def set_chat_language(self, chat_id: int, lang: str) -> None:
        chat = self._chats.get(chat_id)
        if chat.language == lang:
            return
        chat.language = lang
        self._chat_coll.update_one({"_id": chat_id}, chat.to_document())
        log.info("changed language of chat %d", chat_id)