"""Per-chat welcome and goodbye messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from alita.db.storage import Button, Database, MsgType

COLLECTION = "greetings"
DEFAULT_WELCOME = "Hey {first}, how are you?"
DEFAULT_GOODBYE = "Sad to see you leaving {first}"


def _message_document(
    clean_old: bool,
    last_msg_id: int,
    enabled: bool,
    text: str,
    file_id: str,
    msg_type: int,
    buttons: list[Button],
) -> dict[str, Any]:
    doc: dict[str, Any] = {"clean_old": clean_old}
    if last_msg_id:
        doc["last_msg_id"] = last_msg_id
    doc["enabled"] = enabled
    if text:
        doc["text"] = text
    if file_id:
        doc["file_id"] = file_id
    if msg_type:
        doc["type"] = int(msg_type)
    if buttons:
        doc["btns"] = [button.to_document() for button in buttons]
    return doc


def _message_fields(doc: dict[str, Any] | None) -> dict[str, Any]:
    doc = doc or {}
    return {
        "clean_old": bool(doc.get("clean_old", False)),
        "last_msg_id": int(doc.get("last_msg_id", 0)),
        "enabled": bool(doc.get("enabled", False)),
        "text": doc.get("text", ""),
        "file_id": doc.get("file_id", ""),
        "msg_type": int(doc.get("type", 0)),
        "buttons": [Button.from_document(b) for b in doc.get("btns") or []],
    }


@dataclass
class WelcomeSettings:
    """The message sent when someone joins."""

    clean_old: bool = False
    last_msg_id: int = 0
    enabled: bool = True
    text: str = DEFAULT_WELCOME
    file_id: str = ""
    msg_type: int = MsgType.TEXT
    buttons: list[Button] = field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        return _message_document(
            self.clean_old, self.last_msg_id, self.enabled, self.text,
            self.file_id, self.msg_type, self.buttons,
        )

    @classmethod
    def from_document(cls, doc: dict[str, Any] | None) -> "WelcomeSettings":
        return cls(**_message_fields(doc))


@dataclass
class GoodbyeSettings:
    """The message sent when someone leaves."""

    clean_old: bool = False
    last_msg_id: int = 0
    enabled: bool = False
    text: str = DEFAULT_GOODBYE
    file_id: str = ""
    msg_type: int = MsgType.TEXT
    buttons: list[Button] = field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        return _message_document(
            self.clean_old, self.last_msg_id, self.enabled, self.text,
            self.file_id, self.msg_type, self.buttons,
        )

    @classmethod
    def from_document(cls, doc: dict[str, Any] | None) -> "GoodbyeSettings":
        return cls(**_message_fields(doc))


@dataclass
class GreetingSettings:
    """All greeting behaviour of one chat."""

    chat_id: int
    clean_service: bool = False
    welcome: WelcomeSettings = field(default_factory=WelcomeSettings)
    goodbye: GoodbyeSettings = field(default_factory=GoodbyeSettings)
    auto_approve: bool = False

    def to_document(self) -> dict[str, Any]:
        return {
            "clean_service_settings": self.clean_service,
            "welcome_settings": self.welcome.to_document(),
            "goodbye_settings": self.goodbye.to_document(),
            "auto_approve": self.auto_approve,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "GreetingSettings":
        return cls(
            chat_id=doc["_id"],
            clean_service=bool(doc.get("clean_service_settings", False)),
            welcome=WelcomeSettings.from_document(doc.get("welcome_settings")),
            goodbye=GoodbyeSettings.from_document(doc.get("goodbye_settings")),
            auto_approve=bool(doc.get("auto_approve", False)),
        )


class GreetingStore:
    """Reads and writes greeting settings, creating defaults on first access."""

    def __init__(self, database: Database) -> None:
        self._coll = database.collection(COLLECTION)

    def _save(self, settings: GreetingSettings) -> None:
        self._coll.update_one({"_id": settings.chat_id}, settings.to_document())

    def get(self, chat_id: int) -> GreetingSettings:
        doc = self._coll.find_one({"_id": chat_id})
        if doc is None:
            settings = GreetingSettings(chat_id=chat_id)
            self._save(settings)
            return settings
        return GreetingSettings.from_document(doc)

    def welcome_buttons(self, chat_id: int) -> list[Button]:
        return self.get(chat_id).welcome.buttons

    def goodbye_buttons(self, chat_id: int) -> list[Button]:
        return self.get(chat_id).goodbye.buttons

    def set_welcome(
        self, chat_id: int, text: str, file_id: str, buttons: Iterable[Button], msg_type: int
    ) -> None:
        settings = self.get(chat_id)
        settings.welcome.text = text
        settings.welcome.buttons = list(buttons)
        settings.welcome.msg_type = msg_type
        settings.welcome.file_id = file_id
        self._save(settings)

    def set_welcome_enabled(self, chat_id: int, value: bool) -> None:
        settings = self.get(chat_id)
        settings.welcome.enabled = value
        self._save(settings)

    def set_goodbye(
        self, chat_id: int, text: str, file_id: str, buttons: Iterable[Button], msg_type: int
    ) -> None:
        settings = self.get(chat_id)
        settings.goodbye.text = text
        settings.goodbye.buttons = list(buttons)
        settings.goodbye.msg_type = msg_type
        settings.goodbye.file_id = file_id
        self._save(settings)

    def set_goodbye_enabled(self, chat_id: int, value: bool) -> None:
        settings = self.get(chat_id)
        settings.goodbye.enabled = value
        self._save(settings)

    def set_clean_service(self, chat_id: int, value: bool) -> None:
        settings = self.get(chat_id)
        settings.clean_service = value
        self._save(settings)

    def set_auto_approve(self, chat_id: int, value: bool) -> None:
        settings = self.get(chat_id)
        settings.auto_approve = value
        self._save(settings)

    def set_clean_welcome(self, chat_id: int, value: bool) -> None:
        settings = self.get(chat_id)
        settings.welcome.clean_old = value
        self._save(settings)

    def set_welcome_message_id(self, chat_id: int, message_id: int) -> None:
        settings = self.get(chat_id)
        settings.welcome.last_msg_id = message_id
        self._save(settings)

    def set_clean_goodbye(self, chat_id: int, value: bool) -> None:
        settings = self.get(chat_id)
        settings.goodbye.clean_old = value
        self._save(settings)

    def set_goodbye_message_id(self, chat_id: int, message_id: int) -> None:
        settings = self.get(chat_id)
        settings.goodbye.last_msg_id = message_id
        self._save(settings)

    def stats(self) -> tuple[int, int, int, int, int]:
        """Return counts of chats with welcome, goodbye, clean service,
        clean welcome and clean goodbye enabled."""
        welcome = goodbye = clean_service = clean_welcome = clean_goodbye = 0
        for doc in self._coll.find({}):
            settings = GreetingSettings.from_document(doc)
            welcome += settings.welcome.enabled
            goodbye += settings.goodbye.enabled
            clean_service += settings.clean_service
            clean_welcome += settings.welcome.clean_old
            clean_goodbye += settings.goodbye.clean_old
        return welcome, goodbye, clean_service, clean_welcome, clean_goodbye