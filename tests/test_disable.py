import pytest

from alita.db.disable import DisabledCommands, DisableStore
from alita.db.storage import open_memory_database


@pytest.fixture
def store():
    return DisableStore(open_memory_database())


def test_default_settings(store):
    assert store.get(-1) == DisabledCommands(chat_id=-1, commands=[], should_delete=False)


def test_disable_and_check(store):
    store.disable(-1, "adminlist")
    assert store.disabled_commands(-1) == ["adminlist"]
    assert store.is_disabled(-1, "adminlist") is True
    assert store.is_disabled(-1, "flood") is False


def test_enable_removes_only_first_occurrence(store):
    store.disable(-1, "rules")
    store.disable(-1, "rules")
    store.enable(-1, "rules")
    assert store.disabled_commands(-1) == ["rules"]


def test_enable_unknown_command_leaves_list(store):
    store.disable(-1, "notes")
    store.enable(-1, "warns")
    assert store.disabled_commands(-1) == ["notes"]


def test_delete_toggle(store):
    assert store.should_delete(-2) is False
    store.set_delete(-2, True)
    assert store.should_delete(-2) is True


def test_settings_are_per_chat(store):
    store.disable(-1, "flood")
    assert store.is_disabled(-2, "flood") is False


def test_stats(store):
    commands = ["adminlist", "flood", "rules"]
    for command in commands:
        store.disable(-1, command)
    store.get(-2)
    total, chats = store.stats()
    assert total == len(commands)
    assert chats == 1