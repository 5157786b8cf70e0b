import pytest

from alita.db.storage import open_memory_database
from alita.db.warns import MAX_REASON_LENGTH, WarnSettings, WarnStore


@pytest.fixture
def store():
    return WarnStore(open_memory_database())


def test_settings_defaults(store):
    assert store.settings(1) == WarnSettings(chat_id=1, limit=3, mode="mute")


def test_set_limit_and_mode(store):
    store.set_limit(1, 5)
    store.set_mode(1, "ban")
    assert store.settings(1) == WarnSettings(chat_id=1, limit=5, mode="ban")


def test_get_without_warns(store):
    assert store.get(7, 1) == (0, [])


def test_warn_accumulates(store):
    assert store.warn(7, 1, "spam") == (1, ["spam"])
    count, reasons = store.warn(7, 1, "")
    assert count == 2
    assert reasons == ["spam", "No Reason"]
    assert store.get(7, 1) == (count, reasons)


def test_warn_truncates_long_reason(store):
    long_reason = "x" * (MAX_REASON_LENGTH + 50)
    _, reasons = store.warn(7, 1, long_reason)
    assert reasons == [long_reason[:MAX_REASON_LENGTH]]


def test_warns_are_per_chat(store):
    store.warn(7, 1, "a")
    assert store.get(7, 2) == (0, [])


def test_remove_warn(store):
    store.warn(7, 1, "a")
    store.warn(7, 1, "b")
    assert store.remove_warn(7, 1) is True
    assert store.get(7, 1) == (1, ["a"])
    assert store.remove_warn(7, 1) is True
    assert store.get(7, 1) == (0, [])
    assert store.remove_warn(7, 1) is False


def test_reset_user(store):
    store.warn(7, 1, "a")
    store.reset(7, 1)
    assert store.get(7, 1) == (0, [])


def test_chat_count_and_reset_chat(store):
    store.warn(7, 1, "a")
    store.warn(8, 1, "b")
    store.warn(7, 2, "c")
    assert store.chat_warn_count(1) == 2
    store.reset_chat(1)
    assert store.chat_warn_count(1) == 0
    assert store.get(7, 2) == (1, ["c"])