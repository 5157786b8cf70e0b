import pytest

from alita.db.filters import ChatFilter, FilterStore
from alita.db.storage import Button, MsgType, open_memory_database


@pytest.fixture
def store():
    return FilterStore(open_memory_database())


def test_add_and_get_round_trip(store):
    buttons = [Button(name="Site", url="https://example.com", same_line=True)]
    assert store.add(-1, "hello", "Hi there", "", buttons, MsgType.TEXT) is True
    assert store.get(-1, "hello") == ChatFilter(
        chat_id=-1,
        keyword="hello",
        reply="Hi there",
        msg_type=MsgType.TEXT,
        file_id="",
        buttons=buttons,
    )


def test_media_filter_keeps_file_id(store):
    store.add(-1, "cat", "", "file-abc", [], MsgType.PHOTO)
    saved = store.get(-1, "cat")
    assert saved.file_id == "file-abc"
    assert saved.msg_type == MsgType.PHOTO


def test_get_missing_returns_none(store):
    assert store.get(-1, "nothing") is None


def test_duplicate_add_is_ignored(store):
    store.add(-1, "hello", "first", "", [], MsgType.TEXT)
    assert store.add(-1, "hello", "second", "", [], MsgType.TEXT) is False
    assert store.get(-1, "hello").reply == "first"
    assert store.count(-1) == 1


def test_exists_looks_up_lower_case(store):
    store.add(-1, "hello", "x", "", [], MsgType.TEXT)
    store.add(-1, "Upper", "y", "", [], MsgType.TEXT)
    assert store.exists(-1, "HELLO") is True
    assert store.exists(-1, "Upper") is False


def test_keywords_in_insertion_order(store):
    words = ["b", "a", "c"]
    for word in words:
        store.add(-1, word, word, "", [], MsgType.TEXT)
    assert store.keywords(-1) == words
    assert [f.keyword for f in store.all(-1)] == words


def test_remove(store):
    store.add(-1, "hello", "x", "", [], MsgType.TEXT)
    assert store.remove(-1, "missing") is False
    assert store.remove(-1, "hello") is True
    assert store.keywords(-1) == []


def test_remove_all_only_affects_chat(store):
    store.add(-1, "a", "x", "", [], MsgType.TEXT)
    store.add(-1, "b", "x", "", [], MsgType.TEXT)
    store.add(-2, "a", "x", "", [], MsgType.TEXT)
    store.remove_all(-1)
    assert store.keywords(-1) == []
    assert store.keywords(-2) == ["a"]


def test_stats(store):
    store.add(-1, "a", "x", "", [], MsgType.TEXT)
    store.add(-1, "b", "x", "", [], MsgType.TEXT)
    store.add(-2, "a", "x", "", [], MsgType.TEXT)
    total, chats = store.stats()
    assert total == store.count(-1) + store.count(-2)
    assert chats == len({-1, -2})