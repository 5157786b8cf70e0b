import pytest

from alita.db.locks import LOCK_TYPES, Locks, LockStore
from alita.db.storage import open_memory_database


@pytest.fixture
def database():
    return open_memory_database()


@pytest.fixture
def store(database):
    return LockStore(database)


def test_default_all_unlocked(store):
    locks = store.get(3)
    assert locks.chat_id == 3
    assert set(locks.as_map()) == set(LOCK_TYPES)
    assert not any(locks.as_map().values())


def test_lock_names_from_source():
    names = Locks(chat_id=1).as_map()
    for name in ("sticker", "videonote", "bots", "rtl", "anonchannel", "comments", "all"):
        assert name in names


@pytest.mark.parametrize("lock_type", LOCK_TYPES)
def test_update_each_lock(store, lock_type):
    store.update(7, lock_type, True)
    assert store.is_locked(7, lock_type) is True
    others = {k: v for k, v in store.get(7).as_map().items() if k != lock_type}
    assert not any(others.values())
    store.update(7, lock_type, False)
    assert store.is_locked(7, lock_type) is False


def test_rtl_maps_to_arab_chars(store):
    store.update(1, "rtl", True)
    assert store.get(1).permissions.arab_chars is True


def test_comments_maps_to_channel_comments(store):
    store.update(1, "comments", True)
    assert store.get(1).restrictions.channel_comments is True


def test_unknown_lock_type(store):
    store.update(1, "nonsense", True)
    assert store.is_locked(1, "nonsense") is False
    assert not any(store.get(1).as_map().values())


def test_persisted_across_stores(database, store):
    store.update(2, "url", True)
    store.update(2, "media", True)
    locks = LockStore(database).get(2)
    assert locks.permissions.url is True
    assert locks.restrictions.media is True


def test_document_omits_false_flags():
    locks = Locks(chat_id=1)
    locks.permissions.gif = True
    assert locks.to_document() == {"permissions": {"gif": True}, "restrictions": {}}


def test_document_round_trip():
    locks = Locks(chat_id=9)
    locks.permissions.voice = True
    locks.restrictions.previews = True
    doc = dict(locks.to_document(), _id=9)
    assert Locks.from_document(doc) == locks