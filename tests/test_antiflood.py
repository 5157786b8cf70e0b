from alita.db.antiflood import COLLECTION, DEFAULT_MODE, FloodSettings, FloodSettingsStore
from alita.db.storage import open_memory_database


def make_store():
    database = open_memory_database()
    return database, FloodSettingsStore(database)


def test_default_settings():
    database, store = make_store()
    settings = store.get(5)
    assert settings == FloodSettings(chat_id=5, limit=0, mode="mute", delete_messages=False)
    assert database.collection(COLLECTION).count({"_id": 5}) == 1


def test_set_limit_keeps_mode():
    _, store = make_store()
    store.set_mode(5, "ban")
    store.set_limit(5, 10)
    settings = store.get(5)
    assert settings.limit == 10
    assert settings.mode == "ban"


def test_set_limit_restores_missing_mode():
    database, store = make_store()
    database.collection(COLLECTION).update_one({"_id": 9}, {"limit": 0})
    store.set_limit(9, 4)
    settings = store.get(9)
    assert settings.mode == DEFAULT_MODE
    assert settings.limit == 4


def test_set_delete_messages_round_trip():
    _, store = make_store()
    store.set_delete_messages(3, True)
    assert store.get(3).delete_messages is True
    store.set_delete_messages(3, False)
    assert store.get(3).delete_messages is False


def test_enabled_count_tracks_limits():
    _, store = make_store()
    store.get(2)
    store.set_limit(1, 5)
    assert store.enabled_count() == 1
    store.set_limit(1, 0)
    assert store.enabled_count() == 0


def test_document_omits_empty_mode():
    doc = FloodSettings(chat_id=1, limit=3, mode="").to_document()
    assert "mode" not in doc
    assert FloodSettings.from_document({"_id": 1, **doc}).mode == ""