from alita.db.blacklists import BlacklistSettings, BlacklistStore
from alita.db.storage import open_memory_database


def make_store():
    return BlacklistStore(open_memory_database())


def test_default_settings():
    store = make_store()
    settings = store.get(10)
    assert settings == BlacklistSettings(
        chat_id=10, action="none", triggers=[], reason="Automated Blacklisted word %s"
    )


def test_add_lowercases_triggers():
    store = make_store()
    store.add(10, "Spam")
    store.add(10, "EGGS")
    assert store.get(10).triggers == ["spam", "eggs"]


def test_remove_is_case_insensitive():
    store = make_store()
    store.add(10, "spam")
    store.add(10, "eggs")
    store.remove(10, "SPAM")
    assert store.get(10).triggers == ["eggs"]


def test_remove_missing_trigger_keeps_list():
    store = make_store()
    store.add(10, "spam")
    store.remove(10, "ham")
    assert store.get(10).triggers == ["spam"]


def test_remove_all_clears_triggers():
    store = make_store()
    store.add(10, "spam")
    store.remove_all(10)
    assert store.get(10).triggers == []


def test_set_action_lowercases():
    store = make_store()
    store.set_action(10, "BAN")
    assert store.get(10).action == "ban"


def test_stats_counts_triggers_and_chats():
    store = make_store()
    words = ["alpha", "beta", "gamma"]
    for word in words:
        store.add(1, word)
    store.get(2)
    total, chats = store.stats()
    assert total == len(words)
    assert chats == 1