import pytest

from alita.db.storage import open_memory_database
from alita.db.team import TeamMember, TeamStore


@pytest.fixture
def store():
    return TeamStore(open_memory_database())


def test_unknown_user_has_no_rights(store):
    member = store.get(42)
    assert member == TeamMember(user_id=42, dev=False, sudo=False)


def test_get_does_not_create_record(store):
    store.get(42)
    assert store.members() == {}


def test_add_dev(store):
    store.add_dev(7)
    member = store.get(7)
    assert member.dev is True
    assert member.sudo is False
    assert store.members() == {7: "dev"}


def test_add_sudo(store):
    store.add_sudo(8)
    member = store.get(8)
    assert member.sudo is True
    assert member.dev is False
    assert store.members() == {8: "sudo"}


def test_sudo_replaces_dev(store):
    store.add_dev(7)
    store.add_sudo(7)
    assert store.get(7) == TeamMember(user_id=7, dev=False, sudo=True)


def test_members_lists_roles(store):
    store.add_dev(1)
    store.add_sudo(2)
    assert store.members() == {1: "dev", 2: "sudo"}


def test_remove_dev_and_sudo(store):
    store.add_dev(1)
    store.add_sudo(2)
    store.remove_dev(1)
    store.remove_sudo(2)
    assert store.members() == {}
    assert store.get(1).dev is False


def test_role_of_plain_member():
    assert TeamMember(user_id=3).role == ""