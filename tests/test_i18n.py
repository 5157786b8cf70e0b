import pytest

from alita.i18n import I18n, LocaleStore

EN = """
strings:
  Admin:
    adminlist: "Admins in %s:"
    promote:
      is_owner: "Cannot promote the owner."
  Help:
    modules:
      - Admin
      - Bans
    words: "one two  three"
  limit: 3
"""

ES = """
strings:
  Admin:
    adminlist: "Administradores en %s:"
"""


@pytest.fixture
def store():
    locales = LocaleStore()
    locales.add("en", EN)
    locales.add("es", ES.encode())
    return locales


def test_get_string_nested(store):
    assert store.translator("en").get_string("strings.Admin.adminlist") == "Admins in %s:"


def test_get_string_is_case_insensitive(store):
    tr = store.translator("en")
    assert tr.get_string("STRINGS.admin.PROMOTE.is_owner") == "Cannot promote the owner."


def test_translated_string_wins(store):
    assert store.translator("es").get_string("strings.Admin.adminlist") == "Administradores en %s:"


def test_missing_key_falls_back_to_default(store):
    tr = store.translator("es")
    assert tr.get_string("strings.Admin.promote.is_owner") == "Cannot promote the owner."


def test_unknown_language_falls_back(store):
    assert store.translator("xx").get_string("strings.Admin.adminlist") == "Admins in %s:"


def test_missing_everywhere_is_empty(store):
    assert store.translator("es").get_string("strings.nothing.here") == ""


def test_scalar_kept_as_written(store):
    assert store.translator("en").get_string("strings.limit") == "3"


def test_mapping_value_is_not_a_string(store):
    assert store.translator("en").get_string("strings.Admin") == ""


def test_get_string_slice_from_list(store):
    assert store.translator("es").get_string_slice("strings.Help.modules") == ["Admin", "Bans"]


def test_get_string_slice_from_string(store):
    assert store.translator("en").get_string_slice("strings.Help.words") == ["one", "two", "three"]


def test_get_string_slice_missing(store):
    assert store.translator("en").get_string_slice("strings.none") == []


def test_load_directory(tmp_path):
    (tmp_path / "en.yml").write_text("greeting: hello\n")
    (tmp_path / "es.yaml").write_text("greeting: hola\n")
    (tmp_path / "sub").mkdir()
    locales = LocaleStore()
    assert locales.load_directory(tmp_path) == ["en", "es"]
    assert locales.translator("es").get_string("greeting") == "hola"
    assert I18n(locales).get_string("greeting") == "hello"


def test_empty_content(store):
    store.add("fr", "")
    assert store.translator("fr").get_string("strings.Admin.adminlist") == "Admins in %s:"