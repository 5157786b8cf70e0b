import pytest

from alita.config import (
    BOT_VERSION,
    DEFAULT_ALLOWED_UPDATES,
    Config,
    load_config,
    parse_bool,
    parse_int,
    parse_list,
)


@pytest.mark.parametrize(
    "value, expected",
    [("yes", True), ("true", True), ("True", False), ("1", False), ("", False)],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_parse_int_valid():
    assert parse_int("42") == 42
    assert parse_int("-17") == -17


@pytest.mark.parametrize("value", ["", "abc", " 5", "5 ", "1_000", "3.5"])
def test_parse_int_invalid_gives_zero(value):
    assert parse_int(value) == 0


def test_parse_int_clamps_overflow():
    assert parse_int("9" * 30) == 2**63 - 1
    assert parse_int("-" + "9" * 30) == -(2**63)


def test_parse_list_strips_items():
    assert parse_list(" message , poll,chat_member ") == ["message", "poll", "chat_member"]


def test_parse_list_empty_string():
    assert parse_list("") == [""]


def test_load_config_defaults():
    config = load_config({})
    assert config.api_server == "https://api.telegram.org"
    assert config.main_db_name == "Alita_Robot"
    assert config.redis_address == "localhost:6379"
    assert config.redis_password == ""
    assert config.redis_db == 0
    assert config.valid_lang_codes == ["en"]
    assert config.allowed_updates == list(DEFAULT_ALLOWED_UPDATES)
    assert config.bot_version == BOT_VERSION
    assert config.working_mode == "worker"
    assert config.debug is False


def test_load_config_reads_values():
    config = load_config(
        {
            "BOT_TOKEN": "token",
            "DB_URI": "mongodb://localhost",
            "DB_NAME": "mydb",
            "OWNER_ID": "1001",
            "MESSAGE_DUMP": "-1002",
            "DEBUG": "yes",
            "DROP_PENDING_UPDATES": "true",
            "ALLOWED_UPDATES": "message, callback_query",
            "ENABLED_LOCALES": "en, es",
            "API_SERVER": "http://localhost:8081",
            "REDIS_ADDRESS": "redis:6379",
            "REDIS_DB": "2",
        }
    )
    assert config.bot_token == "token"
    assert config.database_uri == "mongodb://localhost"
    assert config.main_db_name == "mydb"
    assert config.owner_id == 1001
    assert config.message_dump == -1002
    assert config.debug is True
    assert config.drop_pending_updates is True
    assert config.allowed_updates == ["message", "callback_query"]
    assert config.valid_lang_codes == ["en", "es"]
    assert config.api_server == "http://localhost:8081"
    assert config.redis_address == "redis:6379"
    assert config.redis_db == 2


def test_config_is_frozen():
    config = Config()
    with pytest.raises(AttributeError):
        config.debug = True
    assert config.debug is False