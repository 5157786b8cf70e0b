# alita

Settings storage, translations and moderation helpers for a group-management
chat bot.

The package keeps per-chat and per-user records (admin options, antiflood,
blacklists, channels, chats, connections, disabled commands, filters,
greetings, languages, locks, notes, pins, reports, rules, team members, users
and warnings) in MongoDB, or in memory for tests and small setups.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Configuration

`alita.config.load_config(environ=None)` builds a frozen `Config` dataclass.
Given a mapping, it reads from that; called with no argument, it loads a
`.env` file and reads the process environment.

| Variable | Field | Default |
| --- | --- | --- |
| `BOT_TOKEN` | `bot_token` | empty |
| `DB_URI` | `database_uri` | empty |
| `DB_NAME` | `main_db_name` | `Alita_Robot` |
| `API_SERVER` | `api_server` | `https://api.telegram.org` |
| `OWNER_ID` | `owner_id` | `0` |
| `MESSAGE_DUMP` | `message_dump` | `0` |
| `DEBUG` | `debug` | `False` |
| `DROP_PENDING_UPDATES` | `drop_pending_updates` | `False` |
| `ALLOWED_UPDATES` | `allowed_updates` | every update type |
| `ENABLED_LOCALES` | `valid_lang_codes` | `["en"]` |
| `REDIS_ADDRESS` | `redis_address` | `localhost:6379` |
| `REDIS_PASSWORD` | `redis_password` | empty |
| `REDIS_DB` | `redis_db` | `0` |

The helpers behind it are public too: `parse_bool` is true only for `"yes"`
and `"true"`, `parse_int` gives 0 for anything that is not a base-10 integer,
and `parse_list` splits on commas and strips each item.

## Storage

`alita.db.storage` provides a `Database` of named collections, created on
first use. `open_memory_database()` keeps documents in `MemoryCollection`s,
which understand plain equality queries plus `$ne` and `$in`.
`open_mongo_database(uri, name)` connects with pymongo and wraps each
collection in a `MongoCollection` with the same interface. Writes are upserts
that set the given fields.

Each store in `alita.db` takes a `Database`:

- `admin.AdminSettingsStore`, `antiflood.FloodSettingsStore`,
  `blacklists.BlacklistStore`, `disable.DisableStore`, `greetings.GreetingStore`,
  `locks.LockStore`, `pins.PinStore`, `rules.RulesStore` – per-chat settings,
  saved with defaults the first time a chat is looked up.
- `connections.ConnectionStore` – which chat a user manages from a private
  conversation, and whether a chat allows it.
- `filters.FilterStore` and `notes.NoteStore` – keyword filters and named
  notes, with `Button`s and a `MsgType`.
- `reports.ReportStore` – report switches and per-chat blocked reporters.
- `warns.WarnStore` – warnings per user and chat, plus limit and mode.
- `chats.ChatStore`, `users.UserStore`, `channels.ChannelStore` – records of
  seen chats, users and channels.
- `language.LanguageStore` – preferred language of users and chats (private
  chats use the sender's language, `en` when none is set).
- `team.TeamStore` – developers and sudo users.

```python
from alita.db.storage import open_memory_database
from alita.db.warns import WarnStore
from alita.db.stats import load_all_stats

database = open_memory_database()   # or open_mongo_database(uri, name)
warns = WarnStore(database)

count, reasons = warns.warn(user_id=42, chat_id=-100123, reason="spam")
print(count, reasons)               # 1 ['spam']

print(load_all_stats(database))     # HTML summary of all stored records
```

`alita.db.stats.load_all_stats(database)` gathers the counts from every store
and renders them, together with the Python version and thread count, as an
HTML message.

## Translations

```python
from alita.i18n import LocaleStore

locales = LocaleStore()
locales.load_directory("locales")   # en.yml, de.yaml, ...
tr = locales.translator("de")
tr.get_string("strings.Admin.adminlist")
tr.get_string_slice("some.list.key")
```

The language code is the file name without `.yml`/`.yaml`. Keys are dotted
paths and matched without regard to case. A key missing from a language falls
back to `en`; a key missing there gives `""` or `[]`.

## Moderation helpers

- `alita.antispam.AntiSpam` counts messages per chat; `spam_check(chat_id)`
  reports a chat once it goes past 18 messages a second. `check_spammed`
  takes custom `AntiSpamLevel` windows.
- `alita.flood.FloodTracker.update(chat_id, user_id, message_id, limit)`
  counts consecutive messages by one user and returns whether the chat's limit
  was passed, with the run's message ids newest first. `parse_flood_limit`
  accepts `off`/`no`/`false`/`0` or an integer from 3 to 100 and raises
  `ValueError` otherwise; `describe_flood_mode` turns `mute`, `ban` and `kick`
  into `muted`, `banned` and `kicked`.

## What this package does not do

It contains no bot: there is no command to run, no connection to a chat
service, no update dispatching and no command handlers. It provides the
storage, configuration, translations and counters such a bot would use, and
nothing that sends or deletes messages or restricts members. The Redis
settings in `Config` are read but not used by any module here.