"""A summary of everything stored, for the bot's team."""

from __future__ import annotations

import platform
import threading

from alita.db.antiflood import FloodSettingsStore
from alita.db.blacklists import BlacklistStore
from alita.db.channels import ChannelStore
from alita.db.chats import ChatStore
from alita.db.connections import ConnectionStore
from alita.db.disable import DisableStore
from alita.db.filters import FilterStore
from alita.db.greetings import GreetingStore
from alita.db.notes import NoteStore
from alita.db.pins import PinStore
from alita.db.reports import ReportStore
from alita.db.rules import RulesStore
from alita.db.storage import Database
from alita.db.users import UserStore


def _comma(value: int) -> str:
    return f"{value:,}"


def load_all_stats(database: Database) -> str:
    """Collect counts from every store and render them as an HTML message."""
    total_users = UserStore(database).count()
    active_chats, inactive_chats = ChatStore(database).stats()
    anti_channel_pins, clean_linked = PinStore(database).stats()
    user_reports, chat_reports = ReportStore(database).stats()
    antiflood = FloodSettingsStore(database).enabled_count()
    set_rules, private_rules = RulesStore(database).stats()
    blacklist_triggers, blacklist_chats = BlacklistStore(database).stats()
    connected_users, connected_chats = ConnectionStore(database).stats()
    disabled_cmds, disable_chats = DisableStore(database).stats()
    filters_num, filters_chats = FilterStore(database).stats()
    (
        welcome_enabled,
        goodbye_enabled,
        clean_service,
        clean_welcome,
        clean_goodbye,
    ) = GreetingStore(database).stats()
    notes_num, notes_chats = NoteStore(database).stats()
    channels = ChannelStore(database).count()

    lines = [
        "<u>Alita's Stats:</u>",
        "",
        f"Python Version: {platform.python_version()}",
        f"Threads: {_comma(threading.active_count())}",
        f"<b>Antiflood:</b> enabled in {_comma(antiflood)} chats",
        f"<b>Users:</b> {_comma(total_users)} users found in {_comma(active_chats)} active Chats "
        f"({_comma(inactive_chats)} Inactive, {_comma(active_chats + inactive_chats)} Total)",
        "<b>Pins:</b>",
        f"    <b>CleanLinked Enabled:</b> {_comma(clean_linked)}",
        f"    <b>AntiChannelPin Enabled:</b> {_comma(anti_channel_pins)}",
        f"<b>Reports:</b> {_comma(user_reports)} users enabled reports in "
        f"{_comma(chat_reports)} Chats",
        "<b>Rules:</b>",
        f"    <b>Set:</b> {_comma(set_rules)}",
        f"    <b>Private:</b> {_comma(private_rules)}",
        f"<b>Blacklists:</b> {_comma(blacklist_triggers)} triggers in "
        f"{_comma(blacklist_chats)} chats",
        "<b>Connections:</b>",
        f"    {_comma(connected_users)} users connected to chats",
        f"    {_comma(connected_chats)} chats allow user connections",
        f"<b>Disabling:</b> {_comma(disabled_cmds)} commands disabled in "
        f"{_comma(disable_chats)} chats",
        f"<b>Filters:</b> {_comma(filters_num)} filters saved in {_comma(filters_chats)} chats",
        "<b>Greetings:</b>",
        f"    <b>Welcome Enabled:</b> {_comma(welcome_enabled)}",
        f"    <b>Goodbye Enabled:</b> {_comma(goodbye_enabled)}",
        f"    <b>CleanService:</b> {_comma(clean_service)}",
        f"    <b>CleanWelcome:</b> {_comma(clean_welcome)}",
        f"    <b>CleanGoodbye:</b> {_comma(clean_goodbye)}",
        f"<b>Notes:</b> {_comma(notes_num)} notes saved in {_comma(notes_chats)} chats",
        f"<b>Channels Stored</b>: {_comma(channels)}",
    ]
    return "\n".join(lines)