"""Settings storage, configuration, translations and moderation helpers for a group-management chat bot."""

__version__ = "2.1.3"